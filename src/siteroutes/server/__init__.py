"""Server side: ASGI request handling, response sending, listener lifecycle."""

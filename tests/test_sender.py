"""Tests for siteroutes.server.sender response emission rules."""

from siteroutes.http.response import Response
from siteroutes.server.sender import send_response


async def _send(response: Response) -> list[dict]:
    messages: list[dict] = []

    async def send(message: dict) -> None:
        messages.append(message)

    await send_response(response, send)
    return messages


class TestSendResponse:
    async def test_200_preserves_body(self) -> None:
        messages = await _send(Response("<h1>About Me</h1>"))

        assert messages[0]["type"] == "http.response.start"
        assert messages[0]["status"] == 200
        headers = dict(messages[0]["headers"])
        assert headers[b"content-type"] == b"text/html"
        assert headers[b"content-length"] == b"17"
        assert messages[1] == {"type": "http.response.body", "body": b"<h1>About Me</h1>"}

    async def test_header_names_lowercased(self) -> None:
        messages = await _send(Response("ok").with_header("X-Custom", "Value"))
        assert (b"x-custom", b"Value") in messages[0]["headers"]

    async def test_204_drops_body(self) -> None:
        messages = await _send(Response("unexpected-body", status=204))

        headers = dict(messages[0]["headers"])
        assert headers[b"content-length"] == b"0"
        assert messages[1]["body"] == b""

    async def test_304_drops_body(self) -> None:
        messages = await _send(Response("unexpected-body", status=304))
        assert messages[1]["body"] == b""

    async def test_utf8_content_length_counts_bytes(self) -> None:
        messages = await _send(Response("é"))
        assert dict(messages[0]["headers"])[b"content-length"] == b"2"

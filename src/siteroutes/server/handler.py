"""ASGI handler for the App framework.

The only part of the framework that touches raw ASGI directly. Converts
the scope to a Request, matches it against the router, calls the
handler, and sends the Response back through ASGI send().
"""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from siteroutes._internal.asgi import Receive, Scope, Send
from siteroutes._internal.invoke import invoke
from siteroutes.errors import HTTPError, NotFound
from siteroutes.http.request import Request
from siteroutes.http.response import Response
from siteroutes.routing.router import Router
from siteroutes.server.sender import send_response

logger = logging.getLogger("siteroutes.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    fallback: Callable[..., Any] | None = None,
) -> None:
    """Process a single HTTP request through routing and the handler."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        try:
            handler = router.match(request.method, request.path).route.handler
        except NotFound:
            if fallback is None:
                raise
            handler = fallback
        response = to_response(await invoke(handler, **_handler_kwargs(handler, request)))
    except HTTPError as exc:
        response = http_error_response(exc, request)
    except Exception:
        logger.exception("500 %s %s", request.method, request.path)
        response = Response(body="Internal Server Error", status=500)

    await send_response(response, send)


def _handler_kwargs(handler: Callable[..., Any], request: Request) -> dict[str, Any]:
    """Pass the request to handlers that ask for it (by name or annotation)."""
    sig = inspect.signature(handler)
    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
    return kwargs


def to_response(result: Any) -> Response:
    """Convert a handler return value into a Response.

    ``str`` and ``bytes`` become HTML bodies; a ``Response`` passes through.
    """
    if isinstance(result, Response):
        return result
    if isinstance(result, (str, bytes)):
        return Response(body=result)
    msg = f"Handler returned {type(result).__name__}; expected str, bytes, or Response."
    raise TypeError(msg)


def http_error_response(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain response with the same status."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    resp = Response(body=exc.detail or f"Error {exc.status}", status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp

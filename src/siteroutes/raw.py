"""The low-level variant: a bare ASGI callable with no framework.

Reads the path straight off the scope, compares it against the route
table, and writes the response messages itself. No router, no handler
registration, no request object.

Run::

    siteroutes-raw
"""

from siteroutes._internal.asgi import Receive, Scope, Send, request_path
from siteroutes.dispatch import dispatch
from siteroutes.routing.table import DEFAULT_ROUTES, RouteTable
from siteroutes.server.sender import send_response


class RawApp:
    """ASGI 3.0 app that serves a ``RouteTable`` by string comparison."""

    __slots__ = ("routes",)

    def __init__(self, routes: RouteTable = DEFAULT_ROUTES) -> None:
        self.routes = routes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await _acknowledge_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        await send_response(dispatch(request_path(scope), self.routes), send)


async def _acknowledge_lifespan(receive: Receive, send: Send) -> None:
    """Complete the lifespan protocol. There is nothing to set up."""
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await send({"type": "lifespan.shutdown.complete"})
            return


app = RawApp()

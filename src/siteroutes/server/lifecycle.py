"""Listener lifecycle: bind, serve, and stop explicitly.

Binds the socket itself so bind failures surface as ``BindError`` instead
of a server-internal exit, then hands the socket to a uvicorn ``Server``
running the ASGI app. The listener is an object with ``start()`` and
``stop()``, not process-global state.
"""

import asyncio
import contextlib
import logging
import socket

import uvicorn

from siteroutes._internal.asgi import ASGIApp
from siteroutes.config import ServerConfig
from siteroutes.errors import BindError

logger = logging.getLogger("siteroutes.server")


def bind_socket(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Create a listening TCP socket bound to *host*:*port*.

    Raises ``BindError`` if the address is in use or unavailable.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError as exc:
        sock.close()
        raise BindError(host, port, exc.strerror or str(exc)) from exc
    sock.setblocking(False)
    return sock


class SiteServer:
    """A uvicorn-backed listener for one ASGI app.

    Usage::

        async with SiteServer(ServerConfig(port=0), app) as server:
            print(server.port)
    """

    __slots__ = ("_server", "_socket", "_task", "app", "config")

    def __init__(self, config: ServerConfig, app: ASGIApp) -> None:
        self.config = config
        self.app = app
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def port(self) -> int:
        """The bound port (differs from ``config.port`` when that is 0)."""
        if self._socket is None:
            msg = "Server is not started."
            raise RuntimeError(msg)
        return self._socket.getsockname()[1]

    @property
    def started(self) -> bool:
        return self._server is not None and self._server.started

    async def start(self) -> None:
        """Bind and start serving. Returns once the listener accepts connections."""
        if self._task is not None:
            msg = "Server is already started."
            raise RuntimeError(msg)

        self._socket = bind_socket(self.config.host, self.config.port, self.config.backlog)
        uv_config = uvicorn.Config(
            self.app,
            lifespan="on",
            log_config=None,
            log_level=self.config.log_level.lower(),
            access_log=False,
            backlog=self.config.backlog,
        )
        self._server = uvicorn.Server(uv_config)
        self._task = asyncio.create_task(self._server.serve(sockets=[self._socket]))

        try:
            await self._wait_started(self._server, self._task)
        except BaseException:
            await self._abort()
            raise

        logger.info("Server started at port %d", self.port)

    async def _wait_started(self, server: uvicorn.Server, task: asyncio.Task[None]) -> None:
        # uvicorn exposes no startup event, only the ``started`` flag.
        async with asyncio.timeout(self.config.startup_timeout):
            while not server.started:
                if task.done():
                    # serve() returned before starting (e.g. lifespan failure)
                    await task
                    msg = "Server exited during startup."
                    raise RuntimeError(msg)
                await asyncio.sleep(0.01)

    async def _abort(self) -> None:
        """Tear down a half-started server so ``start()`` can be called again."""
        task, server = self._task, self._server
        self._task = None
        self._server = None
        try:
            if task is not None and not task.done():
                if server is not None:
                    server.should_exit = True
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
        finally:
            self._close_socket()

    async def stop(self) -> None:
        """Stop accepting connections, finish in-flight requests, release the socket."""
        if self._server is None or self._task is None:
            return
        self._server.should_exit = True
        try:
            await self._task
        finally:
            self._task = None
            self._server = None
            self._close_socket()
        logger.debug("Server stopped")

    async def serve_forever(self) -> None:
        """Start (if needed) and block until the server exits (e.g. on SIGINT)."""
        if self._task is None:
            await self.start()
        assert self._task is not None
        try:
            await self._task
        finally:
            await self.stop()

    async def __aenter__(self) -> "SiteServer":
        await self.start()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.stop()

    def _close_socket(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None


async def start_server(config: ServerConfig, app: ASGIApp) -> SiteServer:
    """Bind *config*'s address and start serving *app*.

    Returns the running ``SiteServer``; call ``await server.stop()`` to
    tear it down.
    """
    server = SiteServer(config, app)
    await server.start()
    return server


def run_server(config: ServerConfig, app: ASGIApp) -> None:
    """Serve *app* until interrupted. Blocking; used by the CLI."""
    asyncio.run(SiteServer(config, app).serve_forever())

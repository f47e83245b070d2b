"""The siteroutes application class.

Mutable during setup (route registration). Frozen at runtime when
``__call__()`` is first invoked.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass

from siteroutes._internal.asgi import Receive, Scope, Send
from siteroutes._internal.types import Handler
from siteroutes.routing.route import ANY_METHOD, Route
from siteroutes.routing.router import Router, validate_path
from siteroutes.server.handler import handle_request


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None


class App:
    """A minimal routing framework serving static handlers.

    Usage::

        app = App()

        @app.route("/about")
        def about():
            return "<h1>About Me</h1>"

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the router even if several workers call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_fallback",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        # Compiled state (populated by _freeze)
        "_router",
    )

    def __init__(self) -> None:
        self._pending_routes: list[_PendingRoute] = []
        self._fallback: Handler | None = None
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._router: Router | None = None

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Exact URL path, e.g. ``"/about"``. No parameters.
            methods: HTTP methods. ``None`` answers every method.
            name: Optional route name for introspection.
        """
        validate_path(path)

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods, name))
            return func

        return decorator

    def fallback(self) -> Callable[[Handler], Handler]:
        """Register the handler for paths no route matches.

        Without a fallback, unmatched paths get a 404.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._fallback = func
            return func

        return decorator

    @property
    def routes(self) -> list[Route]:
        """Compiled routes (freezes the app)."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router.routes

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._router is not None

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            fallback=self._fallback,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so registration errors surface before
        the first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            methods = (
                frozenset(m.upper() for m in pending.methods) if pending.methods else ANY_METHOD
            )
            router.add(
                Route(
                    path=pending.path,
                    handler=pending.handler,
                    methods=methods,
                    name=pending.name,
                )
            )
        router.compile()
        self._router = router
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot modify the app after it has started serving requests."
            raise RuntimeError(msg)

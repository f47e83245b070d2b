"""siteroutes — three static pages served two ways.

A bare ASGI app that routes by string comparison, and a small routing
framework that registers the same pages as declarative handlers.

Basic usage::

    from siteroutes import ServerConfig, create_app, start_server

    server = await start_server(ServerConfig(port=3000), create_app())
    ...
    await server.stop()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "BindError",
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "RawApp",
    "Request",
    "Response",
    "RouteTable",
    "ServerConfig",
    "SiteRoutesError",
    "SiteServer",
    "create_app",
    "dispatch",
    "start_server",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import siteroutes`` from importing uvicorn until a server is needed.
    """
    if name == "App":
        from siteroutes.app import App

        return App

    if name == "RawApp":
        from siteroutes.raw import RawApp

        return RawApp

    if name == "create_app":
        from siteroutes.site import create_app

        return create_app

    if name == "dispatch":
        from siteroutes.dispatch import dispatch

        return dispatch

    if name == "ServerConfig":
        from siteroutes.config import ServerConfig

        return ServerConfig

    if name == "RouteTable":
        from siteroutes.routing.table import RouteTable

        return RouteTable

    if name in ("Request", "Response"):
        from siteroutes import http as _http

        return getattr(_http, name)

    if name in ("SiteServer", "start_server"):
        from siteroutes.server import lifecycle as _lifecycle

        return getattr(_lifecycle, name)

    if name in (
        "BindError",
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "SiteRoutesError",
    ):
        from siteroutes import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

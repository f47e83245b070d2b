"""Command-line entry points: one per variant, no options.

Registered in ``pyproject.toml``::

    [project.scripts]
    siteroutes-raw = "siteroutes.cli:main_raw"
    siteroutes-app = "siteroutes.cli:main_app"
"""

import argparse
import logging
import sys

from siteroutes._internal.asgi import ASGIApp
from siteroutes.config import ServerConfig
from siteroutes.errors import BindError

logger = logging.getLogger("siteroutes.server")


def configure_logging(level: str = "info") -> None:
    """Send siteroutes log records to stderr as plain lines."""
    package_logger = logging.getLogger("siteroutes")
    package_logger.setLevel(level.upper())
    if package_logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)


def serve(app: ASGIApp, *, config: ServerConfig | None = None) -> None:
    """Run *app* until interrupted; exit with status 1 if the port cannot be bound."""
    from siteroutes.server.lifecycle import run_server

    config = config or ServerConfig()
    try:
        run_server(config, app)
    except BindError as exc:
        logger.error("Could not start server: %s", exc)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        logger.info("Server stopped")


def _parse(prog: str, description: str, argv: list[str] | None) -> None:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.parse_args(argv)


def main_raw(argv: list[str] | None = None) -> None:
    """Entry point for ``siteroutes-raw``: the bare ASGI variant on port 3000."""
    _parse("siteroutes-raw", "Serve the static pages with the raw ASGI app.", argv)
    configure_logging()

    from siteroutes.raw import app

    serve(app)


def main_app(argv: list[str] | None = None) -> None:
    """Entry point for ``siteroutes-app``: the routing-framework variant on port 3000."""
    _parse("siteroutes-app", "Serve the static pages with the routing framework.", argv)
    configure_logging()

    from siteroutes.site import app

    serve(app)

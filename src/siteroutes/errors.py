"""siteroutes exception hierarchy.

Shared across Router, App, handler, and server lifecycle so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class SiteRoutesError(Exception):
    """Base for all siteroutes-specific errors."""


class ConfigurationError(SiteRoutesError):
    """Raised when app or server configuration is invalid.

    Typically raised at route registration or ``ServerConfig`` creation.
    """


class BindError(SiteRoutesError):
    """Raised when the listener cannot bind its address.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"cannot bind {host}:{port}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(SiteRoutesError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or handlers. The ASGI handler catches these
    and turns them into a plain response with the same status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )

"""Immutable HTTP request.

Frozen metadata only. The site never reads request bodies, so there is
no body access here.
"""

from __future__ import annotations

from dataclasses import dataclass

from siteroutes._internal.asgi import Scope, request_path
from siteroutes.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, built once from the ASGI scope."""

    method: str
    path: str
    headers: Headers
    query_string: str
    http_version: str
    server: tuple[str, int] | None
    client: tuple[str, int] | None

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=request_path(scope),
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b"").decode("latin-1"),
            http_version=scope.get("http_version", "1.1"),
            server=tuple(server) if server else None,
            client=tuple(client) if client else None,
        )

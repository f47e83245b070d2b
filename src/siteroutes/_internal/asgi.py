"""Raw ASGI type aliases and scope helpers.

Internal only. Handlers interact with Request, not the scope dict.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

# Raw ASGI 3.0 types
Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]


def request_path(scope: Scope) -> str:
    """Return the path exactly as the client sent it, without the query string.

    Prefers ``raw_path`` (undecoded bytes) so ``/abo%75t`` stays distinct
    from ``/about``. Falls back to the decoded ``path`` when the server
    omits ``raw_path``.
    """
    raw = scope.get("raw_path")
    if raw:
        return raw.decode("latin-1").partition("?")[0]
    return scope.get("path", "")

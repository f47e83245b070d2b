"""The static route table: exact path string -> HTML body.

Built once, never mutated. ``/`` and the default share the landing
body, so the root and any unmatched path are indistinguishable.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from siteroutes.routing.router import validate_path

LANDING_PAGE = "<h1>Landing Page</h1>"
ABOUT_PAGE = "<h1>About Me</h1>"
CONTACT_PAGE = "<h1>Contact Me</h1>"


class RouteTable(Mapping[str, str]):
    """Immutable mapping from exact path to response body, plus a default.

    Lookup is exact string equality. No prefix, wildcard, trailing-slash
    or query-string handling::

        table = RouteTable({"/about": ABOUT_PAGE}, default=LANDING_PAGE)
        table.body_for("/about")    # ABOUT_PAGE
        table.body_for("/about/")   # LANDING_PAGE

    Keys go through the same checks as ``App.route`` and a bad key
    raises ``ConfigurationError``, so both variants accept the same tables.
    """

    __slots__ = ("_default", "_entries")

    def __init__(self, entries: Mapping[str, str], *, default: str) -> None:
        entries = dict(entries)
        for path in entries:
            validate_path(path)
        object.__setattr__(self, "_entries", MappingProxyType(entries))
        object.__setattr__(self, "_default", default)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "RouteTable is immutable"
        raise AttributeError(msg)

    def __getitem__(self, path: str) -> str:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({dict(self._entries)!r}, default={self._default!r})"

    @property
    def default(self) -> str:
        """Body served when no entry matches."""
        return self._default

    def body_for(self, path: str) -> str:
        """Return the body for *path*, or the default body."""
        return self._entries.get(path, self._default)


DEFAULT_ROUTES = RouteTable(
    {
        "/": LANDING_PAGE,
        "/about": ABOUT_PAGE,
        "/contact": CONTACT_PAGE,
    },
    default=LANDING_PAGE,
)

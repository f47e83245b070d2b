"""Compiled router with exact-match path lookup.

Paths are compared as whole strings: ``/about`` does not match
``/about/`` or ``/About``. There are no path parameters.
"""

from siteroutes.errors import ConfigurationError, MethodNotAllowed, NotFound
from siteroutes.routing.route import ANY_METHOD, Route, RouteMatch


def validate_path(path: str) -> None:
    """Reject paths the router cannot serve.

    Raises ``ConfigurationError`` for paths that do not start with ``/``
    or that look like parameter patterns (``{id}``, ``<id>``).
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)
    if any(ch in path for ch in "{}<>"):
        msg = (
            f"Route path {path!r} contains a parameter pattern. "
            "Only static paths are supported."
        )
        raise ConfigurationError(msg)


class Router:
    """Compiled router keyed by exact path, then method.

    Usage::

        router = Router()
        router.add(Route("/about", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/about")
    """

    __slots__ = ("_compiled", "_table")

    def __init__(self) -> None:
        self._table: dict[str, dict[str, Route]] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        validate_path(route.path)
        by_method = self._table.setdefault(route.path, {})
        for method in route.methods:
            if method in by_method:
                label = "any method" if method == "*" else method
                msg = f"Duplicate route for {label} {route.path!r}."
                raise ConfigurationError(msg)
            by_method[method] = route

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, in registration order."""
        seen: set[int] = set()
        result: list[Route] = []
        for by_method in self._table.values():
            for route in by_method.values():
                if id(route) not in seen:
                    seen.add(id(route))
                    result.append(route)
        return result

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        by_method = self._table.get(path)
        if not by_method:
            raise NotFound(f"No route matches {method} {path!r}")

        route = by_method.get(method.upper())
        if route is None:
            route = by_method.get("*")
        if route is None:
            raise MethodNotAllowed(frozenset(by_method) - ANY_METHOD)
        return RouteMatch(route=route)

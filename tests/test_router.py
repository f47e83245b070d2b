"""Tests for siteroutes.routing.router — exact-match router."""

import pytest

from siteroutes.errors import ConfigurationError, MethodNotAllowed, NotFound
from siteroutes.routing.route import ANY_METHOD, Route
from siteroutes.routing.router import Router, validate_path


def _handler() -> str:
    return "ok"


def _route(path: str, methods: frozenset[str] | None = None) -> Route:
    return Route(path=path, handler=_handler, methods=methods or frozenset({"GET"}))


class TestValidatePath:
    def test_static_ok(self) -> None:
        validate_path("/about")
        validate_path("/")

    def test_requires_leading_slash(self) -> None:
        with pytest.raises(ConfigurationError, match="must start with"):
            validate_path("about")

    @pytest.mark.parametrize("path", ["/users/{id}", "/share/<slug>"])
    def test_rejects_parameter_patterns(self, path: str) -> None:
        with pytest.raises(ConfigurationError, match="Only static paths"):
            validate_path(path)


class TestRouterStaticRoutes:
    def test_root(self) -> None:
        r = Router()
        r.add(_route("/"))
        r.compile()

        assert r.match("GET", "/").route.path == "/"

    def test_multiple_routes(self) -> None:
        r = Router()
        r.add(_route("/about"))
        r.add(_route("/contact"))
        r.compile()

        assert r.match("GET", "/about").route.path == "/about"
        assert r.match("GET", "/contact").route.path == "/contact"

    def test_trailing_slash_not_ignored(self) -> None:
        r = Router()
        r.add(_route("/about"))
        r.compile()

        with pytest.raises(NotFound):
            r.match("GET", "/about/")

    def test_unknown_path(self) -> None:
        r = Router()
        r.add(_route("/about"))
        r.compile()

        with pytest.raises(NotFound) as exc_info:
            r.match("GET", "/xyz")
        assert exc_info.value.status == 404


class TestRouterMethods:
    def test_method_is_case_insensitive(self) -> None:
        r = Router()
        r.add(_route("/about"))
        r.compile()

        assert r.match("get", "/about").route.path == "/about"

    def test_method_not_allowed(self) -> None:
        r = Router()
        r.add(_route("/about", frozenset({"GET", "HEAD"})))
        r.compile()

        with pytest.raises(MethodNotAllowed) as exc_info:
            r.match("POST", "/about")
        assert exc_info.value.status == 405
        assert ("Allow", "GET, HEAD") in exc_info.value.headers

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE", "PATCH"])
    def test_any_method(self, method: str) -> None:
        r = Router()
        r.add(_route("/about", ANY_METHOD))
        r.compile()

        assert r.match(method, "/about").route.path == "/about"

    def test_explicit_method_wins_over_any(self) -> None:
        def post_handler() -> str:
            return "post"

        r = Router()
        r.add(_route("/about", ANY_METHOD))
        r.add(Route("/about", post_handler, frozenset({"POST"})))
        r.compile()

        assert r.match("POST", "/about").route.handler is post_handler
        assert r.match("GET", "/about").route.handler is _handler


class TestRouterLifecycle:
    def test_add_after_compile(self) -> None:
        r = Router()
        r.compile()
        with pytest.raises(RuntimeError, match="after compilation"):
            r.add(_route("/late"))

    def test_duplicate_route(self) -> None:
        r = Router()
        r.add(_route("/about"))
        with pytest.raises(ConfigurationError, match="Duplicate route"):
            r.add(_route("/about"))

    def test_routes_in_registration_order(self) -> None:
        r = Router()
        r.add(_route("/", frozenset({"GET", "POST"})))
        r.add(_route("/about"))
        assert [route.path for route in r.routes] == ["/", "/about"]

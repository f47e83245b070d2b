"""Tests for siteroutes.http.request — Request built from ASGI scope."""

import pytest

from siteroutes.http.request import Request


def _scope(**overrides: object) -> dict[str, object]:
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/about",
        "raw_path": b"/about",
        "query_string": b"",
        "headers": [(b"host", b"localhost:3000")],
        "server": ("localhost", 3000),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        request = Request.from_asgi(_scope(method="POST"))
        assert request.method == "POST"
        assert request.path == "/about"
        assert request.headers["Host"] == "localhost:3000"
        assert request.server == ("localhost", 3000)
        assert request.client == ("127.0.0.1", 54321)

    def test_missing_optional_keys(self) -> None:
        request = Request.from_asgi({"type": "http", "method": "GET", "path": "/"})
        assert request.path == "/"
        assert request.http_version == "1.1"
        assert request.server is None
        assert request.client is None
        assert len(request.headers) == 0

    def test_frozen(self) -> None:
        request = Request.from_asgi(_scope())
        with pytest.raises(AttributeError):
            request.method = "POST"  # type: ignore[misc]

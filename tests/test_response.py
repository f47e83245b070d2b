"""Tests for siteroutes.http.response — Response construction and with_header."""

from siteroutes.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html"
        assert r.headers == ()

    def test_chained_headers(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        assert r.headers == (("A", "1"), ("B", "2"))

    def test_with_header_returns_new_object(self) -> None:
        r1 = Response("hello", status=201)
        r2 = r1.with_header("X-Custom", "site")

        assert r1.headers == ()
        assert r2.headers == (("X-Custom", "site"),)
        assert r2.status == 201
        assert r2.body == "hello"

    def test_body_bytes_from_str(self) -> None:
        assert Response("<h1>é</h1>").body_bytes == "<h1>é</h1>".encode()

    def test_text_from_bytes(self) -> None:
        assert Response(b"<h1>About Me</h1>").text == "<h1>About Me</h1>"

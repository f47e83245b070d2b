"""HTTP primitives: immutable Request, Response, and Headers."""

from siteroutes.http.headers import Headers
from siteroutes.http.request import Request
from siteroutes.http.response import Response

__all__ = ["Headers", "Request", "Response"]

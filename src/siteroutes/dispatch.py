"""Static route dispatch: path in, Response out.

Pure and total: no I/O, no logging, no exceptions. Every string maps to
a 200 ``text/html`` response; unmatched paths get the table's default
body. The HTTP method plays no part in the result.
"""

from siteroutes.http.response import HTML, Response
from siteroutes.routing.table import DEFAULT_ROUTES, RouteTable


def dispatch(path: str, routes: RouteTable = DEFAULT_ROUTES) -> Response:
    """Select the response for *path* from *routes*.

    Args:
        path: Request path without the query string. Any string,
            including ``""``.
        routes: Route table to consult. Defaults to the site's pages.
    """
    return Response(body=routes.body_for(path), status=200, content_type=HTML)

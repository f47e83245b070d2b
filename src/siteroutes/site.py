"""The framework variant: the same pages registered as route handlers.

Each page is a declarative ``@app.route`` handler; a fallback serves the
table's default body so unmatched paths answer 200 like the raw variant.

Run::

    siteroutes-app
"""

from siteroutes._internal.types import Handler
from siteroutes.app import App
from siteroutes.routing.table import DEFAULT_ROUTES, RouteTable


def create_app(routes: RouteTable = DEFAULT_ROUTES) -> App:
    """Build an App serving *routes*, one handler per table entry."""
    app = App()

    for path, body in routes.items():
        app.route(path, name=path.strip("/") or "landing")(_page(body))

    @app.fallback()
    def default_page() -> str:
        return routes.default

    return app


def _page(body: str) -> Handler:
    def page() -> str:
        return body

    return page


app = create_app()

"""Project routing middleware.

Sits in front of ``StaticFiles``. Renders the index page at ``/``,
rewrites project addresses to ``/<directory><subpath>``, and passes
everything else through untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from projdash.http.request import Request
from projdash.http.response import Response
from projdash.middleware.protocol import Next
from projdash.pages.index import assemble_index, render_index
from projdash.routing.resolver import RenderIndex, Rewrite, RouteResolver

if TYPE_CHECKING:
    from kida import Environment

    from projdash.catalog.mapping import ProjectCatalog


class ProjectRoutes:
    """Middleware that resolves project routes against a catalog.

    The catalog is consulted on every request; its first use triggers the
    one-time directory scan.
    """

    __slots__ = ("_catalog", "_env", "_resolver", "_title")

    def __init__(
        self,
        catalog: ProjectCatalog,
        resolver: RouteResolver,
        env: Environment,
        *,
        title: str = "",
    ) -> None:
        self._catalog = catalog
        self._resolver = resolver
        self._env = env
        self._title = title

    async def __call__(self, request: Request, next: Next) -> Response:
        grouping = self._catalog.grouping
        decision = self._resolver.resolve(request.path, grouping)

        if isinstance(decision, RenderIndex):
            page = assemble_index(grouping, self._resolver.link, title=self._title)
            return render_index(self._env, page)

        if isinstance(decision, Rewrite):
            return await next(request.with_path(decision.path))

        return await next(request)

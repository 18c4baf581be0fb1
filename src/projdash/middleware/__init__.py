"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    ProjectRoutes -- Index page and project route rewriting
    StaticFiles -- Serve the scan root from disk
"""

from projdash.middleware.protocol import Middleware, Next
from projdash.middleware.routes import ProjectRoutes
from projdash.middleware.static import StaticFiles

__all__ = [
    "Middleware",
    "Next",
    "ProjectRoutes",
    "StaticFiles",
]

"""projdash — a browsable dashboard over a directory of project folders.

Project directories are grouped by the model named in their folder name
and served either through obfuscated ``/p/<model>-<project>/`` paths or
through model labels such as ``/GLM-4.6/``.

Basic usage::

    from projdash import Dashboard, DashboardConfig

    app = Dashboard(DashboardConfig(root="/srv/projects"))
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Dashboard",
    "DashboardConfig",
    "DashboardError",
    "HTTPError",
    "NotFound",
    "ProjectCatalog",
    "Request",
    "Response",
    "RouteResolver",
    "ScanError",
    "classify",
    "format_category",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import projdash`` fast while providing a clean top-level API.
    """
    if name == "Dashboard":
        from projdash.app import Dashboard

        return Dashboard

    if name == "DashboardConfig":
        from projdash.config import DashboardConfig

        return DashboardConfig

    if name == "ProjectCatalog":
        from projdash.catalog.mapping import ProjectCatalog

        return ProjectCatalog

    if name in ("classify", "format_category"):
        from projdash.catalog import rules as _rules

        return getattr(_rules, name)

    if name == "RouteResolver":
        from projdash.routing.resolver import RouteResolver

        return RouteResolver

    if name == "Request":
        from projdash.http.request import Request

        return Request

    if name == "Response":
        from projdash.http.response import Response

        return Response

    if name in ("ConfigurationError", "DashboardError", "HTTPError", "NotFound", "ScanError"):
        from projdash import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

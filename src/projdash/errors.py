"""projdash exception hierarchy.

Shared across the catalog, routing, middleware, and the ASGI handler so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class DashboardError(Exception):
    """Base for all projdash-specific errors."""


class ConfigurationError(DashboardError):
    """Raised when dashboard configuration is invalid.

    Typically surfaces during ``Dashboard._freeze()`` at startup.
    """


class ScanError(DashboardError):
    """The scan root could not be enumerated.

    Treated as fatal: there is no per-request recovery for an unreadable
    root, so the error propagates to whoever triggered the build.
    """

    def __init__(self, root: str, reason: str) -> None:
        super().__init__(f"cannot scan {root!r}: {reason}")
        self.root = root
        self.reason = reason


@dataclass(frozen=True, slots=True)
class HTTPError(DashboardError):
    """An error that maps directly to an HTTP status code.

    Raised by middleware or the innermost dispatch. The ASGI handler
    catches these and turns them into plain responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — nothing served the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)

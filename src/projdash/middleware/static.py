"""Static file serving middleware.

Serves the scan root at ``/``: project files, rewritten project routes,
and anything else that exists on disk. Directory listings are a toggle
and off by default. Falls through to the next handler when nothing on
disk matches.
"""

import html
import mimetypes
from pathlib import Path
from urllib.parse import quote

from projdash.http.request import Request
from projdash.http.response import Response
from projdash.middleware.protocol import Next


class StaticFiles:
    """Middleware that serves files from a directory at the root path.

    Security: resolves symlinks and verifies the final path is within
    the configured directory to prevent path traversal.

    Usage::

        app.add_middleware(StaticFiles(
            directory="/srv/projects",
            show_dir_listing=False,
        ))
    """

    __slots__ = ("_cache_control", "_directory", "_index", "_show_dir_listing")

    def __init__(
        self,
        directory: str | Path,
        *,
        index: str = "index.html",
        show_dir_listing: bool = False,
        cache_control: str = "no-cache",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._index = index
        self._show_dir_listing = show_dir_listing
        self._cache_control = cache_control

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a file, an index file, a listing, or fall through."""
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path
        relative = path.lstrip("/")

        try:
            file_path = (self._directory / relative).resolve() if relative else self._directory
        except (OSError, ValueError):
            # e.g. an embedded NUL byte; no such file can exist
            return await next(request)
        if not file_path.is_relative_to(self._directory):
            return Response(body="Forbidden", status=403)

        if file_path.is_dir():
            index_path = file_path / self._index
            has_index = index_path.is_file()
            if not (has_index or self._show_dir_listing):
                return await next(request)

            # Relative Location: the client may be on a rewritten URL whose
            # real directory name must not leak back to it.
            if not path.endswith("/"):
                location = path.rsplit("/", 1)[-1] + "/"
                return Response(body="", status=301).with_header("Location", quote(location))

            if not has_index:
                return self._listing(file_path, path)
            file_path = index_path

        if not file_path.is_file():
            return await next(request)

        return self._serve_file(file_path, head=request.method == "HEAD")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _serve_file(self, file_path: Path, *, head: bool = False) -> Response:
        """Read a file and build a response."""
        content_type, _ = mimetypes.guess_type(str(file_path))
        if content_type is None:
            content_type = "application/octet-stream"
        elif content_type.startswith("text/") or content_type == "application/javascript":
            content_type += "; charset=utf-8"

        size = file_path.stat().st_size
        body = b"" if head else file_path.read_bytes()

        return (
            Response(body=body, content_type=content_type)
            .with_header("Content-Length", str(size))
            .with_header("Cache-Control", self._cache_control)
        )

    def _listing(self, directory: Path, path: str) -> Response:
        """Minimal HTML listing of *directory*, directories first."""
        entries = sorted(directory.iterdir(), key=lambda p: (not p.is_dir(), p.name))
        title = html.escape(path)
        items = []
        if path != "/":
            items.append('<li><a href="../">../</a></li>')
        for entry in entries:
            name = entry.name + ("/" if entry.is_dir() else "")
            items.append(f'<li><a href="{quote(name)}">{html.escape(name)}</a></li>')
        body = (
            f"<!DOCTYPE html>\n<html><head><meta charset=\"UTF-8\"><title>Index of {title}</title></head>"
            f"<body><h1>Index of {title}</h1><ul>{''.join(items)}</ul></body></html>"
        )
        return Response(body=body).with_header("Cache-Control", self._cache_control)

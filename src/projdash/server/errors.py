"""Error handling for projdash requests.

Maps HTTPError exceptions and unexpected failures to plain Response
objects.
"""

import html
import logging
import traceback

from projdash.errors import HTTPError
from projdash.http.request import Request
from projdash.http.response import Response

logger = logging.getLogger("projdash.server")


def handle_http_error(exc: HTTPError, request: Request, debug: bool) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=detail, content_type="text/plain; charset=utf-8").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        body = (
            "<!DOCTYPE html>\n<html><head><title>500 Internal Server Error</title></head><body>"
            f"<h1>{html.escape(type(exc).__name__)}: {html.escape(str(exc))}</h1>"
            f"<pre>{html.escape(traceback.format_exc())}</pre></body></html>"
        )
        return Response(body=body, status=500)

    return Response(body="Internal Server Error", status=500, content_type="text/plain; charset=utf-8")

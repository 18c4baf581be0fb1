"""ASGI handler — translates ASGI scope/messages to projdash types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, runs the middleware chain, and sends the
Response back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from projdash._internal.asgi import Receive, Scope, Send
from projdash.errors import HTTPError, NotFound
from projdash.http.request import Request
from projdash.http.response import Response
from projdash.middleware.protocol import Next
from projdash.server.errors import handle_http_error, handle_internal_error
from projdash.server.sender import send_response


async def _not_found(request: Request) -> Response:
    """Innermost handler: nothing earlier in the chain served the path."""
    raise NotFound(f"No such file: {request.path}")


def build_pipeline(middleware: tuple[Callable[..., Any], ...]) -> Next:
    """Wrap *middleware* (first = outermost) around the 404 dispatch."""
    handler: Next = _not_found
    for mw in reversed(middleware):
        outer = handler

        async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
            return await _mw(req, _next)

        handler = make_next
    return handler


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    pipeline: Next,
    debug: bool,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await pipeline(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send, head=request.method == "HEAD")

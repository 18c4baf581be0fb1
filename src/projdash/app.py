"""Dashboard application class.

Mutable during setup (extra middleware). Frozen at runtime when
``run()`` or ``__call__()`` is first invoked.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from kida import Environment

from projdash._internal.asgi import Receive, Scope, Send
from projdash.catalog.mapping import ProjectCatalog
from projdash.config import DashboardConfig
from projdash.errors import DashboardError
from projdash.middleware.protocol import Middleware, Next
from projdash.middleware.routes import ProjectRoutes
from projdash.middleware.static import StaticFiles
from projdash.routing.resolver import RouteResolver, resolver_for
from projdash.server.handler import build_pipeline, handle_request
from projdash.templating.integration import create_environment

logger = logging.getLogger("projdash.server")


class Dashboard:
    """The project dashboard ASGI application.

    Request pipeline (outermost first)::

        user middleware -> ProjectRoutes -> StaticFiles -> 404

    Thread safety:
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the pipeline, even when several ASGI workers call
        ``__call__()`` concurrently on first request. The project catalog
        guards its own one-time scan the same way.
    """

    __slots__ = (
        "_catalog",
        "_freeze_lock",
        "_frozen",
        "_kida_env",
        "_middleware_list",
        "_pipeline",
        "_resolver",
        "config",
    )

    def __init__(
        self,
        config: DashboardConfig | None = None,
        *,
        catalog: ProjectCatalog | None = None,
    ) -> None:
        self.config: DashboardConfig = config or DashboardConfig()
        self._catalog: ProjectCatalog = catalog or ProjectCatalog(self.config.root)
        self._middleware_list: list[Middleware] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state — set during _freeze()
        self._resolver: RouteResolver | None = None
        self._kida_env: Environment | None = None
        self._pipeline: Next | None = None

    @property
    def catalog(self) -> ProjectCatalog:
        return self._catalog

    @property
    def resolver(self) -> RouteResolver:
        self._ensure_frozen()
        assert self._resolver is not None
        return self._resolver

    # -- Middleware --

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware in front of the project routes."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server.

        Compiles the app and binds one listener on ``host:port``
        (defaults from config).
        """
        self._ensure_frozen()

        from projdash.server.dev import run_server

        run_server(
            self,
            host if host is not None else self.config.host,
            port if port is not None else self.config.port,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        assert self._pipeline is not None

        await handle_request(
            scope,
            receive,
            send,
            pipeline=self._pipeline,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Startup freezes the app and warms the catalog, so an unreadable
        scan root stops the server before it accepts a single request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    self._catalog.grouping  # noqa: B018 — triggers the one-time scan
                except DashboardError as exc:
                    logger.error("Startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self.config.validate()

        self._resolver = resolver_for(self.config.scheme)
        self._kida_env = create_environment(self.config)

        middleware: list[Callable[..., Any]] = list(self._middleware_list)
        middleware.append(
            ProjectRoutes(
                self._catalog,
                self._resolver,
                self._kida_env,
                title=self.config.title,
            )
        )
        middleware.append(
            StaticFiles(
                self._catalog.root,
                index=self.config.index_file,
                show_dir_listing=self.config.show_dir_listing,
                cache_control=self.config.cache_control,
            )
        )
        self._pipeline = build_pipeline(tuple(middleware))
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the dashboard after it has started serving requests. "
                "Add middleware before calling run()."
            )
            raise RuntimeError(msg)

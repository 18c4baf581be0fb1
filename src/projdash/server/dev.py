"""Server startup.

Starts a pounce ASGI server with the live Dashboard object.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("projdash.server")


def run_server(app: object, host: str, port: int) -> None:
    """Start a pounce server with the given Dashboard.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but the CLI builds a live ``Dashboard`` from its flags, so there is
    nothing to reimport. We use ``pounce.Server`` directly with the ASGI
    callable and leave code reloading off.

    Args:
        app: ASGI callable (Dashboard instance).
        host: Bind host address.
        port: Bind port number (0 lets the OS pick one).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1)
    logger.info("Dashboard running on http://%s:%d", host, port)
    server = Server(config, app)
    server.run()

"""Serve a talentdesk app with pounce.

The static root is already resolved by the time this runs, so the server
never accepts a connection before resolution completes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from talentdesk.app import App


def run_server(
    app: App,
    host: str = "0.0.0.0",
    port: int = 5000,
    *,
    workers: int = 1,
    log_level: str = "info",
) -> None:
    """Start a pounce server with the live App object.

    Pounce's ``run()`` takes an import string, but the app here is built
    by ``create_app()`` at startup, so ``pounce.Server`` is driven with
    the ASGI callable directly.

    Args:
        app: The talentdesk App instance.
        host: Bind address.
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Server log level (debug, info, warning, error, critical).
    """
    from pounce.config import ServerConfig as PounceConfig
    from pounce.server import Server

    config = PounceConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    Server(config, app).run()

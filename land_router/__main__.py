"""Launcher for the land routing HTTP server.

Usage:
    python -m land_router
    land-router            (console script)

Host, port, data source and logging come from LAND_ROUTER_* environment
variables (see config.py).
"""

from __future__ import annotations

import uvicorn

from .api import create_app
from .config import configure_logging, get_config


def main() -> None:
    config = get_config()
    configure_logging(config.observability)

    app = create_app()
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.observability.level.lower(),
    )


if __name__ == "__main__":
    main()

"""Entry point for the Items API.

Checks that the database is reachable, then serves the application
with Uvicorn.  The process exits with status 1 if the store cannot be
reached; there is no degraded mode without a database.

Configuration is read from environment variables (see
``items_api/app/core/config.py``); ``HOST`` and ``PORT`` select the
listen address and default to ``0.0.0.0:8080``.

Usage:
    python run.py
"""
import asyncio
import logging
import sys
from typing import Optional

from uvicorn import Config, Server

from items_api.app.core.config import Settings, settings as default_settings
from items_api.app.core.errors import StoreError
from items_api.app.core.logging_config import setup_logging
from items_api.app.main import create_app
from items_api.app.services.item_store import ItemStore

logger = logging.getLogger("items_api.run")


async def serve(settings: Settings, store: ItemStore) -> None:
    """Serve the application until Uvicorn shuts down."""
    app = create_app(settings, store=store)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logger.info("Server is running on port %s", settings.port)
    await server.serve()


def main(settings: Optional[Settings] = None) -> int:
    """Connect to the store and run the server; return the exit status."""
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    store = ItemStore(settings.database_url, settings.database_timeout)
    try:
        store.ping()
    except StoreError as exc:
        logger.critical("Cannot connect to database %s: %s", settings.database_url, exc.detail)
        return 1
    logger.info("Successfully connected to database.")
    asyncio.run(serve(settings, store))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass

"""Entry point for the Product Catalog API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``product_catalog_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_catalog_api.app.core.config import settings
from product_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

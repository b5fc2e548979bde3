"""Entry point for the Shoe Store API server.

This script launches the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port, database location and log level come from environment
variables (see ``shoe_store_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from shoe_store_api.app.core.config import settings
from shoe_store_api.app.main import app


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

"""Entry point for the Cosmos DB API.

Starts the FastAPI application with Uvicorn.  Host and port come from
``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``);
the Cosmos DB connection is configured through the ``COSMOS_*``
variables described in ``cosmos_db_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from cosmos_db_api.app.core.config import settings
from cosmos_db_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.api_host, port=settings.api_port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")

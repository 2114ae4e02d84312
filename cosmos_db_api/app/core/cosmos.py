"""
Cosmos DB client handle and FastAPI dependencies.

A single ``CosmosClient`` is created lazily on first use and shared by
every request; the SDK pools connections internally and is safe for
concurrent use.  ``close_client`` is called on application shutdown.

The ``get_cosmos_service`` and ``get_cosmos_admin_service``
dependencies build the services around that handle.  Tests replace
them through ``app.dependency_overrides``.
"""

import logging
from typing import Optional

from azure.cosmos.aio import CosmosClient

from cosmos_db_api.app.services.cosmos_admin_service import CosmosAdminService
from cosmos_db_api.app.services.cosmos_service import CosmosService

from .config import settings

logger = logging.getLogger(__name__)

_client: Optional[CosmosClient] = None


def get_client() -> CosmosClient:
    """Return the process-wide client, creating it on first call."""
    global _client
    if _client is None:
        if not settings.cosmos_connection_string:
            raise RuntimeError("COSMOS_CONNECTION_STRING is not configured")
        _client = CosmosClient.from_connection_string(settings.cosmos_connection_string)
        logger.info("Cosmos DB client created for database '%s'", settings.cosmos_database_name)
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("Cosmos DB client closed")


def get_cosmos_service() -> CosmosService:
    database = get_client().get_database_client(settings.cosmos_database_name)
    return CosmosService(
        database.get_container_client(settings.cosmos_container_name),
        database.get_container_client(settings.cosmos_course_container_name or settings.cosmos_container_name),
    )


def get_cosmos_admin_service() -> CosmosAdminService:
    return CosmosAdminService(get_client(), settings.cosmos_database_name)

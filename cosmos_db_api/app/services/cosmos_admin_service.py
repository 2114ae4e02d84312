"""
Service layer for database and container administration.

``CosmosAdminService`` works at the account level (databases) and at
the level of the configured database (containers).  Creation is
idempotent: an existing resource is returned as is.  Deleting a
missing resource raises ``NotFound``.
"""

from __future__ import annotations

import logging

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient

from cosmos_db_api.app.schemas.admin import ContainerDescriptor, DatabaseDescriptor
from cosmos_db_api.app.services.cosmos_service import translate_store_errors

logger = logging.getLogger(__name__)

# Manual throughput provisioned for new containers, in request units.
DEFAULT_THROUGHPUT = 400


class CosmosAdminService:
    """Create and delete databases and containers."""

    def __init__(self, client: CosmosClient, database_name: str):
        self._client = client
        self._database_name = database_name
        self._database = client.get_database_client(database_name)

    async def create_container(self, container_name: str, partition_key_path: str) -> ContainerDescriptor:
        """Create ``container_name`` unless it exists and describe it.

        ``partition_key_path`` (e.g. ``/partitionKey``) only applies to a
        new container; an existing one keeps its own definition, which
        is what the descriptor reports.
        """
        with translate_store_errors():
            container = await self._database.create_container_if_not_exists(
                id=container_name,
                partition_key=PartitionKey(path=partition_key_path),
                offer_throughput=DEFAULT_THROUGHPUT,
            )
            properties = await container.read()
        paths = (properties.get("partitionKey") or {}).get("paths") or []
        logger.info("Container '%s' ready in database '%s'", container_name, self._database_name)
        return ContainerDescriptor(
            id=properties.get("id", container_name),
            database=self._database_name,
            partitionKeyPath=paths[0] if paths else None,
        )

    async def delete_container(self, container_name: str) -> None:
        with translate_store_errors():
            await self._database.delete_container(container_name)
        logger.info("Deleted container '%s' from database '%s'", container_name, self._database_name)

    async def create_database(self, database_name: str) -> DatabaseDescriptor:
        with translate_store_errors():
            database = await self._client.create_database_if_not_exists(id=database_name)
        logger.info("Database '%s' ready", database_name)
        return DatabaseDescriptor(id=database.id)

    async def delete_database(self, database_name: str) -> None:
        with translate_store_errors():
            await self._client.delete_database(database_name)
        logger.info("Deleted database '%s'", database_name)

"""
Administrative endpoints for API v1.

Create and delete containers (inside the configured database) and
databases.  Names are taken from query parameters, mirroring the
original management API used by existing clients.
"""

from typing import Union

from fastapi import APIRouter, Depends, Query

from cosmos_db_api.app.api.v1.responses import execute
from cosmos_db_api.app.core.cosmos import get_cosmos_admin_service
from cosmos_db_api.app.schemas.admin import ContainerDescriptor, DatabaseDescriptor
from cosmos_db_api.app.schemas.response import Err, Ok
from cosmos_db_api.app.services.cosmos_admin_service import CosmosAdminService

router = APIRouter()


@router.post("/containers", response_model=Union[Ok[ContainerDescriptor], Err])
async def create_container(
    container_name: str = Query(..., alias="containerName"),
    partition_key: str = Query(..., alias="partitionKey", examples=["/partitionKey"]),
    service: CosmosAdminService = Depends(get_cosmos_admin_service),
):
    """Create a container with 400 RU/s, or return it if it already exists."""
    return await execute(
        "creating the container",
        container_name,
        lambda: service.create_container(container_name, partition_key),
        "Container created successfully.",
    )


@router.delete("/containers", response_model=Union[Ok[str], Err])
async def delete_container(
    container_name: str = Query(..., alias="containerName"),
    service: CosmosAdminService = Depends(get_cosmos_admin_service),
):
    return await execute(
        "deleting the container",
        container_name,
        lambda: service.delete_container(container_name),
        "Container deleted successfully.",
        data=container_name,
    )


@router.post("/databases", response_model=Union[Ok[DatabaseDescriptor], Err])
async def create_database(
    database_name: str = Query(..., alias="databaseName"),
    service: CosmosAdminService = Depends(get_cosmos_admin_service),
):
    """Create a database, or return it if it already exists."""
    return await execute(
        "creating the database",
        database_name,
        lambda: service.create_database(database_name),
        "Database created successfully.",
    )


@router.delete("/databases", response_model=Union[Ok[str], Err])
async def delete_database(
    database_name: str = Query(..., alias="databaseName"),
    service: CosmosAdminService = Depends(get_cosmos_admin_service),
):
    return await execute(
        "deleting the database",
        database_name,
        lambda: service.delete_database(database_name),
        "Database deleted successfully.",
        data=database_name,
    )

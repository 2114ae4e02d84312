"""
Item endpoints for API v1.

CRUD and SQL query over the items container.  Every handler forwards
its parameters to ``CosmosService`` and returns the response envelope
built by ``execute``.  ``/query`` is declared before ``/{item_id}`` so
that it is not captured as an item id.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Query

from cosmos_db_api.app.api.v1.responses import execute
from cosmos_db_api.app.core.cosmos import get_cosmos_service
from cosmos_db_api.app.schemas.item import Item
from cosmos_db_api.app.schemas.response import Err, Ok
from cosmos_db_api.app.services.cosmos_service import CosmosService

router = APIRouter()


@router.post("", response_model=Union[Ok[Item], Err])
async def create_item(item: Item, service: CosmosService = Depends(get_cosmos_service)):
    """Create a new item."""
    return await execute(
        "creating the item",
        item.id,
        lambda: service.create_item(item),
        "Item created successfully.",
    )


@router.get("/query", response_model=Union[Ok[List[Item]], Err])
async def query_items(
    query: str = Query(..., examples=["SELECT * FROM c WHERE c.partitionKey = 'pk1'"]),
    service: CosmosService = Depends(get_cosmos_service),
):
    """Run a Cosmos SQL query and return every matching item."""
    return await execute(
        "querying items",
        query,
        lambda: service.query_items(query),
        "Query executed successfully.",
    )


@router.get("/{item_id}", response_model=Union[Ok[Item], Err])
async def get_item(
    item_id: str,
    partition_key: str = Query(..., alias="partitionKey"),
    service: CosmosService = Depends(get_cosmos_service),
):
    """Read an item by id and partition key.  Missing items give 404."""
    return await execute(
        "reading the item",
        item_id,
        lambda: service.read_item(item_id, partition_key),
        "Item retrieved successfully.",
    )


@router.put("/{item_id}", response_model=Union[Ok[Item], Err])
async def update_item(
    item_id: str,
    item: Item,
    partition_key: str = Query(..., alias="partitionKey"),
    service: CosmosService = Depends(get_cosmos_service),
):
    """Create or replace an item (upsert)."""
    return await execute(
        "updating the item",
        item_id,
        lambda: service.update_item(item_id, item, partition_key),
        "Item updated successfully.",
    )


@router.delete("/{item_id}", response_model=Union[Ok[str], Err])
async def delete_item(
    item_id: str,
    partition_key: str = Query(..., alias="partitionKey"),
    service: CosmosService = Depends(get_cosmos_service),
):
    """Delete an item; the envelope carries the deleted id."""
    return await execute(
        "deleting the item",
        item_id,
        lambda: service.delete_item(item_id, partition_key),
        "Item deleted successfully.",
        data=item_id,
    )

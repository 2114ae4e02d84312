"""
Service layer for documents in the default container.

``CosmosService`` wraps a container client from ``azure.cosmos.aio``
and exposes the create/read/upsert/delete/query operations used by the
item and course endpoints.  Documents coming back from the store are
stripped of system properties (``_rid``, ``_etag``, ``_ts`` ...) and
turned into plain records.  SDK errors are translated into
``StoreFault``/``NotFound`` so callers never handle vendor exceptions.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from azure.cosmos.aio import ContainerProxy
from azure.cosmos.exceptions import CosmosHttpResponseError

from cosmos_db_api.app.core.errors import from_cosmos_error
from cosmos_db_api.app.schemas.course import Course
from cosmos_db_api.app.schemas.item import Item

logger = logging.getLogger(__name__)


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise SDK errors raised inside the block as ``StoreFault``."""
    try:
        yield
    except CosmosHttpResponseError as exc:
        raise from_cosmos_error(exc) from exc


def strip_system_properties(document: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in document.items() if not key.startswith("_")}


class CosmosService:
    """Operations on items and courses.

    Parameters
    ----------
    container : ContainerProxy
        Container holding items, partitioned on ``/partitionKey``.
    course_container : Optional[ContainerProxy]
        Container holding courses, partitioned on ``/category``.
        Defaults to ``container``.
    """

    def __init__(self, container: ContainerProxy, course_container: Optional[ContainerProxy] = None):
        self._container = container
        self._course_container = course_container if course_container is not None else container

    async def create_item(self, item: Item) -> Item:
        """Insert a new item.  A duplicate id is rejected by the store with 409."""
        with translate_store_errors():
            document = await self._container.create_item(body=item.model_dump())
        logger.info("Created item '%s' in partition '%s'", item.id, item.partitionKey)
        return Item(**strip_system_properties(document))

    async def read_item(self, item_id: str, partition_key: str) -> Item:
        with translate_store_errors():
            document = await self._container.read_item(item=item_id, partition_key=partition_key)
        return Item(**strip_system_properties(document))

    async def update_item(self, item_id: str, item: Item, partition_key: str) -> Item:
        """Create or replace an item.

        The write is addressed by the document itself: its embedded
        ``id`` and ``partitionKey`` select the target.  ``item_id`` and
        ``partition_key`` are only compared against the body and a
        warning is logged when they disagree.
        """
        if item_id != item.id or partition_key != item.partitionKey:
            logger.warning(
                "Upsert addressed by body (id='%s', partitionKey='%s') differs from request (id='%s', partitionKey='%s')",
                item.id,
                item.partitionKey,
                item_id,
                partition_key,
            )
        with translate_store_errors():
            document = await self._container.upsert_item(body=item.model_dump())
        logger.info("Upserted item '%s' in partition '%s'", item.id, item.partitionKey)
        return Item(**strip_system_properties(document))

    async def delete_item(self, item_id: str, partition_key: str) -> None:
        with translate_store_errors():
            await self._container.delete_item(item=item_id, partition_key=partition_key)
        logger.info("Deleted item '%s' from partition '%s'", item_id, partition_key)

    async def query_items(self, query: str) -> List[Item]:
        """Run a SQL query and return every matching item.

        The paged cursor is drained completely; the result is a fully
        materialised list, empty when nothing matches.  Projected rows
        keep the selected fields and leave the others ``None``.
        """
        items: List[Item] = []
        pages = 0
        with translate_store_errors():
            async for page in self._container.query_items(query=query).by_page():
                pages += 1
                async for document in page:
                    items.append(Item(**strip_system_properties(document)))
        logger.debug("Query returned %d items in %d pages", len(items), pages)
        return items

    async def create_course(self, course: Course) -> Course:
        """Insert a course; the store routes it by its ``category`` value."""
        with translate_store_errors():
            document = await self._course_container.create_item(body=course.model_dump())
        logger.info("Created course in category '%s'", course.category)
        return Course(**strip_system_properties(document))

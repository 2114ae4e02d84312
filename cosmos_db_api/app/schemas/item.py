"""
Pydantic model for items stored in the default container.

Field names follow the JSON documents kept in Cosmos DB, hence the
camel-cased ``partitionKey``.  The container is expected to be
partitioned on ``/partitionKey``.

Every field is nullable.  Identity is not checked locally: a body
without ``id`` is forwarded and rejected by the store, as for courses,
and query projections such as ``SELECT c.id, c.name FROM c`` come back
with the fields they did not select set to ``null``.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Item(BaseModel):
    """A flat passthrough record.  The caller owns ``id`` uniqueness."""

    id: Optional[str] = Field(None, examples=["a1"])
    partitionKey: Optional[str] = Field(None, examples=["pk1"])
    name: Optional[str] = Field(None, examples=["widget"])
    description: Optional[str] = Field(None, examples=["A small widget"])

"""
Descriptors returned by the administrative endpoints.

The SDK hands back proxy objects for databases and containers; these
schemas expose the handful of properties a caller can act on.
"""

from typing import Optional

from pydantic import BaseModel, Field


class DatabaseDescriptor(BaseModel):
    id: str = Field(..., examples=["CosmosDbApi"])


class ContainerDescriptor(BaseModel):
    id: str = Field(..., examples=["Items"])
    database: str = Field(..., examples=["CosmosDbApi"])
    partitionKeyPath: Optional[str] = Field(None, examples=["/partitionKey"])

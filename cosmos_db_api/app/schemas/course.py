"""
Pydantic model for courses.

Only ``category`` is known to the API; it doubles as the partition key
value.  Every other field in the request body is kept and written to
the store unchanged.
"""

from pydantic import BaseModel, ConfigDict, Field


class Course(BaseModel):
    category: str = Field(..., examples=["databases"])

    model_config = ConfigDict(extra="allow")

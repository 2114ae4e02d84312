"""
Response envelope returned by every endpoint.

The envelope is a tagged result with exactly two shapes:

* ``Ok[T]`` carries the payload, ``success`` fixed to ``True`` and a
  confirmation message;
* ``Err`` carries ``success`` fixed to ``False``, no payload and the
  error message.

Both models are frozen, so a response cannot drift into a state such
as "successful but without data" after construction.  Build them with
the ``ok`` and ``err`` helpers.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    """Successful operation with its payload."""

    success: Literal[True] = True
    data: T
    message: str = Field(..., min_length=1, examples=["Item created successfully."])

    model_config = ConfigDict(frozen=True)


class Err(BaseModel):
    """Failed operation.  ``data`` is always ``null``."""

    success: Literal[False] = False
    data: None = None
    message: str = Field(..., min_length=1, examples=["store error: Entity with the specified id does not exist in the system."])

    model_config = ConfigDict(frozen=True)


def ok(data: Any, message: str) -> Ok:
    return Ok(data=data, message=message)


def err(message: str) -> Err:
    return Err(message=message)

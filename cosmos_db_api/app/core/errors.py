"""
Error taxonomy shared by the service and endpoint layers.

Services translate vendor exceptions into ``StoreFault`` (or its
``NotFound`` subtype) so that endpoints never depend on the Azure SDK
directly.  Anything that does not come from the store's typed error
channel is an ``UnexpectedFault`` and is reported to callers with a
generic message only.
"""

from azure.cosmos.exceptions import CosmosHttpResponseError, CosmosResourceNotFoundError


class StoreFault(Exception):
    """The document store rejected an operation."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class NotFound(StoreFault):
    """The store reports no matching resource."""

    def __init__(self, message: str):
        super().__init__(404, message)


class UnexpectedFault(Exception):
    """Any failure not originating from the store client.

    Built by the endpoint layer around any other exception; ``message``
    names the operation only and is safe to return to callers.
    """

    status_code = 500

    def __init__(self, operation: str):
        self.operation = operation
        self.message = f"An error occurred while {operation}."
        super().__init__(self.message)


def from_cosmos_error(exc: CosmosHttpResponseError) -> StoreFault:
    """Convert an SDK exception into a ``StoreFault``.

    ``http_error_message`` holds the raw text returned by the service;
    ``message`` is the SDK's formatted variant prefixed with the status
    line and is used when the raw text is absent.
    """
    detail = getattr(exc, "http_error_message", None) or exc.message or str(exc)
    detail = str(detail).strip()
    if isinstance(exc, CosmosResourceNotFoundError) or exc.status_code == 404:
        return NotFound(detail)
    return StoreFault(exc.status_code or 500, detail)

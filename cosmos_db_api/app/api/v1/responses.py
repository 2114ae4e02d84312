"""
Error-mapping policy shared by every v1 endpoint.

``execute`` awaits a service call and renders the outcome as a
response envelope:

* success: HTTP 200 with ``Ok(data, message)``;
* ``StoreFault``: the status code reported by the store with
  ``Err("store error: <detail>")``;
* anything else: HTTP 500 with a generic ``Err`` naming the operation.
  The exception is logged with the operation and resource but its
  text is never returned to the caller.

The request validation handler and the last-resort handler installed
by ``create_app`` render through the same envelope.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cosmos_db_api.app.core.errors import StoreFault, UnexpectedFault
from cosmos_db_api.app.schemas.response import Err, Ok, err, ok

logger = logging.getLogger(__name__)


def envelope_response(envelope: Ok | Err, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


def store_status(fault: StoreFault) -> int:
    """HTTP status for a store fault; codes outside 4xx/5xx become 502."""
    if 400 <= fault.status_code <= 599:
        return fault.status_code
    return status.HTTP_502_BAD_GATEWAY


async def execute(
    operation: str,
    resource: str,
    call: Callable[[], Awaitable[Any]],
    message: str,
    data: Optional[Any] = None,
) -> JSONResponse:
    """Run ``call`` and map its outcome to an envelope response.

    Parameters
    ----------
    operation : str
        Gerund phrase used in logs and the generic failure message,
        e.g. ``"creating the item"``.
    resource : str
        Identifier of the resource being acted on, for logs.
    call : Callable[[], Awaitable[Any]]
        Zero-argument coroutine factory performing the service call.
    message : str
        Confirmation message of the success envelope.
    data : Optional[Any]
        Payload of the success envelope.  Defaults to the call result;
        set it for calls that return nothing, such as deletes.
    """
    try:
        result = await call()
    except StoreFault as fault:
        logger.error(
            "Store error while %s '%s': %s (status %s)", operation, resource, fault.message, fault.status_code
        )
        return envelope_response(err(f"store error: {fault.message}"), store_status(fault))
    except Exception:
        fault = UnexpectedFault(operation)
        logger.exception("Unexpected error while %s '%s'", operation, resource)
        return envelope_response(err(fault.message), fault.status_code)
    return envelope_response(ok(result if data is None else data, message))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation errors through the envelope with HTTP 422."""
    fields = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        fields.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "Invalid request: " + ("; ".join(fields) or "malformed payload")
    return envelope_response(err(message), status.HTTP_422_UNPROCESSABLE_ENTITY)


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for failures outside ``execute``, e.g. in dependencies."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return envelope_response(err("An unexpected error occurred."), UnexpectedFault.status_code)

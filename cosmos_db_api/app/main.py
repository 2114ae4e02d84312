"""
Main entrypoint for the Cosmos DB API.

This module assembles the FastAPI application, sets up logging,
installs the envelope-producing exception handlers and includes
versioned routers.  The app is instantiated at import time as
``app`` so it can be served directly::

    uvicorn cosmos_db_api.app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.v1.responses import unexpected_exception_handler, validation_exception_handler
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.cosmos import close_client
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that router imports and handlers can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await close_client()

    return app


app = create_app()

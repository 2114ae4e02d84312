"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
the Cosmos DB connection string, which must be supplied by the
deployment (for example through the ``COSMOS_CONNECTION_STRING``
variable of a container app or a local ``.env`` exported into the
shell).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Cosmos DB API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Account connection string in the form
    # ``AccountEndpoint=https://...;AccountKey=...;``.
    cosmos_connection_string: str = os.getenv("COSMOS_CONNECTION_STRING", "")

    # Database and container used by the item and course endpoints.  The
    # admin endpoints create containers inside ``cosmos_database_name``.
    cosmos_database_name: str = os.getenv("COSMOS_DATABASE_NAME", "CosmosDbApi")
    cosmos_container_name: str = os.getenv("COSMOS_CONTAINER_NAME", "Items")

    # Courses go to the items container unless this names another one.  A
    # separate course container must be provisioned beforehand (e.g. via
    # POST /admin/containers with partitionKey=/category).
    cosmos_course_container_name: str = os.getenv("COSMOS_COURSE_CONTAINER_NAME", "")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

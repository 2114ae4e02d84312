"""Shared fixtures: an in-memory Cosmos account wired into the services and the app."""

import pytest
from fastapi.testclient import TestClient

from cosmos_db_api.app.core.cosmos import get_cosmos_admin_service, get_cosmos_service
from cosmos_db_api.app.main import app
from cosmos_db_api.app.services.cosmos_admin_service import CosmosAdminService
from cosmos_db_api.app.services.cosmos_service import CosmosService
from tests.fakes import FakeContainer, FakeCosmosClient

DATABASE = "testdb"


@pytest.fixture
def cosmos_client() -> FakeCosmosClient:
    client = FakeCosmosClient()
    client.databases[DATABASE] = {
        "Items": FakeContainer("Items", "/partitionKey"),
        "Courses": FakeContainer("Courses", "/category"),
    }
    return client


@pytest.fixture
def items_container(cosmos_client):
    return cosmos_client.databases[DATABASE]["Items"]


@pytest.fixture
def courses_container(cosmos_client):
    return cosmos_client.databases[DATABASE]["Courses"]


@pytest.fixture
def cosmos_service(items_container, courses_container) -> CosmosService:
    return CosmosService(items_container, courses_container)


@pytest.fixture
def admin_service(cosmos_client) -> CosmosAdminService:
    return CosmosAdminService(cosmos_client, DATABASE)


@pytest.fixture
def api(cosmos_service, admin_service):
    app.dependency_overrides[get_cosmos_service] = lambda: cosmos_service
    app.dependency_overrides[get_cosmos_admin_service] = lambda: admin_service
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()

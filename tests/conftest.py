"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from catalog_service.api.app import create_app
from catalog_service.config import Settings
from catalog_service.entities import PRODUCT_SCHEMA, USER_SCHEMA
from catalog_service.services import ResourceService


@pytest.fixture
def settings():
    """Settings with empty collections."""
    return Settings(seed_data=False, log_level="WARNING")


@pytest.fixture
def client(settings):
    """Create a test client running the app lifespan."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """Test client whose collections hold the sample data."""
    with TestClient(create_app(Settings(seed_data=True, log_level="WARNING"))) as test_client:
        yield test_client


@pytest.fixture
def product_service():
    return ResourceService.create(PRODUCT_SCHEMA)


@pytest.fixture
def user_service():
    return ResourceService.create(USER_SCHEMA)

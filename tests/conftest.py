"""
Test configuration and fixtures for the rental property API.
Provides a fresh application and store per test plus test data factories.
"""

import pytest
from typing import AsyncGenerator
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from rental_api.config import Settings
from rental_api.main import create_app
from rental_api.models.property import Property, PropertyStatus
from rental_api.repositories.property import PropertyRepository
from rental_api.schemas.property import PropertyCreate
from rental_api.services.property import PropertyService


API_PREFIX = "/api"
PROPERTIES_URL = f"{API_PREFIX}/properties"


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the testing environment."""
    return Settings(
        environment="testing",
        api_prefix=API_PREFIX,
        enable_request_logging=False
    )


# Repository and service fixtures
@pytest.fixture
def property_repository() -> PropertyRepository:
    """Create an empty property repository."""
    return PropertyRepository()


@pytest.fixture
def property_service(property_repository: PropertyRepository) -> PropertyService:
    """Create a property service instance."""
    return PropertyService(property_repository)


# Application fixtures
@pytest.fixture
def app(test_settings: Settings, property_repository: PropertyRepository) -> FastAPI:
    """Create an application bound to the test repository."""
    return create_app(settings=test_settings, property_repository=property_repository)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client


# Test data factories
class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        title: str = "Flat A",
        address: str = "1 Main St",
        price: float = 1200,
        description: str = None,
        status: PropertyStatus = None
    ) -> dict:
        """Create a JSON-ready property payload, omitting unset optional fields."""
        data = {
            "title": title,
            "address": address,
            "price": price
        }
        if description is not None:
            data["description"] = description
        if status is not None:
            data["status"] = PropertyStatus(status).value
        return data

    @staticmethod
    def create_property(
        property_repo: PropertyRepository,
        title: str = "Flat A",
        address: str = "1 Main St",
        price: float = 1200,
        description: str = None,
        status: PropertyStatus = None
    ) -> Property:
        """Create a test property directly in the repository."""
        property_data = PropertyFactory.create_property_data(
            title=title,
            address=address,
            price=price,
            description=description,
            status=status
        )
        return property_repo.create(PropertyCreate(**property_data))


@pytest.fixture
def sample_properties(property_repository: PropertyRepository) -> list:
    """Five properties with mixed statuses, in insertion order."""
    statuses = [
        PropertyStatus.AVAILABLE,
        PropertyStatus.RENTED,
        PropertyStatus.AVAILABLE,
        PropertyStatus.MAINTENANCE,
        PropertyStatus.AVAILABLE,
    ]
    return [
        PropertyFactory.create_property(
            property_repository,
            title=f"Property {index}",
            address=f"{index} Test Road",
            price=1000 + index * 100,
            status=status
        )
        for index, status in enumerate(statuses)
    ]

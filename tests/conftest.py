"""Shared pytest fixtures and configuration for all tests."""

import os

# Must be set before src.main is imported so no module-level app is built
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from restaurant_menu_api.handlers.api_handler import create_app  # noqa: E402
from restaurant_menu_api.repositories.menu_repository import MenuItemRepository  # noqa: E402
from restaurant_menu_api.repositories.seed_data import default_menu_items  # noqa: E402


@pytest.fixture
def valid_menu_payload() -> dict:
    """Fixture providing a write payload that passes every field rule."""
    return {
        "name": "Soup",
        "description": "A warm tasty soup bowl",
        "price": 5.5,
        "category": "appetizer",
        "ingredients": ["broth"],
    }


@pytest.fixture
def menu_repository() -> MenuItemRepository:
    """Fixture providing a repository seeded with the six default items."""
    return MenuItemRepository(items=default_menu_items())


@pytest.fixture
def client(menu_repository: MenuItemRepository) -> TestClient:
    """Fixture providing a test client over a freshly seeded repository."""
    return TestClient(create_app(repository=menu_repository))

"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from menu_service.main import app
from menu_service.core.config import Settings
from menu_service.core.dependencies import get_menu_repository
from menu_service.services.menu.repository import MenuRepository
from menu_service.services.menu.in_memory_menu import InMemoryMenuStore


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        app_name="Test Menu Service",
        log_level="DEBUG",
        log_request_bodies=True,
    )


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository seeded with test data (ids 1, 2 and 5)."""
    return MenuRepository(InMemoryMenuStore.from_yaml(test_menu_path))


@pytest.fixture
def empty_menu_repository():
    """Create menu repository with no items."""
    return MenuRepository(InMemoryMenuStore())


@pytest.fixture
def valid_item():
    """A candidate menu item that passes every rule."""
    return {
        "name": "Garlic Bread",
        "description": "Toasted bread with garlic butter",
        "price": 4.50,
        "category": "appetizer",
        "ingredients": ["bread", "garlic", "butter"],
    }


@pytest.fixture
def override_get_menu_repository(test_menu_repository):
    """Override get_menu_repository dependency with test menu."""
    def _override_get_menu_repository():
        return test_menu_repository
    return _override_get_menu_repository


@pytest.fixture
def test_client(override_get_menu_repository, test_settings, monkeypatch):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_menu_repository] = override_get_menu_repository

    monkeypatch.setattr("menu_service.core.config.settings", test_settings)

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def empty_client(empty_menu_repository, test_settings, monkeypatch):
    """Create FastAPI test client backed by an empty menu."""
    app.dependency_overrides[get_menu_repository] = lambda: empty_menu_repository

    monkeypatch.setattr("menu_service.core.config.settings", test_settings)

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()

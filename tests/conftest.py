"""Shared pytest fixtures for the food ordering service tests."""

import pytest
from fastapi.testclient import TestClient

from app import main
from app.services import MenuStore, OrderStore, reset_stores


@pytest.fixture
def menu_store() -> MenuStore:
    """Create a fresh empty menu."""
    return MenuStore()


@pytest.fixture
def order_store(menu_store: MenuStore) -> OrderStore:
    """Create a fresh order store bound to the menu fixture."""
    return OrderStore(menu_store)


@pytest.fixture
def seeded_menu(menu_store: MenuStore) -> MenuStore:
    """Menu with one item per category, ids 1-4."""
    menu_store.upsert("Garlic Bread", 5.99, "Starter")
    menu_store.upsert("Pizza", 10, "Main Course")
    menu_store.upsert("Tiramisu", 7.5, "Dessert")
    menu_store.upsert("Coke", 2.99, "Beverage")
    return menu_store


@pytest.fixture
def client(monkeypatch):
    """
    Test client against freshly reset shared stores.

    The status timer is disabled so tests fire the sweep explicitly.
    """
    monkeypatch.setattr(main.settings, "status_scheduler_enabled", False)
    reset_stores()
    with TestClient(main.app) as test_client:
        yield test_client
    reset_stores()


@pytest.fixture
def scheduled_client():
    """Test client with the status timer running, as in production."""
    reset_stores()
    with TestClient(main.app) as test_client:
        yield test_client
    reset_stores()

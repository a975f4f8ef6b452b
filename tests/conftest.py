"""
Pytest Configuration and Fixtures

Every test gets its own SQLite file under ``tmp_path`` and its own
cache, so applications built here never share state.
"""

import pytest
from fastapi.testclient import TestClient

from items_api.app.core.config import Settings
from items_api.app.main import create_app
from items_api.app.services.item_cache import ItemCache
from items_api.app.services.item_service import ItemService
from items_api.app.services.item_store import ItemStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh database file."""
    return Settings(
        database_url=str(tmp_path / "items.db"),
        lenient_id_parsing=False,
        report_missing_rows=False,
    )


@pytest.fixture
def store(settings: Settings) -> ItemStore:
    """An ItemStore with the items table already created."""
    item_store = ItemStore(settings.database_url, settings.database_timeout)
    item_store.init_schema()
    return item_store


@pytest.fixture
def cache() -> ItemCache:
    return ItemCache()


@pytest.fixture
def service(store: ItemStore, cache: ItemCache) -> ItemService:
    return ItemService(store, cache)


@pytest.fixture
def app(settings: Settings, store: ItemStore, cache: ItemCache):
    return create_app(settings, store=store, cache=cache)


@pytest.fixture
def client(app):
    """Test client; entering it runs the startup hooks."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client(settings: Settings, store: ItemStore, cache: ItemCache):
    """Factory for clients built with overridden settings.

    Usage:
        def test_something(make_client):
            with make_client(report_missing_rows=True) as client:
                ...
    """
    def factory(**overrides) -> TestClient:
        custom = Settings(**{**settings.__dict__, **overrides})
        return TestClient(create_app(custom, store=store, cache=cache))
    return factory

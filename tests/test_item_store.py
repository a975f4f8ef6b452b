"""
Tests for ItemStore against a temporary SQLite database.
"""

import sqlite3

import pytest

from items_api.app.core.errors import ItemNotFoundError, StoreError
from items_api.app.schemas.item import ItemRead
from items_api.app.services.item_store import ItemStore


class TestItemStoreInsert:
    """Test insert() and get_by_id()."""

    def test_insert_returns_generated_id(self, store: ItemStore):
        first = store.insert("first")
        second = store.insert("second")

        assert first != second
        assert store.get_by_id(first) == ItemRead(id=first, title="first")
        assert store.get_by_id(second) == ItemRead(id=second, title="second")

    def test_insert_accepts_empty_title(self, store: ItemStore):
        item_id = store.insert("")
        assert store.get_by_id(item_id).title == ""

    def test_get_missing_raises_not_found(self, store: ItemStore):
        with pytest.raises(ItemNotFoundError) as exc_info:
            store.get_by_id(12345)
        assert exc_info.value.item_id == 12345


class TestItemStoreGetAll:
    """Test get_all()."""

    def test_empty_table_returns_empty_list(self, store: ItemStore):
        assert store.get_all() == []

    def test_returns_every_row(self, store: ItemStore):
        ids = [store.insert(f"title {i}") for i in range(3)]

        items = store.get_all()

        assert [item.id for item in items] == ids
        assert [item.title for item in items] == ["title 0", "title 1", "title 2"]

    def test_undecodable_row_fails_whole_scan(self, store: ItemStore, settings):
        store.insert("good")
        # Bypass the NOT NULL constraint with a table that allows it.
        conn = sqlite3.connect(settings.database_url)
        conn.executescript(
            """
            ALTER TABLE items RENAME TO items_old;
            CREATE TABLE items (id INTEGER PRIMARY KEY AUTOINCREMENT, title TEXT);
            INSERT INTO items (id, title) SELECT id, title FROM items_old;
            INSERT INTO items (title) VALUES (NULL);
            """
        )
        conn.close()

        with pytest.raises(StoreError):
            store.get_all()


class TestItemStoreUpdateDelete:
    """Test update_by_id() and delete_by_id() affected-row counts."""

    def test_update_existing_row(self, store: ItemStore):
        item_id = store.insert("old")

        assert store.update_by_id(item_id, "new") == 1
        assert store.get_by_id(item_id).title == "new"

    def test_update_missing_row_is_not_an_error(self, store: ItemStore):
        assert store.update_by_id(999, "nothing") == 0

    def test_delete_existing_row(self, store: ItemStore):
        item_id = store.insert("doomed")

        assert store.delete_by_id(item_id) == 1
        with pytest.raises(ItemNotFoundError):
            store.get_by_id(item_id)

    def test_delete_missing_row_is_not_an_error(self, store: ItemStore):
        assert store.delete_by_id(999) == 0


class TestItemStoreFailures:
    """Database failures surface as StoreError."""

    def test_ping_unreachable_database(self, tmp_path):
        store = ItemStore(str(tmp_path / "missing-dir" / "items.db"))
        with pytest.raises(StoreError):
            store.ping()

    def test_ping_reachable_database(self, store: ItemStore):
        store.ping()

    def test_operations_without_table_raise_store_error(self, tmp_path):
        store = ItemStore(str(tmp_path / "empty.db"))

        with pytest.raises(StoreError):
            store.insert("x")
        with pytest.raises(StoreError):
            store.get_by_id(1)
        with pytest.raises(StoreError):
            store.get_all()
        with pytest.raises(StoreError):
            store.update_by_id(1, "x")
        with pytest.raises(StoreError):
            store.delete_by_id(1)

    def test_init_schema_is_idempotent(self, store: ItemStore):
        item_id = store.insert("kept")
        store.init_schema()
        assert store.get_by_id(item_id).title == "kept"

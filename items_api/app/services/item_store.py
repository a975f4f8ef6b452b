"""
Durable storage for items.

``ItemStore`` runs parameterized SQL against the SQLite database
configured in the settings.  Each call opens its own connection and
closes it before returning.  Every ``sqlite3.Error`` is re-raised as
:class:`StoreError` so callers only deal with the API error taxonomy.

``update_by_id`` and ``delete_by_id`` report the number of affected
rows instead of failing when nothing matched; whether that counts as
"not found" is decided by the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from pydantic import ValidationError

from items_api.app.core.db import get_connection, get_cursor, init_db
from items_api.app.core.errors import ItemNotFoundError, StoreError
from items_api.app.schemas.item import ItemRead

logger = logging.getLogger(__name__)


class ItemStore:
    """Item persistence backed by SQLite."""

    def __init__(self, database_url: str, timeout: float = 5.0) -> None:
        self.database_url = database_url
        self.timeout = timeout

    def ping(self) -> None:
        """Check that the database can be opened and queried."""
        try:
            conn = get_connection(self.database_url, self.timeout)
            try:
                conn.execute("SELECT 1").fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StoreError(f"Database unreachable: {exc}") from exc

    def init_schema(self) -> None:
        try:
            init_db(self.database_url, self.timeout)
        except sqlite3.Error as exc:
            raise StoreError(f"Failed to initialise schema: {exc}") from exc
        logger.info("Items table ready in %s", self.database_url)

    def insert(self, title: str) -> int:
        """Insert a new row and return the id generated by the database."""
        try:
            with get_cursor(self.database_url, self.timeout) as cursor:
                cursor.execute("INSERT INTO items (title) VALUES (?)", (title,))
                item_id = cursor.lastrowid
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return item_id

    def get_by_id(self, item_id: int) -> ItemRead:
        """Return the row with ``item_id`` or raise :class:`ItemNotFoundError`."""
        try:
            with get_cursor(self.database_url, self.timeout) as cursor:
                row = cursor.execute(
                    "SELECT id, title FROM items WHERE id = ?",
                    (item_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        if row is None:
            raise ItemNotFoundError(item_id)
        return self._row_to_item(row)

    def get_all(self) -> List[ItemRead]:
        """Return every row.

        A single row that cannot be decoded fails the whole scan; no
        partial list is ever returned.
        """
        try:
            with get_cursor(self.database_url, self.timeout) as cursor:
                rows = cursor.execute("SELECT id, title FROM items ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return [self._row_to_item(row) for row in rows]

    def update_by_id(self, item_id: int, title: str) -> int:
        """Set the title of ``item_id`` and return the number of rows affected."""
        try:
            with get_cursor(self.database_url, self.timeout) as cursor:
                cursor.execute("UPDATE items SET title = ? WHERE id = ?", (title, item_id))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return affected

    def delete_by_id(self, item_id: int) -> int:
        """Delete ``item_id`` and return the number of rows affected."""
        try:
            with get_cursor(self.database_url, self.timeout) as cursor:
                cursor.execute("DELETE FROM items WHERE id = ?", (item_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return affected

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> ItemRead:
        """Convert a database row to an ItemRead schema instance."""
        try:
            return ItemRead(id=row["id"], title=row["title"])
        except ValidationError as exc:
            raise StoreError(f"Malformed item row: {exc}") from exc

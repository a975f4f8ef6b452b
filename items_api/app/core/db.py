"""
SQLite database integration.

This module provides functions for resolving the database location
(``get_database_path``), obtaining a connection (``get_connection``),
a cursor context manager that commits on success (``get_cursor``) and
the table definition applied at startup (``init_db``).  A new
connection is opened for every unit of work, so concurrent request
threads never share a connection object.

Schema migrations are out of scope: ``init_db`` only creates the
``items`` table when it is missing.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

ITEMS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL
)
"""


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str, timeout: float = 5.0) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    ``timeout`` bounds how long a writer waits for another
    connection's lock before ``sqlite3.OperationalError`` is raised.
    """
    conn = sqlite3.connect(get_database_path(database_url), timeout=timeout)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: str, timeout: float = 5.0) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_url, timeout)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_url: str, timeout: float = 5.0) -> None:
    """Create the ``items`` table if it does not exist yet."""
    with get_cursor(database_url, timeout) as cursor:
        cursor.execute(ITEMS_TABLE_SQL)

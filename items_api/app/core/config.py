"""
Runtime settings for the Items API.

Every field is read from an environment variable of the same name in
upper case, falling back to a default suited to local development.
Tests build their own ``Settings`` instances instead of patching the
environment.
"""

import os
from dataclasses import dataclass


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Items API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file that receives a copy of every log record.
    log_file: str = os.getenv("LOG_FILE", "")

    # Listen address for the launcher in ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "items.db")

    # Seconds a connection waits on a locked database before failing.
    database_timeout: float = float(os.getenv("DATABASE_TIMEOUT", "5.0"))

    # When enabled, an ``id`` query parameter that is not an integer is
    # read as ``0`` instead of being rejected with HTTP 400.
    lenient_id_parsing: bool = _flag("LENIENT_ID_PARSING")

    # When enabled, PUT and DELETE answer 404 if no row matched the id,
    # and PUT no longer writes a cache entry for an id the store lacks.
    report_missing_rows: bool = _flag("REPORT_MISSING_ROWS")


# Default instance for ``create_app`` and ``run.py``; it captures the
# environment as it was when this module was first imported.
settings = Settings()

# ABOUTME: SQLite database connection management for the Livraria catalog.
# ABOUTME: Opens or creates the database in autocommit mode and applies the schema.

import logging
import sqlite3
from pathlib import Path

from livraria.config import DEFAULT_DB_PATH
from livraria.db.schema import SCHEMA_V1, USERS_BOOTSTRAP

logger = logging.getLogger(__name__)


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def open_catalog(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Livraria catalog database.

    Creates the database file and parent directories if they don't exist.
    Applies the schema on first creation and the users bootstrap table on
    every open. The connection is left in autocommit mode
    (isolation_level=None); transactions are opened explicitly by the store.

    Args:
        path: Path to the database file. Defaults to ~/.livraria/livraria.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path), isolation_level=None)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")

    if not _schema_exists(conn):
        logger.info("Creating catalog schema in %s", db_path)
        conn.executescript(SCHEMA_V1)

    conn.executescript(USERS_BOOTSTRAP)
    return conn

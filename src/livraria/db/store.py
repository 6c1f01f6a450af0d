# ABOUTME: Transactional store contract and its SQLite implementation for the catalog.
# ABOUTME: Exposes lookup by name, insert returning id, commit/rollback, and autocommit toggling.

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Any, Protocol, runtime_checkable

from livraria.db.connection import open_catalog
from livraria.db.schema import CATALOG_TABLES
from livraria.errors import ConnectionStateError, PersistenceError

logger = logging.getLogger(__name__)


@dataclass
class InsertOutcome:
    """Result of a single-row insert."""

    rowcount: int
    last_id: int | None


@runtime_checkable
class TransactionalStore(Protocol):
    """Protocol for the relational store the upsert pipeline writes through."""

    @property
    def is_connected(self) -> bool: ...

    @property
    def autocommit(self) -> bool: ...

    def set_autocommit(self, enabled: bool) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def find_id_by_name(self, table: str, name: str) -> int | None: ...

    def insert(
        self, table: str, row: dict[str, Any], *, ignore_conflicts: bool = False
    ) -> InsertOutcome: ...

    def select_all(self, table: str) -> tuple[list[str], list[tuple[Any, ...]]]: ...


def _check_table(table: str) -> str:
    if table not in CATALOG_TABLES:
        raise ValueError(f"Unknown table '{table}'")
    return table


class CatalogStore:
    """Wraps a sqlite3 connection with explicit transaction control.

    The connection itself runs in autocommit mode. While the store's
    autocommit flag is off, the first statement opens a transaction that
    stays open until commit() or rollback(). Turning autocommit back on
    commits whatever is still pending.
    """

    def __init__(self, path: Path | None = None, conn: sqlite3.Connection | None = None) -> None:
        self._path = path
        self._conn = conn
        self._autocommit = True

    def __enter__(self) -> "CatalogStore":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.disconnect()

    def connect(self) -> None:
        """Open the catalog database. No-op if already connected."""
        if self.is_connected:
            logger.debug("Connection already active")
            return
        self._conn = open_catalog(self._path)
        self._autocommit = True
        logger.debug("Connected to catalog %s", self._path)

    def disconnect(self) -> None:
        """Close the connection. No-op if there is none."""
        if not self.is_connected:
            return
        assert self._conn is not None
        self._conn.close()
        self._conn = None

    @property
    def is_connected(self) -> bool:
        if self._conn is None:
            return False
        try:
            self._conn.total_changes  # noqa: B018
        except sqlite3.ProgrammingError:
            return False
        return True

    @property
    def connection(self) -> sqlite3.Connection:
        """The live sqlite3 connection.

        Raises:
            ConnectionStateError: If the store is not connected.
        """
        if not self.is_connected:
            raise ConnectionStateError("Catalog connection is not active; call connect() first")
        assert self._conn is not None
        return self._conn

    @property
    def autocommit(self) -> bool:
        return self._autocommit

    @property
    def in_transaction(self) -> bool:
        return self.is_connected and self.connection.in_transaction

    def set_autocommit(self, enabled: bool) -> None:
        """Suspend or restore autocommit. Restoring commits a pending transaction."""
        conn = self.connection
        if enabled and conn.in_transaction:
            conn.commit()
        self._autocommit = enabled

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        self.connection.rollback()

    def _execute(self, sql: str, params: tuple[Any, ...] | list[Any] = ()) -> sqlite3.Cursor:
        conn = self.connection
        if not self._autocommit and not conn.in_transaction:
            conn.execute("BEGIN")
        return conn.execute(sql, params)

    def find_id_by_name(self, table: str, name: str) -> int | None:
        """Return the id of the row whose nome equals name exactly, or None."""
        cursor = self._execute(f"SELECT id FROM {_check_table(table)} WHERE nome = ?", (name,))
        row = cursor.fetchone()
        return row[0] if row else None

    def insert(
        self, table: str, row: dict[str, Any], *, ignore_conflicts: bool = False
    ) -> InsertOutcome:
        """Insert one row and report affected rows and the generated id.

        With ignore_conflicts, a row that violates a uniqueness constraint
        is skipped and the outcome reports zero rows.
        """
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        verb = "INSERT OR IGNORE" if ignore_conflicts else "INSERT"
        cursor = self._execute(
            f"{verb} INTO {_check_table(table)} ({columns}) VALUES ({placeholders})",
            list(row.values()),
        )
        if cursor.rowcount < 1:
            return InsertOutcome(rowcount=0, last_id=None)
        return InsertOutcome(rowcount=cursor.rowcount, last_id=cursor.lastrowid)

    def select_all(self, table: str) -> tuple[list[str], list[tuple[Any, ...]]]:
        """Return column names and every row of a catalog table.

        Raises:
            ValueError: If the table is not one of the catalog tables.
        """
        cursor = self._execute(f"SELECT * FROM {_check_table(table)}")
        columns = [desc[0] for desc in cursor.description]
        return columns, [tuple(r) for r in cursor.fetchall()]

    def add_user(self, name: str, email: str) -> int:
        """Register a user in the usuarios table.

        Raises:
            PersistenceError: If the email is already registered or nothing
                was inserted.
        """
        try:
            outcome = self.insert("usuarios", {"nome": name, "email": email})
        except sqlite3.IntegrityError as exc:
            raise PersistenceError(
                "User could not be registered",
                table="usuarios",
                entity=email,
                engine_error=type(exc).__name__,
            ) from exc
        if outcome.last_id is None:
            raise PersistenceError("Insert affected no rows", table="usuarios", entity=email)
        if not self._autocommit:
            self.commit()
        return outcome.last_id

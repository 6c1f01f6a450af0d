# ABOUTME: Book upsert coordinator writing one book and its related entities atomically.
# ABOUTME: Resolves author, genre, and publisher, inserts the book, then commits or rolls back.

import logging
import sqlite3
from dataclasses import dataclass

from livraria.db.resolver import EntityKind, resolve_or_create
from livraria.db.store import TransactionalStore
from livraria.errors import ConnectionStateError, LivrariaError, PersistenceError
from livraria.metadata.types import BookRecord

logger = logging.getLogger(__name__)


@dataclass
class UpsertResult:
    """Outcome of persisting a single BookRecord."""

    title: str
    success: bool
    book_id: int | None = None
    error: LivrariaError | None = None


class BookUpsertCoordinator:
    """Persists BookRecords, one transaction per book.

    A failure affects only the book being written: its transaction is
    rolled back and the failure is returned, never raised.
    """

    def __init__(self, store: TransactionalStore) -> None:
        self._store = store

    def upsert_book(self, record: BookRecord) -> UpsertResult:
        """Write a book and its author, genre, and publisher in one transaction.

        Autocommit is suspended for the duration and restored before
        returning, whatever the outcome.

        Returns:
            UpsertResult with success and the new book id, or the error
            that caused the rollback.
        """
        if not self._store.is_connected:
            error = ConnectionStateError("Cannot insert book: catalog connection is not active")
            logger.error("%s: %s", record.title, error)
            return UpsertResult(title=record.title, success=False, error=error)

        try:
            self._store.set_autocommit(False)
            book_id = self._write(record)
        except Exception as exc:
            error = self._as_storage_error(exc, record)
            logger.warning("Rolling back '%s': %s", record.title, error)
            self._rollback_quietly(record)
            return UpsertResult(title=record.title, success=False, error=error)
        finally:
            self._restore_autocommit()

        if book_id is None:
            error = PersistenceError(
                "Book insert affected no rows", table="livros", entity=record.title
            )
            return UpsertResult(title=record.title, success=False, error=error)
        logger.info("Book '%s' inserted with id %d", record.title, book_id)
        return UpsertResult(title=record.title, success=True, book_id=book_id)

    def _write(self, record: BookRecord) -> int | None:
        author_id = resolve_or_create(self._store, EntityKind.AUTHOR, record.author)
        genre_id = resolve_or_create(self._store, EntityKind.GENRE, record.primary_genre)
        publisher_id = resolve_or_create(
            self._store, EntityKind.PUBLISHER, record.publisher, record.origin
        )

        outcome = self._store.insert(
            "livros",
            {
                "titulo": record.title,
                "sinopse": record.synopsis,
                "ano_publicacao": record.publication_year,
                "numero_paginas": record.page_count,
                "isbn": record.isbn,
                "idioma_origem": record.origin,
                "autor_id": author_id,
                "genero_id": genre_id,
                "editora_id": publisher_id,
            },
        )
        if outcome.rowcount < 1:
            logger.warning("Book insert for '%s' affected no rows", record.title)
            self._store.rollback()
            return None

        self._store.commit()
        return outcome.last_id

    def _rollback_quietly(self, record: BookRecord) -> None:
        """Roll back, logging instead of raising so the original error is kept."""
        try:
            self._store.rollback()
        except (LivrariaError, sqlite3.Error) as exc:
            logger.error("Rollback failed for '%s': %s", record.title, exc)

    def _restore_autocommit(self) -> None:
        try:
            self._store.set_autocommit(True)
        except (LivrariaError, sqlite3.Error) as exc:
            logger.error("Could not restore autocommit: %s", exc)

    @staticmethod
    def _as_storage_error(exc: Exception, record: BookRecord) -> LivrariaError:
        if isinstance(exc, LivrariaError):
            return exc
        # Anything else raised here comes from the book insert or commit.
        return PersistenceError(
            f"Could not persist book: {exc}",
            table="livros",
            entity=record.title,
            engine_error=type(exc).__name__,
        )


# ABOUTME: Unit tests for batch ingestion over a BookSearchSource.
# ABOUTME: Uses an in-memory fake source against a temporary catalog database.

import logging
from dataclasses import replace

import pytest

from livraria.core.coordinator import BookUpsertCoordinator, UpsertResult
from livraria.core.ingest import IngestResult, ingest_query, ingest_records
from livraria.db.store import CatalogStore
from livraria.errors import PersistenceError, SourceUnavailableError
from livraria.metadata.provider import BookSearchSource
from livraria.metadata.types import BookRecord
from tests.fixtures.catalog_db import count_rows, fail_inserts


class FakeSource:
    """BookSearchSource returning canned records, or failing on demand."""

    def __init__(self, records: list[BookRecord] | None = None, fail: bool = False) -> None:
        self._records = records or []
        self._fail = fail
        self.queries: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def search_books(self, query: str) -> list[BookRecord]:
        self.queries.append(query)
        if self._fail:
            raise SourceUnavailableError("source is down")
        return list(self._records)


class TestFakeSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FakeSource(), BookSearchSource)


class TestIngestRecords:
    def test_all_books_written(
        self,
        store: CatalogStore,
        coordinator: BookUpsertCoordinator,
        war_and_peace: BookRecord,
        anna_karenina: BookRecord,
    ) -> None:
        result = ingest_records([war_and_peace, anna_karenina], coordinator)

        assert result.added == 2
        assert result.failed == 0
        assert [r.title for r in result.results] == ["A Guerra e a Paz", "Anna Kariênina"]
        assert count_rows(store, "livros") == 2
        assert count_rows(store, "autores") == 1

    def test_failed_book_does_not_stop_batch(
        self,
        store: CatalogStore,
        coordinator: BookUpsertCoordinator,
        war_and_peace: BookRecord,
        captains: BookRecord,
    ) -> None:
        fail_inserts(store, "livros", "disk full", when="NEW.titulo = 'Fails'")
        failing = replace(war_and_peace, title="Fails")

        result = ingest_records([failing, captains], coordinator)

        assert result.added == 1
        assert result.failed == 1
        assert not result.results[0].success
        assert isinstance(result.results[0].error, PersistenceError)
        assert result.results[1].success
        assert count_rows(store, "livros") == 1

    def test_error_details(self) -> None:
        result = IngestResult(
            added=1,
            failed=1,
            results=[
                UpsertResult(title="Ok", success=True, book_id=1),
                UpsertResult(title="Bad", success=False, error=PersistenceError("boom")),
            ],
        )
        assert result.error_details == [("Bad", "boom")]

    def test_empty_batch(self, coordinator: BookUpsertCoordinator) -> None:
        result = ingest_records([], coordinator)
        assert result.added == 0
        assert result.failed == 0
        assert result.results == []


class TestIngestQuery:
    def test_passes_query_to_source(
        self,
        store: CatalogStore,
        coordinator: BookUpsertCoordinator,
        war_and_peace: BookRecord,
    ) -> None:
        source = FakeSource([war_and_peace])

        result = ingest_query("cadastre todos os livros do autor Tolstói", source, coordinator)

        assert source.queries == ["cadastre todos os livros do autor Tolstói"]
        assert result.added == 1
        assert count_rows(store, "livros") == 1

    def test_source_failure_writes_nothing(
        self, store: CatalogStore, coordinator: BookUpsertCoordinator
    ) -> None:
        with pytest.raises(SourceUnavailableError):
            ingest_query("anything", FakeSource(fail=True), coordinator)

        for table in ("autores", "generos", "editoras", "livros"):
            assert count_rows(store, table) == 0

    def test_no_records_is_empty_result(
        self, coordinator: BookUpsertCoordinator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="livraria.core.ingest"):
            result = ingest_query("nobody", FakeSource([]), coordinator)

        assert result.results == []
        assert "No books returned by fake" in caplog.text

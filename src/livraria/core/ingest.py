# ABOUTME: Batch ingestion driving the upsert coordinator over a sequence of BookRecords.
# ABOUTME: Failures are counted per book; only a source failure aborts the whole call.

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from livraria.core.coordinator import BookUpsertCoordinator, UpsertResult
from livraria.metadata.provider import BookSearchSource
from livraria.metadata.types import BookRecord

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Summary of an ingestion call."""

    added: int = 0
    failed: int = 0
    results: list[UpsertResult] = field(default_factory=list)

    @property
    def error_details(self) -> list[tuple[str, str]]:
        """(title, message) for every book that was not written."""
        return [(r.title, str(r.error)) for r in self.results if not r.success]


def ingest_records(
    records: Iterable[BookRecord],
    coordinator: BookUpsertCoordinator,
) -> IngestResult:
    """Upsert each record in order, each in its own transaction.

    A failed book is recorded and the batch moves on to the next record.
    """
    result = IngestResult()
    records = list(records)
    for index, record in enumerate(records, start=1):
        logger.debug("[%d/%d] %s", index, len(records), record.title)
        upsert = coordinator.upsert_book(record)
        result.results.append(upsert)
        if upsert.success:
            result.added += 1
        else:
            result.failed += 1
    return result


def ingest_query(
    query: str,
    source: BookSearchSource,
    coordinator: BookUpsertCoordinator,
) -> IngestResult:
    """Fetch records for a query from the source and upsert them.

    Raises:
        SourceUnavailableError: If the source fails. Nothing is written.
    """
    records = source.search_books(query)
    if not records:
        logger.warning("No books returned by %s for query %r", source.name, query)
    return ingest_records(records, coordinator)

# ABOUTME: Core ingestion pipeline: per-book transactional upsert and batch drivers.
# ABOUTME: Exports the coordinator and the ingestion entry points.

from livraria.core.coordinator import BookUpsertCoordinator, UpsertResult
from livraria.core.ingest import IngestResult, ingest_query, ingest_records

__all__ = [
    "BookUpsertCoordinator",
    "IngestResult",
    "UpsertResult",
    "ingest_query",
    "ingest_records",
]

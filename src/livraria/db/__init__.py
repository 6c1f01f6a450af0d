# ABOUTME: Public API for the Livraria catalog database layer.
# ABOUTME: Exports connection management, the transactional store, and the entity resolver.

from livraria.db.connection import open_catalog
from livraria.db.resolver import EntityKind, resolve_or_create
from livraria.db.store import CatalogStore, InsertOutcome, TransactionalStore

__all__ = [
    "CatalogStore",
    "EntityKind",
    "InsertOutcome",
    "TransactionalStore",
    "open_catalog",
    "resolve_or_create",
]

# ABOUTME: Shared pytest fixtures for Livraria tests.
# ABOUTME: Provides connected catalog stores, a coordinator, and sample BookRecords.

from collections.abc import Iterator
from pathlib import Path

import pytest

from livraria.core.coordinator import BookUpsertCoordinator
from livraria.db.store import CatalogStore
from livraria.metadata.types import BookRecord


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary catalog database."""
    return tmp_path / "catalog.db"


@pytest.fixture
def store(db_path: Path) -> Iterator[CatalogStore]:
    """A connected CatalogStore backed by a temporary database."""
    catalog = CatalogStore(db_path)
    catalog.connect()
    yield catalog
    catalog.disconnect()


@pytest.fixture
def coordinator(store: CatalogStore) -> BookUpsertCoordinator:
    return BookUpsertCoordinator(store)


@pytest.fixture
def war_and_peace() -> BookRecord:
    return BookRecord(
        title="A Guerra e a Paz",
        author="Liev Tolstói",
        genre="Romance",
        synopsis="Uma saga",
        publication_year=1869,
        publisher="Editora X",
        origin="Rússia",
        page_count=1225,
        isbn="978-1-234",
    )


@pytest.fixture
def anna_karenina() -> BookRecord:
    return BookRecord(
        title="Anna Kariênina",
        author="Liev Tolstói",
        genre="Romance, Drama",
        synopsis="Um drama em oito partes.",
        publication_year=1877,
        publisher="Editora X",
        origin="Rússia",
        page_count=864,
        isbn="978-1-999",
    )


@pytest.fixture
def captains() -> BookRecord:
    return BookRecord(
        title="Capitães da Areia",
        author="Jorge Amado",
        genre="Ficção, Aventura",
        synopsis="Meninos de rua em Salvador.",
        publication_year=1937,
        publisher="Companhia das Letras",
        origin="Brasil",
        page_count=280,
        isbn="978-8535914061",
    )


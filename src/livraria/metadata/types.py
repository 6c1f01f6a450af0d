# ABOUTME: Core record type produced by the parser and consumed by the upsert coordinator.
# ABOUTME: BookRecord is the transient, validated form of one book before persistence.

from dataclasses import dataclass


@dataclass(frozen=True)
class BookRecord:
    """One parsed book, ready to be persisted.

    All nine fields are required. String fields are already trimmed by the
    parser; `genre` may hold a comma-joined list of sub-genres, of which
    only the first is stored as the book's genre.
    """

    title: str
    author: str
    genre: str
    synopsis: str
    publication_year: int
    publisher: str
    origin: str
    page_count: int
    isbn: str

    @property
    def primary_genre(self) -> str:
        """The genre label before the first comma, trimmed."""
        return self.genre.split(",", 1)[0].strip()

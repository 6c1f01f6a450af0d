# ABOUTME: BookSearchSource protocol defining the contract for inbound catalog sources.
# ABOUTME: Any text-generation or lookup service that yields BookRecords implements this.

from typing import Protocol, runtime_checkable

from livraria.metadata.types import BookRecord


@runtime_checkable
class BookSearchSource(Protocol):
    """Protocol for services that turn a natural-language query into BookRecords.

    Implementations raise SourceUnavailableError when the service fails;
    they never return partial results for a failed call.
    """

    @property
    def name(self) -> str: ...

    def search_books(self, query: str) -> list[BookRecord]: ...

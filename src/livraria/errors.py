# ABOUTME: Exception hierarchy for the Livraria ingestion pipeline.
# ABOUTME: Separates per-record, per-book, and batch-fatal failure classes.


class LivrariaError(Exception):
    """Base class for all Livraria errors."""


class ConfigurationError(LivrariaError):
    """Raised when required configuration is missing or malformed."""


class InputFormatError(LivrariaError):
    """Raised when a catalog record or payload cannot be parsed.

    A single bad record is dropped by the parser; a payload that is
    malformed as a whole is fatal for the ingestion call.
    """


class SourceUnavailableError(LivrariaError):
    """Raised when the external text source fails or returns garbage.

    Always fatal for the ingestion call that triggered it.
    """


class StorageError(LivrariaError):
    """Base class for failures reported by the storage engine.

    Carries the table, entity name, and underlying engine error class
    (when known) so the operator message can name them.
    """

    def __init__(
        self,
        message: str,
        *,
        table: str | None = None,
        entity: str | None = None,
        engine_error: str | None = None,
    ) -> None:
        super().__init__(message)
        self.table = table
        self.entity = entity
        self.engine_error = engine_error

    def __str__(self) -> str:
        message = super().__str__()
        context = []
        if self.table:
            context.append(f"table={self.table}")
        if self.entity:
            context.append(f"entity={self.entity!r}")
        if self.engine_error:
            context.append(f"engine={self.engine_error}")
        if context:
            return f"{message} ({', '.join(context)})"
        return message


class ResolutionError(StorageError):
    """Raised when an author, genre, or publisher cannot be looked up or created."""


class PersistenceError(StorageError):
    """Raised when the book row cannot be written or the transaction cannot commit."""


class ConnectionStateError(PersistenceError):
    """Raised when a storage operation is attempted without a live connection."""

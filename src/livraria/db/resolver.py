# ABOUTME: Entity resolver mapping author, genre, and publisher names to stable row ids.
# ABOUTME: Looks up by exact trimmed name and creates the row when it does not exist yet.

import logging
import sqlite3
from enum import Enum

from livraria.db.store import TransactionalStore
from livraria.errors import ResolutionError

logger = logging.getLogger(__name__)


class EntityKind(Enum):
    """Deduplicated entity tables and their optional secondary column."""

    AUTHOR = ("autores", "nacionalidade")
    GENRE = ("generos", None)
    PUBLISHER = ("editoras", "pais_origem")

    def __init__(self, table: str, secondary_column: str | None) -> None:
        self.table = table
        self.secondary_column = secondary_column


def resolve_or_create(
    store: TransactionalStore,
    kind: EntityKind,
    name: str,
    secondary: str | None = None,
) -> int:
    """Return the id of the named entity, inserting it if it is absent.

    Runs inside whatever transaction the caller has open and never commits
    or rolls back itself. Authors get nationality, publishers get country of
    origin; when the secondary value is None the column is written as NULL.

    A concurrent writer may create the same name between the lookup and the
    insert. The insert then affects no rows and the id is read back instead.

    Raises:
        ResolutionError: If the name is blank, the engine reports an error,
            or no id can be obtained after the insert.
        ValueError: If a secondary value is given for a genre.
    """
    if kind.secondary_column is None and secondary is not None:
        raise ValueError(f"{kind.name.lower()} entities have no secondary attribute")

    trimmed = name.strip()
    if not trimmed:
        raise ResolutionError("Entity name is blank", table=kind.table, entity=name)

    try:
        existing = store.find_id_by_name(kind.table, trimmed)
        if existing is not None:
            return existing

        row: dict[str, str | None] = {"nome": trimmed}
        if kind.secondary_column is not None:
            row[kind.secondary_column] = secondary
        outcome = store.insert(kind.table, row, ignore_conflicts=True)

        if outcome.rowcount == 0:
            # Lost a creation race; the row now exists under the same name.
            existing = store.find_id_by_name(kind.table, trimmed)
            if existing is None:
                raise ResolutionError(
                    "Insert affected no rows and no existing row was found",
                    table=kind.table,
                    entity=trimmed,
                )
            logger.info("%s '%s' was created concurrently (id %d)", kind.table, trimmed, existing)
            return existing
    except sqlite3.Error as exc:
        raise ResolutionError(
            f"Could not resolve entity: {exc}",
            table=kind.table,
            entity=trimmed,
            engine_error=type(exc).__name__,
        ) from exc

    if outcome.last_id is None:
        raise ResolutionError("No generated id returned", table=kind.table, entity=trimmed)

    logger.info("Inserted %s '%s' with id %d", kind.table, trimmed, outcome.last_id)
    return outcome.last_id

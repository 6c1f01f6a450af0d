# ABOUTME: Helpers for inspecting and sabotaging a test catalog database.
# ABOUTME: Row counters and SQLite triggers that force engine failures on insert.

from livraria.db.store import CatalogStore


def count_rows(store: CatalogStore, table: str) -> int:
    """Number of rows in a catalog table."""
    return store.connection.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def fail_inserts(
    store: CatalogStore,
    table: str,
    message: str = "forced failure",
    when: str | None = None,
) -> None:
    """Make inserts into table abort with a constraint error.

    Args:
        when: Optional SQL condition on NEW limiting which rows fail.
    """
    condition = f"WHEN {when} " if when else ""
    store.connection.execute(
        f"CREATE TRIGGER fail_{table} BEFORE INSERT ON {table} {condition}"
        f"BEGIN SELECT RAISE(ABORT, '{message}'); END"
    )


def ignore_inserts(store: CatalogStore, table: str) -> None:
    """Make every insert into table silently affect zero rows."""
    store.connection.execute(
        f"CREATE TRIGGER ignore_{table} BEFORE INSERT ON {table} "
        f"BEGIN SELECT RAISE(IGNORE); END"
    )

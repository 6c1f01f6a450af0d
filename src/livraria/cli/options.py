# ABOUTME: Shared Click options and helpers for Livraria CLI commands.
# ABOUTME: Provides the --db flag and opens the catalog store it points to.

from pathlib import Path

import click

from livraria.config import DEFAULT_DB_PATH, LivrariaConfig
from livraria.db.store import CatalogStore

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Path to catalog database (default: LIVRARIA_DB_PATH or {DEFAULT_DB_PATH})",
)


def catalog_store(config: LivrariaConfig, db_path: Path | None) -> CatalogStore:
    """Unconnected store for --db, falling back to the configured path."""
    return CatalogStore(db_path or config.db_path)

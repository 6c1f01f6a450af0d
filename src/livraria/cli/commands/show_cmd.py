# ABOUTME: The `livraria show` command for listing a catalog table.
# ABOUTME: Renders every row of the chosen table as an aligned Rich table.

from pathlib import Path

import click
from rich.console import Console

from livraria.cli.options import catalog_store, db_option
from livraria.config import LivrariaConfig
from livraria.db.schema import CATALOG_TABLES
from livraria.report import show_table

console = Console()


@click.command("show")
@click.argument("table", type=click.Choice(CATALOG_TABLES))
@db_option
@click.pass_obj
def show(config: LivrariaConfig, table: str, db_path: Path | None) -> None:
    """List every row of TABLE."""
    with catalog_store(config, db_path) as store:
        show_table(store, console, table)

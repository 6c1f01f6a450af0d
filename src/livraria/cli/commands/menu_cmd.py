# ABOUTME: The `livraria menu` command: an interactive loop over the main operations.
# ABOUTME: Offers registering books by author, listing the books table, and exiting.

from pathlib import Path

import click
from rich.console import Console

from livraria.cli.commands import ingest_cmd
from livraria.cli.options import catalog_store, db_option
from livraria.config import LivrariaConfig
from livraria.report import show_table

console = Console()

MENU = """\
-------------------------------
1) Register books by author
2) List registered books
3) Exit
-------------------------------"""


@click.command("menu")
@db_option
@click.pass_obj
def menu(config: LivrariaConfig, db_path: Path | None) -> None:
    """Interactive menu for registering and listing books."""
    with ingest_cmd.open_http_client(config) as http, catalog_store(config, db_path) as store:
        source = ingest_cmd.build_source(config, http)
        while True:
            console.print(MENU)
            choice = click.prompt("Option", type=str).strip()

            if choice == "1":
                author = click.prompt("Author name", type=str)
                ingest_cmd.run_author_ingest(console, source, store, author)
            elif choice == "2":
                show_table(store, console, "livros")
            elif choice == "3":
                break
            else:
                console.print(f"[red]Invalid option:[/red] {choice}")

# ABOUTME: The `livraria add-user` command for registering an operator in usuarios.
# ABOUTME: Inserts a name/email pair and reports duplicates as errors.

from pathlib import Path

import click
from rich.console import Console

from livraria.cli.options import catalog_store, db_option
from livraria.config import LivrariaConfig
from livraria.errors import PersistenceError

console = Console()


@click.command("add-user")
@click.argument("name")
@click.argument("email")
@db_option
@click.pass_obj
def add_user(config: LivrariaConfig, name: str, email: str, db_path: Path | None) -> None:
    """Register a user with NAME and EMAIL."""
    with catalog_store(config, db_path) as store:
        try:
            user_id = store.add_user(name, email)
        except PersistenceError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise SystemExit(1) from exc
    console.print(f"[green]User {user_id} added:[/green] {name} <{email}>")

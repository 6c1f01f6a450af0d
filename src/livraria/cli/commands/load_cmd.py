# ABOUTME: The `livraria load` command for ingesting a saved raw catalog response.
# ABOUTME: Parses delimited or JSON text from a file and upserts each record.

from pathlib import Path

import click
from rich.console import Console

from livraria.cli.options import catalog_store, db_option
from livraria.cli.summary import print_ingest_summary
from livraria.config import LivrariaConfig
from livraria.core.coordinator import BookUpsertCoordinator
from livraria.core.ingest import ingest_records
from livraria.errors import InputFormatError
from livraria.metadata.parser import parse_catalog_text

console = Console()


@click.command("load")
@click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@db_option
@click.pass_obj
def load(config: LivrariaConfig, path: Path, db_path: Path | None) -> None:
    """Upsert the books described in a raw catalog file at PATH."""
    try:
        records = parse_catalog_text(path.read_text(encoding="utf-8"))
    except InputFormatError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    console.print(f"Parsed [bold]{len(records)}[/bold] record(s) from {path.name}\n")

    with catalog_store(config, db_path) as store:
        result = ingest_records(records, BookUpsertCoordinator(store))
    print_ingest_summary(console, result)

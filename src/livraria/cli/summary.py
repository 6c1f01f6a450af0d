# ABOUTME: Console summary of an ingestion run shared by the ingest, load, and menu commands.
# ABOUTME: Prints added/failed counts and the reason each failed book was not written.

from rich.console import Console
from rich.markup import escape

from livraria.core.ingest import IngestResult


def print_ingest_summary(console: Console, result: IngestResult) -> None:
    if not result.results:
        console.print("[yellow]No books were processed.[/yellow]")
        return

    parts = []
    if result.added:
        parts.append(f"[green]{result.added} added[/green]")
    if result.failed:
        parts.append(f"[red]{result.failed} failed[/red]")
    console.print(", ".join(parts))

    if result.error_details:
        console.print(f"\n[yellow]{result.failed} book(s) could not be saved:[/yellow]")
        for title, msg in result.error_details:
            console.print(f"  [dim]{escape(title)}:[/dim] {escape(msg)}")

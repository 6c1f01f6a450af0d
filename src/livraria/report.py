# ABOUTME: Read-only catalog report rendering any catalog table as an aligned Rich table.
# ABOUTME: Column widths come from the longest of each header and its values.

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table

from livraria.db.store import TransactionalStore


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def column_widths(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> list[int]:
    """Width of each column: the longest of its header and every value."""
    widths = [len(name) for name in columns]
    for row in rows:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(_display(value)))
    return widths


def render_table(
    console: Console,
    table_name: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
) -> None:
    """Print rows under their headers, or a notice when there are none."""
    if not rows:
        console.print(f"[yellow]No rows in table '{table_name}'.[/yellow]")
        return

    table = Table(title=table_name)
    for name, width in zip(columns, column_widths(columns, rows), strict=True):
        table.add_column(name, min_width=width)
    for row in rows:
        table.add_row(*(_display(v) for v in row))

    console.print(table)
    console.print(f"\n[dim]{len(rows)} row(s)[/dim]")


def show_table(store: TransactionalStore, console: Console, table_name: str) -> None:
    """Select everything from a catalog table and render it.

    Raises:
        ValueError: If the table is not a catalog table.
    """
    columns, rows = store.select_all(table_name)
    render_table(console, table_name, columns, rows)

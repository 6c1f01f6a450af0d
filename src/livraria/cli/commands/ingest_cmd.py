# ABOUTME: The `livraria ingest` command for registering every book by an author.
# ABOUTME: Queries the text source, then upserts each returned book in its own transaction.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from livraria.cli.options import catalog_store, db_option
from livraria.cli.summary import print_ingest_summary
from livraria.config import LivrariaConfig
from livraria.core.coordinator import BookUpsertCoordinator
from livraria.core.ingest import IngestResult, ingest_query
from livraria.db.store import TransactionalStore
from livraria.errors import ConfigurationError, SourceUnavailableError
from livraria.metadata.groq import GroqBookSource, build_author_query
from livraria.metadata.http import HttpClient, LivrariaHttpClient
from livraria.metadata.provider import BookSearchSource

console = Console()


def open_http_client(config: LivrariaConfig) -> LivrariaHttpClient:
    """HTTP client for the text source. Close it, or use it as a context manager."""
    return LivrariaHttpClient(timeout=config.request_timeout)


def build_source(config: LivrariaConfig, http_client: HttpClient) -> BookSearchSource:
    """The configured inbound text source, sending requests through http_client."""
    return GroqBookSource(http_client=http_client, config=config)


def run_author_ingest(
    out: Console,
    source: BookSearchSource,
    store: TransactionalStore,
    author: str,
) -> IngestResult | None:
    """Ingest all books by an author and print the summary.

    Returns None, after printing the reason, when the source failed.
    """
    out.print(f"Searching books by [bold]{escape(author)}[/bold] via {source.name}...")
    try:
        result = ingest_query(build_author_query(author), source, BookUpsertCoordinator(store))
    except (SourceUnavailableError, ConfigurationError) as exc:
        out.print(f"[red]Error:[/red] {exc}")
        return None
    print_ingest_summary(out, result)
    return result


@click.command("ingest")
@click.argument("author")
@db_option
@click.pass_obj
def ingest(config: LivrariaConfig, author: str, db_path: Path | None) -> None:
    """Register every book by AUTHOR returned by the text source."""
    with open_http_client(config) as http, catalog_store(config, db_path) as store:
        result = run_author_ingest(console, build_source(config, http), store, author)
    if result is None:
        raise SystemExit(1)

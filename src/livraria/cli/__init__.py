# ABOUTME: CLI package for Livraria, built on Click.
# ABOUTME: Defines the root command group, loads configuration, and registers subcommands.

from pathlib import Path

import click

from livraria.cli.commands import ingest_cmd, load_cmd, menu_cmd, show_cmd, user_cmd
from livraria.config import load_config
from livraria.errors import ConfigurationError
from livraria.logging_setup import setup_logging


@click.group()
@click.version_option(package_name="livraria")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this .env file (default: ./.env if present).",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write DEBUG logs to this file.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, env_file: Path | None, log_file: Path | None, verbose: bool) -> None:
    """Livraria - catalog books described by a text-generation service."""
    setup_logging("DEBUG" if verbose else "INFO", log_file=log_file)
    try:
        ctx.obj = load_config(env_file)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc


cli.add_command(ingest_cmd.ingest)
cli.add_command(load_cmd.load)
cli.add_command(show_cmd.show)
cli.add_command(user_cmd.add_user)
cli.add_command(menu_cmd.menu)


def main() -> None:
    cli()

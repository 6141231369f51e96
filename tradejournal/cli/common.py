"""Helpers shared by the CLI command modules."""

import click
from rich.markup import escape
from rich.panel import Panel

from tradejournal.cli.main import console
from tradejournal.config import Settings, load_settings
from tradejournal.log import configure_logging


def print_error(message: str) -> None:
    """Print an error panel."""
    console.print(Panel(
        f"[red]{escape(message)}[/red]",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


def get_settings(ctx: click.Context) -> Settings:
    """Load settings and configure logging for a command.

    Exits with status 1 when the config file is invalid.
    """
    obj = ctx.find_root().obj or {}

    try:
        settings = load_settings(obj.get("config_path"))
    except ValueError as e:
        print_error(str(e))
        raise SystemExit(1)

    level = obj.get("log_level") or settings.logging.level
    configure_logging(level, json=settings.logging.json_output)
    return settings

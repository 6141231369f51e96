"""Setup commands for tradejournal CLI."""

import click
from rich.panel import Panel

from tradejournal.cli.main import console


@click.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Create a config file with default settings.

    \b
    Examples:
      tradejournal init
      tradejournal --config ./config.toml init --force
    """
    from tradejournal.config import create_template_config, get_config_path

    config_path = get_config_path((ctx.find_root().obj or {}).get("config_path"))

    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists:[/yellow] {config_path}\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config[/bold yellow]",
            border_style="yellow",
        ))
        return

    path = create_template_config(config_path)

    console.print(Panel(
        f"[green]Config written to[/green] {path}\n\n"
        "Edit the [cyan]\\[account][/cyan] section to set your balance and risk.",
        title="[bold green]Config[/bold green]",
        border_style="green",
    ))

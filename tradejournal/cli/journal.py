"""Journal commands for tradejournal CLI.

Handles the performance summary and the entry listing for a journal export.
"""

from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradejournal.cli.common import get_settings, print_error
from tradejournal.cli.main import console


def _load(path: Path) -> list:
    from tradejournal.journal_file import load_entries

    try:
        return load_entries(path)
    except ValueError as e:
        print_error(str(e))
        raise SystemExit(1)


def build_stats_table(stats, currency: str = "USD") -> Table:
    """Render TradeStats as a two-column table.

    Args:
        stats: TradeStats to display.
        currency: Currency code for P&L figures.

    Returns:
        A rich Table.
    """
    from tradejournal.analytics import format_currency, format_ratio, pnl_style

    table = Table(
        title="Performance",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    win_rate_color = "green" if stats.win_rate >= 50 else "red"
    total_color = pnl_style(stats.total_pnl)
    avg_color = pnl_style(stats.average_pnl)

    table.add_row("Total Trades", str(stats.total_trades))
    table.add_row("Wins / Losses / BE", f"{stats.winning_trades} / {stats.losing_trades} / {stats.breakeven_trades}")
    table.add_row("Win Rate", f"[{win_rate_color}]{stats.win_rate:.1f}%[/{win_rate_color}]")
    table.add_row("Profit Factor", format_ratio(stats.profit_factor))
    table.add_row("Average R:R", f"1:{stats.average_rr:.2f}")
    table.add_row("Total P&L", f"[{total_color}]{format_currency(stats.total_pnl, currency)}[/{total_color}]")
    table.add_row("Average P&L", f"[{avg_color}]{format_currency(stats.average_pnl, currency)}[/{avg_color}]")
    table.add_row("Largest Win", f"[green]{format_currency(stats.largest_win, currency)}[/green]")
    table.add_row("Largest Loss", f"[red]{format_currency(stats.largest_loss, currency)}[/red]")

    if stats.streak_type.value == "none":
        streak = "-"
    else:
        streak_color = "green" if stats.streak_type.value == "win" else "red"
        streak = f"[{streak_color}]{stats.current_streak} {stats.streak_type.value}[/{streak_color}]"
    table.add_row("Current Streak", streak)
    table.add_row("Best Pair", stats.best_pair or "-")
    table.add_row("Worst Pair", stats.worst_pair or "-")

    return table


@click.command()
@click.argument("journal_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--timeframe",
    "-t",
    type=click.Choice(["week", "month", "all"]),
    default="all",
    show_default=True,
    help="Only count trades from this window.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the statistics as JSON.",
)
@click.pass_context
def stats(ctx: click.Context, journal_file: Path, timeframe: str, as_json: bool) -> None:
    """Display performance statistics for a journal export.

    Only technical entries with a recorded result are counted.

    \b
    Examples:
      tradejournal stats journal.json
      tradejournal stats journal.json --timeframe week
      tradejournal stats journal.json --json
    """
    from tradejournal.analytics import Timeframe, calculate_trade_stats, filter_by_timeframe

    settings = get_settings(ctx)
    entries = _load(journal_file)
    trade_stats = calculate_trade_stats(filter_by_timeframe(entries, Timeframe(timeframe)))

    if as_json:
        click.echo(trade_stats.model_dump_json(indent=2))
        return

    if trade_stats.total_trades == 0:
        console.print(Panel(
            "[dim]No closed trades in this timeframe[/dim]",
            title="[bold]Performance[/bold]",
            border_style="dim",
        ))
        return

    console.print(build_stats_table(trade_stats, settings.account.currency))


@click.command()
@click.argument("journal_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--type",
    "entry_type",
    type=click.Choice(["all", "simple", "technical"]),
    default="all",
    show_default=True,
    help="Entry type to show.",
)
@click.option(
    "--search",
    "-s",
    default="",
    help="Case-insensitive text to match in title, notes or pair.",
)
@click.pass_context
def entries(ctx: click.Context, journal_file: Path, entry_type: str, search: str) -> None:
    """List journal entries, newest first.

    \b
    Examples:
      tradejournal entries journal.json
      tradejournal entries journal.json --type technical --search eurusd
    """
    from tradejournal.analytics import (
        count_entries,
        filter_entries,
        format_currency,
        pnl_style,
        result_style,
    )
    from tradejournal.models import EntryType

    settings = get_settings(ctx)
    all_entries = _load(journal_file)

    selected_type: Optional[EntryType] = None if entry_type == "all" else EntryType(entry_type)
    matches = filter_entries(all_entries, entry_type=selected_type, query=search)

    if not matches:
        console.print(Panel(
            "[dim]No journal entries found[/dim]",
            title="[bold]Journal[/bold]",
            border_style="dim",
        ))
    else:
        table = Table(
            title="Journal",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Date", style="bold")
        table.add_column("Type")
        table.add_column("Title", max_width=30)
        table.add_column("Pair")
        table.add_column("Result")
        table.add_column("P&L", justify="right")

        for entry in sorted(matches, key=lambda e: e.created_at, reverse=True):
            if entry.result is not None:
                style = result_style(entry.result)
                result = f"[{style}]{entry.result.value}[/{style}]"
            else:
                result = "-"

            if entry.pnl is not None:
                color = pnl_style(entry.pnl)
                pnl = f"[{color}]{format_currency(entry.pnl, settings.account.currency)}[/{color}]"
            else:
                pnl = "-"

            table.add_row(
                entry.created_at.strftime("%Y-%m-%d"),
                entry.type.value,
                entry.title or "-",
                entry.pair or "-",
                result,
                pnl,
            )

        console.print(table)

    counts = count_entries(all_entries)
    console.print(
        f"\n[dim]Entries: {counts.total} | Simple: {counts.simple} | "
        f"Technical: {counts.technical} | Wins: {counts.wins} | Losses: {counts.losses}[/dim]"
    )

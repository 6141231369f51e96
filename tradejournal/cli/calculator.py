"""Calculator commands for tradejournal CLI.

Handles position sizing, risk/reward from prices and the instrument list.
"""

from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tradejournal.cli.common import get_settings, print_error
from tradejournal.cli.main import console

CATEGORY_TITLES = {
    "forex": "Forex",
    "indices": "Indices",
    "commodities": "Commodities",
    "crypto": "Crypto",
}


def _resolve_asset(symbol: str):
    from tradejournal.risk import get_asset

    try:
        return get_asset(symbol)
    except KeyError as e:
        print_error(e.args[0])
        raise SystemExit(1)


@click.command()
@click.option("--balance", "-b", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Account balance (default from config).")
@click.option("--risk", "-r", type=click.FloatRange(min=0, max=100, min_open=True), default=None,
              help="Risk per trade in percent (default from config).")
@click.option("--sl", "stop_loss_pips", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Stop-loss distance in pips.")
@click.option("--tp", "take_profit_pips", type=click.FloatRange(min=0), default=None,
              help="Take-profit distance in pips.")
@click.option("--asset", "-a", default=None, help="Instrument symbol, e.g. EURUSD.")
@click.pass_context
def size(
    ctx: click.Context,
    balance: Optional[float],
    risk: Optional[float],
    stop_loss_pips: Optional[float],
    take_profit_pips: Optional[float],
    asset: Optional[str],
) -> None:
    """Calculate the lot size for a trade.

    Sizes the position so that hitting the stop loses the chosen
    percentage of the account. Missing options use config defaults.

    \b
    Examples:
      tradejournal size
      tradejournal size --balance 5000 --risk 2 --sl 30 --tp 90
      tradejournal size --asset XAUUSD --sl 50
    """
    from tradejournal.analytics import format_currency, format_ratio
    from tradejournal.risk import calculate_trade_plan

    settings = get_settings(ctx)
    account = settings.account
    defaults = settings.calculator

    instrument = _resolve_asset(asset or defaults.asset)
    plan = calculate_trade_plan(
        account_balance=balance if balance is not None else account.balance,
        risk_percent=risk if risk is not None else account.risk_percent,
        stop_loss_pips=stop_loss_pips if stop_loss_pips is not None else defaults.stop_loss_pips,
        take_profit_pips=take_profit_pips if take_profit_pips is not None else defaults.take_profit_pips,
        asset=instrument,
    )
    calc = plan.calculation
    currency = account.currency

    size_text = (
        f"[bold]{instrument.name}[/bold] [dim]({instrument.symbol})[/dim]\n\n"
        f"Balance:          {format_currency(plan.account_balance, currency)}\n"
        f"Risk:             {plan.risk_percent:g}% = [red]{format_currency(calc.risk_amount, currency)}[/red]\n"
        f"Stop / Target:    {calc.pips_at_risk:g} / {calc.pips_to_target:g} pips\n"
        f"{'─' * 30}\n"
        f"[bold]Lot Size:         [cyan]{calc.lot_size:.2f}[/cyan][/bold]\n"
        f"Position Size:    {calc.position_size:,.2f} units\n"
        f"Pip Value:        {format_currency(calc.pip_value, currency)}\n"
        f"Potential Profit: [green]{format_currency(calc.potential_profit, currency)}[/green]\n"
        f"Risk:Reward:      1:{format_ratio(calc.risk_reward_ratio)}"
    )

    console.print(Panel(
        size_text,
        title="[bold cyan]Position Size[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.option("--entry", "entry_price", type=click.FloatRange(min=0, min_open=True), required=True,
              help="Planned entry price.")
@click.option("--sl", "stop_loss", type=click.FloatRange(min=0, min_open=True), required=True,
              help="Stop-loss price.")
@click.option("--tp", "take_profit", type=click.FloatRange(min=0, min_open=True), required=True,
              help="Take-profit price.")
@click.option("--asset", "-a", default=None, help="Instrument symbol, e.g. EURUSD.")
@click.pass_context
def rr(
    ctx: click.Context,
    entry_price: float,
    stop_loss: float,
    take_profit: float,
    asset: Optional[str],
) -> None:
    """Calculate pip distances and risk:reward from prices.

    \b
    Examples:
      tradejournal rr --entry 1.0850 --sl 1.0830 --tp 1.0910
      tradejournal rr --entry 2350 --sl 2340 --tp 2380 --asset XAUUSD
    """
    from tradejournal.risk import calculate_risk_reward

    settings = get_settings(ctx)
    instrument = _resolve_asset(asset or settings.calculator.asset)
    result = calculate_risk_reward(entry_price, stop_loss, take_profit, instrument)

    ratio_color = "green" if result.ratio >= 2 else "yellow" if result.ratio >= 1 else "red"

    rr_text = (
        f"[bold]{instrument.name}[/bold] [dim]({instrument.symbol})[/dim]\n\n"
        f"Risk:        [red]{result.risk_pips:g} pips[/red]\n"
        f"Reward:      [green]{result.reward_pips:g} pips[/green]\n"
        f"Risk:Reward: [{ratio_color}]1:{result.ratio:.2f}[/{ratio_color}]"
    )

    console.print(Panel(
        rr_text,
        title="[bold cyan]Risk/Reward[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.option(
    "--category",
    "-c",
    type=click.Choice(list(CATEGORY_TITLES)),
    default=None,
    help="Only list one category.",
)
def assets(category: Optional[str]) -> None:
    """List the instruments known to the calculator.

    \b
    Examples:
      tradejournal assets
      tradejournal assets --category indices
    """
    from tradejournal.models import AssetCategory
    from tradejournal.risk import get_assets_by_category

    categories = [AssetCategory(category)] if category else list(AssetCategory)

    table = Table(
        title="Instruments",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Symbol", style="bold")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Pip Value", justify="right")
    table.add_column("Pip Size", justify="right")
    table.add_column("Contract", justify="right")

    for cat in categories:
        for asset in get_assets_by_category(cat):
            table.add_row(
                asset.symbol,
                asset.name,
                CATEGORY_TITLES[cat.value],
                f"{asset.pip_value:g}",
                f"{asset.pip_size:g}",
                f"{asset.contract_size:,.0f}",
            )

    console.print(table)

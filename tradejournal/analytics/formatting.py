"""Display helpers shared by the CLI tables and panels."""

from typing import Optional

from tradejournal.models import INFINITE, Ratio, TradeResult

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(value: float, currency: str = "USD") -> str:
    """Format an amount with two decimals and thousands separators.

    Known currencies get their symbol (``-$1,234.50``), others are
    prefixed with the code (``CHF 1,234.50``).
    """
    code = currency.upper()
    sign = "-" if value < 0 else ""
    amount = f"{abs(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{amount}"
    return f"{sign}{code} {amount}"


def format_percentage(value: float) -> str:
    """Signed percentage, e.g. ``+12.34%``."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def format_number(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}"


def format_ratio(value: Ratio, decimals: int = 2) -> str:
    if value == INFINITE:
        return "∞"
    return format_number(value, decimals)


def pnl_style(pnl: float) -> str:
    """Rich style for a P&L figure."""
    if pnl > 0:
        return "green"
    if pnl < 0:
        return "red"
    return "dim"


def result_style(result: Optional[TradeResult]) -> str:
    """Rich style for a trade result badge."""
    if result == TradeResult.WIN:
        return "green"
    if result == TradeResult.LOSS:
        return "red"
    if result == TradeResult.BREAKEVEN:
        return "yellow"
    return ""

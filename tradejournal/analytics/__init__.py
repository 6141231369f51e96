"""Journal analytics: aggregate statistics, filters and display helpers."""

from tradejournal.analytics.filters import (
    Timeframe,
    count_entries,
    filter_by_timeframe,
    filter_entries,
)
from tradejournal.analytics.formatting import (
    format_currency,
    format_number,
    format_percentage,
    format_ratio,
    pnl_style,
    result_style,
)
from tradejournal.analytics.stats import (
    calculate_trade_stats,
    current_streak,
    pair_performance,
    trade_risk_reward,
)

__all__ = [
    "Timeframe",
    "count_entries",
    "filter_by_timeframe",
    "filter_entries",
    "format_currency",
    "format_number",
    "format_percentage",
    "format_ratio",
    "pnl_style",
    "result_style",
    "calculate_trade_stats",
    "current_streak",
    "pair_performance",
    "trade_risk_reward",
]

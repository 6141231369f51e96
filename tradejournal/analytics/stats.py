"""Aggregate trade statistics over journal entries.

Only technical entries with a recorded result count as trades. Every
function here is pure: inputs are never mutated and missing numbers fall
back to zero instead of raising.
"""

from typing import Iterable, Optional

from tradejournal.log import get_logger
from tradejournal.models import (
    INFINITE,
    JournalEntry,
    PairPerformance,
    Ratio,
    StreakType,
    TradeResult,
    TradeStats,
)

logger = get_logger("analytics.stats")


def _pnl(entry: JournalEntry) -> float:
    return entry.pnl if entry.pnl is not None else 0.0


def trade_risk_reward(entry: JournalEntry) -> float:
    """Realized risk:reward of a single trade.

    Args:
        entry: Journal entry with entry, stop and exit prices.

    Returns:
        Reward distance over risk distance, or 0.0 when any price is
        missing or the stop sits at the entry.
    """
    if entry.entry_price is None or entry.stop_loss is None or entry.exit_price is None:
        return 0.0

    risk = abs(entry.entry_price - entry.stop_loss)
    reward = abs(entry.exit_price - entry.entry_price)
    return reward / risk if risk > 0 else 0.0


def current_streak(trades: Iterable[JournalEntry]) -> tuple[int, StreakType]:
    """Count the run of identical results ending at the most recent trade.

    A breakeven as the latest trade means no streak. Trades with equal
    timestamps keep their input order.

    Args:
        trades: Closed trades in any order.

    Returns:
        Tuple of (streak length, streak type).
    """
    ordered = sorted(trades, key=lambda t: t.created_at, reverse=True)
    if not ordered:
        return 0, StreakType.NONE

    latest = ordered[0].result
    if latest not in (TradeResult.WIN, TradeResult.LOSS):
        return 0, StreakType.NONE

    streak = 0
    for trade in ordered:
        if trade.result != latest:
            break
        streak += 1

    return streak, StreakType(latest.value)


def pair_performance(trades: Iterable[JournalEntry]) -> list[PairPerformance]:
    """Group trades by instrument.

    Entries without a pair are skipped. The result keeps the order in
    which each pair was first seen.

    Args:
        trades: Closed trades.

    Returns:
        One PairPerformance per pair.
    """
    totals: dict[str, dict] = {}

    for trade in trades:
        if not trade.pair:
            continue
        row = totals.setdefault(trade.pair, {"wins": 0, "losses": 0, "pnl": 0.0})
        if trade.result == TradeResult.WIN:
            row["wins"] += 1
        elif trade.result == TradeResult.LOSS:
            row["losses"] += 1
        row["pnl"] += _pnl(trade)

    return [PairPerformance(pair=pair, **row) for pair, row in totals.items()]


def _profit_factor(total_win_pnl: float, total_loss_pnl: float) -> Ratio:
    if total_loss_pnl > 0:
        return total_win_pnl / total_loss_pnl
    if total_win_pnl > 0:
        return INFINITE
    return 0.0


def _best_and_worst(pairs: list[PairPerformance]) -> tuple[Optional[str], Optional[str]]:
    if not pairs:
        return None, None
    # max/min return the first extreme, so ties go to the earliest pair.
    best = max(pairs, key=lambda p: p.pnl)
    worst = min(pairs, key=lambda p: p.pnl)
    return best.pair, worst.pair


def calculate_trade_stats(entries: Iterable[JournalEntry]) -> TradeStats:
    """Compute aggregate performance statistics.

    Args:
        entries: Journal entries of any type; only closed technical
            trades are counted.

    Returns:
        TradeStats for the closed trades. An input without closed trades
        yields ``TradeStats.empty()``.
    """
    trades = [e for e in entries if e.is_closed_trade]

    if not trades:
        return TradeStats.empty()

    wins = [t for t in trades if t.result == TradeResult.WIN]
    losses = [t for t in trades if t.result == TradeResult.LOSS]
    breakevens = [t for t in trades if t.result == TradeResult.BREAKEVEN]

    pnl_values = [_pnl(t) for t in trades]
    total_pnl = sum(pnl_values)
    total_win_pnl = sum(_pnl(t) for t in wins)
    total_loss_pnl = abs(sum(_pnl(t) for t in losses))

    rr_values = [rr for rr in (trade_risk_reward(t) for t in trades) if rr > 0]
    average_rr = sum(rr_values) / len(rr_values) if rr_values else 0.0

    streak, streak_type = current_streak(trades)
    best_pair, worst_pair = _best_and_worst(pair_performance(trades))

    stats = TradeStats(
        total_trades=len(trades),
        winning_trades=len(wins),
        losing_trades=len(losses),
        breakeven_trades=len(breakevens),
        win_rate=len(wins) / len(trades) * 100,
        profit_factor=_profit_factor(total_win_pnl, total_loss_pnl),
        average_rr=average_rr,
        total_pnl=total_pnl,
        average_pnl=total_pnl / len(trades),
        largest_win=max(pnl_values + [0.0]),
        largest_loss=abs(min(pnl_values + [0.0])),
        current_streak=streak,
        streak_type=streak_type,
        best_pair=best_pair,
        worst_pair=worst_pair,
    )

    logger.debug("trade_stats_computed", trades=stats.total_trades, win_rate=stats.win_rate)
    return stats

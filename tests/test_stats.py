"""Property-based tests for trade statistics aggregation.

**Feature: trade-journal**
"""

from datetime import datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradejournal.analytics import (
    calculate_trade_stats,
    current_streak,
    pair_performance,
    trade_risk_reward,
)
from tradejournal.models import (
    INFINITE,
    EntryType,
    JournalEntry,
    StreakType,
    TradeResult,
    TradeStats,
)

from conftest import entry_strategy, hours_after, make_entry


class TestEmptyInput:
    """
    *For any* input without closed technical trades, the statistics
    should be the zeroed record.
    """

    def test_empty_list(self):
        stats = calculate_trade_stats([])

        assert stats == TradeStats.empty()
        assert stats.total_trades == 0
        assert stats.streak_type == StreakType.NONE
        assert stats.best_pair is None
        assert stats.worst_pair is None

    def test_only_simple_and_open_entries(self):
        entries = [
            make_entry(type=EntryType.SIMPLE, result=None, pnl=None),
            make_entry(type=EntryType.SIMPLE, result=TradeResult.WIN, pnl=50.0),
            make_entry(result=None, pnl=25.0, pair="EURUSD"),
        ]

        assert calculate_trade_stats(entries) == TradeStats.empty()


class TestCountPartition:
    """
    *For any* list of entries, wins + losses + breakevens should equal
    the number of closed technical trades.
    """

    @given(entries=st.lists(entry_strategy(), max_size=40))
    @settings(max_examples=100)
    def test_counts_add_up(self, entries: list[JournalEntry]):
        stats = calculate_trade_stats(entries)

        closed = [e for e in entries if e.type == EntryType.TECHNICAL and e.result is not None]
        assert stats.total_trades == len(closed)
        assert (
            stats.winning_trades + stats.losing_trades + stats.breakeven_trades
            == stats.total_trades
        )

    @given(entries=st.lists(entry_strategy(), max_size=40))
    @settings(max_examples=100)
    def test_win_rate_bounds(self, entries: list[JournalEntry]):
        stats = calculate_trade_stats(entries)

        if stats.total_trades == 0:
            assert stats.win_rate == 0
        else:
            assert 0 <= stats.win_rate <= 100

    @given(entries=st.lists(entry_strategy(), max_size=40))
    @settings(max_examples=100)
    def test_total_pnl_treats_null_as_zero(self, entries: list[JournalEntry]):
        stats = calculate_trade_stats(entries)

        expected = sum(
            e.pnl or 0.0
            for e in entries
            if e.type == EntryType.TECHNICAL and e.result is not None
        )
        assert stats.total_pnl == pytest.approx(expected)

    @given(entries=st.lists(entry_strategy(), max_size=40))
    @settings(max_examples=100)
    def test_magnitudes_are_non_negative(self, entries: list[JournalEntry]):
        stats = calculate_trade_stats(entries)

        assert stats.largest_win >= 0
        assert stats.largest_loss >= 0
        assert stats.average_rr >= 0


class TestIdempotence:
    """
    *For any* input, aggregating twice should give identical results
    and leave the input untouched.
    """

    @given(entries=st.lists(entry_strategy(), max_size=30))
    @settings(max_examples=50)
    def test_repeatable(self, entries: list[JournalEntry]):
        snapshot = list(entries)

        first = calculate_trade_stats(entries)
        second = calculate_trade_stats(entries)

        assert first == second
        assert entries == snapshot


class TestProfitFactor:
    """
    *For any* set of profitable trades without losses and with at least
    one win, the profit factor should be the infinite marker.
    """

    @given(
        pnls=st.lists(
            st.floats(min_value=0.01, max_value=10000.0, allow_nan=False, allow_infinity=False),
            min_size=1,
            max_size=20,
        ),
        results=st.lists(st.sampled_from([TradeResult.WIN, TradeResult.BREAKEVEN]), min_size=20, max_size=20),
    )
    @settings(max_examples=50)
    def test_all_profitable_is_infinite(self, pnls: list[float], results: list[TradeResult]):
        results = [TradeResult.WIN] + results[1:]
        entries = [make_entry(pnl=pnl, result=result) for pnl, result in zip(pnls, results)]

        assert calculate_trade_stats(entries).profit_factor == INFINITE

    def test_profitable_breakevens_alone_are_zero(self):
        entries = [make_entry(result=TradeResult.BREAKEVEN, pnl=1.0)]

        assert calculate_trade_stats(entries).profit_factor == 0.0

    def test_ratio_of_gross_win_to_gross_loss(self):
        entries = [
            make_entry(result=TradeResult.WIN, pnl=300.0),
            make_entry(result=TradeResult.LOSS, pnl=-100.0),
            make_entry(result=TradeResult.LOSS, pnl=-50.0),
        ]

        assert calculate_trade_stats(entries).profit_factor == pytest.approx(2.0)

    def test_zero_when_no_wins_or_losses(self):
        entries = [make_entry(result=TradeResult.BREAKEVEN, pnl=0.0)]

        assert calculate_trade_stats(entries).profit_factor == 0.0

    def test_infinite_survives_json(self):
        stats = calculate_trade_stats([make_entry(pnl=10.0)])

        restored = TradeStats.model_validate_json(stats.model_dump_json())
        assert restored.profit_factor == INFINITE


class TestScenario:
    """Worked example: two wins after a loss."""

    def test_two_wins_one_loss(self):
        entries = [
            make_entry(result=TradeResult.WIN, pnl=100.0, created_at=hours_after(3)),
            make_entry(result=TradeResult.WIN, pnl=50.0, created_at=hours_after(2)),
            make_entry(result=TradeResult.LOSS, pnl=-30.0, created_at=hours_after(1)),
        ]

        stats = calculate_trade_stats(entries)

        assert stats.total_trades == 3
        assert stats.winning_trades == 2
        assert stats.losing_trades == 1
        assert stats.win_rate == pytest.approx(66.67, abs=0.01)
        assert stats.total_pnl == pytest.approx(120.0)
        assert stats.average_pnl == pytest.approx(40.0)
        assert stats.profit_factor == pytest.approx(5.0)
        assert stats.current_streak == 2
        assert stats.streak_type == StreakType.WIN
        assert stats.largest_win == pytest.approx(100.0)
        assert stats.largest_loss == pytest.approx(30.0)

    def test_input_order_does_not_change_streak(self):
        entries = [
            make_entry(result=TradeResult.LOSS, pnl=-30.0, created_at=hours_after(1)),
            make_entry(result=TradeResult.WIN, pnl=100.0, created_at=hours_after(3)),
            make_entry(result=TradeResult.WIN, pnl=50.0, created_at=hours_after(2)),
        ]

        stats = calculate_trade_stats(entries)

        assert stats.current_streak == 2
        assert stats.streak_type == StreakType.WIN


class TestStreak:
    """Streak counting from the most recent trade."""

    def test_loss_streak(self):
        trades = [
            make_entry(result=TradeResult.LOSS, created_at=hours_after(5)),
            make_entry(result=TradeResult.LOSS, created_at=hours_after(4)),
            make_entry(result=TradeResult.LOSS, created_at=hours_after(3)),
            make_entry(result=TradeResult.WIN, created_at=hours_after(2)),
        ]

        assert current_streak(trades) == (3, StreakType.LOSS)

    def test_breakeven_latest_means_no_streak(self):
        trades = [
            make_entry(result=TradeResult.BREAKEVEN, created_at=hours_after(5)),
            make_entry(result=TradeResult.WIN, created_at=hours_after(4)),
        ]

        assert current_streak(trades) == (0, StreakType.NONE)

    def test_breakeven_ends_streak(self):
        trades = [
            make_entry(result=TradeResult.WIN, created_at=hours_after(5)),
            make_entry(result=TradeResult.BREAKEVEN, created_at=hours_after(4)),
            make_entry(result=TradeResult.WIN, created_at=hours_after(3)),
        ]

        assert current_streak(trades) == (1, StreakType.WIN)

    def test_equal_timestamps_keep_input_order(self):
        trades = [
            make_entry(result=TradeResult.LOSS, created_at=hours_after(1)),
            make_entry(result=TradeResult.WIN, created_at=hours_after(1)),
        ]

        assert current_streak(trades) == (1, StreakType.LOSS)

    def test_naive_and_aware_timestamps_mix(self):
        trades = [
            make_entry(result=TradeResult.WIN, created_at=datetime(2024, 5, 1, 14, 0)),
            make_entry(result=TradeResult.LOSS, created_at=hours_after(1)),
        ]

        assert current_streak(trades) == (1, StreakType.WIN)

    def test_no_trades(self):
        assert current_streak([]) == (0, StreakType.NONE)


class TestRiskReward:
    """Realized risk:reward per trade and its average."""

    def test_long_trade(self):
        trade = make_entry(entry_price=1.1000, stop_loss=1.0980, exit_price=1.1040)

        assert trade_risk_reward(trade) == pytest.approx(2.0)

    def test_short_trade(self):
        trade = make_entry(entry_price=2000.0, stop_loss=2010.0, exit_price=1970.0)

        assert trade_risk_reward(trade) == pytest.approx(3.0)

    def test_missing_price(self):
        assert trade_risk_reward(make_entry(entry_price=1.1, stop_loss=1.09)) == 0.0

    def test_stop_at_entry(self):
        trade = make_entry(entry_price=1.1, stop_loss=1.1, exit_price=1.2)

        assert trade_risk_reward(trade) == 0.0

    def test_average_skips_uncomputable(self):
        entries = [
            make_entry(entry_price=100.0, stop_loss=90.0, exit_price=120.0),
            make_entry(entry_price=100.0, stop_loss=90.0, exit_price=140.0),
            make_entry(entry_price=100.0),
            make_entry(entry_price=100.0, stop_loss=100.0, exit_price=110.0),
        ]

        assert calculate_trade_stats(entries).average_rr == pytest.approx(3.0)


class TestPairPerformance:
    """Best and worst pair selection."""

    def test_groups_by_pair(self):
        trades = [
            make_entry(pair="EURUSD", result=TradeResult.WIN, pnl=100.0),
            make_entry(pair="GBPUSD", result=TradeResult.LOSS, pnl=-80.0),
            make_entry(pair="EURUSD", result=TradeResult.LOSS, pnl=-20.0),
            make_entry(pair=None, result=TradeResult.WIN, pnl=500.0),
        ]

        rows = {p.pair: p for p in pair_performance(trades)}

        assert set(rows) == {"EURUSD", "GBPUSD"}
        assert rows["EURUSD"].wins == 1
        assert rows["EURUSD"].losses == 1
        assert rows["EURUSD"].pnl == pytest.approx(80.0)

        stats = calculate_trade_stats(trades)
        assert stats.best_pair == "EURUSD"
        assert stats.worst_pair == "GBPUSD"

    def test_ties_go_to_first_seen_pair(self):
        trades = [
            make_entry(pair="USDJPY", pnl=50.0),
            make_entry(pair="AUDUSD", pnl=50.0),
        ]

        stats = calculate_trade_stats(trades)

        assert stats.best_pair == "USDJPY"
        assert stats.worst_pair == "USDJPY"

    def test_no_pair_data(self):
        stats = calculate_trade_stats([make_entry(pnl=10.0)])

        assert stats.best_pair is None
        assert stats.worst_pair is None

"""Tests for entry filters and journal counters."""

from datetime import datetime, timedelta, timezone

from tradejournal.analytics import Timeframe, count_entries, filter_by_timeframe, filter_entries
from tradejournal.analytics.filters import timeframe_start
from tradejournal.models import EntryType, TradeResult

from conftest import make_entry

NOW = datetime(2024, 3, 31, 15, 30, tzinfo=timezone.utc)


class TestTimeframe:
    """Timeframe windows relative to a fixed reference time."""

    def test_week_window(self):
        inside = make_entry(created_at=NOW - timedelta(days=6, hours=23))
        outside = make_entry(created_at=NOW - timedelta(days=7, seconds=1))

        assert filter_by_timeframe([inside, outside], Timeframe.WEEK, now=NOW) == [inside]

    def test_month_starts_at_midnight_with_clamped_day(self):
        # March 31 -> February has 29 days in 2024.
        assert timeframe_start(Timeframe.MONTH, NOW) == datetime(2024, 2, 29, tzinfo=timezone.utc)

    def test_month_wraps_year(self):
        now = datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc)

        assert timeframe_start(Timeframe.MONTH, now) == datetime(2023, 12, 15, tzinfo=timezone.utc)

    def test_month_window(self):
        inside = make_entry(created_at=datetime(2024, 2, 29, 0, 0, tzinfo=timezone.utc))
        outside = make_entry(created_at=datetime(2024, 2, 28, 23, 59, tzinfo=timezone.utc))

        assert filter_by_timeframe([inside, outside], Timeframe.MONTH, now=NOW) == [inside]

    def test_all_keeps_everything(self):
        entries = [make_entry(created_at=datetime(2001, 1, 1, tzinfo=timezone.utc))]

        assert filter_by_timeframe(entries, Timeframe.ALL, now=NOW) == entries

    def test_naive_now_is_treated_as_utc(self):
        assert timeframe_start(Timeframe.WEEK, datetime(2024, 3, 31)) == datetime(
            2024, 3, 24, tzinfo=timezone.utc
        )


class TestFilterEntries:
    """Type filter and text search."""

    def setup_method(self):
        self.reflection = make_entry(
            type=EntryType.SIMPLE, title="Weekly review", content="Stayed patient", result=None
        )
        self.trade = make_entry(title="Breakout", pair="EURUSD")
        self.other = make_entry(title="Gold fade", pair="XAUUSD", content="Faded the London high")

    def test_type_filter(self):
        entries = [self.reflection, self.trade, self.other]

        assert filter_entries(entries, entry_type=EntryType.SIMPLE) == [self.reflection]
        assert filter_entries(entries, entry_type=EntryType.TECHNICAL) == [self.trade, self.other]
        assert filter_entries(entries) == entries

    def test_search_is_case_insensitive_across_fields(self):
        entries = [self.reflection, self.trade, self.other]

        assert filter_entries(entries, query="eurusd") == [self.trade]
        assert filter_entries(entries, query="PATIENT") == [self.reflection]
        assert filter_entries(entries, query="london") == [self.other]
        assert filter_entries(entries, query="review") == [self.reflection]

    def test_search_combines_with_type(self):
        entries = [self.reflection, self.trade, self.other]

        assert filter_entries(entries, entry_type=EntryType.SIMPLE, query="gold") == []


class TestCountEntries:
    def test_counts(self):
        entries = [
            make_entry(type=EntryType.SIMPLE, result=None),
            make_entry(result=TradeResult.WIN),
            make_entry(result=TradeResult.LOSS),
            make_entry(result=TradeResult.BREAKEVEN),
            make_entry(result=None),
        ]

        counts = count_entries(entries)

        assert counts.total == 5
        assert counts.simple == 1
        assert counts.technical == 4
        assert counts.wins == 1
        assert counts.losses == 1

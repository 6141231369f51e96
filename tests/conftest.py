"""Shared fixtures and builders for tradejournal tests."""

from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import strategies as st

from tradejournal.models import EntryType, JournalEntry, TradeResult

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_entry(**overrides) -> JournalEntry:
    """Build a closed technical trade, overriding any field."""
    fields = {
        "type": EntryType.TECHNICAL,
        "title": "Trade",
        "result": TradeResult.WIN,
        "pnl": 0.0,
        "created_at": BASE_TIME,
    }
    fields.update(overrides)
    return JournalEntry(**fields)


def hours_after(hours: int) -> datetime:
    return BASE_TIME + timedelta(hours=hours)


def entry_strategy():
    """Generate valid JournalEntry objects for testing."""
    prices = st.one_of(
        st.none(),
        st.floats(min_value=0.0001, max_value=100000.0, allow_nan=False, allow_infinity=False),
    )
    return st.builds(
        JournalEntry,
        type=st.sampled_from(list(EntryType)),
        title=st.text(max_size=20),
        pair=st.one_of(st.none(), st.sampled_from(["EURUSD", "GBPUSD", "XAUUSD", "NAS100"])),
        entry_price=prices,
        exit_price=prices,
        stop_loss=prices,
        result=st.one_of(st.none(), st.sampled_from(list(TradeResult))),
        pnl=st.one_of(
            st.none(),
            st.floats(min_value=-100000.0, max_value=100000.0, allow_nan=False, allow_infinity=False),
        ),
        created_at=st.datetimes(
            min_value=datetime(2020, 1, 1),
            max_value=datetime(2025, 12, 31),
        ),
    )


@pytest.fixture
def config_path(tmp_path):
    """Path for an isolated config file (not created)."""
    return tmp_path / "config.toml"

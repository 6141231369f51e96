"""Entry selection helpers used before aggregating or listing."""

import calendar
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Iterable, Optional

from tradejournal.models import EntryType, JournalCounts, JournalEntry, TradeResult


class Timeframe(str, Enum):
    """Reporting window for analytics."""

    WEEK = "week"
    MONTH = "month"
    ALL = "all"


def _month_ago(now: datetime) -> datetime:
    """Midnight of the same calendar day one month before ``now``.

    Days past the end of the previous month are clamped to its last day
    (Mar 31 gives Feb 29 in 2024) rather than rolled over into the
    following month as JavaScript's ``Date`` does (Mar 2).
    """
    year, month = (now.year, now.month - 1) if now.month > 1 else (now.year - 1, 12)
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day, hour=0, minute=0, second=0, microsecond=0)


def timeframe_start(timeframe: Timeframe, now: Optional[datetime] = None) -> Optional[datetime]:
    """Earliest timestamp included in a timeframe, or None for all time."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    if timeframe == Timeframe.WEEK:
        return now - timedelta(days=7)
    if timeframe == Timeframe.MONTH:
        return _month_ago(now)
    return None


def filter_by_timeframe(
    entries: Iterable[JournalEntry],
    timeframe: Timeframe,
    now: Optional[datetime] = None,
) -> list[JournalEntry]:
    """Keep entries created within the timeframe.

    Args:
        entries: Journal entries.
        timeframe: Window to keep.
        now: Reference time, defaults to the current UTC time.

    Returns:
        Entries created at or after the window start, in input order.
    """
    start = timeframe_start(timeframe, now)
    if start is None:
        return list(entries)
    return [e for e in entries if e.created_at >= start]


def filter_entries(
    entries: Iterable[JournalEntry],
    entry_type: Optional[EntryType] = None,
    query: str = "",
) -> list[JournalEntry]:
    """Filter entries by type and a case-insensitive text search.

    The query matches against title, content and pair.

    Args:
        entries: Journal entries.
        entry_type: Type to keep, or None for every type.
        query: Search text; empty matches everything.

    Returns:
        Matching entries in input order.
    """
    needle = query.strip().lower()
    matches = []

    for entry in entries:
        if entry_type is not None and entry.type != entry_type:
            continue
        if needle:
            haystacks = (entry.title, entry.content or "", entry.pair or "")
            if not any(needle in text.lower() for text in haystacks):
                continue
        matches.append(entry)

    return matches


def count_entries(entries: Iterable[JournalEntry]) -> JournalCounts:
    """Tally entries by type and by win/loss result."""
    entries = list(entries)
    return JournalCounts(
        total=len(entries),
        simple=sum(1 for e in entries if e.type == EntryType.SIMPLE),
        technical=sum(1 for e in entries if e.type == EntryType.TECHNICAL),
        wins=sum(1 for e in entries if e.result == TradeResult.WIN),
        losses=sum(1 for e in entries if e.result == TradeResult.LOSS),
    )

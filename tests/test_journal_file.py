"""Tests for loading journal exports."""

import json

import pytest

from tradejournal.journal_file import load_entries, parse_entries
from tradejournal.models import EntryType

ROWS = [
    {
        "type": "technical",
        "title": "Breakout",
        "pair": "EURUSD",
        "result": "win",
        "pnl": 100.0,
        "created_at": "2024-05-02T08:15:00Z",
    },
    {
        "type": "simple",
        "title": "Notes",
        "content": "Sat on hands",
        "created_at": "2024-05-03T20:00:00Z",
    },
]


def test_loads_array(tmp_path):
    path = tmp_path / "journal.json"
    path.write_text(json.dumps(ROWS))

    entries = load_entries(path)

    assert [e.type for e in entries] == [EntryType.TECHNICAL, EntryType.SIMPLE]
    assert entries[0].pnl == 100.0


def test_loads_wrapped_object(tmp_path):
    path = tmp_path / "journal.json"
    path.write_text(json.dumps({"entries": ROWS}))

    assert len(load_entries(path)) == 2


def test_missing_file(tmp_path):
    with pytest.raises(ValueError, match="not found"):
        load_entries(tmp_path / "nope.json")


def test_bad_json(tmp_path):
    path = tmp_path / "journal.json"
    path.write_text("[{")

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_entries(path)


def test_invalid_entry():
    with pytest.raises(ValueError, match="Invalid journal entries"):
        parse_entries([{"type": "technical"}])


def test_object_without_entries():
    with pytest.raises(ValueError, match="entries"):
        parse_entries({"rows": []})


def test_nan_pnl_is_rejected(tmp_path):
    path = tmp_path / "journal.json"
    path.write_text(
        '[{"type": "technical", "result": "win", "pnl": NaN, "created_at": "2024-05-02T08:15:00Z"}]'
    )

    with pytest.raises(ValueError, match="Invalid journal entries"):
        load_entries(path)

"""Read journal entries exported from the hosted store as JSON."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tradejournal.log import get_logger
from tradejournal.models import JournalEntry

logger = get_logger("journal_file")

_ENTRIES_ADAPTER = TypeAdapter(list[JournalEntry])


def parse_entries(data: object) -> list[JournalEntry]:
    """Validate already-decoded JSON into journal entries.

    Accepts either a list of entry objects or an object holding them
    under an ``entries`` key.

    Raises:
        ValueError: If the data does not describe a list of entries.
    """
    if isinstance(data, dict):
        if "entries" not in data:
            raise ValueError("Expected a list of entries or an object with an 'entries' key")
        data = data["entries"]

    try:
        return _ENTRIES_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ValueError(f"Invalid journal entries:\n{e}") from e


def load_entries(path: Path) -> list[JournalEntry]:
    """Load journal entries from a JSON export file.

    Args:
        path: Path to the export.

    Returns:
        Entries in file order.

    Raises:
        ValueError: If the file is missing, is not JSON, or holds invalid entries.
    """
    path = Path(path)

    if not path.exists():
        raise ValueError(f"Journal file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    entries = parse_entries(data)
    logger.debug("journal_loaded", path=str(path), entries=len(entries))
    return entries

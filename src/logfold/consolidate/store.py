"""Group entries into records and keep the most recent ones."""

from dataclasses import dataclass
from typing import Sequence

from .keys import extract_key
from .suffix import parse_repeat_suffix

# Number of distinct entries kept in the log file
MAX_LOG_LINES = 1000


@dataclass
class Record:
    """All entries sharing one key."""
    base_line: str  # newest entry text, without repeat suffix
    count: int
    last_index: int


def consolidate(entries: Sequence[str]) -> list[Record]:
    """Fold entries with equal keys into records, in first-seen order.

    Each entry counts once, or N times when it carries a
    '(repeated N times)' suffix. A record keeps the text and position of
    the newest entry for its key.
    """
    records: dict[str, Record] = {}

    for i, entry in enumerate(entries):
        parsed = parse_repeat_suffix(entry)
        if parsed is None:
            count, base = 1, entry
        else:
            count, base = parsed[0], entry[:parsed[1]]

        key = extract_key(base)
        record = records.get(key)
        if record is None:
            records[key] = Record(base_line=base, count=count, last_index=i)
        else:
            record.count += count
            record.last_index = i
            record.base_line = base

    return list(records.values())


def trim(records: Sequence[Record], max_count: int = MAX_LOG_LINES) -> list[Record]:
    """Order records by last occurrence and keep the newest max_count."""
    if max_count < 1:
        raise ValueError(f"max_count must be at least 1, got {max_count}")

    ordered = sorted(records, key=lambda r: r.last_index)
    if len(ordered) > max_count:
        ordered = ordered[len(ordered) - max_count:]
    return ordered

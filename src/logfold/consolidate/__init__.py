"""Log file consolidation: fold repeated entries and trim by recency."""

from .suffix import format_repeat_suffix, parse_repeat_suffix, strip_repeat_suffix
from .splitter import is_timestamp_start, split_concatenated
from .keys import extract_key
from .store import MAX_LOG_LINES, Record, consolidate, trim
from .rewriter import consolidate_file, read_entries, render_records, write_records

__all__ = [
    "MAX_LOG_LINES",
    "Record",
    "consolidate",
    "consolidate_file",
    "extract_key",
    "format_repeat_suffix",
    "is_timestamp_start",
    "parse_repeat_suffix",
    "read_entries",
    "render_records",
    "split_concatenated",
    "strip_repeat_suffix",
    "trim",
    "write_records",
]

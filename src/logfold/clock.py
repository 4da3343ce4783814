"""Timestamps and entry formatting."""

from datetime import datetime
from typing import Optional

from logfold.levels import LogLevel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Local time as YYYY-MM-DD HH:MM:SS."""
    if now is None:
        now = datetime.now()
    return now.strftime(TIMESTAMP_FORMAT)


def format_entry(timestamp: str, level: LogLevel, message: str, source: str = "") -> str:
    """Build '[ts] [LEVEL] message', with a '[source]' segment when source is set."""
    if source:
        return f"[{timestamp}] [{source}] [{level.label}] {message}"
    return f"[{timestamp}] [{level.label}] {message}"

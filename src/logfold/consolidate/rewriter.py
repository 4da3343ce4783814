"""Read, consolidate and rewrite a log file in place."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Sequence, Union

from .splitter import split_concatenated
from .store import MAX_LOG_LINES, Record, consolidate, trim
from .suffix import format_repeat_suffix

PathLike = Union[str, Path]


def read_entries(path: PathLike) -> list[str]:
    """Read all entries from a log file, splitting concatenated lines.

    Returns an empty list when the file is missing or unreadable.
    """
    entries = []
    try:
        # Only "\n" ends an entry, a lone "\r" is message text
        with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
            for raw in f:
                raw = raw.rstrip("\r\n")
                if not raw:
                    continue
                entries.extend(split_concatenated(raw))
    except OSError:
        return []
    return entries


def render_records(records: Sequence[Record]) -> list[str]:
    """Turn records back into log lines."""
    return [format_repeat_suffix(r.base_line, r.count) for r in records]


def write_records(records: Sequence[Record], path: PathLike) -> None:
    """Replace the file content with one line per record (temp file + rename).

    A symlinked log file is rewritten at its target, keeping its mode.
    """
    path = Path(os.path.realpath(path))
    fd, tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors="backslashreplace", newline="\n") as f:
            for line in render_records(records):
                f.write(line + "\n")
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def consolidate_file(path: PathLike, max_lines: int = MAX_LOG_LINES) -> Optional[int]:
    """Fold repeats and trim a log file to max_lines distinct entries.

    Returns the number of lines written, or None when there was nothing to
    do (missing, unreadable or empty file). Raises OSError if the file
    cannot be rewritten; the file is then left as it was.
    """
    entries = read_entries(path)
    if not entries:
        return None

    records = trim(consolidate(entries), max_lines)
    write_records(records, path)
    return len(records)

"""The trailing ' (repeated N times)' marker on folded log lines."""

from typing import Optional


SUFFIX_PREFIX = " (repeated "
SUFFIX_END = " times)"

_MIN_LENGTH = len(SUFFIX_PREFIX) + len(SUFFIX_END) + 1


def parse_repeat_suffix(line: str) -> Optional[tuple[int, int]]:
    """Parse a repeat suffix at the very end of a line.

    Returns (count, offset of the suffix) or None when the line carries no
    valid suffix. Only ASCII digits are accepted and a count of zero is
    rejected.
    """
    if len(line) < _MIN_LENGTH or not line.endswith(SUFFIX_END):
        return None

    start = line.rfind(SUFFIX_PREFIX)
    if start == -1:
        return None

    digits = line[start + len(SUFFIX_PREFIX):len(line) - len(SUFFIX_END)]
    if not digits or any(c not in "0123456789" for c in digits):
        return None

    count = int(digits)
    if count == 0:
        return None
    return count, start


def strip_repeat_suffix(line: str) -> str:
    """Return the line without its repeat suffix, if it has one."""
    parsed = parse_repeat_suffix(line)
    if parsed is None:
        return line
    return line[:parsed[1]]


def format_repeat_suffix(base: str, count: int) -> str:
    """Attach a repeat suffix to a base line. A count of 1 leaves it unchanged."""
    if count < 1:
        raise ValueError(f"repeat count must be at least 1, got {count}")
    if count == 1:
        return base
    return f"{base}{SUFFIX_PREFIX}{count}{SUFFIX_END}"

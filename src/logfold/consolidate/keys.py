"""Deduplication keys for log entries."""

DELIMITER = "] ["


def extract_key(base_line: str) -> str:
    """Strip the timestamp and the optional source tag from an entry.

    '[ts] [LEVEL] msg' and '[ts] [source] [LEVEL] msg' both give
    '[LEVEL] msg'. A line without the delimiter is its own key. Must be
    given text with the repeat suffix already removed.
    """
    first = base_line.find(DELIMITER)
    if first == -1:
        return base_line

    second = base_line.find(DELIMITER, first + 1)
    if second == -1:
        return base_line[first + 2:]
    return base_line[second + 2:]

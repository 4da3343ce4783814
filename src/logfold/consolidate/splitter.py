"""Repair log lines that hold several timestamped entries back to back."""


def is_timestamp_start(text: str, i: int) -> bool:
    """Check for the '[YYYY-' shape at position i.

    This is a shape check only, not a date validation. At least one
    character must follow the '-'.
    """
    if i < 0 or i + 6 >= len(text):
        return False
    if text[i] != "[" or text[i + 5] != "-":
        return False
    return all(c in "0123456789" for c in text[i + 1:i + 5])


def split_concatenated(raw: str) -> list[str]:
    """Split a raw file line at every timestamp start after position 0."""
    segments = []
    start = 0
    # Position 0 never splits, the first segment always begins there
    for i in range(1, len(raw)):
        if is_timestamp_start(raw, i):
            if i > start:
                segments.append(raw[start:i])
            start = i

    if start < len(raw):
        segments.append(raw[start:])

    return [s for s in segments if s]

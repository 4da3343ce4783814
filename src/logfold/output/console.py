"""Coloured console output for log entries."""

from typing import Optional

from rich.console import Console

from logfold.levels import LogLevel

LEVEL_STYLES = {
    LogLevel.TRACE: "blue",
    LogLevel.DEBUG: "",
    LogLevel.INFO: "bright_black",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bright_red",
}


def print_verbatim(console: Console, text: str, style: Optional[str] = None) -> None:
    """Print text exactly as given: no markup, emoji codes or highlighting.

    Characters the stream cannot encode (lone surrogates) are written as
    backslash escapes.
    """
    options = {
        "style": style,
        "markup": False,
        "emoji": False,
        "highlight": False,
        "soft_wrap": True,
    }
    encoding = console.encoding
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        text = text.encode(encoding, "backslashreplace").decode(encoding)
    except LookupError:
        pass
    console.print(text, **options)


class LogConsole:
    """Print entries to stdout, or stderr for errors and critical ones."""

    def __init__(
        self,
        stdout: Optional[Console] = None,
        stderr: Optional[Console] = None,
        color: bool = True,
    ):
        self.stdout = stdout or Console(no_color=not color, highlight=False)
        self.stderr = stderr or Console(stderr=True, no_color=not color, highlight=False)

    def emit(self, level: LogLevel, line: str) -> None:
        """Print one entry line styled by level."""
        console = self.stderr if level.is_error else self.stdout
        print_verbatim(console, line, LEVEL_STYLES[level] or None)

    def report(self, message: str) -> None:
        """Print a diagnostic about the logger itself."""
        print_verbatim(self.stderr, message, "red")

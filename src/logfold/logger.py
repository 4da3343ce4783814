"""The logging entry point: console, append, consolidate."""

import threading
from pathlib import Path
from typing import Callable, Optional, Union

from logfold.clock import format_entry, format_timestamp
from logfold.config import LogConfig, load_config
from logfold.consolidate import consolidate_file
from logfold.levels import LogLevel
from logfold.output import LogConsole
from logfold.paths import LogPathResolver


class FoldingLogger:
    """Write entries to the console and to a self-compacting log file.

    Every call appends the entry and then rewrites the whole file with
    repeats folded and at most config.max_lines distinct entries. Calls
    are serialized by one lock that covers the console write, the append
    and the rewrite.
    """

    def __init__(
        self,
        config: Optional[LogConfig] = None,
        console: Optional[LogConsole] = None,
        clock: Optional[Callable[[], str]] = None,
    ):
        self.config = (config or LogConfig()).validate()
        self.console = console or LogConsole(color=self.config.color)
        self._clock = clock or format_timestamp
        self._lock = threading.Lock()
        self._resolver = LogPathResolver(
            self.config.app_name,
            self.config.filename,
            self.config.log_dir,
        )

    @property
    def path(self) -> Path:
        """Log file path, resolved on first use."""
        return self._resolver.resolve()

    def log(self, level: Union[LogLevel, str], message: str, source: str = "") -> str:
        """Log one message. Returns the entry line that was written."""
        level = LogLevel.parse(level)

        with self._lock:
            entry = format_entry(self._clock(), level, message, source)
            self.console.emit(level, entry)

            path = self.path
            try:
                with open(path, "a", encoding="utf-8", errors="backslashreplace") as f:
                    f.write(entry + "\n")
            except OSError:
                self.console.report(f"[ERROR] Failed to open log file '{path}' for writing.")

            self._consolidate(path)

        return entry

    def compact(self) -> Optional[int]:
        """Consolidate the log file without adding an entry."""
        with self._lock:
            return self._consolidate(self.path)

    def read(self, last_n: Optional[int] = None) -> list[str]:
        """Read the current log lines."""
        with self._lock:
            path = self.path
            if not path.exists():
                return []
            with open(path, encoding="utf-8", errors="replace", newline="\n") as f:
                lines = [line.rstrip("\r\n") for line in f if line.strip()]

        if last_n is not None:
            return lines[-last_n:] if last_n > 0 else []
        return lines

    def _consolidate(self, path: Path) -> Optional[int]:
        try:
            return consolidate_file(path, self.config.max_lines)
        except (OSError, ValueError) as e:
            self.console.report(f"[ERROR] Failed to rewrite log file '{path}': {e}")
            return None

    def trace(self, message: str, source: str = "") -> str:
        return self.log(LogLevel.TRACE, message, source)

    def debug(self, message: str, source: str = "") -> str:
        return self.log(LogLevel.DEBUG, message, source)

    def info(self, message: str, source: str = "") -> str:
        return self.log(LogLevel.INFO, message, source)

    def warning(self, message: str, source: str = "") -> str:
        return self.log(LogLevel.WARNING, message, source)

    def error(self, message: str, source: str = "") -> str:
        return self.log(LogLevel.ERROR, message, source)

    def critical(self, message: str, source: str = "") -> str:
        return self.log(LogLevel.CRITICAL, message, source)


_default_logger: Optional[FoldingLogger] = None
_default_lock = threading.Lock()


def get_logger() -> FoldingLogger:
    """Shared logger configured from logfold.yaml and the environment."""
    global _default_logger
    with _default_lock:
        if _default_logger is None:
            _default_logger = FoldingLogger(load_config())
        return _default_logger


def set_logger(logger: Optional[FoldingLogger]) -> None:
    """Replace the shared logger (None makes the next get_logger() rebuild it)."""
    global _default_logger
    with _default_lock:
        _default_logger = logger


def log(level: Union[LogLevel, str], message: str, source: str = "") -> str:
    """Log through the shared logger."""
    return get_logger().log(level, message, source)

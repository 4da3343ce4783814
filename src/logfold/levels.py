"""Log levels."""

from enum import Enum


class LogLevel(str, Enum):
    """Severity of a log entry, lowest first."""
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        """Upper-case name written into log lines."""
        return self.value.upper()

    @property
    def is_error(self) -> bool:
        return self in (LogLevel.ERROR, LogLevel.CRITICAL)

    @classmethod
    def parse(cls, value: "str | LogLevel") -> "LogLevel":
        """Accept a LogLevel or a level name in any case ('warn' too)."""
        if isinstance(value, LogLevel):
            return value
        name = str(value).strip().lower()
        if name == "warn":
            name = "warning"
        try:
            return cls(name)
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown log level '{value}' (expected one of: {choices})") from None

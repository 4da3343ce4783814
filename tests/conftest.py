"""Test fixtures and configuration."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from logfold.config import LogConfig
from logfold.logger import FoldingLogger
from logfold.output import LogConsole


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LOGFOLD_* settings from the developer's shell out of tests."""
    for name in (
        "LOGFOLD_CONFIG",
        "LOGFOLD_APP_NAME",
        "LOGFOLD_FILENAME",
        "LOGFOLD_DIR",
        "LOGFOLD_MAX_LINES",
        "LOGFOLD_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def log_dir(tmp_path) -> Path:
    """Directory for the log file under test."""
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def log_file(log_dir) -> Path:
    """Path of the log file under test (not created)."""
    return log_dir / "log.txt"


class Clock:
    """Deterministic timestamp source, one second per call."""

    def __init__(self, start: int = 0):
        self.ticks = start

    def __call__(self) -> str:
        minutes, seconds = divmod(self.ticks, 60)
        hours, minutes = divmod(minutes, 60)
        self.ticks += 1
        return f"2024-01-01 {hours:02d}:{minutes:02d}:{seconds:02d}"


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def capture_console():
    """LogConsole writing into StringIO buffers (out, err)."""
    out = io.StringIO()
    err = io.StringIO()
    console = LogConsole(
        stdout=Console(file=out, no_color=True, highlight=False, width=200),
        stderr=Console(file=err, no_color=True, highlight=False, width=200),
    )
    return console, out, err


@pytest.fixture
def make_logger(log_dir, clock, capture_console):
    """Factory for loggers writing to log_dir with a fixed clock."""

    def _make(**overrides) -> FoldingLogger:
        settings = {"log_dir": str(log_dir)}
        settings.update(overrides)
        return FoldingLogger(LogConfig(**settings), console=capture_console[0], clock=clock)

    return _make

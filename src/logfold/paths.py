"""Resolve where the log file lives."""

import os
import sys
from pathlib import Path
from typing import Optional


def platform_log_dir(app_name: str) -> Path:
    """Per-user log directory for the current platform."""
    home = Path(os.environ.get("HOME") or Path.home())

    if sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name

    if sys.platform == "win32":
        appdata = os.environ.get("LOCALAPPDATA")
        if appdata:
            return Path(appdata) / app_name / "Logs"
        return home / "AppData" / "Local" / app_name / "Logs"

    xdg_state = os.environ.get("XDG_STATE_HOME")
    base = Path(xdg_state) if xdg_state else home / ".local" / "state"
    return base / app_name


def program_dir() -> Path:
    """Directory of the running program, or the current directory."""
    try:
        if sys.argv and sys.argv[0]:
            return Path(sys.argv[0]).resolve().parent
        return Path.cwd()
    except OSError:
        return Path(".")


def _usable_dir(path: Path) -> bool:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return os.access(path, os.W_OK)


class LogPathResolver:
    """Find a writable log file location once and remember it.

    Tries the configured directory, then the platform log directory, then
    the program directory. The last step never fails.
    """

    def __init__(self, app_name: str, filename: str = "log.txt", log_dir: Optional[str] = None):
        self.app_name = app_name
        self.filename = filename
        self.log_dir = log_dir
        self._cached: Optional[Path] = None

    def candidates(self) -> list[Path]:
        dirs = []
        if self.log_dir:
            dirs.append(Path(self.log_dir).expanduser())
        dirs.append(platform_log_dir(self.app_name))
        return dirs

    def resolve(self) -> Path:
        """Return the log file path, resolving it on first use."""
        if self._cached is not None:
            return self._cached

        for directory in self.candidates():
            if _usable_dir(directory):
                self._cached = directory / self.filename
                return self._cached

        self._cached = program_dir() / self.filename
        return self._cached

    def reset(self) -> None:
        """Forget the cached path."""
        self._cached = None

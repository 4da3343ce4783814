"""Logger configuration (logfold.yaml + LOGFOLD_* environment variables)."""

import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

import yaml

from logfold.consolidate import MAX_LOG_LINES

DEFAULT_CONFIG_FILE = "logfold.yaml"


@dataclass(frozen=True)
class LogConfig:
    app_name: str = "logfold"
    filename: str = "log.txt"
    log_dir: Optional[str] = None
    max_lines: int = MAX_LOG_LINES
    color: bool = True

    def validate(self) -> "LogConfig":
        if not self.app_name:
            raise ValueError("app_name must not be empty")
        if not self.filename:
            raise ValueError("filename must not be empty")
        if self.max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got {self.max_lines}")
        return self


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def _config_file(path: Optional[str]) -> Optional[Path]:
    """Pick the YAML file to read, if any."""
    if path:
        return Path(path)
    env_path = os.environ.get("LOGFOLD_CONFIG")
    if env_path:
        return Path(env_path)
    default = Path(DEFAULT_CONFIG_FILE)
    return default if default.exists() else None


def read_config_file(path: Path) -> dict:
    """Read settings from a YAML file. Returns {} on missing or corrupted files."""
    if not path.exists():
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        print(
            f"Warning: corrupted {path}, using defaults: {e}",
            file=sys.stderr,
        )
        return {}

    if not isinstance(data, dict):
        print(
            f"Warning: {path} is not a mapping, using defaults",
            file=sys.stderr,
        )
        return {}

    known = {f.name for f in fields(LogConfig)}
    return {k: v for k, v in data.items() if k in known and v is not None}


def load_config(path: Optional[str] = None) -> LogConfig:
    """Build LogConfig from defaults, the YAML file and the environment."""
    config = LogConfig()

    config_file = _config_file(path)
    if config_file is not None:
        values = read_config_file(config_file)
        if "max_lines" in values:
            values["max_lines"] = int(values["max_lines"])
        if "color" in values and isinstance(values["color"], str):
            values["color"] = _parse_bool(values["color"])
        for name in ("app_name", "filename", "log_dir"):
            if name in values:
                values[name] = str(values[name])
        config = replace(config, **values)

    env = os.environ
    config = replace(
        config,
        app_name=env.get("LOGFOLD_APP_NAME", config.app_name),
        filename=env.get("LOGFOLD_FILENAME", config.filename),
        log_dir=env.get("LOGFOLD_DIR", config.log_dir),
        max_lines=int(env.get("LOGFOLD_MAX_LINES", config.max_lines)),
        color=_parse_bool(env["LOGFOLD_COLOR"]) if "LOGFOLD_COLOR" in env else config.color,
    )
    if "NO_COLOR" in env:
        config = replace(config, color=False)

    return config.validate()

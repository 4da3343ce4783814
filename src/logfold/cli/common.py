"""Shared helpers for CLI commands."""

from dataclasses import replace
from typing import Optional

import typer
from rich.console import Console

from logfold.config import load_config
from logfold.logger import FoldingLogger

console = Console()


def build_logger(ctx: typer.Context, max_lines: Optional[int] = None) -> FoldingLogger:
    """Create a FoldingLogger from the --config option and the environment."""
    config_path = (ctx.obj or {}).get("config")
    try:
        config = load_config(config_path)
        if max_lines is not None:
            config = replace(config, max_lines=max_lines).validate()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    return FoldingLogger(config)

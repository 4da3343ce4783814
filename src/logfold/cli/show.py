"""Show command — print log file entries."""

import json
from typing import Optional

import typer

from logfold.cli.common import build_logger, console
from logfold.output import print_verbatim


def show(
    ctx: typer.Context,
    last: Optional[int] = typer.Option(None, "--last", help="Number of recent entries"),
    format: str = typer.Option("text", "--format", "-f", help="Output format: text, json"),
) -> None:
    """Print the entries in the log file."""
    logger = build_logger(ctx)
    entries = logger.read(last_n=last)

    if format == "json":
        data = {"path": str(logger.path), "entries": entries}
        print_verbatim(console, json.dumps(data, indent=2))
        return

    if not entries:
        console.print("[dim]No log entries yet.[/dim]")
        return
    for entry in entries:
        print_verbatim(console, entry)

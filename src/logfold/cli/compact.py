"""Compact command — fold repeats and trim the log file."""

from typing import Optional

import typer

from logfold.cli.common import build_logger, console


def compact(
    ctx: typer.Context,
    max_lines: Optional[int] = typer.Option(
        None, "--max-lines", "-n", help="Distinct entries to keep (default from config)"
    ),
) -> None:
    """Consolidate the log file without writing a new entry."""
    logger = build_logger(ctx, max_lines=max_lines)
    written = logger.compact()

    if written is None:
        console.print(f"[dim]Nothing to compact in {logger.path}[/dim]")
        return
    console.print(f"[green]Compacted:[/green] {written} entries in {logger.path}")

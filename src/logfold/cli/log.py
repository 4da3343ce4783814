"""Log command — write one entry."""

import typer

from logfold.cli.common import build_logger, console
from logfold.levels import LogLevel


def log(
    ctx: typer.Context,
    level: str = typer.Argument(..., help="trace, debug, info, warning, error or critical"),
    message: str = typer.Argument(..., help="Message text"),
    source: str = typer.Option("", "--source", "-s", help="Source tag for the entry"),
) -> None:
    """Write a log entry and compact the log file."""
    try:
        parsed = LogLevel.parse(level)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    logger = build_logger(ctx)
    logger.log(parsed, message, source)

"""Path command — print the log file location."""

import typer

from logfold.cli.common import build_logger, console
from logfold.output import print_verbatim


def path(ctx: typer.Context) -> None:
    """Print where the log file is written."""
    logger = build_logger(ctx)
    print_verbatim(console, str(logger.path))

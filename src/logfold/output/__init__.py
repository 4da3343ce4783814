"""Console output package."""

from .console import LEVEL_STYLES, LogConsole, print_verbatim

__all__ = ["LEVEL_STYLES", "LogConsole", "print_verbatim"]

"""logfold: a self-compacting file logger."""

__version__ = "0.1.0"

from logfold.levels import LogLevel
from logfold.logger import FoldingLogger, get_logger, log

__all__ = ["FoldingLogger", "LogLevel", "get_logger", "log", "__version__"]

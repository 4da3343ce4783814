"""Bridge from the standard logging module into a FoldingLogger."""

import logging
from typing import Optional

from logfold.levels import LogLevel
from logfold.logger import FoldingLogger, get_logger


def level_for(levelno: int) -> LogLevel:
    """Map a logging level number to a LogLevel."""
    if levelno < logging.DEBUG:
        return LogLevel.TRACE
    if levelno < logging.INFO:
        return LogLevel.DEBUG
    if levelno < logging.WARNING:
        return LogLevel.INFO
    if levelno < logging.ERROR:
        return LogLevel.WARNING
    if levelno < logging.CRITICAL:
        return LogLevel.ERROR
    return LogLevel.CRITICAL


class FoldingHandler(logging.Handler):
    """logging.Handler that writes records through a FoldingLogger.

    The record's logger name becomes the source tag unless
    use_logger_name is False. Timestamps come from the FoldingLogger, so a
    formatter should only render the message.
    """

    def __init__(
        self,
        logger: Optional[FoldingLogger] = None,
        use_logger_name: bool = True,
        level: int = logging.NOTSET,
    ):
        super().__init__(level)
        self._logger = logger
        self.use_logger_name = use_logger_name

    @property
    def logger(self) -> FoldingLogger:
        if self._logger is None:
            self._logger = get_logger()
        return self._logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            source = record.name if self.use_logger_name else ""
            self.logger.log(level_for(record.levelno), message, source)
        except Exception:
            self.handleError(record)

"""
Bridge from the standard library ``logging`` module into a metalog Logger.
"""

from __future__ import annotations

import logging
from typing import Optional

from .levels import LogLevel
from .logger import Logger

_STDLIB_LEVELS = (
    (logging.CRITICAL, LogLevel.CRITICAL),
    (logging.ERROR, LogLevel.ERROR),
    (logging.WARNING, LogLevel.WARN),
    (logging.INFO, LogLevel.INFO),
)


def stdlib_level_to_log_level(levelno: int) -> LogLevel:
    for threshold, level in _STDLIB_LEVELS:
        if levelno >= threshold:
            return level
    return LogLevel.DEBUG


class MetalogHandler(logging.Handler):
    """
    Redirect standard library logging records to a metalog Logger.

    The record's logger name becomes the facility, so targets can filter
    third-party output with their ``facilities`` allow-list. Records of the
    root logger are unscoped.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            # Rendered already; passed as a single argument so "%" is kept literally
            message = self.format(record)
            facility: Optional[str] = None if record.name == "root" else record.name
            self._logger.dispatch(stdlib_level_to_log_level(record.levelno), facility, [message])
        except Exception:
            self.handleError(record)


def intercept_stdlib_logging(logger: Logger, level: int = logging.INFO) -> MetalogHandler:
    """Make a MetalogHandler the only handler of the root logger."""
    handler = MetalogHandler(logger)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    return handler

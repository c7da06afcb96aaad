"""
Metalog: structured logging core.

A single Logger fans every record out to independently configured targets:
- ConsoleTarget: colorized terminal lines
- MemoryTarget: bounded ring buffer with observers
- FileTarget: append-only text lines
- JsonFileTarget: append-only structured records
- GraylogTarget: GELF over UDP

Named facilities scope records and carry their own level threshold.
"""

from .config import LoggerSettings
from .core import configure_logger, get_default_logger, reset_default_logger, set_default_logger
from .decorators import log_method_call, with_logging
from .exceptions import ConfigurationError, MetalogError, UnknownLogLevelError
from .facility import LoggerFacility
from .interceptors import MetalogHandler, intercept_stdlib_logging
from .levels import LEVEL_LABELS, LogLevel, accepts, parse_log_level
from .logger import Logger
from .targets import (
    BaseTarget,
    ConsoleTarget,
    FileTarget,
    GraylogTarget,
    JsonFileTarget,
    LoggerTarget,
    MemoryTarget,
    MemoryTargetMessage,
    read_json_log,
)

__all__ = [
    "BaseTarget",
    "ConfigurationError",
    "ConsoleTarget",
    "FileTarget",
    "GraylogTarget",
    "JsonFileTarget",
    "LEVEL_LABELS",
    "LogLevel",
    "Logger",
    "LoggerFacility",
    "LoggerSettings",
    "LoggerTarget",
    "MemoryTarget",
    "MemoryTargetMessage",
    "MetalogError",
    "MetalogHandler",
    "UnknownLogLevelError",
    "accepts",
    "configure_logger",
    "get_default_logger",
    "intercept_stdlib_logging",
    "log_method_call",
    "parse_log_level",
    "read_json_log",
    "reset_default_logger",
    "set_default_logger",
    "with_logging",
]

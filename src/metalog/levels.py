"""
Severity model and the shared filter predicate.

Levels follow syslog numbering: a lower number is more severe. A record passes
a threshold when its number is lower than or equal to the threshold's.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence, Union

from .exceptions import UnknownLogLevelError


class LogLevel(IntEnum):
    DEBUG = 7
    INFO = 6
    NOTICE = 5
    WARN = 4
    ERROR = 3
    CRITICAL = 2
    ALERT = 1
    EMERGENCY = 0


LEVEL_LABELS = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.NOTICE: "notice",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.CRITICAL: "critical",
    LogLevel.ALERT: "alert",
    LogLevel.EMERGENCY: "emergency",
}

LEVEL_NAME_MAP = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "notice": LogLevel.NOTICE,
    "warn": LogLevel.WARN,
    "warning": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
    "crit": LogLevel.CRITICAL,
    "alert": LogLevel.ALERT,
    "emergency": LogLevel.EMERGENCY,
    "emerg": LogLevel.EMERGENCY,
    "panic": LogLevel.EMERGENCY,
}

LevelLike = Union[LogLevel, int, str]


def parse_log_level(level: str) -> LogLevel:
    """Parse a case-insensitive level name such as ``"warning"`` or ``"PANIC"``."""
    try:
        return LEVEL_NAME_MAP[level.lower()]
    except (KeyError, AttributeError):
        raise UnknownLogLevelError(str(level)) from None


def coerce_level(level: LevelLike) -> LogLevel:
    """Accept a LogLevel, its numeric rank or its name."""
    if isinstance(level, str):
        return parse_log_level(level)
    try:
        return LogLevel(level)
    except ValueError:
        raise UnknownLogLevelError(str(level)) from None


def accepts(
    level: LogLevel,
    threshold: LogLevel,
    facilities: Sequence[str],
    facility: Optional[str],
) -> bool:
    """Return True when a record of ``level`` and ``facility`` passes a target filter.

    An empty ``facilities`` allow-list lets every facility through, including
    unscoped (None) records.
    """
    if level > threshold:
        return False
    if facilities and facility not in facilities:
        return False
    return True

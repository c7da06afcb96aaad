"""
Named logging scope over a Logger.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .interfaces import LoggerInterface
from .levels import LevelLike, LogLevel, coerce_level

if TYPE_CHECKING:
    from .logger import Logger


class LoggerFacility(LoggerInterface):
    """Forwards records to a Logger tagged with the facility name.

    Records less severe than the facility's own level are dropped before the
    Logger is touched. Facility allow-lists are checked by each target, never
    here.
    """

    def __init__(self, logger: "Logger", name: str, *, level: LevelLike = LogLevel.DEBUG) -> None:
        self._logger = logger
        self._name = name
        self._level = coerce_level(level)

    @property
    def name(self) -> str:
        return self._name

    @property
    def logger(self) -> "Logger":
        return self._logger

    def set_level(self, level: LevelLike) -> None:
        self._level = coerce_level(level)

    def get_level(self) -> LogLevel:
        return self._level

    def dispatch(self, level: LogLevel, args: Sequence[Any]) -> None:
        if level > self._level:
            return
        self._logger.dispatch(level, self._name, args)

    def _emit(self, level: LogLevel, args: Sequence[Any]) -> None:
        self.dispatch(level, args)

    def __repr__(self) -> str:
        return f"LoggerFacility(name={self._name!r}, level={self._level.name})"

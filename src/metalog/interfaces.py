"""
Level-tagged logging calls shared by Logger and LoggerFacility.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from .levels import LevelLike, LogLevel, coerce_level


class LoggerInterface(ABC):
    """Arguments are rendered like ``%``-style templates: ``info("took %d ms", 12)``.

    A mapping passed as the first argument becomes the record's metadata:
    ``info({"request_id": rid}, "done")``.
    """

    @abstractmethod
    def _emit(self, level: LogLevel, args: Sequence[Any]) -> None: ...

    def log(self, level: LevelLike, *args: Any) -> None:
        self._emit(coerce_level(level), args)

    def debug(self, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, args)

    def info(self, *args: Any) -> None:
        self._emit(LogLevel.INFO, args)

    def notice(self, *args: Any) -> None:
        self._emit(LogLevel.NOTICE, args)

    def warn(self, *args: Any) -> None:
        self._emit(LogLevel.WARN, args)

    def warning(self, *args: Any) -> None:
        self._emit(LogLevel.WARN, args)

    def error(self, *args: Any) -> None:
        self._emit(LogLevel.ERROR, args)

    def crit(self, *args: Any) -> None:
        self._emit(LogLevel.CRITICAL, args)

    def alert(self, *args: Any) -> None:
        self._emit(LogLevel.ALERT, args)

    def emerg(self, *args: Any) -> None:
        self._emit(LogLevel.EMERGENCY, args)

    def panic(self, *args: Any) -> None:
        self._emit(LogLevel.EMERGENCY, args)

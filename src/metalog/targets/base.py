"""
Target contract and the shared filter-and-format pipeline.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from ..formatters import format_message, format_timestamp
from ..levels import LEVEL_LABELS, LevelLike, LogLevel, accepts, coerce_level

Meta = Mapping[str, Any]


@runtime_checkable
class LoggerTarget(Protocol):
    """Anything the Logger can fan records out to."""

    def log(self, level: LogLevel, facility: Optional[str], args: Sequence[Any], meta: Meta) -> None: ...

    def close(self) -> None: ...


class BaseTarget:
    """Base for targets that filter by level and facility.

    ``log`` filters, renders the record into ordered string parts::

        [timestamp] level: [facility] (key=value)... message

    and hands them to ``write``. The default ``write`` and ``close`` do nothing,
    so a subclass that does not override ``write`` drops every record.

    Args:
        level: Least severe level accepted (default INFO).
        facilities: Allow-list of facility names; empty accepts all.
        timestamp: Whether to prefix the rendered line with the local time.
    """

    def __init__(
        self,
        *,
        level: LevelLike = LogLevel.INFO,
        facilities: Optional[Iterable[str]] = None,
        timestamp: bool = True,
    ) -> None:
        self._level = coerce_level(level)
        self._facilities: List[str] = list(facilities or [])
        self._timestamp = timestamp

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def facilities(self) -> List[str]:
        return self._facilities

    @property
    def timestamp(self) -> bool:
        return self._timestamp

    def set_level(self, level: LevelLike) -> None:
        self._level = coerce_level(level)

    def get_level(self) -> LogLevel:
        return self._level

    def accepts(self, level: LogLevel, facility: Optional[str]) -> bool:
        return accepts(level, self._level, self._facilities, facility)

    def log(self, level: LogLevel, facility: Optional[str], args: Sequence[Any], meta: Meta) -> None:
        if not self.accepts(level, facility):
            return
        self.write(level, facility, self.format_parts(level, facility, args, meta), meta)

    def format_parts(
        self,
        level: LogLevel,
        facility: Optional[str],
        args: Sequence[Any],
        meta: Meta,
    ) -> List[str]:
        """Render an accepted record into the ordered message parts."""
        parts = [format_message(args)]

        for key, value in meta.items():
            parts.insert(0, f"({key}={value})")

        if facility:
            parts.insert(0, f"[{facility}]")

        parts.insert(0, f"{LEVEL_LABELS[level]}:")

        if self._timestamp:
            parts.insert(0, format_timestamp())

        return parts

    def write(self, level: LogLevel, facility: Optional[str], parts: List[str], meta: Meta) -> None:
        return None

    def close(self) -> None:
        return None

"""
Bounded in-memory target with synchronous observers.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional, Sequence

from ..exceptions import ConfigurationError
from ..formatters import format_message
from ..levels import LogLevel
from .base import BaseTarget, Meta

MessageListener = Callable[["MemoryTargetMessage"], None]


@dataclass
class MemoryTargetMessage:
    """A stored record. ``message`` is the rendered text without any prefix."""

    timestamp: float
    level: LogLevel
    facility: Optional[str]
    message: str
    meta: Dict[str, Any] = field(default_factory=dict)


class MemoryTarget(BaseTarget):
    """Keeps the most recent ``limit`` records, oldest evicted first.

    Usage:
        target = MemoryTarget(level=LogLevel.DEBUG, limit=100)
        unsubscribe = target.subscribe(lambda message: print(message.message))
    """

    def __init__(self, *, limit: int = 1000, **options: Any) -> None:
        super().__init__(**options)
        if limit < 1:
            raise ConfigurationError("Memory target limit must be at least 1", limit=limit)
        self._limit = limit
        self._messages: Deque[MemoryTargetMessage] = deque(maxlen=limit)
        self._listeners: List[MessageListener] = []

    @property
    def limit(self) -> int:
        return self._limit

    def log(self, level: LogLevel, facility: Optional[str], args: Sequence[Any], meta: Meta) -> None:
        if not self.accepts(level, facility):
            return

        message = MemoryTargetMessage(
            timestamp=time.time(),
            level=level,
            facility=facility,
            message=format_message(args),
            meta=dict(meta),
        )
        self._messages.append(message)

        for listener in list(self._listeners):
            listener(message)

    def subscribe(self, listener: MessageListener) -> Callable[[], None]:
        """Register a listener called with every stored message. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_messages(self) -> Deque[MemoryTargetMessage]:
        """The live buffer, not a copy."""
        return self._messages

    def clear_messages(self) -> None:
        self._messages = deque(maxlen=self._limit)

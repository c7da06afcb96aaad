"""
Terminal target.
"""

from __future__ import annotations

import sys
from typing import Any, List, Optional, TextIO

from ..formatters import LEVEL_COLORS, colorize
from ..levels import LogLevel
from .base import BaseTarget, Meta


class ConsoleTarget(BaseTarget):
    """Writes one line per record to a text stream.

    Args:
        colorize: Wrap each line in the ANSI color of its level.
        stream: Output stream (default: ``sys.stdout`` at write time).
    """

    def __init__(self, *, colorize: bool = True, stream: Optional[TextIO] = None, **options: Any) -> None:
        super().__init__(**options)
        self._colorize = colorize
        self._stream = stream

    def write(self, level: LogLevel, facility: Optional[str], parts: List[str], meta: Meta) -> None:
        line = " ".join(parts)
        if self._colorize and level in LEVEL_COLORS:
            line = colorize(line, LEVEL_COLORS[level])

        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

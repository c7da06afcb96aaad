"""
Append-only file targets.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, TextIO

from ..levels import LogLevel
from .base import BaseTarget, Meta


class AppendOnlyFile:
    """Lazily opened append-mode file handle.

    The file is opened on the first ``write``, never at construction. When
    ``seed`` is given and the file does not exist yet, it is created holding
    ``seed`` before being opened for appending.
    """

    def __init__(self, path: str | Path, *, seed: Optional[str] = None) -> None:
        self._path = Path(path)
        self._seed = seed
        self._file: Optional[TextIO] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def initialized(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        if self._file is not None:
            return

        self._path.parent.mkdir(parents=True, exist_ok=True)
        if self._seed is not None and not self._path.exists():
            self._path.write_text(self._seed, encoding="utf-8")

        self._file = open(self._path, "a", encoding="utf-8")

    def write(self, data: str) -> None:
        self.open()
        self._file.write(data)
        self._file.flush()

    def close(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None


class FileTarget(BaseTarget):
    """Appends one space-joined line per record to ``filename``.

    Usage:
        logger.to("app", FileTarget("app.log", level=LogLevel.DEBUG, facilities=["server"]))
    """

    def __init__(self, filename: str | Path, **options: Any) -> None:
        super().__init__(**options)
        self._file = AppendOnlyFile(filename)

    @property
    def filename(self) -> Path:
        return self._file.path

    def write(self, level: LogLevel, facility: Optional[str], parts: List[str], meta: Meta) -> None:
        self._file.write(" ".join(parts) + "\n")

    def close(self) -> None:
        self._file.close()

"""
Structured record file target.

On-disk shape: the literal ``{}`` followed by one ``,``-prefixed JSON object per
record. The file as a whole is not a JSON document; wrapping the content in
``[...]`` reads it back as an array whose first element is the empty seed
object (see ``read_json_log``).
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, List, Optional, Sequence

import orjson

from ..formatters import orjson_dumps
from ..levels import LogLevel
from .base import BaseTarget, Meta
from .file import AppendOnlyFile

JSON_LOG_SEED = "{}"


class JsonFileTarget(BaseTarget):
    """Appends the raw record (unformatted arguments and metadata) as JSON.

    The ``timestamp`` option is accepted for symmetry with the other targets,
    but every record carries its epoch timestamp regardless.
    """

    def __init__(self, filename: str | Path, **options: Any) -> None:
        super().__init__(**options)
        self._file = AppendOnlyFile(filename, seed=JSON_LOG_SEED)

    @property
    def filename(self) -> Path:
        return self._file.path

    def log(self, level: LogLevel, facility: Optional[str], args: Sequence[Any], meta: Meta) -> None:
        if not self.accepts(level, facility):
            return
        self.write(level, facility, list(args), meta)

    def write(self, level: LogLevel, facility: Optional[str], parts: List[Any], meta: Meta) -> None:
        record = {
            "timestamp": time.time(),
            "level": int(level),
            "facility": facility,
            "msg": parts,
            "meta": dict(meta),
        }
        self._file.write("," + orjson_dumps(record))

    def close(self) -> None:
        self._file.close()


def read_json_log(path: str | Path) -> List[Any]:
    """Parse a file written by JsonFileTarget into ``[{}, record, ...]``."""
    content = Path(path).read_text(encoding="utf-8")
    return orjson.loads("[" + content + "]")

"""
Log targets (sinks).

Every target filters records on its own (level threshold + facility
allow-list) and persists or transports them in its own format.
"""

from .base import BaseTarget, LoggerTarget
from .console import ConsoleTarget
from .file import AppendOnlyFile, FileTarget
from .graylog import GELF_LEVELS, GraylogTarget
from .json_file import JsonFileTarget, read_json_log
from .memory import MemoryTarget, MemoryTargetMessage

__all__ = [
    "AppendOnlyFile",
    "BaseTarget",
    "ConsoleTarget",
    "FileTarget",
    "GELF_LEVELS",
    "GraylogTarget",
    "JsonFileTarget",
    "LoggerTarget",
    "MemoryTarget",
    "MemoryTargetMessage",
    "read_json_log",
]

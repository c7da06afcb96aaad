"""
Dispatcher: fans every record out to all registered targets.
"""

from __future__ import annotations

import os
import traceback
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

from .diagnostics import get_debug_logger
from .facility import LoggerFacility
from .interfaces import LoggerInterface
from .levels import LevelLike, LogLevel, coerce_level
from .targets import ConsoleTarget, FileTarget, GraylogTarget, JsonFileTarget, LoggerTarget, MemoryTarget

CONSOLE_TARGET_ID = "__console__"
MEMORY_TARGET_ID = "__memory__"
GRAYLOG_TARGET_ID = "__graylog__"

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_DISPATCH_FILES = frozenset(
    os.path.join(_PACKAGE_DIR, name) for name in ("logger.py", "facility.py", "interfaces.py", "decorators.py")
)

_log = get_debug_logger("metalog.logger")


def capture_stack_trace(prefix: str = ">>\n") -> str:
    """Return the current call stack without metalog's dispatch frames."""
    frames = [frame for frame in traceback.extract_stack()[:-1] if frame.filename not in _DISPATCH_FILES]
    return prefix + "".join(traceback.format_list(frames)).rstrip("\n")


class Logger(LoggerInterface):
    """Routes records from the logger and its facilities to every target.

    Targets are kept by id in registration order, which is also the dispatch
    order. Registering an id again replaces the previous target without
    closing it.

    Args:
        level: Threshold for unscoped records (default DEBUG). Facility records
            are filtered by their facility instead.
        trace: Attach the caller's stack to every record as ``meta["trace"]``.
        isolate_targets: Keep delivering to the remaining targets when one
            raises; the failure is reported to the diagnostic logger. When
            False the first failure propagates and aborts the fan-out.

    Usage:
        logger = Logger().to_console(level=LogLevel.DEBUG).to_file("app.log")
        logger.info("listening on %s:%d", host, port)
        logger.facility("db").warn({"table": "users"}, "slow query")
    """

    def __init__(
        self,
        *,
        level: LevelLike = LogLevel.DEBUG,
        trace: bool = False,
        isolate_targets: bool = False,
    ) -> None:
        self._level = coerce_level(level)
        self._trace = trace
        self._isolate_targets = isolate_targets
        self._targets: Dict[str, LoggerTarget] = {}
        self._facilities: Dict[str, LoggerFacility] = {}

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_level(self, level: LevelLike) -> None:
        self._level = coerce_level(level)

    def get_level(self) -> LogLevel:
        return self._level

    def enable_trace(self, enabled: bool = True) -> None:
        self._trace = enabled

    def is_trace_enabled(self) -> bool:
        return self._trace

    def capture_stack_trace(self, prefix: str = ">>\n") -> str:
        return capture_stack_trace(prefix)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, level: LogLevel, facility: Optional[str], args: Sequence[Any]) -> None:
        """Pass a record to every target; each target applies its own filter."""
        if facility is None and level > self._level:
            return

        args = list(args)
        meta: Dict[str, Any] = {}
        if args and isinstance(args[0], Mapping):
            meta = dict(args.pop(0))

        if self._trace:
            meta["trace"] = self.capture_stack_trace()

        for target_id, target in list(self._targets.items()):
            if not self._isolate_targets:
                target.log(level, facility, args, meta)
                continue
            try:
                target.log(level, facility, args, meta)
            except Exception as err:
                _log.error("target_log_failed", target=target_id, error=repr(err))

    def _emit(self, level: LogLevel, args: Sequence[Any]) -> None:
        self.dispatch(level, None, args)

    # -------------------------------------------------------------------------
    # Facilities
    # -------------------------------------------------------------------------

    def facility(self, name: str, *, level: Optional[LevelLike] = None) -> LoggerFacility:
        """Return the facility called ``name``, creating it on first use."""
        if name in self._facilities:
            return self._facilities[name]

        facility = LoggerFacility(self, name, level=LogLevel.DEBUG if level is None else level)
        self._facilities[name] = facility
        return facility

    def get_all_facilities(self) -> Dict[str, LoggerFacility]:
        return self._facilities

    # -------------------------------------------------------------------------
    # Targets
    # -------------------------------------------------------------------------

    def register_target(self, target_id: str, target: LoggerTarget) -> "Logger":
        self._targets[target_id] = target
        return self

    to = register_target

    def get_target(self, target_id: str) -> Optional[LoggerTarget]:
        return self._targets.get(target_id)

    def get_all_targets(self) -> Dict[str, LoggerTarget]:
        return self._targets

    def to_console(self, **options: Any) -> "Logger":
        return self.register_target(CONSOLE_TARGET_ID, ConsoleTarget(**options))

    def to_memory(self, **options: Any) -> "Logger":
        return self.register_target(MEMORY_TARGET_ID, MemoryTarget(**options))

    def to_file(self, filename: str | Path, **options: Any) -> "Logger":
        return self.register_target(str(filename), FileTarget(filename, **options))

    def to_json_file(self, filename: str | Path, **options: Any) -> "Logger":
        return self.register_target(str(filename), JsonFileTarget(filename, **options))

    def to_graylog(self, **options: Any) -> "Logger":
        return self.register_target(GRAYLOG_TARGET_ID, GraylogTarget(**options))

    def close(self) -> None:
        """Close every target in registration order. A failing close propagates."""
        for target in list(self._targets.values()):
            target.close()

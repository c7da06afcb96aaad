"""
Message formatting, timestamps, JSON serialization and color utilities.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional, Sequence

import orjson

from .levels import LogLevel

# =============================================================================
# printf-style message rendering
# =============================================================================

_PLACEHOLDER = re.compile(r"%[sdifjoOc%]")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


_MIN_JSON_INT = -(2**63)
_MAX_JSON_INT = 2**64 - 1


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson.

    Values orjson refuses outright (integers beyond 64 bits, circular
    containers) are retried on a copy where those values are rendered as
    strings.
    """
    default = default or _json_default
    try:
        return orjson.dumps(v, default=default, option=orjson.OPT_NON_STR_KEYS).decode()
    except orjson.JSONEncodeError:
        return orjson.dumps(_json_safe(v, set()), default=default, option=orjson.OPT_NON_STR_KEYS).decode()


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return repr(value)


def _json_safe(value: Any, seen: set[int]) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return value if _MIN_JSON_INT <= value <= _MAX_JSON_INT else str(value)
    if not isinstance(value, (dict, list, tuple, set, frozenset)):
        return value

    if id(value) in seen:
        return "[Circular]"
    seen = seen | {id(value)}

    if isinstance(value, dict):
        return {_json_safe_key(key): _json_safe(item, seen) for key, item in value.items()}
    return [_json_safe(item, seen) for item in value]


def _json_safe_key(key: Any) -> Any:
    if isinstance(key, (tuple, frozenset)):
        return repr(key)
    return _json_safe(key, set())


def inspect_value(value: Any) -> str:
    """Render an argument that is not substituted into a placeholder."""
    if isinstance(value, str):
        return value
    return repr(value)


def _as_number(value: Any, cast: type) -> str:
    try:
        return str(cast(value))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _convert(token: str, value: Any) -> str:
    if token == "s":
        return value if isinstance(value, str) else str(value)
    if token in ("d", "i"):
        return _as_number(value, int)
    if token == "f":
        return _as_number(value, float)
    if token == "j":
        return orjson_dumps(value)
    if token in ("o", "O"):
        return repr(value)
    # %c carries CSS in browsers, nothing to render here
    return ""


def format_message(args: Sequence[Any]) -> str:
    """Render positional log arguments into one string.

    When the first argument is a string, ``%s``, ``%d``, ``%i``, ``%f``,
    ``%j``, ``%o``/``%O`` and ``%%`` placeholders are substituted in order.
    Placeholders without a matching argument are left untouched and surplus
    arguments are appended, separated by spaces.

    Example:
        >>> format_message(["testStr %s: %d", "sub", 42])
        'testStr sub: 42'
    """
    if not args:
        return ""

    template = args[0]
    if not isinstance(template, str):
        return " ".join(inspect_value(arg) for arg in args)
    if len(args) == 1:
        return template

    values = list(args[1:])
    position = 0

    def substitute(match: re.Match) -> str:
        nonlocal position
        token = match.group(0)[1]
        if token == "%":
            return "%"
        if position >= len(values):
            return match.group(0)
        value = values[position]
        position += 1
        return _convert(token, value)

    text = _PLACEHOLDER.sub(substitute, template)
    surplus = values[position:]
    if surplus:
        text = " ".join([text, *(inspect_value(value) for value in surplus)])
    return text


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Local wall-clock time as ``YYYY-MM-DD HH:MM:SS``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


# =============================================================================
# Console colors
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "cyan": "\033[36m",
    "gray": "\033[90m",
    "white": "\033[37m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "magenta": "\033[35m",
}

LEVEL_COLORS = {
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "gray",
    LogLevel.NOTICE: "white",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "red",
    LogLevel.ALERT: "red",
    LogLevel.EMERGENCY: "magenta",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"

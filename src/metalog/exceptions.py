"""
Metalog exception hierarchy.

Configuration problems fail fast at the call site. I/O errors raised by the
file targets are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class MetalogError(Exception):
    """Root of all metalog errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class UnknownLogLevelError(MetalogError, ValueError):
    """Raised when a level name cannot be parsed."""

    def __init__(self, level: str) -> None:
        super().__init__(
            f"Unknown log level '{level}'",
            code="UNKNOWN_LOG_LEVEL",
            details={"level": level},
        )


class ConfigurationError(MetalogError, ValueError):
    """Raised for invalid target options or logger settings."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, code="INVALID_CONFIGURATION", details=details)

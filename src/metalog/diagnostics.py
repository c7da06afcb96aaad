"""
Internal diagnostic logging.

Metalog never logs about itself through its own targets. Debug output of the
GELF client and failures of isolated targets go to structlog instead, so the
host application's structlog configuration decides where they end up.
"""

from __future__ import annotations

import structlog


def get_debug_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for metalog's own diagnostics."""
    return structlog.get_logger(_name=name or "metalog")

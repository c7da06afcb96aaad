"""
Logger construction from settings and the process-wide default logger.
"""

from __future__ import annotations

from typing import Optional

from .config import LoggerSettings
from .exceptions import ConfigurationError
from .logger import Logger

# =============================================================================
# Global State
# =============================================================================

_default_logger: Optional[Logger] = None


def configure_logger(settings: Optional[LoggerSettings] = None) -> Logger:
    """
    Build a Logger with the targets named in ``settings.targets``.

    Args:
        settings: Logger settings; read from ``METALOG_*`` environment
            variables and ``.env`` when omitted.

    Raises:
        ConfigurationError: For unknown target names, or a graylog target
            without a hostname.
    """
    settings = settings or LoggerSettings()
    logger = Logger(level=settings.level, trace=settings.trace, isolate_targets=settings.isolate_targets)

    for name in settings.target_names:
        if name == "console":
            logger.to_console(
                level=settings.console_level,
                colorize=settings.console_colorize,
                timestamp=settings.console_timestamp,
            )
        elif name == "memory":
            logger.to_memory(level=settings.target_level, limit=settings.memory_limit)
        elif name == "file":
            logger.to_file(settings.file_path, level=settings.target_level)
        elif name == "json":
            logger.to_json_file(settings.json_file_path, level=settings.target_level)
        elif name == "graylog":
            if not settings.graylog_hostname:
                raise ConfigurationError("The graylog target requires graylog_hostname", target=name)
            logger.to_graylog(
                level=settings.target_level,
                graylog_hostname=settings.graylog_hostname,
                graylog_port=settings.graylog_port,
                connection=settings.graylog_connection,
                host=settings.graylog_host,
                facility_prefix=settings.graylog_facility_prefix,
            )
        else:
            raise ConfigurationError(f"Unknown target '{name}'", target=name)

    return logger


def get_default_logger() -> Logger:
    """Return the process-wide logger, creating it from settings on first use."""
    global _default_logger

    if _default_logger is None:
        _default_logger = configure_logger()
    return _default_logger


def set_default_logger(logger: Logger) -> None:
    global _default_logger
    _default_logger = logger


def reset_default_logger() -> None:
    """Close and forget the default logger; the next access rebuilds it."""
    global _default_logger

    if _default_logger is not None:
        _default_logger.close()
    _default_logger = None

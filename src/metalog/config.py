"""
Logger Configuration.
"""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import LogLevel, coerce_level


class LoggerSettings(BaseSettings):
    """Settings for the process-wide default logger."""

    model_config = SettingsConfigDict(
        env_prefix="METALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.DEBUG, description="Threshold for unscoped records")
    targets: str = Field(
        default="console",
        description="Comma-separated target names (console, memory, file, json, graylog)",
    )
    trace: bool = Field(default=False, description="Attach call stacks to every record")
    isolate_targets: bool = Field(default=False, description="Keep dispatching when a target raises")

    console_level: LogLevel = Field(default=LogLevel.INFO, description="Console target level")
    console_colorize: bool = Field(default=True, description="Colorize console output")
    console_timestamp: bool = Field(default=False, description="Prefix console lines with the time")

    target_level: LogLevel = Field(default=LogLevel.INFO, description="Level of non-console targets")
    memory_limit: int = Field(default=1000, ge=1, description="Memory target capacity")
    file_path: str = Field(default="logs/metalog.log", description="Path for the file target")
    json_file_path: str = Field(default="logs/metalog.json", description="Path for the json target")

    graylog_hostname: Optional[str] = Field(default=None, description="Graylog server hostname")
    graylog_port: int = Field(default=12201, description="Graylog GELF UDP port")
    graylog_connection: str = Field(default="lan", description="Graylog connection type (lan, wan)")
    graylog_host: str = Field(default="_unspecified_", description="GELF host field")
    graylog_facility_prefix: str = Field(default="", description="Prefix for the GELF _facility field")

    @field_validator("level", "console_level", "target_level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        if isinstance(value, str) and value.isdigit():
            value = int(value)
        return coerce_level(value)

    @property
    def target_names(self) -> list[str]:
        return [name.strip().lower() for name in self.targets.split(",") if name.strip()]

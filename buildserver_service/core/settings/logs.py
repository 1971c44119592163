"""Logging configuration settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Structured logging configuration.

    Environment variables use LOG_ prefix.
    Example: LOG_LEVEL=DEBUG, LOG_JSON_LOGS=false, LOG_LOG_FILE=logs/buildserver.jsonl
    """

    service_name: str = Field(
        default="buildserver-service",
        description="Static service field of JSON records",
    )
    level: LogLevel = Field(
        default="INFO",
        description="Root logger level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
    )
    json_logs: bool = Field(
        default=True,
        description="Emit JSON Lines instead of human readable text",
    )
    console_enabled: bool = Field(default=True, description="Log to stderr")
    log_file: Path | None = Field(
        default=None,
        description="Rotating log file; None disables file logging",
    )
    max_bytes: int = Field(
        default=10_485_760,  # 10 MiB
        ge=1024,
        le=1_073_741_824,
        description="Log file size that triggers rotation",
    )
    backup_count: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Number of rotated log files to keep",
    )
    include_context: bool = Field(
        default=True,
        description="Copy the request logging context onto every record",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Return keyword arguments for ``configure_logging``."""
        return {
            "log_level": self.level,
            "service_name": self.service_name,
            "json_logs": self.json_logs,
            "console_enabled": self.console_enabled,
            "file_path": str(self.log_file) if self.log_file else None,
            "file_max_bytes": self.max_bytes,
            "file_backup_count": self.backup_count,
            "include_context": self.include_context,
        }

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

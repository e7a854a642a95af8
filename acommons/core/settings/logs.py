"""Logging configuration settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_logging_yaml_source

LogLevelName = Literal["VERBOSE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Library logging configuration.

    Environment variables use LOG_ prefix.
    Example: LOG_LEVEL=DEBUG, LOG_FILE_ENABLED=true, LOG_FILE_DIR=/var/log/app
    """

    # ──────────────────────────────────────────────────────────────
    # Basic configuration
    # ──────────────────────────────────────────────────────────────

    service_name: str = Field(
        default="acommons",
        description="Service name included as a static field in JSON records",
    )

    level: LogLevelName = Field(
        default="INFO",
        description="Root logger level (VERBOSE|DEBUG|INFO|WARNING|ERROR|CRITICAL)",
    )

    json_logs: bool = Field(
        default=False,
        validation_alias=AliasChoices("json_logs", "log_json"),
        description="Enable JSON Lines (JSONL) formatted structured logs",
    )

    # ──────────────────────────────────────────────────────────────
    # Per-handler log levels
    # ──────────────────────────────────────────────────────────────

    console_level: LogLevelName | None = Field(
        default=None,
        description="Console handler log level. If None, uses root level.",
    )

    file_level: LogLevelName | None = Field(
        default=None,
        description="File handler log level. If None, uses root level.",
    )

    # ──────────────────────────────────────────────────────────────
    # File logging / rotation
    # ──────────────────────────────────────────────────────────────

    file_enabled: bool = Field(
        default=False,
        description="Enable file logging into file_dir.",
    )

    file_dir: Path = Field(
        default=Path("logs"),
        description="Directory holding the active log file and its rotated backups.",
    )

    file_name: str = Field(
        default="acommons.log",
        min_length=1,
        description="Name of the active log file inside file_dir.",
    )

    file_max_bytes: int = Field(
        default=10_485_760,  # 10 MiB
        ge=1024,
        le=1_073_741_824,
        description="Maximum log file size in bytes before rotation (10MB default, max 1GB).",
    )

    file_backup_count: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Number of rotated log files to keep.",
    )

    # ──────────────────────────────────────────────────────────────
    # Console logging
    # ──────────────────────────────────────────────────────────────

    console_enabled: bool = Field(
        default=True,
        description="Enable console/stderr logging",
    )

    # ──────────────────────────────────────────────────────────────
    # Context injection and record details
    # ──────────────────────────────────────────────────────────────

    include_context: bool = Field(
        default=True,
        description="Inject set_log_context() fields into every record",
    )

    capture_warnings: bool = Field(
        default=True,
        description="Forward Python `warnings` module output to the logging system.",
    )

    include_function_name: bool = Field(
        default=False,
        description="Include function name in log records (adds overhead)",
    )

    include_process_info: bool = Field(
        default=False,
        description="Include process ID and name in log records",
    )

    include_thread_info: bool = Field(
        default=False,
        description="Include thread ID and name in log records",
    )

    # ──────────────────────────────────────────────────────────────
    # Computed / helper fields
    # ──────────────────────────────────────────────────────────────

    @field_validator("level", "console_level", "file_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str | None) -> str | None:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    @computed_field
    @property
    def effective_file_path(self) -> Path | None:
        """Return the active log file path only when file logging is enabled."""
        if not self.file_enabled:
            return None
        return self.file_dir / self.file_name

    @computed_field
    @property
    def effective_console_level(self) -> LogLevelName:
        """Get effective console handler level (falls back to root level)."""
        return self.console_level or self.level

    @computed_field
    @property
    def effective_file_level(self) -> LogLevelName:
        """Get effective file handler level (falls back to root level)."""
        return self.file_level or self.level

    def to_logging_kwargs(self) -> dict[str, Any]:
        """Return kwargs suitable for configure_logging(...)."""
        return {
            "service_name": self.service_name,
            "log_level": self.level,
            "json_logs": self.json_logs,
            "console_level": self.effective_console_level,
            "file_level": self.effective_file_level,
            "file_path": str(self.effective_file_path) if self.effective_file_path else None,
            "file_max_bytes": self.file_max_bytes,
            "file_backup_count": self.file_backup_count,
            "console_enabled": self.console_enabled,
            "include_context": self.include_context,
            "capture_warnings": self.capture_warnings,
            "include_function_name": self.include_function_name,
            "include_process_info": self.include_process_info,
            "include_thread_info": self.include_thread_info,
        }

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_logging_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

"""File lock settings."""

from __future__ import annotations

from pathlib import Path
import tempfile

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_sources import create_lock_yaml_source


class LockSettings(BaseSettings):
    """Defaults for FileLocker.

    Environment variables use LOCK_ prefix.
    Example: LOCK_DIRECTORY=/run/app, LOCK_POLL_INTERVAL=0.1, LOCK_DEFAULT_TIMEOUT=30
    """

    directory: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()) / "acommons-locks",
        description="Directory used by locked_path() for named lock files.",
    )

    poll_interval: float = Field(
        default=0.05,
        gt=0.0,
        le=60.0,
        description="Seconds between try_lock() attempts while waiting for a lock.",
    )

    default_timeout: float | None = Field(
        default=None,
        ge=0.0,
        description="Seconds a `with FileLocker(...)` block waits for the lock. None waits forever.",
    )

    model_config = SettingsConfigDict(
        env_prefix="LOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_lock_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )

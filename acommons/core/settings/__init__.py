"""Pydantic Settings v2 configuration.

One settings model per concern, each read from environment variables with
its own prefix and optionally from a YAML/conf.d directory:

    from acommons.core.settings import get_logging_settings, get_lock_settings

    log_settings = get_logging_settings()
    print(log_settings.level)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (optional)
    3. Environment variables
    4. .env file
    5. secrets_dir
"""

from __future__ import annotations

from .loader import clear_all_caches, get_lock_settings, get_logging_settings
from .locking import LockSettings
from .logs import LoggingSettings

__all__ = [
    "LockSettings",
    "LoggingSettings",
    "clear_all_caches",
    "get_lock_settings",
    "get_logging_settings",
]

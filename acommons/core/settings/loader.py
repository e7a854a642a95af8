"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the process.

Usage:
    from acommons.core.settings.loader import get_lock_settings

    settings = get_lock_settings()  # First call: loads and validates
    settings = get_lock_settings()  # Subsequent calls: returns cached instance

Testing:
    In tests, clear the cache to force reload:
    clear_all_caches()
"""

from __future__ import annotations

from functools import lru_cache

from .locking import LockSettings
from .logs import LoggingSettings


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_lock_settings() -> LockSettings:
    """Get cached file lock settings.

    Returns:
        Validated and frozen LockSettings instance.
    """
    return LockSettings()


def clear_all_caches() -> None:
    """Clear all settings caches.

    Useful for testing or when you need to force reload settings.
    """
    get_logging_settings.cache_clear()
    get_lock_settings.cache_clear()

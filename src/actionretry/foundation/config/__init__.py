"""Configuration from environment variables and .env files."""

from .settings import (
    ActionRetrySettings,
    BreakerSettings,
    LoggingSettings,
    RetrySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ActionRetrySettings", "RetrySettings", "LoggingSettings", "BreakerSettings",
    "get_settings", "clear_settings_cache",
]

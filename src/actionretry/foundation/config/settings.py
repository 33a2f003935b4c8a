"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from actionretry.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.retry.linear_delay
    1.0
    >>> settings.logging.level
    'INFO'
    
    # Or with environment variables:
    # ACTIONRETRY_RETRY_LINEAR_DELAY=0.5
    # ACTIONRETRY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, NonNegativeFloat, PositiveFloat, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrySettings(BaseSettings):
    """Policy parameters used by a settings-driven FailureClassifier."""
    
    model_config = SettingsConfigDict(
        env_prefix="ACTIONRETRY_RETRY_",
        extra="ignore",
    )
    
    linear_delay: NonNegativeFloat = Field(default=1.0, description="Fixed delay for missing targets (seconds)")
    linear_max_attempts: PositiveInt = 3
    exponential_initial_delay: NonNegativeFloat = Field(default=2.0, description="First delay for transient failures (seconds)")
    exponential_max_attempts: PositiveInt = 5
    immediate_max_attempts: PositiveInt = 3


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="ACTIONRETRY_LOG_",
        extra="ignore",
    )
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    
    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class BreakerSettings(BaseSettings):
    """Circuit breaker defaults."""
    
    model_config = SettingsConfigDict(
        env_prefix="ACTIONRETRY_BREAKER_",
        extra="ignore",
    )
    
    failure_threshold: PositiveInt = Field(default=3, description="Failures before opening")
    recovery_time: PositiveFloat = Field(default=30.0, description="Seconds before a half-open probe")
    success_threshold: PositiveInt = Field(default=1, description="Half-open successes before closing")


class ActionRetrySettings(BaseSettings):
    """Root settings for actionretry.
    
    Loads configuration from environment variables with ACTIONRETRY_ prefix.
    Supports nested configuration and .env files.
    
    Example environment variables:
        ACTIONRETRY_RETRY_IMMEDIATE_MAX_ATTEMPTS=2
        ACTIONRETRY_LOG_FORMAT=json
        ACTIONRETRY_BREAKER_RECOVERY_TIME=10
    """
    
    model_config = SettingsConfigDict(
        env_prefix="ACTIONRETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    # Nested settings (loaded with ACTIONRETRY_RETRY_, ACTIONRETRY_LOG_, etc.)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    breaker: BreakerSettings = Field(default_factory=BreakerSettings)


@lru_cache(maxsize=1)
def get_settings() -> ActionRetrySettings:
    """Get the global settings instance (cached)."""
    return ActionRetrySettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).
    
    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()

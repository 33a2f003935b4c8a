"""Foundation - Outcomes, errors, and configuration."""

from .config import ActionRetrySettings, clear_settings_cache, get_settings
from .errors import ActionRetryError, CircuitOpenError, FailureKind, Outcome

__all__ = [
    "Outcome", "FailureKind", "ActionRetryError", "CircuitOpenError",
    "ActionRetrySettings", "get_settings", "clear_settings_cache",
]

"""Tests for environment-based settings."""

from __future__ import annotations

import pytest

from actionretry import ActionRetrySettings, FailureClassifier, LinearBackoff, Outcome, clear_settings_cache, get_settings


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset cached settings around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_defaults_match_builtin_policies() -> None:
    settings = ActionRetrySettings()
    
    assert settings.retry.linear_delay == 1.0
    assert settings.retry.linear_max_attempts == 3
    assert settings.retry.exponential_initial_delay == 2.0
    assert settings.retry.exponential_max_attempts == 5
    assert settings.retry.immediate_max_attempts == 3
    assert settings.logging.level == "INFO"
    assert settings.breaker.failure_threshold == 3


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTIONRETRY_RETRY_LINEAR_DELAY", "0.25")
    monkeypatch.setenv("ACTIONRETRY_LOG_LEVEL", "debug")
    monkeypatch.setenv("ACTIONRETRY_LOG_FORMAT", "json")
    monkeypatch.setenv("ACTIONRETRY_BREAKER_RECOVERY_TIME", "5")
    
    settings = get_settings()
    
    assert settings.retry.linear_delay == 0.25
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.breaker.recovery_time == 5.0


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_classifier_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTIONRETRY_RETRY_LINEAR_MAX_ATTEMPTS", "5")
    
    policy = FailureClassifier.from_settings().classify(Outcome.fail("Button not found"))
    
    assert policy == LinearBackoff(delay=1.0, max_attempts=5)


def test_invalid_environment_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    from pydantic import ValidationError
    
    from actionretry.foundation.config import RetrySettings
    
    monkeypatch.setenv("ACTIONRETRY_RETRY_IMMEDIATE_MAX_ATTEMPTS", "0")
    
    with pytest.raises(ValidationError):
        RetrySettings()


def test_unknown_root_fields_are_not_exposed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTIONRETRY_DEBUG", "true")
    
    settings = ActionRetrySettings()
    
    assert set(ActionRetrySettings.model_fields) == {"retry", "logging", "breaker"}
    assert not hasattr(settings, "debug")

"""Runtime - Retry execution, resilience, concurrency, and observability."""

from __future__ import annotations

from .concurrency import checkpoint
from .observability import configure_from_settings, configure_logging
from .resilience import CircuitBreaker, State
from .retry import (
    DEFAULT_POLICY,
    DEFAULT_RULES,
    NO_RETRY,
    Action,
    ClassificationRule,
    ExponentialBackoff,
    FailureClassifier,
    Immediate,
    LinearBackoff,
    NoRetry,
    RetryDriver,
    RetryEvent,
    RetryPolicy,
    classify,
    default_classifier,
    dump_policy,
    execute_with_retry,
    kind_of,
    validate_policy,
)

__all__ = [
    # Retry
    "RetryPolicy", "NoRetry", "Immediate", "LinearBackoff", "ExponentialBackoff", "NO_RETRY",
    "validate_policy", "dump_policy",
    "FailureClassifier", "ClassificationRule", "DEFAULT_RULES", "DEFAULT_POLICY",
    "classify", "kind_of", "default_classifier",
    "Action", "RetryEvent", "RetryDriver", "execute_with_retry",
    # Resilience
    "CircuitBreaker", "State",
    # Concurrency
    "checkpoint",
    # Observability
    "configure_logging", "configure_from_settings",
]

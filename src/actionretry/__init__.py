"""actionretry - Adaptive retry for on-device UI automation actions.

An automation agent performs a UI action and gets back an Outcome. When the
Outcome is a failure, actionretry decides whether and how to retry it, and
drives the retry loop to completion.

Quick Start:
    >>> from actionretry import Outcome, classify, execute_with_retry
    >>>
    >>> async def tap_login() -> Outcome:
    ...     ok = await device.tap(element_id=42)
    ...     return Outcome.ok("Tapped login") if ok else Outcome.fail("Element 42 not found on screen")
    >>>
    >>> first = await tap_login()
    >>> policy = classify(first)          # LinearBackoff(delay=1.0, max_attempts=3)
    >>> final = await execute_with_retry(tap_login, policy, name="tap:login")

Policies:
    >>> from actionretry import NoRetry, Immediate, LinearBackoff, ExponentialBackoff
    >>> ExponentialBackoff(initial_delay=2.0, max_attempts=5)  # waits 2, 4, 8, 16s

Circuit Breaker:
    >>> from actionretry import CircuitBreaker
    >>> breaker = CircuitBreaker(failure_threshold=3, name="llm")
    >>> outcome = await breaker.call(query_model)

Logging:
    >>> from actionretry import configure_logging
    >>> configure_logging(format="json", level="DEBUG")
"""

from __future__ import annotations

__version__ = "0.1.0"

# Foundation
from .foundation import (
    ActionRetryError,
    ActionRetrySettings,
    CircuitOpenError,
    FailureKind,
    Outcome,
    clear_settings_cache,
    get_settings,
)

# Runtime
from .runtime import (
    DEFAULT_POLICY,
    DEFAULT_RULES,
    NO_RETRY,
    Action,
    CircuitBreaker,
    ClassificationRule,
    ExponentialBackoff,
    FailureClassifier,
    Immediate,
    LinearBackoff,
    NoRetry,
    RetryDriver,
    RetryEvent,
    RetryPolicy,
    State,
    checkpoint,
    classify,
    configure_from_settings,
    configure_logging,
    default_classifier,
    dump_policy,
    execute_with_retry,
    kind_of,
    validate_policy,
)

__all__ = [
    "__version__",
    # Outcomes & errors
    "Outcome", "FailureKind", "ActionRetryError", "CircuitOpenError",
    # Settings
    "ActionRetrySettings", "get_settings", "clear_settings_cache",
    # Policies
    "RetryPolicy", "NoRetry", "Immediate", "LinearBackoff", "ExponentialBackoff", "NO_RETRY",
    "validate_policy", "dump_policy",
    # Classification
    "FailureClassifier", "ClassificationRule", "DEFAULT_RULES", "DEFAULT_POLICY",
    "classify", "kind_of", "default_classifier",
    # Execution
    "Action", "RetryEvent", "RetryDriver", "execute_with_retry",
    # Resilience
    "CircuitBreaker", "State", "checkpoint",
    # Logging
    "configure_logging", "configure_from_settings",
]

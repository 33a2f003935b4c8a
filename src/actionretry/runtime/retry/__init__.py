"""Adaptive retry for UI actions.

Classify a failed Outcome into a RetryPolicy, then drive the action under that
policy until success, exhaustion, or cancellation. The two halves are
independent: the driver never consults the classifier.

Example:
    >>> from actionretry.runtime.retry import classify, execute_with_retry
    >>> 
    >>> first = await tap_login()
    >>> if first.failed:
    ...     final = await execute_with_retry(tap_login, classify(first), name="tap:login")
"""

from .classifier import (
    DEFAULT_POLICY,
    DEFAULT_RULES,
    ClassificationRule,
    FailureClassifier,
    classify,
    default_classifier,
    kind_of,
)
from .driver import Action, RetryDriver, RetryEvent, execute_with_retry
from .policy import (
    BACKOFF_FACTOR,
    NO_RETRY,
    ExponentialBackoff,
    Immediate,
    LinearBackoff,
    NoRetry,
    RetryPolicy,
    dump_policy,
    first_delay,
    next_delay,
    validate_policy,
)

__all__ = [
    # Policies
    "RetryPolicy", "NoRetry", "Immediate", "LinearBackoff", "ExponentialBackoff",
    "NO_RETRY", "BACKOFF_FACTOR", "validate_policy", "dump_policy", "first_delay", "next_delay",
    # Classification
    "FailureClassifier", "ClassificationRule", "DEFAULT_RULES", "DEFAULT_POLICY",
    "classify", "kind_of", "default_classifier",
    # Execution
    "Action", "RetryEvent", "RetryDriver", "execute_with_retry",
]

"""Failure classification: map a failed Outcome to a RetryPolicy.

Classification is pure and total. It inspects only the Outcome's message,
performs no I/O and never invokes the action. Rules are evaluated in a fixed
priority order and the first match wins, since failure signatures overlap
(e.g. "Invalid parameter: element not found" is a logical failure, not a
missing target).

Default rule order:
    1. LOGICAL         -> NoRetry
    2. TARGET_MISSING  -> LinearBackoff(delay=1.0, max_attempts=3)
    3. TRANSIENT       -> ExponentialBackoff(initial_delay=2.0, max_attempts=5)
    4. (no match)      -> Immediate(max_attempts=3)

Matching is case-insensitive substring search. The rule table lives behind
FailureClassifier so the matching strategy can change without touching the
driver.

Example:
    >>> from actionretry import Outcome, classify
    >>> classify(Outcome.fail("Element with ID 123 not found on screen"))
    LinearBackoff(kind='linear', delay=1.0, max_attempts=3)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from actionretry.foundation.errors import FailureKind, Outcome

from .policy import NO_RETRY, ExponentialBackoff, Immediate, LinearBackoff, RetryPolicy

if TYPE_CHECKING:
    from actionretry.foundation.config import RetrySettings


logger = logging.getLogger("actionretry.retry.classifier")

LOGICAL_PATTERNS: tuple[str, ...] = (
    "invalid", "cannot", "illegal", "not allowed", "precondition", "parameter", "argument",
)
TARGET_MISSING_PATTERNS: tuple[str, ...] = (
    "not found", "no such element", "unable to locate", "could not find", "not present", "not visible",
)
TRANSIENT_PATTERNS: tuple[str, ...] = (
    "network", "timeout", "timed out", "connection", "connectivity", "unreachable", "offline",
)


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    """Maps messages containing any of `patterns` to `policy`.
    
    Patterns are lowercased on construction; matching is against a lowercased
    message.
    """
    
    kind: FailureKind
    patterns: tuple[str, ...]
    policy: RetryPolicy
    
    def __post_init__(self) -> None:
        object.__setattr__(self, "patterns", tuple(p.lower() for p in self.patterns))
    
    def matches(self, haystack: str) -> bool:
        return any(p in haystack for p in self.patterns)


DEFAULT_POLICY: RetryPolicy = Immediate(max_attempts=3)

DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(FailureKind.LOGICAL, LOGICAL_PATTERNS, NO_RETRY),
    ClassificationRule(FailureKind.TARGET_MISSING, TARGET_MISSING_PATTERNS, LinearBackoff(delay=1.0, max_attempts=3)),
    ClassificationRule(FailureKind.TRANSIENT, TRANSIENT_PATTERNS, ExponentialBackoff(initial_delay=2.0, max_attempts=5)),
)


@lru_cache(maxsize=256)
def _first_match(rules: tuple[ClassificationRule, ...], message: str) -> ClassificationRule | None:
    """Cached first-match lookup by rule table and message."""
    haystack = message.lower()
    for rule in rules:
        if rule.matches(haystack):
            return rule
    return None


class FailureClassifier:
    """Ordered rule table selecting a RetryPolicy for a failed Outcome.
    
    Args:
        rules: Rules in priority order (first match wins)
        default: Policy for failures no rule matches
    
    Example:
        >>> rate_limited = ClassificationRule(
        ...     FailureKind.TRANSIENT, ("rate limit",),
        ...     ExponentialBackoff(initial_delay=5.0, max_attempts=3),
        ... )
        >>> classifier = FailureClassifier((rate_limited, *DEFAULT_RULES))
        >>> classifier.classify(Outcome.fail("Rate limit exceeded")).initial_delay
        5.0
    """
    
    __slots__ = ("_rules", "_default")
    
    def __init__(self, rules: Sequence[ClassificationRule] = DEFAULT_RULES, default: RetryPolicy = DEFAULT_POLICY) -> None:
        self._rules, self._default = tuple(rules), default
    
    @classmethod
    def from_settings(cls, settings: RetrySettings | None = None) -> FailureClassifier:
        """Build the default rule table with policy parameters from RetrySettings."""
        if settings is None:
            from actionretry.foundation.config import get_settings
            settings = get_settings().retry
        return cls(
            (
                ClassificationRule(FailureKind.LOGICAL, LOGICAL_PATTERNS, NO_RETRY),
                ClassificationRule(FailureKind.TARGET_MISSING, TARGET_MISSING_PATTERNS, LinearBackoff(
                    delay=settings.linear_delay, max_attempts=settings.linear_max_attempts,
                )),
                ClassificationRule(FailureKind.TRANSIENT, TRANSIENT_PATTERNS, ExponentialBackoff(
                    initial_delay=settings.exponential_initial_delay, max_attempts=settings.exponential_max_attempts,
                )),
            ),
            Immediate(max_attempts=settings.immediate_max_attempts),
        )
    
    @property
    def rules(self) -> tuple[ClassificationRule, ...]:
        return self._rules
    
    @property
    def default(self) -> RetryPolicy:
        return self._default
    
    def kind_of(self, outcome: Outcome) -> FailureKind:
        """Failure category of `outcome` (NONE for successes)."""
        if outcome.succeeded:
            return FailureKind.NONE
        rule = _first_match(self._rules, outcome.message)
        return rule.kind if rule else FailureKind.INTERACTION
    
    def classify(self, outcome: Outcome) -> RetryPolicy:
        """Select the retry policy for `outcome`.
        
        Successes map to NoRetry: retrying a success is never meaningful.
        """
        if outcome.succeeded:
            return NO_RETRY
        rule = _first_match(self._rules, outcome.message)
        policy = rule.policy if rule else self._default
        logger.debug(f"Classified {outcome.message!r} as {rule.kind if rule else FailureKind.INTERACTION}: {policy.label}")
        return policy
    
    def __repr__(self) -> str:
        return f"FailureClassifier([{', '.join(r.kind for r in self._rules)}], default={self._default.label})"


_DEFAULT_CLASSIFIER = FailureClassifier()


def default_classifier() -> FailureClassifier:
    """The built-in classifier used by classify() and kind_of()."""
    return _DEFAULT_CLASSIFIER


def classify(outcome: Outcome) -> RetryPolicy:
    """Select a retry policy for `outcome` using the built-in rules."""
    return _DEFAULT_CLASSIFIER.classify(outcome)


def kind_of(outcome: Outcome) -> FailureKind:
    """Failure category of `outcome` under the built-in rules."""
    return _DEFAULT_CLASSIFIER.kind_of(outcome)

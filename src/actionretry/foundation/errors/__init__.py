"""Outcomes, failure categories, and package exceptions.

- Outcome: Immutable result of one action attempt
- FailureKind: Category inferred from a failed Outcome
- ActionRetryError/CircuitOpenError: Errors raised by actionretry itself
"""

from .errors import ActionRetryError, CircuitOpenError, FailureKind, JsonDict
from .outcome import Outcome

__all__ = ["Outcome", "FailureKind", "ActionRetryError", "CircuitOpenError", "JsonDict"]

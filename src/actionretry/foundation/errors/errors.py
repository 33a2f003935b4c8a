"""Failure categories and package exceptions.

FailureKind names the category a failed Outcome falls into. The retry layer
never raises for an ordinary failure; the exceptions here cover the few
conditions that are not representable as an Outcome.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

# JSON-shaped payloads (serialized policies, log records)
JsonDict = dict[str, Any]


class FailureKind(StrEnum):
    """Category of a failed action, as inferred from its message.
    
    Used for logging and for selecting a retry policy.
    """
    NONE = "NONE"  # Outcome succeeded
    LOGICAL = "LOGICAL"
    TARGET_MISSING = "TARGET_MISSING"
    TRANSIENT = "TRANSIENT"
    INTERACTION = "INTERACTION"


class ActionRetryError(Exception):
    """Base class for errors raised by actionretry itself."""


class CircuitOpenError(ActionRetryError):
    """Raised when a circuit breaker rejects a call while open.
    
    Attributes:
        name: Circuit identifier
        retry_after: Seconds until the circuit allows a probe call
    """
    
    def __init__(self, name: str, retry_after: float) -> None:
        self.name, self.retry_after = name, retry_after
        super().__init__(f"Circuit '{name}' is open; retry after {retry_after:.1f}s")

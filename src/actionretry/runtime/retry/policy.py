"""Retry policies for UI actions.

A RetryPolicy is a closed union of four frozen variants, each carrying its own
timing and attempt parameters:

- NoRetry: Failure is permanent, invoke once
- Immediate: Re-invoke with no delay
- LinearBackoff: Re-invoke after the same fixed delay each time
- ExponentialBackoff: Re-invoke after a delay doubling from initial_delay

`max_attempts` always counts total invocations, including the first.
Durations are in seconds.

Policies carry no progress state; the driver owns attempt counters and
current delays. The `kind` field tags each variant so policies round-trip
through plain dicts via validate_policy/dump_policy.

Example:
    >>> policy = LinearBackoff(delay=1.0, max_attempts=3)
    >>> dump_policy(policy)
    {'kind': 'linear', 'delay': 1.0, 'max_attempts': 3}
    >>> validate_policy({"kind": "immediate", "max_attempts": 2})
    Immediate(kind='immediate', max_attempts=2)
"""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, TypeAdapter

from actionretry.foundation.errors import JsonDict

_POLICY_CONFIG = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

Attempts = Annotated[int, Field(ge=1, description="Total invocations including the first")]


class NoRetry(BaseModel):
    """Permanent failure: the action is invoked exactly once."""
    
    model_config = _POLICY_CONFIG
    
    kind: Literal["no_retry"] = "no_retry"
    
    @property
    def max_attempts(self) -> int:
        return 1
    
    @property
    def label(self) -> str:
        return "no_retry"


class Immediate(BaseModel):
    """Re-invoke without delay, for timing races that resolve on the next frame."""
    
    model_config = _POLICY_CONFIG
    
    kind: Literal["immediate"] = "immediate"
    max_attempts: Attempts
    
    @property
    def label(self) -> str:
        return f"immediate(x{self.max_attempts})"


class LinearBackoff(BaseModel):
    """Fixed delay between attempts.
    
    Attributes:
        delay: Seconds to wait before every retry
        max_attempts: Total invocations including the first
    """
    
    model_config = _POLICY_CONFIG
    
    kind: Literal["linear"] = "linear"
    delay: NonNegativeFloat
    max_attempts: Attempts
    
    @property
    def label(self) -> str:
        return f"linear({self.delay:g}s x{self.max_attempts})"


class ExponentialBackoff(BaseModel):
    """Delay doubling on every retry.
    
    Delays before retries are initial_delay, 2*initial_delay, 4*initial_delay, ...
    
    Attributes:
        initial_delay: Seconds to wait before the first retry
        max_attempts: Total invocations including the first
    """
    
    model_config = _POLICY_CONFIG
    
    kind: Literal["exponential"] = "exponential"
    initial_delay: NonNegativeFloat
    max_attempts: Attempts
    
    @property
    def label(self) -> str:
        return f"exponential({self.initial_delay:g}s x{self.max_attempts})"


RetryPolicy: TypeAlias = Annotated[
    Union[NoRetry, Immediate, LinearBackoff, ExponentialBackoff],
    Field(discriminator="kind"),
]

# Exponential growth factor per retry
BACKOFF_FACTOR = 2.0

# Singleton for no-retry policy
NO_RETRY = NoRetry()

_PolicyAdapter: TypeAdapter[RetryPolicy] = TypeAdapter(RetryPolicy)


def validate_policy(data: JsonDict | RetryPolicy) -> RetryPolicy:
    """Build a policy from a tagged dict (or pass an existing policy through)."""
    if isinstance(data, (NoRetry, Immediate, LinearBackoff, ExponentialBackoff)):
        return data
    return _PolicyAdapter.validate_python(data)


def dump_policy(policy: RetryPolicy) -> JsonDict:
    """Serialize policy to a tagged dict."""
    return _PolicyAdapter.dump_python(policy, mode="json")


def first_delay(policy: RetryPolicy) -> float:
    """Delay before the first retry under `policy`."""
    match policy:
        case NoRetry() | Immediate():
            return 0.0
        case LinearBackoff(delay=d):
            return d
        case ExponentialBackoff(initial_delay=d):
            return d
        case _:
            raise TypeError(f"Unknown retry policy: {policy!r}")


def next_delay(policy: RetryPolicy, current: float) -> float:
    """Delay before the retry following one that waited `current` seconds."""
    match policy:
        case NoRetry() | Immediate():
            return 0.0
        case LinearBackoff(delay=d):
            return d
        case ExponentialBackoff():
            return current * BACKOFF_FACTOR
        case _:
            raise TypeError(f"Unknown retry policy: {policy!r}")

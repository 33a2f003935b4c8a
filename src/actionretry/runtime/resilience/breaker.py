"""Circuit breaker guarding a failing collaborator.

Implements the circuit breaker pattern as a small state machine. Failing
Outcomes and raised exceptions both count as failures.

State Machine:
    CLOSED → failures reach threshold → OPEN
    OPEN → recovery_time elapses → HALF_OPEN
    HALF_OPEN → success → CLOSED
    HALF_OPEN → failure → OPEN
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from actionretry.foundation.errors import CircuitOpenError, Outcome

if TYPE_CHECKING:
    from actionretry.foundation.config import BreakerSettings
    from actionretry.runtime.retry import Action


logger = logging.getLogger("actionretry.resilience")


class State(IntEnum):
    """Circuit breaker states."""
    CLOSED, OPEN, HALF_OPEN = 0, 1, 2  # Normal → Failing fast → Testing recovery


@dataclass(slots=True)
class CircuitBreaker:
    """Circuit breaker state machine with an async call wrapper.
    
    Args:
        failure_threshold: Consecutive failures before opening (default: 3)
        recovery_time: Seconds before a half-open probe (default: 30)
        success_threshold: Successes in half-open to close (default: 1)
        name: Circuit identifier for logs and errors
        clock: Monotonic time source in seconds
    
    Example (wrapper):
        >>> breaker = CircuitBreaker(failure_threshold=3, name="llm")
        >>> outcome = await breaker.call(query_model)  # raises CircuitOpenError when open
    
    Example (manual):
        >>> if breaker.allow():
        ...     outcome = await query_model()
        ...     breaker.record_success() if outcome.succeeded else breaker.record_failure()
    """
    
    failure_threshold: int = 3
    recovery_time: float = 30.0
    success_threshold: int = 1
    name: str = "circuit"
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _state: State = field(default=State.CLOSED, init=False)
    _failures: int = field(default=0, init=False)
    _successes: int = field(default=0, init=False)
    _changed_at: float = field(default=0.0, init=False, repr=False)
    _probe_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)  # One HALF_OPEN probe at a time
    
    @classmethod
    def from_settings(cls, settings: BreakerSettings | None = None, *, name: str = "circuit") -> CircuitBreaker:
        if settings is None:
            from actionretry.foundation.config import get_settings
            settings = get_settings().breaker
        return cls(settings.failure_threshold, settings.recovery_time, settings.success_threshold, name)
    
    def _transition(self, state: State) -> None:
        if state != self._state:
            logger.info(f"[{self.name}] Circuit {self._state.name} -> {state.name}")
        self._state, self._changed_at = state, self.clock()
    
    def _evaluate_state(self) -> State:
        """Evaluate and potentially transition OPEN → HALF_OPEN."""
        if self._state == State.OPEN and self.clock() - self._changed_at >= self.recovery_time:
            self._successes = 0
            self._transition(State.HALF_OPEN)
        return self._state
    
    # ─────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────
    
    def allow(self) -> bool:
        """Check if a call should be allowed through.
        
        Also triggers the OPEN → HALF_OPEN transition once recovery_time elapsed.
        """
        return self._evaluate_state() != State.OPEN
    
    def record_success(self) -> None:
        """Record successful execution."""
        if self._state == State.HALF_OPEN:
            self._successes += 1
            if self._successes >= self.success_threshold:  # Recovery confirmed
                self._failures = 0
                self._transition(State.CLOSED)
        else:
            self._failures = 0
    
    def record_failure(self) -> None:
        """Record failed execution."""
        self._failures += 1
        if self._state == State.HALF_OPEN or (self._state == State.CLOSED and self._failures >= self.failure_threshold):
            self._transition(State.OPEN)
    
    def reset(self) -> None:
        """Manually reset circuit to closed state."""
        self._failures = self._successes = 0
        self._transition(State.CLOSED)
    
    async def call(self, action: Action) -> Outcome:
        """Invoke `action` through the breaker.
        
        While HALF_OPEN, calls are serialized so a single probe decides whether
        the circuit closes; callers queued behind a failed probe are rejected.
        
        Raises:
            CircuitOpenError: Circuit is open; the action is not invoked
        """
        if not self.allow():
            raise CircuitOpenError(self.name, self.retry_after or 0.0)
        if self._state != State.HALF_OPEN:
            return await self._invoke(action)
        async with self._probe_lock:
            if not self.allow():  # Earlier probe reopened the circuit
                raise CircuitOpenError(self.name, self.retry_after or 0.0)
            return await self._invoke(action)
    
    async def _invoke(self, action: Action) -> Outcome:
        try:
            outcome = await action()
        except Exception:
            self.record_failure()
            raise
        if outcome.succeeded:
            self.record_success()
        else:
            self.record_failure()
        return outcome
    
    # ─────────────────────────────────────────────────────────────────
    # Observability Properties
    # ─────────────────────────────────────────────────────────────────
    
    @property
    def state(self) -> State:
        """Current circuit state (evaluates transitions)."""
        return self._evaluate_state()
    
    @property
    def failures(self) -> int:
        return self._failures
    
    @property
    def is_open(self) -> bool:
        return self.state == State.OPEN
    
    @property
    def retry_after(self) -> float | None:
        """Seconds until circuit transitions to half-open, or None if not open."""
        if self._evaluate_state() != State.OPEN:
            return None
        return max(0.0, self.recovery_time - (self.clock() - self._changed_at))

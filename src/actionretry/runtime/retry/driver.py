"""Retry driver: run an action under a RetryPolicy until it is terminal.

The driver invokes the action, and while the Outcome is a failure and the
policy's attempt budget allows, suspends for the policy delay and invokes
it again. It never reclassifies mid-loop and never calls the classifier:
the policy it is given binds for the whole run.

Terminal states are always returned as Outcomes (success, exhausted budget,
permanent failure). Exceptions raised by the action and cancellation of the
enclosing task propagate unchanged.

Example:
    >>> outcome = await execute_with_retry(tap_login, classify(first_outcome), name="tap:login")
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from actionretry.foundation.errors import Outcome
from actionretry.runtime.concurrency import checkpoint

from .policy import RetryPolicy, first_delay, next_delay

logger = logging.getLogger("actionretry.retry")

Action = Callable[[], Awaitable[Outcome]]
Sleep = Callable[[float], Awaitable[object]]


@dataclass(frozen=True, slots=True)
class RetryEvent:
    """Emitted before each inter-attempt suspension.
    
    Attributes:
        attempt: 1-indexed attempt that just failed
        max_attempts: Attempt budget of the policy
        delay: Seconds the driver is about to wait
        outcome: Failed Outcome of `attempt`
        policy: Policy bound to this run
    """
    
    attempt: int
    max_attempts: int
    delay: float
    outcome: Outcome
    policy: RetryPolicy


async def execute_with_retry(
    action: Action,
    policy: RetryPolicy,
    *,
    name: str = "action",
    on_retry: Callable[[RetryEvent], None] | None = None,
    sleep: Sleep = asyncio.sleep,
) -> Outcome:
    """Execute async action with retry policy.
    
    Attempts are strictly sequential and never exceed `policy.max_attempts`.
    The first successful Outcome is returned immediately.
    
    Args:
        action: Zero-argument async callable performing the interaction
        policy: Retry policy bound to this run
        name: Label for logging
        on_retry: Optional callback invoked before each retry delay
        sleep: Awaitable sleep used for delays (default: asyncio.sleep)
    
    Returns:
        Outcome of the successful attempt, or of the last failed attempt
    """
    max_attempts = policy.max_attempts
    delay = first_delay(policy)
    
    outcome = await action()
    attempt = 1
    
    while outcome.failed and attempt < max_attempts:
        logger.info(f"[{name}] Retry {attempt + 1}/{max_attempts} after {delay:.1f}s (policy: {policy.kind})")
        if on_retry:
            on_retry(RetryEvent(attempt, max_attempts, delay, outcome, policy))
        
        await checkpoint()  # Cooperative cancellation point
        if delay > 0:
            await sleep(delay)
        
        outcome = await action()
        attempt += 1
        delay = next_delay(policy, delay)
    
    if outcome.failed and max_attempts > 1:
        logger.warning(f"[{name}] Gave up after {attempt} attempts: {outcome.message}")
    return outcome


@dataclass(slots=True)
class RetryDriver:
    """Reusable execute_with_retry configuration.
    
    Holds the logging label, retry callback, and sleep function so an agent
    loop can run many actions the same way. Each execute() call owns its own
    attempt counter and delay, so concurrent calls share no state.
    
    Example:
        >>> driver = RetryDriver(name="tap")
        >>> outcome = await driver.execute(tap_login, Immediate(max_attempts=3))
    """
    
    name: str = "action"
    on_retry: Callable[[RetryEvent], None] | None = None
    sleep: Sleep = field(default=asyncio.sleep, repr=False)
    
    async def execute(self, action: Action, policy: RetryPolicy, *, name: str | None = None) -> Outcome:
        return await execute_with_retry(
            action, policy, name=name or self.name, on_retry=self.on_retry, sleep=self.sleep,
        )

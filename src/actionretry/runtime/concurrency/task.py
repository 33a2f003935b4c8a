"""Cooperative scheduling helpers for retry loops."""

from __future__ import annotations

import asyncio


async def checkpoint() -> None:
    """Cooperative cancellation checkpoint.
    
    Yields control to the event loop, allowing pending cancellations
    to be processed before the next attempt starts.
    
    Example:
        >>> async def poll(actions):
        ...     for action in actions:
        ...         await action()
        ...         await checkpoint()  # Allow cancellation here
    """
    await asyncio.sleep(0)


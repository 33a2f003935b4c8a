"""Resilience primitives beyond per-action retry."""

from .breaker import CircuitBreaker, State

__all__ = ["CircuitBreaker", "State"]

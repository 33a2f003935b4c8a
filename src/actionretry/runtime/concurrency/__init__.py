"""Cooperative concurrency helpers (pure asyncio)."""

from .task import checkpoint

__all__ = ["checkpoint"]

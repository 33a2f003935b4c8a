"""Outcome of a single action attempt.

An Outcome is the only thing the retry layer learns about an attempt: whether
it succeeded, and a free-form diagnostic message. On failure the message is
the sole input to classification.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Outcome(BaseModel):
    """Immutable result of one action invocation.
    
    Two Outcomes with equal fields are interchangeable.
    
    Attributes:
        succeeded: Whether the action achieved its effect
        message: Diagnostic text (informational on success)
        is_done: Action reports that the overall task is complete
        data: Additional string data produced by the action (read-only view)
    
    Example:
        >>> Outcome.fail("Element with ID 123 not found on screen")
        Outcome(succeeded=False, message='Element with ID 123 not found on screen', is_done=False)
    """
    
    model_config = ConfigDict(
        frozen=True, extra="forbid", revalidate_instances="never",
        json_schema_extra={
            "title": "Outcome",
            "examples": [{"succeeded": False, "message": "Click failed"}],
        },
    )
    
    succeeded: bool
    message: str = ""
    is_done: bool = False
    data: Mapping[str, str] = Field(default_factory=dict, repr=False, validate_default=True)
    
    @field_validator("data", mode="after")
    @classmethod
    def _freeze_data(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Wrap a private copy in a read-only view so hash and equality stay fixed."""
        return MappingProxyType(dict(v))
    
    @field_serializer("data")
    def _serialize_data(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)
    
    @classmethod
    def ok(cls, message: str = "", *, is_done: bool = False, **data: str) -> Outcome:
        """Successful outcome."""
        return cls(succeeded=True, message=message, is_done=is_done, data=data)
    
    @classmethod
    def fail(cls, message: str, **data: str) -> Outcome:
        """Failed outcome. The message drives retry classification."""
        return cls(succeeded=False, message=message, data=data)
    
    @property
    def failed(self) -> bool:
        return not self.succeeded
    
    def __hash__(self) -> int:
        """Hash over all fields; data is read-only, hashed as a sorted tuple."""
        return hash((self.succeeded, self.message, self.is_done, tuple(sorted(self.data.items()))))

"""Result wrapper for study operations that degrade instead of raising."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Outcome(Generic[T]):
    """
    Value returned by a study operation.

    ``degraded`` is True when ``value`` is a placeholder (apology text,
    sentinel entry, or the empty result for missing content) rather than
    real model output.
    """
    value: T
    degraded: bool = False
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: Optional[str] = None) -> "Outcome[T]":
        return cls(value=value, degraded=True, error=error)

"""Exception hierarchy for goodstuff.

- GoodStuffError (base)
- SamplingError (base for invalid selection inputs, also a ValueError)
  - EmptyCollectionError
  - LengthMismatchError
  - InvalidWeightError
"""

from __future__ import annotations

from typing import Optional


class GoodStuffError(Exception):
    """Base exception for the package."""


class SamplingError(GoodStuffError, ValueError):
    """Raised when selection inputs violate a precondition."""


class EmptyCollectionError(SamplingError):
    """The operation needs at least one element."""

    def __init__(self, message: str = "collection must be non-empty") -> None:
        super().__init__(message)


class LengthMismatchError(SamplingError):
    """Two collections that must be aligned by position differ in length."""

    def __init__(self, expected: int, actual: int, message: Optional[str] = None) -> None:
        msg = message or f"length mismatch: expected {expected} elements, got {actual}"
        super().__init__(msg)
        self.expected = expected
        self.actual = actual


class InvalidWeightError(SamplingError):
    """A weight is negative or non-finite, or all weights sum to zero.

    ``index`` and ``weight`` are set for a single offending weight, ``total``
    when the sum itself is unusable.
    """

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        weight: Optional[float] = None,
        total: Optional[float] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.weight = weight
        self.total = total


__all__ = [
    "EmptyCollectionError",
    "GoodStuffError",
    "InvalidWeightError",
    "LengthMismatchError",
    "SamplingError",
]

"""Common type aliases and protocols shared across the package."""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class RandomSource(Protocol):
    """Zero-argument callable producing uniform floats in ``[0, 1)``."""

    def __call__(self) -> float:  # pragma: no cover - protocol definition
        ...


class IndexedCallback(Protocol):
    """Callable signature for ``each_with_index`` style callbacks."""

    def __call__(self, value, index: int) -> None:  # pragma: no cover - protocol definition
        ...


__all__ = ["IndexedCallback", "RandomSource", "T", "U"]

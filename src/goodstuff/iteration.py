"""Iteration sugar: counted loops and callback-style collection walks.

``times(5, callback)`` reads as "five times, call callback" and replaces::

    for i in range(5):
        callback(i)
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .errors import EmptyCollectionError, LengthMismatchError
from .types import IndexedCallback, T, U

_MISSING = object()


def times(iterations: int, callback: Callable[[int], Any]) -> None:
    """Call ``callback(i)`` for ``i`` in ``0 .. iterations - 1``."""

    for i in range(iterations):
        callback(i)


def up_to(start: int, end: int, callback: Callable[[int], Any]) -> None:
    """Call ``callback`` for every integer from ``start`` up to ``end`` inclusive."""

    for i in range(start, end + 1):
        callback(i)


def down_to(start: int, end: int, callback: Callable[[int], Any]) -> None:
    """Call ``callback`` for every integer from ``start`` down to ``end`` inclusive."""

    for i in range(start, end - 1, -1):
        callback(i)


def each(iterable: Iterable[T], callback: Callable[[T], Any]) -> None:
    for value in iterable:
        callback(value)


def each_with_index(iterable: Iterable[T], callback: IndexedCallback) -> None:
    for index, value in enumerate(iterable):
        callback(value, index)


def in_parallel_with(
    first: Iterable[T],
    second: Iterable[U],
    callback: Callable[[T, U], Any],
) -> None:
    """Walk two collections in lockstep, calling ``callback(a, b)`` per pair.

    Raises :class:`LengthMismatchError` when one side runs out first. Pairs
    before the mismatch have already been passed to ``callback`` at that point
    unless both inputs are sized, in which case nothing is called.
    """

    if hasattr(first, "__len__") and hasattr(second, "__len__"):
        if len(first) != len(second):
            raise LengthMismatchError(len(first), len(second))
    left = iter(first)
    right = iter(second)
    count = 0
    while True:
        a = next(left, _MISSING)
        b = next(right, _MISSING)
        if a is _MISSING and b is _MISSING:
            return
        if a is _MISSING or b is _MISSING:
            shorter = "first" if a is _MISSING else "second"
            raise LengthMismatchError(
                count if a is _MISSING else count + 1,
                count + 1 if a is _MISSING else count,
                f"{shorter} iterable ended after {count} elements",
            )
        callback(a, b)
        count += 1


def min_by(iterable: Iterable[T], key: Callable[[T], Any]) -> T:
    """Return the element with the smallest ``key``; the first one wins ties."""

    result = min(iterable, key=key, default=_MISSING)
    if result is _MISSING:
        raise EmptyCollectionError("min_by requires a non-empty collection")
    return result


def max_by(iterable: Iterable[T], key: Callable[[T], Any]) -> T:
    """Return the element with the largest ``key``; the first one wins ties."""

    result = max(iterable, key=key, default=_MISSING)
    if result is _MISSING:
        raise EmptyCollectionError("max_by requires a non-empty collection")
    return result


__all__ = [
    "down_to",
    "each",
    "each_with_index",
    "in_parallel_with",
    "max_by",
    "min_by",
    "times",
    "up_to",
]

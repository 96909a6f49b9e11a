"""Uniform and weighted random selection."""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Generic, Iterable, Optional, Sequence, TYPE_CHECKING

from .config import SamplingConfig
from .errors import EmptyCollectionError, InvalidWeightError, LengthMismatchError
from .random_source import random_source_from_config
from .types import RandomSource, T

if TYPE_CHECKING:  # pragma: no cover
    from .weight_tables import WeightTable

LOGGER = logging.getLogger(__name__)


def _check_aligned(items: Sequence[Any], weights: Sequence[float]) -> None:
    if len(items) == 0:
        raise EmptyCollectionError("items must be non-empty")
    if len(weights) != len(items):
        raise LengthMismatchError(
            len(items),
            len(weights),
            f"weights length {len(weights)} must match items length {len(items)}",
        )


def _as_weight(index: int, weight: float) -> float:
    if isinstance(weight, (str, bytes)):
        raise InvalidWeightError(
            f"weight at index {index} is not a number: {weight!r}",
            index=index,
            weight=weight,
        )
    try:
        value = float(weight)
    except (OverflowError, TypeError, ValueError) as exc:
        raise InvalidWeightError(
            f"weight at index {index} is not a finite number: {weight!r}",
            index=index,
            weight=weight,
        ) from exc
    if not math.isfinite(value):
        raise InvalidWeightError(
            f"weight at index {index} is not finite: {weight!r}",
            index=index,
            weight=weight,
        )
    if value < 0:
        raise InvalidWeightError(
            f"weight at index {index} is negative: {weight!r}",
            index=index,
            weight=weight,
        )
    return value


def _validated_weights(weights: Sequence[float]) -> tuple[list[float], float]:
    values = [_as_weight(index, weight) for index, weight in enumerate(weights)]
    total = sum(values)
    if total <= 0:
        raise InvalidWeightError("weights must sum to a positive value", total=total)
    if not math.isfinite(total):
        raise InvalidWeightError("sum of weights overflows", total=total)
    return values, total


def select_weighted_index(weights: Sequence[float], random_fn: RandomSource = random.random) -> int:
    """Return an index drawn with probability proportional to its weight.

    Scans the weights in order keeping a running sum and returns the first
    position whose cumulative weight reaches the draw. Zero weights are never
    selected.
    """

    if len(weights) == 0:
        raise EmptyCollectionError("weights must be non-empty")
    values, total = _validated_weights(weights)
    threshold = random_fn() * total
    cumulative = 0.0
    last_positive = 0
    for index, weight in enumerate(values):
        if weight == 0:
            continue
        last_positive = index
        cumulative += weight
        if threshold <= cumulative:
            return index
    # only reachable when random_fn breaks its [0, 1) contract
    return last_positive


def select_uniform_index(length: int, random_fn: RandomSource = random.random) -> int:
    """Return an index in ``range(length)`` with equal probability."""

    if length <= 0:
        raise EmptyCollectionError("collection must be non-empty")
    return min(int(random_fn() * length), length - 1)


def select_weighted(
    items: Sequence[T],
    weights: Sequence[float],
    random_fn: RandomSource = random.random,
) -> T:
    """Choose a single item with probability proportional to its weight."""

    _check_aligned(items, weights)
    return items[select_weighted_index(weights, random_fn)]


def select_uniform(items: Sequence[T], random_fn: RandomSource = random.random) -> T:
    """Choose a single item, every position equally likely."""

    if len(items) == 0:
        raise EmptyCollectionError("items must be non-empty")
    return items[select_uniform_index(len(items), random_fn)]


def select_pairs(pairs: Iterable[tuple[T, float]], random_fn: RandomSource = random.random) -> T:
    """Weighted choice over ``(item, weight)`` pairs."""

    entries = list(pairs)
    items = [item for item, _ in entries]
    weights = [weight for _, weight in entries]
    return select_weighted(items, weights, random_fn)


class WeightedSampler(Generic[T]):
    """Selection helpers bound to one reusable random source.

    The source is injected explicitly; when omitted it is built from
    ``config`` so seeded configurations give reproducible sequences.
    """

    def __init__(
        self,
        config: Optional[SamplingConfig] = None,
        *,
        random_fn: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or SamplingConfig()
        self._random = random_fn or random_source_from_config(self.config)

    @property
    def random_fn(self) -> RandomSource:
        return self._random

    def select_weighted(self, items: Sequence[T], weights: Sequence[float]) -> T:
        _check_aligned(items, weights)
        index = select_weighted_index(weights, self._random)
        LOGGER.debug("Weighted selection picked index %d of %d", index, len(items))
        return items[index]

    def select_uniform(self, items: Sequence[T]) -> T:
        index = select_uniform_index(len(items), self._random)
        LOGGER.debug("Uniform selection picked index %d of %d", index, len(items))
        return items[index]

    def select_pairs(self, pairs: Iterable[tuple[T, float]]) -> T:
        entries = list(pairs)
        return self.select_weighted(
            [item for item, _ in entries],
            [weight for _, weight in entries],
        )

    def select_from_table(self, table: "WeightTable") -> Any:
        return self.select_weighted(table.items(), table.weights())


__all__ = [
    "WeightedSampler",
    "select_pairs",
    "select_uniform",
    "select_uniform_index",
    "select_weighted",
    "select_weighted_index",
]

import pytest

from goodstuff.errors import EmptyCollectionError, LengthMismatchError
from goodstuff.iteration import (
    down_to,
    each,
    each_with_index,
    in_parallel_with,
    max_by,
    min_by,
    times,
    up_to,
)


def test_times_iterates_zero_times():
    calls = []
    times(0, calls.append)
    assert calls == []


def test_times_passes_indices():
    calls = []
    times(5, calls.append)
    assert calls == [0, 1, 2, 3, 4]


def test_times_negative_is_noop():
    calls = []
    times(-3, calls.append)
    assert calls == []


def test_up_to_is_inclusive():
    calls = []
    up_to(2, 5, calls.append)
    assert calls == [2, 3, 4, 5]


def test_up_to_empty_when_end_below_start():
    calls = []
    up_to(5, 2, calls.append)
    assert calls == []


def test_down_to_is_inclusive():
    calls = []
    down_to(5, 2, calls.append)
    assert calls == [5, 4, 3, 2]


def test_each_iterates_over_every_item():
    total = []
    each([1, 2, 3, 4, 5], total.append)
    assert sum(total) == 15


def test_each_with_empty_collection():
    calls = []
    each([], calls.append)
    assert calls == []


def test_each_with_index_provides_value_and_index():
    seen = []
    each_with_index(["first", "second"], lambda value, index: seen.extend([value, index]))
    assert seen == ["first", 0, "second", 1]


def test_in_parallel_with_pairs_elements():
    pairs = []
    in_parallel_with([1, 2, 3], "abc", lambda a, b: pairs.append((a, b)))
    assert pairs == [(1, "a"), (2, "b"), (3, "c")]


def test_in_parallel_with_sized_mismatch_calls_nothing():
    pairs = []
    with pytest.raises(LengthMismatchError):
        in_parallel_with([1, 2, 3], [1, 2], lambda a, b: pairs.append((a, b)))
    assert pairs == []


def test_in_parallel_with_iterator_mismatch():
    pairs = []
    with pytest.raises(LengthMismatchError) as excinfo:
        in_parallel_with(iter([1]), iter([1, 2]), lambda a, b: pairs.append((a, b)))
    assert pairs == [(1, 1)]
    assert "first iterable ended after 1 elements" in str(excinfo.value)


def test_in_parallel_with_none_values():
    pairs = []
    in_parallel_with(iter([None]), iter([None]), lambda a, b: pairs.append((a, b)))
    assert pairs == [(None, None)]


def test_min_by_and_max_by():
    words = ["pear", "fig", "banana", "kiwi"]
    assert min_by(words, len) == "fig"
    assert max_by(words, len) == "banana"


def test_min_by_first_wins_ties():
    words = ["kiwi", "pear", "plum"]
    assert min_by(words, len) == "kiwi"
    assert max_by(words, len) == "kiwi"


def test_min_by_max_by_empty():
    with pytest.raises(EmptyCollectionError):
        min_by([], len)
    with pytest.raises(EmptyCollectionError):
        max_by(iter(()), len)

"""
Sub-range sorting for the elementary sorts, sequence helpers, and the
copy-and-sort adapters registered for benchmarking.
"""

from __future__ import annotations

import pytest

from sortkit.algorithms import ALGORITHMS, STABLE_ALGORITHMS, get_algorithm
from sortkit.algorithms import bubble_sort, insertion_sort, selection_sort
from sortkit.algorithms.tim_sort import sort as tim_sort_adapter
from sortkit.algorithms._common import reverse_range
from sortkit.errors import InvalidRange
from sortkit.ordering import CountingComparator
from sortkit.validate import assert_no_mutation

elementary = pytest.mark.parametrize(
    "sort_fn",
    [bubble_sort, selection_sort, insertion_sort],
    ids=["bubble_sort", "selection_sort", "insertion_sort"],
)


@elementary
def test_sorts_only_the_requested_sub_range(sort_fn) -> None:
    xs = [9, 5, 4, 3, 2, 0]
    sort_fn(xs, lo=1, hi=5)
    assert xs == [9, 2, 3, 4, 5, 0]


@elementary
def test_open_ended_range(sort_fn) -> None:
    xs = [9, 5, 4, 3]
    sort_fn(xs, lo=2)
    assert xs == [9, 5, 3, 4]


@elementary
def test_tiny_range_short_circuits(sort_fn) -> None:
    counter = CountingComparator()
    xs = [3, 2, 1]
    sort_fn(xs, counter, lo=1, hi=2)
    sort_fn(xs, counter, lo=3, hi=3)
    assert xs == [3, 2, 1]
    assert counter.calls == 0


@elementary
@pytest.mark.parametrize("lo, hi", [(-1, 2), (0, 4), (3, 1), (4, None)])
def test_bad_range_raises_before_mutation(sort_fn, lo, hi) -> None:
    xs = [3, 2, 1]
    with pytest.raises(InvalidRange):
        sort_fn(xs, lo=lo, hi=hi)
    assert xs == [3, 2, 1]


def test_bubble_sort_early_exit_on_sorted_input() -> None:
    counter = CountingComparator()
    bubble_sort(list(range(10)), counter)
    assert counter.calls == 9


def test_reverse_range() -> None:
    xs = [0, 1, 2, 3, 4]
    reverse_range(xs, 1, 4)
    assert xs == [0, 3, 2, 1, 4]
    reverse_range(xs, 2, 2)
    assert xs == [0, 3, 2, 1, 4]


# ------------------------- adapters ------------------------- #

@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_adapter_returns_new_list_and_does_not_mutate(name: str) -> None:
    sort = get_algorithm(name)
    a = [5, 3, 8, 1, 9, 2]
    before = list(a)
    out = sort(a, config={})
    assert_no_mutation(before, a)
    assert out == [1, 2, 3, 5, 8, 9]
    assert out is not a
    assert sort(a, config={"ascending": False}) == [9, 8, 5, 3, 2, 1]


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_adapter_rejects_unknown_config_keys(name: str) -> None:
    with pytest.raises(ValueError, match="Unsupported config keys"):
        get_algorithm(name)([2, 1], config={"pivot": "median"})


def test_adapter_passes_comparator_through() -> None:
    counter = CountingComparator()
    out = get_algorithm("merge_sort")([3, 1, 2], compare=counter)
    assert out == [1, 2, 3]
    assert counter.calls > 0


@pytest.mark.parametrize("value", ["false", 0, None])
def test_adapter_rejects_non_bool_ascending(value) -> None:
    with pytest.raises(ValueError, match="ascending"):
        get_algorithm("merge_sort")([1, 3, 2], config={"ascending": value})


def test_tim_sort_adapter_accepts_min_run() -> None:
    assert tim_sort_adapter([3, 1, 2] * 10, config={"min_run": 4}) == sorted([3, 1, 2] * 10)


def test_registry() -> None:
    assert STABLE_ALGORITHMS <= set(ALGORITHMS)
    assert "quick_sort" not in STABLE_ALGORITHMS
    assert "selection_sort" not in STABLE_ALGORITHMS
    with pytest.raises(KeyError, match="Unknown algorithm"):
        get_algorithm("bogo_sort")

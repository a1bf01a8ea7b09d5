"""
Ordering predicates, comparator helpers and binary search.
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

import sortkit
from sortkit.errors import EmptyInput, UnsortedInput, require_non_empty
from sortkit.ordering import (
    CountingComparator,
    Ordering,
    default_compare,
    flip,
    is_eq,
    is_ge,
    is_gt,
    is_le,
    is_lt,
    resolve_compare,
)
from sortkit.search import binary_search, search_position


# ------------------------- ordering ------------------------- #

@pytest.mark.parametrize(
    "order, lt, le, eq, ge, gt",
    [
        (Ordering.LESS, True, True, False, False, False),
        (Ordering.EQUAL, False, True, True, True, False),
        (Ordering.GREATER, False, False, False, True, True),
        (-7, True, True, False, False, False),
        (0, False, True, True, True, False),
        (42, False, False, False, True, True),
    ],
)
def test_predicates(order, lt: bool, le: bool, eq: bool, ge: bool, gt: bool) -> None:
    assert (is_lt(order), is_le(order), is_eq(order), is_ge(order), is_gt(order)) == (
        lt, le, eq, ge, gt,
    )


def test_ordering_of_and_reverse() -> None:
    assert Ordering.of(-3) is Ordering.LESS
    assert Ordering.of(0) is Ordering.EQUAL
    assert Ordering.of(9) is Ordering.GREATER
    assert Ordering.LESS.reverse() is Ordering.GREATER
    assert Ordering.EQUAL.reverse() is Ordering.EQUAL


def test_default_compare_natural_order() -> None:
    assert default_compare(1, 2) is Ordering.LESS
    assert default_compare("b", "a") is Ordering.GREATER
    assert default_compare((1, 2), (1, 2)) is Ordering.EQUAL


def test_default_compare_incomparable_elements_tie() -> None:
    # Sets are partially ordered by inclusion.
    assert default_compare({1}, {2}) is Ordering.EQUAL
    assert default_compare({1}, {1, 2}) is Ordering.LESS


def test_flip_and_resolve_compare() -> None:
    assert flip(default_compare)(1, 2) is Ordering.GREATER
    assert resolve_compare(None) is default_compare
    assert resolve_compare(None, ascending=False)(1, 2) is Ordering.GREATER
    custom = lambda a, b: len(a) - len(b)  # noqa: E731
    assert resolve_compare(custom) is custom


def test_counting_comparator() -> None:
    counter = CountingComparator(lambda a, b: a - b)
    assert counter(3, 1) == 2
    assert counter(1, 1) == 0
    assert counter.calls == 2
    counter.reset()
    assert counter.calls == 0
    assert "calls=0" in repr(counter)


def test_require_non_empty() -> None:
    require_non_empty([0])
    with pytest.raises(EmptyInput):
        require_non_empty([])


# ------------------------- binary search ------------------------- #

def test_binary_search_found_and_missing() -> None:
    xs = [1, 3, 5, 7, 9]
    assert binary_search(xs, 7) == 3
    assert binary_search(xs, 4) is None


def test_binary_search_edges() -> None:
    assert binary_search([], 1) is None
    assert binary_search([2], 2) == 0
    assert binary_search([2], 3) is None
    assert binary_search([1, 3, 5], 1) == 0
    assert binary_search([1, 3, 5], 5) == 2
    assert binary_search([1, 3, 5], 0) is None
    assert binary_search([1, 3, 5], 6) is None


def test_binary_search_returns_leftmost_duplicate() -> None:
    assert binary_search([1, 2, 2, 2, 3], 2) == 1


def test_search_position_is_insertion_point() -> None:
    xs = [0, 2, 4, 6, 8]
    assert search_position(xs, 5) == 3
    assert search_position(xs, -1) == 0
    assert search_position(xs, 9) == 5
    assert search_position(xs, 0) == 0
    assert search_position(xs, 8) == 4


def test_binary_search_descending_and_custom_comparator() -> None:
    assert binary_search([9, 7, 5, 3], 5, ascending=False) == 2
    words = ["a", "bb", "ccc", "dddd"]
    assert binary_search(words, "xyz", lambda a, b: len(a) - len(b)) == 2


def test_checked_search_rejects_unsorted_input() -> None:
    with pytest.raises(UnsortedInput):
        binary_search([3, 1, 2], 1, check_sorted=True)
    assert binary_search([1, 2, 3], 2, check_sorted=True) == 1


def test_package_level_exports() -> None:
    xs = [5, 3, 8, 1, 9, 2]
    sortkit.tim_sort(xs)
    assert sortkit.is_sorted(xs)
    assert sortkit.binary_search(xs, 8) == 4


@settings(deadline=None, max_examples=150)
@given(st.lists(st.integers(-30, 30), max_size=60), st.integers(-35, 35))
def test_property_search_agrees_with_index(xs: List[int], target: int) -> None:
    xs.sort()
    expected = xs.index(target) if target in xs else None
    assert binary_search(xs, target) == expected
    pos = search_position(xs, target)
    assert all(x < target for x in xs[:pos])
    assert all(x >= target for x in xs[pos:])

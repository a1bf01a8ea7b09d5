"""
Property helpers for validating sorting results.

Used by the test-suite and by the benchmark harness (`verify: true`) to check
every algorithm's output without trusting any single oracle.

Public API (stable):
    is_sorted(xs, compare=None, *, ascending=True) -> bool
    first_order_violation_index(xs, compare=None, *, ascending=True) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    first_stability_violation_index(before, after, compare, *, tag=...) -> int | None
    is_partitioned(xs, low, high, p, compare=None, *, ascending=True) -> bool
    assert_no_mutation(before, after) -> None

Notes
-----
- Permutation checks count elements with `collections.Counter`, so elements
  must be hashable. Unhashable elements are compared by sorting their
  `repr`, which is enough for the test data used here.
- Stability cannot be inferred from values alone when equal keys are
  indistinguishable. The stability check therefore expects *tagged* items:
  every element carries a unique tag (by default `item[1]`, e.g. pairs
  `(key, original_index)`), and the comparator looks only at the key.
"""

from __future__ import annotations

from collections import Counter
from operator import itemgetter
from typing import Any, Callable, Dict, Hashable, Optional, Sequence

from sortkit.ordering import Comparator, is_eq, is_ge, is_gt, is_le, resolve_compare

__all__ = [
    "is_sorted",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "first_stability_violation_index",
    "is_partitioned",
    "assert_no_mutation",
]


def is_sorted(
    xs: Sequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> bool:
    """Return True iff no adjacent pair of `xs` compares GREATER."""
    return first_order_violation_index(xs, compare, ascending=ascending) is None


def first_order_violation_index(
    xs: Sequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> Optional[int]:
    """
    Return the first index i where xs[i] must come after xs[i+1], or None.

    Useful for precise error messages:
        i = first_order_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    cmp = resolve_compare(compare, ascending)
    for i in range(len(xs) - 1):
        if is_gt(cmp(xs[i], xs[i + 1])):
            return i
    return None


def _counts(xs: Sequence[Any]) -> Counter:
    try:
        return Counter(xs)
    except TypeError:
        return Counter(repr(x) for x in xs)


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of elements."""
    if len(a) != len(b):
        return False
    return _counts(a) == _counts(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Hashable, int]:
    """
    Return element -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    diff = _counts(a)
    diff.subtract(_counts(b))
    return {k: d for k, d in diff.items() if d != 0}


def first_stability_violation_index(
    before: Sequence[Any],
    after: Sequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
    tag: Callable[[Any], Hashable] = itemgetter(1),
) -> Optional[int]:
    """
    Return the first index i where after[i] and after[i+1] compare equal but
    appear in the opposite order in `before`, or None if the sort was stable.

    Equal elements are contiguous in a sorted output, so checking adjacent
    pairs is sufficient.
    """
    cmp = resolve_compare(compare, ascending)
    position = {tag(x): i for i, x in enumerate(before)}
    for i in range(len(after) - 1):
        x, y = after[i], after[i + 1]
        if is_eq(cmp(x, y)) and position[tag(x)] > position[tag(y)]:
            return i
    return None


def is_partitioned(
    xs: Sequence[Any],
    low: int,
    high: int,
    p: int,
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> bool:
    """True iff xs[low:p] <= xs[p] <= xs[p+1:high+1] under `compare` and direction."""
    cmp = resolve_compare(compare, ascending)
    pivot = xs[p]
    left_ok = all(is_le(cmp(xs[i], pivot)) for i in range(low, p))
    right_ok = all(is_ge(cmp(xs[i], pivot)) for i in range(p + 1, high + 1))
    return left_ok and right_ok


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), used to ensure
    an algorithm adapter did not mutate its input.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")

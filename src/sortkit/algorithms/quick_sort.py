"""
Quick sort on top of the partition engine (last-element pivot, Lomuto scheme).

- `quick_sort`: recursive. After partitioning it recurses into the SMALLER
  side and loops on the larger one, which keeps the recursion depth at
  O(log n) even on the quadratic inputs (sorted / reverse sorted).
- `quick_sort_iterative`: keeps pending (low, high) segments on an explicit
  stack instead of the call stack.

Neither variant is stable. Average O(n log n), worst case O(n^2).
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence, Tuple

from sortkit.algorithms._common import bench_sort
from sortkit.algorithms.partition import partition_range
from sortkit.ordering import Comparator, resolve_compare

__all__ = ["quick_sort", "quick_sort_iterative", "sort", "sort_iterative"]


def quick_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> None:
    """Sort `seq` in place with recursive quick sort."""
    n = len(seq)
    if n <= 1:
        return
    _sort_range(seq, 0, n - 1, resolve_compare(compare, ascending))


def _sort_range(seq: MutableSequence[Any], low: int, high: int, cmp: Comparator) -> None:
    while low < high:
        p = partition_range(seq, low, high, cmp)
        if p - low < high - p:
            _sort_range(seq, low, p - 1, cmp)
            low = p + 1
        else:
            _sort_range(seq, p + 1, high, cmp)
            high = p - 1


def quick_sort_iterative(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> None:
    """Sort `seq` in place with quick sort driven by an explicit segment stack."""
    n = len(seq)
    if n <= 1:
        return
    cmp = resolve_compare(compare, ascending)
    stack: List[Tuple[int, int]] = [(0, n - 1)]
    while stack:
        low, high = stack.pop()
        p = partition_range(seq, low, high, cmp)
        if p - 1 > low:
            stack.append((low, p - 1))
        if p + 1 < high:
            stack.append((p + 1, high))


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(quick_sort, a, config, compare)


def sort_iterative(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(quick_sort_iterative, a, config, compare)

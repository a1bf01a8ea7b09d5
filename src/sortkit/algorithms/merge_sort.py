"""
Merge sort, recursive (top-down) and iterative (bottom-up).

Both variants produce identical, stable output: every merge goes through the
merge engine, which takes the left run's element on ties.

- `merge_sort`: split at the midpoint, sort each half, merge.
  Recursion depth is ceil(log2(n)), well within Python's limit.
- `merge_sort_iterative`: merge adjacent blocks of width 1, 2, 4, ... until a
  single block covers the sequence. No recursion at all.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from sortkit.algorithms._common import bench_sort
from sortkit.algorithms.merge import merge_runs
from sortkit.ordering import Comparator, resolve_compare

__all__ = ["merge_sort", "merge_sort_iterative", "sort", "sort_iterative"]


def merge_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> None:
    """Sort `seq` in place with recursive top-down merge sort."""
    n = len(seq)
    if n <= 1:
        return
    _sort_range(seq, 0, n, resolve_compare(compare, ascending))


def _sort_range(seq: MutableSequence[Any], start: int, end: int, cmp: Comparator) -> None:
    if end - start <= 1:
        return
    mid = start + (end - start) // 2
    _sort_range(seq, start, mid, cmp)
    _sort_range(seq, mid, end, cmp)
    merge_runs(seq, start, mid, end, cmp)


def merge_sort_iterative(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> None:
    """Sort `seq` in place with bottom-up merge sort."""
    n = len(seq)
    if n <= 1:
        return
    cmp = resolve_compare(compare, ascending)
    width = 1
    while width < n:
        for start in range(0, n - width, width << 1):
            mid = start + width
            end = min(mid + width, n)
            merge_runs(seq, start, mid, end, cmp)
        width <<= 1


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(merge_sort, a, config, compare)


def sort_iterative(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(merge_sort_iterative, a, config, compare)

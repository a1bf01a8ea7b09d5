"""
Insertion sort.

Each element is shifted left past strictly greater predecessors, so equal
elements never cross (stable). O(n) on sorted or nearly sorted input, O(n^2)
worst case. Tim sort uses `insertion_sort_from` to grow short natural runs to
the minimum run length without re-checking the prefix it already knows is
sorted.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from sortkit.algorithms._common import bench_sort, check_slice
from sortkit.ordering import Comparator, is_gt, resolve_compare

__all__ = ["insertion_sort", "insertion_sort_from", "sort"]


def insertion_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
    lo: int = 0,
    hi: Optional[int] = None,
) -> None:
    """Sort `seq[lo:hi]` in place with insertion sort."""
    lo, hi = check_slice(seq, lo, hi)
    if hi - lo <= 1:
        return
    insertion_sort_from(seq, lo, hi, lo + 1, resolve_compare(compare, ascending))


def insertion_sort_from(
    seq: MutableSequence[Any], lo: int, hi: int, start: int, cmp: Comparator
) -> None:
    """
    Insert `seq[start:hi]` one by one into the sorted prefix `seq[lo:start]`.

    Unchecked: callers guarantee `lo < start <= hi <= len(seq)` and that
    `seq[lo:start]` is already sorted under `cmp`.
    """
    for i in range(start, hi):
        item = seq[i]
        j = i
        while j > lo and is_gt(cmp(seq[j - 1], item)):
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = item


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(insertion_sort, a, config, compare)

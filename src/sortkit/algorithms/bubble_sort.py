"""
Bubble sort: repeated adjacent compare-and-swap passes.

Stops as soon as a pass performs no swap, so already sorted input costs one
pass (n - 1 comparisons). Each pass also shrinks the scanned range to the
position of its last swap, since everything after it is in place.
Stable, in place, O(n^2) worst/average.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from sortkit.algorithms._common import bench_sort, check_slice
from sortkit.ordering import Comparator, is_gt, resolve_compare

__all__ = ["bubble_sort", "sort"]


def bubble_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
    lo: int = 0,
    hi: Optional[int] = None,
) -> None:
    """Sort `seq[lo:hi]` in place with bubble sort."""
    lo, hi = check_slice(seq, lo, hi)
    if hi - lo <= 1:
        return
    cmp = resolve_compare(compare, ascending)
    end = hi
    while end - lo > 1:
        last_swap = lo
        for i in range(lo + 1, end):
            if is_gt(cmp(seq[i - 1], seq[i])):
                seq[i - 1], seq[i] = seq[i], seq[i - 1]
                last_swap = i
        if last_swap == lo:
            break
        end = last_swap


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(bubble_sort, a, config, compare)

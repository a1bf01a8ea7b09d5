"""
Selection sort.

For each position from the left, find the minimum of the unsorted suffix and
swap it into place. Always O(n^2) comparisons, at most n - 1 swaps.
NOT stable: the swap can carry an element past an equal one.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from sortkit.algorithms._common import bench_sort, check_slice
from sortkit.ordering import Comparator, is_lt, resolve_compare

__all__ = ["selection_sort", "sort"]


def selection_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
    lo: int = 0,
    hi: Optional[int] = None,
) -> None:
    """Sort `seq[lo:hi]` in place with selection sort."""
    lo, hi = check_slice(seq, lo, hi)
    if hi - lo <= 1:
        return
    cmp = resolve_compare(compare, ascending)
    for i in range(lo, hi - 1):
        smallest = i
        for j in range(i + 1, hi):
            if is_lt(cmp(seq[j], seq[smallest])):
                smallest = j
        if smallest != i:
            seq[i], seq[smallest] = seq[smallest], seq[i]


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(selection_sort, a, config, compare)

"""
Binary search over a sequence already sorted under the same comparator.

Public API (stable):
    search_position(seq, target, compare=None, *, ascending=True) -> int
    binary_search(seq, target, compare=None, *, ascending=True,
                  check_sorted=False) -> int | None

Precondition: `seq` is sorted consistently with `compare` and `ascending`.
It is NOT validated unless `check_sorted=True`; on unsorted input the result
is unspecified (but the call still terminates and never raises IndexError).
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from sortkit.errors import UnsortedInput
from sortkit.ordering import Comparator, is_eq, is_lt, resolve_compare
from sortkit.validate.properties import is_sorted

__all__ = ["search_position", "binary_search"]


def search_position(
    seq: Sequence[Any],
    target: Any,
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> int:
    """
    Leftmost index at which `target` could be inserted keeping `seq` sorted.

    Every element before the returned index compares less than `target`;
    every element from it onwards compares greater than or equal. Returns
    `len(seq)` if `target` is greater than every element.
    """
    cmp = resolve_compare(compare, ascending)
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if is_lt(cmp(seq[mid], target)):
            lo = mid + 1
        else:
            hi = mid
    return lo


def binary_search(
    seq: Sequence[Any],
    target: Any,
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
    check_sorted: bool = False,
) -> Optional[int]:
    """
    Index of the leftmost element comparing equal to `target`, or None.

    Raises
    ------
    UnsortedInput
        Only when `check_sorted=True` and `seq` is not ordered.
    """
    if check_sorted and not is_sorted(seq, compare, ascending=ascending):
        raise UnsortedInput("sequence is not sorted")
    pos = search_position(seq, target, compare, ascending=ascending)
    if pos < len(seq) and is_eq(resolve_compare(compare, ascending)(seq[pos], target)):
        return pos
    return None

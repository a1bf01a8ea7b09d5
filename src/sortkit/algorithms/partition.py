"""
Partition engine (quick sort's partition step).

Pivot policy: the LAST element of the inclusive range `[low, high]`.
This is deterministic and simple, and it makes quick sort quadratic on
already sorted or reverse sorted input.

Scheme: Lomuto single pass. A boundary index starts at `low`; every element in
`[low, high - 1]` comparing <= pivot is swapped into the boundary slot and the
boundary advances. Finally the pivot is swapped into the boundary slot.

Postcondition for the returned index p:
    compare(seq[i], seq[p]) <= 0  for low <= i < p
    compare(seq[i], seq[p]) >= 0  for p < i <= high
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

from sortkit.algorithms._common import check_inclusive
from sortkit.ordering import Comparator, is_le, resolve_compare

__all__ = ["partition", "partition_range"]


def partition(
    seq: MutableSequence[Any],
    low: int,
    high: int,
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> int:
    """
    Partition `seq[low..high]` (inclusive) around its last element.

    Returns
    -------
    int
        The pivot's final index.

    Raises
    ------
    InvalidRange
        If `low`/`high` is not a valid index or `low > high`. Checked before
        any element moves.
    """
    check_inclusive(seq, low, high)
    return partition_range(seq, low, high, resolve_compare(compare, ascending))


def partition_range(seq: MutableSequence[Any], low: int, high: int, cmp: Comparator) -> int:
    # Unchecked core, shared by both quick sort variants.
    if low >= high:
        return low
    pivot = seq[high]
    boundary = low
    for i in range(low, high):
        if is_le(cmp(seq[i], pivot)):
            seq[boundary], seq[i] = seq[i], seq[boundary]
            boundary += 1
    seq[boundary], seq[high] = seq[high], seq[boundary]
    return boundary

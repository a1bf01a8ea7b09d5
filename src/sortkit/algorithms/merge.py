"""
Merge engine used by merge sort and tim sort.

Public API (stable):
    merge(seq, start, mid, end, compare=None, *, ascending=True) -> None
        In-place merge of the adjacent sorted runs seq[start:mid] and
        seq[mid:end].
    merge_sorted(left, right, compare=None, *, ascending=True) -> list
        Merge two separate sorted sequences into a new list.

Stability: on a tie the element from the LEFT run is taken first, so equal
elements keep their original relative order.

Memory: the in-place variant allocates one temporary list sized to the
combined range; it lives only for the duration of the call.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Optional, Sequence

from sortkit.errors import InvalidRange
from sortkit.ordering import Comparator, is_le, resolve_compare

__all__ = ["merge", "merge_sorted", "merge_runs"]


def merge(
    seq: MutableSequence[Any],
    start: int,
    mid: int,
    end: int,
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> None:
    """
    Merge `seq[start:mid]` and `seq[mid:end]`, both already sorted.

    Raises
    ------
    InvalidRange
        If `start > mid`, `mid > end`, `start < 0` or `end > len(seq)`.
        Nothing is moved when this is raised.
    """
    n = len(seq)
    if start > mid:
        raise InvalidRange(f"start ({start}) cannot be greater than mid ({mid})")
    if mid > end:
        raise InvalidRange(f"end ({end}) cannot be smaller than mid ({mid})")
    if start < 0:
        raise InvalidRange(f"start ({start}) is out of bounds")
    if end > n:
        raise InvalidRange(f"end ({end}) is out of bounds for length {n}")
    merge_runs(seq, start, mid, end, resolve_compare(compare, ascending))


def merge_runs(seq: MutableSequence[Any], start: int, mid: int, end: int, cmp: Comparator) -> None:
    # Unchecked core; callers guarantee start <= mid <= end <= len(seq).
    if start == mid or mid == end:
        return
    # Already in order across the seam: nothing to do.
    if is_le(cmp(seq[mid - 1], seq[mid])):
        return
    buf: List[Any] = []
    i, j = start, mid
    while i < mid and j < end:
        if is_le(cmp(seq[i], seq[j])):
            buf.append(seq[i])
            i += 1
        else:
            buf.append(seq[j])
            j += 1
    while i < mid:
        buf.append(seq[i])
        i += 1
    # Any right-run tail is already in its final place.
    for k, item in enumerate(buf):
        seq[start + k] = item


def merge_sorted(
    left: Sequence[Any],
    right: Sequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> List[Any]:
    """Return a new list holding the stable merge of two sorted sequences."""
    cmp = resolve_compare(compare, ascending)
    out: List[Any] = []
    i, j = 0, 0
    while i < len(left) and j < len(right):
        if is_le(cmp(left[i], right[j])):
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out

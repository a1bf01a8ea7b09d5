"""
Tim sort: natural-run detection + insertion sort + stack-disciplined merging.

Algorithm:
1. Pick a minimum run length (`compute_min_run(n)` unless given explicitly).
2. Walk left to right. At each uncovered position count the natural run:
   a non-descending run is kept as is; a STRICTLY descending run is reversed
   in place (strictness matters: reversing a run that contains equal
   elements would swap them and break stability).
3. A natural run shorter than min_run is extended with insertion sort to
   min(min_run, remaining).
4. The run is pushed on the run stack and the stack invariants are restored
   for the top three runs A, B, C (C on top):
       len(A) > len(B) + len(C)
       len(B) > len(C)
   by merging B with the smaller of its neighbours.
5. At the end the stack is force-collapsed into one run.

Stable. O(n) comparisons on sorted or strictly reverse sorted input,
O(n log n) worst case.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, MutableSequence, NamedTuple, Optional, Sequence, Tuple

from sortkit.algorithms._common import bench_sort, reverse_range
from sortkit.algorithms.insertion_sort import insertion_sort_from
from sortkit.algorithms.merge import merge_runs
from sortkit.ordering import Comparator, is_lt, resolve_compare

__all__ = ["DEFAULT_MIN_RUN", "Run", "compute_min_run", "count_run", "tim_sort", "sort"]

logger = logging.getLogger(__name__)

DEFAULT_MIN_RUN = 32


class Run(NamedTuple):
    start: int
    length: int


def compute_min_run(n: int) -> int:
    """
    Minimum run length for a sequence of length `n`.

    n < 2 * DEFAULT_MIN_RUN gives n (one insertion-sorted run). Otherwise the
    result k lies in [DEFAULT_MIN_RUN, 2 * DEFAULT_MIN_RUN] and n / k is a power
    of two or slightly less than one, which keeps the final merges balanced.
    """
    if n < 0:
        raise ValueError("n must be nonnegative")
    r = 0
    while n >= 2 * DEFAULT_MIN_RUN:
        r |= n & 1
        n >>= 1
    return n + r


def count_run(seq: Sequence[Any], lo: int, hi: int, cmp: Comparator) -> Tuple[int, bool]:
    """
    Length of the natural run starting at `lo` (bounded by `hi`) and whether
    it is strictly descending.
    """
    if hi - lo <= 1:
        return hi - lo, False
    n = 2
    if is_lt(cmp(seq[lo + 1], seq[lo])):
        for i in range(lo + 2, hi):
            if not is_lt(cmp(seq[i], seq[i - 1])):
                break
            n += 1
        return n, True
    for i in range(lo + 2, hi):
        if is_lt(cmp(seq[i], seq[i - 1])):
            break
        n += 1
    return n, False


def tim_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
    min_run: Optional[int] = None,
) -> None:
    """
    Sort `seq` in place with tim sort.

    Parameters
    ----------
    seq : mutable sequence
    compare : callable, optional
        Three-way comparator; natural ordering if omitted.
    ascending : bool
        Sort direction.
    min_run : int, optional
        Minimum run length. Must be >= 1. Defaults to `compute_min_run(len(seq))`.
    """
    if min_run is not None and (not isinstance(min_run, int) or min_run < 1):
        raise ValueError(f"min_run must be an integer >= 1; got {min_run!r}")
    n = len(seq)
    if n <= 1:
        return
    cmp = resolve_compare(compare, ascending)
    if min_run is None:
        min_run = compute_min_run(n)

    stack: List[Run] = []
    pos = 0
    while pos < n:
        length, descending = count_run(seq, pos, n, cmp)
        if descending:
            reverse_range(seq, pos, pos + length)
        if length < min_run:
            forced = min(min_run, n - pos)
            insertion_sort_from(seq, pos, pos + forced, pos + length, cmp)
            length = forced
        logger.debug("tim_sort: push run start=%d length=%d", pos, length)
        stack.append(Run(pos, length))
        _merge_collapse(seq, stack, cmp)
        pos += length

    while len(stack) > 1:
        if len(stack) >= 3 and stack[-3].length < stack[-1].length:
            _merge_at(seq, stack, -3, cmp)
        else:
            _merge_at(seq, stack, -2, cmp)


def _merge_collapse(seq: MutableSequence[Any], stack: List[Run], cmp: Comparator) -> None:
    while len(stack) > 1:
        if len(stack) >= 3 and stack[-3].length <= stack[-2].length + stack[-1].length:
            if stack[-3].length < stack[-1].length:
                _merge_at(seq, stack, -3, cmp)
            else:
                _merge_at(seq, stack, -2, cmp)
        elif stack[-2].length <= stack[-1].length:
            _merge_at(seq, stack, -2, cmp)
        else:
            break


def _merge_at(seq: MutableSequence[Any], stack: List[Run], i: int, cmp: Comparator) -> None:
    # Merge stack[i] with stack[i + 1]; i is negative (-2 or -3).
    a = stack[i]
    b = stack[i + 1]
    logger.debug(
        "tim_sort: merge runs [%d, %d) and [%d, %d)",
        a.start, a.start + a.length, b.start, b.start + b.length,
    )
    merge_runs(seq, a.start, b.start, b.start + b.length, cmp)
    stack[i] = Run(a.start, a.length + b.length)
    del stack[i + 1]


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(tim_sort, a, config, compare, allowed=("ascending", "min_run"))

"""
Algorithms package public API.

In-place entry points (mutate the sequence, return None):
    bubble_sort, selection_sort, insertion_sort,
    merge_sort, merge_sort_iterative,
    quick_sort, quick_sort_iterative,
    tim_sort, builtin_sort
Composable building blocks:
    partition, merge, merge_sorted

Benchmark adapters: `ALGORITHMS[name](a, *, config=None, compare=None)`
returns a new sorted list and never mutates `a`.
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, List

from . import (
    bubble_sort as _bubble,
    builtin_timsort as _builtin,
    insertion_sort as _insertion,
    merge_sort as _merge_sort,
    quick_sort as _quick,
    selection_sort as _selection,
    tim_sort as _tim,
)
from .bubble_sort import bubble_sort
from .builtin_timsort import builtin_sort
from .insertion_sort import insertion_sort
from .merge import merge, merge_sorted
from .merge_sort import merge_sort, merge_sort_iterative
from .partition import partition
from .quick_sort import quick_sort, quick_sort_iterative
from .selection_sort import selection_sort
from .tim_sort import DEFAULT_MIN_RUN, compute_min_run, tim_sort

ALGORITHMS: Dict[str, Callable[..., List]] = {
    "bubble_sort": _bubble.sort,
    "selection_sort": _selection.sort,
    "insertion_sort": _insertion.sort,
    "merge_sort": _merge_sort.sort,
    "merge_sort_iterative": _merge_sort.sort_iterative,
    "quick_sort": _quick.sort,
    "quick_sort_iterative": _quick.sort_iterative,
    "tim_sort": _tim.sort,
    "builtin_timsort": _builtin.sort,
}

STABLE_ALGORITHMS: FrozenSet[str] = frozenset(
    {
        "bubble_sort",
        "insertion_sort",
        "merge_sort",
        "merge_sort_iterative",
        "tim_sort",
        "builtin_timsort",
    }
)


def get_algorithm(name: str) -> Callable[..., List]:
    """Return the benchmark adapter registered under `name`."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise KeyError(
            f"Unknown algorithm: {name!r}. Supported: {sorted(ALGORITHMS)}"
        ) from None


__all__ = [
    "ALGORITHMS",
    "STABLE_ALGORITHMS",
    "DEFAULT_MIN_RUN",
    "get_algorithm",
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "merge_sort_iterative",
    "quick_sort",
    "quick_sort_iterative",
    "tim_sort",
    "builtin_sort",
    "compute_min_run",
    "partition",
    "merge",
    "merge_sorted",
]

"""
Reference baseline: CPython's built-in `list.sort` (C tim sort).

Used as the yardstick in benchmark experiments. Comparators are adapted with
`functools.cmp_to_key`, so a counting comparator still sees every call.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from sortkit.algorithms._common import bench_sort
from sortkit.ordering import Comparator, resolve_compare

__all__ = ["builtin_sort", "sort"]


def builtin_sort(
    seq: MutableSequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> None:
    if len(seq) <= 1:
        return
    key = cmp_to_key(resolve_compare(compare, ascending))
    # list.sort only exists on lists; other mutable sequences get the sorted
    # copy written back element by element.
    if isinstance(seq, list):
        seq.sort(key=key)
        return
    for i, item in enumerate(sorted(seq, key=key)):
        seq[i] = item


def sort(
    a: Sequence[Any],
    *,
    config: Optional[Dict[str, Any]] = None,
    compare: Optional[Comparator] = None,
) -> List[Any]:
    return bench_sort(builtin_sort, a, config, compare)

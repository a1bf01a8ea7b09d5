"""
Oracle for sorting correctness.

Ground truth is Python's built-in `sorted()` driven by the same effective
comparator as the algorithm under test (via `functools.cmp_to_key`):
- Deterministic and portable
- Stable, so for stable algorithms the oracle output must match exactly,
  including the order of equal-comparing elements

Public API (stable):
    oracle_sort(a, compare=None, *, ascending=True) -> list
    equals_oracle(a, out, compare=None, *, ascending=True) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- Unstable algorithms (selection sort, quick sort) should be compared with
  `is_sorted` + `is_permutation` instead, or with `equals_oracle` only when
  equal-comparing elements are indistinguishable (e.g. plain ints).
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, List, Optional, Sequence

from sortkit.ordering import Comparator, resolve_compare

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(
    a: Sequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> List[Any]:
    """
    Return the ground-truth stable sort of `a`.

    Parameters
    ----------
    a : sequence
        Input elements. Not mutated.
    compare : callable, optional
        Three-way comparator; natural ordering if omitted.
    ascending : bool
        Sort direction, with the same stability semantics as the algorithms.
    """
    return sorted(a, key=cmp_to_key(resolve_compare(compare, ascending)))


def equals_oracle(
    a: Sequence[Any],
    out: Sequence[Any],
    compare: Optional[Comparator] = None,
    *,
    ascending: bool = True,
) -> bool:
    """True iff `out` equals `oracle_sort(a, ...)` element for element."""
    return list(out) == oracle_sort(a, compare, ascending=ascending)

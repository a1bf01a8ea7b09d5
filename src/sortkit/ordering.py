"""
Ordering utilities shared by every algorithm in sortkit.

A comparator is any callable `compare(a, b)` returning an `Ordering`
(or, equivalently, a negative / zero / positive int in the style of
`functools.cmp_to_key`). Algorithms only ever look at the *sign* of the
result through the predicates below, so both forms behave identically.

Public API (stable):
    Ordering                         LESS / EQUAL / GREATER
    is_lt, is_le, is_eq, is_ge, is_gt
    default_compare(a, b) -> Ordering
    resolve_compare(compare, ascending) -> Comparator
    CountingComparator

Conventions:
- `default_compare` uses only `<`. Two elements for which neither `a < b` nor
  `b < a` holds (equal values, or incomparable ones under a partial order such
  as NaN) compare EQUAL.
- Descending order is expressed by flipping the comparator's arguments rather
  than negating results, so ties stay ties and stable algorithms remain stable.
"""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional, Union

__all__ = [
    "Ordering",
    "Comparator",
    "is_lt",
    "is_le",
    "is_eq",
    "is_ge",
    "is_gt",
    "default_compare",
    "flip",
    "resolve_compare",
    "CountingComparator",
]


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> "Ordering":
        """Normalise any signed integer comparison result to an Ordering."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-int(self))


Comparator = Callable[[Any, Any], Union[Ordering, int]]


def is_lt(order: Union[Ordering, int]) -> bool:
    return order < 0


def is_le(order: Union[Ordering, int]) -> bool:
    return order <= 0


def is_eq(order: Union[Ordering, int]) -> bool:
    return order == 0


def is_ge(order: Union[Ordering, int]) -> bool:
    return order >= 0


def is_gt(order: Union[Ordering, int]) -> bool:
    return order > 0


def default_compare(a: Any, b: Any) -> Ordering:
    """Natural ordering of `a` and `b` via `<`."""
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    return Ordering.EQUAL


def flip(compare: Comparator) -> Comparator:
    """Return a comparator ordering elements the other way round."""

    def flipped(a: Any, b: Any) -> Union[Ordering, int]:
        return compare(b, a)

    return flipped


def resolve_compare(compare: Optional[Comparator], ascending: bool = True) -> Comparator:
    """
    Pick the effective comparator for one algorithm call.

    Parameters
    ----------
    compare : callable or None
        User comparator; None selects `default_compare`.
    ascending : bool
        If False, the comparator is flipped so the algorithm (which always
        sorts "ascending" under the effective comparator) produces
        non-increasing output.
    """
    base = default_compare if compare is None else compare
    return base if ascending else flip(base)


class CountingComparator:
    """
    Comparator wrapper that counts how often it is invoked.

    >>> cmp = CountingComparator()
    >>> cmp(1, 2)
    <Ordering.LESS: -1>
    >>> cmp.calls
    1
    """

    def __init__(self, compare: Optional[Comparator] = None) -> None:
        self._compare = default_compare if compare is None else compare
        self.calls = 0

    def __call__(self, a: Any, b: Any) -> Union[Ordering, int]:
        self.calls += 1
        return self._compare(a, b)

    def reset(self) -> None:
        self.calls = 0

    def __repr__(self) -> str:
        return f"CountingComparator(calls={self.calls})"

"""
Exception types raised by sortkit.

Every algorithm validates its bounds *before* touching the sequence, so when
one of these is raised the caller's sequence is exactly as it was passed in.

Public API (stable):
    SortError        base class (a ValueError)
    InvalidRange     start/mid/end or low/high bounds are malformed
    EmptyInput       a caller explicitly disallowed the empty sequence
    UnsortedInput    checked binary search over an unordered sequence
    require_non_empty(seq) -> None
"""

from __future__ import annotations

from typing import Sized

__all__ = [
    "SortError",
    "InvalidRange",
    "EmptyInput",
    "UnsortedInput",
    "require_non_empty",
]


class SortError(ValueError):
    """Base class for all errors raised by sortkit algorithms."""


class InvalidRange(SortError):
    """A supplied index bound is outside the sequence or bounds are out of order."""


class EmptyInput(SortError):
    """The sequence is empty where the caller requires at least one element."""


class UnsortedInput(SortError):
    """The sequence is not ordered consistently with the comparator."""


def require_non_empty(seq: Sized) -> None:
    """Raise EmptyInput if `seq` has no elements."""
    if len(seq) == 0:
        raise EmptyInput("sequence must contain at least one element")

"""
Index helpers and bound checks shared by the algorithm modules.

Everything here works on any mutable, randomly indexable sequence via explicit
index-based exchange; nothing slices or copies the whole sequence.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence, Tuple

from sortkit.errors import InvalidRange

__all__ = [
    "reverse_range",
    "check_slice",
    "check_inclusive",
    "bench_sort",
]


def reverse_range(seq: MutableSequence[Any], lo: int, hi: int) -> None:
    """Reverse `seq[lo:hi]` in place."""
    hi -= 1
    while lo < hi:
        seq[lo], seq[hi] = seq[hi], seq[lo]
        lo += 1
        hi -= 1


def check_slice(seq: Sequence[Any], lo: int, hi: Optional[int]) -> Tuple[int, int]:
    """
    Validate a half-open range `[lo, hi)` against `seq` and resolve `hi=None`.

    Raises
    ------
    InvalidRange
        If either bound is outside `[0, len(seq)]` or `lo > hi`.
    """
    n = len(seq)
    if hi is None:
        hi = n
    if not (0 <= lo <= n):
        raise InvalidRange(f"lo ({lo}) is out of bounds for length {n}")
    if not (0 <= hi <= n):
        raise InvalidRange(f"hi ({hi}) is out of bounds for length {n}")
    if lo > hi:
        raise InvalidRange(f"lo ({lo}) cannot be greater than hi ({hi})")
    return lo, hi


def check_inclusive(seq: Sequence[Any], low: int, high: int) -> None:
    """Validate an inclusive range `[low, high]`; both ends must be valid indices."""
    n = len(seq)
    if not (0 <= low < n):
        raise InvalidRange(f"low ({low}) must be in [0, {n})")
    if not (0 <= high < n):
        raise InvalidRange(f"high ({high}) must be in [0, {n})")
    if low > high:
        raise InvalidRange(f"low ({low}) cannot be greater than high ({high})")


def bench_sort(
    algo,
    a: Sequence[Any],
    config: Optional[Dict[str, Any]],
    compare,
    allowed: Tuple[str, ...] = ("ascending",),
) -> List[Any]:
    """
    Copy-and-sort adapter behind every module-level `sort(a, *, config=None)`.

    The input is never mutated; `config` keys outside `allowed` are rejected
    so a typo in an experiment file fails loudly instead of being ignored.
    """
    config = dict(config or {})
    unknown = sorted(set(config) - set(allowed))
    if unknown:
        raise ValueError(f"Unsupported config keys: {unknown}. Supported: {list(allowed)}")
    if not isinstance(config.get("ascending", True), bool):
        raise ValueError(f"config 'ascending' must be a bool; got {config['ascending']!r}")
    out = list(a)
    algo(out, compare, **config)
    return out

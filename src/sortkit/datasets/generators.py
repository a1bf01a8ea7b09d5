"""
Integer workload generators for benchmarking the sorting algorithms.

Each distribution stresses a different code path:

- "random":        uniform integers from an inclusive range (average case).
- "sorted":        [0, 1, ..., n-1]. Best case for bubble/insertion/tim sort,
                   worst case for last-element-pivot quick sort.
- "reversed":      [n-1, ..., 0]. One strictly descending run for tim sort,
                   quadratic for quick sort and insertion sort.
- "nearly_sorted": sorted, then ceil(swap_frac * n) random index swaps.
- "few_uniques":   values drawn from k distinct integers (many ties).
- "small_range":   uniform over a small inclusive range, default [0, 255].
- "organ_pipe":    ascending then descending ([0, 1, .., m, .., 1, 0]);
                   exactly two natural runs.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    SUPPORTED_DISTS

Conventions:
- All ranges are inclusive on both ends.
- Deterministic distributions ("sorted", "reversed", "organ_pipe") ignore
  `params` and never draw from `rng`, so adding them to an experiment does not
  shift the random stream of the others.
- Returns a plain Python `list[int]`; algorithms never see NumPy types.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_Params = Dict[str, Any]
_Generator = Callable[[int, _Params, np.random.Generator], List[int]]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}. Parameters per distribution:

            random         range: [lo, hi]            (required)
            nearly_sorted  swap_frac: float in [0, 1]  (default 0.05)
            few_uniques    k: int >= 1                 (required)
                           range: [lo, hi]             (default [0, 2**32 - 1])
            small_range    range: [lo, hi]             (default [0, 255])
            sorted, reversed, organ_pipe               (no params)
    rng : numpy.random.Generator
        Seeded upstream by the caller.

    Raises
    ------
    ValueError
        If `n`, the distribution name or its parameters are invalid.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise ValueError(f"n must be a nonnegative int; got {n!r}")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)
    if gen is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(int(n), params, rng)


# ------------------------- distributions ------------------------- #


def _uniform(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    lo, hi = _inclusive_range(params, "random", default=None)
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes `hi` reachable.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _small_range(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    lo, hi = _inclusive_range(params, "small_range", default=(0, 255))
    if n == 0:
        return []
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _ascending(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _descending(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _organ_pipe(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    up = (n + 1) // 2
    return list(range(up)) + list(range(n - up - 1, -1, -1))


def _nearly_sorted(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {raw!r}"
        ) from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    out = list(range(n))
    swaps = int(np.ceil(swap_frac * n))
    if n == 0 or swaps == 0:
        return out
    pairs = rng.integers(0, n, size=(swaps, 2))
    for i, j in pairs.tolist():
        out[i], out[j] = out[j], out[i]
    return out


def _few_uniques(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _inclusive_range(params, "few_uniques", default=(0, 2**32 - 1))
    if n == 0:
        return []

    k_eff = int(min(k, n, hi - lo + 1))
    # Rejection-sample distinct values from `rng` itself (not `random`) so the
    # whole dataset is reproducible from the experiment seed.
    values: List[int] = []
    seen = set()
    while len(values) < k_eff:
        for v in rng.integers(lo, hi + 1, size=2 * (k_eff - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == k_eff:
                    break
    picks = rng.integers(0, k_eff, size=n)
    return [values[i] for i in picks.tolist()]


_GENERATORS: Dict[str, _Generator] = {
    "random": _uniform,
    "sorted": _ascending,
    "reversed": _descending,
    "organ_pipe": _organ_pipe,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "small_range": _small_range,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _inclusive_range(params: _Params, dist: str, default) -> Tuple[int, int]:
    """Parse params["range"] == [lo, hi]; required when `default` is None."""
    if "range" not in params:
        if default is None:
            raise ValueError(f"{dist}.params.range must be provided as [min, max] (inclusive)")
        return default
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)

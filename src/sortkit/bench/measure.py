"""
Timing harness for one algorithm on one input.

Each sample times exactly one call of a registered adapter
`sort(a, *, config=..., compare=None)` with a monotonic high-resolution clock.
Adapters copy their input before sorting, so the O(n) copy is part of every
sample for every algorithm alike; GC collection and the probe call happen
outside the timed block.

Before timing, one untimed *probe* call runs with a `CountingComparator`:
it yields the comparison count for this input and (if `verify`) the output
that is checked for sortedness, permutation and, for stable algorithms,
exact agreement with the stable oracle.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per successful sample
        "comparisons": int | None,          # comparator calls in the probe run
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # set for "error" and "invalid"
        "timed_out_on_repeat": int | None,  # 0-based repeat index on timeout
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

from sortkit.ordering import Comparator, CountingComparator
from sortkit.validate import (
    equals_oracle,
    first_order_violation_index,
    is_permutation,
    permutation_counter_diff,
)

__all__ = ["time_sort_call", "verify_output"]

logger = logging.getLogger(__name__)


def verify_output(
    a: Sequence[Any],
    out: Sequence[Any],
    *,
    compare: Optional[Comparator] = None,
    ascending: bool = True,
    stable: bool = False,
) -> Optional[str]:
    """Return a description of the first problem with `out`, or None if valid."""
    i = first_order_violation_index(out, compare, ascending=ascending)
    if i is not None:
        return f"output out of order at i={i}: {out[i]!r} then {out[i + 1]!r}"
    if not is_permutation(a, out):
        return f"output is not a permutation of input: diff={permutation_counter_diff(a, out)}"
    if stable and not equals_oracle(a, out, compare, ascending=ascending):
        return "output differs from the stable oracle"
    return None


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: Sequence[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    verify: bool = True,
    stable: bool = False,
) -> Dict[str, Any]:
    """
    Probe, verify and time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Registry name of the algorithm (for records and messages).
    algo_fn : callable
        Adapter with signature sort(a, *, config=None, compare=None) -> list.
    a : sequence
        Input data. Adapters never mutate it.
    config : dict | None
        Passed through to the adapter unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one extra untimed call before timing.
    disable_gc : bool
        If True, collect and disable the GC during the timed loop; the
        previous GC state is restored afterwards.
    timeout_seconds : float
        If one sample exceeds this, status becomes "timeout" and sampling stops.
    verify : bool
        Check the probe output before timing; failures give status "invalid".
    stable : bool
        The algorithm claims stability; verification then also requires
        exact agreement with the stable oracle.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "comparisons": None,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Probe (untimed): comparison count + verification ----
    counter = CountingComparator()
    try:
        out = algo_fn(a, config=config, compare=counter)
    except Exception as e:
        logger.warning("%s failed on n=%d: %r", algo_name, len(a), e)
        result["status"] = "error"
        result["error"] = f"probe failed: {e!r}"
        return result
    result["comparisons"] = counter.calls

    if verify:
        ascending = bool((config or {}).get("ascending", True))
        problem = verify_output(a, out, ascending=ascending, stable=stable)
        if problem is not None:
            logger.warning("%s produced invalid output on n=%d: %s", algo_name, len(a), problem)
            result["status"] = "invalid"
            result["error"] = problem
            return result

    if warmup and repeats > 0:
        try:
            algo_fn(a, config=config)
        except Exception as e:
            logger.warning("%s warmup failed on n=%d: %r", algo_name, len(a), e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- Timed loop ----
    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            try:
                t0 = time.perf_counter_ns()
                algo_fn(a, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break
            elapsed = t1 - t0
            result["samples_ns"].append(elapsed)
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result

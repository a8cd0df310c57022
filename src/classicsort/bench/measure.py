"""
Timing harness for sorting algorithms.

One sample is exactly one call to an algorithm module's
`sort(a, config=...)`, timed with `time.perf_counter_ns`. Copying the input,
GC work, warmup and output validation all happen outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from classicsort.validate import equals_oracle, first_nondecreasing_violation_index

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
    validate: bool = False,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., list]
        The module-level `sort(a, *, config=None)` of an algorithm.
    a : list
        Input list, shared across algorithms for one size.
    config : dict | None
        Passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable the GC for the timed loop and restore it
        afterwards.
    timeout_seconds : float
        If one call takes longer than this, record the sample, mark
        status="timeout" and stop sampling.
    defensive_copy : bool
        If True, pass a fresh copy of `a` to every call (copied untimed).
    validate : bool
        If True, compare the first output against the oracle; a mismatch
        becomes status="error".

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    gc_was_enabled = gc.isenabled()
    threshold_ns = int(timeout_seconds * 1e9)
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))

            if validate and r == 0:
                problem = _check_output(a, out)
                if problem is not None:
                    result["status"] = "error"
                    result["error"] = problem
                    break

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave the GC disabled if the caller had it disabled.
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result


def _check_output(a: List[Any], out: List[Any]) -> Optional[str]:
    if equals_oracle(a, out):
        return None
    i = first_nondecreasing_violation_index(out)
    if i is not None:
        return f"output not nondecreasing at i={i}: {out[i]!r} > {out[i + 1]!r}"
    return "output is sorted but differs from the oracle (elements lost or duplicated)"

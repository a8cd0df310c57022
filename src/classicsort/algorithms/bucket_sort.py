"""
Bucket sort for floating-point values.

Values are spread linearly over int((max - min) / sqrt(n)) + 1 buckets (the
+1 keeps at least one bucket when the ratio truncates to 0), each bucket is
quicksorted, and the buckets are concatenated in order. If every value is
equal the bucket range would have zero width, so the list is handed to
quick_sort directly.

Average O(n) for roughly uniform input; skewed input degrades towards the
cost of quicksorting the largest bucket. Not stable.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from ._adapter import sort_copy
from .quick_sort import quick_sort

STABLE = False
DOMAIN = "float"

__all__ = ["bucket_sort", "sort", "STABLE", "DOMAIN"]


def bucket_sort(vec: List[float]) -> None:
    n = len(vec)
    if n <= 1:
        return

    lo = math.inf
    hi = -math.inf
    for value in vec:
        # Two separate ifs: the first element may be both min and max.
        if value < lo:
            lo = value
        if value > hi:
            hi = value

    if hi == lo:
        quick_sort(vec)
        return

    num_buckets = int((hi - lo) / math.sqrt(n)) + 1
    buckets: List[List[float]] = [[] for _ in range(num_buckets)]
    span = hi - lo
    for value in vec:
        buckets[int((value - lo) / span * (num_buckets - 1))].append(value)

    output: List[float] = []
    for bucket in buckets:
        quick_sort(bucket)
        output.extend(bucket)

    vec[:] = output


def sort(a: List[float], *, config: Optional[Dict[str, Any]] = None) -> List[float]:
    return sort_copy("bucket_sort", bucket_sort, a, config)

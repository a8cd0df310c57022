"""
Counting sort that rewrites values instead of placing elements.

After counting, each value v is written counts[v] times, in increasing
order, straight into the input list. No output buffer is needed, but the
elements written back are the count indices rather than the original
objects, so equal keys keep no input order. Not stable.

Precondition: non-negative ints (unchecked).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = False
DOMAIN = "uint"

__all__ = ["integer_counting_sort", "sort", "STABLE", "DOMAIN"]


def integer_counting_sort(vec: List[int]) -> None:
    if len(vec) <= 1:
        return

    counts = [0] * (max(vec) + 1)
    for value in vec:
        counts[value] += 1

    index = 0
    for value, count in enumerate(counts):
        for _ in range(count):
            vec[index] = value
            index += 1


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sort_copy("integer_counting_sort", integer_counting_sort, a, config)

"""
LSD radix sort using per-digit lists.

Same digit loop as int_radix_sort, but each pass appends elements to ten
freshly allocated lists and concatenates them back in digit order. Appending
in scan order keeps each pass stable. Kept as the naive variant to compare
against the counting-based pass.

Precondition: non-negative ints (unchecked).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy
from ._buckets import NUM_DIGITS

STABLE = True
DOMAIN = "uint"

__all__ = ["less_efficient_radix_sort", "sort", "STABLE", "DOMAIN"]


def less_efficient_radix_sort(vec: List[int]) -> None:
    if len(vec) <= 1:
        return

    max_value = max(vec)
    divisor = 1
    while max_value // divisor > 0:
        digit_lists: List[List[int]] = [[] for _ in range(NUM_DIGITS)]
        for value in vec:
            digit_lists[(value // divisor) % NUM_DIGITS].append(value)

        k = 0
        for bucket in digit_lists:
            for value in bucket:
                vec[k] = value
                k += 1

        divisor *= NUM_DIGITS


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sort_copy("less_efficient_radix_sort", less_efficient_radix_sort, a, config)

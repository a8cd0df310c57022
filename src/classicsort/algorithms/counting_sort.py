"""
Stable counting sort for non-negative integers.

Precondition: every value is a non-negative int. Values index the counts
array directly, so negative input gives an unspecified result (it is not
checked). O(n + k) time and space where k = max(vec) + 1.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy
from ._buckets import stable_bucket_pass

STABLE = True
DOMAIN = "uint"

__all__ = ["general_counting_sort", "sort", "STABLE", "DOMAIN"]


def general_counting_sort(vec: List[int]) -> None:
    if len(vec) <= 1:
        return

    stable_bucket_pass(vec, _identity, max(vec) + 1)


def _identity(value: int) -> int:
    return value


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sort_copy("counting_sort", general_counting_sort, a, config)

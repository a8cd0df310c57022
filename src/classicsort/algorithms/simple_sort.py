"""
Simple sort: the naive baseline.

Compares every pair (i, j) with i < j and swaps as soon as vec[j] < vec[i].
Quadratic comparisons and swaps even on already-sorted input. Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = False
DOMAIN = "ordered"

__all__ = ["simple_sort", "sort", "STABLE", "DOMAIN"]


def simple_sort(vec: List[Any]) -> None:
    n = len(vec)
    # Position n-1 is settled once every earlier position is.
    for i in range(n - 1):
        for j in range(i + 1, n):
            if vec[j] < vec[i]:
                vec[i], vec[j] = vec[j], vec[i]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("simple_sort", simple_sort, a, config)

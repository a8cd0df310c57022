"""
Selection sort: "select the min".

For each position i, scan the unsorted suffix for its minimum and swap it
into place once. At most n-1 swaps; quadratic comparisons regardless of input
order. Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = False
DOMAIN = "ordered"

__all__ = ["selection_sort", "sort", "STABLE", "DOMAIN"]


def selection_sort(vec: List[Any]) -> None:
    n = len(vec)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if vec[j] < vec[min_index]:
                min_index = j
        if min_index != i:
            vec[i], vec[min_index] = vec[min_index], vec[i]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("selection_sort", selection_sort, a, config)

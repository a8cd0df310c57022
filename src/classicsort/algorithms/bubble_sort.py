"""
Bubble sort: "bubble the max to the right".

Each pass swaps out-of-order neighbours over the unsorted prefix, which then
shrinks by one. A pass with no swap means the list is sorted, so sorted input
costs a single O(n) pass. Stable (only strictly greater neighbours move).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = True
DOMAIN = "ordered"

__all__ = ["bubble_sort", "sort", "STABLE", "DOMAIN"]


def bubble_sort(vec: List[Any]) -> None:
    n = len(vec)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if vec[j] > vec[j + 1]:
                vec[j], vec[j + 1] = vec[j + 1], vec[j]
                swapped = True
        if not swapped:
            break


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("bubble_sort", bubble_sort, a, config)

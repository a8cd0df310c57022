"""
Insertion sort.

Grows a sorted prefix one element at a time, moving each new element left by
adjacent swaps while it is strictly smaller than its neighbour. Stable;
O(n) on sorted input, O(n^2) worst case.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = True
DOMAIN = "ordered"

__all__ = ["insertion_sort", "sort", "STABLE", "DOMAIN"]


def insertion_sort(vec: List[Any]) -> None:
    # vec[:1] is trivially sorted
    for i in range(1, len(vec)):
        j = i
        while j > 0 and vec[j] < vec[j - 1]:
            vec[j], vec[j - 1] = vec[j - 1], vec[j]
            j -= 1


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("insertion_sort", insertion_sort, a, config)

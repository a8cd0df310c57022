"""
Top-down merge sort.

Public API (stable):
    merge_sort(vec: list) -> None      # in place
    merge(vec, tmp, start, mid, end) -> None
    sort(a: list, *, config: dict | None = None) -> list

Conventions:
- Ranges are inclusive: [start, end].
- One scratch list of len(vec) is allocated per call and reused by every
  merge; nothing is allocated inside the recursion.
- The merge takes the left head on ties (vec[i] <= vec[j]), so the sort is
  stable. O(n log n) time, O(n) extra space.
- Recursion depth is ceil(log2 n), well inside Python's recursion limit.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = True
DOMAIN = "ordered"

__all__ = ["merge_sort", "merge", "sort", "STABLE", "DOMAIN"]


def merge_sort(vec: List[Any]) -> None:
    # Skipping the scratch allocation for trivial inputs matters when callers
    # sort many tiny lists.
    if len(vec) <= 1:
        return

    tmp: List[Any] = [None] * len(vec)
    _merge_sort_range(vec, tmp, 0, len(vec) - 1)


def _merge_sort_range(vec: List[Any], tmp: List[Any], start: int, end: int) -> None:
    if start >= end:
        return

    mid = start + (end - start) // 2
    _merge_sort_range(vec, tmp, start, mid)
    _merge_sort_range(vec, tmp, mid + 1, end)
    merge(vec, tmp, start, mid, end)


def merge(vec: List[Any], tmp: List[Any], start: int, mid: int, end: int) -> None:
    """
    Merge the sorted runs vec[start..mid] and vec[mid+1..end] back into vec.

    `tmp` must be at least end+1 long; only tmp[start..end] is touched.
    """
    i, j, k = start, mid + 1, start

    while i <= mid and j <= end:
        if vec[i] <= vec[j]:
            tmp[k] = vec[i]
            i += 1
        else:
            tmp[k] = vec[j]
            j += 1
        k += 1

    while i <= mid:
        tmp[k] = vec[i]
        i += 1
        k += 1

    while j <= end:
        tmp[k] = vec[j]
        j += 1
        k += 1

    vec[start:end + 1] = tmp[start:end + 1]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("merge_sort", merge_sort, a, config)

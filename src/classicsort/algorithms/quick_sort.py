"""
Quicksort with a median-of-three pivot and Lomuto partitioning.

Public API (stable):
    quick_sort(vec: list) -> None                     # in place
    quick_sort_range(vec, start, end) -> None         # in place, inclusive range
    partition(vec, start, end) -> int                 # final pivot index
    median_of_three(vec, i, j, k) -> int              # index of the median
    sort(a: list, *, config: dict | None = None) -> list

Notes
-----
- The median of vec[start], vec[mid], vec[end] is moved to `end` before
  partitioning, which keeps sorted and reverse-sorted inputs at O(n log n).
- Partitioning sends every element <= pivot left of the boundary. Inputs
  with many equal keys still degrade towards O(n^2) and an O(n)-deep split
  tree, so sub-ranges are kept on an explicit stack instead of the Python
  call stack. Ranges are processed in the same order a recursive version
  would visit them.
- Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ._adapter import sort_copy

STABLE = False
DOMAIN = "ordered"

__all__ = [
    "quick_sort",
    "quick_sort_range",
    "partition",
    "median_of_three",
    "sort",
    "STABLE",
    "DOMAIN",
]


def quick_sort(vec: List[Any]) -> None:
    if len(vec) <= 1:
        return

    quick_sort_range(vec, 0, len(vec) - 1)


def quick_sort_range(vec: List[Any], start: int, end: int) -> None:
    pending: List[Tuple[int, int]] = [(start, end)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue

        p = partition(vec, lo, hi)
        # Right pushed first so the left range is handled first.
        pending.append((p + 1, hi))
        pending.append((lo, p - 1))


def partition(vec: List[Any], start: int, end: int) -> int:
    mid = start + (end - start) // 2
    pivot_index = median_of_three(vec, start, mid, end)
    vec[pivot_index], vec[end] = vec[end], vec[pivot_index]

    pivot = vec[end]
    i = start - 1

    for j in range(start, end):
        if vec[j] <= pivot:
            i += 1
            vec[i], vec[j] = vec[j], vec[i]

    vec[i + 1], vec[end] = vec[end], vec[i + 1]
    return i + 1


def median_of_three(vec: List[Any], i: int, j: int, k: int) -> int:
    # A candidate is the median when it beats exactly one of the other two.
    if (vec[i] > vec[j]) != (vec[i] > vec[k]):
        return i
    if (vec[j] > vec[i]) != (vec[j] > vec[k]):
        return j
    return k


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("quick_sort", quick_sort, a, config)

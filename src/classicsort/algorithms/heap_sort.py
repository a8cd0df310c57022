"""
In-place heap sort over a binary max-heap.

The list doubles as heap and output: after build_heap, the root (maximum)
is swapped to the end of the live region, the logical heap size shrinks by
one, and the root is sifted down again. O(n log n), O(1) extra space.
Not stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = False
DOMAIN = "ordered"

__all__ = ["heap_sort", "build_heap", "heapify", "sort", "STABLE", "DOMAIN"]


def heap_sort(vec: List[Any]) -> None:
    n = len(vec)
    build_heap(vec)
    for i in range(n - 1, -1, -1):
        vec[0], vec[i] = vec[i], vec[0]
        heapify(vec, 0, i)


def build_heap(vec: List[Any]) -> None:
    n = len(vec)
    for i in range(n // 2 - 1, -1, -1):
        heapify(vec, i, n)


def heapify(vec: List[Any], i: int, n: int) -> None:
    """
    Sift vec[i] down until the max-heap property holds below it.

    Only vec[:n] is treated as heap; anything at index >= n is already
    sorted output and is left alone.
    """
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2

        if left < n and vec[left] > vec[largest]:
            largest = left
        if right < n and vec[right] > vec[largest]:
            largest = right

        if largest == i:
            return
        vec[i], vec[largest] = vec[largest], vec[i]
        i = largest


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("heap_sort", heap_sort, a, config)

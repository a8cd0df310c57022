"""
LSD radix sort in base 10 for non-negative integers.

One stable counting pass per decimal digit, least significant first, while
max // exp > 0. That is ceil(log10(max + 1)) passes; an all-zero list needs
none. Correctness depends on every pass being stable.

Precondition: non-negative ints (unchecked).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy
from ._buckets import NUM_DIGITS, stable_bucket_pass

STABLE = True
DOMAIN = "uint"

__all__ = ["int_radix_sort", "radix_digit_pass", "sort", "STABLE", "DOMAIN"]


def int_radix_sort(vec: List[int]) -> None:
    if len(vec) <= 1:
        return

    max_value = max(vec)
    exp = 1
    while max_value // exp > 0:
        radix_digit_pass(vec, exp)
        exp *= NUM_DIGITS


def radix_digit_pass(vec: List[int], exp: int) -> None:
    """Stably reorder `vec` by the decimal digit of weight `exp`."""
    stable_bucket_pass(vec, lambda value: (value // exp) % NUM_DIGITS, NUM_DIGITS)


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    return sort_copy("int_radix_sort", int_radix_sort, a, config)

"""
LSD radix sort for ASCII strings.

Public API (stable):
    string_radix_sort(vec: list[str]) -> None     # in place
    string_position_pass(vec, cur_idx) -> None    # one stable pass
    sort(a: list[str], *, config: dict | None = None) -> list[str]

Conventions:
- Positions are processed right to left, from max_len - 1 down to 0.
- At position cur_idx a string too short to have a character there goes to
  bucket 0; otherwise it goes to ord(char) + 1. Bucket 0 ranks before every
  real character, so "app" sorts before "apple".
- Precondition: ASCII only. A character with code >= 128 maps past the last
  bucket and raises IndexError; it is not reported any other way.
- Stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy
from ._buckets import NUM_ASCII_BUCKETS, stable_bucket_pass

STABLE = True
DOMAIN = "ascii"

__all__ = ["string_radix_sort", "string_position_pass", "sort", "STABLE", "DOMAIN"]


def string_radix_sort(vec: List[str]) -> None:
    if len(vec) <= 1:
        return

    max_len = max(len(s) for s in vec)
    for cur_idx in range(max_len - 1, -1, -1):
        string_position_pass(vec, cur_idx)


def string_position_pass(vec: List[str], cur_idx: int) -> None:
    def bucket_of(s: str) -> int:
        if cur_idx < len(s):
            return ord(s[cur_idx]) + 1
        return 0

    stable_bucket_pass(vec, bucket_of, NUM_ASCII_BUCKETS)


def sort(a: List[str], *, config: Optional[Dict[str, Any]] = None) -> List[str]:
    return sort_copy("string_radix_sort", string_radix_sort, a, config)

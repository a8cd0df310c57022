"""
Reference entry: Python's built-in list.sort (Timsort).

Not one of the classical algorithms; it is registered so that benchmark
tables carry a baseline row next to them. Stable.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ._adapter import sort_copy

STABLE = True
DOMAIN = "ordered"

__all__ = ["builtin_timsort", "sort", "STABLE", "DOMAIN"]


def builtin_timsort(vec: List[Any]) -> None:
    vec.sort()


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    return sort_copy("builtin_timsort", builtin_timsort, a, config)

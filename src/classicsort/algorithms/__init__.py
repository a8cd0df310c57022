"""
Sorting algorithms package public API.

Each algorithm lives in its own module `classicsort.algorithms.<name>` and
provides:
    - an in-place entry point, e.g. merge_sort(vec) -> None
    - sort(a, *, config=None) -> list   # sorts a copy, never mutates `a`
    - STABLE: bool
    - DOMAIN: "ordered" | "uint" | "float" | "ascii"

Re-exports the in-place entry points so callers can write:
    from classicsort.algorithms import quick_sort, int_radix_sort

Domains:
    "ordered"  any values with a total order (<, <=, >, ==)
    "uint"     non-negative ints (counting and radix sorts)
    "float"    real numbers (bucket sort)
    "ascii"    str values whose characters all have code < 128
"""

from __future__ import annotations

import importlib
from numbers import Integral, Real
from types import ModuleType
from typing import Any, Sequence, Tuple

from .bubble_sort import bubble_sort
from .bucket_sort import bucket_sort
from .builtin_timsort import builtin_timsort
from .counting_sort import general_counting_sort
from .heap_sort import heap_sort
from .insertion_sort import insertion_sort
from .int_radix_sort import int_radix_sort
from .integer_counting_sort import integer_counting_sort
from .less_efficient_radix_sort import less_efficient_radix_sort
from .merge_sort import merge_sort
from .quick_sort import quick_sort
from .selection_sort import selection_sort
from .simple_sort import simple_sort
from .string_radix_sort import string_radix_sort

ALGORITHMS: Tuple[str, ...] = (
    "simple_sort",
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "counting_sort",
    "integer_counting_sort",
    "int_radix_sort",
    "less_efficient_radix_sort",
    "string_radix_sort",
    "bucket_sort",
    "builtin_timsort",
)

DOMAINS = ("ordered", "uint", "float", "ascii")

__all__ = [
    "ALGORITHMS",
    "DOMAINS",
    "load_algorithm",
    "accepts",
    "simple_sort",
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "general_counting_sort",
    "integer_counting_sort",
    "int_radix_sort",
    "less_efficient_radix_sort",
    "string_radix_sort",
    "bucket_sort",
    "builtin_timsort",
]


def load_algorithm(name: str) -> ModuleType:
    """
    Import `classicsort.algorithms.<name>` and check it exposes `sort`.

    Raises
    ------
    ImportError
        If no such algorithm module exists.
    AttributeError
        If the module does not define a callable `sort`.
    """
    try:
        mod = importlib.import_module(f"{__name__}.{name}")
    except Exception as e:
        raise ImportError(f"Could not import algorithm module '{__name__}.{name}': {e!r}") from e

    if not callable(getattr(mod, "sort", None)):
        raise AttributeError(
            f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`"
        )
    return mod


def accepts(domain: str, values: Sequence[Any]) -> bool:
    """
    Return True iff every element of `values` lies in `domain`.

    The algorithms never check their preconditions; this is for tooling
    (the benchmark runner, tests) that wants to avoid feeding them inputs
    with unspecified results.
    """
    if domain not in DOMAINS:
        raise ValueError(f"Unknown domain: {domain!r}. Supported: {list(DOMAINS)}")
    if domain == "ordered":
        return True
    if domain == "uint":
        return all(_is_int(v) and v >= 0 for v in values)
    if domain == "float":
        return all(isinstance(v, Real) and not isinstance(v, bool) for v in values)
    # "ascii"
    return all(isinstance(v, str) and v.isascii() for v in values)


def _is_int(v: Any) -> bool:
    # numpy integer scalars register as numbers.Integral too
    return isinstance(v, Integral) and not isinstance(v, bool)

"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth for every algorithm here:
it gives the same total order for ints, floats and ASCII strings that the
algorithms promise, and being stable it also fixes the expected order of
tagged equal keys.

Public API (stable):
    oracle_sort(a: Sequence) -> list
    equals_oracle(a: Sequence, out: Sequence) -> bool

Conventions:
- The oracle never mutates its input and always returns a new list.
- Comparison is by value, so unstable algorithms match as long as equal
  keys are indistinguishable by `==`.
"""

from __future__ import annotations

from typing import Any, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """
    Check whether an algorithm's output matches the oracle exactly.

    Parameters
    ----------
    a : sequence
        The original input.
    out : sequence
        The algorithm's output to check.

    Returns
    -------
    bool
        True iff `list(out)` equals `oracle_sort(a)`.
    """
    return list(out) == oracle_sort(a)

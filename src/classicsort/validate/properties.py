"""
Property helpers for validating sorting results.

These functions provide lightweight checks you can use in tests and (optionally)
inside the benchmark runner for sanity validation.

Public API (stable):
    is_nondecreasing(xs: Sequence) -> bool
    first_nondecreasing_violation_index(xs: Sequence) -> int | None
    is_permutation(a: Sequence, b: Sequence) -> bool
    permutation_counter_diff(a: Sequence, b: Sequence) -> dict
    assert_no_mutation(before: Sequence, after: Sequence) -> None
    is_stable(before: Sequence, after: Sequence) -> bool
    first_stability_violation(before: Sequence, after: Sequence) -> int | None

Notes
-----
- Everything except the stability checks works for any comparable, hashable
  elements: ints, floats and strings alike.
- Stability cannot be inferred from values alone when equal keys are
  indistinguishable. The stability checks therefore track elements by
  identity (`id`), so `before` must hold distinct objects that compare equal
  on their key but carry a tie-breaker (e.g. an int or str subclass with a
  tag attribute). Small ints and interned strings are shared objects and
  must not be used.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional, Sequence


__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_stable",
    "first_stability_violation",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    n = len(xs)
    if n < 2:
        return True
    return all(xs[i] <= xs[i + 1] for i in range(n - 1))


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    n = len(xs)
    for i in range(n - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    Positive values indicate extra occurrences in `a`, negative in `b`.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Any, int] = {}
    for k in set(ca.keys()) | set(cb.keys()):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), used to ensure
    an algorithm did not mutate its input in-place.

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    if before == after:
        return
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(
                f"Input mutated at index {i}: before={x}, after={y}"
            )
    raise AssertionError("Input mutated (values differ)")


def first_stability_violation(
    before: Sequence[Any], after: Sequence[Any]
) -> Optional[int]:
    """
    Return the first index i where after[i] == after[i+1] but after[i] came
    later than after[i+1] in `before`, or None if equal keys kept their order.

    `after` must be a sorted rearrangement of the very objects in `before`;
    equal keys are then adjacent, so checking neighbours is enough.

    Raises
    ------
    ValueError
        If `after` holds an object that is not in `before`.
    """
    position = {id(x): i for i, x in enumerate(before)}
    for i in range(len(after) - 1):
        x, y = after[i], after[i + 1]
        if x == y:
            try:
                px, py = position[id(x)], position[id(y)]
            except KeyError as e:
                raise ValueError(
                    f"after[{i}] or after[{i + 1}] is not an element of `before`"
                ) from e
            if px > py:
                return i
    return None


def is_stable(before: Sequence[Any], after: Sequence[Any]) -> bool:
    """Return True iff `after` preserves the input order of equal elements."""
    return first_stability_violation(before, after) is None

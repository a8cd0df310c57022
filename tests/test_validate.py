"""
Tests for the oracle and property helpers in classicsort.validate.
"""

from __future__ import annotations

import pytest

from classicsort.validate import (
    ORACLE_NAME,
    assert_no_mutation,
    equals_oracle,
    first_nondecreasing_violation_index,
    first_stability_violation,
    is_nondecreasing,
    is_permutation,
    is_stable,
    oracle_sort,
    permutation_counter_diff,
)

from tagging import Tagged


def test_oracle_returns_new_sorted_list() -> None:
    a = [3, 1, 2]
    out = oracle_sort(a)
    assert out == [1, 2, 3]
    assert a == [3, 1, 2]
    assert out is not a
    assert ORACLE_NAME


def test_equals_oracle() -> None:
    assert equals_oracle(["b", "a"], ["a", "b"])
    assert equals_oracle([2.0, 1.0], (1.0, 2.0))
    assert not equals_oracle([2, 1], [2, 1])


@pytest.mark.parametrize(
    "xs, ok, first_bad",
    [
        ([], True, None),
        ([1], True, None),
        ([1, 1, 2], True, None),
        (["a", "b", "b"], True, None),
        ([1, 3, 2], False, 1),
        ([2, 1, 0], False, 0),
    ],
)
def test_nondecreasing(xs, ok, first_bad) -> None:
    assert is_nondecreasing(xs) is ok
    assert first_nondecreasing_violation_index(xs) == first_bad


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2, 2], [1, 1, 2])
    assert not is_permutation([1], [1, 1])
    assert permutation_counter_diff([1, 2, 2], [1, 1, 2]) == {1: -1, 2: 1}
    assert permutation_counter_diff(["x"], ["x"]) == {}


def test_assert_no_mutation() -> None:
    assert_no_mutation([1, 2], [1, 2])
    with pytest.raises(AssertionError, match="index 1"):
        assert_no_mutation([1, 2], [1, 3])
    with pytest.raises(AssertionError, match="length"):
        assert_no_mutation([1, 2], [1])


def test_stability_helpers() -> None:
    a1, a2, b1 = Tagged(1, "a"), Tagged(1, "b"), Tagged(0, "c")
    before = [a1, a2, b1]
    assert is_stable(before, [b1, a1, a2])
    assert not is_stable(before, [b1, a2, a1])
    assert first_stability_violation(before, [b1, a2, a1]) == 1


def test_stability_helpers_reject_foreign_elements() -> None:
    before = [Tagged(1, "a"), Tagged(1, "b")]
    with pytest.raises(ValueError):
        first_stability_violation(before, [before[0], Tagged(1, "z")])

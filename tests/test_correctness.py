"""
Correctness tests for every algorithm against the oracle (Python's built-in sorted).

Each algorithm is exercised through both of its entry points:
    classicsort.algorithms.<name>.sort(a, *, config=None) -> list   (copying adapter)
    the in-place function, e.g. merge_sort(vec) -> None

What we check:
- Output exactly matches the oracle (strongest guarantee)
- Nondecreasing order (diagnostic)
- Permutation preservation (no lost/duplicated elements)
- `sort` does not mutate its input; the in-place entry point does and returns None
- Idempotence: sorting sorted output changes nothing

Inputs are drawn from each algorithm's DOMAIN, since the counting/radix sorts
only promise correct output for non-negative ints and the string radix sort
only for ASCII strings.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import pytest
from hypothesis import given, settings, strategies as st

from classicsort import algorithms
from classicsort.algorithms import ALGORITHMS, load_algorithm
from classicsort.validate import (
    first_nondecreasing_violation_index,
    is_permutation,
    oracle_sort,
)

INPLACE: Dict[str, Callable[[List[Any]], None]] = {
    "simple_sort": algorithms.simple_sort,
    "selection_sort": algorithms.selection_sort,
    "bubble_sort": algorithms.bubble_sort,
    "insertion_sort": algorithms.insertion_sort,
    "merge_sort": algorithms.merge_sort,
    "quick_sort": algorithms.quick_sort,
    "heap_sort": algorithms.heap_sort,
    "counting_sort": algorithms.general_counting_sort,
    "integer_counting_sort": algorithms.integer_counting_sort,
    "int_radix_sort": algorithms.int_radix_sort,
    "less_efficient_radix_sort": algorithms.less_efficient_radix_sort,
    "string_radix_sort": algorithms.string_radix_sort,
    "bucket_sort": algorithms.bucket_sort,
    "builtin_timsort": algorithms.builtin_timsort,
}

# Algorithms that run on any totally ordered values.
COMPARISON = [n for n in ALGORITHMS if load_algorithm(n).DOMAIN == "ordered"]
# Algorithms whose domain includes non-negative ints.
UINT = COMPARISON + [n for n in ALGORITHMS if load_algorithm(n).DOMAIN == "uint"]
# Algorithms whose domain includes floats.
FLOAT = COMPARISON + [n for n in ALGORITHMS if load_algorithm(n).DOMAIN == "float"]
# Algorithms whose domain includes ASCII strings.
ASCII = COMPARISON + [n for n in ALGORITHMS if load_algorithm(n).DOMAIN == "ascii"]


# ------------------------- helpers ------------------------- #

def _check_one(name: str, a: List[Any]) -> None:
    """Common assertion bundle for one input."""
    sort = load_algorithm(name).sort

    a_before = list(a)
    out = sort(a, config=None)
    assert a == a_before, f"{name}.sort must not mutate its input"

    expected = oracle_sort(a)
    assert out == expected, f"{name}: output must exactly match the oracle"

    i = first_nondecreasing_violation_index(out)
    assert i is None, f"{name}: not nondecreasing at i={i}: {out[i]!r} > {out[i + 1]!r}"
    assert is_permutation(a, out), f"{name}: output is not a permutation of input"

    vec = list(a)
    assert INPLACE[name](vec) is None
    assert vec == expected, f"{name}: in-place entry point disagrees with the oracle"

    again = list(vec)
    INPLACE[name](again)
    assert again == vec, f"{name}: sorting sorted input must not change it"


def test_registry_covers_every_module() -> None:
    assert set(INPLACE) == set(ALGORITHMS)
    for name in ALGORITHMS:
        mod = load_algorithm(name)
        assert mod.DOMAIN in algorithms.DOMAINS
        assert isinstance(mod.STABLE, bool)


# ------------------------- unit tests (deterministic) ------------------------- #

UINT_CASES = [
    [],
    [5],
    [2, 1],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [7, 7, 7, 7],
    [0, 0, 0],
    [1, 3, 2, 3, 1, 2],
    [10, 0, 100, 7, 7, 3, 999],
    [170, 45, 75, 90, 802, 24, 2, 66],
    list(range(20)),
    list(range(20))[::-1],
]


@pytest.mark.parametrize("name", UINT)
@pytest.mark.parametrize("a", UINT_CASES)
def test_unit_cases_uint(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", COMPARISON)
@pytest.mark.parametrize(
    "a",
    [
        [0, -1, 5, -10, 3, 3, 2],
        [-3, -3, -1],
        [2.5, -1.0, 2.5, 0.0],
        ["pear", "apple", "fig", "apple"],
    ],
)
def test_unit_cases_comparison_only(name: str, a: List[Any]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", FLOAT)
@pytest.mark.parametrize(
    "a",
    [
        [],
        [0.5],
        [0.42, 0.32, 0.23, 0.52, 0.25, 0.47, 0.51],
        [3.0, 3.0, 3.0],
        [-5.5, 100.25, 0.0, -5.5, 42.0, 1e-9],
        [1.0, 2.0, 3.0, 1000.0],
    ],
)
def test_unit_cases_float(name: str, a: List[float]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ASCII)
@pytest.mark.parametrize(
    "a",
    [
        [],
        ["solo"],
        ["banana", "apple", "ab", "app"],
        ["", "a", "", "A", "aa"],
        ["b", "B", "~", " ", "0"],
        ["same", "same", "same"],
    ],
)
def test_unit_cases_ascii(name: str, a: List[str]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ALGORITHMS)
def test_sort_rejects_config_options(name: str) -> None:
    sort = load_algorithm(name).sort
    with pytest.raises(ValueError):
        sort([], config={"unexpected": 1})
    with pytest.raises(ValueError):
        sort([], config=["not", "a", "dict"])  # type: ignore[arg-type]
    assert sort([], config={}) == []


# ------------------------- property-based tests (randomized) ------------------------- #

# The quadratic sorts keep these lists short.
uints = st.integers(min_value=0, max_value=10_000)
ints = st.integers(min_value=-10_000, max_value=10_000)
floats = st.floats(min_value=-1_000.0, max_value=1_000.0, allow_nan=False, allow_infinity=False)
ascii_strings = st.text(alphabet=st.characters(max_codepoint=127), max_size=10)


@pytest.mark.parametrize("name", UINT)
@settings(deadline=None, max_examples=60)
@given(st.lists(uints, min_size=0, max_size=150))
def test_property_random_uints(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", UINT)
@settings(deadline=None, max_examples=40)
@given(st.lists(st.integers(min_value=0, max_value=15), min_size=0, max_size=200))
def test_property_many_duplicates(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", COMPARISON)
@settings(deadline=None, max_examples=60)
@given(st.lists(ints, min_size=0, max_size=150))
def test_property_signed_ints(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", FLOAT)
@settings(deadline=None, max_examples=60)
@given(st.lists(floats, min_size=0, max_size=150))
def test_property_floats(name: str, a: List[float]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ASCII)
@settings(deadline=None, max_examples=60)
@given(st.lists(ascii_strings, min_size=0, max_size=80))
def test_property_ascii_strings(name: str, a: List[str]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", ["merge_sort", "quick_sort", "heap_sort", "counting_sort", "int_radix_sort"])
def test_large_input(name: str) -> None:
    a = [(i * 7919) % 10_007 for i in range(20_000)]
    _check_one(name, a)


def test_quick_sort_handles_long_runs_of_equal_keys() -> None:
    # Every partition of an all-equal range is maximally lopsided.
    a = [1] * 1_500 + [0] * 1_500
    _check_one("quick_sort", a)

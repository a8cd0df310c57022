"""
Dataset generators for sorting benchmarks and tests.

Integer distributions (feed every algorithm, including counting/radix sorts
when the range is non-negative):

- "random":        uniform ints from params["range"] = [lo, hi] (inclusive).
- "nearly_sorted": [0, 1, ..., n-1] with ceil(swap_frac * n) random swaps.
- "few_uniques":   at most k distinct values (optional inclusive "range",
                   default [0, 4294967295]) sampled with replacement.
- "small_range":   uniform ints from [min_val, max_val] (default [0, 255]),
                   or an explicit inclusive "range".
- "reversed":      [n-1, ..., 0]; params and RNG unused.

Float distribution (bucket sort and the comparison sorts):

- "uniform_float": uniform floats from params["range"] = [lo, hi) (half open).

String distribution (string radix sort and the comparison sorts):

- "ascii_strings": strings of length uniform in [min_len, max_len] (defaults
                   0 and 8) over params["alphabet"] (default a-z). The
                   alphabet must be ASCII.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list
    SUPPORTED_DISTS: set[str]
    DIST_VALUE_KIND: dict[str, str]   # "int" | "float" | "str"

Conventions:
- spec = {"dist": <name>, "params": {...}}; "params" may be omitted.
- Returns a plain Python list of Python scalars; algorithms stay
  NumPy-agnostic.
- The caller supplies the RNG so runs are reproducible from one seed.
- Invalid specs raise ValueError.
"""

from __future__ import annotations

import string
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

DIST_VALUE_KIND: Dict[str, str] = {
    "random": "int",
    "nearly_sorted": "int",
    "few_uniques": "int",
    "small_range": "int",
    "reversed": "int",
    "uniform_float": "float",
    "ascii_strings": "str",
}
SUPPORTED_DISTS = set(DIST_VALUE_KIND)

DEFAULT_ALPHABET = string.ascii_lowercase

__all__ = ["SUPPORTED_DISTS", "DIST_VALUE_KIND", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Generate a dataset of length `n` according to `spec`, using `rng`.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}. See the module
        docstring for the parameters of each distribution.
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list
        `n` ints, floats or strs, depending on the distribution.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    return _GENERATORS[dist](n, params, rng)


# ------------------------- generators ------------------------- #


def _gen_random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_inclusive_range(params, "random")
    if n == 0:
        return []
    # Generator.integers is half open; +1 makes hi inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_swap_frac(params)
    arr = list(range(n))
    # ceil so that any nonzero fraction swaps at least once
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps <= 0:
        return arr
    idxs = rng.integers(0, n, size=2 * num_swaps)
    for k in range(num_swaps):
        i = int(idxs[2 * k])
        j = int(idxs[2 * k + 1])
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _gen_few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = _parse_k(params)
    lo, hi = _parse_optional_inclusive_range(params, default=(0, 4294967295))
    if n == 0:
        return []

    actual_k = int(min(k, n, hi - lo + 1))

    # Draw from `rng` (not the random module) so one seed fixes the dataset.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        need = actual_k - len(chosen)
        for v in map(int, rng.integers(lo, hi + 1, size=need * 2)):
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break

    return [chosen[int(t)] for t in rng.integers(0, actual_k, size=n)]


def _gen_small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    lo, hi = _parse_small_range(params)
    if n == 0:
        return []
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _gen_uniform_float(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[float]:
    lo, hi = _parse_float_range(params)
    if n == 0:
        return []
    return rng.uniform(lo, hi, size=n).tolist()


def _gen_ascii_strings(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[str]:
    min_len, max_len = _parse_lengths(params)
    alphabet = _parse_alphabet(params)
    if n == 0:
        return []
    lengths = rng.integers(min_len, max_len + 1, size=n)
    chars = rng.integers(0, len(alphabet), size=int(lengths.sum()))

    out: List[str] = []
    pos = 0
    for length in map(int, lengths):
        out.append("".join(alphabet[int(c)] for c in chars[pos:pos + length]))
        pos += length
    return out


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[Any]]] = {
    "random": _gen_random,
    "nearly_sorted": _gen_nearly_sorted,
    "few_uniques": _gen_few_uniques,
    "small_range": _gen_small_range,
    "reversed": _gen_reversed,
    "uniform_float": _gen_uniform_float,
    "ascii_strings": _gen_ascii_strings,
}


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_inclusive_range(params: Dict[str, Any], dist: str) -> Tuple[int, int]:
    """Parse the REQUIRED inclusive integer range params["range"] = [lo, hi]."""
    if "range" not in params:
        raise ValueError(f"{dist}.params.range must be provided as [min, max] (inclusive)")
    return _int_pair(params["range"], f"{dist}.params.range")


def _parse_optional_inclusive_range(
    params: Dict[str, Any], default: Tuple[int, int]
) -> Tuple[int, int]:
    if "range" not in params:
        return default
    return _int_pair(params["range"], "params.range")


def _int_pair(spec: Any, what: str) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{what} must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{what} values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{what} invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_float_range(params: Dict[str, Any]) -> Tuple[float, float]:
    spec = params.get("range", [0.0, 1.0])
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("uniform_float.params.range must be a 2-element list/tuple [lo, hi]")
    try:
        lo, hi = float(spec[0]), float(spec[1])
    except (TypeError, ValueError) as e:
        raise ValueError(f"uniform_float.params.range values must be numbers; got {spec!r}") from e
    if not lo < hi:
        raise ValueError(f"uniform_float.params.range invalid: need lo < hi ({lo} >= {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """swap_frac in [0.0, 1.0] for nearly_sorted; defaults to 0.05."""
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _parse_small_range(params: Dict[str, Any]) -> Tuple[int, int]:
    """
    Inclusive bounds for "small_range": either params["range"], or
    params["min_val"] / params["max_val"] with defaults 0 / 255.
    """
    if "range" in params:
        return _parse_optional_inclusive_range(params, default=(0, 255))

    min_raw = params.get("min_val", 0)
    max_raw = params.get("max_val", 255)
    return _int_pair([min_raw, max_raw], "small_range params.min_val/max_val")


def _parse_lengths(params: Dict[str, Any]) -> Tuple[int, int]:
    min_len = params.get("min_len", 0)
    max_len = params.get("max_len", 8)
    lo, hi = _int_pair([min_len, max_len], "ascii_strings.params.min_len/max_len")
    if lo < 0:
        raise ValueError(f"ascii_strings.params.min_len must be >= 0; got {lo}")
    return lo, hi


def _parse_alphabet(params: Dict[str, Any]) -> str:
    alphabet = params.get("alphabet", DEFAULT_ALPHABET)
    if not isinstance(alphabet, str) or not alphabet:
        raise ValueError("ascii_strings.params.alphabet must be a non-empty str")
    if not alphabet.isascii():
        raise ValueError(f"ascii_strings.params.alphabet must be ASCII; got {alphabet!r}")
    return alphabet


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars; bool is not a count.
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)

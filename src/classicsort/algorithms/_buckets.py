"""
Stable bucket placement: the single pass shared by the counting-based sorts.

general_counting_sort, int_radix_sort and string_radix_sort all reduce to
the same step: bucket every element, prefix-sum the bucket sizes, then walk
the input right to left and drop each element into the last free slot of its
bucket. Walking right to left while decrementing after placement keeps equal
keys in input order, which is what makes LSD radix sort correct.
"""

from __future__ import annotations

from typing import Any, Callable, List

NUM_DIGITS = 10

# 128 ASCII codes plus bucket 0 for "no character at this position".
NUM_ASCII_BUCKETS = 129

__all__ = ["NUM_DIGITS", "NUM_ASCII_BUCKETS", "stable_bucket_pass"]


def stable_bucket_pass(
    vec: List[Any], bucket_of: Callable[[Any], int], num_buckets: int
) -> None:
    """
    Stably reorder `vec` in place by `bucket_of(x)` in [0, num_buckets).

    An out-of-range bucket index is a caller error and surfaces as whatever
    list indexing does with it.
    """
    n = len(vec)
    counts = [0] * num_buckets
    output: List[Any] = [None] * n

    for x in vec:
        counts[bucket_of(x)] += 1

    for b in range(1, num_buckets):
        counts[b] += counts[b - 1]

    for i in range(n - 1, -1, -1):
        b = bucket_of(vec[i])
        output[counts[b] - 1] = vec[i]
        counts[b] -= 1

    vec[:] = output

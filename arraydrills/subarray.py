"""Contiguous subarrays and maximum subarray sums."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate


def subarrays(values: Sequence[int]) -> Iterator[list[int]]:
    """Yield every contiguous subarray, ordered by start then end."""
    for start in range(len(values)):
        for end in range(start + 1, len(values) + 1):
            yield list(values[start:end])


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Return the largest subarray sum by trying every start and end.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("an empty sequence has no subarrays")
    return max(
        max(accumulate(values[start:])) for start in range(len(values))
    )


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest subarray sum using Kadane's algorithm.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("an empty sequence has no subarrays")
    current = 0
    best = values[0]
    for value in values:
        current += value
        best = max(best, current)
        if current < 0:
            current = 0
    return best
"""Classic list questions: pair sums, majority elements and products."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations, groupby


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values sum to ``target``.

    Pairs are tried in order of ``i`` then ``j``; returns None when no pair exists.
    """
    return next(
        (
            (i, j)
            for (i, a), (j, b) in combinations(enumerate(nums), 2)
            if a + b == target
        ),
        None,
    )


def two_pointer_pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find an index pair summing to ``target`` in an ascending ``nums``.

    Walks two pointers inwards from both ends; returns None when no pair exists.
    """
    i, j = 0, len(nums) - 1
    while i < j:
        pair = nums[i] + nums[j]
        if pair > target:
            j -= 1
        elif pair < target:
            i += 1
        else:
            return i, j
    return None


def majority_element(values: Sequence[int]) -> int | None:
    """Return the value occurring more than ``len(values) // 2`` times, or None.

    Counts every candidate against the whole sequence.
    """
    half = len(values) // 2
    for candidate in values:
        if sum(1 for value in values if value == candidate) > half:
            return candidate
    return None


def sorted_majority_element(values: Sequence[int]) -> int:
    """Return the majority element found by sorting and counting runs.

    When no run exceeds half the length, the largest value is returned.
    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("no majority element in an empty sequence")
    half = len(values) // 2
    last = values[0]
    for last, run in groupby(sorted(values)):
        if sum(1 for _ in run) > half:
            return last
    return last


def moore_majority_element(values: Sequence[int]) -> int:
    """Return the candidate chosen by Moore's voting algorithm.

    The result is the majority element whenever one exists.
    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("no majority element in an empty sequence")
    votes = 0
    candidate = values[0]
    for value in values:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    return candidate


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    result = [1] * len(nums)
    prefix = 1
    for index, value in enumerate(nums):
        result[index] = prefix
        prefix *= value
    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result
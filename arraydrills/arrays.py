"""Basic list drills: reversing, aggregates, extremes, uniqueness and search."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from math import prod


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by swapping from both ends towards the middle."""
    start, end = 0, len(values) - 1
    while start < end:
        values[start], values[end] = values[end], values[start]
        start += 1
        end -= 1


def reverse_prefix(values: MutableSequence[int], size: int) -> None:
    """Reverse the first ``size`` elements of ``values`` in place.

    Raises ValueError for a negative size and IndexError when ``size``
    exceeds the length of ``values``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(values):
        raise IndexError(f"size {size} exceeds length {len(values)}")
    values[:size] = values[:size][::-1]


def sum_and_product(values: Iterable[int]) -> tuple[int, int]:
    """Return the sum and the product of ``values`` as a pair."""
    items = list(values)
    return sum(items), prod(items)


def swap_max_min(values: MutableSequence[int]) -> None:
    """Swap the first largest and the first smallest element of ``values`` in place.

    Raises ValueError when ``values`` is empty.
    """
    if not values:
        raise ValueError("cannot swap extremes of an empty sequence")
    positions = range(len(values))
    max_index = max(positions, key=values.__getitem__)
    min_index = min(positions, key=values.__getitem__)
    values[max_index], values[min_index] = values[min_index], values[max_index]


def unique_values(values: Iterable[int]) -> list[int]:
    """Return the elements that occur exactly once, in their original order."""
    items = list(values)
    counts = Counter(items)
    return [value for value in items if counts[value] == 1]


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return distinct elements of ``first`` also found in ``second``.

    Elements keep the order of their first appearance in ``first``.
    """
    other = set(second)
    seen: set[int] = set()
    result: list[int] = []
    for value in first:
        if value in seen:
            continue
        seen.add(value)
        if value in other:
            result.append(value)
    return result


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the index of the first ``target`` in ``values``, or -1 if absent."""
    return next(
        (index for index, value in enumerate(values) if value == target), -1
    )
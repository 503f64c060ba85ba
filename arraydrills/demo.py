"""Command that prints worked examples of the drills."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from arraydrills.arrays import intersection
from arraydrills.numbers import digit_sum, factorial, n_choose_r, sum_to_n
from arraydrills.patterns import hollow_diamond
from arraydrills.questions import (
    majority_element,
    moore_majority_element,
    product_except_self,
    sorted_majority_element,
    two_pointer_pair_sum,
)
from arraydrills.subarray import max_subarray_sum


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _arrays() -> list[str]:
    first = [1, 2, 2, 8, -5]
    second = [1, 2, 44, 242, 1, 55, -15]
    common = intersection(first, second)
    return [_join(common)]


def _questions() -> list[str]:
    lines: list[str] = []
    pair = two_pointer_pair_sum([2, 7, 11, 15], 9)
    if pair is None:
        lines.append("No pair found")
    else:
        lines.append(f"{pair[0]},{pair[1]}")

    votes = [1, 2, 2, 1, 1, 1]
    brute = majority_element(votes)
    answers = (
        -1 if brute is None else brute,
        sorted_majority_element(votes),
        moore_majority_element(votes),
    )
    lines.extend(f"The majority element is : {answer}" for answer in answers)

    lines.append(_join(product_except_self([1, 2, 3, 4])))
    return lines


def _subarray() -> list[str]:
    best = max_subarray_sum([3, -4, 5, 4, -1, 7, -8])
    return [f"The most efficient way to find the max subarry = {best}"]


def _functions() -> list[str]:
    total = 10 + 780
    smaller = min(232312, 123123)
    return [
        str(total),
        str(smaller),
        str(sum_to_n(99)),
        str(factorial(5)),
        f"The sum of all the digits in the num: {digit_sum(1232332)}",
        str(n_choose_r(8, 2)),
    ]


def _patterns() -> list[str]:
    diamond = hollow_diamond(4)
    return list(diamond)


_TOPICS: dict[str, Callable[[], list[str]]] = {
    "arrays": _arrays,
    "questions": _questions,
    "subarray": _subarray,
    "functions": _functions,
    "patterns": _patterns,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the worked examples for the chosen topics, or for all of them."""
    parser = argparse.ArgumentParser(
        prog="arraydrills", description="Print worked examples of the drills."
    )
    parser.add_argument(
        "topics",
        nargs="*",
        choices=sorted(_TOPICS),
        help="topics to show (default: all)",
    )
    args = parser.parse_args(argv)
    for topic in args.topics or list(_TOPICS):
        for line in _TOPICS[topic]():
            print(line)
    return 0
"""Number drills: binary conversions, sums, factorials, digits and bit operations."""

from __future__ import annotations

from math import prod


def dec_to_bin(number: int) -> int:
    """Return the binary digits of ``number`` written as a decimal integer.

    For example 5 becomes 101. Values of zero or below give 0.
    """
    result = 0
    place = 1
    while number > 0:
        number, remainder = divmod(number, 2)
        result += remainder * place
        place *= 10
    return result


def bin_to_dec(number: int) -> int:
    """Read the decimal digits of ``number`` as binary digits and return their value.

    Each digit is weighted by the power of two of its position. Values of zero
    or below give 0.
    """
    result = 0
    weight = 1
    while number > 0:
        number, digit = divmod(number, 10)
        result += digit * weight
        weight *= 2
    return result


def sum_to_n(n: int) -> int:
    """Return ``1 + 2 + ... + n``; 0 when ``n`` is below 1."""
    return sum(range(1, n + 1))


def factorial(n: int) -> int:
    """Return ``n!``; 1 when ``n`` is below 1."""
    return prod(range(1, n + 1))


def digit_sum(number: int) -> int:
    """Return the sum of the decimal digits of ``number``; 0 when it is not positive."""
    total = 0
    while number > 0:
        number, digit = divmod(number, 10)
        total += digit
    return total


def n_choose_r(n: int, r: int) -> int:
    """Return ``n! / (r! * (n - r)!)`` using integer division."""
    return factorial(n) // (factorial(r) * factorial(n - r))


def bitwise_summary(a: int, b: int) -> dict[str, int]:
    """Return the results of the basic bitwise operators applied to ``a`` and ``b``.

    Shifts are by one place and apply to ``a``.
    """
    return {
        "and": a & b,
        "or": a | b,
        "xor": a ^ b,
        "not": ~a,
        "left_shift": a << 1,
        "right_shift": a >> 1,
    }
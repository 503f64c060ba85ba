"""Text patterns built from stars and spaces."""

from __future__ import annotations


def hollow_diamond(n: int) -> list[str]:
    """Return the lines of a hollow diamond whose widest row is ``2 * n - 1`` wide."""
    top = []
    for row in range(n):
        line = " " * (n - row - 1) + "*"
        if row:
            line += " " * (2 * row - 1) + "*"
        top.append(line)
    bottom = []
    for row in range(n - 1):
        line = " " * (row + 1) + "*"
        if row != n - 2:
            line += " " * (2 * (n - row) - 5) + "*"
        bottom.append(line)
    return top + bottom


def star_lines(blocks: int, per_block: int) -> list[str]:
    """Return ``blocks`` groups of ``per_block`` lines, each holding a single star."""
    return ["*" for _ in range(blocks) for _ in range(per_block)]
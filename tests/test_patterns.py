import pytest

from arraydrills.patterns import hollow_diamond, star_lines


def test_diamond_single_row():
    assert hollow_diamond(1) == ["*"]


@pytest.mark.parametrize("n", [0, -2])
def test_diamond_empty(n):
    assert hollow_diamond(n) == []


@pytest.mark.parametrize("n", [2, 3, 4, 7])
def test_diamond_line_count(n):
    assert len(hollow_diamond(n)) == 2 * n - 1


@pytest.mark.parametrize("n", [2, 3, 4, 7])
def test_diamond_is_mirrored(n):
    lines = hollow_diamond(n)
    top = lines[:n]
    assert lines[n:] == top[-2::-1]


@pytest.mark.parametrize("n", [2, 4, 6])
def test_diamond_tips_and_width(n):
    lines = hollow_diamond(n)
    assert lines[0] == " " * (n - 1) + "*"
    assert lines[-1] == lines[0]
    assert max(len(line) for line in lines) == 2 * n - 1
    assert len(lines[n - 1]) == 2 * n - 1


@pytest.mark.parametrize("n", [3, 5])
def test_diamond_star_counts(n):
    counts = [line.count("*") for line in hollow_diamond(n)]
    assert counts[0] == 1 and counts[-1] == 1
    assert all(count == 2 for count in counts[1:-1])
    assert all(set(line) <= {" ", "*"} for line in hollow_diamond(n))


def test_star_lines_blocks():
    lines = star_lines(5, 10)
    assert len(lines) == 50
    assert set(lines) == {"*"}


@pytest.mark.parametrize("blocks, per_block", [(0, 10), (5, 0), (-1, 3)])
def test_star_lines_empty(blocks, per_block):
    assert star_lines(blocks, per_block) == []
"""Number pyramids, diamonds and other decorated patterns, returned as text rows.

Every row is built exactly as it would be printed, trailing spaces included.
A non-positive size yields no rows.
"""

from __future__ import annotations

from itertools import count


def _numbered(numbers) -> str:
    return "".join(f"{value} " for value in numbers)


def hollow_number_half_pyramid(n: int) -> list[str]:
    """A hollow left-aligned triangle of column numbers with a full bottom row."""
    rows = []
    for row in range(n):
        cells = (
            f"{col + 1} " if col in (0, row) or row == n - 1 else "  "
            for col in range(row + 1)
        )
        rows.append("".join(cells))
    return rows


def hollow_inverted_number_half_pyramid(n: int) -> list[str]:
    """A hollow shrinking triangle whose cells show row + column + 1."""
    rows = []
    for row in range(n):
        cells = (
            f"{row + col + 1} " if row == 0 or col == 0 or row + col == n - 1 else "  "
            for col in range(n - row)
        )
        rows.append("".join(cells))
    return rows


def number_palindrome_pyramid(n: int) -> list[str]:
    """A centred pyramid whose row reads 1 up to the row number and back to 1."""
    return [
        "  " * (n - row - 1) + _numbered([*range(1, row + 2), *range(row, 0, -1)])
        for row in range(n)
    ]


def solid_half_diamond(n: int) -> list[str]:
    """A left-aligned triangle of stars growing to n and shrinking back to one."""
    rows = []
    for row in range(2 * n - 1):
        width = row + 1 if row < n else 2 * n - 1 - row
        rows.append("* " * width)
    return rows


def fancy_pattern_1(n: int) -> list[str]:
    """Numbers 1..row+1 joined by stars, padded on both sides with stars."""
    rows = []
    for row in range(n):
        padding = "*" * (2 * (n - 1) - row)
        middle = "*".join(str(value) for value in range(1, row + 2))
        rows.append(padding + middle + padding)
    return rows


def fancy_pattern_2(n: int) -> list[str]:
    """Consecutive numbers joined by stars in growing rows, then mirrored."""
    counter = count(1)
    upper = [
        "*".join(str(next(counter)) for _ in range(row + 1)) for row in range(n)
    ]
    return upper + upper[::-1]


def floyd_triangle(n: int) -> list[str]:
    """Consecutive numbers from 1 laid out in rows of growing length."""
    counter = count(1)
    return [_numbered(next(counter) for _ in range(row + 1)) for row in range(n)]


def pascal_triangle(n: int) -> list[str]:
    """The first n rows of binomial coefficients."""
    rows = []
    for row in range(1, n + 1):
        coefficient = 1
        values = []
        for col in range(1, row + 1):
            values.append(coefficient)
            coefficient = coefficient * (row - col) // col
        rows.append(_numbered(values))
    return rows


def _diamond_row(n: int, i: int) -> str:
    return " " * (n - 1 - i) + "* " * (i + 1)


def diamond(n: int) -> list[str]:
    """A solid diamond of stars, n stars across at its widest row."""
    top = [_diamond_row(n, i) for i in range(n - 1)]
    bottom = [_diamond_row(n, i) for i in range(n - 1, -1, -1)]
    return top + bottom


def _hollow_diamond_row(n: int, i: int) -> str:
    width = 2 * i + 1
    body = "".join("*" if j in (0, width - 1) else " " for j in range(width))
    return " " * (n - i - 1) + body


def hollow_diamond(n: int) -> list[str]:
    """A diamond outline whose widest row is drawn twice."""
    top = [_hollow_diamond_row(n, i) for i in range(n)]
    return top + top[::-1]


def number_full_pyramid(n: int) -> list[str]:
    """A centred pyramid of digits climbing from row+1 to 2*row+1 and back."""
    rows = []
    for row in range(n):
        numbers = [*range(row + 1, 2 * row + 2), *range(2 * row, row, -1)]
        rows.append(" " * (n - 1 - row) + "".join(str(value) for value in numbers))
    return rows
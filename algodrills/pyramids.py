"""Star and number pyramids, each returned as a list of text rows.

Every row is built exactly as it would be printed, trailing spaces included.
A non-positive size yields no rows.
"""

from __future__ import annotations


def _numbered(numbers) -> str:
    return "".join(f"{value} " for value in numbers)


def rectangle(n: int) -> list[str]:
    """A solid n by n square of stars."""
    return ["* " * n for _ in range(n)]


def hollow_rectangle(n: int) -> list[str]:
    """An n by n square with only its border drawn."""
    rows = []
    for i in range(n):
        if i in (0, n - 1):
            rows.append("* " * n)
        else:
            rows.append("* " + "  " * (n - 2) + "* ")
    return rows


def half_pyramid(n: int) -> list[str]:
    """A left-aligned triangle growing from one star to n stars."""
    return ["* " * (i + 1) for i in range(n)]


def half_pyramid_numbers(n: int) -> list[str]:
    """A left-aligned triangle whose row i counts from 1 to i + 1."""
    return [_numbered(range(1, i + 2)) for i in range(n)]


def inverted_half_pyramid(n: int) -> list[str]:
    """A left-aligned triangle shrinking from n stars to one."""
    return ["* " * (n - i) for i in range(n)]


def inverted_half_pyramid_numbers(n: int) -> list[str]:
    """A left-aligned triangle whose rows count from 1 to n, n - 1, ... 1."""
    return [_numbered(range(1, n - i + 1)) for i in range(n)]


def full_pyramid(n: int) -> list[str]:
    """A centred pyramid of stars with its point at the top."""
    return ["  " * (n - 1 - i) + " *  " * (i + 1) for i in range(n)]


def inverted_full_pyramid(n: int) -> list[str]:
    """A centred pyramid of stars with its point at the bottom."""
    return ["  " * i + " *  " * (n - i) for i in range(n)]


def palindrome_pyramid(n: int) -> list[str]:
    """A centred pyramid whose row i reads 1 .. i+1 .. 1."""
    rows = []
    for i in range(n):
        numbers = [*range(1, i + 2), *range(i, 0, -1)]
        rows.append("  " * (n - 1 - i) + _numbered(numbers))
    return rows


def shifted_palindrome_pyramid(n: int) -> list[str]:
    """A centred pyramid whose row i climbs from i+1 to 2i+1 and back."""
    rows = []
    for i in range(n):
        numbers = [*range(i + 1, 2 * i + 2), *range(2 * i, i, -1)]
        rows.append("  " * (n - 1 - i) + _numbered(numbers))
    return rows


def hollow_number_pyramid(n: int) -> list[str]:
    """A hollow centred pyramid with 1 on its left edge and the row number on its right."""
    rows = []
    for i in range(n):
        padding = " " * (n - 1 - i)
        if i == n - 1:
            rows.append(padding + _numbered(range(1, n + 1)))
        else:
            gap = " " * (2 * (i - 1) + 1)
            right = str(i + 1) if i != 0 else ""
            rows.append(padding + "1" + gap + right)
    return rows


def hollow_inverted_half_pyramid(n: int) -> list[str]:
    """A hollow left-aligned triangle shrinking from n stars to one."""
    rows = []
    for i in range(n):
        if i in (0, n - 1):
            rows.append("* " * (n - i))
        else:
            rows.append("* " + "  " * (n - 2 - i) + "* ")
    return rows


def hollow_inverted_full_pyramid(n: int) -> list[str]:
    """A hollow centred pyramid with a solid base of n stars."""
    rows = []
    for i in range(n):
        padding = " " * (n - 1 - i)
        if i == n - 1:
            rows.append(padding + "* " * n)
        else:
            gap = " " * (2 * (i - 1) + 1)
            right = "* " if i != 0 else ""
            rows.append(padding + "*" + gap + right)
    return rows
"""Text and number conversions: parsing, run-length coding, numerals, zigzag, ordering."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import chain, cycle, groupby
from typing import Iterable, Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def my_atoi(text: str) -> int:
    """Read a signed 32-bit integer after leading spaces, clamping on overflow.

    Returns 0 when no digits follow the optional sign.
    """
    i = 0
    size = len(text)
    while i < size and text[i] == " ":
        i += 1

    sign = 1
    if i < size and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1

    limit = INT_MAX // 10
    number = 0
    while i < size and "0" <= text[i] <= "9":
        digit = ord(text[i]) - ord("0")
        if number > limit or (number == limit and digit > 7):
            return INT_MIN if sign < 0 else INT_MAX
        number = number * 10 + digit
        i += 1
    return number * sign


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length code a sequence of characters: each run's character, then its length if above one."""
    result: list[str] = []
    for ch, run in groupby(chars):
        length = sum(1 for _ in run)
        result.append(ch)
        if length > 1:
            result.extend(str(length))
    return result


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num``; empty for values below one."""
    if num <= 0:
        return ""
    parts = []
    for value, symbol in _ROMAN:
        times, num = divmod(num, value)
        parts.append(symbol * times)
    return "".join(parts)


def zigzag_convert(text: str, rows: int) -> str:
    """Write ``text`` down and up across ``rows`` rows, then read it row by row."""
    if rows < 1:
        raise ValueError(f"rows must be at least 1, got {rows}")
    if rows == 1:
        return text
    lines: list[list[str]] = [[] for _ in range(rows)]
    path = cycle(chain(range(rows), range(rows - 2, 0, -1)))
    for ch, row in zip(text, path):
        lines[row].append(ch)
    return "".join("".join(line) for line in lines)


def _order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """The largest number formed by concatenating the given non-negative integers."""
    if not nums:
        raise ValueError("no numbers to arrange")
    parts = sorted((str(n) for n in nums), key=cmp_to_key(_order))
    if parts[0] == "0":
        return "0"
    return "".join(parts)
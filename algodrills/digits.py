"""Arithmetic on numbers held as lists of decimal digits, most significant first."""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence


def _check_digits(digits: Sequence[int]) -> None:
    if any(not 0 <= digit <= 9 for digit in digits):
        raise ValueError("every digit must lie between 0 and 9")


def add_digit_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Sum of two digit lists, without leading zeros ([0] for a zero sum)."""
    _check_digits(first)
    _check_digits(second)
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        result.append(digit)
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return result[::-1] or [0]


def large_factorial(number: int) -> list[int]:
    """Digits of number!, computed by schoolbook multiplication; [1] below two."""
    digits = [1]  # least significant first while multiplying
    for factor in range(2, number + 1):
        carry = 0
        for position, digit in enumerate(digits):
            carry, digits[position] = divmod(digit * factor + carry, 10)
        while carry:
            carry, digit = divmod(carry, 10)
            digits.append(digit)
    return digits[::-1]
"""Recursive drills: counting, sequences, searches, subsequences and optimisation."""

from __future__ import annotations

from functools import cache
from typing import Sequence


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def count_down(n: int) -> list[int]:
    """The numbers from ``n`` down to 1; empty for zero."""
    _require(n >= 0, f"count must not be negative, got {n}")
    if n == 0:
        return []
    return [n, *count_down(n - 1)]


def power_of_two(n: int) -> int:
    """Two raised to ``n``, for ``n`` of at least one."""
    _require(n >= 1, f"exponent must be at least 1, got {n}")
    if n == 1:
        return 2
    return 2 * power_of_two(n - 1)


def factorial(n: int) -> int:
    """The product n * (n - 1) * ... * 1, for ``n`` of at least one."""
    _require(n >= 1, f"factorial needs a value of at least 1, got {n}")
    if n == 1:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, counting fibonacci(0) = 0 and fibonacci(1) = 1."""
    _require(n >= 0, f"index must not be negative, got {n}")
    if n in (0, 1):
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    _require(n >= 1, f"need at least one step, got {n}")
    if n in (1, 2):
        return n
    return climb_stairs(n - 1) + climb_stairs(n - 2)


def find_max(values: Sequence[int]) -> int:
    """The largest value, found by walking the sequence recursively."""
    _require(len(values) > 0, "cannot take the maximum of an empty sequence")

    def walk(i: int, best: int) -> int:
        if i == len(values):
            return best
        return walk(i + 1, max(best, values[i]))

    return walk(1, values[0])


def contains_char(text: str, key: str) -> bool:
    """Whether the character ``key`` occurs in ``text``."""
    return find_char_index(text, key) is not None


def find_char_index(text: str, key: str) -> int | None:
    """Index of the first ``key`` in ``text``, or None."""

    def walk(i: int) -> int | None:
        if i == len(text):
            return None
        if text[i] == key:
            return i
        return walk(i + 1)

    return walk(0)


def char_indexes(text: str, key: str) -> list[int]:
    """Every index at which ``key`` occurs in ``text``, ascending."""

    def walk(i: int) -> list[int]:
        if i == len(text):
            return []
        rest = walk(i + 1)
        return [i, *rest] if text[i] == key else rest

    return walk(0)


def digits(n: int) -> list[int]:
    """The decimal digits of ``n``, most significant first; empty for zero."""
    _require(n >= 0, f"number must not be negative, got {n}")
    if n == 0:
        return []
    return [*digits(n // 10), n % 10]


def is_sorted(values: Sequence[int]) -> bool:
    """Whether the values never decrease."""

    def walk(i: int) -> bool:
        if i >= len(values) - 1:
            return True
        if values[i] > values[i + 1]:
            return False
        return walk(i + 1)

    return walk(0)


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Index of ``key`` in the ascending ``values``, or None."""

    def search(start: int, end: int) -> int | None:
        if start > end:
            return None
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if values[mid] > key:
            return search(start, mid - 1)
        return search(mid + 1, end)

    return search(0, len(values) - 1)


def subsequences(text: str) -> list[str]:
    """Every subsequence of ``text``, branches that include a character coming first."""
    result: list[str] = []

    def walk(i: int, chosen: str) -> None:
        if i == len(text):
            result.append(chosen)
            return
        walk(i + 1, chosen + text[i])
        walk(i + 1, chosen)

    walk(0, "")
    return result


def min_coins(coins: Sequence[int], target: int) -> int | None:
    """Fewest coins, each usable any number of times, that add up to ``target``; None if impossible."""
    _require(all(coin > 0 for coin in coins), "every coin must be positive")

    @cache
    def solve(remaining: int) -> int | None:
        if remaining == 0:
            return 0
        best = None
        for coin in coins:
            if remaining - coin >= 0:
                sub = solve(remaining - coin)
                if sub is not None and (best is None or sub + 1 < best):
                    best = sub + 1
        return best

    return solve(target)


def max_segments(length: int, x: int, y: int, z: int) -> int | None:
    """Most pieces of sizes x, y or z that exactly make up ``length``; None if impossible."""
    _require(min(x, y, z) > 0, "segment sizes must be positive")

    @cache
    def solve(remaining: int) -> int | None:
        if remaining == 0:
            return 0
        best = None
        for size in (x, y, z):
            if remaining - size >= 0:
                sub = solve(remaining - size)
                if sub is not None and (best is None or sub + 1 > best):
                    best = sub + 1
        return best

    return solve(length)


def max_non_adjacent_sum(values: Sequence[int]) -> int:
    """Largest sum of values no two of which stand next to each other; 0 when nothing is taken."""

    @cache
    def solve(i: int) -> int:
        if i >= len(values):
            return 0
        return max(values[i] + solve(i + 2), solve(i + 1))

    return solve(0)
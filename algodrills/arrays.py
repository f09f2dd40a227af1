"""Basic operations on one- and two-dimensional integer arrays."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Sequence

Matrix = Sequence[Sequence[int]]


def linear_search(values: Sequence[int], key: int) -> bool:
    """Whether ``key`` occurs in ``values``."""
    return any(value == key for value in values)


def find_min(values: Sequence[int]) -> int:
    """The smallest value; raises ValueError for an empty sequence."""
    if not values:
        raise ValueError("cannot take the minimum of an empty sequence")
    return min(values)


def find_max(values: Sequence[int]) -> int:
    """The largest value; raises ValueError for an empty sequence."""
    if not values:
        raise ValueError("cannot take the maximum of an empty sequence")
    return max(values)


def count_zeros_and_ones(values: Sequence[int]) -> tuple[int, int]:
    """How many zeros and how many ones the sequence holds."""
    return values.count(0) if isinstance(values, list) else list(values).count(0), list(values).count(1)


def extreme_pairs(values: Sequence[int]) -> tuple[list[tuple[int, int]], int | None]:
    """Pairs taken from both ends inwards, and the middle value of an odd-length sequence."""
    n = len(values)
    pairs = list(zip(values[: n // 2], reversed(values)))
    middle = values[n // 2] if n % 2 else None
    return pairs, middle


def reverse(values: Sequence[int]) -> list[int]:
    """A new list holding the values in reverse order."""
    return list(reversed(values))


def find_unique_in_pairs(values: Sequence[int]) -> int:
    """The one value that is not paired, found by XOR-ing everything together."""
    return reduce(xor, values, 0)


def merge(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """The values of ``first`` followed by those of ``second``."""
    return [*first, *second]


def intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Every value of ``first`` once for each equal value in ``second``."""
    return [a for a in first for b in second if a == b]


def pair_sums(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Pairs (values[i], values[j]) with i <= j that add up to ``target``."""
    n = len(values)
    return [
        (values[i], values[j])
        for i in range(n)
        for j in range(i, n)
        if values[i] + values[j] == target
    ]


def triplet_sums(values: Sequence[int], target: int) -> list[tuple[int, int, int]]:
    """Triplets with i <= j <= k whose values add up to ``target``."""
    n = len(values)
    return [
        (values[i], values[j], values[k])
        for i in range(n)
        for j in range(i, n)
        for k in range(j, n)
        if values[i] + values[j] + values[k] == target
    ]


def sort_zeros_and_ones(values: Sequence[int]) -> list[int]:
    """A copy of a 0/1 sequence with every zero moved before every one."""
    result = list(values)
    start, i, end = 0, 0, len(result) - 1
    while i < end:
        if result[i] == 0:
            result[i], result[start] = result[start], result[i]
            start += 1
            i += 1
        else:
            result[i], result[end] = result[end], result[i]
            end -= 1
    return result


def _cells(matrix: Matrix):
    return (value for row in matrix for value in row)


def contains(matrix: Matrix, key: int) -> bool:
    """Whether ``key`` occurs anywhere in the matrix."""
    return any(value == key for value in _cells(matrix))


def matrix_max(matrix: Matrix) -> int:
    """The largest cell; raises ValueError for an empty matrix."""
    cells = list(_cells(matrix))
    if not cells:
        raise ValueError("cannot take the maximum of an empty matrix")
    return max(cells)


def matrix_min(matrix: Matrix) -> int:
    """The smallest cell; raises ValueError for an empty matrix."""
    cells = list(_cells(matrix))
    if not cells:
        raise ValueError("cannot take the minimum of an empty matrix")
    return min(cells)


def transpose(matrix: Matrix) -> list[list[int]]:
    """The matrix with rows and columns swapped."""
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix: Matrix) -> str:
    """One line per row, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)
"""Classic in-place array puzzles, each working on a copy of its input."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def sort_colors(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass with three pointers."""
    result = list(values)
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[mid], result[low] = result[low], result[mid]
            mid += 1
            low += 1
        elif result[mid] == 2:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
        else:
            mid += 1
    return result


def move_negatives_left(values: Iterable[int]) -> list[int]:
    """Move every negative value before every non-negative one."""
    result = list(values)
    start, end = 0, len(result) - 1
    while start <= end:
        if result[start] < 0:
            start += 1
        else:
            result[start], result[end] = result[end], result[start]
            end -= 1
    return result


def find_duplicate_by_marking(values: Iterable[int]) -> int | None:
    """The repeated value, found by negating the cell each value points at.

    Values must be valid indexes into the sequence; returns None when no
    repetition is found.
    """
    marks = list(values)
    for value in list(marks):
        index = abs(value)
        if marks[index] < 0:
            return index
        marks[index] = -marks[index]
    return None


def find_duplicate_by_placement(values: Iterable[int]) -> int:
    """The repeated value, found by swapping the first value into its own cell."""
    cells = list(values)
    while cells[cells[0]] != cells[0]:
        target = cells[0]
        cells[0], cells[target] = cells[target], target
    return cells[0]


def missing_by_marking(values: Iterable[int]) -> list[int]:
    """Numbers in 1..n absent from a sequence of n values drawn from 1..n."""
    marks = list(values)
    for value in list(marks):
        index = abs(value) - 1
        if marks[index] > 0:
            marks[index] = -marks[index]
    return [position for position, mark in enumerate(marks, start=1) if mark > 0]


def missing_by_placement(values: Iterable[int]) -> list[int]:
    """Numbers in 1..n absent from the sequence, found by sending values home."""
    cells = list(values)
    i = 0
    while i < len(cells):
        index = cells[i] - 1
        if cells[index] != cells[i]:
            cells[index], cells[i] = cells[i], cells[index]
        else:
            i += 1
    return [position for position, value in enumerate(cells, start=1) if value != position]


def first_repeating(values: Sequence[int]) -> int | None:
    """The leftmost value that occurs more than once, or None."""
    frequencies = Counter(values)
    return next((value for value in values if frequencies[value] > 1), None)


def common_elements(
    first: Sequence[int], second: Sequence[int], third: Sequence[int]
) -> list[int]:
    """Distinct values present in all three ascending sequences, ascending."""
    a = b = c = 0
    common: list[int] = []
    while a < len(first) and b < len(second) and c < len(third):
        if first[a] == second[b] == third[c]:
            if not common or common[-1] != first[a]:
                common.append(first[a])
            a += 1
            b += 1
            c += 1
        elif first[a] < second[b]:
            a += 1
        elif second[b] < third[c]:
            b += 1
        else:
            c += 1
    return common
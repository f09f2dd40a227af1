"""Pair counting, closest-element windows and searches over sorted sequences."""

from __future__ import annotations

from typing import Any, Sequence


def count_k_diff_pairs_brute(values: Sequence[int], k: int) -> int:
    """Count index pairs i <= j, i below the last index, whose values differ by ``k``.

    Each index is also paired with itself, so a ``k`` of zero counts every
    element except the last once more than the distinct pairs.
    """
    n = len(values)
    return sum(
        1
        for i in range(n - 1)
        for j in range(i, n)
        if abs(values[i] - values[j]) == k
    )


def k_diff_pairs(values: Sequence[int], k: int) -> list[tuple[int, int]]:
    """Distinct pairs (a, b) with b - a == k, found with two pointers over a sorted copy."""
    ordered = sorted(values)
    pairs: dict[int, int] = {}
    i, j = 0, 1
    while j < len(ordered):
        diff = ordered[j] - ordered[i]
        if diff == k:
            pairs[ordered[i]] = ordered[j]
            i += 1
            j += 1
        elif diff < k:
            j += 1
        else:
            i += 1
        if i == j:
            j += 1
    return sorted(pairs.items())


def k_diff_pairs_binary(values: Sequence[int], k: int) -> list[tuple[int, int]]:
    """Distinct pairs (a, b) with b - a == k, found by binary searching for a + k."""
    ordered = sorted(values)
    last = len(ordered) - 1
    pairs: set[tuple[int, int]] = set()
    for i in range(last):
        index = binary_search(ordered, i + 1, last, ordered[i] + k)
        if index is not None:
            pairs.add((ordered[i], ordered[index]))
    return sorted(pairs)


def binary_search(values: Sequence[int], start: int, end: int, target: int) -> int | None:
    """Index of ``target`` within values[start..end] inclusive, or None."""
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            end = mid - 1
        else:
            start = mid + 1
    return None


def closest_two_pointer(values: Sequence[int], k: int, x: int) -> list[int]:
    """The ``k`` values closest to ``x`` in a sorted sequence, by shrinking a window."""
    start, end = 0, len(values) - 1
    while end - start >= k:
        if x - values[start] > values[end] - x:
            start += 1
        else:
            end -= 1
    return list(values[start : end + 1])


def lower_bound(values: Sequence[int], target: int) -> int:
    """First index holding a value >= ``target``; the last index if there is none."""
    start, end = 0, len(values) - 1
    answer = end
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] >= target:
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def closest_binary_search(values: Sequence[int], k: int, x: int) -> list[int]:
    """The ``k`` values closest to ``x``, grown outwards from the lower bound of ``x``."""
    if not 0 <= k <= len(values):
        raise ValueError(f"k must lie between 0 and {len(values)}, got {k}")
    end = lower_bound(values, x)
    start = end - 1
    for _ in range(k):
        if start < 0:
            end += 1
        elif end >= len(values):
            start -= 1
        elif x - values[start] <= values[end] - x:
            start -= 1
        else:
            end += 1
    return list(values[start + 1 : end])


def exponential_search(values: Sequence[int], target: int) -> int | None:
    """Index of ``target`` found by doubling a probe, then binary searching the last gap."""
    if not values:
        return None
    if values[0] == target:
        return 0
    n = len(values)
    i = 1
    while i < n and values[i] < target:
        i <<= 1
    return binary_search(values, i >> 1, min(i, n - 1), target)


def _at(values: Any, index: int) -> Any:
    try:
        return values[index]
    except IndexError:
        return None


def unbounded_search(values: Any, target: int) -> int | None:
    """Index of ``target`` in a sorted sequence whose length need not be known.

    ``values`` only has to support indexing; reading past its end may raise
    IndexError, which is treated as lying beyond every value.
    """
    if _at(values, 0) is None:
        return None
    low, high = 0, 1
    while (probe := _at(values, high)) is not None and probe < target:
        low, high = high, high * 2
    while low <= high:
        mid = low + (high - low) // 2
        value = _at(values, mid)
        if value is not None and value == target:
            return mid
        if value is None or value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None
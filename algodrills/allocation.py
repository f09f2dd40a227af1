"""Binary search on the answer: books, painters, cows, wood cutting and pratas."""

from __future__ import annotations

from typing import Callable, Sequence


def _smallest(low: int, high: int, feasible: Callable[[int], bool]) -> int | None:
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if feasible(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _largest(low: int, high: int, feasible: Callable[[int], bool]) -> int | None:
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if feasible(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def _fits(items: Sequence[int], workers: int, limit: int) -> bool:
    total = 0
    used = 1
    for item in items:
        if item > limit:
            return False
        if total + item > limit:
            used += 1
            total = item
            if used > workers:
                return False
        else:
            total += item
    return True


def can_allocate_books(pages: Sequence[int], students: int, limit: int) -> bool:
    """Whether consecutive books can go to ``students`` readers with at most ``limit`` pages each."""
    return _fits(pages, students, limit)


def min_pages(pages: Sequence[int], students: int) -> int:
    """The smallest possible largest share of pages when books are split in order."""
    if students < 1 or students > len(pages):
        raise ValueError(
            f"need between 1 and {len(pages)} students, got {students}"
        )
    return _smallest(0, sum(pages), lambda limit: can_allocate_books(pages, students, limit))


def can_paint(boards: Sequence[int], painters: int, limit: int) -> bool:
    """Whether consecutive boards can be shared by ``painters`` so none works past ``limit``."""
    return _fits(boards, painters, limit)


def min_painting_time(boards: Sequence[int], painters: int) -> int:
    """The least time in which ``painters`` can paint the boards in consecutive runs."""
    if painters < 1:
        raise ValueError(f"need at least one painter, got {painters}")
    return _smallest(0, sum(boards), lambda limit: can_paint(boards, painters, limit))


def can_place_cows(stalls: Sequence[int], cows: int, distance: int) -> bool:
    """Whether ``cows`` fit in the ascending stall positions at least ``distance`` apart.

    The first cow takes the first stall; success is only seen once a later
    stall has been looked at, so a single stall never succeeds.
    """
    if not stalls:
        return False
    placed = 1
    position = stalls[0]
    for stall in stalls[1:]:
        if stall - position >= distance:
            placed += 1
            position = stall
        if placed == cows:
            return True
    return False


def max_min_distance(stalls: Sequence[int], cows: int) -> int:
    """The largest least gap between cows placed in the given stalls."""
    if not stalls:
        raise ValueError("no stalls to place cows in")
    ordered = sorted(stalls)
    answer = _largest(
        0, ordered[-1] - ordered[0], lambda distance: can_place_cows(ordered, cows, distance)
    )
    if answer is None:
        raise ValueError(f"cannot place {cows} cows in {len(ordered)} stalls")
    return answer


def can_cut(trees: Sequence[int], needed: int, height: int) -> bool:
    """Whether a blade at ``height`` cuts at least ``needed`` metres of wood."""
    return sum(tree - height for tree in trees if tree > height) >= needed


def saw_height(trees: Sequence[int], needed: int) -> int:
    """The highest blade setting that still yields ``needed`` metres of wood."""
    if not trees:
        raise ValueError("no trees to cut")
    answer = _largest(0, max(trees), lambda height: can_cut(trees, needed, height))
    if answer is None:
        raise ValueError(f"the trees hold less than {needed} metres of wood")
    return answer


def prata_time(rank: int, count: int) -> int:
    """Minutes a cook of ``rank`` takes for ``count`` pratas: rank, 2*rank, 3*rank, ..."""
    return rank * count * (count + 1) // 2


def can_cook(ranks: Sequence[int], count: int, limit: int) -> bool:
    """Whether the cooks together make ``count`` pratas within ``limit`` minutes."""
    cooked = 0
    for rank in ranks:
        step = 1
        spent = 0
        while spent + step * rank <= limit:
            cooked += 1
            spent += step * rank
            step += 1
        if cooked >= count:
            return True
    return False


def min_cooking_time(ranks: Sequence[int], count: int) -> int:
    """The least time in which the cooks can make ``count`` pratas."""
    if not ranks:
        raise ValueError("no cooks")
    if any(rank < 1 for rank in ranks):
        raise ValueError("every rank must be positive")
    return _smallest(
        0, prata_time(ranks[-1], count), lambda limit: can_cook(ranks, count, limit)
    )
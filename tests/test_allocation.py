import pytest

from algodrills.allocation import (
    can_allocate_books,
    can_cook,
    can_cut,
    can_paint,
    can_place_cows,
    max_min_distance,
    min_cooking_time,
    min_pages,
    min_painting_time,
    prata_time,
    saw_height,
)


def test_min_pages_worked_example():
    assert min_pages([12, 34, 67, 90], 2) == 113


@pytest.mark.parametrize(
    "pages, students",
    [([12, 34, 67, 90], 2), ([12, 34, 67, 90], 3), ([5, 17, 100, 11], 2), ([10, 20, 30], 1)],
)
def test_min_pages_is_tightest_feasible(pages, students):
    result = min_pages(pages, students)
    assert can_allocate_books(pages, students, result)
    assert not can_allocate_books(pages, students, result - 1)
    assert max(pages) <= result <= sum(pages)


def test_min_pages_one_student_reads_everything():
    pages = [12, 34, 67, 90]
    assert min_pages(pages, 1) == sum(pages)


def test_min_pages_one_book_each():
    pages = [12, 34, 67, 90]
    assert min_pages(pages, len(pages)) == max(pages)


@pytest.mark.parametrize("students", [0, 5])
def test_min_pages_rejects_bad_student_count(students):
    with pytest.raises(ValueError):
        min_pages([12, 34, 67, 90], students)


def test_can_allocate_books_rejects_oversized_book():
    assert not can_allocate_books([12, 34, 67, 90], 4, 89)
    assert can_allocate_books([12, 34, 67, 90], 4, 90)


@pytest.mark.parametrize("boards, painters", [([10, 20, 30, 40], 2), ([5, 5, 5, 5], 3)])
def test_min_painting_time_is_tightest_feasible(boards, painters):
    result = min_painting_time(boards, painters)
    assert can_paint(boards, painters, result)
    assert not can_paint(boards, painters, result - 1)


def test_min_painting_time_extremes():
    boards = [10, 20, 30, 40]
    assert min_painting_time(boards, 1) == sum(boards)
    assert min_painting_time(boards, 10) == max(boards)


def test_min_painting_time_rejects_no_painters():
    with pytest.raises(ValueError):
        min_painting_time([10, 20], 0)


def test_max_min_distance_worked_example():
    assert max_min_distance([1, 2, 4, 8, 9], 3) == 3


@pytest.mark.parametrize("stalls, cows", [([1, 2, 4, 8, 9], 3), ([9, 1, 8, 4, 2], 2), ([0, 3, 4, 7, 10, 9], 4)])
def test_max_min_distance_is_tightest_feasible(stalls, cows):
    ordered = sorted(stalls)
    result = max_min_distance(stalls, cows)
    assert can_place_cows(ordered, cows, result)
    assert not can_place_cows(ordered, cows, result + 1)


def test_two_cows_span_the_stalls():
    stalls = [9, 1, 8, 4, 2]
    assert max_min_distance(stalls, 2) == max(stalls) - min(stalls)


def test_max_min_distance_errors():
    with pytest.raises(ValueError):
        max_min_distance([], 2)
    with pytest.raises(ValueError):
        max_min_distance([1, 2], 3)


def test_saw_height_worked_example():
    assert saw_height([20, 15, 10, 17], 7) == 15


@pytest.mark.parametrize("trees, needed", [([20, 15, 10, 17], 7), ([4, 42, 40, 26, 46], 20)])
def test_saw_height_is_tightest_feasible(trees, needed):
    result = saw_height(trees, needed)
    assert can_cut(trees, needed, result)
    assert not can_cut(trees, needed, result + 1)


def test_saw_height_needing_nothing_is_tallest_tree():
    trees = [20, 15, 10, 17]
    assert saw_height(trees, 0) == max(trees)


def test_saw_height_errors():
    with pytest.raises(ValueError):
        saw_height([], 1)
    with pytest.raises(ValueError):
        saw_height([2, 3], sum([2, 3]) + 1)


def test_prata_time_scales_with_rank():
    for count in range(1, 9):
        assert prata_time(4, count) == 4 * prata_time(1, count)
        assert prata_time(1, count) - prata_time(1, count - 1) == count


@pytest.mark.parametrize(
    "ranks, count",
    [([1, 2, 3, 4], 10), ([1], 8), ([1, 1, 1, 1, 1, 1, 1, 1], 8)],
)
def test_min_cooking_time_is_tightest_feasible(ranks, count):
    result = min_cooking_time(ranks, count)
    assert can_cook(ranks, count, result)
    assert result == 0 or not can_cook(ranks, count, result - 1)


def test_single_cook_takes_full_prata_time():
    assert min_cooking_time([3], 6) == prata_time(3, 6)


def test_min_cooking_time_errors():
    with pytest.raises(ValueError):
        min_cooking_time([], 3)
    with pytest.raises(ValueError):
        min_cooking_time([1, 0], 3)
from collections import Counter

import pytest

from algodrills import array_problems as ap


def test_sort_colors_source_example():
    values = [2, 2, 0, 1, 1, 0, 2, 1, 0]
    result = ap.sort_colors(values)
    assert result == sorted(values)
    assert values == [2, 2, 0, 1, 1, 0, 2, 1, 0]


@pytest.mark.parametrize("values", [[], [1], [2, 0], [0, 0, 0], [2, 1, 0, 2, 1, 0, 1]])
def test_sort_colors_sorts(values):
    assert ap.sort_colors(values) == sorted(values)


def test_move_negatives_left_source_example():
    values = [-1, 3, 3, 6, 9, -1, -10, 10, -2, 0, -2, 2, -1]
    result = ap.move_negatives_left(values)
    assert Counter(result) == Counter(values)
    negatives = sum(1 for v in values if v < 0)
    assert all(v < 0 for v in result[:negatives])
    assert all(v >= 0 for v in result[negatives:])


def test_move_negatives_left_empty():
    assert ap.move_negatives_left([]) == []


def test_find_duplicate_by_marking_source_example():
    values = [1, 3, 4, 2, 4]
    assert ap.find_duplicate_by_marking(values) == 4
    assert values == [1, 3, 4, 2, 4]


def test_find_duplicate_by_placement_source_example():
    assert ap.find_duplicate_by_placement([1, 3, 4, 2, 4]) == 4


@pytest.mark.parametrize("values", [[1, 1], [2, 1, 2], [3, 1, 3, 4, 2], [1, 4, 4, 2, 4]])
def test_duplicate_methods_agree(values):
    expected = next(v for v, c in Counter(values).items() if c > 1)
    assert ap.find_duplicate_by_marking(values) == expected
    assert ap.find_duplicate_by_placement(values) == expected


@pytest.mark.parametrize("values", [[1, 3, 5, 3, 4], [3, 3, 3, 3, 3], [1, 2, 3], [2, 2]])
def test_missing_methods_agree(values):
    by_marking = ap.missing_by_marking(values)
    by_placement = ap.missing_by_placement(values)
    assert by_marking == by_placement
    assert set(by_marking).isdisjoint(values)
    assert set(by_marking) | set(values) == set(range(1, len(values) + 1))


def test_missing_leaves_input_untouched():
    values = [3, 3, 3, 3, 3]
    ap.missing_by_marking(values)
    ap.missing_by_placement(values)
    assert values == [3, 3, 3, 3, 3]


def test_first_repeating_source_example():
    assert ap.first_repeating([1, 5, 3, 4, 3, 5, 6]) == 5


def test_first_repeating_none_when_unique():
    assert ap.first_repeating([4, 2, 9]) is None


def test_common_elements_source_example():
    first = [1, 5, 10, 20, 40, 80]
    second = [6, 7, 20, 80, 100]
    third = [3, 4, 15, 20, 30, 70, 80, 120]
    assert ap.common_elements(first, second, third) == [20, 80]


def test_common_elements_removes_repeats():
    values = [30, 30, 30, 100, 1000]
    assert ap.common_elements(values, values, values) == sorted(set(values))


def test_common_elements_disjoint():
    assert ap.common_elements([1, 2], [3, 4], [5, 6]) == []
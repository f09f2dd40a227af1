import pytest

from algodrills import pyramids

SIZES = [1, 2, 3, 5, 7]


@pytest.mark.parametrize("n", SIZES)
def test_rectangle_rows(n):
    rows = pyramids.rectangle(n)
    assert len(rows) == n
    assert all(row.count("*") == n for row in rows)
    assert len(set(rows)) == 1


@pytest.mark.parametrize("n", [3, 5, 6])
def test_hollow_rectangle_border(n):
    rows = pyramids.hollow_rectangle(n)
    solid = pyramids.rectangle(n)
    assert rows[0] == solid[0]
    assert rows[-1] == solid[-1]
    for row in rows[1:-1]:
        assert row.count("*") == 2
        assert len(row) == len(solid[0])


@pytest.mark.parametrize("n", SIZES)
def test_half_pyramid_mirrors_inverted(n):
    rows = pyramids.half_pyramid(n)
    assert [row.count("*") for row in rows] == list(range(1, n + 1))
    assert rows == list(reversed(pyramids.inverted_half_pyramid(n)))


def test_half_pyramid_numbers_last_row():
    assert pyramids.half_pyramid_numbers(5)[-1].strip() == "1 2 3 4 5"


@pytest.mark.parametrize("n", SIZES)
def test_number_triangles_mirror(n):
    up = pyramids.half_pyramid_numbers(n)
    down = pyramids.inverted_half_pyramid_numbers(n)
    assert up == list(reversed(down))
    for i, row in enumerate(up):
        assert row.split()[0] == "1"
        assert len(row.split()) == i + 1


@pytest.mark.parametrize("n", SIZES)
def test_full_pyramids_star_counts(n):
    up = pyramids.full_pyramid(n)
    down = pyramids.inverted_full_pyramid(n)
    assert [row.count("*") for row in up] == list(range(1, n + 1))
    assert [row.count("*") for row in down] == list(range(n, 0, -1))
    assert up[-1] == down[0]


@pytest.mark.parametrize("n", SIZES)
def test_palindrome_pyramid_rows_are_palindromes(n):
    for i, row in enumerate(pyramids.palindrome_pyramid(n)):
        tokens = row.split()
        assert tokens == tokens[::-1]
        assert max(int(t) for t in tokens) == i + 1
        assert len(tokens) == 2 * i + 1


def test_palindrome_pyramid_last_row():
    assert pyramids.palindrome_pyramid(5)[-1] == "1 2 3 4 5 4 3 2 1 "


@pytest.mark.parametrize("n", SIZES)
def test_shifted_palindrome_pyramid(n):
    for i, row in enumerate(pyramids.shifted_palindrome_pyramid(n)):
        tokens = [int(t) for t in row.split()]
        assert tokens == tokens[::-1]
        assert tokens[0] == i + 1
        assert tokens[i] == 2 * i + 1


def test_shifted_palindrome_pyramid_last_row():
    assert pyramids.shifted_palindrome_pyramid(5)[-1].strip() == "5 6 7 8 9 8 7 6 5"


@pytest.mark.parametrize("n", [3, 5, 6])
def test_hollow_number_pyramid(n):
    rows = pyramids.hollow_number_pyramid(n)
    assert rows[-1].split() == [str(v) for v in range(1, n + 1)]
    assert rows[0].split() == ["1"]
    for i, row in enumerate(rows[1:-1], start=1):
        assert row.split() == ["1", str(i + 1)]
        assert row.startswith(" " * (n - 1 - i) + "1")


@pytest.mark.parametrize("n", [3, 5, 6])
def test_hollow_inverted_half_pyramid(n):
    rows = pyramids.hollow_inverted_half_pyramid(n)
    assert rows[0].count("*") == n
    assert rows[-1].count("*") == 1
    assert all(row.count("*") == 2 for row in rows[1:-1])


@pytest.mark.parametrize("n", [3, 5, 6])
def test_hollow_inverted_full_pyramid(n):
    rows = pyramids.hollow_inverted_full_pyramid(n)
    assert rows[-1].count("*") == n
    assert rows[0].count("*") == 1
    assert all(row.count("*") == 2 for row in rows[1:-1])
    for i, row in enumerate(rows):
        assert len(row) - len(row.lstrip(" ")) == n - 1 - i


@pytest.mark.parametrize(
    "builder",
    [
        pyramids.rectangle,
        pyramids.hollow_rectangle,
        pyramids.full_pyramid,
        pyramids.palindrome_pyramid,
        pyramids.hollow_number_pyramid,
        pyramids.hollow_inverted_full_pyramid,
    ],
)
def test_zero_size_yields_no_rows(builder):
    assert builder(0) == []
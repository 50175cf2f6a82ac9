import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.grids import flood_fill, knight_distance, parse_square, spread_time

FILES = "abcdefgh"
RANKS = "12345678"
squares = st.builds(lambda f, r: f + r, st.sampled_from(FILES), st.sampled_from(RANKS))


def test_flood_fill_worked_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_leaves_input_untouched():
    image = [[1, 1], [0, 1]]
    flood_fill(image, 0, 0, 5)
    assert image == [[1, 1], [0, 1]]


def test_flood_fill_same_colour_is_unchanged():
    image = [[3, 3], [3, 4]]
    assert flood_fill(image, 0, 0, 3) == image


@pytest.mark.parametrize("sr, sc", [(-1, 0), (0, -1), (2, 0), (0, 2)])
def test_flood_fill_rejects_outside_start(sr, sc):
    with pytest.raises(ValueError):
        flood_fill([[1, 1], [1, 1]], sr, sc, 2)


@given(
    st.lists(
        st.lists(st.integers(0, 2), min_size=3, max_size=3), min_size=1, max_size=4
    ),
    st.integers(3, 5),
)
def test_flood_fill_only_touches_initial_colour(image, new_color):
    initial = image[0][0]
    filled = flood_fill(image, 0, 0, new_color)
    assert filled[0][0] == new_color
    for row, new_row in zip(image, filled):
        for old, new in zip(row, new_row):
            if old != initial:
                assert new == old
            else:
                assert new in (old, new_color)


def test_spread_time_uniform_grid_is_zero():
    assert spread_time([[4, 4], [4, 4]]) == 0


def test_spread_time_empty_grid_is_zero():
    assert spread_time([]) == 0


def test_spread_time_rejects_ragged_grid():
    with pytest.raises(ValueError):
        spread_time([[1, 2], [3]])


@given(st.integers(1, 12), st.data())
def test_spread_time_single_row(length, data):
    peak = data.draw(st.integers(0, length - 1))
    row = [1] * length
    row[peak] = 9
    assert spread_time([row]) == max(peak, length - 1 - peak)


@given(st.integers(1, 6), st.integers(1, 6))
def test_spread_time_from_corner_is_longest_side(rows, cols):
    grid = [[0] * cols for _ in range(rows)]
    grid[0][0] = 1
    assert spread_time(grid) == max(rows, cols) - 1


def test_parse_square_corners():
    assert parse_square("a1") == (0, 0)
    assert parse_square("h8") == (7, 7)


@pytest.mark.parametrize("square", ["", "a", "i1", "a9", "a0", "A1", "a10"])
def test_parse_square_rejects_bad_input(square):
    with pytest.raises(ValueError):
        parse_square(square)


def test_knight_distance_same_square_is_zero():
    assert knight_distance("d4", "d4") == 0


def test_knight_distance_single_move():
    assert knight_distance("a1", "b3") == 1
    assert knight_distance("g1", "f3") == 1


@given(squares, squares)
def test_knight_distance_is_symmetric(a, b):
    assert knight_distance(a, b) == knight_distance(b, a)


@given(squares, squares)
def test_knight_distance_parity_follows_square_colour(a, b):
    ax, ay = parse_square(a)
    bx, by = parse_square(b)
    assert knight_distance(a, b) % 2 == (ax + ay + bx + by) % 2


@given(squares, squares, squares)
def test_knight_distance_triangle_inequality(a, b, c):
    assert knight_distance(a, c) <= knight_distance(a, b) + knight_distance(b, c)


def test_knight_distance_rejects_bad_square():
    with pytest.raises(ValueError):
        knight_distance("a1", "z9")
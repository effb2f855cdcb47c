"""Tests for adjacency, sampling and point arithmetic."""

import pytest

from mazegen.domain.geometry import (
    add, ceil_half, half, is_dead_end, is_passage, make_even, make_even_point,
    make_odd, middle, next_point, opposite, random_index, random_point,
    shuffled_directions, subtract, times_two, two_steps,
)
from mazegen.domain.types import Cell, Direction, DIRECTIONS, Maze, Point, PointDiff
from mazegen.utils.rng import SeededRNG

from .helpers import maze_from_rows


def test_next_point_inside_grid():
    p = Point(1, 1)
    assert next_point(p, Direction.NORTH, 3, 3) == Point(1, 0)
    assert next_point(p, Direction.SOUTH, 3, 3) == Point(1, 2)
    assert next_point(p, Direction.EAST, 3, 3) == Point(2, 1)
    assert next_point(p, Direction.WEST, 3, 3) == Point(0, 1)


def test_next_point_returns_none_exactly_at_edges():
    width, height = 4, 3
    for x in range(width):
        for y in range(height):
            p = Point(x, y)
            assert (next_point(p, Direction.NORTH, width, height) is None) == (y == 0)
            assert (next_point(p, Direction.SOUTH, width, height) is None) == (y == height - 1)
            assert (next_point(p, Direction.WEST, width, height) is None) == (x == 0)
            assert (next_point(p, Direction.EAST, width, height) is None) == (x == width - 1)
            for direction in DIRECTIONS:
                nxt = next_point(p, direction, width, height)
                if nxt is not None:
                    assert 0 <= nxt.x < width and 0 <= nxt.y < height


def test_next_point_rejects_invalid_direction():
    with pytest.raises(ValueError):
        next_point(Point(0, 0), "up", 3, 3)


def test_two_steps():
    assert two_steps(Point(0, 0), Direction.EAST, 3, 1) == Point(2, 0)
    assert two_steps(Point(0, 0), Direction.EAST, 2, 1) is None
    assert two_steps(Point(0, 0), Direction.NORTH, 3, 3) is None


def test_opposite():
    assert opposite(Direction.NORTH) == Direction.SOUTH
    assert opposite(Direction.WEST) == Direction.EAST
    with pytest.raises(ValueError):
        opposite("north")


def test_shuffled_directions_is_a_permutation(rng):
    for _ in range(20):
        directions = shuffled_directions(rng)
        assert sorted(directions, key=lambda d: d.value) == sorted(DIRECTIONS, key=lambda d: d.value)


def test_shuffled_directions_is_reproducible():
    assert shuffled_directions(SeededRNG(7)) == shuffled_directions(SeededRNG(7))


def test_random_point_and_index_stay_in_range(rng):
    for _ in range(200):
        p = random_point(5, 3, rng)
        assert 0 <= p.x < 5 and 0 <= p.y < 3
        assert 0 <= random_index(4, rng) <= 4
    assert random_index(0, rng) == 0


def test_random_index_reaches_limit(rng):
    seen = {random_index(2, rng) for _ in range(200)}
    assert seen == {0, 1, 2}


@pytest.mark.parametrize("rows,point,expected", [
    # no passage neighbors
    (["XXX", "X X", "XXX"], Point(1, 1), False),
    # one
    (["X X", "X X", "XXX"], Point(1, 1), True),
    # two
    (["X X", "X  ", "XXX"], Point(1, 1), False),
    # three
    (["X X", "   ", "XXX"], Point(1, 1), False),
    # four
    (["X X", "   ", "X X"], Point(1, 1), False),
    # a wall cell with a single passage neighbor still counts
    (["X X", "XXX", "XXX"], Point(1, 1), True),
    # corner with one in-bounds passage neighbor
    (["  X", "XXX", "XXX"], Point(0, 0), True),
])
def test_is_dead_end(rows, point, expected):
    assert is_dead_end(maze_from_rows(rows), point) is expected


def test_is_passage():
    maze = Maze(2, 1)
    maze.set(Point(1, 0), Cell.PASSAGE)
    assert is_passage(maze, Point(1, 0))
    assert not is_passage(maze, Point(0, 0))


def test_make_even_and_make_odd():
    assert make_even(4, 10) == 4
    assert make_even(3, 10) == 4
    assert make_even(9, 9) == 8
    assert make_odd(3, 10) == 3
    assert make_odd(4, 10) == 5
    assert make_odd(4, 4) == 3


def test_make_even_point_stays_inside_grid():
    assert make_even_point(Point(1, 3), 5, 5) == Point(2, 4)
    assert make_even_point(Point(3, 1), 4, 2) == Point(2, 0)
    assert make_even_point(Point(0, 0), 1, 1) == Point(0, 0)
    for x in range(6):
        for y in range(6):
            p = make_even_point(Point(x, y), 6, 6)
            assert p.x % 2 == 0 and p.y % 2 == 0
            assert p.x < 6 and p.y < 6


def test_point_arithmetic():
    assert add(Point(1, 2), Point(3, 4)) == Point(4, 6)
    assert subtract(Point(0, 4), Point(2, 0)) == PointDiff(-2, 4)
    assert add(Point(2, 0), PointDiff(-1, 1)) == Point(1, 1)
    assert half(Point(5, 4)) == Point(2, 2)
    assert half(PointDiff(-2, 3)) == PointDiff(-1, 1)
    assert half(PointDiff(-3, 0)) == PointDiff(-1, 0)
    assert times_two(Point(2, 3)) == Point(4, 6)


def test_middle():
    assert middle(Point(2, 2), Point(4, 2)) == Point(3, 2)
    assert middle(Point(2, 2), Point(0, 2)) == Point(1, 2)
    assert middle(Point(2, 2), Point(2, 0)) == Point(2, 1)


@pytest.mark.parametrize("size,expected", [(1, 1), (2, 1), (3, 2), (4, 2), (5, 3)])
def test_ceil_half(size, expected):
    assert ceil_half(size) == expected

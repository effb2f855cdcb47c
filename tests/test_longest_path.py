"""Tests for the longest path (tree diameter) search."""

import time

import pytest

from mazegen.domain.generators import generate_maze
from mazegen.domain.geometry import is_dead_end
from mazegen.domain.longest_path import (
    find_dead_ends, longest_path, longest_path_from_leaves, mark_solution,
)
from mazegen.domain.types import ALGORITHM_IDS, Cell, Maze, Point
from mazegen.utils.rng import SeededRNG

from .helpers import brute_force_diameter, maze_from_rows

T_MAZE = [
    "     ",
    "XX XX",
    "XX XX",
]


def _is_connected_path(path):
    return all(abs(a.x - b.x) + abs(a.y - b.y) == 1 for a, b in zip(path, path[1:]))


def test_longest_path_follows_corridor():
    maze = maze_from_rows(["   X", "XX X", "XX  "])
    path = longest_path(maze, Point(0, 0))
    assert path == [
        Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1), Point(2, 2), Point(3, 2)
    ]


def test_longest_path_picks_farthest_dead_end():
    maze = maze_from_rows(T_MAZE)
    path = longest_path(maze, Point(2, 2))
    assert len(path) == 5
    assert path[0] == Point(2, 2)
    assert path[-1] in (Point(0, 0), Point(4, 0))
    assert _is_connected_path(path)


def test_longest_path_ties_keep_first_found():
    maze = maze_from_rows(T_MAZE)
    # Every arm from the junction is two steps long; south is searched first
    path = longest_path(maze, Point(2, 0))
    assert path == [Point(2, 0), Point(2, 1), Point(2, 2)]


def test_longest_path_from_a_middle_cell_explores_every_direction():
    maze = maze_from_rows([
        "X X",
        "   ",
        "X X",
    ])
    path = longest_path(maze, Point(1, 1))
    assert len(path) == 2
    assert path == [Point(1, 1), Point(1, 0)]


def test_longest_path_from_wall_is_empty():
    maze = maze_from_rows(["X "])
    assert longest_path(maze, Point(0, 0)) == []


def test_longest_path_from_outside_grid_is_empty():
    maze = maze_from_rows(["  "])
    assert longest_path(maze, Point(5, 5)) == []


def test_isolated_cell_path_is_itself():
    maze = maze_from_rows(["X X", "XX ", "   "])
    assert longest_path(maze, Point(1, 0)) == [Point(1, 0)]


def test_longest_path_terminates_on_loops():
    maze = maze_from_rows([
        "   ",
        " X ",
        "   ",
    ])
    path = longest_path(maze, Point(0, 0))
    # No dead ends on a ring, so only the start is recorded
    assert path == [Point(0, 0)]


def test_find_dead_ends():
    maze = maze_from_rows(T_MAZE)
    assert find_dead_ends(maze) == [Point(0, 0), Point(4, 0), Point(2, 2)]


def test_longest_path_from_leaves_on_t_maze():
    maze = maze_from_rows(T_MAZE)
    # All three leaf-to-leaf paths tie at five cells; at the junction south
    # is searched before east, so the first leaf reaches the stem first
    path = longest_path_from_leaves(maze)
    assert path == [Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 1), Point(2, 2)]
    assert is_dead_end(maze, path[0]) and is_dead_end(maze, path[-1])


def test_longest_path_enters_each_cell_once_on_loops():
    maze = maze_from_rows([
        "    ",
        " XX ",
        "    ",
        "X X ",
    ])
    # The ring is walked once; the far spur is then reached
    # directly rather than the long way round
    path = longest_path(maze, Point(1, 3))
    assert path == [Point(1, 3), Point(1, 2), Point(2, 2), Point(3, 2), Point(3, 3)]


@pytest.mark.parametrize("width,height", [(24, 24), (30, 20), (40, 41)])
def test_longest_path_is_fast_on_even_sized_division_mazes(width, height):
    maze = generate_maze("division", width, height, rng=SeededRNG(1))
    started = time.perf_counter()
    path = longest_path_from_leaves(maze)
    assert time.perf_counter() - started < 10.0
    assert path
    assert len(set(path)) == len(path)
    assert _is_connected_path(path)


def test_longest_path_from_leaves_on_empty_maze():
    assert longest_path_from_leaves(Maze(3, 3)) == []


def test_longest_path_from_leaves_on_single_cell():
    maze = Maze(1, 1, Cell.PASSAGE)
    assert longest_path_from_leaves(maze) == [Point(0, 0)]


@pytest.mark.parametrize("algorithm", ALGORITHM_IDS)
@pytest.mark.parametrize("seed", [3, 17])
def test_diameter_matches_brute_force(algorithm, seed):
    maze = generate_maze(algorithm, 11, 9, rng=SeededRNG(seed))
    path = longest_path_from_leaves(maze)
    assert len(path) == brute_force_diameter(maze)
    assert _is_connected_path(path)
    assert len(set(path)) == len(path)
    assert is_dead_end(maze, path[0]) and is_dead_end(maze, path[-1])


@pytest.mark.parametrize("algorithm", ALGORITHM_IDS)
@pytest.mark.parametrize("seed", [5, 8])
def test_diameter_is_symmetric(algorithm, seed):
    maze = generate_maze(algorithm, 15, 11, rng=SeededRNG(seed))
    path = longest_path_from_leaves(maze)
    assert len(longest_path(maze, path[0])) == len(path)
    assert len(longest_path(maze, path[-1])) == len(path)


def test_mark_solution():
    maze = maze_from_rows(T_MAZE)
    mark_solution(maze, [Point(0, 0), Point(1, 0)])
    assert maze.start() == Point(0, 0)
    assert maze.end() == Point(1, 0)
    mark_solution(maze, [])
    assert maze.end() == Point(1, 0)

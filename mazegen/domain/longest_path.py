"""Longest path (tree diameter) search over generated mazes."""

import logging
from typing import Iterator, List, Optional, Set, Tuple

from .geometry import is_dead_end, next_point
from .types import Cell, Direction, DIRECTIONS, Maze, Point

logger = logging.getLogger(__name__)


def _exits(maze: Maze, at: Point, entry: Optional[Direction],
           visited: Set[Point]) -> Iterator[Tuple[Point, Direction]]:
    """Yield passage neighbors of ``at`` the search has not reached yet."""
    for direction in DIRECTIONS:
        if direction == entry:
            continue
        nxt = next_point(at, direction, maze.width, maze.height)
        if nxt is None or nxt in visited or maze.get(nxt) == Cell.WALL:
            continue
        yield nxt, direction.opposite


def longest_path(maze: Maze, start: Point) -> List[Point]:
    """
    Find the longest path through passages beginning at ``start``.

    Depth-first search that records the current path whenever it reaches a
    dead end farther away than anything seen so far; ties keep the path found
    first. A lone passage cell yields ``[start]``.

    Each cell is entered at most once per search. On a tree that is every
    simple path from ``start``; on a maze with loops the search stays linear
    in the number of cells and reports the farthest dead end along its own
    search tree.

    Returns:
        Ordered list of points from ``start`` to the farthest dead end, or an
        empty list if ``start`` is out of bounds or a wall.
    """
    if not maze.in_bounds(start) or maze.get(start) == Cell.WALL:
        return []

    best = [start]
    path = [start]
    visited = {start}
    stack = [_exits(maze, start, None, visited)]

    while stack:
        step = next(stack[-1], None)
        if step is None:
            stack.pop()
            path.pop()
            continue

        at, entry = step
        path.append(at)
        visited.add(at)
        if len(path) > len(best) and is_dead_end(maze, at):
            best = list(path)
        stack.append(_exits(maze, at, entry, visited))

    return best


def find_dead_ends(maze: Maze) -> List[Point]:
    """All passage cells with exactly one passage neighbor, row-major."""
    return [p for p in maze.passages() if is_dead_end(maze, p)]


def longest_path_from_leaves(maze: Maze) -> List[Point]:
    """
    Find the diameter of the maze by searching from every dead end.
    Falls back to the first passage cell when the maze has no dead ends.
    """
    leaves = find_dead_ends(maze)
    if not leaves:
        first = next(maze.passages(), None)
        return [] if first is None else longest_path(maze, first)

    best: List[Point] = []
    for leaf in leaves:
        candidate = longest_path(maze, leaf)
        if len(candidate) > len(best):
            best = candidate

    logger.debug("Longest path of %d cells from %d dead ends", len(best), len(leaves))
    return best


def mark_solution(maze: Maze, path: List[Point]) -> None:
    """Set the maze start and end to the two ends of ``path``."""
    if not path:
        return
    maze.set_start(path[0])
    maze.set_end(path[-1])

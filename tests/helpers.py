"""Helpers shared by the maze generator tests."""

from collections import deque
from typing import Dict, List

from mazegen.domain.geometry import passage_neighbors
from mazegen.domain.types import Maze, Point
from mazegen.utils.display import parse_maze


def maze_from_rows(rows: List[str]) -> Maze:
    """Build a maze from rows of 'X' (wall) and ' ' (passage)."""
    return parse_maze("\n".join(rows) + "\n")


def distances_from(maze: Maze, start: Point) -> Dict[Point, int]:
    """Breadth-first distance in steps from ``start`` to every reachable passage."""
    distance = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in passage_neighbors(maze, current):
            if neighbor not in distance:
                distance[neighbor] = distance[current] + 1
                queue.append(neighbor)
    return distance


def brute_force_diameter(maze: Maze) -> int:
    """Number of cells on the longest shortest path between any two passages."""
    best = 0
    for p in maze.passages():
        best = max(best, max(distances_from(maze, p).values()) + 1)
    return best

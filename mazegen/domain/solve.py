"""Point-to-point maze solving."""

from collections import deque
from typing import Dict, List, Optional

from .geometry import passage_neighbors
from .types import Cell, Maze, Point


def solve(maze: Maze, start: Optional[Point] = None,
          end: Optional[Point] = None) -> List[Point]:
    """
    Find the shortest path from start to end using breadth-first search.

    Args:
        maze: Maze to solve
        start: Start point (maze start if None)
        end: End point (maze end if None)

    Returns:
        Ordered list of points from start to end, or an empty list if either
        endpoint is a wall or the end cannot be reached.
    """
    start = maze.start() if start is None else start
    end = maze.end() if end is None else end
    if maze.get(start) == Cell.WALL or maze.get(end) == Cell.WALL:
        return []

    parent: Dict[Point, Optional[Point]] = {start: None}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == end:
            return _reconstruct_path(parent, end)

        for neighbor in passage_neighbors(maze, current):
            if neighbor not in parent:
                parent[neighbor] = current
                queue.append(neighbor)

    return []


def _reconstruct_path(parent: Dict[Point, Optional[Point]], end: Point) -> List[Point]:
    path = []
    node: Optional[Point] = end
    while node is not None:
        path.append(node)
        node = parent[node]
    return list(reversed(path))

"""Maze factory for generating, solving and checking mazes."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.generators import generate_maze
from ..domain.geometry import next_point
from ..domain.graph import connected_components, passage_graph
from ..domain.longest_path import longest_path_from_leaves, mark_solution
from ..domain.types import Cell, Direction, GenerationConfig, Maze, Point
from .rng import SeededRNG

logger = logging.getLogger(__name__)


@dataclass
class MazeResult:
    """A generated maze and, when requested, its longest path."""
    maze: Maze
    solution: List[Point] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return len(self.solution) > 0


def create_maze(config: GenerationConfig, rng: Optional[SeededRNG] = None) -> MazeResult:
    """
    Generate a maze from a configuration.

    Args:
        config: Generation settings
        rng: Random number generator (a new one seeded from config.seed if None)

    Returns:
        MazeResult with the maze and, if config.solve is set, its diameter path

    Raises:
        ValueError: If the configuration is invalid
    """
    config.validate()
    if rng is None:
        rng = SeededRNG(config.seed)

    maze = generate_maze(config.algorithm, config.width, config.height,
                         start=config.start, rng=rng)

    solution: List[Point] = []
    if config.solve:
        solution = longest_path_from_leaves(maze)
        # Backtracking already placed its own start and end
        if config.algorithm != "backtracking":
            mark_solution(maze, solution)

    logger.debug("Created %s maze %dx%d (seed=%s, solution=%d cells)",
                 config.algorithm, config.width, config.height,
                 rng.seed, len(solution))
    return MazeResult(maze=maze, solution=solution)


def count_passage_edges(maze: Maze) -> int:
    """Number of adjacent passage pairs in the maze."""
    count = 0
    for p in maze.passages():
        for direction in (Direction.EAST, Direction.SOUTH):
            nxt = next_point(p, direction, maze.width, maze.height)
            if nxt is not None and maze.get(nxt) == Cell.PASSAGE:
                count += 1
    return count


def is_spanning_tree(maze: Maze) -> bool:
    """
    Check that the passages form one connected component without cycles.
    An empty maze is not a tree.
    """
    cells = maze.passage_count()
    if cells == 0:
        return False
    components = connected_components(passage_graph(maze))
    return len(components) == 1 and count_passage_edges(maze) == cells - 1

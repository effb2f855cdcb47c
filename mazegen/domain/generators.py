"""Randomized spanning-tree maze generation algorithms."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from .disjoint_set import DisjointSet
from .geometry import (
    add, ceil_half, make_even, make_even_point, make_odd, middle, next_point,
    random_index, random_point, shuffled_directions, subtract, times_two, two_steps,
)
from .longest_path import longest_path
from .types import AlgorithmId, Cell, Direction, DIRECTIONS, Edge, Maze, Point
from ..utils.rng import SeededRNG, resolve_rng

logger = logging.getLogger(__name__)


def _carve(maze: Maze, *points: Point) -> None:
    for p in points:
        maze.set(p, Cell.PASSAGE)


# --- Aldous-Broder ---------------------------------------------------------

def _random_neighbor(p: Point, width: int, height: int, rng: SeededRNG) -> Point:
    """Pick a random cell two steps from ``p`` in a single direction."""
    for direction in shuffled_directions(rng):
        far = two_steps(p, direction, width, height)
        if far is not None:
            return far
    raise RuntimeError(f"No cell two steps away from {p} in a {width}x{height} maze")


def generate_aldous_broder(width: int, height: int,
                           rng: Optional[SeededRNG] = None) -> Maze:
    """
    Generate a maze with the Aldous-Broder uniform spanning tree algorithm.

    Random walk over the even lattice that carves into every cell it reaches
    for the first time. Slow, but every spanning tree is equally likely.
    """
    rng = resolve_rng(rng)
    maze = Maze(width, height, Cell.WALL)
    current = make_even_point(random_point(width, height, rng), width, height)
    maze.set(current, Cell.PASSAGE)
    remaining = ceil_half(width) * ceil_half(height) - 1
    steps = 0

    while remaining:
        neighbor = _random_neighbor(current, width, height, rng)
        if maze.get(neighbor) == Cell.WALL:
            _carve(maze, neighbor, middle(current, neighbor))
            remaining -= 1
        current = neighbor
        steps += 1

    logger.debug("Aldous-Broder %dx%d finished after %d steps", width, height, steps)
    return maze


# --- Kruskal ---------------------------------------------------------------

def generate_all_edges(width: int, height: int) -> List[Edge]:
    """Every edge between adjacent cells, once from each endpoint."""
    edges = []
    for x in range(width):
        for y in range(height):
            at = Point(x, y)
            for direction in DIRECTIONS:
                nxt = next_point(at, direction, width, height)
                if nxt is not None:
                    edges.append(Edge(at, nxt))
    return edges


def do_kruskal(edges: List[Edge], width: int, height: int) -> List[Edge]:
    """
    Run Kruskal's algorithm over ``edges`` in the given order.
    Returns the accepted edges in acceptance order.
    """
    groups: DisjointSet[Point] = DisjointSet()
    for x in range(width):
        for y in range(height):
            groups.make_set(Point(x, y))

    accepted = []
    for edge in edges:
        if groups.find_set(edge.a) != groups.find_set(edge.b):
            accepted.append(edge)
            groups.merge(edge.a, edge.b)
    return accepted


def kruskal_edges(width: int, height: int,
                  rng: Optional[SeededRNG] = None) -> List[Edge]:
    """Spanning tree of a ``width`` x ``height`` lattice with random edge order."""
    edges = generate_all_edges(width, height)
    resolve_rng(rng).shuffle(edges)
    return do_kruskal(edges, width, height)


def translate_to_maze(edges: List[Edge], width: int, height: int) -> Maze:
    """Carve lattice edges into a full resolution maze."""
    maze = Maze(width, height, Cell.WALL)
    for edge in edges:
        a = times_two(edge.a)
        _carve(maze, a, times_two(edge.b), add(a, subtract(edge.b, edge.a)))
    return maze


def generate_kruskal(width: int, height: int,
                     rng: Optional[SeededRNG] = None) -> Maze:
    """
    Generate a maze with a randomized Kruskal's minimum spanning tree.
    Odd dimensions fill the whole grid.
    """
    half_width, half_height = ceil_half(width), ceil_half(height)
    edges = kruskal_edges(half_width, half_height, rng)
    maze = translate_to_maze(edges, width, height)
    # A single lattice cell has no edges to carve it
    maze.set(Point(0, 0), Cell.PASSAGE)
    logger.debug("Kruskal %dx%d accepted %d edges", width, height, len(edges))
    return maze


# --- Prim ------------------------------------------------------------------

def edges_from(at: Point, width: int, height: int) -> List[Edge]:
    """Edges from ``at`` to every cell two steps away."""
    edges = []
    for direction in DIRECTIONS:
        far = two_steps(at, direction, width, height)
        if far is not None:
            edges.append(Edge(at, far))
    return edges


def do_prims(maze: Maze, start: Point, rng: Optional[SeededRNG] = None) -> None:
    """Grow a randomized Prim's tree over ``maze`` from the passage ``start``."""
    rng = resolve_rng(rng)
    frontier = edges_from(start, maze.width, maze.height)

    while frontier:
        edge = frontier.pop(random_index(len(frontier) - 1, rng))
        if maze.get(edge.b) == Cell.WALL:
            _carve(maze, edge.b, middle(edge.a, edge.b))
            frontier.extend(edges_from(edge.b, maze.width, maze.height))


def generate_prims(width: int, height: int,
                   rng: Optional[SeededRNG] = None) -> Maze:
    """Generate a maze with a randomized Prim's minimum spanning tree."""
    rng = resolve_rng(rng)
    start = make_even_point(random_point(width, height, rng), width, height)
    maze = Maze(width, height, Cell.WALL)
    maze.set(start, Cell.PASSAGE)
    do_prims(maze, start, rng)
    logger.debug("Prim's %dx%d grown from %s", width, height, start)
    return maze


# --- Recursive backtracking ------------------------------------------------

def do_recursive_backtrack(maze: Maze, start: Point,
                           rng: Optional[SeededRNG] = None) -> None:
    """
    Depth-first carving from ``start``.
    Each cell tries the four directions in a random order and descends into
    the first unvisited cell two steps away before trying the next.
    """
    rng = resolve_rng(rng)
    stack: List[Tuple[Point, Iterator[Direction]]] = [
        (start, iter(shuffled_directions(rng)))
    ]

    while stack:
        at, directions = stack[-1]
        direction = next(directions, None)
        if direction is None:
            stack.pop()
            continue

        between = next_point(at, direction, maze.width, maze.height)
        if between is None:
            continue
        nxt = next_point(between, direction, maze.width, maze.height)
        if nxt is None or maze.get(nxt) == Cell.PASSAGE:
            continue
        _carve(maze, between, nxt)
        stack.append((nxt, iter(shuffled_directions(rng))))


def generate_recursive_backtracking(width: int, height: int,
                                    start: Optional[Point] = None,
                                    rng: Optional[SeededRNG] = None) -> Maze:
    """
    Generate a maze by recursive backtracking from ``start``.

    The start is moved onto the even lattice. The maze end is set to the far
    end of the longest path from the start.
    """
    rng = resolve_rng(rng)
    if start is None:
        start = random_point(width, height, rng)
    elif not (0 <= start.x < width and 0 <= start.y < height):
        raise IndexError(f"Start {start} is outside the {width}x{height} maze")
    start = make_even_point(start, width, height)

    maze = Maze(width, height, Cell.WALL)
    maze.set_start(start)
    maze.set(start, Cell.PASSAGE)
    do_recursive_backtrack(maze, start, rng)

    solution = longest_path(maze, start)
    if solution:
        maze.set_end(solution[-1])
    logger.debug("Backtracking %dx%d from %s ends at %s", width, height, start, maze.end())
    return maze


# --- Recursive division ----------------------------------------------------

@dataclass(frozen=True)
class Chamber:
    """Rectangular region; both corners are inclusive passage cells."""
    top_left: Point
    bottom_right: Point


class WallDirection(Enum):
    """Which way a chamber is divided."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def opposite(self) -> "WallDirection":
        if self is WallDirection.HORIZONTAL:
            return WallDirection.VERTICAL
        return WallDirection.HORIZONTAL


def divide_horizontally(maze: Maze, chamber: Chamber,
                        rng: SeededRNG) -> Tuple[Chamber, Chamber]:
    """Split ``chamber`` with a horizontal wall on an odd row."""
    top, bottom = chamber.top_left, chamber.bottom_right
    split_y = make_odd(rng.randint(top.y + 1, bottom.y - 1), bottom.y - 1)
    for x in range(top.x, bottom.x + 1):
        maze.set(Point(x, split_y), Cell.WALL)

    opening_x = make_even(rng.randint(top.x, bottom.x), bottom.x)
    maze.set(Point(opening_x, split_y), Cell.PASSAGE)

    return (Chamber(top, Point(bottom.x, split_y - 1)),
            Chamber(Point(top.x, split_y + 1), bottom))


def divide_vertically(maze: Maze, chamber: Chamber,
                      rng: SeededRNG) -> Tuple[Chamber, Chamber]:
    """Split ``chamber`` with a vertical wall on an odd column."""
    top, bottom = chamber.top_left, chamber.bottom_right
    split_x = make_odd(rng.randint(top.x + 1, bottom.x - 1), bottom.x - 1)
    for y in range(top.y, bottom.y + 1):
        maze.set(Point(split_x, y), Cell.WALL)

    opening_y = make_even(rng.randint(top.y, bottom.y), bottom.y)
    maze.set(Point(split_x, opening_y), Cell.PASSAGE)

    return (Chamber(top, Point(split_x - 1, bottom.y)),
            Chamber(Point(split_x + 1, top.y), bottom))


def do_recursive_division(maze: Maze, chamber: Chamber, wall_direction: WallDirection,
                          rng: Optional[SeededRNG] = None) -> None:
    """
    Divide ``chamber`` until every sub-chamber is a single corridor wide.
    The first sub-chamber is fully divided before the second.
    """
    rng = resolve_rng(rng)
    stack = [(chamber, wall_direction)]

    while stack:
        current, direction = stack.pop()
        top, bottom = current.top_left, current.bottom_right
        if bottom.x - top.x < 2 or bottom.y - top.y < 2:
            continue

        if direction is WallDirection.HORIZONTAL:
            first, second = divide_horizontally(maze, current, rng)
        else:
            first, second = divide_vertically(maze, current, rng)

        stack.append((second, direction.opposite))
        stack.append((first, direction.opposite))


def generate_recursive_division(width: int, height: int,
                                rng: Optional[SeededRNG] = None) -> Maze:
    """
    Generate a maze by recursive division, starting with a vertical wall.
    Odd dimensions give a perfect maze.
    """
    maze = Maze(width, height, Cell.PASSAGE)
    whole = Chamber(Point(0, 0), Point(width - 1, height - 1))
    do_recursive_division(maze, whole, WallDirection.VERTICAL, rng)
    logger.debug("Recursive division %dx%d left %d passages",
                 width, height, maze.passage_count())
    return maze


# --- Registry --------------------------------------------------------------

Generator = Callable[..., Maze]

GENERATORS: Dict[AlgorithmId, Generator] = {
    "aldous-broder": generate_aldous_broder,
    "kruskal": generate_kruskal,
    "prims": generate_prims,
    "backtracking": generate_recursive_backtracking,
    "division": generate_recursive_division,
}


def get_generator(algorithm: AlgorithmId) -> Generator:
    """Get generation function by ID."""
    try:
        return GENERATORS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {algorithm}") from None


def generate_maze(algorithm: AlgorithmId, width: int, height: int,
                  start: Optional[Point] = None,
                  rng: Optional[SeededRNG] = None) -> Maze:
    """Generate a maze with the named algorithm; only backtracking uses ``start``."""
    generator = get_generator(algorithm)
    if algorithm == "backtracking":
        return generator(width, height, start=start, rng=rng)
    return generator(width, height, rng=rng)

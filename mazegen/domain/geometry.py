"""Adjacency, sampling and point arithmetic on the maze grid."""

from typing import List, Optional, Union

from .types import Cell, Direction, DIRECTIONS, Maze, Point, PointDiff
from ..utils.rng import SeededRNG, resolve_rng

_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


def next_point(p: Point, direction: Direction, width: int, height: int) -> Optional[Point]:
    """
    Get the point adjacent to ``p`` in ``direction``.
    Returns None if it would fall outside [0, width) x [0, height).
    """
    try:
        dx, dy = _OFFSETS[direction]
    except KeyError:
        raise ValueError(f"Invalid direction: {direction!r}") from None
    x, y = p.x + dx, p.y + dy
    if 0 <= x < width and 0 <= y < height:
        return Point(x, y)
    return None


def two_steps(p: Point, direction: Direction, width: int, height: int) -> Optional[Point]:
    """Get the point two cells away from ``p``, or None if either step leaves the grid."""
    one = next_point(p, direction, width, height)
    if one is None:
        return None
    return next_point(one, direction, width, height)


def opposite(direction: Direction) -> Direction:
    """Get the opposite of ``direction``."""
    if not isinstance(direction, Direction):
        raise ValueError(f"Invalid direction: {direction!r}")
    return direction.opposite


def shuffled_directions(rng: Optional[SeededRNG] = None) -> List[Direction]:
    """Return all four directions in a uniformly random order."""
    directions = list(DIRECTIONS)
    resolve_rng(rng).shuffle(directions)
    return directions


def random_point(width: int, height: int, rng: Optional[SeededRNG] = None) -> Point:
    """Pick a uniformly random point in [0, width) x [0, height)."""
    if width < 1 or height < 1:
        raise ValueError(f"Cannot sample from a {width}x{height} grid")
    rng = resolve_rng(rng)
    return Point(rng.randint(0, width - 1), rng.randint(0, height - 1))


def random_index(limit: int, rng: Optional[SeededRNG] = None) -> int:
    """Generate a random index in [0, limit]."""
    return resolve_rng(rng).randint(0, limit)


def is_passage(maze: Maze, p: Point) -> bool:
    return maze.get(p) == Cell.PASSAGE


def passage_neighbors(maze: Maze, p: Point) -> List[Point]:
    """In-bounds passage neighbors of ``p`` in canonical direction order."""
    neighbors = []
    for direction in DIRECTIONS:
        nxt = next_point(p, direction, maze.width, maze.height)
        if nxt is not None and maze.get(nxt) == Cell.PASSAGE:
            neighbors.append(nxt)
    return neighbors


def is_dead_end(maze: Maze, p: Point) -> bool:
    """True if exactly one in-bounds neighbor of ``p`` is a passage."""
    return len(passage_neighbors(maze, p)) == 1


def is_odd(value: int) -> bool:
    return value % 2 == 1


def make_even(value: int, limit: int) -> int:
    """Closest even value to ``value`` without going over ``limit``."""
    if not is_odd(value):
        return value
    return value - 1 if value == limit else value + 1


def make_odd(value: int, limit: int) -> int:
    """Closest odd value to ``value`` without going over ``limit``."""
    if is_odd(value):
        return value
    return value - 1 if value == limit else value + 1


def make_even_point(p: Point, width: int, height: int) -> Point:
    """
    Move ``p`` onto the even lattice while staying inside the grid.
    An odd coordinate steps up unless that would reach the grid edge.
    """
    return Point(_even_below(p.x, width), _even_below(p.y, height))


def _even_below(value: int, size: int) -> int:
    if not is_odd(value):
        return value
    return value - 1 if value + 1 >= size else value + 1


def add(a: Point, b: Union[Point, PointDiff]) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> PointDiff:
    return PointDiff(a.x - b.x, a.y - b.y)


def half(p: Union[Point, PointDiff]) -> Union[Point, PointDiff]:
    """Halve both components, truncating toward zero."""
    return type(p)(int(p.x / 2), int(p.y / 2))


def times_two(p: Point) -> Point:
    return Point(p.x * 2, p.y * 2)


def middle(a: Point, b: Point) -> Point:
    """The point halfway between two cells that are two steps apart."""
    return add(a, half(subtract(b, a)))


def ceil_half(size: int) -> int:
    """Number of even coordinates in [0, size)."""
    return (size + 1) // 2

"""Core type definitions for maze generation."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import Iterator, Literal, Optional

import numpy as np

# Generation algorithm identifiers
AlgorithmId = Literal["aldous-broder", "kruskal", "prims", "backtracking", "division"]

ALGORITHM_IDS: tuple[AlgorithmId, ...] = (
    "aldous-broder", "kruskal", "prims", "backtracking", "division"
)


class Cell(IntEnum):
    """Every cell is either a wall or a passage."""
    WALL = 0
    PASSAGE = 1


class Direction(Enum):
    """The four grid directions; north is towards row 0."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Canonical iteration order
DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST
)


@total_ordering
@dataclass(frozen=True)
class Point:
    """
    Grid coordinate measured from the top-left corner.
    x is the column, y is the row. Points order by row first, then column.
    """
    x: int
    y: int

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


@dataclass(frozen=True)
class PointDiff:
    """Signed difference between two points."""
    x: int
    y: int


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Connection between two cells.
    Equality ignores orientation; ``a`` is the cell the edge grows from.
    """
    a: Point
    b: Point

    def _key(self) -> tuple[Point, Point]:
        return (self.a, self.b) if self.a <= self.b else (self.b, self.a)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class Maze:
    """
    Width x Height grid of cells with designated start and end points.
    Cells are stored row-major in a numpy array; every accessor checks bounds.
    """

    def __init__(self, width: int, height: int, fill: Cell = Cell.WALL):
        if width < 1 or height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells = np.full((height, width), int(fill), dtype=np.uint8)
        self._start = Point(0, 0)
        self._end = Point(0, 0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, p: Point) -> bool:
        """Check if a point lies inside the grid."""
        return 0 <= p.x < self._width and 0 <= p.y < self._height

    def _check(self, p: Point) -> None:
        if not self.in_bounds(p):
            raise IndexError(f"{p} is outside the {self._width}x{self._height} maze")

    def get(self, p: Point) -> Cell:
        """Get the cell at ``p``."""
        self._check(p)
        return Cell(int(self._cells[p.y, p.x]))

    def set(self, p: Point, cell: Cell) -> None:
        """Set the cell at ``p``."""
        self._check(p)
        self._cells[p.y, p.x] = int(cell)

    def start(self) -> Point:
        return self._start

    def set_start(self, p: Point) -> None:
        self._check(p)
        self._start = p

    def end(self) -> Point:
        return self._end

    def set_end(self, p: Point) -> None:
        self._check(p)
        self._end = p

    def fill(self, cell: Cell) -> None:
        """Set every cell to ``cell``."""
        self._cells.fill(int(cell))

    def passages(self) -> Iterator[Point]:
        """Iterate passage points in row-major order."""
        ys, xs = np.nonzero(self._cells)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield Point(x, y)

    def passage_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def to_array(self) -> np.ndarray:
        """Copy of the cell array, indexed ``[y, x]``."""
        return self._cells.copy()

    def copy(self) -> "Maze":
        clone = Maze(self._width, self._height)
        clone._cells = self._cells.copy()
        clone._start = self._start
        clone._end = self._end
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (self._width == other._width and self._height == other._height
                and np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Maze({self._width}x{self._height}, passages={self.passage_count()})"


@dataclass
class GenerationConfig:
    """Configuration for a single maze generation run."""
    algorithm: AlgorithmId = "backtracking"
    width: int = 21
    height: int = 11
    seed: Optional[int] = None
    start: Optional[Point] = None
    solve: bool = False

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be generated."""
        if self.algorithm not in ALGORITHM_IDS:
            raise ValueError(f"Unknown algorithm: {self.algorithm}")
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Maze dimensions must be positive, got {self.width}x{self.height}")
        if self.start is not None and not (
                0 <= self.start.x < self.width and 0 <= self.start.y < self.height):
            raise ValueError(f"Start position {self.start} is out of bounds")

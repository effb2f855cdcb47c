"""Plain-text rendering and parsing of mazes."""

from typing import Dict, List, Optional

from ..domain.types import Cell, Maze, Point

WALL_CHAR = "X"
PASSAGE_CHAR = " "
START_CHAR = "S"
END_CHAR = "E"
PATH_CHAR = "."

_CELL_CHARS = {
    Cell.WALL: WALL_CHAR,
    Cell.PASSAGE: PASSAGE_CHAR,
}


def to_char(cell: Cell) -> str:
    """Display character for a cell."""
    try:
        return _CELL_CHARS[cell]
    except KeyError:
        raise ValueError(f"Invalid cell: {cell!r}") from None


def render_maze(maze: Maze, solution: Optional[List[Point]] = None,
                show_markers: bool = False) -> str:
    """
    Render a maze as text, one line per row.

    Walls are 'X' and passages are ' '. With a solution the first point is
    'S', the last is 'E' and the rest are '.'. Without one, ``show_markers``
    draws the maze start and end instead.
    """
    overlay: Dict[Point, str] = {}
    if solution:
        for p in solution[1:-1]:
            overlay[p] = PATH_CHAR
        overlay[solution[-1]] = END_CHAR
        overlay[solution[0]] = START_CHAR
    elif show_markers:
        overlay[maze.end()] = END_CHAR
        overlay[maze.start()] = START_CHAR

    lines = []
    for y in range(maze.height):
        row = []
        for x in range(maze.width):
            p = Point(x, y)
            row.append(overlay.get(p) or to_char(maze.get(p)))
        lines.append("".join(row) + "\n")
    return "".join(lines)


def parse_maze(text: str) -> Maze:
    """
    Build a maze from rendered text.
    'X' becomes a wall and every other character a passage.
    """
    rows = text.splitlines()
    if not rows or not rows[0]:
        raise ValueError("Cannot parse an empty maze")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")

    maze = Maze(width, len(rows), Cell.PASSAGE)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == WALL_CHAR:
                maze.set(Point(x, y), Cell.WALL)
    return maze

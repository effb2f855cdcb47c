"""Main entry point for the maze generator."""

import argparse
import logging
import sys
from typing import List, Optional

from .domain.types import ALGORITHM_IDS, GenerationConfig, Point
from .utils.display import render_maze
from .utils.maze_factory import create_maze


def parse_point(value: str) -> Point:
    """Parse an 'X,Y' command line argument."""
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got '{value}'") from None
    if x < 0 or y < 0:
        raise argparse.ArgumentTypeError(f"Coordinates must be non-negative: '{value}'")
    return Point(x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mazegen", description="Generate a random maze and print it as text")
    parser.add_argument("--algorithm", choices=ALGORITHM_IDS, default="backtracking",
                        help="Generation algorithm")
    parser.add_argument("--width", type=int, default=21, help="Maze width (odd fills the grid)")
    parser.add_argument("--height", type=int, default=11, help="Maze height (odd fills the grid)")
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--start", type=parse_point,
                        help="Start point X,Y for backtracking")
    parser.add_argument("--solution", action="store_true",
                        help="Overlay the longest path through the maze")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GenerationConfig(
        algorithm=args.algorithm,
        width=args.width,
        height=args.height,
        seed=args.seed,
        start=args.start,
        solve=args.solution,
    )

    try:
        result = create_maze(config)
    except (ValueError, IndexError) as e:
        print(f"Error generating maze: {e}", file=sys.stderr)
        return 1

    if result.solved:
        print(render_maze(result.maze, result.solution), end="")
        print(f"{config.algorithm} {config.width}x{config.height}: "
              f"longest path {len(result.solution)} cells "
              f"from {tuple(result.solution[0])} to {tuple(result.solution[-1])}")
    else:
        print(render_maze(result.maze, show_markers=config.algorithm == "backtracking"), end="")
        print(f"{config.algorithm} {config.width}x{config.height}: "
              f"{result.maze.passage_count()} passages")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Solve a maze from the command line.

Usage:
    python main.py [MAZE_FILE] [--wall-cost N] [--algorithm NAME] [--debug]
"""

import argparse
import logging

from rich.console import Console

from constants import LOG_FORMAT
from maze import ALGORITHMS, SAMPLE_MAZE, endpoints, solve
from tables.char_table import CharTable
from utils.display import print_table
from utils.loader import load_char_table

logger = logging.getLogger(__name__)


def run(
    maze: CharTable,
    wall_cost: int | None,
    algorithm: str,
    console: Console | None = None,
) -> int:
    """Solve the maze and print it with its route. Returns the exit status."""
    console = console or Console()
    start, end = endpoints(maze)
    result = solve(maze, start, end, wall_cost=wall_cost, algorithm=algorithm)
    if result is None:
        console.print(f"No route from {start} to {end}")
        return 1

    print_table(maze, result, console=console)
    console.print(f"Distance from {start} to {end}: {result.dist} ({result.length} steps)")
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the shortest route through a maze")
    parser.add_argument(
        "maze", nargs="?", help="Maze file, one row per line ('#' for walls)"
    )
    parser.add_argument(
        "--wall-cost",
        type=int,
        default=None,
        help="Cost of blowing up a wall cell (walls are impassable by default)",
    )
    parser.add_argument(
        "--algorithm",
        choices=ALGORITHMS,
        default="dijkstra",
        help="Shortest-path algorithm used when walls have a cost",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.algorithm == "bfs" and args.wall_cost is not None:
        parser.error("--algorithm bfs cannot be combined with --wall-cost")
    return args


if __name__ == "__main__":
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=LOG_FORMAT,
    )

    maze = load_char_table(args.maze) if args.maze else CharTable.from_text(SAMPLE_MAZE)
    logger.info(f"Solving a {maze.width}x{maze.height} maze")
    raise SystemExit(run(maze, args.wall_cost, args.algorithm))

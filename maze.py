"""
Shortest routes through character mazes.

A maze is a CharTable of wall ('#') and floor cells. Moving to a
side-adjacent floor cell takes one step. Walls are either impassable, or can
be blown up at a fixed cost per wall cell entered.
"""

import logging

from constants import END, START, WALL
from geometry.pos import Pos
from localtypes import Weight
from paths import bellman_ford, bfs, dijkstra
from paths.graph import Graph, WeightedGraph
from paths.result import PathResult
from tables.char_table import CharTable

logger = logging.getLogger(__name__)

SAMPLE_MAZE = """\
.#........#.
.#.######...
.#.#....#.#.
.#.#.##.##..
.#.#.#.....#
.#.#.######.
...#........
.#.#.#.####.
.#.#.#....#.
...#.#.##...
"""

ALGORITHMS = ("bfs", "dijkstra", "bellman-ford")


def floor_graph(maze: CharTable) -> Graph[Pos]:
    """Side-adjacent moves between non-wall cells."""
    return maze.graph(lambda value: value != WALL)


def maze_graph(maze: CharTable, wall_cost: Weight) -> WeightedGraph[Pos]:
    """Side-adjacent moves, costing 1 onto floor cells and `wall_cost` onto walls."""
    return maze.graph().weighted(lambda p, q: wall_cost if maze[q] == WALL else 1)


def endpoints(maze: CharTable) -> tuple[Pos, Pos]:
    """
    Start and end cells of a maze.

    The cells marked 'S' and 'E' when present, the top left and bottom right
    corners otherwise.
    """
    start = next(maze.find_all(START), maze.top_left())
    end = next(maze.find_all(END), maze.bottom_right())
    return start, end


def solve(
    maze: CharTable,
    start: Pos | None = None,
    end: Pos | None = None,
    wall_cost: Weight | None = None,
    algorithm: str = "dijkstra",
) -> PathResult[Pos] | None:
    """
    Shortest route from `start` to `end`, or None when there is none.

    Without a wall cost the walls are impassable and every step costs one,
    so breadth-first search is used regardless of `algorithm`.
    """
    default_start, default_end = endpoints(maze)
    start = default_start if start is None else start
    end = default_end if end is None else end
    for pos in (start, end):
        if not maze.contains_cell(pos):
            raise IndexError(f"Cell {pos} is outside the {maze.width}x{maze.height} maze")

    if wall_cost is None:
        logger.debug(f"Solving maze from {start} to {end} with impassable walls")
        return bfs.find_path(start, floor_graph(maze), lambda p: p == end)

    logger.debug(f"Solving maze from {start} to {end} with {algorithm}, wall cost {wall_cost}")
    graph = maze_graph(maze, wall_cost)
    match algorithm:
        case "bfs":
            raise ValueError("Breadth-first search cannot weigh wall cells")
        case "dijkstra":
            return dijkstra.find_path(start, graph, lambda p: p == end)
        case "bellman-ford":
            return bellman_ford.find_path(start, graph, lambda p: p == end)
        case _:
            raise ValueError(f"Unknown algorithm: {algorithm!r}, expected one of {ALGORITHMS}")

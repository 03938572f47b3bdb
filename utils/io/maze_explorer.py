"""
TUI for exploring shortest routes through a maze.

Usage:
    python -m utils.io.maze_explorer [MAZE_FILE]
"""

import sys

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from maze import SAMPLE_MAZE, solve
from geometry.pos import Pos
from paths.result import PathResult
from tables.char_table import CharTable
from utils.display import path_to_text, table_to_text
from utils.loader import load_char_table

WEIGHTED_ALGORITHMS = ("dijkstra", "bellman-ford")
DEFAULT_WALL_COST = 10


class MazeExplorerApp(App):
    """Interactive maze solver: transform the maze, tune the wall cost and solve it."""

    TITLE = "Maze explorer"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "solve", "Solve"),
        Binding("w", "toggle_walls", "Walls"),
        Binding("plus", "change_cost(1)", "Cost +1"),
        Binding("minus", "change_cost(-1)", "Cost -1"),
        Binding("a", "next_algorithm", "Algorithm"),
        Binding("r", "rotate", "Rotate"),
        Binding("m", "mirror", "Mirror"),
    ]

    CSS = """
    #maze {
        padding: 1 2;
    }

    #status {
        padding: 0 2;
        text-style: bold;
    }
    """

    def __init__(self, maze: CharTable, **kwargs) -> None:
        super().__init__(**kwargs)
        self.maze = maze
        self.wall_cost: int | None = None
        self.algorithm = WEIGHTED_ALGORITHMS[0]
        self.result: PathResult[Pos] | None = None
        self.solved = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static(id="maze")
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()

    def describe(self) -> str:
        walls = "impassable" if self.wall_cost is None else f"cost {self.wall_cost}"
        method = "bfs" if self.wall_cost is None else self.algorithm
        summary = f"{self.maze.width}x{self.maze.height} maze | walls: {walls} | {method}"
        if not self.solved:
            return summary
        if self.result is None:
            return f"{summary} | no route"
        return f"{summary} | distance {self.result.dist}, {self.result.length} steps"

    def refresh_view(self) -> None:
        if self.result is None:
            text = table_to_text(self.maze)
        else:
            text = path_to_text(self.maze, self.result)
        self.query_one("#maze", Static).update(text)
        self.query_one("#status", Static).update(self.describe())

    def _reset(self) -> None:
        self.result = None
        self.solved = False
        self.refresh_view()

    def action_solve(self) -> None:
        self.result = solve(self.maze, wall_cost=self.wall_cost, algorithm=self.algorithm)
        self.solved = True
        self.refresh_view()

    def action_toggle_walls(self) -> None:
        self.wall_cost = DEFAULT_WALL_COST if self.wall_cost is None else None
        self._reset()

    def action_change_cost(self, delta: int) -> None:
        if self.wall_cost is not None:
            self.wall_cost = max(1, self.wall_cost + delta)
            self._reset()

    def action_next_algorithm(self) -> None:
        index = WEIGHTED_ALGORITHMS.index(self.algorithm)
        self.algorithm = WEIGHTED_ALGORITHMS[(index + 1) % len(WEIGHTED_ALGORITHMS)]
        self._reset()

    def action_rotate(self) -> None:
        self.maze = self.maze.rotate_right()
        self._reset()

    def action_mirror(self) -> None:
        self.maze = self.maze.mirror_horizontally()
        self._reset()


def main(argv: list[str]) -> None:
    maze = load_char_table(argv[0]) if argv else CharTable.from_text(SAMPLE_MAZE)
    MazeExplorerApp(maze).run()


if __name__ == "__main__":
    main(sys.argv[1:])

"""Tests for maze.py, main.py and the display and loader utilities"""

import pytest
from rich.console import Console

from geometry.pos import Pos
from main import parse_args, run
from maze import SAMPLE_MAZE, endpoints, solve
from tables.char_table import CharTable
from tables.int_table import IntTable
from utils.display import path_to_text, print_table, table_to_text
from utils.loader import load_char_table, read_lines


@pytest.fixture
def maze():
    return CharTable.from_text(SAMPLE_MAZE)


def recording_console() -> Console:
    return Console(record=True, width=120, color_system=None)


class TestSolve:
    def test_endpoints_default_to_corners(self, maze):
        assert endpoints(maze) == (Pos(0, 0), Pos(11, 9))

    def test_endpoints_from_markers(self):
        maze = CharTable.from_strings(["..E", ".#.", "S.."])
        assert endpoints(maze) == (Pos(0, 2), Pos(2, 0))
        assert solve(maze).dist == 4

    def test_impassable_walls(self, maze):
        result = solve(maze)
        assert result.dist == 50
        assert all(maze[p] != "#" for p in result.path())

    @pytest.mark.parametrize("algorithm", ["dijkstra", "bellman-ford"])
    @pytest.mark.parametrize("wall_cost, expected", [(32, 50), (30, 49), (1, 20)])
    def test_wall_costs(self, maze, algorithm, wall_cost, expected):
        assert solve(maze, wall_cost=wall_cost, algorithm=algorithm).dist == expected

    def test_explicit_endpoints(self, maze):
        result = solve(maze, Pos(0, 0), Pos(0, 9))
        assert result.dist == 9
        assert result.path() == [Pos(0, y) for y in range(10)]

    def test_no_route(self):
        maze = CharTable.from_strings([".#.", "##.", "..."])
        assert solve(maze, Pos(0, 0), Pos(2, 2)) is None
        assert solve(maze, Pos(0, 0), Pos(2, 2), wall_cost=3).dist == 6

    def test_invalid_arguments(self, maze):
        with pytest.raises(ValueError):
            solve(maze, wall_cost=5, algorithm="bfs")
        with pytest.raises(ValueError, match="Unknown algorithm"):
            solve(maze, wall_cost=5, algorithm="a-star")
        with pytest.raises(IndexError):
            solve(maze, end=Pos(12, 0))


class TestDisplay:
    def test_table_to_text(self):
        table = CharTable.from_strings(["ab", "cd"])
        assert table_to_text(table).plain == "ab\ncd\n"

    def test_int_table_columns_are_aligned(self):
        table = IntTable.from_rows([[1, 10], [100, 2]])
        assert table_to_text(table).plain == "  1  10\n100   2\n"

    def test_path_is_styled(self, maze):
        result = solve(maze)
        text = path_to_text(maze, result)
        assert text.plain == str(maze)
        assert len(text.spans) == maze.size

    def test_print_table(self, maze):
        console = recording_console()
        print_table(maze, console=console)
        assert console.export_text().rstrip("\n") == str(maze).rstrip("\n")


class TestLoader:
    def test_read_lines_drops_trailing_blank_lines(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text("..#\n#..\n\n\n", encoding="utf-8")
        assert read_lines(path) == ["..#", "#.."]

    def test_load_char_table(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text(SAMPLE_MAZE, encoding="utf-8")
        assert load_char_table(str(path)) == CharTable.from_text(SAMPLE_MAZE)

    def test_load_ragged_file(self, tmp_path):
        path = tmp_path / "ragged.txt"
        path.write_text("...\n..\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_char_table(path)


class TestMain:
    def test_run_prints_route(self, maze):
        console = recording_console()
        assert run(maze, None, "dijkstra", console=console) == 0
        output = console.export_text()
        assert output.startswith(str(maze))
        assert "Distance from (0,0) to (11,9): 50 (50 steps)" in output

    def test_run_with_wall_cost(self, maze):
        console = recording_console()
        assert run(maze, 1, "bellman-ford", console=console) == 0
        assert "Distance from (0,0) to (11,9): 20 (20 steps)" in console.export_text()

    def test_run_without_route(self):
        console = recording_console()
        maze = CharTable.from_strings([".#", "#."])
        assert run(maze, None, "dijkstra", console=console) == 1
        assert "No route from (0,0) to (1,1)" in console.export_text()

    def test_parse_args(self):
        args = parse_args(["maze.txt", "--wall-cost", "5", "--algorithm", "bellman-ford"])
        assert (args.maze, args.wall_cost, args.algorithm) == ("maze.txt", 5, "bellman-ford")
        assert parse_args([]).algorithm == "dijkstra"
        assert parse_args(["--algorithm", "bfs"]).wall_cost is None

    def test_bfs_with_wall_cost_is_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--algorithm", "bfs", "--wall-cost", "5"])
        assert exc_info.value.code == 2
        assert "cannot be combined" in capsys.readouterr().err

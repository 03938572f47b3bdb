"""Shared tests for the weighted shortest-path searches."""

import random

import pytest

from geometry.directions import Dir8
from maze import SAMPLE_MAZE, maze_graph
from paths import bellman_ford, dijkstra
from paths.graph import Edge, WeightedGraph
from tables.char_table import CharTable

SEARCHES = [
    pytest.param(dijkstra, id="dijkstra"),
    pytest.param(bellman_ford, id="bellman_ford"),
]


def path_weight(path, edges):
    """Sum of the lightest edge between each pair of consecutive nodes."""
    return sum(
        min(weight for end, weight in edges(u) if end == v) for u, v in zip(path, path[1:])
    )


@pytest.mark.parametrize("search", SEARCHES)
class TestShortestPath:
    def test_simple_graph(self, search):
        graph = WeightedGraph.of_mapping(
            {
                "A": [("B", 10), ("D", 5)],
                "B": [("C", 1)],
                "C": [("E", 1)],
                "D": [("B", 3), ("C", 9), ("E", 11)],
                "E": [],
            }
        )
        result = search.find_path("A", graph, lambda n: n == "E")
        assert result is not None
        assert result.dist == 10
        assert result.path() == ["A", "D", "B", "C", "E"]
        assert result.node == "E"
        assert result.source == "A"
        assert result.length == 4

    @pytest.mark.parametrize(
        "wall_cost, expected", [(32, 50), (30, 49), (1, 20)]
    )
    def test_maze(self, search, wall_cost, expected):
        """Walls can be blown up, each wall cell entered costing `wall_cost`."""
        maze = CharTable.from_text(SAMPLE_MAZE)
        start, end = maze.top_left(), maze.bottom_right()
        result = search.find_path(start, maze_graph(maze, wall_cost), lambda p: p == end)
        assert result is not None
        assert result.dist == expected
        path = result.path()
        assert path[0] == start
        assert path[-1] == end
        if wall_cost == 32:
            assert len(path) == 51
        if wall_cost == 1:
            assert result.dist == start.dist1(end)

    def test_directions(self, search):
        result1 = search.find_path(
            Dir8.N, lambda d: [Edge(d.next(), 3), Edge(d.prev(), 2)], lambda d: d == Dir8.SE
        )
        result2 = search.find_path(
            Dir8.N, lambda d: [Edge(d.next(), 7), Edge(d.prev(), 4)], lambda d: d == Dir8.SE
        )
        assert result1.dist == 9
        assert result1.path() == [Dir8.N, Dir8.NE, Dir8.E, Dir8.SE]
        assert result2.dist == 20
        assert result2.path() == [Dir8.N, Dir8.NW, Dir8.W, Dir8.SW, Dir8.S, Dir8.SE]

    def test_multiple_targets(self, search):
        nodes = list(range(100))
        random.Random(123456789).shuffle(nodes)
        index = {node: i for i, node in enumerate(nodes)}

        def edges(node):
            i = index[node]
            return [(nodes[j], 1) for j in range(i, min(i + 8, 100))]

        result = search.find_path(nodes[0], edges, lambda n: index[n] >= 42)
        assert result is not None
        assert result.dist == 6

    def test_tuple_nodes(self, search):
        def edges(node):
            for i in range(4):
                end = (*node, i)
                if len(end) <= 6:
                    yield end, max(i * 10, 1)

        target = (1, 0, 1, 0, 2, 1)
        result = search.find_path((1, 0), edges, lambda n: n == target)
        assert result.dist == 41
        assert result.node == target
        assert result.path() == [(1, 0), (1, 0, 1), (1, 0, 1, 0), (1, 0, 1, 0, 2), target]

    def test_multiple_sources(self, search):
        def edges(i):
            return [(i - 3, 1), (i - 7, 2)] if i >= 0 else []

        result = search.find_path_from_any(range(82, 100), edges, lambda i: i == 42)
        assert result is not None
        assert result.dist == 12
        assert result.path() == [84, 77, 70, 63, 56, 49, 42]

    def test_source_is_target(self, search):
        result = search.find_path("A", lambda n: [("B", 1)], lambda n: n == "A")
        assert result.dist == 0
        assert result.path() == ["A"]
        assert result.length == 0

    def test_unreachable_target(self, search):
        graph = WeightedGraph.of_mapping({"A": [("B", 1)], "C": [("A", 1)]})
        assert search.find_path("A", graph, lambda n: n == "C") is None
        with pytest.raises(LookupError):
            search.dist("A", graph, lambda n: n == "C")

    def test_run_paths_sum_to_distances(self, search):
        maze = CharTable.from_text(SAMPLE_MAZE)
        graph = maze_graph(maze, 5)
        results = search.run(maze.top_left(), graph)
        assert len(results) == maze.size
        for node, result in results.items():
            path = result.path()
            assert path[0] == maze.top_left()
            assert path[-1] == node
            assert path_weight(path, graph) == result.dist

    def test_run_from_all_takes_nearest_source(self, search):
        graph = WeightedGraph.of(lambda i: [(i + 1, 1)] if i < 10 else [])
        results = search.run_from_all([0, 5], graph)
        assert results.dist(4) == 4
        assert results.dist(7) == 2
        assert results[7].source == 5
        assert results.path(6) == [5, 6]

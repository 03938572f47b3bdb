"""
Implicit graphs given by neighbor or edge callbacks.

Nodes are never stored: a graph is a function from a node to the nodes (or
weighted edges) leaving it. The wrappers below add the usual combinators on
top of such functions; the search algorithms accept either a wrapper or a
plain callable.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Collection, Iterable, Iterator, Mapping
from collections.abc import Set
from typing import Generic, NamedTuple

from localtypes import T, Weight


class Edge(NamedTuple, Generic[T]):
    """Weighted edge to `end`."""

    end: T
    weight: Weight


class Graph(Generic[T]):
    """Unweighted directed graph defined by a neighbor provider."""

    def __init__(self, neighbors: Callable[[T], Iterable[T]]):
        self._neighbors = neighbors

    def __call__(self, node: T) -> Iterator[T]:
        return iter(self._neighbors(node))

    def neighbors(self, node: T) -> Iterator[T]:
        return self(node)

    @classmethod
    def of(cls, neighbors: Callable[[T], Iterable[T]]) -> Graph[T]:
        return cls(neighbors)

    @classmethod
    def of_mapping(cls, adjacency: Mapping[T, Collection[T]]) -> Graph[T]:
        """Graph of an adjacency mapping. Nodes missing from the mapping have no neighbors."""
        return cls(lambda node: adjacency.get(node, ()))

    def filter_nodes(self, predicate: Callable[[T], bool]) -> Graph[T]:
        """Keep only the edges whose end node satisfies `predicate`."""
        return Graph(lambda u: (v for v in self(u) if predicate(v)))

    def filter_edges(self, predicate: Callable[[T, T], bool]) -> Graph[T]:
        return Graph(lambda u: (v for v in self(u) if predicate(u, v)))

    def weighted(self, weight: Callable[[T, T], Weight]) -> WeightedGraph[T]:
        """Weighted view of this graph, `weight(u, v)` giving the weight of each edge."""
        return WeightedGraph(lambda u: (Edge(v, weight(u, v)) for v in self(u)))


class WeightedGraph(Generic[T]):
    """Weighted directed graph defined by an edge provider."""

    def __init__(self, edges: Callable[[T], Iterable[tuple[T, Weight]]]):
        self._edges = edges

    def __call__(self, node: T) -> Iterator[Edge[T]]:
        return (Edge(end, weight) for end, weight in self._edges(node))

    def edges(self, node: T) -> Iterator[Edge[T]]:
        return self(node)

    @classmethod
    def of(cls, edges: Callable[[T], Iterable[tuple[T, Weight]]]) -> WeightedGraph[T]:
        return cls(edges)

    @classmethod
    def of_mapping(
        cls, adjacency: Mapping[T, Collection[tuple[T, Weight]]]
    ) -> WeightedGraph[T]:
        """Graph of a mapping from each node to its outgoing (end, weight) pairs."""
        return cls(lambda node: adjacency.get(node, ()))

    def filter_nodes(self, predicate: Callable[[T], bool]) -> WeightedGraph[T]:
        return WeightedGraph(lambda u: (e for e in self(u) if predicate(e.end)))

    def filter_edges(self, predicate: Callable[[T, T], bool]) -> WeightedGraph[T]:
        return WeightedGraph(lambda u: (e for e in self(u) if predicate(u, e.end)))


def connected_components(
    nodes: Iterable[T], neighbors: Callable[[T], Iterable[T]]
) -> frozenset[frozenset[T]]:
    """
    Extract connected components from an undirected implicit graph.

    Args:
        nodes: nodes of the graph. Nodes reached through `neighbors` but absent
            from this collection are still added to the component.
        neighbors: function returning the nodes adjacent to a given node.

    Returns:
        frozenset[frozenset[T]]: set of connected components of the graph
    """

    seen: set[T] = set()
    components = set()

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        if node in seen:
            continue

        component: set[T] = set()
        queue = deque([node])
        seen.add(node)
        while queue:
            current = queue.popleft()
            component.add(current)
            for neighbor in neighbors(current):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)

        components.add(frozenset(component))
    return frozenset(components)


def reachable(source: T, neighbors: Callable[[T], Iterable[T]]) -> Set[T]:
    """All the nodes reachable from `source`, including itself."""
    (component,) = connected_components([source], neighbors)
    return component

"""
Shortest paths with arbitrary edge weights, using the queue-based variant of
the Bellman-Ford algorithm (SPFA).

Nodes are discovered breadth-first from the sources; only the part of the
graph reachable from them is ever expanded. Negative weights are supported,
and a reachable negative cycle raises NegativeCycleError.
"""

import logging
from collections import deque
from collections.abc import Iterable

from errors import NegativeCycleError, PathNotFoundError
from localtypes import EdgeProvider, NodePredicate, T, Weight
from paths.result import PathResult, ShortestPaths

logger = logging.getLogger(__name__)


def _search(sources: Iterable[T], edges: EdgeProvider[T]) -> dict[T, PathResult[T]]:
    """
    Relax edges until no distance improves.

    Each queue entry carries the round in which it was created, which is
    also the number of edges of its path. A path with at least as many edges
    as there are discovered nodes repeats a node, and since every step of a
    path strictly improved a distance, the repeated part is a negative cycle.
    """
    results: dict[T, PathResult[T]] = {}
    queue: deque[tuple[PathResult[T], int]] = deque()

    for source in sources:
        if source not in results:
            result = PathResult(source, 0)
            results[source] = result
            queue.append((result, 0))

    relaxations = 0
    while queue:
        result, rounds = queue.popleft()
        node = result.node
        # Superseded by a shorter path found later
        if results[node] is not result:
            continue
        if rounds >= len(results):
            raise NegativeCycleError(
                f"Negative cycle reachable through {node!r} "
                f"after {rounds} rounds over {len(results)} nodes"
            )

        for end, weight in edges(node):
            new_dist = result.dist + weight
            current = results.get(end)
            if current is None or new_dist < current.dist:
                path = PathResult(end, new_dist, result)
                results[end] = path
                queue.append((path, rounds + 1))
                relaxations += 1

    logger.debug(f"Bellman-Ford settled {len(results)} nodes with {relaxations} relaxations")
    return results


def run(source: T, edges: EdgeProvider[T]) -> ShortestPaths[T]:
    """Shortest paths from `source` to every reachable node."""
    return run_from_all([source], edges)


def run_from_all(sources: Iterable[T], edges: EdgeProvider[T]) -> ShortestPaths[T]:
    return ShortestPaths(_search(sources, edges))


def find_path(
    source: T, edges: EdgeProvider[T], target: NodePredicate[T]
) -> PathResult[T] | None:
    """Shortest path from `source` to the nearest node satisfying `target`, or None."""
    return find_path_from_any([source], edges, target)


def find_path_from_any(
    sources: Iterable[T], edges: EdgeProvider[T], target: NodePredicate[T]
) -> PathResult[T] | None:
    """
    Shortest path from any source to any node satisfying `target`, or None.

    The whole reachable graph is explored first, since with negative weights
    no distance is final before the search ends.
    """
    results = _search(sources, edges)
    candidates = [result for node, result in results.items() if target(node)]
    return min(candidates, key=lambda result: result.dist, default=None)


def dist(source: T, edges: EdgeProvider[T], target: NodePredicate[T]) -> Weight:
    found = find_path(source, edges, target)
    if found is None:
        raise PathNotFoundError(f"No target node is reachable from {source!r}")
    return found.dist

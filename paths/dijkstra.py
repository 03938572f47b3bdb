"""
Dijkstra's algorithm over implicit graphs with non-negative edge weights.

The graph is given by an edge provider: a function returning the
(end, weight) pairs leaving a node. Nodes only need to be hashable.
"""

import heapq
import itertools
import logging
from collections.abc import Iterable

from errors import NegativeWeightError, PathNotFoundError
from localtypes import EdgeProvider, NodePredicate, T, Weight
from paths.result import PathResult, ShortestPaths

logger = logging.getLogger(__name__)


def _search(
    sources: Iterable[T],
    edges: EdgeProvider[T],
    target: NodePredicate[T] | None,
) -> tuple[dict[T, PathResult[T]], PathResult[T] | None]:
    """
    Run the search from all the sources at distance zero.

    Stops as soon as a node satisfying `target` is popped from the queue:
    its distance is final at that point. Without a target, the search runs
    until every reachable node is finalized.
    """
    results: dict[T, PathResult[T]] = {}
    # Heap entries are (dist, insertion order, result): equal distances pop in FIFO order
    heap: list[tuple[Weight, int, PathResult[T]]] = []
    counter = itertools.count()

    for source in sources:
        if source not in results:
            result = PathResult(source, 0)
            results[source] = result
            heap.append((0, next(counter), result))
    heapq.heapify(heap)

    finalized: set[T] = set()
    while heap:
        dist, _, result = heapq.heappop(heap)
        node = result.node
        if node in finalized:
            continue
        finalized.add(node)

        if target is not None and target(node):
            logger.debug(
                f"Dijkstra reached target {node!r} at distance {dist} "
                f"after finalizing {len(finalized)} nodes"
            )
            return results, result

        for end, weight in edges(node):
            if weight < 0:
                raise NegativeWeightError(
                    f"Negative weight {weight} on edge {node!r} -> {end!r}"
                )
            new_dist = dist + weight
            current = results.get(end)
            if current is None or new_dist < current.dist:
                path = PathResult(end, new_dist, result)
                results[end] = path
                heapq.heappush(heap, (new_dist, next(counter), path))

    logger.debug(f"Dijkstra finalized {len(finalized)} nodes")
    return results, None


def run(source: T, edges: EdgeProvider[T]) -> ShortestPaths[T]:
    """Shortest paths from `source` to every reachable node."""
    return run_from_all([source], edges)


def run_from_all(sources: Iterable[T], edges: EdgeProvider[T]) -> ShortestPaths[T]:
    """Shortest paths from the nearest of the sources to every reachable node."""
    results, _ = _search(sources, edges, None)
    return ShortestPaths(results)


def find_path(
    source: T, edges: EdgeProvider[T], target: NodePredicate[T]
) -> PathResult[T] | None:
    """
    Shortest path from `source` to the nearest node satisfying `target`.

    Returns None if no such node is reachable. A source satisfying `target`
    gives a path with the single source node.
    """
    return find_path_from_any([source], edges, target)


def find_path_from_any(
    sources: Iterable[T], edges: EdgeProvider[T], target: NodePredicate[T]
) -> PathResult[T] | None:
    _, found = _search(sources, edges, target)
    return found


def dist(source: T, edges: EdgeProvider[T], target: NodePredicate[T]) -> Weight:
    """Length of the shortest path from `source` to a node satisfying `target`."""
    found = find_path(source, edges, target)
    if found is None:
        raise PathNotFoundError(f"No target node is reachable from {source!r}")
    return found.dist

"""
Breadth-first search over implicit unweighted graphs.

The graph is given by a neighbor provider. Every edge counts as one step, so
nodes are reached level by level and the first time a node is discovered is
along a shortest path.
"""

import logging
from collections import deque
from collections.abc import Iterable

from errors import PathNotFoundError
from localtypes import NeighborProvider, NodePredicate, T
from paths.result import PathResult, ShortestPaths

logger = logging.getLogger(__name__)


def _search(
    sources: Iterable[T],
    neighbors: NeighborProvider[T],
    target: NodePredicate[T] | None,
) -> tuple[dict[T, PathResult[T]], PathResult[T] | None]:
    results: dict[T, PathResult[T]] = {}
    queue: deque[PathResult[T]] = deque()

    for source in sources:
        if source not in results:
            result = PathResult(source, 0)
            results[source] = result
            queue.append(result)

    while queue:
        result = queue.popleft()
        if target is not None and target(result.node):
            logger.debug(
                f"BFS reached target {result.node!r} at distance {result.dist} "
                f"after discovering {len(results)} nodes"
            )
            return results, result

        for neighbor in neighbors(result.node):
            # A node is marked when discovered, so it enters the queue once
            if neighbor not in results:
                path = PathResult(neighbor, result.dist + 1, result)
                results[neighbor] = path
                queue.append(path)

    logger.debug(f"BFS discovered {len(results)} nodes")
    return results, None


def run(source: T, neighbors: NeighborProvider[T]) -> ShortestPaths[T]:
    """Shortest paths from `source` to every reachable node."""
    return run_from_all([source], neighbors)


def run_from_all(
    sources: Iterable[T], neighbors: NeighborProvider[T]
) -> ShortestPaths[T]:
    results, _ = _search(sources, neighbors, None)
    return ShortestPaths(results)


def find_path(
    source: T, neighbors: NeighborProvider[T], target: NodePredicate[T]
) -> PathResult[T] | None:
    """Shortest path from `source` to the nearest node satisfying `target`, or None."""
    return find_path_from_any([source], neighbors, target)


def find_path_from_any(
    sources: Iterable[T], neighbors: NeighborProvider[T], target: NodePredicate[T]
) -> PathResult[T] | None:
    _, found = _search(sources, neighbors, target)
    return found


def dist(source: T, neighbors: NeighborProvider[T], target: NodePredicate[T]) -> int:
    """Number of steps from `source` to the nearest node satisfying `target`."""
    found = find_path(source, neighbors, target)
    if found is None:
        raise PathNotFoundError(f"No target node is reachable from {source!r}")
    return found.dist

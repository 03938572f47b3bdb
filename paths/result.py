"""
Results of the shortest-path searches.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Generic

from errors import NodeNotFoundError
from localtypes import T, Weight


@dataclass(frozen=True)
class PathResult(Generic[T]):
    """
    A node reached by a search, with its distance from the nearest source.

    Results are chained through `prev` back to a source node, whose `prev`
    is None. Equality ignores the chain and compares node and distance only.
    """

    node: T
    dist: Weight
    prev: PathResult[T] | None = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        """Number of edges of the path."""
        count = 0
        result = self.prev
        while result is not None:
            count += 1
            result = result.prev
        return count

    @property
    def source(self) -> T:
        result = self
        while result.prev is not None:
            result = result.prev
        return result.node

    def path(self) -> list[T]:
        """Nodes of the path, from the source to this node inclusive."""
        nodes = []
        result: PathResult[T] | None = self
        while result is not None:
            nodes.append(result.node)
            result = result.prev
        nodes.reverse()
        return nodes


class ShortestPaths(Mapping[T, PathResult[T]]):
    """
    Read-only mapping from each reached node to its PathResult.

    Looking up a node that was never reached raises NodeNotFoundError, which
    is a KeyError.
    """

    def __init__(self, results: dict[T, PathResult[T]]):
        self._results = results

    def __getitem__(self, node: T) -> PathResult[T]:
        try:
            return self._results[node]
        except KeyError:
            raise NodeNotFoundError(node) from None

    def __iter__(self) -> Iterator[T]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, node: object) -> bool:
        return node in self._results

    def __repr__(self) -> str:
        return f"ShortestPaths({len(self)} nodes)"

    def dist(self, node: T) -> Weight:
        return self[node].dist

    def path(self, node: T) -> list[T]:
        return self[node].path()

    def distances(self) -> dict[T, Weight]:
        return {node: result.dist for node, result in self._results.items()}

"""
Exceptions raised by the tables and the path-finding algorithms.

Invalid arguments raise plain ValueError and out-of-bounds cell accesses raise
IndexError. The classes below refine the builtin hierarchy so callers can
catch either the precise condition or its builtin parent.
"""


class ValueNotFoundError(LookupError):
    """Raised when a value is searched in a table that does not contain it."""

    pass


class NodeNotFoundError(KeyError):
    """Raised when a shortest-path result is queried for a node it never reached."""

    pass


class PathNotFoundError(LookupError):
    """Raised when a distance is requested but no target node is reachable."""

    pass


class NegativeWeightError(ValueError):
    """Raised by Dijkstra's algorithm when an edge has a negative weight."""

    pass


class NegativeCycleError(ValueError):
    """Raised by the Bellman-Ford algorithm when a negative cycle is reachable."""

    pass


__all__ = [
    "ValueNotFoundError",
    "NodeNotFoundError",
    "PathNotFoundError",
    "NegativeWeightError",
    "NegativeCycleError",
]

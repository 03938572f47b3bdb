"""
Shortest paths over implicit graphs.

Modules:
    graph         - Graph and WeightedGraph wrappers, connected components
    result        - PathResult and ShortestPaths
    dijkstra      - Non-negative weights, priority queue
    bellman_ford  - Arbitrary weights, negative cycle detection
    bfs           - Unit weights, breadth-first
"""

from paths import bellman_ford, bfs, dijkstra
from paths.graph import Edge, Graph, WeightedGraph, connected_components, reachable
from paths.result import PathResult, ShortestPaths

__all__ = [
    "Edge",
    "Graph",
    "PathResult",
    "ShortestPaths",
    "WeightedGraph",
    "bellman_ford",
    "bfs",
    "connected_components",
    "dijkstra",
    "reachable",
]

"""
Type definitions shared by the geometry, table and path-finding modules.

This module contains the custom type variables and aliases used throughout the
library, organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

# Basic type variables for generic operations
T = TypeVar("T")
V = TypeVar("V")

# Numbers
type Weight = int | float

# Implicit graphs: a node is only known through the callbacks it is given to
type NeighborProvider[N] = Callable[[N], Iterable[N]]
type EdgeProvider[N] = Callable[[N], Iterable[tuple[N, Weight]]]
type NodePredicate[N] = Callable[[N], bool]

# Textual grids
type Lines = list[str]


__all__ = [
    "T",
    "V",
    "Weight",
    "NeighborProvider",
    "EdgeProvider",
    "NodePredicate",
    "Lines",
]

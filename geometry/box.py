"""
Axis-aligned boxes of integer vectors.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from geometry.ranges import Range
from geometry.vector import Vector


@dataclass(frozen=True)
class Box:
    """
    The product of one closed range per axis, given by its two corners.

    The box is empty when any of its ranges is empty. Corners may be given as
    Vector instances or as plain integer tuples such as Pos.
    """

    min: Vector
    max: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", Vector(*self.min))
        object.__setattr__(self, "max", Vector(*self.max))
        if self.min.dim != self.max.dim:
            raise ValueError(
                f"Box corners have different dimensions: {self.min.dim} and {self.max.dim}"
            )

    @classmethod
    def from_ranges(cls, *ranges: Range) -> Box:
        return cls(Vector(*(r.min for r in ranges)), Vector(*(r.max for r in ranges)))

    @classmethod
    def bound(cls, points: Iterable[tuple[int, ...]]) -> Box:
        """The smallest box containing all the given points."""
        points = [Vector(*p) for p in points]
        if not points:
            raise ValueError("Cannot bound an empty collection of points")
        dims = {p.dim for p in points}
        if len(dims) > 1:
            raise ValueError(f"Points have different dimensions: {sorted(dims)}")
        return cls(
            Vector(*(min(coords) for coords in zip(*points))),
            Vector(*(max(coords) for coords in zip(*points))),
        )

    def __str__(self) -> str:
        return f"[{self.min} .. {self.max}]"

    @property
    def dim(self) -> int:
        return self.min.dim

    def ranges(self) -> list[Range]:
        return [Range(lo, hi) for lo, hi in zip(self.min, self.max)]

    @property
    def count(self) -> int:
        return math.prod(r.size for r in self.ranges())

    def __len__(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return any(r.is_empty() for r in self.ranges())

    def _check_dim(self, dim: int) -> None:
        if dim != self.dim:
            raise ValueError(f"Dimension mismatch: box has {self.dim}, got {dim}")

    # ==============================================================
    # Containment and intersection
    # ==============================================================

    def contains(self, point: tuple[int, ...]) -> bool:
        self._check_dim(len(point))
        return all(lo <= c <= hi for c, lo, hi in zip(point, self.min, self.max))

    def __contains__(self, point: object) -> bool:
        return isinstance(point, tuple) and len(point) == self.dim and self.contains(point)

    def contains_all(self, other: Box | Iterable[tuple[int, ...]]) -> bool:
        if isinstance(other, Box):
            return other.is_empty() or self.intersection(other) == other
        return all(self.contains(point) for point in other)

    def overlaps(self, other: Box) -> bool:
        return not self.intersection(other).is_empty()

    def intersection(self, other: Box) -> Box:
        """Component-wise clamp of the two boxes. Disjoint boxes give an empty box."""
        self._check_dim(other.dim)
        return Box(
            Vector(*(max(a, b) for a, b in zip(self.min, other.min))),
            Vector(*(min(a, b) for a, b in zip(self.max, other.max))),
        )

    def span(self, other: Box) -> Box:
        """The smallest box containing both boxes."""
        self._check_dim(other.dim)
        return Box(
            Vector(*(min(a, b) for a, b in zip(self.min, other.min))),
            Vector(*(max(a, b) for a, b in zip(self.max, other.max))),
        )

    def shift(self, delta: tuple[int, ...]) -> Box:
        return Box(self.min.plus(delta), self.max.plus(delta))

    def extend(self, *deltas: int) -> Box:
        """
        Grow the box on both sides of each axis, by one amount per axis or a
        single amount for all of them. Negative amounts shrink the box.
        """
        if len(deltas) == 1:
            deltas = deltas * self.dim
        self._check_dim(len(deltas))
        return Box.from_ranges(*(r.extend(d) for r, d in zip(self.ranges(), deltas)))

    # ==============================================================
    # Enumeration
    # ==============================================================

    def stream(self) -> Iterator[Vector]:
        """All points of the box in lexicographic order, the last axis varying fastest."""
        if self.is_empty():
            return iter(())
        return (Vector(*coords) for coords in itertools.product(*self.ranges()))

    def __iter__(self) -> Iterator[Vector]:
        return self.stream()

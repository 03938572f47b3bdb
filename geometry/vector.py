"""
Integer vectors of any dimension greater than one.
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator


class Vector(tuple[int, ...]):
    """
    Immutable integer vector with lexicographic ordering.

    Vectors are tuples, so they hash, compare and unpack like tuples. The
    arithmetic operators are redefined as vector operations and require
    operands of the same dimension.
    """

    def __new__(cls, *coords: int) -> Vector:
        if len(coords) < 2:
            raise ValueError(f"A vector needs at least two coordinates, got {len(coords)}")
        return super().__new__(cls, coords)

    def __getnewargs__(self) -> tuple[int, ...]:
        return tuple(self)

    @classmethod
    def origin(cls, dim: int) -> Vector:
        return cls(*([0] * dim))

    def __repr__(self) -> str:
        return f"Vector{tuple.__repr__(self)}"

    def __str__(self) -> str:
        return "(" + ", ".join(map(str, self)) + ")"

    @property
    def dim(self) -> int:
        return len(self)

    @property
    def x(self) -> int:
        return self[0]

    @property
    def y(self) -> int:
        return self[1]

    @property
    def z(self) -> int:
        return self[2]

    def with_coord(self, k: int, value: int) -> Vector:
        """A copy of this vector whose k-th coordinate is `value`."""
        coords = list(self)
        coords[k] = value
        return Vector(*coords)

    # ==============================================================
    # Arithmetic
    # ==============================================================

    def _check_dim(self, other: tuple[int, ...]) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"Vectors have different dimensions: {len(self)} and {len(other)}"
            )

    def plus(self, other: tuple[int, ...]) -> Vector:
        self._check_dim(other)
        return Vector(*(a + b for a, b in zip(self, other)))

    def minus(self, other: tuple[int, ...]) -> Vector:
        self._check_dim(other)
        return Vector(*(a - b for a, b in zip(self, other)))

    def opposite(self) -> Vector:
        return Vector(*(-a for a in self))

    def multiply(self, factor: int) -> Vector:
        return Vector(*(factor * a for a in self))

    def __add__(self, other: tuple[int, ...]) -> Vector:  # type: ignore[override]
        return self.plus(other)

    def __sub__(self, other: tuple[int, ...]) -> Vector:
        return self.minus(other)

    def __neg__(self) -> Vector:
        return self.opposite()

    def __mul__(self, factor: int) -> Vector:  # type: ignore[override]
        return self.multiply(factor)

    __rmul__ = __mul__

    # ==============================================================
    # Metrics
    # ==============================================================

    def _delta(self, other: Vector | None) -> Vector:
        return self if other is None else other.minus(self)

    def dist1(self, other: Vector | None = None) -> int:
        return sum(abs(c) for c in self._delta(other))

    def dist_max(self, other: Vector | None = None) -> int:
        return max(abs(c) for c in self._delta(other))

    def dist_sq(self, other: Vector | None = None) -> int:
        return sum(c * c for c in self._delta(other))

    def dist2(self, other: Vector | None = None) -> float:
        return math.sqrt(self.dist_sq(other))

    # ==============================================================
    # Neighborhood
    # ==============================================================

    def neighbors(self) -> Iterator[Vector]:
        """The 2*dim vectors at Manhattan distance one, in ascending order."""
        return (v for v in self.neighbors_and_self() if v is not self)

    def neighbors_and_self(self) -> Iterator[Vector]:
        for k in range(self.dim):
            yield self.with_coord(k, self[k] - 1)
        yield self
        for k in reversed(range(self.dim)):
            yield self.with_coord(k, self[k] + 1)

    def extended_neighbors(self) -> Iterator[Vector]:
        """The 3**dim - 1 vectors at Chebyshev distance one, in ascending order."""
        return (v for v in self.extended_neighbors_and_self() if v != self)

    def extended_neighbors_and_self(self) -> Iterator[Vector]:
        for deltas in itertools.product((-1, 0, 1), repeat=self.dim):
            yield Vector(*(c + d for c, d in zip(self, deltas)))

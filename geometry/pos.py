"""
Integer positions in the plane.

Pos is an immutable (x, y) pair in screen coordinates (y grows downward) with
lexicographic ordering, vector arithmetic, metrics and neighborhood queries.
Cell is the same notion addressed as (row, col).
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from geometry.directions import Dir, Dir8
from geometry.ranges import Range

type Direction = Dir | Dir8 | str


def _to_delta(direction: Direction) -> tuple[int, int]:
    if isinstance(direction, str):
        direction = Dir.from_char(direction)
    return direction.delta


class Pos(NamedTuple):
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    # ==============================================================
    # Arithmetic
    # ==============================================================

    def _check_dim(self, other: tuple[int, ...]) -> None:
        if len(other) != 2:
            raise ValueError(f"Vectors have different dimensions: 2 and {len(other)}")

    def plus(self, other: Pos | tuple[int, int]) -> Pos:
        self._check_dim(other)
        return Pos(self.x + other[0], self.y + other[1])

    def minus(self, other: Pos | tuple[int, int]) -> Pos:
        self._check_dim(other)
        return Pos(self.x - other[0], self.y - other[1])

    def plus_dir(self, direction: Direction, count: int = 1) -> Pos:
        """Move `count` steps towards `direction`."""
        dx, dy = _to_delta(direction)
        return Pos(self.x + count * dx, self.y + count * dy)

    def opposite(self) -> Pos:
        return Pos(-self.x, -self.y)

    def multiply(self, factor: int) -> Pos:
        return Pos(self.x * factor, self.y * factor)

    def with_x(self, x: int) -> Pos:
        return Pos(x, self.y)

    def with_y(self, y: int) -> Pos:
        return Pos(self.x, y)

    def __add__(self, other: Pos | tuple[int, int]) -> Pos:  # type: ignore[override]
        return self.plus(other)

    def __sub__(self, other: Pos | tuple[int, int]) -> Pos:
        return self.minus(other)

    def __neg__(self) -> Pos:
        return self.opposite()

    def __mul__(self, factor: int) -> Pos:  # type: ignore[override]
        return self.multiply(factor)

    __rmul__ = __mul__

    # ==============================================================
    # Rigid maps around the origin
    # ==============================================================

    def rotate_left(self) -> Pos:
        return Pos(-self.y, self.x)

    def rotate_right(self) -> Pos:
        return Pos(self.y, -self.x)

    def mirror_horizontally(self) -> Pos:
        return Pos(-self.x, self.y)

    def mirror_vertically(self) -> Pos:
        return Pos(self.x, -self.y)

    def mirror_across(self, center: Pos) -> Pos:
        """Point reflection of this position through `center`."""
        return Pos(2 * center.x - self.x, 2 * center.y - self.y)

    # ==============================================================
    # Metrics
    # ==============================================================

    def dist1(self, other: Pos | None = None) -> int:
        """Manhattan distance, from the origin by default."""
        other = other or ORIGIN
        return abs(other.x - self.x) + abs(other.y - self.y)

    def dist_max(self, other: Pos | None = None) -> int:
        """Chebyshev distance, from the origin by default."""
        other = other or ORIGIN
        return max(abs(other.x - self.x), abs(other.y - self.y))

    def dist_sq(self, other: Pos | None = None) -> int:
        other = other or ORIGIN
        dx, dy = other.x - self.x, other.y - self.y
        return dx * dx + dy * dy

    def dist2(self, other: Pos | None = None) -> float:
        """Euclidean distance, from the origin by default."""
        return math.sqrt(self.dist_sq(other))

    # ==============================================================
    # Neighborhood
    # ==============================================================

    def is_neighbor(self, other: Pos) -> bool:
        return self.dist1(other) == 1

    def is_neighbor8(self, other: Pos) -> bool:
        return self.dist_max(other) == 1

    def neighbor(self, direction: Direction) -> Pos:
        return self.plus_dir(direction)

    def neighbor8(self, direction: Dir8) -> Pos:
        return self.plus_dir(direction)

    def neighbors(self) -> Iterator[Pos]:
        """The four adjacent positions in ascending order."""
        x, y = self
        yield Pos(x - 1, y)
        yield Pos(x, y - 1)
        yield Pos(x, y + 1)
        yield Pos(x + 1, y)

    def neighbors_and_self(self) -> Iterator[Pos]:
        x, y = self
        yield Pos(x - 1, y)
        yield Pos(x, y - 1)
        yield self
        yield Pos(x, y + 1)
        yield Pos(x + 1, y)

    def neighbors8(self) -> Iterator[Pos]:
        """The eight surrounding positions in ascending order."""
        return (p for p in self.neighbors8_and_self() if p != self)

    def neighbors8_and_self(self) -> Iterator[Pos]:
        x, y = self
        for dx, dy in itertools.product((-1, 0, 1), repeat=2):
            yield Pos(x + dx, y + dy)

    # ==============================================================
    # Directions, lines and rays
    # ==============================================================

    def dir_to(self, other: Pos) -> Dir:
        """The cardinal direction pointing from this position towards `other`."""
        dx, dy = other.x - self.x, other.y - self.y
        if dx == 0 and dy < 0:
            return Dir.N
        if dx == 0 and dy > 0:
            return Dir.S
        if dy == 0 and dx > 0:
            return Dir.E
        if dy == 0 and dx < 0:
            return Dir.W
        raise ValueError(f"No cardinal direction from {self} to {other}")

    def dir8_to(self, other: Pos) -> Dir8:
        """The compass direction from this position towards `other`."""
        dx, dy = other.x - self.x, other.y - self.y
        if (dx, dy) != (0, 0):
            if dx == 0 or dy == 0:
                return self.dir_to(other).to_dir8()
            if dx == dy:
                return Dir8.NW if dx < 0 else Dir8.SE
            if dx == -dy:
                return Dir8.SW if dx < 0 else Dir8.NE
        raise ValueError(f"No compass direction from {self} to {other}")

    def line_to(self, other: Pos) -> Iterator[Pos]:
        """
        Positions of the segment from this position to `other`, both ends included.

        The two positions must lie on a common horizontal, vertical or
        diagonal line.
        """
        dx, dy = other.x - self.x, other.y - self.y
        if dx != 0 and dy != 0 and abs(dx) != abs(dy):
            raise ValueError(
                f"{self} and {other} are not on a common horizontal, vertical or diagonal line"
            )
        length = max(abs(dx), abs(dy))
        if length == 0:
            return iter((self,))
        step = Pos(dx // length, dy // length)
        return (self + step * i for i in range(length + 1))

    def ray(self, towards: Direction | Pos) -> Iterator[Pos]:
        """
        Infinite sequence of positions stepping away from this one.

        Given a direction, the sequence starts at the neighbor in that
        direction. Given a position, it starts there and keeps the step from
        this position to it. The iterator is lazy; bound it before consuming.
        """
        target = towards if isinstance(towards, Pos) else self.neighbor(towards)
        step = target - self
        if step == ORIGIN:
            raise ValueError(f"Cannot cast a ray from {self} to itself")
        return itertools.accumulate(itertools.repeat(step), initial=target)

    # ==============================================================
    # Collections of positions
    # ==============================================================

    @staticmethod
    def x_range(positions: Iterable[Pos]) -> Range:
        return Range.bound(p.x for p in positions)

    @staticmethod
    def y_range(positions: Iterable[Pos]) -> Range:
        return Range.bound(p.y for p in positions)

    @staticmethod
    def box(min_pos: Pos, max_pos: Pos) -> Iterator[Pos]:
        """All positions of the closed rectangle, ordered by x then y."""
        for x in range(min_pos.x, max_pos.x + 1):
            for y in range(min_pos.y, max_pos.y + 1):
                yield Pos(x, y)

    @staticmethod
    def bounding_box(positions: Iterable[Pos]) -> Iterator[Pos]:
        positions = list(positions)
        if not positions:
            return iter(())
        xs, ys = Pos.x_range(positions), Pos.y_range(positions)
        return Pos.box(Pos(xs.min, ys.min), Pos(xs.max, ys.max))


ORIGIN = Pos(0, 0)


@dataclass(frozen=True, order=True)
class Cell:
    """
    A grid cell addressed by (row, col), ordered row first.

    Cell is not a tuple: it never compares equal to the Pos of the same
    numbers, which names a different cell.
    """

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"

    @staticmethod
    def from_pos(pos: Pos) -> Cell:
        return Cell(pos.y, pos.x)

    def to_pos(self) -> Pos:
        return Pos(self.col, self.row)

    def neighbor(self, direction: Direction) -> Cell:
        return Cell.from_pos(self.to_pos().neighbor(direction))

    def neighbors(self) -> Iterator[Cell]:
        row, col = self.row, self.col
        yield Cell(row - 1, col)
        yield Cell(row, col - 1)
        yield Cell(row, col + 1)
        yield Cell(row + 1, col)

    def neighbors8(self) -> Iterator[Cell]:
        for dr, dc in itertools.product((-1, 0, 1), repeat=2):
            if (dr, dc) != (0, 0):
                yield Cell(self.row + dr, self.col + dc)

    def dist1(self, other: Cell) -> int:
        return abs(other.row - self.row) + abs(other.col - self.col)

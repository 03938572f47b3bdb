"""
Dense rectangular tables addressed by (x, y) positions.

A table stores its cells in a row-major numpy array of shape (height, width),
so the value of cell (x, y) lives at data[y, x]. The shape is fixed once the
table is built: the transformations return new tables.

Cells are always given as (x, y), like the pixels of an image, which is the
transpose of the usual matrix indexing.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, ClassVar, Generic

import numpy as np

from errors import ValueNotFoundError
from geometry.box import Box
from geometry.directions import Dir, Dir8
from geometry.pos import Cell, Pos
from localtypes import V
from paths.graph import Graph


def _to_pos(pos: tuple[int, int] | Cell) -> Pos:
    """Cells given as (row, col) are converted to (x, y)."""
    return pos.to_pos() if isinstance(pos, Cell) else Pos(*pos)


class Table(Generic[V]):
    """
    Table of arbitrary Python values.

    Subclasses specialise the numpy dtype of the storage and the validation
    of the stored values.
    """

    dtype: ClassVar[Any] = object
    default_fill: ClassVar[Any] = None

    def __init__(self, data: np.ndarray):
        if data.ndim != 2:
            raise ValueError(f"Table data must be two-dimensional, got shape {data.shape}")
        self._data = data

    # ==============================================================
    # Construction
    # ==============================================================

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return value

    @classmethod
    def _blank(cls, width: int, height: int, fill: Any) -> np.ndarray:
        if width < 0 or height < 0:
            raise ValueError(f"Negative table size: {width}x{height}")
        data = np.empty((height, width), dtype=cls.dtype)
        data.fill(cls._coerce(fill))
        return data

    @classmethod
    def filled(cls, width: int, height: int, value: V | None = None) -> Table[V]:
        """A width x height table whose cells all hold `value`."""
        if value is None:
            value = cls.default_fill
        return cls(cls._blank(width, height, value))

    @classmethod
    def from_function(
        cls, width: int, height: int, function: Callable[[Pos], V]
    ) -> Table[V]:
        """A width x height table whose cell p holds function(p)."""
        data = cls._blank(width, height, cls.default_fill)
        for y, x in itertools.product(range(height), range(width)):
            data[y, x] = cls._coerce(function(Pos(x, y)))
        return cls(data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[V]]) -> Table[V]:
        """A table whose row y is rows[y]. All the rows must have the same length."""
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise ValueError(f"Rows have different lengths: {sorted(lengths)}")
        width = lengths.pop() if lengths else 0
        data = cls._blank(width, len(rows), cls.default_fill)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                data[y, x] = cls._coerce(value)
        return cls(data)

    @classmethod
    def wrap(
        cls,
        cells: Iterable[Pos] | Mapping[Pos, V],
        value: V | None = None,
        fill: V | None = None,
    ) -> Table[V]:
        """
        Table spanning the bounding box of the given positions.

        The box is shifted so that its top left corner becomes (0, 0). Given a
        mapping, each position holds its mapped value; given positions, they
        all hold `value`. The other cells hold `fill`.
        """
        if isinstance(cells, Mapping):
            assignments = dict(cells)
        else:
            assignments = dict.fromkeys(cells, value)
        box = Box.bound(assignments)
        corner = Pos(box.min.x, box.min.y)
        table = cls.filled(box.max.x - corner.x + 1, box.max.y - corner.y + 1, fill)
        for pos, item in assignments.items():
            table[Pos(*pos) - corner] = item
        return table

    def copy(self) -> Table[V]:
        return type(self)(self._data.copy())

    def _new(self, data: np.ndarray) -> Table[V]:
        return type(self)(data.copy())

    # ==============================================================
    # Shape
    # ==============================================================

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> int:
        return self._data.size

    def is_empty(self) -> bool:
        return self.size == 0

    def contains_cell(self, pos: tuple[int, int] | Cell) -> bool:
        x, y = _to_pos(pos)
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, pos: tuple[int, int] | Cell) -> tuple[int, int]:
        if not self.contains_cell(pos):
            raise IndexError(
                f"Cell {pos} is outside the table of size {self.width}x{self.height}"
            )
        x, y = _to_pos(pos)
        return y, x

    @staticmethod
    def _item(value: Any) -> Any:
        return value.item() if isinstance(value, np.generic) else value

    # ==============================================================
    # Cell values
    # ==============================================================

    def get(self, pos: tuple[int, int]) -> V:
        return self._item(self._data[self._index(pos)])

    def set(self, pos: tuple[int, int], value: V) -> None:
        self._data[self._index(pos)] = self._coerce(value)

    def __getitem__(self, pos: tuple[int, int]) -> V:
        return self.get(pos)

    def __setitem__(self, pos: tuple[int, int], value: V) -> None:
        self.set(pos, value)

    def update(self, pos: tuple[int, int], function: Callable[[V], V]) -> V:
        """Replace the value of a cell by function(value) and return the new value."""
        value = function(self.get(pos))
        self.set(pos, value)
        return self.get(pos)

    def fill(self, value: V) -> None:
        self._data.fill(self._coerce(value))

    def values(self) -> Iterator[V]:
        """All the values in row-major order."""
        return (self._item(v) for v in self._data.flat)

    def row_values(self, y: int) -> Iterator[V]:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} is outside the table of height {self.height}")
        return (self._item(v) for v in self._data[y, :])

    def col_values(self, x: int) -> Iterator[V]:
        if not 0 <= x < self.width:
            raise IndexError(f"Column {x} is outside the table of width {self.width}")
        return (self._item(v) for v in self._data[:, x])

    def to_rows(self) -> list[list[V]]:
        return [list(self.row_values(y)) for y in range(self.height)]

    def as_array(self) -> np.ndarray:
        """A copy of the underlying (height, width) array."""
        return self._data.copy()

    def _mask(self, value: V) -> np.ndarray:
        mask = np.zeros(self._data.shape, dtype=bool)
        for index, item in np.ndenumerate(self._data):
            mask[index] = item == value
        return mask

    def count(self, value: V) -> int:
        return int(np.count_nonzero(self._mask(value)))

    def find_all(self, value: V) -> Iterator[Pos]:
        """The cells holding `value`, in row-major order."""
        return (Pos(int(x), int(y)) for y, x in np.argwhere(self._mask(value)))

    def find(self, value: V) -> Pos:
        """The first cell holding `value` in row-major order."""
        found = next(self.find_all(value), None)
        if found is None:
            raise ValueNotFoundError(f"Value {value!r} not found in the table")
        return found

    # ==============================================================
    # Cell streams
    # ==============================================================

    def cells(self) -> Iterator[Pos]:
        """All the cells in row-major order."""
        return (Pos(x, y) for y in range(self.height) for x in range(self.width))

    def row(self, y: int) -> Iterator[Pos]:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} is outside the table of height {self.height}")
        return (Pos(x, y) for x in range(self.width))

    def col(self, x: int) -> Iterator[Pos]:
        if not 0 <= x < self.width:
            raise IndexError(f"Column {x} is outside the table of width {self.width}")
        return (Pos(x, y) for y in range(self.height))

    def first_row(self) -> Iterator[Pos]:
        return self.row(0)

    def last_row(self) -> Iterator[Pos]:
        return self.row(self.height - 1)

    def first_col(self) -> Iterator[Pos]:
        return self.col(0)

    def last_col(self) -> Iterator[Pos]:
        return self.col(self.width - 1)

    def border(self) -> Iterator[Pos]:
        """The cells of the first and last rows and columns, each listed once."""
        if self.width <= 2 or self.height <= 2:
            return self.cells()
        inner = range(1, self.height - 1)
        return itertools.chain(
            self.first_row(),
            self.last_row(),
            (Pos(0, y) for y in inner),
            (Pos(self.width - 1, y) for y in inner),
        )

    def cells_in(self, box: Box) -> Iterator[Pos]:
        """The cells of a 2D box clipped to this table, in row-major order."""
        clipped = box.intersection(Box((0, 0), (self.width - 1, self.height - 1)))
        if clipped.is_empty():
            return iter(())
        xs, ys = clipped.ranges()
        return (Pos(x, y) for y in ys for x in xs)

    def top_left(self) -> Pos:
        return Pos(0, 0)

    def top_right(self) -> Pos:
        return Pos(self.width - 1, 0)

    def bottom_left(self) -> Pos:
        return Pos(0, self.height - 1)

    def bottom_right(self) -> Pos:
        return Pos(self.width - 1, self.height - 1)

    # ==============================================================
    # Neighborhood
    # ==============================================================

    def neighbors(self, pos: Pos) -> Iterator[Pos]:
        return filter(self.contains_cell, _to_pos(pos).neighbors())

    def neighbors_and_self(self, pos: Pos) -> Iterator[Pos]:
        return filter(self.contains_cell, _to_pos(pos).neighbors_and_self())

    def neighbors8(self, pos: Pos) -> Iterator[Pos]:
        return filter(self.contains_cell, _to_pos(pos).neighbors8())

    def neighbors8_and_self(self, pos: Pos) -> Iterator[Pos]:
        return filter(self.contains_cell, _to_pos(pos).neighbors8_and_self())

    def ray(self, pos: Pos, towards: Dir | Dir8 | str | Pos) -> Iterator[Pos]:
        """
        The cells beyond `pos` in a direction, up to the edge of the table.

        The direction is either given explicitly or by a second cell, whose
        offset from `pos` is the step of the ray.
        """
        return itertools.takewhile(self.contains_cell, _to_pos(pos).ray(towards))

    def graph(self, value_filter: Callable[[V], bool] | None = None) -> Graph[Pos]:
        """Graph of side-adjacent cells, restricted to cells whose value passes the filter."""
        graph = Graph.of(self.neighbors)
        if value_filter is None:
            return graph
        return graph.filter_nodes(lambda p: value_filter(self.get(p)))

    def graph8(self, value_filter: Callable[[V], bool] | None = None) -> Graph[Pos]:
        graph = Graph.of(self.neighbors8)
        if value_filter is None:
            return graph
        return graph.filter_nodes(lambda p: value_filter(self.get(p)))

    # ==============================================================
    # Transformations
    # ==============================================================

    def mirror_horizontally(self) -> Table[V]:
        """Flip the x indices: new (x, y) is old (width-1-x, y)."""
        return self._new(np.fliplr(self._data))

    def mirror_vertically(self) -> Table[V]:
        """Flip the y indices: new (x, y) is old (x, height-1-y)."""
        return self._new(np.flipud(self._data))

    def rotate_right(self) -> Table[V]:
        """Rotate clockwise: new (x, y) is old (y, height-1-x)."""
        return self._new(np.rot90(self._data, k=-1))

    def rotate_left(self) -> Table[V]:
        """Rotate counter-clockwise: new (x, y) is old (width-1-y, x)."""
        return self._new(np.rot90(self._data, k=1))

    def transpose(self) -> Table[V]:
        return self._new(self._data.T)

    def extend(self, dx: int, dy: int | None = None, fill: V | None = None) -> Table[V]:
        """
        Grow the table by dx columns on the left and right and dy rows on top
        and bottom. Negative amounts shrink the table.

        With dy omitted, both axes use dx. New cells hold `fill`.
        """
        if dy is None:
            dy = dx
        width, height = self.width + 2 * dx, self.height + 2 * dy
        if width < 0 or height < 0:
            raise ValueError(f"Negative table size: {width}x{height}")
        if (dx < 0 or dy < 0) and (width == 0 or height == 0):
            raise ValueError(f"Shrinking by ({dx}, {dy}) leaves an empty table")

        data = self._blank(width, height, self.default_fill if fill is None else fill)
        x0, x1 = max(0, -dx), min(self.width, width - dx)
        y0, y1 = max(0, -dy), min(self.height, height - dy)
        if x0 < x1 and y0 < y1:
            data[y0 + dy : y1 + dy, x0 + dx : x1 + dx] = self._data[y0:y1, x0:x1]
        return type(self)(data)

    # ==============================================================
    # Equality and display
    # ==============================================================

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}x{self.height})"

    def __str__(self) -> str:
        return "".join(
            " ".join(str(v) for v in self.row_values(y)) + "\n" for y in range(self.height)
        )

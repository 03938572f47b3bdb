"""
Tables of integers, with vectorised aggregates.
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np

from tables.table import Table


class IntTable(Table[int]):
    """Table of 64-bit integers."""

    dtype: ClassVar[Any] = np.int64
    default_fill: ClassVar[Any] = 0

    @classmethod
    def _coerce(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"An IntTable cell holds an integer, got {value!r}")
        return int(value)

    def _mask(self, value: int) -> np.ndarray:
        return self._data == value

    def inc(self, pos: tuple[int, int]) -> int:
        """Increment the value of a cell and return the new value."""
        return self.update(pos, lambda v: v + 1)

    def _check_not_empty(self, operation: str) -> None:
        if self.is_empty():
            raise ValueError(f"Cannot compute the {operation} of an empty table")

    def min(self) -> int:
        self._check_not_empty("minimum")
        return int(self._data.min())

    def max(self) -> int:
        self._check_not_empty("maximum")
        return int(self._data.max())

    def sum(self) -> int:
        return int(self._data.sum())

    def __str__(self) -> str:
        width = max((len(str(v)) for v in self.values()), default=0)
        return "".join(
            " ".join(str(v).rjust(width) for v in self.row_values(y)) + "\n"
            for y in range(self.height)
        )

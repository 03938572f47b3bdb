"""
Tables of single characters, the usual shape of puzzle inputs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

import numpy as np

from tables.table import Table


class CharTable(Table[str]):
    """Table whose cells each hold exactly one character."""

    dtype: ClassVar[Any] = "<U1"
    default_fill: ClassVar[Any] = " "

    @classmethod
    def _coerce(cls, value: Any) -> str:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"A CharTable cell holds a single character, got {value!r}")
        return value

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> CharTable:
        """Table whose row y is lines[y]. All lines must have the same length."""
        return cls.from_rows([list(line) for line in lines])

    @classmethod
    def from_text(cls, text: str) -> CharTable:
        return cls.from_strings(text.splitlines())

    def _mask(self, value: str) -> np.ndarray:
        return self._data == value

    def row_string(self, y: int) -> str:
        return "".join(self.row_values(y))

    def col_string(self, x: int) -> str:
        return "".join(self.col_values(x))

    def __str__(self) -> str:
        return "".join(self.row_string(y) + "\n" for y in range(self.height))

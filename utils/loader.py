"""
Module used to load textual grids from files
"""

import logging
from pathlib import Path

from localtypes import Lines
from tables.char_table import CharTable

logger = logging.getLogger(__name__)


def read_lines(path: str | Path) -> Lines:
    """Lines of a text file, without line endings or trailing blank lines."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def load_char_table(path: str | Path) -> CharTable:
    """
    Load a grid file as a CharTable, one row per line.

    All the lines must have the same length.
    """
    lines = read_lines(path)
    table = CharTable.from_strings(lines)
    logger.debug(f"Loaded {table.width}x{table.height} grid from {path}")
    return table

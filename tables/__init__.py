"""
Dense 2D tables addressed by Pos.

Modules:
    table       - Generic table of Python values
    char_table  - Table of single characters
    int_table   - Table of integers
"""

from tables.char_table import CharTable
from tables.int_table import IntTable
from tables.table import Table

__all__ = ["CharTable", "IntTable", "Table"]

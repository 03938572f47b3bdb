"""
Coordinate primitives.

Modules:
    directions  - Dir and Dir8 compass directions
    pos         - Pos (x, y) and Cell (row, col) positions
    vector      - N-dimensional integer vectors
    ranges      - Closed integer intervals
    box         - Axis-aligned boxes of vectors
"""

from geometry.box import Box
from geometry.directions import Dir, Dir8
from geometry.pos import ORIGIN, Cell, Pos
from geometry.ranges import Range
from geometry.vector import Vector

__all__ = ["Box", "Cell", "Dir", "Dir8", "ORIGIN", "Pos", "Range", "Vector"]

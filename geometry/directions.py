"""
Compass directions in the plane.

Directions use screen coordinates: x grows to the east and y grows to the
south, so north is the displacement (0, -1).

Dir holds the four cardinal directions, Dir8 adds the four diagonals. Both
are closed enumerations whose transformations (opposite, rotations, mirrors)
never leave the enumeration.
"""

from __future__ import annotations

from enum import Enum

from constants import EAST_CHARS, NORTH_CHARS, SOUTH_CHARS, WEST_CHARS


class Dir(Enum):
    """Cardinal direction: N, E, S or W."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    def __str__(self) -> str:
        return self.value

    # ==============================================================
    # Parsing
    # ==============================================================

    @classmethod
    def from_char(cls, char: str) -> Dir:
        """
        Parse a direction from a single character.

        Accepts N/E/S/W, the arrow keys U/R/D/L, the arrow glyphs ^ > v <,
        and their lowercase variants.
        """
        if char in NORTH_CHARS:
            return cls.N
        if char in EAST_CHARS:
            return cls.E
        if char in SOUTH_CHARS:
            return cls.S
        if char in WEST_CHARS:
            return cls.W
        raise ValueError(f"Unknown direction: {char!r}")

    @classmethod
    def from_string(cls, text: str) -> Dir:
        """Parse a direction from a character or a full name such as 'NORTH'."""
        match text.upper():
            case "NORTH":
                return cls.N
            case "EAST":
                return cls.E
            case "SOUTH":
                return cls.S
            case "WEST":
                return cls.W
        if len(text) == 1:
            return cls.from_char(text)
        raise ValueError(f"Unknown direction: {text!r}")

    def to_char(self, lower: bool = False) -> str:
        return self.value.lower() if lower else self.value

    # ==============================================================
    # Geometry
    # ==============================================================

    @property
    def dx(self) -> int:
        match self:
            case Dir.E:
                return 1
            case Dir.W:
                return -1
            case _:
                return 0

    @property
    def dy(self) -> int:
        match self:
            case Dir.N:
                return -1
            case Dir.S:
                return 1
            case _:
                return 0

    @property
    def delta(self) -> tuple[int, int]:
        return self.dx, self.dy

    def to_dir8(self) -> Dir8:
        return Dir8[self.name]

    def is_horizontal(self) -> bool:
        return self in (Dir.E, Dir.W)

    def is_vertical(self) -> bool:
        return self in (Dir.N, Dir.S)

    # ==============================================================
    # Algebra
    # ==============================================================

    def opposite(self) -> Dir:
        match self:
            case Dir.N:
                return Dir.S
            case Dir.E:
                return Dir.W
            case Dir.S:
                return Dir.N
            case Dir.W:
                return Dir.E

    def rotate_right(self) -> Dir:
        """Rotate 90 degrees clockwise."""
        match self:
            case Dir.N:
                return Dir.E
            case Dir.E:
                return Dir.S
            case Dir.S:
                return Dir.W
            case Dir.W:
                return Dir.N

    def rotate_left(self) -> Dir:
        """Rotate 90 degrees counter-clockwise."""
        match self:
            case Dir.N:
                return Dir.W
            case Dir.E:
                return Dir.N
            case Dir.S:
                return Dir.E
            case Dir.W:
                return Dir.S

    def mirror_horizontally(self) -> Dir:
        """Swap east and west."""
        match self:
            case Dir.E:
                return Dir.W
            case Dir.W:
                return Dir.E
            case _:
                return self

    def mirror_vertically(self) -> Dir:
        """Swap north and south."""
        match self:
            case Dir.N:
                return Dir.S
            case Dir.S:
                return Dir.N
            case _:
                return self


class Dir8(Enum):
    """One of the eight compass directions, listed clockwise from north."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, text: str) -> Dir8:
        """Parse one of the eight abbreviations, in upper or lower case."""
        # Mixed case such as "Ne" is rejected
        if text in cls.__members__ or (text.islower() and text.upper() in cls.__members__):
            return cls[text.upper()]
        raise ValueError(f"Unknown direction: {text!r}")

    @property
    def dx(self) -> int:
        match self:
            case Dir8.NE | Dir8.E | Dir8.SE:
                return 1
            case Dir8.NW | Dir8.W | Dir8.SW:
                return -1
            case _:
                return 0

    @property
    def dy(self) -> int:
        match self:
            case Dir8.NW | Dir8.N | Dir8.NE:
                return -1
            case Dir8.SW | Dir8.S | Dir8.SE:
                return 1
            case _:
                return 0

    @property
    def delta(self) -> tuple[int, int]:
        return self.dx, self.dy

    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0

    def to_dir(self) -> Dir:
        """The cardinal direction matching this one, if it is not diagonal."""
        if self.is_diagonal():
            raise ValueError(f"Diagonal direction {self} has no cardinal equivalent")
        return Dir[self.name]

    def opposite(self) -> Dir8:
        match self:
            case Dir8.N:
                return Dir8.S
            case Dir8.NE:
                return Dir8.SW
            case Dir8.E:
                return Dir8.W
            case Dir8.SE:
                return Dir8.NW
            case Dir8.S:
                return Dir8.N
            case Dir8.SW:
                return Dir8.NE
            case Dir8.W:
                return Dir8.E
            case Dir8.NW:
                return Dir8.SE

    def next(self, count: int = 1) -> Dir8:
        """The direction `count` steps of 45 degrees clockwise from this one."""
        members = _DIR8_CYCLE
        return members[(members.index(self) + count) % len(members)]

    def prev(self, count: int = 1) -> Dir8:
        """The direction `count` steps of 45 degrees counter-clockwise."""
        return self.next(-count)

    def rotate_right(self) -> Dir8:
        return self.next(2)

    def rotate_left(self) -> Dir8:
        return self.prev(2)

    def mirror_horizontally(self) -> Dir8:
        match self:
            case Dir8.NE:
                return Dir8.NW
            case Dir8.E:
                return Dir8.W
            case Dir8.SE:
                return Dir8.SW
            case Dir8.SW:
                return Dir8.SE
            case Dir8.W:
                return Dir8.E
            case Dir8.NW:
                return Dir8.NE
            case _:
                return self

    def mirror_vertically(self) -> Dir8:
        match self:
            case Dir8.N:
                return Dir8.S
            case Dir8.NE:
                return Dir8.SE
            case Dir8.SE:
                return Dir8.NE
            case Dir8.S:
                return Dir8.N
            case Dir8.SW:
                return Dir8.NW
            case Dir8.NW:
                return Dir8.SW
            case _:
                return self


_DIR8_CYCLE: tuple[Dir8, ...] = tuple(Dir8)

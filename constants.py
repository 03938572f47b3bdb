"""
Global constants used throughout the project
"""

from typing import Final

# Characters accepted for each of the four cardinal directions (y axis down)
NORTH_CHARS: Final = frozenset("nNuU^")
EAST_CHARS: Final = frozenset("eErR>")
SOUTH_CHARS: Final = frozenset("sSdDvV")
WEST_CHARS: Final = frozenset("wWlL<")

# Characters used by textual grids
WALL: Final = "#"
START: Final = "S"
END: Final = "E"

# Rich styles for rendering tables
CELL_STYLE: Final = "grey70"
PATH_STYLE: Final = "bold black on yellow"
ENDPOINT_STYLE: Final = "bold white on red"

LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

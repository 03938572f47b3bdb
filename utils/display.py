"""
Rendering of tables and paths in the terminal.
"""

from collections.abc import Collection, Iterable

from rich.console import Console
from rich.text import Text

from constants import CELL_STYLE, ENDPOINT_STYLE, PATH_STYLE
from geometry.pos import Pos
from paths.result import PathResult
from tables.char_table import CharTable
from tables.table import Table


def _cell_strings(table: Table) -> tuple[list[list[str]], str]:
    """Cell values as padded strings, and the separator to put between cells."""
    rows = [[str(v) for v in row] for row in table.to_rows()]
    if isinstance(table, CharTable):
        return rows, ""
    width = max((len(s) for row in rows for s in row), default=0)
    return [[s.rjust(width) for s in row] for row in rows], " "


def table_to_text(
    table: Table,
    highlight: Iterable[Pos] = (),
    style: str = PATH_STYLE,
    endpoints: Collection[Pos] = (),
) -> Text:
    """Convert a table to a Rich Text object, styling the highlighted cells."""
    highlighted = set(highlight)
    rows, separator = _cell_strings(table)

    text = Text()
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if x > 0:
                text.append(separator)
            pos = Pos(x, y)
            if pos in endpoints:
                text.append(cell, style=ENDPOINT_STYLE)
            elif pos in highlighted:
                text.append(cell, style=style)
            else:
                text.append(cell, style=CELL_STYLE)
        text.append("\n")
    return text


def path_to_text(table: Table, result: PathResult[Pos]) -> Text:
    """Render a table with a path found on it, its two ends marked."""
    nodes = result.path()
    return table_to_text(table, highlight=nodes, endpoints={nodes[0], nodes[-1]})


def print_table(
    table: Table,
    result: PathResult[Pos] | None = None,
    console: Console | None = None,
) -> None:
    console = console or Console()
    text = table_to_text(table) if result is None else path_to_text(table, result)
    console.print(text, end="")

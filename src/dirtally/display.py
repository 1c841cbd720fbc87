"""Terminal rendering of disk usage reports."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dirtally.models.entry import Entry, Marker
from dirtally.settings import DEFAULT_GLYPHS
from dirtally.utils import format_size

REPORT_COLUMNS = 3


def _display_name(name: str) -> str:
    """Make undecodable filename bytes printable."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def entry_cells(entry: Entry, glyphs: dict[str, str] | None = None) -> tuple[str, str, str]:
    """Return the (glyph, name, size) cells for one report row."""
    glyphs = glyphs or DEFAULT_GLYPHS
    if entry.marker is Marker.TOTAL:
        glyph = ""
    else:
        glyph = glyphs.get(entry.marker.value, DEFAULT_GLYPHS[entry.marker.value])
    return glyph, _display_name(entry.name), format_size(entry.size)


def render_grid(
    cells: Sequence[str],
    columns: int,
    console: Console | None = None,
    no_wrap: Sequence[int] = (),
) -> None:
    """Lay out a flat sequence of cells in a grid of *columns* columns.

    Cells flow left to right, top to bottom, separated by a single space.
    A short final row is padded with empty cells.  Text that does not fit
    the console width is folded onto further lines, never clipped; columns
    listed in *no_wrap* keep their full width on one line.
    """
    if columns < 1:
        raise ValueError(f"columns must be positive, got {columns}")
    console = console or Console()

    grid = Table.grid(padding=(0, 1, 0, 0))
    for index in range(columns):
        grid.add_column(overflow="fold", no_wrap=index in no_wrap)

    padded = list(cells)
    if len(padded) % columns:
        padded.extend([""] * (columns - len(padded) % columns))
    for start in range(0, len(padded), columns):
        grid.add_row(*(Text(cell) for cell in padded[start:start + columns]))

    console.print(grid)


def print_report(
    entries: Sequence[Entry],
    glyphs: dict[str, str] | None = None,
    console: Console | None = None,
) -> None:
    """Print *entries* in order as glyph / name / size rows."""
    cells: list[str] = []
    for entry in entries:
        cells.extend(entry_cells(entry, glyphs))
    render_grid(cells, REPORT_COLUMNS, console, no_wrap=(0, 2))

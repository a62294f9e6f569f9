"""Column-aligned text blocks rendered with rich grids.

Rows written back to back form one block and share column widths, with one
space between columns. Any other text written between rows ends the block.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table
from rich.text import Text

# Wide enough that no cell is ever wrapped or truncated.
_CONSOLE_WIDTH = 4096


def render_grid(rows: list[tuple[str, ...]], padding: int = 1) -> str:
    """Render *rows* as one aligned block, one line per row."""
    grid = Table.grid(padding=(0, padding))
    for cells in rows:
        grid.add_row(*(Text(cell) for cell in cells))

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=_CONSOLE_WIDTH,
        color_system=None,
        highlight=False,
        markup=False,
        emoji=False,
    )
    console.print(grid)
    # rich pads the last column to its width; report lines carry no trailing spaces
    return "".join(line.rstrip(" ") + "\n" for line in buffer.getvalue().splitlines())


class GridWriter:
    """Collects rows and free text; aligns each run of rows on getvalue()."""

    def __init__(self, padding: int = 1) -> None:
        self.padding = padding
        self._parts: list[str] = []
        self._rows: list[tuple[str, ...]] = []

    def _flush(self) -> None:
        if self._rows:
            self._parts.append(render_grid(self._rows, self.padding))
            self._rows = []

    def write(self, text: str) -> None:
        self._flush()
        self._parts.append(text)

    def row(self, *cells: str) -> None:
        self._rows.append(cells)

    def getvalue(self) -> str:
        self._flush()
        return "".join(self._parts)

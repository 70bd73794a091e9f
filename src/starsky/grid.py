"""Text rendering of the star grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starsky.constants import CELL_BLANK, GRID_COLS, GRID_ROWS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from starsky.stars import Star
    from starsky.themes import SkyTheme


def render_grid(
    stars: Iterable[Star],
    *,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
) -> str:
    """Render ``stars`` as ``rows`` newline-terminated lines of ``cols`` cells.

    Hidden and out-of-bounds stars are skipped. When two visible stars share a
    cell, the later one in iteration order wins.
    """
    cells: dict[tuple[int, int], str] = {}
    for star in stars:
        if star.visible and 0 <= star.x < cols and 0 <= star.y < rows:
            cells[(star.y, star.x)] = star.symbol

    lines = []
    for row in range(rows):
        line = "".join(cells.get((row, col), CELL_BLANK) for col in range(cols))
        lines.append(line + "\n")
    return "".join(lines)


def render_header(theme: SkyTheme) -> str:
    return f"Theme: {theme.name} | Press 1,2,3 to change | q to quit"

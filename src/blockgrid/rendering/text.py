"""Plain-text rendering of a grid, used by the debug script and in tests."""
from __future__ import annotations

from typing import List

from blockgrid.components.cell import EMPTY
from blockgrid.components.grid import Grid

EMPTY_GLYPH = "."


def cell_id(x: int, y: int) -> str:
    return f"block_{x}x{y}"


def glyph_for(colour) -> str:
    if colour is EMPTY:
        return EMPTY_GLYPH
    return colour[0].upper()


def render_rows(grid: Grid) -> List[str]:
    """One string per row, top row (y == height - 1) first."""
    rows: List[str] = []
    for y in range(grid.height - 1, -1, -1):
        rows.append("".join(glyph_for(grid.colour_at(x, y)) for x in range(grid.width)))
    return rows


def render_text(grid: Grid) -> str:
    return "\n".join(render_rows(grid))

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from blockgrid.colouring import uniform_colour_policy
from blockgrid.components.cell import Colour
from blockgrid.components.grid import Grid


def columns_grid(*columns: Sequence[Colour]) -> Grid:
    """Grid from column lists given bottom to top."""
    return Grid.from_columns([list(column) for column in columns])


def paint(grid: Grid, positions: Iterable[Tuple[int, int]], colour: Colour) -> None:
    for x, y in positions:
        grid.set_colour_at(x, y, colour)


def uniform_grid(width: int, height: int, colour: Colour = 'grey') -> Grid:
    return Grid(width, height, uniform_colour_policy(colour))

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Marker for "no tile present".
EMPTY = None

Colour = Optional[str]


@dataclass(frozen=True, slots=True)
class GridPosition:
    x: int
    y: int


@dataclass(slots=True)
class Cell:
    """A single grid slot.

    ``position`` is fixed at creation; only ``colour`` changes over the
    lifetime of the grid. ``colour`` is a palette name or ``EMPTY``.
    """
    position: GridPosition
    colour: Colour = EMPTY

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def is_empty(self) -> bool:
        return self.colour is EMPTY


class CellView:
    """Read-only face of a Cell handed out by Grid; colour changes go through the grid."""
    __slots__ = ("_cell",)

    def __init__(self, cell: Cell):
        self._cell = cell

    @property
    def position(self) -> GridPosition:
        return self._cell.position

    @property
    def x(self) -> int:
        return self._cell.x

    @property
    def y(self) -> int:
        return self._cell.y

    @property
    def colour(self) -> Colour:
        return self._cell.colour

    @property
    def is_empty(self) -> bool:
        return self._cell.is_empty

    def __repr__(self) -> str:
        return f"CellView(x={self.x}, y={self.y}, colour={self.colour!r})"

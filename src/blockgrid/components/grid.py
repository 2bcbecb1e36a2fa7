from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from blockgrid.colouring import ColourPolicy, columns_colour_policy, random_colour_policy
from blockgrid.components.cell import EMPTY, Cell, CellView, Colour, GridPosition
from blockgrid.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH


class OutOfBounds(IndexError):
    """Raised when a coordinate lies outside the grid's fixed dimensions."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"cell ({x}, {y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Grid:
    """Column-major array of cells, indexed ``grid[x][y]``.

    ``y == 0`` is the bottom row and ``y == height - 1`` the top. The cell
    objects are created once here and never replaced; clearing a cell sets its
    colour to ``EMPTY``. ``grid[x]`` yields read-only CellViews, so colours
    only change through ``set_colour_at``.
    """

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        colour_policy: ColourPolicy | None = None,
    ):
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Grid {label} must be a positive integer, got {value!r}")
        self._width = width
        self._height = height
        policy = colour_policy or random_colour_policy()
        self._cells: List[Tuple[Cell, ...]] = [
            tuple(Cell(GridPosition(x, y), policy(x, y)) for y in range(height))
            for x in range(width)
        ]
        # Callers only ever see read-only views; writes go through set_colour_at.
        self._views: List[Tuple[CellView, ...]] = [
            tuple(CellView(cell) for cell in column) for column in self._cells
        ]

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Colour]]) -> "Grid":
        """Build a grid from column colour lists, each listed bottom to top."""
        if not columns:
            raise ValueError("from_columns needs at least one column")
        height = len(columns[0])
        if any(len(column) != height for column in columns):
            raise ValueError("all columns must have the same height")
        return cls(len(columns), height, columns_colour_policy(columns))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self._width, self._height)
        return self._cells[x][y]

    def colour_at(self, x: int, y: int) -> Colour:
        return self._cell(x, y).colour

    def set_colour_at(self, x: int, y: int, colour: Colour) -> None:
        self._cell(x, y).colour = colour

    def is_empty(self, x: int, y: int) -> bool:
        return self._cell(x, y).is_empty

    def __len__(self) -> int:
        return self._width

    def __getitem__(self, x: int) -> Tuple[CellView, ...]:
        if not isinstance(x, int) or not 0 <= x < self._width:
            raise OutOfBounds(x, 0, self._width, self._height)
        return self._views[x]

    def __iter__(self) -> Iterator[Tuple[CellView, ...]]:
        return iter(self._views)

    def columns(self) -> Tuple[Tuple[CellView, ...], ...]:
        return tuple(self._views)

    def column_colours(self, x: int) -> Tuple[Colour, ...]:
        return tuple(cell.colour for cell in self[x])

    def snapshot(self) -> Tuple[Tuple[Colour, ...], ...]:
        """Immutable copy of every colour, ``snapshot()[x][y]``."""
        return tuple(tuple(cell.colour for cell in column) for column in self._cells)

    def occupied_count(self) -> int:
        return sum(1 for column in self._cells for cell in column if cell.colour is not EMPTY)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

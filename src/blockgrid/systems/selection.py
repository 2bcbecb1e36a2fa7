"""Selection resolution: flood-fill removal followed by per-column gravity.

Every function here works only through the Grid accessors and keeps no state
between calls, so the same functions serve any number of grids.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Set, Tuple

from blockgrid.components.cell import EMPTY, Colour
from blockgrid.components.grid import Grid

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

# Orthogonal neighbours only; diagonals never connect.
DIRECTIONS: Tuple[Position, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    colour: Colour


@dataclass(slots=True)
class SelectionOutcome:
    """Everything one resolution did to the grid."""
    seed: Position
    colour: Colour
    removed: List[Position] = field(default_factory=list)
    moves: List[GravityMove] = field(default_factory=list)

    @property
    def columns(self) -> List[int]:
        return sorted({x for x, _ in self.removed})

    @property
    def changed(self) -> bool:
        return bool(self.removed)


def remove_connected_cells(grid: Grid, x: int, y: int) -> List[Position]:
    """Clear the 4-connected same-colour component containing (x, y).

    Returns the cleared coordinates; an empty seed clears nothing. Raises
    OutOfBounds for a seed outside the grid.
    """
    colour = grid.colour_at(x, y)
    if colour is EMPTY:
        return []
    removed: List[Position] = []
    visited: Set[Position] = set()
    pending: List[Position] = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not grid.in_bounds(cx, cy) or (cx, cy) in visited:
            continue
        visited.add((cx, cy))
        if grid.colour_at(cx, cy) != colour:
            continue
        grid.set_colour_at(cx, cy, EMPTY)
        removed.append((cx, cy))
        for dx, dy in DIRECTIONS:
            pending.append((cx + dx, cy + dy))
    return removed


def compute_gravity_moves(grid: Grid, columns: Iterable[int]) -> List[GravityMove]:
    """Plan the downward slide for each listed column.

    Occupied cells are ranked bottom to top and the n-th one lands on y == n,
    which keeps their relative order and leaves the empties stacked on top.
    """
    moves: List[GravityMove] = []
    for x in sorted(set(columns)):
        filled_rows = [y for y in range(grid.height) if grid.colour_at(x, y) is not EMPTY]
        for target_y, source_y in enumerate(filled_rows):
            if source_y == target_y:
                continue
            moves.append(GravityMove(source=(x, source_y), target=(x, target_y), colour=grid.colour_at(x, source_y)))
    return moves


def apply_gravity_moves(grid: Grid, moves: Iterable[GravityMove]) -> None:
    # Moves within a column arrive ordered by ascending target, so each
    # target is already vacated (or is an earlier move's source) when written.
    for move in moves:
        src_x, src_y = move.source
        dst_x, dst_y = move.target
        grid.set_colour_at(dst_x, dst_y, move.colour)
        grid.set_colour_at(src_x, src_y, EMPTY)


def compact_columns(grid: Grid, removed: Iterable[Position]) -> List[GravityMove]:
    """Apply gravity to every column that lost at least one cell."""
    moves = compute_gravity_moves(grid, (x for x, _ in removed))
    apply_gravity_moves(grid, moves)
    return moves


def run_selection(grid: Grid, x: int, y: int) -> SelectionOutcome:
    colour = grid.colour_at(x, y)
    outcome = SelectionOutcome(seed=(x, y), colour=colour)
    if colour is EMPTY:
        logger.debug("Selection at (%d, %d) ignored: cell is empty", x, y)
        return outcome
    outcome.removed = remove_connected_cells(grid, x, y)
    outcome.moves = compact_columns(grid, outcome.removed)
    logger.debug(
        "Selection at (%d, %d) cleared %d %s cell(s), %d gravity move(s) in columns %s",
        x, y, len(outcome.removed), colour, len(outcome.moves), outcome.columns,
    )
    return outcome


def resolve_selection(grid: Grid, x: int, y: int) -> List[Position]:
    """Remove the component at (x, y), settle its columns, return the cleared cells."""
    return run_selection(grid, x, y).removed

"""Initial colour assignment for freshly built grids.

A colour policy is any callable ``(x, y) -> colour``. The grid calls it once
per cell at construction and never again.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, Sequence, Tuple

from blockgrid.components.cell import Colour

ColourPolicy = Callable[[int, int], Colour]

# Seven distinct colours keyed by the names cells carry.
DEFAULT_PALETTE: Dict[str, Tuple[int, int, int]] = {
    'red': (180, 60, 60),
    'green': (80, 170, 80),
    'blue': (70, 90, 180),
    'yellow': (200, 190, 80),
    'magenta': (170, 80, 160),
    'cyan': (70, 170, 170),
    'orange': (200, 130, 60),
}


def random_colour_policy(
    colours: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> ColourPolicy:
    """Pick every cell's colour uniformly from ``colours``."""
    choices = list(colours) if colours is not None else list(DEFAULT_PALETTE.keys())
    if not choices:
        raise ValueError("random_colour_policy needs at least one colour")
    rng = rng or random.Random()

    def _policy(x: int, y: int) -> Colour:
        return rng.choice(choices)

    return _policy


def uniform_colour_policy(colour: Colour) -> ColourPolicy:
    return lambda x, y: colour


def columns_colour_policy(columns: Sequence[Sequence[Colour]]) -> ColourPolicy:
    """Colour cells from explicit column lists, indexed ``columns[x][y]`` (bottom first)."""

    def _policy(x: int, y: int) -> Colour:
        return columns[x][y]

    return _policy

from __future__ import annotations

from typing import Tuple

from esper import World

from blockgrid.components.grid import Grid
from blockgrid.components.tile_type_registry import TileTypeRegistry
from blockgrid.components.tile_types import TileTypes


def get_tile_registry(world: World) -> TileTypes:
    for entity, _ in world.get_component(TileTypeRegistry):
        return world.component_for_entity(entity, TileTypes)
    raise RuntimeError("TileTypes definitions not found")


def find_grid(world: World) -> Grid | None:
    for _, grid in world.get_component(Grid):
        return grid
    return None


def get_grid(world: World) -> Grid:
    grid = find_grid(world)
    if grid is None:
        raise RuntimeError("Grid component not found")
    return grid


def grid_dimensions(world: World) -> Tuple[int, int] | None:
    """Return (width, height) of the session grid, or None before it exists."""
    grid = find_grid(world)
    if grid is None:
        return None
    return grid.width, grid.height

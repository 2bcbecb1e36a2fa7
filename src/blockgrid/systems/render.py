from __future__ import annotations

from typing import Dict, Tuple

from esper import World

from blockgrid.components.cell import EMPTY
from blockgrid.constants import EMPTY_CELL_COLOR
from blockgrid.events.bus import EventBus
from blockgrid.rendering.text import cell_id
from blockgrid.systems.grid_ops import find_grid, get_tile_registry
from blockgrid.ui.layout import compute_grid_geometry

PADDING = 2
OUTLINE_COLOR = (60, 60, 72)

Rect = Tuple[float, float, float, float]


class RenderSystem:
    """Draws the grid; reads it only through colour_at and its dimensions."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        # cell id -> (left, right, bottom, top) of the last drawn frame
        self._last_layout: Dict[str, Rect] = {}

    def get_cell_rect(self, x: int, y: int) -> Rect | None:
        return self._last_layout.get(cell_id(x, y))

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: with no active window skip draw calls but still build the layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        grid = find_grid(self.world)
        if grid is None:
            return
        registry = get_tile_registry(self.world)
        tile_size, start_x, start_y = compute_grid_geometry(
            self.window.width, self.window.height, grid.width, grid.height
        )
        layout: Dict[str, Rect] = {}
        for x in range(grid.width):
            for y in range(grid.height):
                left = start_x + x * tile_size + PADDING
                bottom = start_y + y * tile_size + PADDING
                right = left + tile_size - 2 * PADDING
                top = bottom + tile_size - 2 * PADDING
                layout[cell_id(x, y)] = (left, right, bottom, top)
                if headless:
                    continue
                colour = grid.colour_at(x, y)
                fill = EMPTY_CELL_COLOR if colour is EMPTY else registry.background_for(colour)
                arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, fill)
                arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, OUTLINE_COLOR, 1)
        self._last_layout = layout

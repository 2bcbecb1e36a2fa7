"""Entry point for the Blockgrid puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from blockgrid.world import create_world
from blockgrid.constants import (
    DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT, WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE,
)
from blockgrid.events.bus import EventBus, EVENT_MOUSE_PRESS
from blockgrid.systems.grid_system import GridSystem
from blockgrid.systems.input import InputSystem
from blockgrid.systems.render import RenderSystem


class BlockgridWindow(Window):
    def __init__(self, width: int = DEFAULT_GRID_WIDTH, height: int = DEFAULT_GRID_HEIGHT):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.grid_system = GridSystem(self.world, self.event_bus, width, height)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    BlockgridWindow()
    run()


if __name__ == "__main__":
    main()

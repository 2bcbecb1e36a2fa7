from blockgrid.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_CELL_CLICK
from blockgrid.systems.grid_ops import grid_dimensions
from blockgrid.ui.layout import cell_at_point

# Arcade reports the left mouse button as 1 (arcade.MOUSE_BUTTON_LEFT).
LEFT_BUTTON = 1

class InputSystem:
    """Turns left clicks on the board into EVENT_CELL_CLICK grid coordinates."""
    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        dims = grid_dimensions(self.world)
        if dims is None:
            return
        cols, rows = dims
        cell = cell_at_point(x, y, self.window.width, self.window.height, cols, rows)
        if cell is None:
            return
        col, row = cell
        self.event_bus.emit(EVENT_CELL_CLICK, x=col, y=row)

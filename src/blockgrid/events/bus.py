from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else holds alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button (window pixels)
EVENT_CELL_CLICK = "cell_click"                    # payload: x, y (grid coordinates)


# ============================================================================
# GRID MECHANICS
# ============================================================================
EVENT_GRID_CREATED = "grid_created"                # payload: width=int, height=int
EVENT_SELECTION_IGNORED = "selection_ignored"      # payload: x, y, reason=str
EVENT_CELLS_CLEARED = "cells_cleared"              # payload: positions=[(x,y),...], colour=str
EVENT_GRAVITY_APPLIED = "gravity_applied"          # payload: moves=[GravityMove,...], columns=[int,...]
EVENT_GRID_CHANGED = "grid_changed"                # payload: reason=str, positions=list[(x,y)]

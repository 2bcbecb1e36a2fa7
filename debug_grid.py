import sys, os
import logging
import random
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
from blockgrid.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_CELLS_CLEARED, EVENT_GRAVITY_APPLIED, EVENT_SELECTION_IGNORED
from blockgrid.world import create_world
from blockgrid.systems.grid_system import GridSystem
from blockgrid.rendering.text import render_text

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s | %(message)s")

seed = int(sys.argv[1]) if len(sys.argv) > 1 else 7
bus = EventBus()
world = create_world(bus, spawnable=['red', 'green', 'blue'], rng=random.Random(seed))
grid_system = GridSystem(world, bus, 8, 6)

received = []
for ev in [EVENT_CELLS_CLEARED, EVENT_GRAVITY_APPLIED, EVENT_SELECTION_IGNORED]:
    bus.subscribe(ev, lambda s, _ev=ev, **k: received.append(_ev))

print(render_text(grid_system.grid))
for x, y in [(0, 0), (3, 2), (0, 0)]:
    bus.emit(EVENT_CELL_CLICK, x=x, y=y)
    print(f'\nafter click ({x}, {y}) events', received)
    print(render_text(grid_system.grid))
    received.clear()

from __future__ import annotations

import logging
from typing import Any

from esper import World

from blockgrid.colouring import ColourPolicy, random_colour_policy
from blockgrid.components.grid import Grid
from blockgrid.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH
from blockgrid.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_CELLS_CLEARED,
    EVENT_GRAVITY_APPLIED,
    EVENT_GRID_CHANGED,
    EVENT_GRID_CREATED,
    EVENT_SELECTION_IGNORED,
)
from blockgrid.systems.grid_ops import get_tile_registry
from blockgrid.systems.selection import SelectionOutcome, run_selection

logger = logging.getLogger(__name__)


class GridSystem:
    """Owns the session grid and resolves cell clicks against it.

    Handlers run synchronously on the bus, so one resolution finishes (and its
    events are emitted) before the next click is looked at.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        *,
        colour_policy: ColourPolicy | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        if colour_policy is None:
            registry = get_tile_registry(world)
            colour_policy = random_colour_policy(registry.spawnable_types(), getattr(world, "random", None))
        self.grid = Grid(width, height, colour_policy)
        # Single grid entity with the Grid component
        self.grid_entity = self.world.create_entity(self.grid)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        logger.debug("Created %dx%d grid on entity %d", width, height, self.grid_entity)
        self.event_bus.emit(EVENT_GRID_CREATED, width=width, height=height)

    def on_cell_click(self, sender: Any, **kwargs: Any) -> None:
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        self.select(x, y)

    def select(self, x: int, y: int) -> SelectionOutcome:
        """Resolve a selection at (x, y) and announce the result on the bus."""
        outcome = run_selection(self.grid, x, y)
        if not outcome.changed:
            self.event_bus.emit(EVENT_SELECTION_IGNORED, x=x, y=y, reason='empty')
            return outcome
        self.event_bus.emit(EVENT_CELLS_CLEARED, positions=list(outcome.removed), colour=outcome.colour)
        if outcome.moves:
            self.event_bus.emit(EVENT_GRAVITY_APPLIED, moves=list(outcome.moves), columns=outcome.columns)
        changed = set(outcome.removed)
        for move in outcome.moves:
            changed.add(move.source)
            changed.add(move.target)
        self.event_bus.emit(EVENT_GRID_CHANGED, reason='selection', positions=sorted(changed))
        return outcome

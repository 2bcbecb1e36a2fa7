import random
from typing import Dict, Sequence, Tuple

from esper import World
from .events.bus import EventBus
from blockgrid.colouring import DEFAULT_PALETTE
from blockgrid.components.tile_type_registry import TileTypeRegistry
from blockgrid.components.tile_types import TileTypes


def create_world(
    event_bus: EventBus,
    *,
    palette: Dict[str, Tuple[int, int, int]] | None = None,
    spawnable: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create the ECS world holding the palette entity.

    The grid itself is added by GridSystem so a session can pick its own dimensions.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single registry entity with the canonical colours.
    world.create_entity(
        TileTypeRegistry(),
        TileTypes(
            types=dict(palette or DEFAULT_PALETTE),
            spawnable=list(spawnable) if spawnable else [],
        ),
    )
    return world

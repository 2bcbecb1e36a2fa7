import random

import pytest

from blockgrid.colouring import columns_colour_policy
from blockgrid.components.cell import EMPTY
from blockgrid.components.grid import Grid, OutOfBounds
from blockgrid.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_CELLS_CLEARED,
    EVENT_GRAVITY_APPLIED,
    EVENT_GRID_CHANGED,
    EVENT_GRID_CREATED,
    EVENT_SELECTION_IGNORED,
)
from blockgrid.systems.grid_ops import get_grid, grid_dimensions
from blockgrid.systems.grid_system import GridSystem
from blockgrid.world import create_world


def _recorder(bus, *names):
    events = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **payload: events.append((_name, payload)))
    return events


def test_grid_component_exists_with_requested_size():
    bus = EventBus()
    world = create_world(bus)
    system = GridSystem(world, bus, 6, 7)
    grids = list(world.get_component(Grid))
    assert len(grids) == 1
    ent, grid = grids[0]
    assert ent == system.grid_entity
    assert grid is system.grid
    assert (grid.width, grid.height) == (6, 7)
    assert grid_dimensions(world) == (6, 7)


def test_default_grid_uses_spawnable_palette_colours():
    bus = EventBus()
    world = create_world(bus, spawnable=['red', 'blue'], rng=random.Random(3))
    GridSystem(world, bus)
    grid = get_grid(world)
    assert (grid.width, grid.height) == (10, 10)
    colours = {colour for column in grid.snapshot() for colour in column}
    assert colours <= {'red', 'blue'}
    assert grid.occupied_count() == 100


def test_seeded_worlds_build_identical_grids():
    grids = []
    for _ in range(2):
        bus = EventBus()
        world = create_world(bus, rng=random.Random(11))
        grids.append(GridSystem(world, bus, 5, 5).grid.snapshot())
    assert grids[0] == grids[1]


def test_grid_created_event_emitted():
    bus = EventBus()
    world = create_world(bus)
    events = _recorder(bus, EVENT_GRID_CREATED)
    GridSystem(world, bus, 3, 4)
    assert events == [(EVENT_GRID_CREATED, {'width': 3, 'height': 4})]


def test_cell_click_resolves_selection_and_reports_it():
    bus = EventBus()
    world = create_world(bus)
    policy = columns_colour_policy([['red', 'red', 'blue'], ['green', 'red', 'green']])
    system = GridSystem(world, bus, 2, 3, colour_policy=policy)
    events = _recorder(bus, EVENT_CELLS_CLEARED, EVENT_GRAVITY_APPLIED, EVENT_GRID_CHANGED)

    bus.emit(EVENT_CELL_CLICK, x=0, y=0)

    names = [name for name, _ in events]
    assert names == [EVENT_CELLS_CLEARED, EVENT_GRAVITY_APPLIED, EVENT_GRID_CHANGED]
    cleared = events[0][1]
    assert cleared['colour'] == 'red'
    assert sorted(cleared['positions']) == [(0, 0), (0, 1), (1, 1)]
    gravity = events[1][1]
    assert gravity['columns'] == [0, 1]
    assert [(m.source, m.target) for m in gravity['moves']] == [((0, 2), (0, 0)), ((1, 2), (1, 1))]
    changed = events[2][1]
    assert changed['reason'] == 'selection'
    assert changed['positions'] == [(0, 0), (0, 1), (0, 2), (1, 1), (1, 2)]
    assert system.grid.column_colours(0) == ('blue', EMPTY, EMPTY)
    assert system.grid.column_colours(1) == ('green', 'green', EMPTY)


def test_cleared_top_cell_skips_gravity_event():
    bus = EventBus()
    world = create_world(bus)
    policy = columns_colour_policy([['red', 'blue']])
    GridSystem(world, bus, 1, 2, colour_policy=policy)
    events = _recorder(bus, EVENT_CELLS_CLEARED, EVENT_GRAVITY_APPLIED, EVENT_GRID_CHANGED)
    bus.emit(EVENT_CELL_CLICK, x=0, y=1)
    assert [name for name, _ in events] == [EVENT_CELLS_CLEARED, EVENT_GRID_CHANGED]


def test_click_on_empty_cell_is_ignored():
    bus = EventBus()
    world = create_world(bus)
    policy = columns_colour_policy([['red', EMPTY]])
    system = GridSystem(world, bus, 1, 2, colour_policy=policy)
    before = system.grid.snapshot()
    events = _recorder(bus, EVENT_SELECTION_IGNORED, EVENT_CELLS_CLEARED, EVENT_GRID_CHANGED)

    bus.emit(EVENT_CELL_CLICK, x=0, y=1)

    assert events == [(EVENT_SELECTION_IGNORED, {'x': 0, 'y': 1, 'reason': 'empty'})]
    assert system.grid.snapshot() == before


def test_click_without_coordinates_is_dropped():
    bus = EventBus()
    world = create_world(bus)
    system = GridSystem(world, bus, 2, 2)
    before = system.grid.snapshot()
    bus.emit(EVENT_CELL_CLICK, x=1)
    assert system.grid.snapshot() == before


def test_out_of_bounds_click_propagates():
    bus = EventBus()
    world = create_world(bus)
    GridSystem(world, bus, 2, 2)
    with pytest.raises(OutOfBounds):
        bus.emit(EVENT_CELL_CLICK, x=5, y=0)


def test_select_returns_outcome():
    bus = EventBus()
    world = create_world(bus)
    policy = columns_colour_policy([['red', 'red']])
    system = GridSystem(world, bus, 1, 2, colour_policy=policy)
    outcome = system.select(0, 1)
    assert sorted(outcome.removed) == [(0, 0), (0, 1)]
    assert system.select(0, 1).removed == []


def test_unchanged_outcome_emits_only_ignored_event():
    bus = EventBus()
    world = create_world(bus)
    policy = columns_colour_policy([['red', EMPTY], [EMPTY, EMPTY]])
    system = GridSystem(world, bus, 2, 2, colour_policy=policy)
    events = _recorder(bus, EVENT_SELECTION_IGNORED, EVENT_CELLS_CLEARED, EVENT_GRID_CHANGED)

    ignored = system.select(1, 0)
    assert not ignored.changed
    assert [name for name, _ in events] == [EVENT_SELECTION_IGNORED]

    cleared = system.select(0, 0)
    assert cleared.changed
    assert [name for name, _ in events] == [EVENT_SELECTION_IGNORED, EVENT_CELLS_CLEARED, EVENT_GRID_CHANGED]

from __future__ import annotations

import random
from typing import Dict, Tuple

from esper import World

from slide2048.components.board import Board
from slide2048.events.bus import EventBus
from slide2048.systems.board_ops import board_values, load_values
from slide2048.world import create_world

Position = Tuple[int, int]


def make_board(
    values: Dict[Position, int] | None = None,
    rows: int = 4,
    cols: int = 4,
    *,
    seed: int = 0,
) -> tuple[World, EventBus]:
    """World holding a bare board with explicit tiles and a seeded RNG."""

    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    world.create_entity(Board(rows=rows, cols=cols))
    if values:
        load_values(world, values)
    return world, bus


def snapshot(world: World) -> Dict[Position, int]:
    return board_values(world)


def grid(world: World, rows: int = 4, cols: int = 4) -> list[list[int]]:
    """Board values as a list of rows with 0 for empty cells."""

    values = board_values(world)
    return [[values.get((r, c), 0) for c in range(cols)] for r in range(rows)]

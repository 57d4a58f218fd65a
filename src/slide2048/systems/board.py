from __future__ import annotations

import logging
import random

from esper import World

from slide2048.components.board import Board
from slide2048.constants import GRID_COLS, GRID_ROWS
from slide2048.events.bus import EventBus, EVENT_BOARD_SEEDED, EVENT_RESTART_REQUEST
from slide2048.systems.board_ops import seed_board

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and (re)seeds it with the two opening tiles."""

    def __init__(self, world: World, event_bus: EventBus, rows: int = GRID_ROWS, cols: int = GRID_COLS,
                 *, seed: bool = True):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, Board(rows=rows, cols=cols))
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart)
        if seed:
            self.reset()

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def reset(self, rng: random.Random | None = None) -> list[int]:
        entities = seed_board(self.world, rng)
        self.event_bus.emit(EVENT_BOARD_SEEDED, entities=entities)
        return entities

    def on_restart(self, sender, **kwargs):
        logger.info("Restarting game")
        self.reset()

from __future__ import annotations

import logging

from esper import World

from slide2048.components.board_position import BoardPosition
from slide2048.components.tile import Tile
from slide2048.events.bus import (
    EventBus,
    EVENT_MOVE_RESOLVED,
    EVENT_SPAWN_REQUEST,
    EVENT_TILE_SPAWNED,
)
from slide2048.systems.board_ops import spawn_tile

logger = logging.getLogger(__name__)


class SpawnSystem:
    """Adds a tile after every move that changed the board, or on demand."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_RESOLVED, self.on_move_resolved)
        self.event_bus.subscribe(EVENT_SPAWN_REQUEST, self.on_spawn_request)

    def on_move_resolved(self, sender, **kwargs):
        if not kwargs.get('moved'):
            return
        self.spawn()

    def on_spawn_request(self, sender, **kwargs):
        self.spawn()

    def spawn(self) -> int | None:
        entity = spawn_tile(self.world)
        if entity is None:
            logger.debug("Board full; nothing spawned")
            return None
        position = self.world.component_for_entity(entity, BoardPosition)
        tile = self.world.component_for_entity(entity, Tile)
        logger.debug("Spawned %d at (%d, %d)", tile.value, position.row, position.col)
        self.event_bus.emit(
            EVENT_TILE_SPAWNED,
            entity=entity,
            row=position.row,
            col=position.col,
            value=tile.value,
        )
        return entity

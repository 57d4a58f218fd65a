"""Tracks whether any move can still change the board."""
import logging

from esper import World

from slide2048.components.game_state import GameMode
from slide2048.events.bus import (
    EventBus,
    EVENT_BOARD_SEEDED,
    EVENT_MOVE_RESOLVED,
    EVENT_NO_MOVES_LEFT,
    EVENT_TILE_SPAWNED,
)
from slide2048.systems.board_ops import get_board
from slide2048.systems.movement import has_legal_move
from slide2048.utils.game_state import current_mode, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Flags a stalled board once no direction can move or merge.

    The stall is only reported; input keeps flowing and moves simply resolve
    to no-ops until the player restarts.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_SPAWNED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_MOVE_RESOLVED, self.on_board_changed)
        self.event_bus.subscribe(EVENT_BOARD_SEEDED, self.on_board_seeded)

    def on_board_seeded(self, sender, **kwargs):
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def on_board_changed(self, sender, **kwargs):
        self.check_stalemate()

    def check_stalemate(self) -> bool:
        if has_legal_move(self.world):
            return False
        if current_mode(self.world) != GameMode.STALLED:
            tiles = len(get_board(self.world).cells)
            logger.info("No moves left with %d tiles on the board", tiles)
            set_game_mode(self.world, self.event_bus, GameMode.STALLED)
            self.event_bus.emit(EVENT_NO_MOVES_LEFT, tiles=tiles)
        return True

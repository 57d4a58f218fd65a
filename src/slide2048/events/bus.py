from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_QUIT_REQUEST = "quit_request"                # payload: None
EVENT_RESTART_REQUEST = "restart_request"          # payload: None
EVENT_SPAWN_REQUEST = "spawn_request"              # payload: None
EVENT_MOVE_REQUEST = "move_request"                # payload: direction=Direction


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_MOVE_RESOLVED = "move_resolved"              # payload: direction=Direction, moved=bool, merged=[(r,c,value),...]
EVENT_TILE_SPAWNED = "tile_spawned"                # payload: entity=int, row=int, col=int, value=int
EVENT_BOARD_SEEDED = "board_seeded"                # payload: entities=[int,...]


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_NO_MOVES_LEFT = "no_moves_left"              # payload: tiles=int

from slide2048.components.direction import Direction
from slide2048.constants import (
    KEY_A, KEY_D, KEY_DOWN, KEY_ESCAPE, KEY_K, KEY_LEFT, KEY_R, KEY_RIGHT, KEY_S, KEY_UP, KEY_W,
)
from slide2048.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOVE_REQUEST,
    EVENT_QUIT_REQUEST,
    EVENT_RESTART_REQUEST,
    EVENT_SPAWN_REQUEST,
)

MOVE_KEYS = {
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_D: Direction.RIGHT,
    KEY_W: Direction.UP,
    KEY_S: Direction.DOWN,
}

ACTION_KEYS = {
    KEY_ESCAPE: EVENT_QUIT_REQUEST,
    KEY_R: EVENT_RESTART_REQUEST,
    KEY_K: EVENT_SPAWN_REQUEST,
}


class InputSystem:
    """Translates key presses into game requests.

    Presses arrive from the window's on_key_press, which fires once per
    physical press, so holding a key never repeats a move.
    """

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(symbol, kwargs.get('modifiers', 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> bool:
        """Emit the request bound to ``symbol``; returns False for unbound keys."""
        event_name = ACTION_KEYS.get(symbol)
        if event_name is not None:
            self.event_bus.emit(event_name)
            return True
        direction = MOVE_KEYS.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
            return True
        return False

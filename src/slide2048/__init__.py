"""Sliding-tile 2048 puzzle built on an esper world and an arcade window."""
from slide2048.components.direction import Direction
from slide2048.events.bus import EventBus
from slide2048.systems.movement import has_legal_move, resolve_move
from slide2048.world import create_world

__all__ = [
    "Direction",
    "EventBus",
    "create_world",
    "has_legal_move",
    "resolve_move",
]

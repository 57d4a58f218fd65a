from __future__ import annotations

import random

from esper import World

from slide2048.components.game_state import GameMode, GameState
from slide2048.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the esper world with its game state resource and session RNG.

    The random source is seeded once here and shared by every spawn in the
    session.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global game state resource.
    world.create_entity(GameState(mode=initial_mode))
    return world

"""Entry point for the 2048 sliding-tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging
import os

from arcade import Window, run, set_background_color

from slide2048.constants import UPDATE_RATE, WINDOW_SIZE, WINDOW_TITLE
from slide2048.events.bus import EVENT_KEY_PRESS, EVENT_QUIT_REQUEST, EVENT_TICK, EventBus
from slide2048.rendering.palette import BACKGROUND_COLOR
from slide2048.systems.animation import AnimationSystem
from slide2048.systems.board import BoardSystem
from slide2048.systems.game_flow_system import GameFlowSystem
from slide2048.systems.input import InputSystem
from slide2048.systems.movement import MovementSystem
from slide2048.systems.render import RenderSystem
from slide2048.systems.spawn import SpawnSystem
from slide2048.world import create_world

LOG_LEVEL_ENV = "SLIDE2048_LOG_LEVEL"


class SlideWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_SIZE, WINDOW_SIZE, WINDOW_TITLE, resizable=False)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Game flow must listen before the board seeds so the opening state is tracked.
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.movement_system = MovementSystem(self.world, self.event_bus)
        self.spawn_system = SpawnSystem(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus)

        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_quit_request(self, sender, **kwargs):
        self.close()


def main():
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    window = SlideWindow()
    run()


if __name__ == "__main__":
    main()

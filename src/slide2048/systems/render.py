from __future__ import annotations

from esper import World

from slide2048.components.game_state import GameMode
from slide2048.constants import NOTICE_FONT_SIZE
from slide2048.events.bus import EventBus, EVENT_GAME_MODE_CHANGED
from slide2048.rendering.board_renderer import BoardRenderer
from slide2048.rendering.context import RenderContext, build_render_context
from slide2048.rendering.palette import FONT_COLOR, NOTICE_BACKDROP_COLOR
from slide2048.systems.board_ops import board_dimensions
from slide2048.utils.game_state import current_mode

NO_MOVES_NOTICE = "No moves left. Press R to restart"


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, self.on_game_mode_changed)
        self.stalled = current_mode(world) == GameMode.STALLED
        self._board_renderer = BoardRenderer()
        self._last_tile_layout: dict[tuple[int, int], dict] = {}

    def on_game_mode_changed(self, sender, **kwargs):
        self.stalled = kwargs.get('new_mode') == GameMode.STALLED

    def process(self):
        # Background cleared by the window prior to on_draw.
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window skip draw calls but still build the layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        dims = board_dimensions(self.world)
        if dims is None:
            return
        rows, cols = dims
        ctx = build_render_context(self.world, self.window.width, self.window.height, rows, cols)
        self._last_tile_layout = {
            (draw.row, draw.col): {
                "entity": draw.entity,
                "value": draw.value,
                "rect": (draw.left, draw.right, draw.bottom, draw.top),
            }
            for draw in ctx.tiles
            if not draw.ghost
        }
        if headless:
            return
        self._board_renderer.render(arcade, ctx)
        if self.stalled:
            self._render_notice(arcade, ctx)


    def _render_notice(self, arcade, ctx: RenderContext) -> None:
        mid_y = ctx.window_height / 2
        band = NOTICE_FONT_SIZE * 2
        arcade.draw_lrbt_rectangle_filled(0, ctx.window_width, mid_y - band, mid_y + band, NOTICE_BACKDROP_COLOR)
        arcade.draw_text(
            NO_MOVES_NOTICE,
            ctx.window_width / 2,
            mid_y,
            FONT_COLOR,
            NOTICE_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
        )

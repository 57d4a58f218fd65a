from __future__ import annotations

from typing import TYPE_CHECKING

from slide2048.constants import OUTLINE_THICKNESS, TILE_FONT_SIZE
from slide2048.rendering.palette import OUTLINE_COLOR, text_color, tile_color

if TYPE_CHECKING:
    from slide2048.rendering.context import RenderContext


class BoardRenderer:
    def render(self, arcade, ctx: RenderContext) -> None:
        for draw in ctx.tiles:
            arcade.draw_lrbt_rectangle_filled(
                draw.left, draw.right, draw.bottom, draw.top, tile_color(draw.value)
            )
            center_x, center_y = draw.center
            # Shrink the label with the tile while it grows in.
            font_size = TILE_FONT_SIZE * min(draw.width / ctx.cell_width, 1.0)
            if font_size >= 1:
                arcade.draw_text(
                    str(draw.value),
                    center_x,
                    center_y,
                    text_color(draw.value),
                    font_size,
                    anchor_x="center",
                    anchor_y="center",
                )
        self.render_grid(arcade, ctx)

    def render_grid(self, arcade, ctx: RenderContext) -> None:
        width = ctx.window_width
        height = ctx.window_height
        for row in range(1, ctx.rows):
            y = height - row * ctx.cell_height
            arcade.draw_line(0, y, width, y, OUTLINE_COLOR, OUTLINE_THICKNESS)
        for col in range(1, ctx.cols):
            x = col * ctx.cell_width
            arcade.draw_line(x, 0, x, height, OUTLINE_COLOR, OUTLINE_THICKNESS)
        arcade.draw_lrbt_rectangle_outline(0, width, 0, height, OUTLINE_COLOR, OUTLINE_THICKNESS * 2)

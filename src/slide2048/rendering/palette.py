"""Colour table for the board; all colours are opaque RGBA tuples."""
import math
from typing import Tuple

Color = Tuple[int, int, int, int]

BACKGROUND_COLOR: Color = (205, 192, 180, 255)
OUTLINE_COLOR: Color = (187, 173, 160, 255)
FONT_COLOR: Color = (119, 110, 101, 255)
LIGHT_FONT_COLOR: Color = (255, 255, 255, 255)
NOTICE_BACKDROP_COLOR: Color = (238, 228, 218, 200)

# Indexed by log2(value) - 1, so 2 -> 0, 4 -> 1, ... 1024 -> 9 and above.
TILE_COLORS: Tuple[Color, ...] = (
    (237, 229, 218, 255),
    (238, 225, 201, 255),
    (243, 178, 122, 255),
    (246, 150, 101, 255),
    (247, 124, 95, 255),
    (247, 95, 59, 255),
    (237, 208, 115, 255),
    (237, 204, 99, 255),
    (237, 202, 80, 255),
    (61, 58, 51, 255),
)


def _exponent(value: int) -> int:
    return max(int(math.log2(value)) - 1, 0)


def tile_color(value: int) -> Color:
    return TILE_COLORS[min(_exponent(value), len(TILE_COLORS) - 1)]


def text_color(value: int) -> Color:
    """Dark text on the two lightest tiles, white from 8 upwards."""
    if _exponent(value) >= 2:
        return LIGHT_FONT_COLOR
    return FONT_COLOR

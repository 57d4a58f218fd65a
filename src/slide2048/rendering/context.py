from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from esper import World

from slide2048.components.board_position import BoardPosition
from slide2048.components.ghost import Ghost
from slide2048.components.tile import Tile
from slide2048.components.tile_sprite import TileSprite


@dataclass(slots=True)
class TileDraw:
    """Arcade-space rectangle (y grows upwards) for one tile this frame."""

    entity: int
    row: int
    col: int
    value: int
    left: float
    bottom: float
    width: float
    height: float
    ghost: bool = False

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    @property
    def center(self) -> tuple[float, float]:
        return self.left + self.width / 2, self.bottom + self.height / 2


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    rows: int
    cols: int
    cell_width: float
    cell_height: float
    tiles: List[TileDraw] = field(default_factory=list)


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    rows: int,
    cols: int,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    cell_width = window_width / cols
    cell_height = window_height / rows
    tiles: List[TileDraw] = []
    for entity, (position, tile, sprite) in world.get_components(BoardPosition, Tile, TileSprite):
        tiles.append(
            TileDraw(
                entity=entity,
                row=position.row,
                col=position.col,
                value=tile.value,
                left=sprite.x,
                bottom=window_height - sprite.y - sprite.height,
                width=sprite.width,
                height=sprite.height,
            )
        )
    for entity, (ghost, sprite) in world.get_components(Ghost, TileSprite):
        tiles.append(
            TileDraw(
                entity=entity,
                row=ghost.row,
                col=ghost.col,
                value=ghost.value,
                left=sprite.x,
                bottom=window_height - sprite.y - sprite.height,
                width=sprite.width,
                height=sprite.height,
                ghost=True,
            )
        )
    # A ghost is half the value of the tile that absorbed it, so it lands underneath.
    tiles.sort(key=lambda draw: (draw.value, draw.entity))
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        rows=rows,
        cols=cols,
        cell_width=cell_width,
        cell_height=cell_height,
        tiles=tiles,
    )

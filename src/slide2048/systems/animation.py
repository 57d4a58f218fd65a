from esper import World

from slide2048.components.board_position import BoardPosition
from slide2048.components.ghost import Ghost
from slide2048.components.tile_sprite import TileSprite
from slide2048.constants import (
    CELL_HEIGHT,
    CELL_WIDTH,
    GROW_DIVISOR,
    MOVE_VELOCITY,
    SNAP_FRACTION,
)
from slide2048.events.bus import EVENT_TICK, EventBus


def _ease_axis(current: float, target: float, step: float, snap: float) -> float:
    distance = abs(target - current)
    if distance < snap or distance <= step:
        return target
    if current > target:
        return current - step
    return current + step


def advance_sprite(
    sprite: TileSprite,
    row: int,
    col: int,
    cell_width: float,
    cell_height: float,
    dt: float,
    *,
    velocity: float = MOVE_VELOCITY,
) -> None:
    """Move a tile's pixel rectangle one frame closer to its logical cell.

    Undersized (freshly spawned) sprites first grow around their centre; only
    a full-size sprite slides, x axis before y axis, snapping onto the target
    once within SNAP_FRACTION of a cell.
    """
    if sprite.width < cell_width:
        prev_w, prev_h = sprite.width, sprite.height
        growth = velocity * dt / GROW_DIVISOR
        sprite.width = min(sprite.width + growth, cell_width)
        sprite.height = min(sprite.height + growth, cell_height)
        sprite.x += (prev_w - sprite.width) / 2
        sprite.y += (prev_h - sprite.height) / 2
        return
    sprite.width = cell_width
    sprite.height = cell_height

    target_x = col * cell_width
    target_y = row * cell_height
    step = velocity * dt
    if sprite.x != target_x:
        sprite.x = _ease_axis(sprite.x, target_x, step, cell_width * SNAP_FRACTION)
    elif sprite.y != target_y:
        sprite.y = _ease_axis(sprite.y, target_y, step, cell_width * SNAP_FRACTION)


class AnimationSystem:
    """Per-frame cosmetic interpolation of tiles and ghosts; never touches logical board state."""

    def __init__(self, world: World, event_bus: EventBus,
                 cell_width: float = CELL_WIDTH, cell_height: float = CELL_HEIGHT):
        self.world = world
        self.event_bus = event_bus
        self.cell_width = cell_width
        self.cell_height = cell_height
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for _, (position, sprite) in self.world.get_components(BoardPosition, TileSprite):
            advance_sprite(sprite, position.row, position.col, self.cell_width, self.cell_height, dt)
        arrived = []
        for entity, (ghost, sprite) in self.world.get_components(Ghost, TileSprite):
            advance_sprite(sprite, ghost.row, ghost.col, self.cell_width, self.cell_height, dt)
            if self._at_rest(sprite, ghost.row, ghost.col):
                arrived.append(entity)
        for entity in arrived:
            self.world.delete_entity(entity, immediate=True)

    def _at_rest(self, sprite: TileSprite, row: int, col: int) -> bool:
        if sprite.width < self.cell_width:
            return False
        return (sprite.x, sprite.y) == (col * self.cell_width, row * self.cell_height)

    def is_settled(self) -> bool:
        for _ in self.world.get_component(Ghost):
            return False
        for _, (position, sprite) in self.world.get_components(BoardPosition, TileSprite):
            if not self._at_rest(sprite, position.row, position.col):
                return False
        return True

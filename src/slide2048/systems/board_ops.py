from __future__ import annotations

import random
from typing import Dict, Iterator, List, Tuple

from esper import World

from slide2048.components.board import Board
from slide2048.components.board_position import BoardPosition
from slide2048.components.ghost import Ghost
from slide2048.components.move_flags import MoveFlags
from slide2048.components.tile import Tile
from slide2048.components.tile_sprite import TileSprite
from slide2048.constants import (
    CELL_HEIGHT,
    CELL_WIDTH,
    SEED_TILE_COUNT,
    SEED_TILE_VALUE,
    SPAWN_FOUR_ODDS,
    SPAWN_SCALE,
)

Position = Tuple[int, int]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    return None


def _world_rng(world: World, rng: random.Random | None) -> random.Random:
    if rng is not None:
        return rng
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    return random.Random()


def tile_at(world: World, row: int, col: int) -> int | None:
    """Return the live tile entity keyed at (row, col), if any."""
    board = get_board(world)
    if not board.contains(row, col):
        return None
    return board.cells.get(board.key_for(row, col))


def iter_tiles(world: World) -> Iterator[Tuple[int, BoardPosition, Tile]]:
    """Yield (entity, position, tile) for every keyed tile in key order."""
    board = get_board(world)
    for key in sorted(board.cells):
        entity = board.cells[key]
        try:
            position = world.component_for_entity(entity, BoardPosition)
            tile = world.component_for_entity(entity, Tile)
        except KeyError:
            continue
        yield entity, position, tile


def board_values(world: World) -> Dict[Position, int]:
    """Return mapping of occupied positions to tile values."""
    return {(position.row, position.col): tile.value for _, position, tile in iter_tiles(world)}


def cell_sprite(row: int, col: int, scale: float = 1.0) -> TileSprite:
    """Sprite rectangle for a cell, shrunk around its centre when scale < 1."""
    width = CELL_WIDTH * scale
    height = CELL_HEIGHT * scale
    x = col * CELL_WIDTH + (CELL_WIDTH - width) / 2
    y = row * CELL_HEIGHT + (CELL_HEIGHT - height) / 2
    return TileSprite(x=x, y=y, width=width, height=height)


def place_tile(world: World, row: int, col: int, value: int, *, spawn_scale: float = 1.0) -> int:
    """Create a tile entity at a free cell and key it on the board."""
    board = get_board(world)
    if not board.contains(row, col):
        raise ValueError(f"Cell ({row}, {col}) is outside a {board.rows}x{board.cols} board")
    key = board.key_for(row, col)
    if key in board.cells:
        raise ValueError(f"Cell ({row}, {col}) is already occupied")
    entity = world.create_entity(
        BoardPosition(row=row, col=col),
        Tile(value=value),
        MoveFlags(),
        cell_sprite(row, col, spawn_scale),
    )
    board.cells[key] = entity
    return entity


def relocate_tile(world: World, entity: int, row: int, col: int) -> None:
    """Move a live tile to another free cell, updating key and position together."""
    board = get_board(world)
    position = world.component_for_entity(entity, BoardPosition)
    old_key = board.key_for(position.row, position.col)
    new_key = board.key_for(row, col)
    if board.cells.get(old_key) == entity:
        del board.cells[old_key]
    board.cells[new_key] = entity
    position.row = row
    position.col = col


def detach_tile(world: World, entity: int) -> None:
    """Drop a tile's key without deleting the entity (used for absorbed tiles)."""
    board = get_board(world)
    position = world.component_for_entity(entity, BoardPosition)
    key = board.key_for(position.row, position.col)
    if board.cells.get(key) == entity:
        del board.cells[key]


def leave_ghost(world: World, entity: int) -> int:
    """Create a sprite-only copy of a tile that slides on to its BoardPosition."""
    position = world.component_for_entity(entity, BoardPosition)
    tile = world.component_for_entity(entity, Tile)
    sprite = world.component_for_entity(entity, TileSprite)
    return world.create_entity(
        Ghost(row=position.row, col=position.col, value=tile.value),
        TileSprite(x=sprite.x, y=sprite.y, width=sprite.width, height=sprite.height),
    )


def remove_dead_tiles(world: World) -> List[int]:
    """Delete every tile flagged dead; returns the removed entity ids.

    Each removed tile leaves a ghost behind so the slide into the absorbing
    cell is still drawn.
    """
    board = get_board(world)
    dead = [entity for entity, flags in world.get_component(MoveFlags) if flags.dead]
    keyed = {entity: key for key, entity in board.cells.items()}
    for entity in dead:
        key = keyed.get(entity)
        if key is not None:
            del board.cells[key]
        leave_ghost(world, entity)
        world.delete_entity(entity, immediate=True)
    return dead


def clear_move_flags(world: World) -> None:
    for _, flags in world.get_component(MoveFlags):
        flags.reset()


def clear_board(world: World) -> None:
    board = get_board(world)
    entities = {entity for entity, _ in world.get_component(Tile)}
    entities.update(board.cells.values())
    entities.update(entity for entity, _ in world.get_component(Ghost))
    board.cells.clear()
    for entity in entities:
        world.delete_entity(entity, immediate=True)


def random_free_position(world: World, rng: random.Random | None = None) -> Position | None:
    """Draw (row, col) pairs until one is not yet keyed on the board."""
    board = get_board(world)
    if board.is_full:
        return None
    rng = _world_rng(world, rng)
    while True:
        row = rng.randrange(board.rows)
        col = rng.randrange(board.cols)
        if board.key_for(row, col) not in board.cells:
            return row, col


def spawn_tile(world: World, rng: random.Random | None = None) -> int | None:
    """Insert a 2 (or, one time in SPAWN_FOUR_ODDS, a 4) at a random free cell.

    The tile starts undersized so the animation system can grow it; a full
    board is left untouched and ``None`` is returned.
    """
    rng = _world_rng(world, rng)
    target = random_free_position(world, rng)
    if target is None:
        return None
    value = 4 if rng.randrange(SPAWN_FOUR_ODDS) == 0 else 2
    row, col = target
    return place_tile(world, row, col, value, spawn_scale=SPAWN_SCALE)


def seed_board(world: World, rng: random.Random | None = None) -> List[int]:
    """Reset the board to SEED_TILE_COUNT full-size tiles at distinct random cells."""
    rng = _world_rng(world, rng)
    clear_board(world)
    seeded: List[int] = []
    for _ in range(SEED_TILE_COUNT):
        target = random_free_position(world, rng)
        if target is None:
            break
        row, col = target
        seeded.append(place_tile(world, row, col, SEED_TILE_VALUE))
    return seeded


def load_values(world: World, values: Dict[Position, int]) -> List[int]:
    """Replace the board contents with explicit full-size tiles."""
    clear_board(world)
    return [place_tile(world, row, col, value) for (row, col), value in sorted(values.items())]

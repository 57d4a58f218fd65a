from __future__ import annotations

import logging
from typing import List, Tuple

from esper import World

from slide2048.components.board import Board
from slide2048.components.board_position import BoardPosition
from slide2048.components.direction import Direction
from slide2048.components.move_flags import MoveFlags
from slide2048.components.tile import Tile
from slide2048.events.bus import EVENT_MOVE_REQUEST, EVENT_MOVE_RESOLVED, EventBus
from slide2048.systems.board_ops import (
    board_values,
    clear_move_flags,
    detach_tile,
    get_board,
    relocate_tile,
    remove_dead_tiles,
)

logger = logging.getLogger(__name__)

MergeEntry = Tuple[int, int, int]


def _scan_order(world: World, board: Board, direction: Direction) -> List[int]:
    """Live tiles sorted so the ones nearest the target edge come first."""
    entries = []
    for entity in board.cells.values():
        position = world.component_for_entity(entity, BoardPosition)
        if direction is Direction.LEFT:
            rank = position.col
        elif direction is Direction.RIGHT:
            rank = -position.col
        elif direction is Direction.UP:
            rank = position.row
        else:
            rank = -position.row
        entries.append((rank, position.row, position.col, entity))
    entries.sort()
    return [entry[-1] for entry in entries]


def _at_edge(board: Board, position: BoardPosition, direction: Direction) -> bool:
    d_row, d_col = direction.delta
    return not board.contains(position.row + d_row, position.col + d_col)


def _advance_tile(
    world: World,
    board: Board,
    entity: int,
    direction: Direction,
    merges: List[MergeEntry],
) -> None:
    """Slide one tile until it hits the edge, a blocker, or merges."""
    position = world.component_for_entity(entity, BoardPosition)
    flags = world.component_for_entity(entity, MoveFlags)
    tile = world.component_for_entity(entity, Tile)
    d_row, d_col = direction.delta
    while True:
        if _at_edge(board, position, direction):
            flags.frozen = True
            return
        if flags.merged or flags.frozen:
            return
        next_row = position.row + d_row
        next_col = position.col + d_col
        occupant = board.cells.get(board.key_for(next_row, next_col))
        if occupant is None:
            relocate_tile(world, entity, next_row, next_col)
            continue
        other_tile = world.component_for_entity(occupant, Tile)
        other_flags = world.component_for_entity(occupant, MoveFlags)
        if other_tile.value == tile.value and not other_flags.merged:
            # Unkeyed from here on; its ghost slides to next_row/next_col after removal.
            detach_tile(world, entity)
            position.row = next_row
            position.col = next_col
            flags.dead = True
            flags.merged = True
            flags.frozen = True
            other_tile.value *= 2
            other_flags.merged = True
            other_flags.frozen = True
            merges.append((next_row, next_col, other_tile.value))
        # Blocked tiles are not frozen; they are revisited on the next pass.
        return


def resolve_move_detailed(world: World, direction: Direction) -> Tuple[bool, List[MergeEntry]]:
    """Resolve a move and also report the cells whose tiles absorbed a neighbour."""
    board = get_board(world)
    merges: List[MergeEntry] = []
    moved = False
    # Passes repeat until one leaves the occupancy map untouched; the bound
    # only guards against states the passes cannot settle.
    max_passes = board.capacity + 1
    passes = 0
    while passes < max_passes:
        snapshot = dict(board.cells)
        merge_count = len(merges)
        for entity in _scan_order(world, board, direction):
            _advance_tile(world, board, entity, direction, merges)
        passes += 1
        if board.cells == snapshot and len(merges) == merge_count:
            break
        moved = True
    else:
        logger.warning("Move %s stopped after %d passes without settling", direction.name, passes)
    remove_dead_tiles(world)
    clear_move_flags(world)
    return moved, merges


def resolve_move(world: World, direction: Direction) -> bool:
    """Slide and merge every tile toward ``direction``.

    Returns True when at least one tile moved or merged; the caller uses this
    to decide whether a new tile should spawn.
    """
    moved, _ = resolve_move_detailed(world, direction)
    return moved


def has_legal_move(world: World) -> bool:
    """True if some direction would change the board; the board is not mutated."""
    board = get_board(world)
    if not board.is_full:
        return True
    values = board_values(world)
    for (row, col), value in values.items():
        if values.get((row, col + 1)) == value or values.get((row + 1, col)) == value:
            return True
    return False


class MovementSystem:
    """Runs the resolver for each move request and announces the outcome."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if isinstance(direction, str):
            try:
                direction = Direction.from_name(direction)
            except ValueError:
                logger.debug("Ignoring move request with unknown direction %r", direction)
                return
        if not isinstance(direction, Direction):
            return
        moved, merges = resolve_move_detailed(self.world, direction)
        logger.debug("Move %s: moved=%s merges=%d", direction.name, moved, len(merges))
        self.event_bus.emit(EVENT_MOVE_RESOLVED, direction=direction, moved=moved, merged=merges)

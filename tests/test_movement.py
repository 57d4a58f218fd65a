import logging
import random

import pytest

from slide2048.components.board_position import BoardPosition
from slide2048.components.direction import Direction
from slide2048.components.ghost import Ghost
from slide2048.components.move_flags import MoveFlags
from slide2048.components.tile import Tile
from slide2048.components.tile_sprite import TileSprite
from slide2048.constants import CELL_WIDTH
from slide2048.systems import movement
from slide2048.systems.board_ops import get_board, spawn_tile, tile_at
from slide2048.systems.movement import has_legal_move, resolve_move, resolve_move_detailed
from tests.helpers import grid, make_board, snapshot

DEADLOCK = {
    (0, 0): 2, (0, 1): 4, (0, 2): 2, (0, 3): 4,
    (1, 0): 4, (1, 1): 2, (1, 2): 4, (1, 3): 2,
    (2, 0): 2, (2, 1): 4, (2, 2): 2, (2, 3): 4,
    (3, 0): 4, (3, 1): 2, (3, 2): 4, (3, 3): 2,
}


def test_merge_pair_and_slide_left():
    world, _ = make_board({(0, 0): 2, (0, 1): 2, (0, 2): 4})
    assert resolve_move(world, Direction.LEFT) is True
    assert snapshot(world) == {(0, 0): 4, (0, 1): 4}


def test_compact_row_reports_no_move():
    values = {(0, 0): 2, (0, 1): 4, (0, 2): 8, (0, 3): 16}
    world, _ = make_board(values)
    assert resolve_move(world, Direction.LEFT) is False
    assert snapshot(world) == values


def test_three_equal_tiles_merge_only_once():
    world, _ = make_board({(0, 0): 2, (0, 1): 2, (0, 2): 2})
    assert resolve_move(world, Direction.LEFT)
    assert grid(world)[0] == [4, 2, 0, 0]


def test_four_equal_tiles_make_two_pairs():
    world, _ = make_board({(0, 0): 2, (0, 1): 2, (0, 2): 2, (0, 3): 2})
    resolve_move(world, Direction.LEFT)
    assert grid(world)[0] == [4, 4, 0, 0]


def test_merged_tile_does_not_merge_again():
    world, _ = make_board({(0, 0): 4, (0, 1): 2, (0, 2): 2})
    resolve_move(world, Direction.LEFT)
    assert grid(world)[0] == [4, 4, 0, 0]


@pytest.mark.parametrize(
    "direction, start, expected",
    [
        (Direction.RIGHT, {(1, 0): 2, (1, 2): 2}, {(1, 3): 4}),
        (Direction.UP, {(3, 2): 8, (1, 2): 8, (0, 2): 2}, {(0, 2): 2, (1, 2): 16}),
        (Direction.DOWN, {(0, 0): 2, (1, 0): 2, (2, 0): 4}, {(3, 0): 4, (2, 0): 4}),
        (Direction.LEFT, {(2, 3): 2, (2, 1): 2}, {(2, 0): 4}),
    ],
)
def test_moves_in_each_direction(direction, start, expected):
    world, _ = make_board(start)
    assert resolve_move(world, direction)
    assert snapshot(world) == expected


def test_right_merges_from_the_leading_edge():
    world, _ = make_board({(0, 0): 2, (0, 1): 2, (0, 2): 2})
    resolve_move(world, Direction.RIGHT)
    assert grid(world)[0] == [0, 0, 2, 4]


def test_repeating_a_compacting_move_is_a_no_op():
    world, _ = make_board({(0, 1): 2, (0, 3): 4, (2, 2): 8, (3, 0): 2})
    assert resolve_move(world, Direction.LEFT)
    before = snapshot(world)
    assert resolve_move(world, Direction.LEFT) is False
    assert snapshot(world) == before


def test_deadlocked_board_rejects_every_direction():
    world, _ = make_board(DEADLOCK)
    for direction in Direction:
        assert resolve_move(world, direction) is False
        assert snapshot(world) == DEADLOCK
    assert has_legal_move(world) is False


def test_has_legal_move_detects_open_cells_and_pairs():
    open_board = dict(DEADLOCK)
    del open_board[(3, 3)]
    world, _ = make_board(open_board)
    assert has_legal_move(world)

    pair_board = dict(DEADLOCK)
    pair_board[(3, 3)] = 4
    world, _ = make_board(pair_board)
    assert has_legal_move(world)
    assert snapshot(world) == pair_board


def test_flags_cleared_and_dead_tiles_removed_after_move():
    world, _ = make_board({(0, 0): 2, (0, 1): 2, (1, 3): 8})
    resolve_move(world, Direction.LEFT)
    flags = [f for _, f in world.get_component(MoveFlags)]
    assert len(flags) == 2
    assert not any(f.merged or f.frozen or f.dead for f in flags)
    assert len(list(world.get_component(Tile))) == 2


def test_detailed_resolution_reports_merges():
    world, _ = make_board({(0, 0): 2, (0, 1): 2, (3, 0): 4, (2, 0): 4})
    moved, merges = resolve_move_detailed(world, Direction.LEFT)
    assert moved
    assert merges == [(0, 0, 4)]
    moved, merges = resolve_move_detailed(world, Direction.DOWN)
    assert moved
    assert sorted(merges) == [(3, 0, 8)]


def test_random_boards_keep_positions_unique_and_in_range():
    rng = random.Random(7)
    for _ in range(40):
        world, _ = make_board(seed=rng.randrange(10_000))
        for _ in range(rng.randrange(1, 14)):
            spawn_tile(world, rng)
        before_total = sum(snapshot(world).values())
        for _ in range(12):
            resolve_move(world, rng.choice(list(Direction)))
            board = get_board(world)
            seen = set()
            for key, entity in board.cells.items():
                pos = world.component_for_entity(entity, BoardPosition)
                assert 0 <= pos.row < 4 and 0 <= pos.col < 4
                assert board.key_for(pos.row, pos.col) == key
                assert (pos.row, pos.col) not in seen
                seen.add((pos.row, pos.col))
            assert len(board.cells) <= 16
        # Merging preserves the sum of values.
        assert sum(snapshot(world).values()) == before_total


def test_larger_grid_uses_unambiguous_keys():
    world, _ = make_board({(1, 11): 2, (11, 1): 2}, rows=12, cols=12)
    assert resolve_move(world, Direction.UP)
    assert snapshot(world) == {(0, 11): 2, (0, 1): 2}


def test_merge_leaves_a_ghost_sliding_into_the_absorbing_cell():
    world, _ = make_board({(0, 0): 2, (0, 3): 2})
    resolve_move(world, Direction.LEFT)
    assert snapshot(world) == {(0, 0): 4}
    ghosts = list(world.get_components(Ghost, TileSprite))
    assert len(ghosts) == 1
    _, (ghost, sprite) = ghosts[0]
    assert (ghost.row, ghost.col, ghost.value) == (0, 0, 2)
    # The sprite still sits where the absorbed tile started.
    assert sprite.x == 3 * CELL_WIDTH
    assert get_board(world).cells == {0: tile_at(world, 0, 0)}


def test_unsettled_resolution_stops_at_the_pass_bound(monkeypatch, caplog):
    world, _ = make_board({(0, 0): 2, (0, 1): 8})
    doomed = tile_at(world, 0, 1)
    survivor = tile_at(world, 0, 0)
    calls = []

    def never_settles(world, board, entity, direction, merges):
        calls.append(entity)
        flags = world.component_for_entity(entity, MoveFlags)
        flags.frozen = True
        if entity == doomed:
            flags.dead = True
        merges.append((0, 0, 0))

    monkeypatch.setattr(movement, "_advance_tile", never_settles)
    with caplog.at_level(logging.WARNING, logger=movement.__name__):
        moved, merges = resolve_move_detailed(world, Direction.LEFT)

    passes = get_board(world).capacity + 1
    assert moved is True
    assert len(calls) == 2 * passes
    assert len(merges) == 2 * passes
    assert f"stopped after {passes} passes without settling" in caplog.text
    assert not world.entity_exists(doomed)
    assert snapshot(world) == {(0, 0): 2}
    flags = world.component_for_entity(survivor, MoveFlags)
    assert not (flags.merged or flags.frozen or flags.dead)

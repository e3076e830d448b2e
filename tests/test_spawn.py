import random
from collections import Counter

from tile_merge.env.grid import GridState, Position
from tile_merge.env.spawn import SPAWN_VALUE, spawn_initial, spawn_tile


def test_spawn_fills_an_empty_cell(make_grid, rng):
    grid = make_grid({(0, 0): 2, (1, 1): 4})
    tile = spawn_tile(grid, rng)
    assert tile is not None
    assert tile.value == SPAWN_VALUE
    assert tile.position not in (Position(0, 0), Position(1, 1))
    assert len(grid) == 3


def test_spawn_on_full_board_does_nothing(make_grid, rng):
    values = {(x, y): 2 ** (1 + x + 2 * y) for x in range(2) for y in range(2)}
    grid = make_grid(values, size=2)
    assert spawn_tile(grid, rng) is None
    assert len(grid) == 4


def test_spawn_only_picks_the_last_free_cell(make_grid, rng):
    grid = make_grid({(0, 0): 2, (0, 1): 4, (1, 0): 8}, size=2)
    tile = spawn_tile(grid, rng)
    assert tile.position == Position(1, 1)


def test_spawn_covers_every_empty_cell(make_grid):
    rng = random.Random(0)
    seen = Counter()
    for _ in range(2000):
        grid = make_grid({(0, 0): 2}, size=2)
        seen[spawn_tile(grid, rng).position] += 1
    assert set(seen) == {Position(0, 1), Position(1, 0), Position(1, 1)}
    assert min(seen.values()) > 500


def test_spawn_is_reproducible_with_a_seed():
    first = spawn_tile(GridState(4), random.Random(42))
    second = spawn_tile(GridState(4), random.Random(42))
    assert first.position == second.position


def test_initial_spawn_uses_distinct_cells():
    rng = random.Random(3)
    for _ in range(100):
        grid = GridState(4)
        tiles = spawn_initial(grid, rng)
        assert len(tiles) == 2
        assert len({t.position for t in tiles}) == 2
        assert all(t.value == 2 for t in tiles)


def test_initial_spawn_stops_at_free_cells(make_grid, rng):
    grid = make_grid({(0, 0): 2, (0, 1): 4, (1, 0): 8}, size=2)
    tiles = spawn_initial(grid, rng, count=2)
    assert [t.position for t in tiles] == [Position(1, 1)]
    assert grid.is_full()

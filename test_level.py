import pytest

from maze_env.entities import Monster, Player, try_move
from maze_env.level import CAMP_LEVEL, H, W, Level

# ======================================================================
# FIXTURES
# ======================================================================

@pytest.fixture
def mini_level():
    """
    5x5 maze with a pillar in the middle.
    '#' = wall, '.' = pellet, 'o' = power-up
    """
    return Level.from_rows([
        "#####",
        "#.o.#",
        "#.#.#",
        "#...#",
        "#####",
    ])

# ======================================================================
# GRID
# ======================================================================

def test_border_is_wall():
    for x in range(W):
        assert CAMP_LEVEL.is_wall(x, 0)
        assert CAMP_LEVEL.is_wall(x, H - 1)
    for y in range(H):
        assert CAMP_LEVEL.is_wall(0, y)
        assert CAMP_LEVEL.is_wall(W - 1, y)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (W, 5), (5, H), (-3, -3), (100, 100)])
def test_outside_bounds_is_wall(x, y):
    assert CAMP_LEVEL.is_wall(x, y)


def test_floor_cells_are_not_walls():
    assert not CAMP_LEVEL.is_wall(1, 1)
    assert not CAMP_LEVEL.is_wall(18, 18)
    assert CAMP_LEVEL.is_wall(9, 1)


def test_open_directions_keep_fixed_order():
    # (1,1): right and down are open, left and up are border walls
    assert CAMP_LEVEL.open_directions(1, 1) == [(1, 0), (0, 1)]
    assert CAMP_LEVEL.open_directions(6, 5) == [(1, 0), (-1, 0), (0, 1), (0, -1)]


def test_intersection_needs_three_open_neighbours():
    assert CAMP_LEVEL.is_intersection(6, 5)
    assert not CAMP_LEVEL.is_intersection(1, 5)
    assert not CAMP_LEVEL.is_intersection(2, 1)


def test_item_layout():
    assert len(CAMP_LEVEL.pellet_cells()) == 200
    assert CAMP_LEVEL.power_cells() == {(1, 3), (18, 3), (1, 13), (18, 13)}
    assert (1, 1) in CAMP_LEVEL.pellet_cells()
    assert not CAMP_LEVEL.pellet_cells() & CAMP_LEVEL.power_cells()


def test_mini_level_items(mini_level):
    assert mini_level.power_cells() == {(2, 1)}
    assert len(mini_level.pellet_cells()) == 7
    assert mini_level.is_wall(2, 2)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Level.from_rows(["###", "#.", "###"])


def test_from_rows_rejects_empty_layout():
    with pytest.raises(ValueError):
        Level.from_rows([])

# ======================================================================
# MOVEMENT RULE
# ======================================================================

def test_move_commits_on_free_cell(mini_level):
    p = Player(1, 1)
    p.set_velocity(1, 0)
    assert try_move(p, mini_level)
    assert p.position == (2, 1)


def test_move_fails_into_wall(mini_level):
    m = Monster(1, 1, 0, -1, "#fff")
    assert not try_move(m, mini_level)
    assert m.position == (1, 1)
    assert m.velocity == (0, -1)


def test_player_queue_is_separate_from_velocity():
    p = Player(1, 1)
    p.queue_velocity(0, 1)
    assert p.queued == (0, 1)
    assert p.velocity == (0, 0)
    assert not p.is_moving()

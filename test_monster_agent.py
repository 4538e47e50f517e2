import random
from types import SimpleNamespace

import pytest

from maze_agents.monster_agent import JITTER, MonsterAgent, choose_direction, manhattan, needs_decision
from maze_env.entities import Monster, Player
from maze_env.level import Level

RIGHT, LEFT, DOWN, UP = (1, 0), (-1, 0), (0, 1), (0, -1)


class ScriptedRng:
    """Returns the given jitter values in order and records the requested bounds."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def uniform(self, a, b):
        self.bounds.append((a, b))
        return self.values.pop(0) if self.values else 0.0

# ======================================================================
# FIXTURES
# ======================================================================

@pytest.fixture
def corridor():
    return Level.from_rows([
        "#####",
        "#...#",
        "#####",
    ])


@pytest.fixture
def cross():
    """Plus-shaped maze; (2,2) is the only intersection."""
    return Level.from_rows([
        "#####",
        "##.##",
        "#...#",
        "##.##",
        "#####",
    ])

# ======================================================================
# POLICY
# ======================================================================

def test_manhattan():
    assert manhattan((1, 1), (3, 3)) == 4
    assert manhattan((5, 2), (5, 2)) == 0


def test_no_u_turn_when_another_way_is_open(corridor):
    # the player is behind the monster, but turning back is not allowed
    d = choose_direction(corridor, (2, 1), RIGHT, (1, 1), 0, ScriptedRng([]))
    assert d == RIGHT


def test_u_turn_allowed_in_dead_end(corridor):
    d = choose_direction(corridor, (3, 1), RIGHT, (3, 1), 0, ScriptedRng([]))
    assert d == LEFT


def test_walled_in_monster_keeps_velocity():
    box = Level.from_rows(["###", "#.#", "###"])
    assert choose_direction(box, (1, 1), RIGHT, (5, 5), 0, ScriptedRng([])) == RIGHT


@pytest.mark.parametrize("seed", range(25))
def test_hunting_monster_chases(cross, seed):
    d = choose_direction(cross, (2, 2), RIGHT, (2, 1), 0, random.Random(seed))
    assert d == UP


@pytest.mark.parametrize("seed", range(25))
def test_scared_monster_flees(cross, seed):
    d = choose_direction(cross, (2, 2), RIGHT, (2, 1), 40, random.Random(seed))
    assert d in (RIGHT, DOWN)


def test_jitter_breaks_ties(cross):
    # candidates after dropping LEFT: RIGHT, DOWN, UP; RIGHT and DOWN tie at distance 2
    assert choose_direction(cross, (2, 2), RIGHT, (2, 1), 40, ScriptedRng([-0.2, 0.2, 0.0])) == DOWN
    assert choose_direction(cross, (2, 2), RIGHT, (2, 1), 40, ScriptedRng([0.2, -0.2, 0.0])) == RIGHT


def test_jitter_stays_below_half_a_step(cross):
    rng = ScriptedRng([])
    choose_direction(cross, (2, 2), RIGHT, (0, 0), 0, rng)
    assert len(rng.bounds) == 3
    assert all(max(abs(a), abs(b)) < 0.5 for a, b in rng.bounds)
    assert JITTER < 0.5


def test_extreme_jitter_cannot_beat_a_real_difference(cross):
    # worst case for the closer candidate (UP): it gets -0.2, the others +0.2
    d = choose_direction(cross, (2, 2), RIGHT, (2, 1), 0, ScriptedRng([0.2, 0.2, -0.2]))
    assert d == UP


def test_needs_decision(cross, corridor):
    assert needs_decision(corridor, (2, 1), moved=False)
    assert not needs_decision(corridor, (2, 1), moved=True)
    assert needs_decision(cross, (2, 2), moved=True)

# ======================================================================
# AGENT
# ======================================================================

def _fake_game(level, player_pos, rng):
    return SimpleNamespace(level=level, player=Player(*player_pos), rng=rng)


def test_agent_keeps_corridor_heading(corridor):
    agent = MonsterAgent(_fake_game(corridor, (1, 1), ScriptedRng([])))
    m = Monster(2, 1, 1, 0, "#fff")
    assert not agent.steer(m, moved=True)
    assert m.velocity == RIGHT


def test_agent_redecides_when_blocked(corridor):
    agent = MonsterAgent(_fake_game(corridor, (1, 1), ScriptedRng([])))
    m = Monster(3, 1, 1, 0, "#fff")
    assert agent.steer(m, moved=False)
    assert m.velocity == LEFT


def test_agent_uses_player_position(cross):
    agent = MonsterAgent(_fake_game(cross, (2, 3), random.Random(3)))
    m = Monster(2, 2, 1, 0, "#fff")
    assert agent.steer(m, moved=True)
    assert m.velocity == DOWN

"""
Monster chase / flee policy
===========================
A local decision rule, not a path search:

- a monster keeps its corridor until it is blocked or reaches an
  intersection (three or more open neighbours);
- there it looks at the open directions, refuses to turn straight back
  unless nothing else is open, and scores every candidate by the Manhattan
  distance from the cell it leads to up to the player;
- hunting monsters take the smallest distance, scared ones the largest;
- every score gets a small uniform jitter (|j| <= JITTER < 0.5) so ties are
  broken at random while a real one-cell difference always wins.

choose_direction() and needs_decision() are pure; the random source is
passed in so tests can use a seeded random.Random.
"""

import random

JITTER = 0.2


def manhattan(a, b) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def choose_direction(level, position, velocity, target, scared: int, rng=random):
    x, y = position
    options = level.open_directions(x, y)
    if not options:
        return velocity

    back = (-velocity[0], -velocity[1])
    forward = [d for d in options if d != back]
    options = forward or options

    sign = 1 if scared > 0 else -1
    best, best_score = None, None
    for dx, dy in options:
        d = manhattan((x + dx, y + dy), target)
        s = sign * d + rng.uniform(-JITTER, JITTER)
        if best_score is None or s > best_score:
            best, best_score = (dx, dy), s
    return best


def needs_decision(level, position, moved: bool) -> bool:
    return not moved or level.is_intersection(*position)


# ══════════════════════════════════════════════════════════════════════════════
#  Agent bound to a running game
# ══════════════════════════════════════════════════════════════════════════════
class MonsterAgent:
    def __init__(self, game):
        self.game = game

    def steer(self, monster, moved: bool) -> bool:
        """Picks the monster's velocity for its next move. Returns True if it re-decided."""
        game = self.game
        if not needs_decision(game.level, monster.position, moved):
            return False
        dx, dy = choose_direction(
            game.level, monster.position, monster.velocity,
            game.player.position, monster.scared, game.rng,
        )
        monster.set_velocity(dx, dy)
        return True

"""
Camp Maze game state
====================
One GameState instance is one play session: the level, the player, the three
monsters, the pellet/power-up sets and the score/lives bookkeeping. Nothing
lives in module globals, so several sessions can run side by side.

  - GameState.reset()   -> (re)arms the session, allowed from any phase
  - GameState.step()    -> advances exactly one tick, returns the event names
  - GameState.snapshot()-> immutable StateSnapshot for drawing and comparisons
  - GameState.subscribe -> listener(events, snapshot) after every tick/reset

The presentation layer (drawing, sound, buttons) only ever reads snapshots and
reacts to events; no pygame code runs in here.
"""

import logging
import random
from enum import Enum

from maze_env.entities import Monster, Player, try_move
from maze_env.level import CAMP_LEVEL
from maze_agents.monster_agent import MonsterAgent

logger = logging.getLogger(__name__)

PELLET_POINTS  = 10
POWER_POINTS   = 50
MONSTER_POINTS = 200
SCARED_TICKS   = 80      # ~4 s at the nominal tick rate
START_LIVES    = 3
MONSTER_EVERY  = 2       # monsters move on every second tick

PLAYER_START = (1, 1)
# (x, y, dx, dy, colour)
MONSTER_STARTS = (
    (18, 1,  -1, 0,  "#ff6a9f"),
    (18, 18,  0, -1, "#6ae4ff"),
    (1,  18,  1, 0,  "#64ffb3"),
)

EVENT_RESET        = "reset"
EVENT_PELLET       = "pellet"
EVENT_POWER_UP     = "power-up"
EVENT_BONK         = "bonk"
EVENT_BONK_MONSTER = "bonk-monster"
EVENT_RESPAWN      = "respawn"
EVENT_GAME_OVER    = "game-over"
EVENT_WIN          = "win"

MSG_START     = "Tip: Grab a trident power-up to scare monsters!"
MSG_POWER     = "Power-up! Monsters are scared!"
MSG_WIN       = "You did it! Camp Maze champion!"
MSG_BONKED    = "Monster bonked! Nice!"
MSG_GAME_OVER = "Game over - want to try again?"
MSG_RESPAWN   = "Oops! You're okay - keep going!"


class Phase(Enum):
    IDLE      = "idle"
    PLAYING   = "playing"
    WON       = "won"
    GAME_OVER = "game-over"


# ══════════════════════════════════════════════════════════════════════════════
#  StateSnapshot
# ══════════════════════════════════════════════════════════════════════════════
class StateSnapshot:
    __slots__ = (
        "phase", "tick", "score", "lives", "message", "game_over", "win",
        "player_pos", "player_dir", "player_queued",
        "monster_positions", "monster_directions", "monster_colors", "monster_scared",
        "pellets", "powers",
    )

    def __init__(self, **kw):
        for k, v in kw.items():
            object.__setattr__(self, k, v)

    def __setattr__(self, *_):
        raise AttributeError("StateSnapshot is immutable")

    def _key(self):
        return tuple(getattr(self, k) for k in self.__slots__)

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        return isinstance(other, StateSnapshot) and self._key() == other._key()

    def __repr__(self):
        return (
            f"StateSnapshot(phase={self.phase.value}, tick={self.tick}, score={self.score}, "
            f"lives={self.lives}, pellets={len(self.pellets)}, powers={len(self.powers)})"
        )


# ══════════════════════════════════════════════════════════════════════════════
#  GameState
# ══════════════════════════════════════════════════════════════════════════════
class GameState:
    def __init__(self, level=CAMP_LEVEL, seed=None, rng=None):
        self.level = level
        self.rng = rng if rng is not None else random.Random(seed)
        self.agent = MonsterAgent(self)
        self._listeners = []

        # Idle session: nothing to eat, nobody moves until reset() is called.
        self._started = False
        self.player   = Player(*PLAYER_START)
        self.monsters = [Monster(x, y, dx, dy, color) for x, y, dx, dy, color in MONSTER_STARTS]
        self.pellets  = set()
        self.powers   = set()
        self.score    = 0
        self.lives    = 0
        self.tick     = 0
        self.game_over = False
        self.win       = False
        self.message   = ""

    # ── lifecycle ────────────────────────────────────────────────────────────
    @property
    def phase(self) -> Phase:
        if not self._started:
            return Phase.IDLE
        if self.win:
            return Phase.WON
        if self.game_over:
            return Phase.GAME_OVER
        return Phase.PLAYING

    def reset(self):
        self._started = True
        self.score = 0
        self.lives = START_LIVES
        self.player.queue_velocity(0, 0)
        self._reset_positions()
        for m in self.monsters:
            m.scared = 0
        self.pellets = set(self.level.pellet_cells())
        self.powers  = set(self.level.power_cells())
        self.tick = 0
        self.game_over = False
        self.win = False
        self.message = MSG_START
        logger.info("Session reset: %d pellets, %d power-ups", len(self.pellets), len(self.powers))
        self._notify([EVENT_RESET])

    def _reset_positions(self):
        self.player.set_position(*PLAYER_START)
        self.player.set_velocity(0, 0)
        for m, (x, y, dx, dy, _) in zip(self.monsters, MONSTER_STARTS):
            m.set_position(x, y)
            m.set_velocity(dx, dy)

    # ── input / listeners ────────────────────────────────────────────────────
    def request_direction(self, dx: int, dy: int):
        """Stores the latest direction intent; an older unconsumed one is dropped."""
        self.player.queue_velocity(dx, dy)

    def subscribe(self, listener):
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener):
        self._listeners.remove(listener)

    def _notify(self, events):
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(list(events), snap)

    # ── one tick ─────────────────────────────────────────────────────────────
    def step(self) -> list:
        if self.phase is not Phase.PLAYING:
            return []

        events = []
        self.tick += 1
        self._move_player()
        if self.tick % MONSTER_EVERY == 0:
            self._move_monsters()
        self._check_pellets(events)
        self._check_collisions(events)

        if events:
            self._notify(events)
        return events

    def _move_player(self):
        p = self.player
        nx, ny = p.x + p.next_dx, p.y + p.next_dy
        if not self.level.is_wall(nx, ny):
            p.set_velocity(p.next_dx, p.next_dy)
        if p.is_moving():
            try_move(p, self.level)

    def _move_monsters(self):
        for m in self.monsters:
            if m.scared > 0:
                m.scared -= 1
            moved = try_move(m, self.level)
            self.agent.steer(m, moved)

    def _check_pellets(self, events):
        cell = self.player.position
        if cell in self.pellets:
            self.pellets.discard(cell)
            self.score += PELLET_POINTS
            events.append(EVENT_PELLET)
        if cell in self.powers:
            self.powers.discard(cell)
            self.score += POWER_POINTS
            for m in self.monsters:
                m.scared = SCARED_TICKS
            self.message = MSG_POWER
            events.append(EVENT_POWER_UP)
            logger.debug("Tick %d: power-up at %s", self.tick, cell)
        if not self.pellets and not self.powers:
            self.win = True
            self.game_over = True
            self.message = MSG_WIN
            events.append(EVENT_WIN)
            logger.info("Tick %d: board cleared, score %d", self.tick, self.score)

    def _check_collisions(self, events):
        # Only the first monster on the player's cell is resolved in a tick.
        for m in self.monsters:
            if m.position != self.player.position:
                continue
            if m.is_scared:
                self.score += MONSTER_POINTS
                m.set_position(self.level.width - 2, self.level.height - 2)
                m.scared = 0
                self.message = MSG_BONKED
                events.append(EVENT_BONK_MONSTER)
                logger.debug("Tick %d: monster %s bonked", self.tick, m.color)
            else:
                self.lives = max(0, self.lives - 1)
                events.append(EVENT_BONK)
                if self.lives <= 0:
                    self.game_over = True
                    self.message = MSG_GAME_OVER
                    events.append(EVENT_GAME_OVER)
                    logger.info("Tick %d: game over, score %d", self.tick, self.score)
                else:
                    self._reset_positions()
                    self.message = MSG_RESPAWN
                    events.append(EVENT_RESPAWN)
                    logger.debug("Tick %d: life lost, %d left", self.tick, self.lives)
            return

    # ── snapshot ─────────────────────────────────────────────────────────────
    def snapshot(self) -> StateSnapshot:
        ms = self.monsters
        return StateSnapshot(
            phase              = self.phase,
            tick               = self.tick,
            score              = self.score,
            lives              = self.lives,
            message            = self.message,
            game_over          = self.game_over,
            win                = self.win,
            player_pos         = self.player.position,
            player_dir         = self.player.velocity,
            player_queued      = self.player.queued,
            monster_positions  = tuple(m.position for m in ms),
            monster_directions = tuple(m.velocity for m in ms),
            monster_colors     = tuple(m.color for m in ms),
            monster_scared     = tuple(m.scared for m in ms),
            pellets            = frozenset(self.pellets),
            powers             = frozenset(self.powers),
        )

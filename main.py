"""
Camp Maze
=========
A tiny maze-chase game: eat every pellet and trident, dodge the three
monsters, grab a trident to make them run and bonk them for bonus points.

Controls
--------
- Arrows / WASD  move
- M or the "Sound" button     toggle sound
- R or the "Restart" button   start over

The simulation (maze_env.campmaze_gamestate.GameState) advances one tick every
--tick-ms milliseconds; drawing and sound only react to its snapshots/events.

    python main.py --seed 7 --scale 1.25
"""

import argparse
import logging
import sys

import pygame

from maze_env.campmaze_gamestate import GameState
from maze_frontend.controls import Controls
from maze_frontend.renderer import SURFACE_SIZE, Renderer
from maze_frontend.sound import SoundBoard, pre_init

logger = logging.getLogger("campmaze")

TICK_MS = 70
FPS     = 60
MAX_CATCH_UP = 3


def _positive(kind):
    def parse(text):
        value = kind(text)
        if value <= 0:
            raise argparse.ArgumentTypeError(f"must be positive, got {text}")
        return value
    return parse


def due_ticks(pending: int, tick_ms: int, limit: int = MAX_CATCH_UP):
    """Splits elapsed milliseconds into ticks to run now and leftover time.

    At most `limit` ticks run per frame; a backlog beyond that is dropped so a
    long frame never turns into a burst of ticks.
    """
    steps = min(pending // tick_ms, limit)
    pending -= steps * tick_ms
    if pending >= tick_ms:
        pending = 0
    return steps, pending


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python main.py", description="Play Camp Maze.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the monsters' random tie-breaking.")
    parser.add_argument("--mute", action="store_true", help="Start with sound off.")
    parser.add_argument("--tick-ms", type=_positive(int), default=TICK_MS, help="Milliseconds per simulation tick.")
    parser.add_argument("--scale", type=_positive(float), default=1.0, help="Window scale factor.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


# ======================================================================
#  GAME LOOP
# ======================================================================
class CampMazeLoop:
    def __init__(self, seed=None, mute=False, tick_ms=TICK_MS, scale=1.0):
        self.game     = GameState(seed=seed)
        self.sound    = SoundBoard(enabled=not mute)
        self.tick_ms  = tick_ms
        self.scale    = scale
        self.controls = Controls(self.game, self.sound)
        self.game.subscribe(self.sound.on_events)

    def run(self):
        pre_init()
        pygame.init()
        size = (int(SURFACE_SIZE[0] * self.scale), int(SURFACE_SIZE[1] * self.scale))
        window = pygame.display.set_mode(size)
        pygame.display.set_caption("Camp Maze")
        clock = pygame.time.Clock()
        renderer = Renderer()
        self.sound.load()

        self.game.reset()
        pending = 0
        running = True
        while running:
            pending += clock.tick(FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    self.controls.handle(event, self.scale)

            steps, pending = due_ticks(pending, self.tick_ms)
            for _ in range(steps):
                self.game.step()

            frame = renderer.draw(self.game.level, self.game.snapshot(), self.sound.label)
            if self.scale != 1.0:
                frame = pygame.transform.smoothscale(frame, size)
            window.blit(frame, (0, 0))
            pygame.display.flip()

        pygame.quit()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 50)
    print(" Camp Maze")
    print("=" * 50)
    logger.info("Starting with seed=%s tick=%dms scale=%.2f", args.seed, args.tick_ms, args.scale)
    CampMazeLoop(seed=args.seed, mute=args.mute, tick_ms=args.tick_ms, scale=args.scale).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

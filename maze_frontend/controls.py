import pygame

from maze_env.level import H, W

TILE       = 28          # 20x20 grid -> 560 px board
HUD_HEIGHT = 64

UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,       pygame.K_w: UP,
    pygame.K_DOWN: DOWN,   pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,   pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

TOGGLE_SOUND_KEY = pygame.K_m
RESTART_KEY      = pygame.K_r

SOUND, RESTART = "sound", "restart"


def direction_for_key(key):
    return KEY_DIRECTIONS.get(key)


def button_rects() -> dict:
    """On-screen buttons in the HUD strip below the board, in board pixels."""
    top = H * TILE + (HUD_HEIGHT - 28) // 2
    right = W * TILE - 12
    return {
        RESTART: pygame.Rect(right - 110, top, 110, 28),
        SOUND:   pygame.Rect(right - 110 - 12 - 130, top, 130, 28),
    }


def button_at(pos):
    for name, rect in button_rects().items():
        if rect.collidepoint(pos):
            return name
    return None


class Controls:
    """Turns pygame events into game-state requests and control-surface commands."""

    def __init__(self, game, sound):
        self.game = game
        self.sound = sound

    def command(self, name):
        if name == SOUND:
            self.sound.toggle()
        elif name == RESTART:
            self.game.reset()

    def handle(self, event, scale: float = 1.0):
        if event.type == pygame.KEYDOWN:
            d = direction_for_key(event.key)
            if d is not None:
                self.game.request_direction(*d)
            elif event.key == TOGGLE_SOUND_KEY:
                self.command(SOUND)
            elif event.key == RESTART_KEY:
                self.command(RESTART)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            self.command(button_at((int(x / scale), int(y / scale))))

"""
Draws a StateSnapshot: walls, pellets, tridents, the player, the monsters and
the HUD strip (score, lives, status message, Sound/Restart buttons).
Everything is drawn in board pixels onto an off-screen Surface; main.py scales
it to the window.
"""

import pygame

from maze_env.level import H, W, WALL
from maze_frontend.controls import HUD_HEIGHT, RESTART, SOUND, TILE, button_rects

BOARD_W, BOARD_H = W * TILE, H * TILE
SURFACE_SIZE = (BOARD_W, BOARD_H + HUD_HEIGHT)

BACKGROUND   = (11, 16, 32)
WALL_FILL    = (106, 228, 255, 31)
WALL_EDGE    = (106, 228, 255, 71)
PELLET       = (255, 255, 255)
TRIDENT      = (255, 200, 80)
PLAYER       = (255, 215, 90)
SCARED       = (170, 190, 255)
EYES         = (20, 20, 30)
HUD_BG       = (18, 26, 48)
HUD_TEXT     = (235, 240, 255)
BUTTON_BG    = (40, 56, 96)


def _tile_center(x, y):
    return x * TILE + TILE // 2, y * TILE + TILE // 2


class Renderer:
    def __init__(self):
        pygame.font.init()
        self.surface = pygame.Surface(SURFACE_SIZE)
        self.font    = pygame.font.Font(None, 24)
        self.small   = pygame.font.Font(None, 20)

        self.wall_tile = pygame.Surface((TILE, TILE), pygame.SRCALPHA)
        self.wall_tile.fill(WALL_FILL)
        pygame.draw.rect(self.wall_tile, WALL_EDGE, (1, 1, TILE - 2, TILE - 2), 1)

    def draw(self, level, snap, sound_label: str = "Sound: On") -> pygame.Surface:
        surf = self.surface
        surf.fill(BACKGROUND)
        self._draw_walls(level)
        self._draw_items(snap)
        self._draw_player(snap)
        self._draw_monsters(snap)
        self._draw_hud(snap, sound_label)
        return surf

    def _draw_walls(self, level):
        for y, row in enumerate(level.rows):
            for x, c in enumerate(row):
                if c == WALL:
                    self.surface.blit(self.wall_tile, (x * TILE, y * TILE))

    def _draw_items(self, snap):
        for x, y in snap.pellets:
            pygame.draw.circle(self.surface, PELLET, _tile_center(x, y), 3)
        for x, y in snap.powers:
            self._draw_trident(x, y)

    def _draw_trident(self, x, y):
        cx, cy = _tile_center(x, y)
        s = self.surface
        pygame.draw.line(s, TRIDENT, (cx, cy - 8), (cx, cy + 10), 2)
        pygame.draw.line(s, TRIDENT, (cx - 7, cy - 2), (cx + 7, cy - 2), 2)
        for px in (cx - 7, cx, cx + 7):
            pygame.draw.line(s, TRIDENT, (px, cy - 2), (px, cy - 10), 2)

    def _draw_player(self, snap):
        pygame.draw.circle(self.surface, PLAYER, _tile_center(*snap.player_pos), int(TILE * 0.36))

    def _draw_monsters(self, snap):
        for (x, y), color, scared in zip(snap.monster_positions, snap.monster_colors, snap.monster_scared):
            fill = SCARED if scared > 0 else pygame.Color(color)
            body = pygame.Rect(x * TILE + int(TILE * 0.18), y * TILE + int(TILE * 0.18),
                               int(TILE * 0.64), int(TILE * 0.64))
            pygame.draw.rect(self.surface, fill, body, 0, 10)
            for ex in (0.40, 0.60):
                pygame.draw.circle(self.surface, EYES, (int(x * TILE + TILE * ex), int(y * TILE + TILE * 0.42)), 3)

    def _draw_hud(self, snap, sound_label):
        s = self.surface
        pygame.draw.rect(s, HUD_BG, (0, BOARD_H, BOARD_W, HUD_HEIGHT))
        s.blit(self.font.render(f"Score: {snap.score}   Lives: {snap.lives}", True, HUD_TEXT), (12, BOARD_H + 10))
        s.blit(self.small.render(snap.message, True, HUD_TEXT), (12, BOARD_H + 36))

        labels = {SOUND: sound_label, RESTART: "Restart"}
        for name, rect in button_rects().items():
            pygame.draw.rect(s, BUTTON_BG, rect, 0, 6)
            text = self.small.render(labels[name], True, HUD_TEXT)
            s.blit(text, text.get_rect(center=rect.center))

        if snap.game_over:
            color = (110, 230, 140) if snap.win else (255, 110, 110)
            banner = "Victory! Press R to play again" if snap.win else "Game over! Press R to restart"
            box = pygame.Rect(60, BOARD_H // 2 - 40, BOARD_W - 120, 80)
            pygame.draw.rect(s, HUD_TEXT, box, 0, 10)
            pygame.draw.rect(s, HUD_BG, box.inflate(-12, -12), 0, 10)
            text = self.font.render(banner, True, color)
            s.blit(text, text.get_rect(center=box.center))

"""
Renderer - Reads gameplay state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Tuple

import pygame

from ..gameplay.game import Game
from ..gameplay.grid import CellKind
from ..gameplay.effects import EffectKind
from ..gameplay.constants import (
    CELL_SIZE, WIDTH, FIELD_LEFT, FIELD_RIGHT, FIELD_TOP, FIELD_BOTTOM
)


# Visual constants
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
PANEL_X = FIELD_RIGHT + 32
GAUGE_X = FIELD_RIGHT + 80
GAUGE_Y = SCREEN_HEIGHT // 10 * 7
GAUGE_WIDTH = SCREEN_WIDTH - CELL_SIZE * WIDTH - 108
FONT_SIZE = 20
VERSION = "Ver.1.0.0"

# Colors
COLOR_BG = (0, 0, 0)
COLOR_WALL = (90, 90, 110)
COLOR_TEXT = (255, 255, 255)
COLOR_DIM = (127, 127, 127)
COLOR_GAUGE = (255, 255, 255)
COLOR_GAUGE_RED = (255, 0, 0)

CELL_COLORS = {
    CellKind.SOLID_GROUND: (170, 120, 70),
    CellKind.HAZARD: (200, 200, 220),
    CellKind.POWER_UP_INVULN: (255, 230, 60),
    CellKind.POWER_UP_PARACHUTE: (90, 200, 255),
    CellKind.POWER_UP_WEIGHT: (120, 120, 120),
}

# Player colors by sprite_index; the shimmer uses all four
PLAYER_COLORS = [
    (255, 255, 255),
    (255, 60, 60),
    (255, 230, 60),
    (90, 255, 140),
]
COLOR_PARACHUTE = (90, 200, 255)
COLOR_WEIGHT = (140, 140, 140)

EFFECT_COLORS = {
    EffectKind.BREAK: (255, 180, 60),
    EffectKind.IMPACT: (255, 255, 255),
}


def cell_rect(x: int, y: int) -> pygame.Rect:
    """Screen rect of a grid cell."""
    return pygame.Rect(FIELD_LEFT + x * CELL_SIZE, FIELD_TOP + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)


class Renderer:
    """
    Renders game state to a pygame surface.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, show_fps: bool = True):
        self.game = game
        self.show_fps = show_fps
        self.font = pygame.font.Font(None, FONT_SIZE)

    def render(self, surface: pygame.Surface) -> None:
        """Render entire game state."""
        surface.fill(COLOR_BG)
        self.render_walls(surface)
        self.render_field(surface)
        self.render_effects(surface)
        self.render_player(surface)
        self.render_hud(surface)

    def render_walls(self, surface: pygame.Surface) -> None:
        for top in range(FIELD_TOP, FIELD_BOTTOM, CELL_SIZE):
            pygame.draw.rect(surface, COLOR_WALL, (FIELD_LEFT - CELL_SIZE, top, CELL_SIZE, CELL_SIZE))
            pygame.draw.rect(surface, COLOR_WALL, (FIELD_RIGHT + 1, top, CELL_SIZE, CELL_SIZE))

    def render_field(self, surface: pygame.Surface) -> None:
        """Draw terrain and items."""
        for x, y, kind in self.game.grid.iter_cells():
            rect = cell_rect(x, y)
            color = CELL_COLORS[kind]
            if kind is CellKind.HAZARD:
                # Spikes: a row of triangles pointing up
                half = CELL_SIZE // 2
                pygame.draw.polygon(surface, color, [rect.bottomleft, (rect.left + half, rect.top), rect.bottomright])
            elif kind.is_power_up():
                pygame.draw.circle(surface, color, rect.center, CELL_SIZE // 2 - 2)
            else:
                pygame.draw.rect(surface, color, rect)

    def render_effects(self, surface: pygame.Surface) -> None:
        for effect in self.game.effects:
            rect = cell_rect(effect.x, effect.y)
            # Expanding ring, one step per animation state
            radius = 2 + effect.state * CELL_SIZE // (2 * effect.frames)
            pygame.draw.circle(surface, EFFECT_COLORS[effect.kind], rect.center, radius, 1)

    def render_player(self, surface: pygame.Surface) -> None:
        x, y, sprite_index, visible = self.game.get_player_state()
        if not visible:
            return
        rect = cell_rect(x, y)
        pygame.draw.rect(surface, PLAYER_COLORS[sprite_index % len(PLAYER_COLORS)], rect.inflate(-4, 0))

        player = self.game.player
        if player.has_parachute:
            pygame.draw.arc(surface, COLOR_PARACHUTE, rect.move(0, -CELL_SIZE // 2), 0, 3.1416, 2)
        elif player.has_weight:
            pygame.draw.rect(surface, COLOR_WEIGHT, (rect.left + 4, rect.bottom - 5, CELL_SIZE - 8, 5))

    def render_hud(self, surface: pygame.Surface) -> None:
        game = self.game
        if self.show_fps:
            self._text(surface, f"FPS:{game.fps}", (SCREEN_WIDTH - 80, 0), COLOR_DIM)

        self._text(surface, "SCORE RANKING", (PANEL_X, 2))
        for rank, score in enumerate(game.high_scores.scores):
            self._text(surface, f"{rank + 1:2d}. {score:6d}", (PANEL_X + 16, 28 + rank * 22))

        self._text(surface, f"HI-SCORE:{game.high_scores.best}", (PANEL_X, 276))
        self._text(surface, f"SCORE:{game.score}", (PANEL_X, 300))
        self._text(surface, "LIFE", (PANEL_X, 330))
        self._text(surface, VERSION, (SCREEN_WIDTH - 106, 460), COLOR_DIM)

        if game.life > 0:
            color = COLOR_GAUGE_RED if game.gauge.is_red else COLOR_GAUGE
            width = int(GAUGE_WIDTH * game.life_ratio)
            pygame.draw.rect(surface, color, (GAUGE_X, GAUGE_Y, width, 16))

        if game.is_over:
            self._text(surface, "GAME OVER", (FIELD_LEFT + CELL_SIZE * 6, SCREEN_HEIGHT // 2 - 40))
            if game.epilogue_done:
                self._text(surface, "PRESS SPACE", (FIELD_LEFT + CELL_SIZE * 6, SCREEN_HEIGHT // 2 - 16))

    def _text(self, surface: pygame.Surface, text: str, pos: Tuple[int, int],
              color: Tuple[int, int, int] = COLOR_TEXT) -> None:
        surface.blit(self.font.render(text, True, color), pos)

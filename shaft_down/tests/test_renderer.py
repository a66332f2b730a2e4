"""
Tests for the pygame renderer, drawn onto an off-screen surface.
"""
import pytest

pygame = pytest.importorskip("pygame")

from shaft_down.gameplay.game import Game
from shaft_down.gameplay.player import Command
from shaft_down.gameplay.scores import HighScoreTable
from shaft_down.gameplay.constants import FIELD_LEFT, FIELD_RIGHT, FIELD_BOTTOM, GAMEOVER
from shaft_down.ui.renderer import Renderer, SCREEN_WIDTH, SCREEN_HEIGHT, COLOR_WALL


@pytest.fixture
def surface():
    pygame.font.init()
    yield pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.font.quit()


def capture_text(renderer, monkeypatch):
    drawn = []
    monkeypatch.setattr(renderer, "_text", lambda surface, text, pos, *args: drawn.append(text))
    return drawn


class TestRenderer:

    def test_walls_reach_field_bottom(self, surface):
        Renderer(Game(seed=1)).render(surface)
        assert tuple(surface.get_at((FIELD_LEFT - 1, FIELD_BOTTOM - 1)))[:3] == COLOR_WALL
        assert tuple(surface.get_at((FIELD_RIGHT + 1, FIELD_BOTTOM - 1)))[:3] == COLOR_WALL

    def test_hud_shows_best_score(self, surface, monkeypatch):
        game = Game(seed=1, high_scores=HighScoreTable(scores=[120, 45]))
        renderer = Renderer(game, show_fps=False)
        drawn = capture_text(renderer, monkeypatch)

        renderer.render(surface)

        assert "HI-SCORE:120" in drawn
        assert "SCORE:0" in drawn
        assert not any(text.startswith("FPS:") for text in drawn)

    def test_game_over_prompt(self, surface, monkeypatch):
        game = Game(seed=1)
        game.life = 0
        game.update(Command.NONE, 1)
        game.update(Command.NONE, GAMEOVER)
        assert game.is_over and game.epilogue_done

        renderer = Renderer(game)
        drawn = capture_text(renderer, monkeypatch)
        renderer.render(surface)

        assert "GAME OVER" in drawn
        assert "PRESS SPACE" in drawn

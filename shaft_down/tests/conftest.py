"""
Pytest fixtures for gameplay tests.
"""
import pytest

from shaft_down.gameplay.game import Game

from helpers import clear_field


@pytest.fixture
def game() -> Game:
    """A seeded game with an empty shaft."""
    g = Game(seed=1234)
    clear_field(g)
    return g

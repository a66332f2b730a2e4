"""
Gameplay core for Shaft Down.
NO UI DEPENDENCIES.
"""

from .game import Game, GamePhase
from .player import Player, Command
from .grid import Grid, CellKind
from .timer import Timer

__all__ = ["Game", "GamePhase", "Player", "Command", "Grid", "CellKind", "Timer"]

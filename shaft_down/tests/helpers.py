"""
Test helpers shared across gameplay tests.
"""
import random
from typing import List

from shaft_down.gameplay.game import Game
from shaft_down.gameplay.grid import CellKind


class ScriptedRandom(random.Random):
    """random.Random whose randrange returns queued values first."""

    def __init__(self, values: List[int]):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, *args, **kwargs):
        if self.values:
            return self.values.pop(0)
        return super().randrange(*args, **kwargs)


def clear_field(game: Game) -> None:
    """Empty every cell of the shaft."""
    for y in range(game.grid.height):
        game.grid.clear_row(y)


def put_floor_under_player(game: Game, kind: CellKind = CellKind.SOLID_GROUND) -> None:
    """Fill the whole row below the player."""
    game.grid.fill_run(0, game.grid.width, game.player.y + 1, kind)

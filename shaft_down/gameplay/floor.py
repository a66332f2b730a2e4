"""
Procedural terrain: floor runs and the power-ups placed on them.
NO UI DEPENDENCIES.
"""
import random
from dataclasses import dataclass
from typing import Optional

from .grid import Grid, CellKind
from .constants import (
    FLOOR_WIDTH, HAZARD_PERCENT, ITEM_PERCENT,
    ITEM_INVULN_MAX, ITEM_PARACHUTE_MAX
)


@dataclass(frozen=True)
class FloorRun:
    """A freshly generated run on the bottom row."""
    start: int
    kind: CellKind


def roll(rng: random.Random, percent: int) -> bool:
    """
    Percentage roll against randrange(100).

    The comparison is inclusive, so the real chance is (percent + 1)%.
    Terrain sequences for a given seed depend on it.
    """
    return rng.randrange(100) <= percent


class FloorGenerator:
    """Writes new terrain into the bottom row of a grid."""

    def __init__(self, grid: Grid, rng: random.Random, run_width: int = FLOOR_WIDTH):
        self.grid = grid
        self.rng = rng
        self.run_width = run_width

    def generate_floor(self) -> FloorRun:
        """Place one run of ground or hazard on the bottom row."""
        width = self.grid.width
        start = self.rng.randrange(width + self.run_width) - self.run_width
        start = max(0, min(start, width - self.run_width))

        kind = CellKind.HAZARD if roll(self.rng, HAZARD_PERCENT) else CellKind.SOLID_GROUND
        self.grid.fill_run(start, self.run_width, self.grid.bottom, kind)
        return FloorRun(start, kind)

    def place_power_up(self, run: FloorRun) -> Optional[CellKind]:
        """
        Maybe put a power-up one row above `run`.
        Hazard runs never carry items, but the item roll is drawn for every
        run so the random sequence does not depend on the run kind.
        Returns the placed kind, if any.
        """
        if not roll(self.rng, ITEM_PERCENT) or run.kind is CellKind.HAZARD:
            return None

        r = self.rng.randrange(100)
        if r <= ITEM_INVULN_MAX:
            item = CellKind.POWER_UP_INVULN
        elif r <= ITEM_PARACHUTE_MAX:
            item = CellKind.POWER_UP_PARACHUTE
        else:
            item = CellKind.POWER_UP_WEIGHT

        self.grid.set(self.run_item_column(run), self.grid.bottom - 1, item)
        return item

    def run_item_column(self, run: FloorRun) -> int:
        """Column where a power-up sits on top of `run`."""
        return run.start + self.run_width // 2

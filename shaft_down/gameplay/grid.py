"""
Shaft grid system.
NO UI DEPENDENCIES.
"""
from typing import List, Iterator, Tuple
from enum import Enum, auto


class CellKind(Enum):
    """Everything a shaft cell can hold."""
    EMPTY = auto()
    SOLID_GROUND = auto()
    HAZARD = auto()
    POWER_UP_INVULN = auto()
    POWER_UP_PARACHUTE = auto()
    POWER_UP_WEIGHT = auto()

    def is_passable(self) -> bool:
        """True if the player may move into or fall through this cell."""
        return _PASSABLE[self]

    def is_power_up(self) -> bool:
        return self in POWER_UPS


# Every CellKind needs an entry; a missing one fails on lookup.
_PASSABLE = {
    CellKind.EMPTY: True,
    CellKind.SOLID_GROUND: False,
    CellKind.HAZARD: False,
    CellKind.POWER_UP_INVULN: True,
    CellKind.POWER_UP_PARACHUTE: True,
    CellKind.POWER_UP_WEIGHT: True,
}

POWER_UPS = {
    CellKind.POWER_UP_INVULN,
    CellKind.POWER_UP_PARACHUTE,
    CellKind.POWER_UP_WEIGHT,
}


class Grid:
    """
    The vertical shaft.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right
    - y increases downward; the last row is where new terrain appears
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._rows: List[List[CellKind]] = [
            [CellKind.EMPTY] * width for _ in range(height)
        ]

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self!r}")

    def get(self, x: int, y: int) -> CellKind:
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, kind: CellKind) -> None:
        self._check(x, y)
        self._rows[y][x] = kind

    def can_pass(self, x: int, y: int) -> bool:
        return self.get(x, y).is_passable()

    def row(self, y: int) -> Tuple[CellKind, ...]:
        """Read-only copy of one row."""
        self._check(0, y)
        return tuple(self._rows[y])

    @property
    def bottom(self) -> int:
        return self.height - 1

    def fill_run(self, start: int, length: int, y: int, kind: CellKind) -> None:
        """Write `length` cells of `kind` starting at column `start`."""
        self._check(start, y)
        self._check(start + length - 1, y)
        for x in range(start, start + length):
            self._rows[y][x] = kind

    def clear_row(self, y: int) -> None:
        self.fill_run(0, self.width, y, CellKind.EMPTY)

    def shift_up(self) -> None:
        """Move every row up by one and leave an empty bottom row."""
        del self._rows[0]
        self._rows.append([CellKind.EMPTY] * self.width)

    def iter_cells(self) -> Iterator[Tuple[int, int, CellKind]]:
        """Yield (x, y, kind) for every non-empty cell."""
        for y, row in enumerate(self._rows):
            for x, kind in enumerate(row):
                if kind is not CellKind.EMPTY:
                    yield x, y, kind

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

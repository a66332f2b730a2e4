"""
The falling figure and the commands that steer it.
NO UI DEPENDENCIES.
"""
from enum import Enum, auto

from .grid import CellKind
from .timer import Timer
from .constants import (
    WIDTH, HEIGHT, WALK, PLAYER_FLASH, INVULN_FLASH, HAZARD_BREAK,
    INVULN_TIME, WEIGHT_CUTOFF, INVULN_SPRITES
)


class Command(Enum):
    """One input per update."""
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()

    def dx(self) -> int:
        return {Command.NONE: 0, Command.LEFT: -1, Command.RIGHT: 1}[self]


class Player:
    """
    The player figure.

    The figure never moves vertically: the shaft scrolls past it.
    Parachute and weight are mutually exclusive.
    """

    def __init__(self):
        self.x: int = WIDTH // 2 - 1
        self.y: int = HEIGHT // 2
        self.invulnerable: bool = False
        self.has_parachute: bool = False
        self.has_weight: bool = False
        self.flashing: bool = False
        self.visible: bool = True
        self.sprite_index: int = 0
        self.invuln_start: int = 0

        self.walk_timer = Timer(WALK)
        self.flash_timer = Timer(PLAYER_FLASH)
        self.invuln_flash_timer = Timer(INVULN_FLASH)
        self.break_timer = Timer(HAZARD_BREAK)

    # =========================================================================
    # POWER-UPS
    # =========================================================================

    def pick_up(self, kind: CellKind, now: int) -> None:
        """Apply the effect of a power-up cell."""
        if kind is CellKind.POWER_UP_INVULN:
            self.invulnerable = True
            self.invuln_start = now
        elif kind is CellKind.POWER_UP_PARACHUTE:
            self.has_parachute = True
            self.has_weight = False
        elif kind is CellKind.POWER_UP_WEIGHT:
            self.has_weight = True
            self.has_parachute = False
        else:
            raise ValueError(f"{kind} is not a power-up")

    def invuln_elapsed(self, now: int) -> int:
        return now - self.invuln_start

    def weight_expired(self, now: int) -> bool:
        """Weight runs out early when carried together with invulnerability."""
        return (self.has_weight and self.invulnerable
                and self.invuln_elapsed(now) >= INVULN_TIME * WEIGHT_CUTOFF)

    def invuln_expired(self, now: int) -> bool:
        return self.invulnerable and self.invuln_elapsed(now) >= INVULN_TIME

    def end_invulnerability(self) -> None:
        self.invulnerable = False
        self.sprite_index = 0

    @property
    def can_break(self) -> bool:
        return self.invulnerable and self.has_weight

    # =========================================================================
    # VISUALS
    # =========================================================================

    def start_flashing(self) -> None:
        self.flashing = True

    def stop_flashing(self) -> None:
        self.flashing = False
        self.sprite_index = 0

    def update_visuals(self, dt: int) -> None:
        """Advance flash (0/1 toggle) and invulnerability shimmer."""
        if self.flashing:
            self.flash_timer.advance(dt)
            while self.flash_timer.has_fired():
                self.sprite_index = 1 - self.sprite_index

        if self.invulnerable:
            self.invuln_flash_timer.advance(dt)
            while self.invuln_flash_timer.has_fired():
                self.sprite_index = (self.sprite_index + 1) % INVULN_SPRITES

    def __repr__(self) -> str:
        return f"Player(x={self.x}, y={self.y}, sprite={self.sprite_index})"

"""
Damage gauge - life drain while standing on a hazard.
NO UI DEPENDENCIES.
"""
from .timer import Timer
from .constants import DAMAGE, GAUGE_FLASH


class DamageGauge:
    """
    Tracks one damage episode.

    The gauge itself never touches life; the game applies one point per
    damage tick returned by `update`.
    """

    def __init__(self):
        self.damage_timer = Timer(DAMAGE)
        self.flash_timer = Timer(GAUGE_FLASH)
        self.damaging: bool = False
        self.flashing: bool = False
        self.is_red: bool = False

    def start(self) -> bool:
        """Begin an episode. Returns True if one was not already running."""
        if self.damaging:
            return False
        self.damaging = True
        self.flashing = True
        return True

    def stop(self) -> bool:
        """End the episode. Returns True if one was running."""
        if not self.damaging:
            return False
        self.damaging = False
        self.flashing = False
        self.is_red = False
        # Flash cadence keeps its phase; only the damage clock restarts.
        self.damage_timer.reset()
        return True

    def update(self, dt: int) -> int:
        """Advance an active episode. Returns the number of damage ticks."""
        if not self.damaging:
            return 0
        ticks = self.damage_timer.fire_count(dt)
        self.flash_timer.advance(dt)
        while self.flash_timer.has_fired():
            self.is_red = not self.is_red
        return ticks

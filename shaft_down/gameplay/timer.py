"""
Fixed-period timers driven by elapsed milliseconds.
NO UI DEPENDENCIES.
"""
from .constants import FPS_WINDOW


class Timer:
    """
    Accumulates elapsed time and fires once per whole period.

    A large dt fires several times, so callers drain it in a loop:

        timer.advance(dt)
        while timer.has_fired():
            step()

    Unconsumed time carries over to the next call, which makes the firing
    count independent of how dt is split across frames.
    """

    def __init__(self, period: int):
        self.period: int = 0
        self.elapsed: int = 0
        self.set_period(period)

    def set_period(self, period: int) -> None:
        """Change the period in place. Accumulated progress is kept."""
        if period <= 0:
            raise ValueError(f"Timer period must be positive, got {period}")
        self.period = period

    def reset(self) -> None:
        self.elapsed = 0

    def advance(self, dt: int) -> None:
        if dt < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {dt}")
        self.elapsed += dt

    def has_fired(self) -> bool:
        """Consume one period if available."""
        if self.elapsed >= self.period:
            self.elapsed -= self.period
            return True
        return False

    def fire_count(self, dt: int) -> int:
        """Advance by dt and drain every elapsed period. Returns the count."""
        self.advance(dt)
        count = 0
        while self.has_fired():
            count += 1
        return count

    def __repr__(self) -> str:
        return f"Timer(period={self.period}, elapsed={self.elapsed})"


class FrameCounter:
    """Counts update calls and publishes the rate once per second."""

    def __init__(self, window: int = FPS_WINDOW):
        self.window = window
        self.time: int = 0
        self.count: int = 0
        self.fps: int = 0

    def tick(self, dt: int) -> None:
        self.time += dt
        self.count += 1
        if self.time >= self.window:
            self.fps = self.count
            self.time -= self.window
            self.count = 0

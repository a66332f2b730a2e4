"""
Transient visual markers. They never affect gameplay.
NO UI DEPENDENCIES.
"""
from typing import List, Iterator
from enum import Enum, auto

from .timer import Timer


class EffectKind(Enum):
    BREAK = auto()    # terrain destroyed by weight + invulnerability
    IMPACT = auto()   # parachute torn on a hazard


# (frame count, ms per frame) for each kind
EFFECT_FRAMES = {
    EffectKind.BREAK: (4, 50),
    EffectKind.IMPACT: (3, 80),
}


class Effect:
    """One animation playing at a grid position."""

    def __init__(self, kind: EffectKind, x: int, y: int):
        self.kind = kind
        self.x = x
        self.y = y
        self.frames, period = EFFECT_FRAMES[kind]
        self.timer = Timer(period)
        self.state: int = 0
        self.dead: bool = False

    def update(self, dt: int) -> None:
        if self.dead:
            return
        self.timer.advance(dt)
        while self.timer.has_fired():
            self.state += 1
            if self.state >= self.frames:
                self.dead = True
                return

    def scroll(self) -> None:
        self.y -= 1
        if self.y < 0:
            self.dead = True

    def __repr__(self) -> str:
        return f"Effect({self.kind.name}, ({self.x}, {self.y}), state={self.state})"


class EffectList:
    """All live effects; dead ones are purged after every pass."""

    def __init__(self):
        self._effects: List[Effect] = []

    def spawn(self, kind: EffectKind, x: int, y: int) -> Effect:
        effect = Effect(kind, x, y)
        self._effects.append(effect)
        return effect

    def update(self, dt: int) -> None:
        for effect in self._effects:
            effect.update(dt)
        self._purge()

    def scroll(self) -> None:
        """Move every effect up one row along with the terrain."""
        for effect in self._effects:
            effect.scroll()
        self._purge()

    def _purge(self) -> None:
        self._effects = [e for e in self._effects if not e.dead]

    def __iter__(self) -> Iterator[Effect]:
        return iter(self._effects)

    def __len__(self) -> int:
        return len(self._effects)

"""
Main Game class - orchestrates all gameplay systems.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
import time
from typing import Optional, List, Tuple
from enum import Enum, auto

from .grid import Grid, CellKind
from .floor import FloorGenerator
from .player import Player, Command
from .gauge import DamageGauge
from .effects import EffectList, EffectKind
from .scores import HighScoreTable
from .timer import Timer, FrameCounter
from .constants import (
    WIDTH, HEIGHT, MAX_LIFE, FALL, FALL_PARA, FALL_WEIGHT, GAMEOVER,
    SOUND_DAMAGE, SOUND_INVULN, SOUND_PARACHUTE, SOUND_WEIGHT, SOUND_IMPACT,
    SOUND_BREAK, SOUND_FOOT, SOUND_GAMEOVER,
    MUSIC_HALT, MUSIC_PAUSE, MUSIC_RESUME
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the game."""
    PLAYING = auto()
    GAME_OVER = auto()   # terminal; restart builds a new Game


class Game:
    """
    The main game class that orchestrates all gameplay.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as plain data and accepts one command per frame.
    Sounds and music commands are queued as strings for the shell to drain.

    Usage:
        game = Game()
        while running:
            game.update(command, dt_ms)
            # UI reads game state and renders
            play(game.drain_sounds(), game.drain_music())
    """

    def __init__(self, seed: Optional[int] = None, high_scores: Optional[HighScoreTable] = None):
        if seed is None:
            seed = int(time.time())
        logger.info(f"Random seed = {seed}")
        self.seed = seed
        self.rng = random.Random(seed)

        # Game state
        self.phase = GamePhase.PLAYING
        self.life: int = MAX_LIFE
        self.score: int = 0
        self.now: int = 0
        self.high_scores = high_scores if high_scores is not None else HighScoreTable()

        # Outbound queues for the audio collaborator
        self.pending_sounds: List[str] = []
        self.pending_music: List[str] = []

        # Shaft
        self.grid = Grid(WIDTH, HEIGHT)
        self.floor = FloorGenerator(self.grid, self.rng)
        self.is_floor_row: bool = False
        self.fall_timer = Timer(FALL)

        # Actors
        self.player = Player()
        self.gauge = DamageGauge()
        self.effects = EffectList()

        self.frames = FrameCounter()
        self.epilogue_timer = Timer(GAMEOVER)
        self.epilogue_done: bool = False

        # First floor
        self.floor.generate_floor()

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, command: Command, dt: int) -> None:
        """Advance the game by dt milliseconds."""
        self.now += dt

        if self.phase == GamePhase.PLAYING:
            self._update_playing(command, dt)
        else:
            self._update_epilogue(dt)

        self.frames.tick(dt)

    def _update_playing(self, command: Command, dt: int) -> None:
        self._update_player(command, dt)
        self._update_damage(dt)
        self.effects.update(dt)

        self.fall_timer.advance(dt)
        while self.fall_timer.has_fired():
            self.scroll()

        if self.life <= 0:
            self._game_over()

    def _game_over(self) -> None:
        self.phase = GamePhase.GAME_OVER
        self.pending_music.append(MUSIC_HALT)
        self.pending_sounds.append(SOUND_GAMEOVER)
        self.player.start_flashing()
        self.epilogue_timer.reset()
        logger.info(f"Game over at {self.now}ms, score {self.score}")

    def _update_epilogue(self, dt: int) -> None:
        """Only the game-over countdown (and the dying flash) run here."""
        self.player.update_visuals(dt)
        if self.epilogue_done:
            return

        self.epilogue_timer.advance(dt)
        if self.epilogue_timer.has_fired():
            self.epilogue_done = True
            self.player.visible = False
            rank = self.high_scores.insert(self.score)
            if rank is not None:
                logger.info(f"Score {self.score} entered the ranking at #{rank + 1}")

    # =========================================================================
    # PLAYER
    # =========================================================================

    def _update_player(self, command: Command, dt: int) -> None:
        self._walk(command, dt)
        self._pick_up()
        self._expire_power_ups()
        self._check_parachute()
        self._break_terrain(dt)
        self.player.update_visuals(dt)

    def _walk(self, command: Command, dt: int) -> None:
        """One column per walk tick, never into walls, ground or hazards."""
        player = self.player
        player.walk_timer.advance(dt)
        while player.walk_timer.has_fired():
            dx = command.dx()
            if dx == 0:
                continue
            x = player.x + dx
            if self.grid.in_bounds(x, player.y) and self.grid.can_pass(x, player.y):
                player.x = x

    def _pick_up(self) -> None:
        player = self.player
        kind = self.grid.get(player.x, player.y)
        if not kind.is_power_up():
            return

        self.grid.set(player.x, player.y, CellKind.EMPTY)
        player.pick_up(kind, self.now)

        if kind is CellKind.POWER_UP_INVULN:
            self.pending_music.append(MUSIC_PAUSE)
            self.pending_sounds.append(SOUND_INVULN)
        elif kind is CellKind.POWER_UP_PARACHUTE:
            self.set_fall_period(FALL_PARA)
            self.pending_sounds.append(SOUND_PARACHUTE)
        elif kind is CellKind.POWER_UP_WEIGHT:
            self.set_fall_period(FALL_WEIGHT)
            self.pending_sounds.append(SOUND_WEIGHT)

    def _expire_power_ups(self) -> None:
        player = self.player
        if player.weight_expired(self.now):
            player.has_weight = False
            self.set_fall_period(FALL)

        if player.invuln_expired(self.now):
            player.end_invulnerability()
            self.pending_music.append(MUSIC_RESUME)

    def _check_parachute(self) -> None:
        """A parachute tears on a hazard unless the player is invulnerable."""
        player = self.player
        if not player.has_parachute or player.invulnerable:
            return
        if self.cell_below() is not CellKind.HAZARD:
            return

        player.has_parachute = False
        self.set_fall_period(FALL)
        self.pending_sounds.append(SOUND_IMPACT)
        self.effects.spawn(EffectKind.IMPACT, player.x, player.y)

    def _break_terrain(self, dt: int) -> None:
        """
        Weight + invulnerability smash through terrain.
        Ground breaks on contact; a hazard needs one full break tick.
        """
        player = self.player
        below = self.cell_below()
        if not player.can_break or below is not CellKind.HAZARD:
            player.break_timer.reset()
        if not player.can_break:
            return

        if below is CellKind.SOLID_GROUND:
            self._break_cell(player.x, player.y + 1)
        elif below is CellKind.HAZARD:
            player.break_timer.advance(dt)
            if player.break_timer.has_fired():
                player.break_timer.reset()
                self._break_cell(player.x, player.y + 1)

    def _break_cell(self, x: int, y: int) -> None:
        self.grid.set(x, y, CellKind.EMPTY)
        self.pending_sounds.append(SOUND_BREAK)
        self.effects.spawn(EffectKind.BREAK, x, y)

    def set_fall_period(self, period: int) -> None:
        """Change scroll speed without losing fall progress."""
        self.fall_timer.set_period(period)

    # =========================================================================
    # DAMAGE
    # =========================================================================

    def _update_damage(self, dt: int) -> None:
        player = self.player
        if self.cell_below() is CellKind.HAZARD and not player.invulnerable:
            if self.gauge.start():
                player.start_flashing()
            for _ in range(self.gauge.update(dt)):
                if self.life > 0:
                    self.pending_sounds.append(SOUND_DAMAGE)
                    self.life -= 1
        elif self.gauge.stop():
            player.stop_flashing()

    # =========================================================================
    # SCROLL
    # =========================================================================

    def scroll(self) -> bool:
        """
        Shift the shaft up one row.
        Returns False (and changes nothing) while the player stands on something.
        """
        player = self.player
        if not self.grid.can_pass(player.x, player.y + 1):
            return False

        self.grid.shift_up()
        self.effects.scroll()

        if self.is_floor_row:
            run = self.floor.generate_floor()
            self.floor.place_power_up(run)
        self.is_floor_row = not self.is_floor_row

        if self.cell_below() is CellKind.SOLID_GROUND:
            self.pending_sounds.append(SOUND_FOOT)

        self.score += 1
        return True

    def cell_below(self) -> CellKind:
        return self.grid.get(self.player.x, self.player.y + 1)

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def drain_sounds(self) -> List[str]:
        """Return queued sound names and clear the queue."""
        sounds, self.pending_sounds = self.pending_sounds, []
        return sounds

    def drain_music(self) -> List[str]:
        """Return queued music commands and clear the queue."""
        music, self.pending_music = self.pending_music, []
        return music

    @property
    def life_ratio(self) -> float:
        """Return life as 0.0 to 1.0."""
        return self.life / MAX_LIFE

    @property
    def fps(self) -> int:
        return self.frames.fps

    def get_player_state(self) -> Tuple[int, int, int, bool]:
        """Get (x, y, sprite_index, visible) for the player."""
        player = self.player
        return (player.x, player.y, player.sprite_index, player.visible)

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, duration: int, dt: int = 16, command: Command = Command.NONE) -> List[str]:
        """
        Run the game for `duration` milliseconds with a fixed command.
        Returns all sounds queued along the way.
        """
        sounds: List[str] = []
        elapsed = 0
        while elapsed < duration:
            self.update(command, dt)
            sounds.extend(self.drain_sounds())
            elapsed += dt
        return sounds

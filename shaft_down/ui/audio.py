"""
Audio Player - Drains the game's sound and music queues into pygame.mixer.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable

import pygame

from ..gameplay.constants import (
    SOUND_DAMAGE, SOUND_INVULN, SOUND_BREAK,
    MUSIC_HALT, MUSIC_PAUSE, MUSIC_RESUME
)

logger = logging.getLogger(__name__)

MAX_CHANNELS = 10
FREQUENCY = 22050
BUFFER_SIZE = 1024

# Cues that restart on their own channel instead of stacking
DEDICATED_CHANNELS = {
    SOUND_DAMAGE: 4,
    SOUND_INVULN: 3,
    SOUND_BREAK: 2,
}


class AudioPlayer:
    """
    Plays queued cues.

    Missing files or a missing audio device are logged once and
    the game keeps running silently.
    """

    def __init__(self, sound_dir: Path, music_file: str, enabled: bool = True):
        self.sound_dir = sound_dir
        self.music_path = sound_dir / music_file
        self.chunks: Dict[str, pygame.mixer.Sound] = {}
        self.enabled = enabled and self._init_mixer()
        self.music_loaded = False
        if self.enabled:
            self._load_chunks()
            self._load_music()

    def _init_mixer(self) -> bool:
        try:
            pygame.mixer.init(frequency=FREQUENCY, channels=1, buffer=BUFFER_SIZE)
            pygame.mixer.set_num_channels(MAX_CHANNELS)
            pygame.mixer.set_reserved(max(DEDICATED_CHANNELS.values()) + 1)
        except pygame.error as exc:
            logger.warning(f"Audio disabled: {exc}")
            return False
        return True

    def _load_chunks(self) -> None:
        if not self.sound_dir.is_dir():
            logger.warning(f"Sound directory not found: {self.sound_dir}")
            return
        for path in sorted(self.sound_dir.glob("*.wav")):
            try:
                self.chunks[path.name] = pygame.mixer.Sound(str(path))
            except pygame.error as exc:
                logger.warning(f"Cannot load sound {path}: {exc}")
        logger.info(f"Loaded {len(self.chunks)} sounds from {self.sound_dir}")

    def _load_music(self) -> None:
        if not self.music_path.exists():
            logger.warning(f"Music file not found: {self.music_path}")
            return
        try:
            pygame.mixer.music.load(str(self.music_path))
        except pygame.error as exc:
            logger.warning(f"Cannot load music {self.music_path}: {exc}")
            return
        self.music_loaded = True

    def start_music(self) -> None:
        if self.enabled and self.music_loaded:
            pygame.mixer.music.play(-1)

    def play_sounds(self, sounds: Iterable[str]) -> None:
        for name in sounds:
            if not self.enabled:
                continue
            chunk = self.chunks.get(name)
            if chunk is None:
                logger.debug(f"No sound loaded for {name}")
                continue
            channel_id = DEDICATED_CHANNELS.get(name)
            if channel_id is None:
                chunk.play()
            else:
                pygame.mixer.Channel(channel_id).play(chunk)

    def play_music(self, commands: Iterable[str]) -> None:
        for command in commands:
            if not self.enabled:
                continue
            if command == MUSIC_HALT:
                pygame.mixer.music.stop()
            elif command == MUSIC_PAUSE:
                pygame.mixer.music.pause()
            elif command == MUSIC_RESUME:
                pygame.mixer.music.unpause()
            else:
                logger.warning(f"Unknown music command: {command}")

    def is_busy(self) -> bool:
        """True while any sound effect is still playing."""
        return self.enabled and pygame.mixer.get_busy()

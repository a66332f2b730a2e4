"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Sequence

import pygame

from ..gameplay.game import Game
from ..gameplay.player import Command


def command_from_keys(pressed: Sequence[bool]) -> Command:
    """
    Map held keys to a command.
    Left is polled first, so holding both keys walks left.
    """
    if pressed[pygame.K_LEFT]:
        return Command.LEFT
    if pressed[pygame.K_RIGHT]:
        return Command.RIGHT
    return Command.NONE


class InputHandler:
    """
    Handles keyboard input.

    The input handler:
    - Reads the held direction keys once per frame
    - Reports quit requests
    - Reports restart requests once the game is over
    """

    def __init__(self, game: Game):
        self.game = game
        self.restart_requested = False

    def handle_key(self, key: int, audio_busy: bool = False) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        # Restart only after the game-over jingle has finished
        if key == pygame.K_SPACE and self.game.is_over and not audio_busy:
            self.restart_requested = True

        return False

    def poll_command(self) -> Command:
        """Read held keys for this frame."""
        return command_from_keys(pygame.key.get_pressed())

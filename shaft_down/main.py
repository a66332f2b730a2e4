#!/usr/bin/env python3
"""
Shaft Down - Main Entry Point

Fall down an endless shaft. Land on floors, steer clear of spikes,
and grab power-ups on the way: a star for invulnerability, a parachute
to fall slower, a weight to fall faster (and, while invulnerable, to
smash through whatever is below you).

Usage:
    python -m shaft_down.main
    shaft-down

Controls:
    Left, Right: Move
    Space: Restart when game over
    Escape: Quit
"""
import logging
from pathlib import Path

import pygame

from .config import get_settings
from .gameplay.game import Game
from .ui.renderer import Renderer, SCREEN_WIDTH, SCREEN_HEIGHT
from .ui.input_handler import InputHandler
from .ui.audio import AudioPlayer

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Shaft Down - Starting...")
    print(__doc__)

    pygame.init()
    pygame.display.set_caption("Shaft Down")
    window = pygame.display.set_mode((SCREEN_WIDTH * settings.scale, SCREEN_HEIGHT * settings.scale))
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.mouse.set_visible(False)

    audio = AudioPlayer(
        Path(settings.resource_dir) / "sound",
        settings.music_file,
        enabled=settings.sound_enabled,
    )

    game = Game(seed=settings.seed)
    renderer = Renderer(game, show_fps=settings.show_fps)
    input_handler = InputHandler(game)

    clock = pygame.time.Clock()
    audio.start_music()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if input_handler.handle_key(event.key, audio_busy=audio.is_busy()):
                    running = False

        if input_handler.restart_requested:
            # Same seed setting, same ranking; everything else starts fresh
            game = Game(seed=settings.seed, high_scores=game.high_scores)
            renderer.game = game
            input_handler = InputHandler(game)
            audio.start_music()

        dt = clock.tick(settings.max_fps)
        game.update(input_handler.poll_command(), dt)

        renderer.render(screen)
        if settings.scale == 1:
            window.blit(screen, (0, 0))
        else:
            pygame.transform.scale(screen, window.get_size(), window)
        pygame.display.flip()

        audio.play_sounds(game.drain_sounds())
        audio.play_music(game.drain_music())

    logger.info(f"Quit with ranking {game.high_scores.scores}")
    pygame.quit()


if __name__ == "__main__":
    main()

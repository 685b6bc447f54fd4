"""Window and event loop for playing the game."""

from __future__ import annotations

import logging
import sys

import pygame

from viper.config import GameConfig
from viper.engine import GameEngine

logger = logging.getLogger(__name__)

# Render rate; simulation speed is set separately by GameConfig.fps.
FRAME_RATE = 60


def run(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Open a window and play until it is closed.

    After game over the final frame stays on screen until the player quits.
    """
    engine = GameEngine(config, seed=seed)
    config = engine.config

    pygame.init()
    try:
        screen = pygame.display.set_mode(config.screen_size)
        pygame.display.set_caption(config.title)
        clock = pygame.time.Clock()

        running = True
        while running:
            elapsed = clock.tick(FRAME_RATE) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        engine.key_down(event.key)

            engine.update(elapsed)
            engine.draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()


def main() -> int:
    """Entry point for the ``viper`` command."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    try:
        run()
    except (pygame.error, OSError):
        logger.exception("Game backend failed.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

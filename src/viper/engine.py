"""Fixed-rate game engine composing grid, snake and food."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from viper.config import GameConfig
from viper.food import Food
from viper.grid import Grid, Position
from viper.render import draw_frame
from viper.snake import Ate, Direction, Snake
from viper.timing import TickGate

if TYPE_CHECKING:
    import pygame

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake game state and its simulation driver.

    The engine owns the grid, snake, food and random generator. Input is
    fed through :meth:`key_down`; wall time through :meth:`update`, which
    runs one :meth:`step` per elapsed tick interval. Once the snake runs
    into itself ``game_over`` latches and the state stops changing.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        # seed=None pulls fresh entropy from the OS.
        self.rng = np.random.default_rng(seed)
        self.gate = TickGate(self.config.fps)

        self.snake = Snake(Position(*self.config.start), self.grid)
        self.food = Food(self.grid.random_position(self.rng))

        self.tick = 0
        self.game_over = False

        logger.info(
            "New game on a %dx%d grid at %d ticks/s.",
            self.grid.width, self.grid.height, self.config.fps,
        )

    def key_down(self, key: int) -> None:
        """Forward a directional key press to the snake; ignore other keys."""
        direction = Direction.from_key(key)
        if direction is not None:
            self.snake.steer(direction)

    def step(self) -> Ate | None:
        """Advance the game by one tick.

        Returns the tick outcome, or ``None`` without touching the state
        once the game is over.
        """
        if self.game_over:
            return None

        ate = self.snake.update(self.food)
        self.tick += 1

        if ate is Ate.FOOD:
            self.food.relocate(self.grid.random_position(self.rng))
        elif ate is Ate.ITSELF:
            self.game_over = True
            logger.info(
                "Snake ran into itself at tick %d with length %d.",
                self.tick, len(self.snake),
            )
        return ate

    def update(self, elapsed: float) -> int:
        """Run every tick that fits into the accumulated *elapsed* seconds.

        Returns the number of ticks consumed from the gate.
        """
        self.gate.accumulate(elapsed)
        ticks = 0
        while self.gate.check():
            self.step()
            ticks += 1
        return ticks

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current state onto *surface*."""
        draw_frame(surface, self.snake, self.food, self.config)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

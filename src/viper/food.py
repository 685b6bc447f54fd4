"""The food item the snake chases."""

from __future__ import annotations

import logging

from viper.grid import Position

logger = logging.getLogger(__name__)


class Food:
    """A single food cell. Eating it moves it rather than replacing it."""

    def __init__(self, pos: Position) -> None:
        self.pos = pos

    def relocate(self, pos: Position) -> None:
        """Move the food to *pos* in place."""
        logger.debug("Food moved from (%d, %d) to (%d, %d).",
                     self.pos.x, self.pos.y, pos.x, pos.y)
        self.pos = pos

    def to_dict(self) -> dict:
        return {"position": self.pos.to_list()}

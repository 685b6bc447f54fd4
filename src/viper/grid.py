"""Toroidal grid and position arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from viper.snake import Direction


@dataclass(frozen=True)
class Position:
    """A grid cell addressed as ``(x, y)``; ``y`` grows downwards."""

    x: int
    y: int

    @classmethod
    def random(cls, rng: np.random.Generator, max_x: int, max_y: int) -> Position:
        """Draw a position uniformly from ``[0, max_x) x [0, max_y)``."""
        return cls(int(rng.integers(0, max_x)), int(rng.integers(0, max_y)))

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class Grid:
    """Fixed-size grid whose edges wrap around onto the opposite side."""

    def __init__(self, width: int = 32, height: int = 32) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1x1.")
        self.width = width
        self.height = height

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a position lies within the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def wrap(self, x: int, y: int) -> Position:
        """Reduce arbitrary coordinates onto the grid."""
        return Position(x % self.width, y % self.height)

    def next(self, pos: Position, direction: Direction) -> Position:
        """Return the cell one step from *pos* towards *direction*."""
        dx, dy = direction.value
        return self.wrap(pos.x + dx, pos.y + dy)

    def random_position(self, rng: np.random.Generator) -> Position:
        """Draw a uniformly random in-bounds position."""
        return Position.random(rng, self.width, self.height)

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}

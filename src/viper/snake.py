"""Snake representation, movement and turn arbitration."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

from viper.grid import Grid, Position

if TYPE_CHECKING:
    from viper.food import Food


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_key(cls, key: int) -> Direction | None:
        """Map a pygame key code to a direction, or ``None``."""
        return _KEY_DIRECTIONS.get(key)

    def inverse(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class Ate(enum.Enum):
    """What the head ran into on the last tick."""

    FOOD = "food"
    ITSELF = "itself"


@dataclass(frozen=True)
class Segment:
    """One body cell. Segments compare equal by position."""

    pos: Position


class Snake:
    """A snake made of a separate head segment plus a trailing body.

    ``body[0]`` is the segment right behind the head; ``body[-1]`` is the
    oldest segment, the tail.

    Turns go through two slots. ``dir`` is the direction the next tick will
    move in and ``prev_dir`` the one the last tick actually moved in. When
    they differ a turn is already waiting for its tick, so a further turn is
    parked in ``next_dir`` and committed one tick later.
    """

    def __init__(
        self,
        start: Position,
        grid: Grid,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.grid = grid
        self.head = Segment(start)
        self.body: deque[Segment] = deque(
            [Segment(grid.next(start, direction.inverse()))],
        )
        self.dir = direction
        self.prev_dir = direction
        self.next_dir: Direction | None = None
        self.ate: Ate | None = None

    def __len__(self) -> int:
        return len(self.body) + 1

    def positions(self) -> list[Position]:
        """Head position followed by body positions, tail last."""
        return [self.head.pos] + [seg.pos for seg in self.body]

    def occupies(self, pos: Position) -> bool:
        """Check whether the head or any body segment covers *pos*."""
        return pos == self.head.pos or any(seg.pos == pos for seg in self.body)

    def eats(self, food: Food) -> bool:
        return self.head.pos == food.pos

    def eats_self(self) -> bool:
        return any(seg.pos == self.head.pos for seg in self.body)

    def steer(self, direction: Direction) -> None:
        """Apply a requested turn.

        A turn requested while another one is still waiting for its tick is
        buffered (replacing any earlier buffered turn). Otherwise the turn
        is taken at once unless it would reverse into the neck.
        """
        if self.dir != self.prev_dir and direction.inverse() != self.dir:
            self.next_dir = direction
        elif direction.inverse() != self.prev_dir:
            self.dir = direction

    def update(self, food: Food) -> Ate | None:
        """Advance one tick and return what the head ran into."""
        if self.prev_dir == self.dir and self.next_dir is not None:
            self.dir = self.next_dir
            self.next_dir = None

        new_head = Segment(self.grid.next(self.head.pos, self.dir))
        # The old head must join the body before collisions are checked.
        self.body.appendleft(self.head)
        self.head = new_head

        if self.eats_self():
            self.ate = Ate.ITSELF
        elif self.eats(food):
            self.ate = Ate.FOOD
        else:
            self.ate = None

        if self.ate is None:
            self.body.pop()

        self.prev_dir = self.dir
        return self.ate

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": self.head.pos.to_list(),
            "body": [seg.pos.to_list() for seg in self.body],
            "direction": self.dir.name.lower(),
            "ate": self.ate.value if self.ate is not None else None,
        }

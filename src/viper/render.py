"""Drawing the game state with pygame."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from viper.config import Color

if TYPE_CHECKING:
    from viper.config import GameConfig
    from viper.food import Food
    from viper.grid import Position
    from viper.snake import Snake

DrawRequest = tuple[pygame.Rect, Color]


def cell_rect(pos: Position, cell_size: tuple[int, int]) -> pygame.Rect:
    """Pixel rectangle covering the grid cell at *pos*."""
    w, h = cell_size
    return pygame.Rect(pos.x * w, pos.y * h, w, h)


def draw_requests(snake: Snake, food: Food, config: GameConfig) -> list[DrawRequest]:
    """Rectangles to fill for one frame: body, then head, then food."""
    cell_size = (config.cell_width, config.cell_height)
    requests: list[DrawRequest] = [
        (cell_rect(seg.pos, cell_size), config.snake_color) for seg in snake.body
    ]
    requests.append((cell_rect(snake.head.pos, cell_size), config.snake_color))
    requests.append((cell_rect(food.pos, cell_size), config.food_color))
    return requests


def draw_frame(
    surface: pygame.Surface, snake: Snake, food: Food, config: GameConfig,
) -> None:
    """Clear *surface* and draw the snake and food on it."""
    surface.fill(config.background_color)
    for rect, color in draw_requests(snake, food, config):
        pygame.draw.rect(surface, color, rect)

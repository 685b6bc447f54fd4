"""Viper — a toroidal-grid snake game."""

from viper.config import GameConfig
from viper.engine import GameEngine
from viper.food import Food
from viper.grid import Grid, Position
from viper.snake import Ate, Direction, Segment, Snake
from viper.timing import TickGate

__all__ = [
    "Ate",
    "Direction",
    "Food",
    "GameConfig",
    "GameEngine",
    "Grid",
    "Position",
    "Segment",
    "Snake",
    "TickGate",
]

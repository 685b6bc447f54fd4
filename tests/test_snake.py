"""Tests for the Snake module."""

from collections import deque

import pygame
import pytest

from viper.food import Food
from viper.grid import Grid, Position
from viper.snake import Ate, Direction, Segment, Snake


def _snake(x=8, y=16, grid=None):
    return Snake(Position(x, y), grid or Grid(32, 32))


def _body(snake):
    return [(seg.pos.x, seg.pos.y) for seg in snake.body]


FAR_FOOD = Food(Position(30, 30))


class TestDirection:
    @pytest.mark.parametrize("d", list(Direction))
    def test_inverse_is_involutive(self, d):
        assert d.inverse().inverse() == d
        assert d.inverse() != d

    def test_inverse_pairs(self):
        assert Direction.UP.inverse() == Direction.DOWN
        assert Direction.LEFT.inverse() == Direction.RIGHT

    def test_from_key(self):
        assert Direction.from_key(pygame.K_UP) == Direction.UP
        assert Direction.from_key(pygame.K_DOWN) == Direction.DOWN
        assert Direction.from_key(pygame.K_LEFT) == Direction.LEFT
        assert Direction.from_key(pygame.K_RIGHT) == Direction.RIGHT

    def test_from_key_unmapped(self):
        assert Direction.from_key(pygame.K_a) is None
        assert Direction.from_key(pygame.K_SPACE) is None


class TestSnakeInit:
    def test_default_creation(self):
        snake = _snake()
        assert snake.head == Segment(Position(8, 16))
        assert _body(snake) == [(7, 16)]
        assert snake.dir == Direction.RIGHT
        assert snake.prev_dir == Direction.RIGHT
        assert snake.next_dir is None
        assert snake.ate is None
        assert len(snake) == 2

    def test_tail_wraps_at_left_edge(self):
        snake = _snake(x=0, y=3, grid=Grid(10, 10))
        assert _body(snake) == [(9, 3)]

    def test_tail_behind_other_direction(self):
        snake = Snake(Position(4, 4), Grid(10, 10), Direction.UP)
        assert _body(snake) == [(4, 5)]


class TestSnakeMovement:
    def test_tick_without_food(self):
        snake = _snake()
        assert snake.update(FAR_FOOD) is None
        assert snake.head.pos == Position(9, 16)
        assert _body(snake) == [(8, 16)]
        assert snake.ate is None

    def test_tick_eats_food(self):
        snake = _snake()
        assert snake.update(Food(Position(9, 16))) is Ate.FOOD
        assert snake.head.pos == Position(9, 16)
        assert _body(snake) == [(8, 16), (7, 16)]

    def test_length_constant_without_food(self):
        snake = _snake()
        for _ in range(50):
            snake.update(FAR_FOOD)
        assert len(snake) == 2

    def test_length_grows_once_per_food(self):
        snake = _snake()
        for i in range(5):
            snake.update(Food(Position(9 + i, 16)))
        assert len(snake) == 7

    def test_wraps_around_edge(self):
        snake = _snake(x=31, y=0)
        snake.update(FAR_FOOD)
        assert snake.head.pos == Position(0, 0)

    def test_ate_is_overwritten_each_tick(self):
        snake = _snake()
        snake.update(Food(Position(9, 16)))
        assert snake.ate is Ate.FOOD
        snake.update(FAR_FOOD)
        assert snake.ate is None

    def test_positions_and_occupies(self):
        snake = _snake()
        assert snake.positions() == [Position(8, 16), Position(7, 16)]
        assert snake.occupies(Position(7, 16))
        assert not snake.occupies(Position(9, 16))


class TestSnakeCollision:
    def _coiled(self):
        # Head at (5, 5) moving up into a body segment at (5, 4).
        snake = Snake(Position(5, 5), Grid(10, 10), Direction.UP)
        snake.body = deque(
            Segment(Position(x, y)) for x, y in [(6, 5), (6, 4), (5, 4), (4, 4)]
        )
        return snake

    def test_self_collision(self):
        snake = self._coiled()
        assert snake.update(FAR_FOOD) is Ate.ITSELF
        assert snake.head.pos == Position(5, 4)

    def test_self_collision_keeps_tail(self):
        snake = self._coiled()
        snake.update(FAR_FOOD)
        assert len(snake.body) == 5

    def test_self_collision_beats_food(self):
        snake = self._coiled()
        assert snake.update(Food(Position(5, 4))) is Ate.ITSELF

    def test_running_into_vacating_tail_counts(self):
        # The tail is still in the body while collisions are checked.
        snake = Snake(Position(5, 5), Grid(10, 10), Direction.LEFT)
        snake.body = deque(
            Segment(Position(x, y)) for x, y in [(6, 5), (6, 6), (5, 6)]
        )
        snake.steer(Direction.DOWN)
        assert snake.update(FAR_FOOD) is Ate.ITSELF
        assert snake.head.pos == Position(5, 6)


class TestSnakeSteering:
    def test_reverse_ignored(self):
        snake = _snake()
        snake.steer(Direction.LEFT)
        assert snake.dir == Direction.RIGHT
        assert snake.next_dir is None

    def test_turn_commits_immediately(self):
        snake = _snake()
        snake.steer(Direction.UP)
        assert snake.dir == Direction.UP
        assert snake.next_dir is None

    def test_second_turn_is_buffered(self):
        snake = _snake()
        snake.steer(Direction.UP)
        snake.steer(Direction.RIGHT)
        assert snake.dir == Direction.UP
        assert snake.next_dir == Direction.RIGHT

    def test_buffered_turn_applies_one_tick_later(self):
        snake = _snake()
        snake.steer(Direction.UP)
        snake.steer(Direction.LEFT)
        snake.update(FAR_FOOD)
        assert snake.head.pos == Position(8, 15)
        assert snake.dir == Direction.UP
        snake.update(FAR_FOOD)
        assert snake.head.pos == Position(7, 15)
        assert snake.dir == Direction.LEFT
        assert snake.next_dir is None

    def test_buffer_keeps_latest_turn(self):
        snake = _snake()
        snake.steer(Direction.UP)
        snake.steer(Direction.LEFT)
        snake.steer(Direction.RIGHT)
        assert snake.next_dir == Direction.RIGHT

    def test_opposite_of_pending_turn_replaces_it(self):
        snake = _snake()
        snake.steer(Direction.UP)
        snake.steer(Direction.DOWN)
        assert snake.dir == Direction.DOWN
        assert snake.next_dir is None

    def test_no_reversal_through_double_turn(self):
        snake = _snake()
        snake.steer(Direction.UP)
        snake.steer(Direction.LEFT)
        snake.update(FAR_FOOD)
        snake.update(FAR_FOOD)
        # Never moved right-to-left in a single tick.
        assert _body(snake) == [(8, 15)]
        assert snake.head.pos == Position(7, 15)

    def test_turn_after_tick_commits_again(self):
        snake = _snake()
        snake.steer(Direction.UP)
        snake.update(FAR_FOOD)
        snake.steer(Direction.LEFT)
        assert snake.dir == Direction.LEFT
        assert snake.next_dir is None


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = _snake()
        assert snake.to_dict() == {
            "head": [8, 16],
            "body": [[7, 16]],
            "direction": "right",
            "ate": None,
        }

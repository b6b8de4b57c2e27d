import random
from collections import deque

import pygame
import pytest

from gamedemos.snake import (
    CELL_HEIGHT,
    CELL_WIDTH,
    GRID_HEIGHT,
    GRID_WIDTH,
    Ate,
    Direction,
    Food,
    GameState,
    GridPosition,
    Snake,
)


def test_inverse_is_involution():
    assert Direction.UP.inverse().inverse() is Direction.UP
    assert Direction.DOWN.inverse().inverse() is Direction.DOWN
    assert Direction.LEFT.inverse().inverse() is Direction.LEFT
    assert Direction.RIGHT.inverse().inverse() is Direction.RIGHT
    assert Direction.UP.inverse() is not Direction.UP
    assert Direction.DOWN.inverse() is not Direction.DOWN
    assert Direction.LEFT.inverse() is not Direction.LEFT
    assert Direction.RIGHT.inverse() is not Direction.RIGHT


def test_inverse_pairs():
    assert Direction.UP.inverse() is Direction.DOWN
    assert Direction.LEFT.inverse() is Direction.RIGHT


def test_from_key():
    assert Direction.from_key(pygame.K_UP) is Direction.UP
    assert Direction.from_key(pygame.K_DOWN) is Direction.DOWN
    assert Direction.from_key(pygame.K_LEFT) is Direction.LEFT
    assert Direction.from_key(pygame.K_RIGHT) is Direction.RIGHT
    assert Direction.from_key(pygame.K_a) is None


@pytest.mark.parametrize("seed", range(20))
def test_random_position_in_bounds(seed):
    pos = GridPosition.random(random.Random(seed), GRID_WIDTH, GRID_HEIGHT)
    assert 0 <= pos.x < GRID_WIDTH
    assert 0 <= pos.y < GRID_HEIGHT


def test_moved_wraps_at_edges():
    origin = GridPosition(0, 0)
    assert origin.moved(Direction.LEFT) == GridPosition(GRID_WIDTH - 1, 0)
    assert origin.moved(Direction.UP) == GridPosition(0, GRID_HEIGHT - 1)
    corner = GridPosition(GRID_WIDTH - 1, GRID_HEIGHT - 1)
    assert corner.moved(Direction.RIGHT) == GridPosition(0, GRID_HEIGHT - 1)
    assert corner.moved(Direction.DOWN) == GridPosition(GRID_WIDTH - 1, 0)


@pytest.mark.parametrize("direction", list(Direction))
def test_moved_then_inverse_returns(direction):
    pos = GridPosition(4, 6)
    assert pos.moved(direction).moved(direction.inverse()) == pos


def test_to_rect():
    rect = GridPosition(2, 3).to_rect()
    assert rect == pygame.Rect(2 * CELL_WIDTH, 3 * CELL_HEIGHT, CELL_WIDTH, CELL_HEIGHT)


def test_new_snake_layout():
    snake = Snake(GridPosition(7, 10))
    assert list(snake.body) == [GridPosition(6, 10)]
    assert snake.direction is Direction.RIGHT
    assert snake.ate is None


def test_update_moves_without_growing():
    snake = Snake(GridPosition(7, 10))
    snake.update(Food(GridPosition(0, 0)))
    assert snake.head == GridPosition(8, 10)
    assert list(snake.body) == [GridPosition(7, 10)]
    assert snake.ate is None


def test_update_eating_food_grows():
    snake = Snake(GridPosition(7, 10))
    food = Food(GridPosition(8, 10))
    snake.update(food)
    assert snake.ate is Ate.FOOD
    assert snake.eats(food)
    assert len(snake.body) == 2


def test_update_eating_itself():
    snake = Snake(GridPosition(5, 5), body=deque([GridPosition(6, 5)]))
    snake.update(Food(GridPosition(0, 0)))
    assert snake.eats_self()
    assert snake.ate is Ate.ITSELF
    assert len(snake.body) == 2


def test_game_relocates_food_when_eaten():
    state = GameState(random.Random(3))
    head = state.snake.head
    state.food = Food(head.moved(Direction.RIGHT))
    state.tick()
    assert state.snake.ate is Ate.FOOD
    assert len(state.snake.body) == 2
    assert 0 <= state.food.pos.x < GRID_WIDTH
    assert 0 <= state.food.pos.y < GRID_HEIGHT
    assert not state.gameover


def test_game_over_freezes_state():
    state = GameState(random.Random(1))
    state.snake = Snake(GridPosition(5, 5), body=deque([GridPosition(6, 5)]))
    state.food = Food(GridPosition(0, 0))
    state.tick()
    assert state.gameover
    head = state.snake.head
    state.tick()
    assert state.snake.head == head


def test_reverse_key_is_ignored():
    state = GameState(random.Random(0))
    state.key_down(pygame.K_LEFT)
    assert state.snake.direction is Direction.RIGHT
    assert state.snake.next_dir is None


def test_key_turns_and_queues():
    state = GameState(random.Random(0))
    state.food = Food(GridPosition(0, 0))
    state.key_down(pygame.K_UP)
    assert state.snake.direction is Direction.UP
    state.key_down(pygame.K_LEFT)
    assert state.snake.next_dir is Direction.LEFT
    start = state.snake.head
    state.tick()
    assert state.snake.head == start.moved(Direction.UP)
    state.tick()
    assert state.snake.direction is Direction.LEFT
    assert state.snake.next_dir is None
    assert state.snake.head == start.moved(Direction.UP).moved(Direction.LEFT)


def test_non_arrow_key_does_nothing():
    state = GameState(random.Random(0))
    state.key_down(pygame.K_SPACE)
    assert state.snake.direction is Direction.RIGHT
    assert state.snake.next_dir is None
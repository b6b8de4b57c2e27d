"""A small snake game on a wrapping grid."""

from __future__ import annotations

import os
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

GRID_WIDTH = 30
GRID_HEIGHT = 20
CELL_WIDTH = 32
CELL_HEIGHT = 32
SCREEN_SIZE = (GRID_WIDTH * CELL_WIDTH, GRID_HEIGHT * CELL_HEIGHT)
DESIRED_FPS = 8

BACKGROUND_COLOR = (0, 255, 0)
BODY_COLOR = (76, 76, 0)
HEAD_COLOR = (255, 127, 0)
FOOD_COLOR = (0, 0, 255)


class Direction(Enum):
    """A direction the snake can move in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def inverse(self) -> Direction:
        """Return the opposite direction."""
        return _INVERSES[self]

    @staticmethod
    def from_key(key: int) -> Direction | None:
        """Map a pygame key code to a direction, or None if it is not an arrow key."""
        return _KEY_DIRECTIONS.get(key)


_INVERSES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class GridPosition:
    """A cell on the game grid."""

    x: int
    y: int

    @classmethod
    def random(cls, rng: random.Random, max_x: int, max_y: int) -> GridPosition:
        """Pick a random cell with 0 <= x < max_x and 0 <= y < max_y."""
        return cls(rng.randrange(max_x), rng.randrange(max_y))

    def moved(self, direction: Direction) -> GridPosition:
        """Return the cell one step away in ``direction``, wrapping at the edges."""
        if direction is Direction.UP:
            return GridPosition(self.x, (self.y - 1) % GRID_HEIGHT)
        if direction is Direction.DOWN:
            return GridPosition(self.x, (self.y + 1) % GRID_HEIGHT)
        if direction is Direction.LEFT:
            return GridPosition((self.x - 1) % GRID_WIDTH, self.y)
        return GridPosition((self.x + 1) % GRID_WIDTH, self.y)

    def to_rect(self) -> pygame.Rect:
        """The screen rectangle covering this cell."""
        return pygame.Rect(
            self.x * CELL_WIDTH, self.y * CELL_HEIGHT, CELL_WIDTH, CELL_HEIGHT
        )


class Ate(Enum):
    """What the snake ate during its last update."""

    ITSELF = "itself"
    FOOD = "food"


@dataclass
class Food:
    """A piece of food on the grid."""

    pos: GridPosition

    def _draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, FOOD_COLOR, self.pos.to_rect())


@dataclass
class Snake:
    """The snake: a head, a body and the direction it travels in."""

    head: GridPosition
    direction: Direction = Direction.RIGHT
    body: deque[GridPosition] = field(default_factory=deque)
    ate: Ate | None = None
    last_update_dir: Direction = Direction.RIGHT
    next_dir: Direction | None = None

    def __post_init__(self) -> None:
        if not self.body:
            self.body = deque([GridPosition(self.head.x - 1, self.head.y)])

    def eats(self, food: Food) -> bool:
        """Whether the head is on the food."""
        return self.head == food.pos

    def eats_self(self) -> bool:
        """Whether the head overlaps any body segment."""
        return self.head in self.body

    def update(self, food: Food) -> None:
        """Move one cell and record what, if anything, was eaten."""
        if self.last_update_dir == self.direction and self.next_dir is not None:
            self.direction = self.next_dir
            self.next_dir = None
        new_head = self.head.moved(self.direction)
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
        self.last_update_dir = self.direction

    def _draw(self, surface: pygame.Surface) -> None:
        for segment in self.body:
            pygame.draw.rect(surface, BODY_COLOR, segment.to_rect())
        pygame.draw.rect(surface, HEAD_COLOR, self.head.to_rect())


class GameState:
    """The whole game: snake, food, random source and game-over flag."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.snake = Snake(GridPosition(GRID_WIDTH // 4, GRID_HEIGHT // 2))
        self.food = Food(GridPosition.random(self.rng, GRID_WIDTH, GRID_HEIGHT))
        self.gameover = False

    def tick(self) -> None:
        """Advance the game by one step, unless it is over."""
        if self.gameover:
            return
        self.snake.update(self.food)
        if self.snake.ate is Ate.FOOD:
            self.food.pos = GridPosition.random(self.rng, GRID_WIDTH, GRID_HEIGHT)
        elif self.snake.ate is Ate.ITSELF:
            self.gameover = True

    def key_down(self, key: int) -> None:
        """Steer the snake from a pygame key code, queueing one turn ahead."""
        direction = Direction.from_key(key)
        if direction is None:
            return
        snake = self.snake
        if (
            snake.direction != snake.last_update_dir
            and direction.inverse() != snake.direction
        ):
            snake.next_dir = direction
        elif direction.inverse() != snake.last_update_dir:
            snake.direction = direction

    def _draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        self.snake._draw(surface)
        self.food._draw(surface)


def main(argv: list[str] | None = None) -> int:
    """Open a window and play snake until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Snake!")
        clock = pygame.time.Clock()
        state = GameState()
        step = 1.0 / DESIRED_FPS
        residual = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    state.key_down(event.key)
            residual += clock.tick(60) / 1000.0
            while residual >= step:
                residual -= step
                state.tick()
            state._draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
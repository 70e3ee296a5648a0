# game.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Deque, Iterable, Optional, Tuple
import logging
import random

from .config import GRID_W, GRID_H, CFG, Config

logger = logging.getLogger(__name__)

# ---------- Grid primitives ----------
class Direction(Enum):
    """Cardinal moves as (dx, dy); y grows downward like the screen."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def shifted(self, direction: Direction) -> "Position":
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)


START_BODY = (Position(5, 10), Position(4, 10), Position(3, 10))
START_DIRECTION = Direction.RIGHT

# ---------- Snake ----------
class Snake:
    """Ordered body (head at index 0) plus heading and a deferred-growth flag."""

    def __init__(self, body: Iterable[Position], direction: Direction = START_DIRECTION):
        self.body: Deque[Position] = deque(body)
        if not self.body:
            raise ValueError("snake body must not be empty")
        self.direction = direction
        self.pending_growth = False

    @classmethod
    def initial(cls) -> "Snake":
        return cls(START_BODY, START_DIRECTION)

    def __len__(self) -> int:
        return len(self.body)

    def head(self) -> Position:
        return self.body[0]

    def advance(self) -> None:
        """Move one cell; keep the tail (and clear the flag) if growth is pending.

        Bounds are not checked here, the caller inspects collisions afterwards.
        """
        self.body.appendleft(self.head().shifted(self.direction))
        if self.pending_growth:
            self.pending_growth = False
        else:
            self.body.pop()

    def grow(self) -> None:
        self.pending_growth = True

    def set_direction(self, direction: Direction) -> None:
        # 180° turns are dropped silently
        if direction is self.direction.opposite:
            return
        self.direction = direction

    def collided_with_wall(self, width: int, height: int) -> bool:
        head = self.head()
        return head.x < 0 or head.x >= width or head.y < 0 or head.y >= height

    def collided_with_self(self) -> bool:
        head = self.head()
        return any(segment == head for segment in islice(self.body, 1, None))

# ---------- Food ----------
class Food:
    def __init__(self, width: int = GRID_W, height: int = GRID_H,
                 rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.position = self._random_cell()

    def _random_cell(self) -> Position:
        return Position(self.rng.randrange(self.width), self.rng.randrange(self.height))

    def place_randomly(self) -> Position:
        self.position = self._random_cell()
        return self.position

    def relocate(self, avoid: Iterable[Position]) -> Position:
        """Redraw until the cell is free. Assumes the grid is never full."""
        blocked = set(avoid)
        while True:
            cell = self._random_cell()
            if cell not in blocked:
                self.position = cell
                return cell

# ---------- Game ----------
@dataclass
class FrameInput:
    """Everything the player did during one rendered frame, in arrival order."""
    directions: Tuple[Direction, ...] = ()
    restart: bool = False
    quit: bool = False


@dataclass
class Game:
    snake: Snake
    food: Food
    last_tick_ms: int
    width: int = GRID_W
    height: int = GRID_H
    score: int = 0
    game_over: bool = False
    config: Config = field(default_factory=lambda: CFG, repr=False)

    @classmethod
    def new(cls, now_ms: int, config: Config = CFG,
            rng: Optional[random.Random] = None,
            width: int = GRID_W, height: int = GRID_H) -> "Game":
        snake = Snake.initial()
        food = Food(width, height, rng)
        food.relocate(snake.body)
        logger.info("new game: grid=%dx%d food=%s", width, height, food.position)
        return cls(
            snake=snake,
            food=food,
            last_tick_ms=now_ms,
            width=width,
            height=height,
            config=config,
        )

    def restarted(self, now_ms: int) -> "Game":
        """Fresh session on the same grid, config and random stream."""
        logger.info("restart after score %d", self.score)
        return Game.new(now_ms, self.config, self.food.rng, self.width, self.height)

    @property
    def tick_interval_ms(self) -> int:
        return self.config.tick_interval_ms

    def handle_directions(self, directions: Iterable[Direction]) -> None:
        for direction in directions:
            self.snake.set_direction(direction)

    def tick(self) -> None:
        """One discrete simulation step: move, eat, then check for death."""
        self.snake.advance()
        self._check_food()
        self._check_game_over()

    def update(self, now_ms: int) -> bool:
        """Run at most one tick if the interval elapsed. Returns True if it ticked."""
        if self.game_over:
            return False
        if now_ms - self.last_tick_ms < self.tick_interval_ms:
            return False
        self.tick()
        # no catch-up: a long stall still yields a single step
        self.last_tick_ms = now_ms
        return True

    def _check_food(self) -> None:
        if self.snake.head() != self.food.position:
            return
        self.snake.grow()
        self.score += 1
        self.food.relocate(self.snake.body)
        logger.debug("food eaten, score=%d next=%s", self.score, self.food.position)

    def _check_game_over(self) -> None:
        if self.snake.collided_with_wall(self.width, self.height):
            cause = "wall"
        elif self.snake.collided_with_self():
            cause = "self"
        else:
            return
        self.game_over = True
        logger.info("game over (%s collision), score=%d", cause, self.score)


def step_game(game: Game, frame: FrameInput, now_ms: int) -> Game:
    """
    Per-frame update. Returns the game to keep using, which is a new
    instance when a finished game is restarted.
    """
    game.handle_directions(frame.directions)
    if game.game_over:
        if frame.restart:
            return game.restarted(now_ms)
        return game
    game.update(now_ms)
    return game

"""A grid snake game with wrap-around edges and timed moves."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """A cell on the game grid."""

    x: int
    y: int


def _step(point: Point, direction: Direction) -> Point:
    dx, dy = _STEPS[direction]
    return Point(point.x + dx, point.y + dy)


class SnakeGame:
    """A snake that moves one cell every tenth of a second of accumulated time."""

    MOVE_INTERVAL = 0.1

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None) -> None:
        if width < 1 or height < 1:
            raise ValueError("width and height must be at least 1")
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        self._accumulated = 0.0
        self._direction = Direction.RIGHT
        self._last_direction = Direction.RIGHT
        self._length = 1
        self._snake: List[Point] = [Point(width // 2, height // 2)]
        print(f"Initial snake position: ({width // 2}, {height // 2})")
        self.food = Point(0, 0)
        self._place_food()

    @property
    def body(self) -> Tuple[Point, ...]:
        """The snake's segments, head first."""
        return tuple(self._snake)

    @property
    def head(self) -> Point:
        return self._snake[0]

    @property
    def length(self) -> int:
        """The length the snake is growing to."""
        return self._length

    @property
    def direction(self) -> Direction:
        return self._direction

    def update(self, delta_time: float) -> bool:
        """Add elapsed time; move one cell once enough has built up.

        Returns True if the snake took a step (or collided with itself and
        the game was reset).
        """
        self._accumulated += delta_time
        if self._accumulated < self.MOVE_INTERVAL:
            return False
        self._accumulated -= self.MOVE_INTERVAL

        moved = _step(self.head, self._direction)
        new_head = Point(moved.x % self.width, moved.y % self.height)

        if new_head in self._snake:
            self.reset()
            return True

        self._snake.insert(0, new_head)
        if len(self._snake) > self._length:
            self._snake.pop()

        if new_head == self.food:
            self._length += 1
            self._place_food()

        self._last_direction = self._direction
        return True

    def update_direction(self, new_direction: Direction) -> None:
        """Turn the snake, unless that would reverse it onto itself."""
        if len(self._snake) == 2 and _step(self._snake[0], new_direction) == self._snake[-1]:
            return
        if _OPPOSITE[self._last_direction] is new_direction:
            return
        self._direction = new_direction

    def reset(self) -> None:
        """Start over with a single segment in the middle, heading right."""
        self._snake = [Point(self.width // 2, self.height // 2)]
        self._direction = Direction.RIGHT
        self._length = 1
        self._place_food()

    def _place_food(self) -> None:
        if len(self._snake) >= self.width * self.height:
            raise RuntimeError("No free cell left for food")
        while True:
            food = Point(
                self._rng.randint(0, self.width - 1), self._rng.randint(0, self.height - 1)
            )
            if food not in self._snake:
                break
        self.food = food
        print(f"Food placed at: ({food.x}, {food.y})")
"""A snake game on a pixel screen divided into square tiles."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
TILE_SIZE = 20
NUM_TILES_X = SCREEN_WIDTH // TILE_SIZE
NUM_TILES_Y = SCREEN_HEIGHT // TILE_SIZE


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
class Position:
    """A point on the screen, in pixels."""

    x: int
    y: int


class Snake:
    """A chain of tile-sized segments, head first, moving one tile per step."""

    def __init__(self, start: Position) -> None:
        self._body: List[Position] = [start]
        self._direction = Direction.RIGHT

    @property
    def body(self) -> Tuple[Position, ...]:
        """The segments, head first."""
        return tuple(self._body)

    @property
    def head(self) -> Position:
        return self._body[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    def move(self, screen_width: int, screen_height: int) -> None:
        """Advance one tile, wrapping around the screen edges."""
        dx, dy = _STEPS[self._direction]
        x = self.head.x + dx * TILE_SIZE
        y = self.head.y + dy * TILE_SIZE

        if x < 0:
            x = screen_width - TILE_SIZE
        elif x >= screen_width:
            x = 0
        if y < 0:
            y = screen_height - TILE_SIZE
        elif y >= screen_height:
            y = 0

        self._body.insert(0, Position(x, y))
        self._body.pop()

    def grow(self) -> None:
        """Add a segment behind the tail, opposite the direction of travel."""
        tail = self._body[-1]
        dx, dy = _STEPS[self._direction]
        self._body.append(Position(tail.x - dx * TILE_SIZE, tail.y - dy * TILE_SIZE))

    def set_direction(self, new_direction: Direction) -> None:
        """Turn, unless the new direction is the reverse of the current one."""
        if _OPPOSITE[self._direction] is not new_direction:
            self._direction = new_direction


class Food:
    """A single piece of food sitting on a tile."""

    def __init__(self, position: Position) -> None:
        self.position = position

    def respawn(
        self, occupied: Iterable[Position], rng: Optional[random.Random] = None
    ) -> Position:
        """Move to a random tile not in ``occupied`` and return the new position."""
        rng = rng or random.Random()
        taken = set(occupied)
        free_exists = any(
            Position(tx * TILE_SIZE, ty * TILE_SIZE) not in taken
            for tx in range(NUM_TILES_X)
            for ty in range(NUM_TILES_Y)
        )
        if not free_exists:
            raise RuntimeError("No free tile left for food")
        while True:
            position = Position(
                rng.randrange(NUM_TILES_X) * TILE_SIZE,
                rng.randrange(NUM_TILES_Y) * TILE_SIZE,
            )
            if position not in taken:
                break
        self.position = position
        return position


def _start_position() -> Position:
    return Position(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)


class Game:
    """Game state: a snake, its food, and the rules tying them together."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self.snake = Snake(_start_position())
        self.food = Food(Position(TILE_SIZE * 5, TILE_SIZE * 5))
        self.running = True

    def handle_key(self, direction: Direction) -> None:
        """Steer the snake in response to an arrow key."""
        self.snake.set_direction(direction)

    def update(self) -> bool:
        """Advance one step; return True if the snake hit itself and the game reset."""
        self.snake.move(SCREEN_WIDTH, SCREEN_HEIGHT)

        if self.snake.head == self.food.position:
            self.snake.grow()
            self.food.respawn(self.snake.body, self._rng)

        head = self.snake.head
        if head in self.snake.body[1:]:
            print("Self-collision detected!")
            self.reset()
            return True
        return False

    def reset(self) -> None:
        """Start again with a one-segment snake in the middle of the screen."""
        print("Game reset!")
        self.snake = Snake(_start_position())
        self.food.respawn(self.snake.body, self._rng)
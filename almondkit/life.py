"""Conway's Game of Life on a bounded grid."""

from __future__ import annotations

import random
from typing import List, Optional

_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)]


class CellularAutomaton:
    """A Game of Life grid; cells beyond the edges count as dead."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self.width = width
        self.height = height
        self._grid: List[List[bool]] = [[False] * width for _ in range(height)]

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Make each cell alive with probability one half."""
        rng = rng or random.Random()
        self._grid = [
            [rng.randrange(2) == 0 for _ in range(self.width)] for _ in range(self.height)
        ]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_alive(self, x: int, y: int) -> bool:
        """Return whether the cell at (x, y) is alive; outside the grid is dead."""
        return self._in_bounds(x, y) and self._grid[y][x]

    def set_alive(self, x: int, y: int, alive: bool = True) -> None:
        """Set the state of the cell at (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        self._grid[y][x] = bool(alive)

    def live_neighbors(self, x: int, y: int) -> int:
        """Count the live cells among the eight around (x, y)."""
        return sum(self.is_alive(x + dx, y + dy) for dx, dy in _OFFSETS)

    def update(self) -> None:
        """Advance the grid by one generation."""
        self._grid = [
            [
                n in (2, 3) if alive else n == 3
                for x, alive in enumerate(row)
                for n in (self.live_neighbors(x, y),)
            ]
            for y, row in enumerate(self._grid)
        ]
"""A falling-sand simulation on a bounded grid."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple


class SandSimulation:
    """Grains fall straight down, else diagonally left, else diagonally right.

    Each cell holds a particle type, 0 meaning empty. Moves are decided from
    the grid as it was before the step, and moved grains become type 1.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        print("Initializing sand simulation")
        self._width = width
        self._height = height
        self._grid: List[bytearray] = [bytearray(width) for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def grid(self) -> Tuple[bytes, ...]:
        """The grid as rows of particle types, top row first."""
        return tuple(bytes(row) for row in self._grid)

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Fill each cell with sand with probability one in five."""
        rng = rng or random.Random()
        self._grid = [
            bytearray(1 if rng.randrange(5) == 0 else 0 for _ in range(self._width))
            for _ in range(self._height)
        ]

    def resize(self, width: int, height: int) -> None:
        """Change the grid size, keeping the cells that are still inside it."""
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        new_grid = [bytearray(width) for _ in range(height)]
        for new_row, old_row in zip(new_grid, self._grid):
            keep = min(width, self._width)
            new_row[:keep] = old_row[:keep]
        self._width = width
        self._height = height
        self._grid = new_grid

    def active_particles(self) -> int:
        """Count the cells holding a particle."""
        return sum(1 for row in self._grid for cell in row if cell)

    def is_particle_at(self, x: int, y: int) -> bool:
        """Return whether (x, y) holds a particle; outside the grid is empty."""
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._grid[y][x] > 0
        return False

    def update(self) -> None:
        """Advance the simulation by one step."""
        width, height = self._width, self._height
        new_grid = [bytearray(width) for _ in range(height)]
        if height == 0:
            return
        for y in range(height - 2, -1, -1):
            below = self._grid[y + 1]
            for x, cell in enumerate(self._grid[y]):
                if not cell:
                    continue
                if not below[x]:
                    new_grid[y + 1][x] = 1
                elif x > 0 and not below[x - 1]:
                    new_grid[y + 1][x - 1] = 1
                elif x + 1 < width and not below[x + 1]:
                    new_grid[y + 1][x + 1] = 1
                else:
                    new_grid[y][x] = 1
        for x, cell in enumerate(self._grid[height - 1]):
            if cell:
                new_grid[height - 1][x] = 1
        self._grid = new_grid

    def add_sand_at(self, x: int, y: int, sand_type: int = 1) -> None:
        """Place a particle of ``sand_type`` at (x, y); ignored outside the grid."""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._grid[y][x] = sand_type
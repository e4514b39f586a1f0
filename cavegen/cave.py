"""Cellular-automaton cave generation on a grid of walls (1) and floor (0)."""

from __future__ import annotations

import random

Grid = list[list[int]]

_NEIGHBOUR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class CaveGenerator:
    """Builds a cave map from random noise and smooths it into caverns."""

    def __init__(self, width: int, height: int, seed: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._grid: Grid = [[0] * width for _ in range(height)]
        self._rng = random.Random(seed)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def grid(self) -> Grid:
        """The current map, indexed as ``grid[y][x]``."""
        return self._grid

    def initialize_map(self, fill_probability: float) -> None:
        """Fill the map with walls, each cell independently with the given probability."""
        fill_rng = random.Random(self._rng.getrandbits(32))
        self._grid = [
            [1 if fill_rng.random() < fill_probability else 0 for _ in range(self._width)]
            for _ in range(self._height)
        ]

    def smooth_map_iteration(self) -> None:
        """Apply one smoothing step; all cells are updated from the previous state."""
        self._grid = [
            [self._next_state(x, y) for x in range(self._width)]
            for y in range(self._height)
        ]

    def count_alive_neighbours(self, x: int, y: int) -> int:
        """Count wall cells around (x, y); cells outside the map count as walls."""
        return sum(self._cell_or_wall(x + dx, y + dy) for dx, dy in _NEIGHBOUR_OFFSETS)

    def _cell_or_wall(self, x: int, y: int) -> int:
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._grid[y][x]
        return 1

    def _next_state(self, x: int, y: int) -> int:
        if x in (0, self._width - 1) or y in (0, self._height - 1):
            return 1
        neighbours = self.count_alive_neighbours(x, y)
        if neighbours > 4:
            return 1
        if neighbours < 4:
            return 0
        return self._grid[y][x]
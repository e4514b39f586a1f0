"""Animated cave generation: noise, smoothing, then marching-squares outlines."""

from __future__ import annotations

import argparse
import time
from enum import Enum, auto
from typing import Sequence

from cavegen.cave import CaveGenerator
from cavegen.marching import LineSegment, MarchingSquares

GLOBAL_MAP_WIDTH = 160
GLOBAL_MAP_HEIGHT = 120
TILE_SIZE_PX = 6.0
SMOOTHING_ITERATIONS = 5
INITIAL_FILL_PROBABILITY = 0.45
UPDATE_INTERVAL_MS = 1000
BACKGROUND = (20, 20, 80)
FOREGROUND = (255, 255, 255)

Point = tuple[float, float]
Triangle = tuple[Point, Point, Point]


class AppState(Enum):
    INITIALIZING = auto()
    SMOOTHING = auto()
    MARCHING_SQUARES = auto()
    DONE = auto()


def grid_triangles(grid: Sequence[Sequence[int]], tile_size: float) -> list[Triangle]:
    """Two triangles covering each wall cell of the grid."""
    triangles: list[Triangle] = []
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != 1:
                continue
            top_left = (x * tile_size, y * tile_size)
            top_right = ((x + 1) * tile_size, y * tile_size)
            bottom_right = ((x + 1) * tile_size, (y + 1) * tile_size)
            bottom_left = (x * tile_size, (y + 1) * tile_size)
            triangles.append((top_left, top_right, bottom_left))
            triangles.append((top_right, bottom_right, bottom_left))
    return triangles


class CaveAnimation:
    """Steps through cave generation one stage at a time."""

    def __init__(
        self,
        seed: int,
        width: int = GLOBAL_MAP_WIDTH,
        height: int = GLOBAL_MAP_HEIGHT,
        tile_size: float = TILE_SIZE_PX,
        iterations: int = SMOOTHING_ITERATIONS,
        fill_probability: float = INITIAL_FILL_PROBABILITY,
    ) -> None:
        self.seed = seed
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.iterations = iterations
        self.fill_probability = fill_probability
        self.state = AppState.INITIALIZING
        self.smoothing_step = 0
        self.generator: CaveGenerator | None = None
        self.triangles: list[Triangle] = []
        self.segments: list[LineSegment] = []
        self._marcher = MarchingSquares(tile_size)

    def advance(self) -> str | None:
        """Run the next stage; return a progress message, or None once done."""
        if self.state is AppState.INITIALIZING:
            self.generator = CaveGenerator(self.width, self.height, self.seed)
            self.generator.initialize_map(self.fill_probability)
            self.triangles = grid_triangles(self.generator.grid, self.tile_size)
            self.state = AppState.SMOOTHING
            return "Step 1: generating initial noise..."
        if self.state is AppState.SMOOTHING:
            if self.smoothing_step < self.iterations:
                self.smoothing_step += 1
                self.generator.smooth_map_iteration()
                self.triangles = grid_triangles(self.generator.grid, self.tile_size)
                return f"Step 2: smoothing, iteration {self.smoothing_step}..."
            self.state = AppState.MARCHING_SQUARES
            return "Smoothing finished."
        if self.state is AppState.MARCHING_SQUARES:
            self.segments = self._marcher.generate_mesh(self.generator.grid)
            self.triangles = []
            self.state = AppState.DONE
            return "Step 3: mesh generated with marching squares. Animation complete!"
        return None


def _draw(screen, pygame, animation: CaveAnimation) -> None:
    screen.fill(BACKGROUND)
    for triangle in animation.triangles:
        pygame.draw.polygon(screen, FOREGROUND, triangle)
    for seg in animation.segments:
        pygame.draw.line(screen, FOREGROUND, seg.start, seg.end)
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Animated cave generation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    seed = args.seed if args.seed is not None else time.time_ns() & 0xFFFFFFFF

    import pygame

    print("Cave generation (animated)")
    animation = CaveAnimation(seed)
    pygame.init()
    try:
        size = (int(GLOBAL_MAP_WIDTH * TILE_SIZE_PX), int(GLOBAL_MAP_HEIGHT * TILE_SIZE_PX))
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("cave generation")
        clock = pygame.time.Clock()
        last_update = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            now = pygame.time.get_ticks()
            if animation.state is not AppState.DONE and now - last_update > UPDATE_INTERVAL_MS:
                message = animation.advance()
                if message:
                    print(message)
                last_update = now
            _draw(screen, pygame, animation)
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
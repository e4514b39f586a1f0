"""Marching-squares outline extraction from a wall grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Point = tuple[float, float]

# Edge midpoints joined for each corner configuration
# (bits: top-left 8, top-right 4, bottom-right 2, bottom-left 1).
_EDGES: dict[int, tuple[tuple[str, str], ...]] = {
    0: (),
    1: (("left", "bottom"),),
    2: (("bottom", "right"),),
    3: (("left", "right"),),
    4: (("top", "right"),),
    5: (("top", "right"), ("left", "bottom")),
    6: (("top", "bottom"),),
    7: (("left", "top"),),
    8: (("top", "left"),),
    9: (("top", "bottom"),),
    10: (("top", "left"), ("bottom", "right")),
    11: (("top", "right"),),
    12: (("left", "right"),),
    13: (("bottom", "right"),),
    14: (("bottom", "left"),),
    15: (),
}


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point


class MarchingSquares:
    """Turns a grid of walls into line segments outlining the walls."""

    def __init__(self, tile_size: float) -> None:
        self.tile_size = float(tile_size)

    def generate_mesh(self, grid: Sequence[Sequence[int]]) -> list[LineSegment]:
        if not grid or not grid[0]:
            return []
        cols = len(grid[0])
        segments: list[LineSegment] = []
        for y, (upper, lower) in enumerate(zip(grid, grid[1:])):
            corners = zip(upper[:cols], upper[1:cols], lower[:cols], lower[1:cols])
            for x, (tl, tr, bl, br) in enumerate(corners):
                config = (
                    (8 if tl == 1 else 0)
                    | (4 if tr == 1 else 0)
                    | (2 if br == 1 else 0)
                    | (1 if bl == 1 else 0)
                )
                edges = _EDGES[config]
                if edges:
                    midpoints = self._midpoints(x, y)
                    segments.extend(
                        LineSegment(midpoints[a], midpoints[b]) for a, b in edges
                    )
        return segments

    def _midpoints(self, x: int, y: int) -> dict[str, Point]:
        ts = self.tile_size
        half = ts / 2.0
        left_x, right_x = x * ts, (x + 1) * ts
        top_y, bottom_y = y * ts, (y + 1) * ts
        return {
            "top": (left_x + half, top_y),
            "right": (right_x, top_y + half),
            "bottom": (left_x + half, bottom_y),
            "left": (left_x, top_y + half),
        }
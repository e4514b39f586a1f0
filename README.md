# cavegen

This package makes cave maps. It starts from random noise, smooths the noise
with a cellular automaton, and then draws the outline with marching squares.
An animated viewer shows each stage in turn.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## The viewer

    cavegen
    cavegen --seed 1234

The command opens a pygame window. About once a second it moves on by one
step:

1. Random initial noise on a 160 × 120 grid. Each cell is a wall with
   probability 0.45.
2. Five smoothing passes. Every wall is drawn as a filled tile.
3. The outline of the final cave, drawn as line segments.

Each step prints a progress message. To quit, close the window.

With `--seed`, the same cave is produced every time. Without it, the seed
comes from the current time.

## Using the library

```python
from cavegen.cave import CaveGenerator
from cavegen.marching import MarchingSquares

cave = CaveGenerator(80, 60, seed=1234)
cave.initialize_map(0.45)
for _ in range(5):
    cave.smooth_map_iteration()

grid = cave.grid            # rows of 0 (open) and 1 (wall), indexed grid[y][x]
segments = MarchingSquares(6.0).generate_mesh(grid)
for segment in segments:
    print(segment.start, segment.end)
```

### CaveGenerator

`CaveGenerator` (in `cavegen.cave`) has read-only properties `width`,
`height` and `grid`. The same seed always gives the same map. A negative width
or height raises `ValueError`.

- `initialize_map(p)` fills the map afresh. Each cell becomes a wall with
  probability `p`.
- `smooth_map_iteration()` computes every cell from the previous state:
  - Border cells become walls.
  - An inner cell becomes a wall when more than four of its eight neighbours
    are walls.
  - It becomes open when fewer than four are walls.
  - With exactly four, it keeps its previous value.
- `count_alive_neighbours(x, y)` counts the walls around a cell. Positions
  outside the map count as walls.

### MarchingSquares

`MarchingSquares(tile_size)` (in `cavegen.marching`) looks at each 2 × 2 block
of cells. `generate_mesh(grid)` returns frozen `LineSegment(start, end)`
values. Their points are `(x, y)` pixel coordinates, scaled by the tile size,
and they join the midpoints of the block's edges. An empty grid gives an empty
list.

### Driving the stages yourself

`cavegen.app.CaveAnimation(seed, ...)` runs the same stages as the viewer, but
without a window.

- Each `advance()` call runs the next stage and returns its progress message.
- Once the stage in `state` is `AppState.DONE`, `advance()` returns `None`.
- While the noise and smoothing stages run, `triangles` holds the walls as
  triangles.
- After the last stage, `segments` holds the outline.

`cavegen.app.grid_triangles(grid, tile_size)` returns two triangles for each
wall cell of a grid.

## What it does not do

- The map is shown only on screen and cannot be saved.
- Map size, smoothing count and fill probability are not options of the
  `cavegen` command. Set them through `CaveAnimation` or `CaveGenerator`
  instead.
from cavegen.app import AppState, CaveAnimation, grid_triangles
from cavegen.marching import MarchingSquares


def _run_to_done(animation):
    steps = 0
    while animation.state is not AppState.DONE:
        animation.advance()
        steps += 1
    return steps


def test_triangles_for_single_wall():
    triangles = grid_triangles([[1]], 6.0)
    assert len(triangles) == 2
    vertices = {p for tri in triangles for p in tri}
    assert vertices == {(0.0, 0.0), (6.0, 0.0), (6.0, 6.0), (0.0, 6.0)}


def test_no_triangles_for_floor():
    assert grid_triangles([[0, 0], [0, 0]], 6.0) == []


def test_two_triangles_per_wall():
    grid = [[1, 0, 1], [0, 1, 1], [0, 0, 0]]
    walls = sum(map(sum, grid))
    assert len(grid_triangles(grid, 2.0)) == 2 * walls


def test_first_advance_initializes():
    animation = CaveAnimation(11, width=20, height=15, tile_size=2.0, iterations=2)
    assert animation.state is AppState.INITIALIZING
    assert animation.advance() is not None
    assert animation.state is AppState.SMOOTHING
    walls = sum(map(sum, animation.generator.grid))
    assert len(animation.triangles) == 2 * walls


def test_stage_sequence():
    iterations = 3
    animation = CaveAnimation(4, width=16, height=12, tile_size=1.0, iterations=iterations)
    animation.advance()
    for step in range(1, iterations + 1):
        animation.advance()
        assert animation.smoothing_step == step
        assert animation.state is AppState.SMOOTHING
    animation.advance()
    assert animation.state is AppState.MARCHING_SQUARES
    animation.advance()
    assert animation.state is AppState.DONE


def test_total_steps_to_done():
    animation = CaveAnimation(9, width=10, height=10, tile_size=1.0, iterations=5)
    assert _run_to_done(animation) == 5 + 3


def test_done_produces_mesh_of_final_grid():
    animation = CaveAnimation(21, width=30, height=20, tile_size=6.0, iterations=4)
    _run_to_done(animation)
    expected = MarchingSquares(6.0).generate_mesh(animation.generator.grid)
    assert animation.segments == expected
    assert animation.triangles == []


def test_advance_after_done_does_nothing():
    animation = CaveAnimation(1, width=8, height=8, tile_size=1.0, iterations=1)
    _run_to_done(animation)
    segments = list(animation.segments)
    assert animation.advance() is None
    assert animation.state is AppState.DONE
    assert animation.segments == segments


def test_same_seed_same_result():
    a = CaveAnimation(77, width=25, height=20, tile_size=3.0, iterations=2)
    b = CaveAnimation(77, width=25, height=20, tile_size=3.0, iterations=2)
    _run_to_done(a)
    _run_to_done(b)
    assert a.generator.grid == b.generator.grid
    assert a.segments == b.segments
"""Tests for Ball, Paddle, Brick and BrickGrid."""

import pytest

from breakout.game.entities import (
    Ball,
    BallConfig,
    Brick,
    BrickGrid,
    BrickState,
    GridLayout,
)


class TestBall:

    def test_start_position_and_direction(self):
        """Ball starts mid-screen, ~83% down, heading right-up."""
        ball = Ball.at_start(BallConfig(), 800, 600)
        assert ball.x == pytest.approx(400.0)
        assert ball.y == pytest.approx(500.0)
        assert ball.direction == (1.0, -1.0)
        assert ball.speed == 150.0

    def test_center_and_bounds(self, ball):
        assert ball.center == (105.0, 105.0)
        assert ball.radius == 5.0
        assert ball.get_bounds() == (100.0, 100.0, 110.0, 110.0)

    @pytest.mark.parametrize("dx, dy", [(0.5, 1.0), (1.0, 0.0), (2.0, -1.0)])
    def test_non_unit_direction_rejected(self, dx, dy):
        with pytest.raises(ValueError):
            Ball(BallConfig(), 0.0, 0.0, dx=dx, dy=dy)


class TestPaddle:

    def test_initial_geometry(self, paddle):
        assert paddle.x == 400.0
        assert paddle.y == pytest.approx(600 / 1.05)
        assert paddle.width == 150.0
        assert paddle.height == 8.0
        assert paddle.right == 550.0

    def test_y_is_read_only(self, paddle):
        with pytest.raises(AttributeError):
            paddle.y = 10.0

    def test_bounds_follow_width(self, paddle):
        paddle.width = 50.0
        left, top, right, bottom = paddle.get_bounds()
        assert right - left == 50.0
        assert bottom - top == 8.0


class TestBrick:

    def test_deactivate_once(self):
        """Active -> destroyed happens exactly once."""
        brick = Brick(0.0, 0.0, 60.0, 20.0, (3, 4))
        assert brick.is_active
        assert brick.deactivate() is True
        assert brick.state is BrickState.DESTROYED
        assert brick.deactivate() is False
        assert not brick.is_active

    def test_center(self):
        brick = Brick(28.0, 35.0, 60.0, 20.0)
        assert brick.center == (58.0, 45.0)

    def test_grid_position(self):
        brick = Brick(0.0, 0.0, 60.0, 20.0, (3, 4))
        assert (brick.row, brick.col) == (3, 4)


class TestBrickGrid:
    """Deterministic layout and row-major iteration."""

    @pytest.fixture
    def grid(self):
        return BrickGrid(GridLayout())

    def test_reference_size(self, grid):
        assert (grid.rows, grid.cols) == (16, 12)
        assert len(grid) == 192
        assert grid.active_count == 192

    def test_first_cell_position(self, grid):
        brick = grid[0, 0]
        assert (brick.x, brick.y) == (28.0, 35.0)
        assert (brick.width, brick.height) == (60.0, 20.0)

    def test_last_cell_position(self, grid):
        brick = grid[15, 11]
        assert brick.x == pytest.approx(11 * (60 + 2) + 28)
        assert brick.y == pytest.approx(15 * (20 + 2) + 35)

    def test_layout_position_formula(self):
        layout = GridLayout(rows=3, cols=3, width=10, height=5, gap=1, hpadding=7, vpadding=9)
        assert layout.position(2, 1) == (1 * 11 + 7, 2 * 6 + 9)

    def test_row_major_iteration(self, grid):
        positions = [brick.grid_position for brick in grid]
        assert positions[0] == (0, 0)
        assert positions[1] == (0, 1)
        assert positions[12] == (1, 0)
        assert positions[-1] == (15, 11)

    def test_active_bricks_excludes_destroyed(self, grid):
        grid[0, 0].deactivate()
        active = grid.active_bricks()
        assert len(active) == 191
        assert active[0].grid_position == (0, 1)

    def test_clear_all_but_first_row(self, grid):
        grid[5, 5].deactivate()
        cleared = grid.clear_all_but_first_row()
        assert cleared == 192 - 12 - 1
        assert grid.active_count == 12
        assert all(brick.row == 0 for brick in grid.active_bricks())

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            GridLayout(rows=-1)

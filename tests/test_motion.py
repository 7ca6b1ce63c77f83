"""Tests for paddle and ball motion integration."""

import math

import pytest

from breakout.game.entities import Ball, BallConfig, Paddle, PaddleConfig
from breakout.game.physics.motion import (
    move_ball,
    move_paddle,
    reflect_off_walls,
    sanitize_dt,
)

W, H = 800, 600


def make_ball(x, y, dx=1.0, dy=-1.0, speed=150.0):
    return Ball(BallConfig(size=10.0, speed=speed), x, y, dx=dx, dy=dy)


class TestSanitizeDt:
    """Untrusted frame times are clamped, never propagated."""

    @pytest.mark.parametrize("dt", [float('nan'), float('inf'), float('-inf'), -0.5])
    def test_invalid_becomes_zero(self, dt):
        assert sanitize_dt(dt) == 0.0

    def test_stall_clamped_to_max(self):
        assert sanitize_dt(5.0, max_dt=0.1) == 0.1

    def test_normal_value_unchanged(self):
        assert sanitize_dt(0.016) == 0.016

    def test_zero_unchanged(self):
        assert sanitize_dt(0.0) == 0.0


class TestBallWalls:
    """Boundary reflection happens before translation."""

    @pytest.mark.parametrize("x", [0.0, -0.5, -100.0])
    def test_left_edge(self, x):
        """x <= 0 clamps to 0 and forces dx = +1."""
        ball = make_ball(x, 300.0, dx=-1.0)
        assert move_ball(ball, 0.0, W, H)
        assert ball.x == 0.0
        assert ball.dx == 1.0

    def test_left_edge_then_translates(self):
        ball = make_ball(-5.0, 300.0, dx=-1.0)
        move_ball(ball, 0.1, W, H)
        assert ball.x == pytest.approx(15.0)
        assert ball.dx == 1.0

    @pytest.mark.parametrize("x", [800.0, 805.0])
    def test_right_edge(self, x):
        ball = make_ball(x, 300.0, dx=1.0)
        move_ball(ball, 0.0, W, H)
        assert ball.x == 800.0
        assert ball.dx == -1.0

    @pytest.mark.parametrize("y", [0.0, -3.0])
    def test_top_edge(self, y):
        ball = make_ball(300.0, y, dy=-1.0)
        move_ball(ball, 0.0, W, H)
        assert ball.y == 0.0
        assert ball.dy == 1.0

    def test_top_left_corner_reflects_both(self):
        ball = make_ball(-1.0, -1.0, dx=-1.0, dy=-1.0)
        move_ball(ball, 0.0, W, H)
        assert (ball.x, ball.y) == (0.0, 0.0)
        assert ball.direction == (1.0, 1.0)

    @pytest.mark.parametrize("dy", [-1.0, 1.0])
    def test_bottom_exit_is_not_a_bounce(self, dy):
        """Reaching the bottom reports the ball lost and skips translation."""
        ball = make_ball(300.0, 600.0, dy=dy)
        assert move_ball(ball, 0.1, W, H) is False
        assert (ball.x, ball.y) == (300.0, 600.0)
        assert ball.dy == dy

    def test_reflect_inside_playfield_is_noop(self):
        ball = make_ball(300.0, 300.0)
        assert reflect_off_walls(ball, W, H) is True
        assert ball.direction == (1.0, -1.0)


class TestBallTranslation:
    """Position advances by speed * direction * dt."""

    def test_translation(self):
        ball = make_ball(100.0, 100.0, dx=1.0, dy=-1.0)
        move_ball(ball, 0.5, W, H)
        assert ball.x == pytest.approx(175.0)
        assert ball.y == pytest.approx(25.0)

    def test_zero_dt_is_noop(self):
        ball = make_ball(100.0, 100.0)
        move_ball(ball, 0.0, W, H)
        assert (ball.x, ball.y) == (100.0, 100.0)

    def test_direction_magnitude_preserved(self):
        """Reflections never change component magnitude."""
        ball = make_ball(-10.0, -10.0, dx=-1.0, dy=-1.0)
        for _ in range(500):
            if not move_ball(ball, 0.05, W, H):
                break
            assert abs(ball.dx) == 1.0
            assert abs(ball.dy) == 1.0
            assert math.isfinite(ball.x) and math.isfinite(ball.y)


class TestPaddleMotion:
    """Paddle slides with input and stays inside the playfield."""

    def test_move_right(self, paddle):
        move_paddle(paddle, 1, 0.1, W)
        assert paddle.x == pytest.approx(472.0)

    def test_move_left(self, paddle):
        move_paddle(paddle, -1, 0.1, W)
        assert paddle.x == pytest.approx(328.0)

    def test_no_intent_no_motion(self, paddle):
        move_paddle(paddle, 0, 0.1, W)
        assert paddle.x == 400.0

    def test_zero_dt_is_noop(self, paddle):
        move_paddle(paddle, 1, 0.0, W)
        assert paddle.x == 400.0

    def test_right_edge_clamped(self, paddle):
        """A large step cannot push the right edge past the playfield."""
        paddle.x = 640.0
        move_paddle(paddle, 1, 0.1, W)
        assert paddle.x == 650.0
        assert paddle.right == 800.0

    def test_at_right_edge_does_not_move_right(self, paddle):
        paddle.x = 650.0
        move_paddle(paddle, 1, 0.1, W)
        assert paddle.x == 650.0

    def test_left_edge_clamped(self, paddle):
        paddle.x = 10.0
        move_paddle(paddle, -1, 0.1, W)
        assert paddle.x == 0.0

    def test_at_left_edge_does_not_move_left(self, paddle):
        paddle.x = 0.0
        move_paddle(paddle, -1, 0.1, W)
        assert paddle.x == 0.0


class TestNarrowPlayfield:
    """Playfields narrower than half a screen plus the paddle width."""

    NARROW = 200

    def make_paddle(self):
        return Paddle(PaddleConfig(width=150.0), self.NARROW, H)

    def test_paddle_starts_inside(self):
        paddle = self.make_paddle()
        assert paddle.x == 50.0
        assert paddle.right == self.NARROW

    def test_paddle_wider_than_field_pinned_left(self):
        paddle = Paddle(PaddleConfig(width=150.0), 100, H)
        assert paddle.x == 0.0

    def test_idle_frame_pulls_paddle_back(self):
        paddle = self.make_paddle()
        paddle.x = 100.0
        move_paddle(paddle, 0, 0.016, self.NARROW)
        assert paddle.right <= self.NARROW

    def test_zero_dt_pulls_paddle_back(self):
        paddle = self.make_paddle()
        paddle.x = 100.0
        move_paddle(paddle, 1, 0.0, self.NARROW)
        assert paddle.x == 50.0

    def test_move_right_stays_inside(self):
        paddle = self.make_paddle()
        paddle.x = 100.0
        move_paddle(paddle, 1, 0.016, self.NARROW)
        assert paddle.right <= self.NARROW

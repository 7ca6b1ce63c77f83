"""Motion integration for the paddle and ball.

Positions advance by ``speed * direction * dt``. The ball reflects off the
left, right and top edges before it moves; crossing the bottom edge ends
the session instead of bouncing.
"""

import math

from breakout.common.logging import get_logger
from breakout.config import MAX_FRAME_TIME
from breakout.game.entities.ball import Ball
from breakout.game.entities.paddle import Paddle

log = get_logger('motion')


def sanitize_dt(dt: float, max_dt: float = MAX_FRAME_TIME) -> float:
    """Clamp an externally supplied frame time to ``[0, max_dt]``.

    NaN, infinite and negative values become 0; stalls longer than
    ``max_dt`` are cut to ``max_dt``.

    Args:
        dt: Frame time in seconds from the host clock
        max_dt: Largest frame time the integrator will accept

    Returns:
        Safe frame time in seconds
    """
    if not math.isfinite(dt) or dt < 0:
        log.debug("Discarding invalid frame time %r", dt)
        return 0.0
    if dt > max_dt:
        log.debug("Clamping frame time %.3fs to %.3fs", dt, max_dt)
        return max_dt
    return dt


def move_paddle(
    paddle: Paddle,
    horizontal: int,
    dt: float,
    screen_width: float,
) -> None:
    """Slide the paddle left or right.

    Movement only starts toward an edge the paddle has not reached yet.
    Every frame, moving or not, the position is kept inside
    ``[0, screen_width - width]``.

    Args:
        paddle: Paddle to move in place
        horizontal: -1 (left), 0 (stay) or +1 (right)
        dt: Frame time in seconds
        screen_width: Playfield width
    """
    if horizontal > 0 and paddle.right < screen_width:
        paddle.x += paddle.speed * dt
    elif horizontal < 0 and paddle.x > 0:
        paddle.x -= paddle.speed * dt

    max_x = max(0.0, screen_width - paddle.width)
    paddle.x = min(max(paddle.x, 0.0), max_x)


def reflect_off_walls(ball: Ball, screen_width: float, screen_height: float) -> bool:
    """Clamp the ball to the left, right and top edges and point it inward.

    Args:
        ball: Ball to correct in place
        screen_width: Playfield width
        screen_height: Playfield height

    Returns:
        False if the ball has reached the bottom edge (lost), True otherwise
    """
    if ball.x <= 0:
        ball.x = 0.0
        ball.dx = 1.0
    elif ball.x >= screen_width:
        ball.x = float(screen_width)
        ball.dx = -1.0

    if ball.y <= 0:
        ball.y = 0.0
        ball.dy = 1.0
    elif ball.y >= screen_height:
        return False

    return True


def move_ball(ball: Ball, dt: float, screen_width: float, screen_height: float) -> bool:
    """Reflect the ball off the walls, then translate it.

    Args:
        ball: Ball to move in place
        dt: Frame time in seconds
        screen_width: Playfield width
        screen_height: Playfield height

    Returns:
        False if the ball exited past the bottom (it is not moved), True otherwise
    """
    if not reflect_off_walls(ball, screen_width, screen_height):
        log.debug("Ball exited bottom at x=%.1f", ball.x)
        return False

    ball.x += ball.speed * ball.dx * dt
    ball.y += ball.speed * ball.dy * dt
    return True

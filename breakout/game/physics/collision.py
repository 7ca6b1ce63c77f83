"""Collision detection and resolution for Breakout.

Handles ball-paddle and ball-brick collisions using axis-aligned bounding
box overlap. At most one brick is resolved per frame.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from breakout.common.logging import get_logger
from breakout.config import SCORE_PER_BRICK, VERTICAL_HIT_THRESHOLD
from breakout.game.entities.ball import Ball
from breakout.game.entities.brick import Brick, BrickGrid
from breakout.game.entities.paddle import Paddle

log = get_logger('collision')

Bounds = Tuple[float, float, float, float]

# Screen coordinates: y grows downward, so "up" is negative y
UP = (0.0, -1.0)


class HitAxis(Enum):
    """Which direction component a brick hit reflects."""

    VERTICAL = "vertical"      # dy flips
    HORIZONTAL = "horizontal"  # dx flips


@dataclass(frozen=True)
class CollisionResult:
    """Outcome of one collision pass.

    Attributes:
        paddle_hit: Ball overlapped the paddle and was sent upward
        brick: Brick destroyed this pass, if any
        axis: How the brick hit reflected the ball, if a brick was hit
        points: Score earned this pass
    """

    paddle_hit: bool = False
    brick: Optional[Brick] = None
    axis: Optional[HitAxis] = None
    points: int = 0


def rects_overlap(a: Bounds, b: Bounds) -> bool:
    """Check if two (left, top, right, bottom) boxes overlap.

    Both the x-ranges and the y-ranges must intersect with positive
    overlap; boxes that only share an edge do not overlap.
    """
    a_left, a_top, a_right, a_bottom = a
    b_left, b_top, b_right, b_bottom = b
    return (a_left < b_right and b_left < a_right and
            a_top < b_bottom and b_top < a_bottom)


def check_paddle_collision(ball: Ball, paddle: Paddle) -> bool:
    """Check if ball overlaps the paddle."""
    return rects_overlap(ball.get_bounds(), paddle.get_bounds())


def check_brick_collision(ball: Ball, brick: Brick) -> bool:
    """Check if ball overlaps an active brick."""
    if not brick.is_active:
        return False
    return rects_overlap(ball.get_bounds(), brick.get_bounds())


def classify_hit(
    ball_center: Tuple[float, float],
    brick_center: Tuple[float, float],
    threshold: float = VERTICAL_HIT_THRESHOLD,
) -> HitAxis:
    """Decide whether a brick hit reflects the ball vertically or horizontally.

    The offset from brick center to ball center is normalized and compared
    with the up vector. A dot product magnitude of at least ``threshold``
    is a vertical hit; anything flatter is a horizontal hit. The low
    threshold biases corner hits toward vertical so the ball does not skim
    sideways along a row.

    A zero-length offset (centers coincide) is a vertical hit.

    Args:
        ball_center: (x, y) of the ball center
        brick_center: (x, y) of the brick center
        threshold: Minimum |cos| against up for a vertical hit

    Returns:
        HitAxis.VERTICAL or HitAxis.HORIZONTAL
    """
    delta_x = ball_center[0] - brick_center[0]
    delta_y = ball_center[1] - brick_center[1]
    length = math.hypot(delta_x, delta_y)
    if length == 0:
        return HitAxis.VERTICAL

    dot = (delta_x * UP[0] + delta_y * UP[1]) / length
    if abs(dot) >= threshold:
        return HitAxis.VERTICAL
    return HitAxis.HORIZONTAL


def bounce_off_brick(ball: Ball, axis: HitAxis) -> None:
    """Flip the ball's direction component for the given hit axis."""
    if axis is HitAxis.VERTICAL:
        ball.dy *= -1
    else:
        ball.dx *= -1


def find_brick_collision(ball: Ball, grid: BrickGrid) -> Optional[Brick]:
    """Find the first active brick the ball overlaps, in row-major order."""
    for brick in grid:
        if check_brick_collision(ball, brick):
            return brick
    return None


def resolve_collisions(
    ball: Ball,
    paddle: Paddle,
    grid: BrickGrid,
    score_per_brick: int = SCORE_PER_BRICK,
    threshold: float = VERTICAL_HIT_THRESHOLD,
) -> CollisionResult:
    """Run the paddle check and the brick check for one frame.

    The paddle always sends the ball upward. The first overlapping active
    brick is destroyed and reflects the ball; further bricks are left for
    later frames.

    Args:
        ball: Ball, mutated in place
        paddle: Paddle to test against
        grid: Brick grid, the hit brick is deactivated in place
        score_per_brick: Points for destroying a brick
        threshold: Vertical hit threshold for classify_hit

    Returns:
        CollisionResult describing what happened
    """
    paddle_hit = check_paddle_collision(ball, paddle)
    if paddle_hit:
        ball.dy = -1.0

    brick = find_brick_collision(ball, grid)
    if brick is None:
        return CollisionResult(paddle_hit=paddle_hit)

    brick.deactivate()
    axis = classify_hit(ball.center, brick.center, threshold)
    bounce_off_brick(ball, axis)
    log.trace("Brick %s hit (%s)", brick.grid_position, axis.value)

    return CollisionResult(
        paddle_hit=paddle_hit,
        brick=brick,
        axis=axis,
        points=score_per_brick,
    )

"""Score-driven difficulty curve.

The paddle shrinks linearly with score until it hits a positive floor;
the ball speeds up linearly with score and never caps.
"""

from dataclasses import dataclass

from breakout.config import (
    INITIAL_BALL_SPEED,
    INITIAL_PADDLE_WIDTH,
    PADDLE_MIN_WIDTH,
    SCORE_AT_MAX_BALL_SPEED,
    SCORE_AT_MIN_PADDLE_WIDTH,
)


@dataclass(frozen=True)
class Difficulty:
    """Difficulty parameters for one frame.

    Attributes:
        paddle_width: Paddle width to apply this frame
        ball_speed: Ball speed to apply this frame
        at_paddle_floor: True when the width was clamped to the floor
    """

    paddle_width: float
    ball_speed: float
    at_paddle_floor: bool = False


def compute_difficulty(
    score: int,
    initial_paddle_width: float = INITIAL_PADDLE_WIDTH,
    initial_ball_speed: float = INITIAL_BALL_SPEED,
    score_at_min_paddle_width: float = SCORE_AT_MIN_PADDLE_WIDTH,
    score_at_max_ball_speed: float = SCORE_AT_MAX_BALL_SPEED,
    paddle_min_width: float = PADDLE_MIN_WIDTH,
) -> Difficulty:
    """Map cumulative score to paddle width and ball speed.

    At ``score == score_at_max_ball_speed`` the ball is twice its initial
    speed. At ``score >= score_at_min_paddle_width`` the linear width would
    be zero or negative, so it is held at ``paddle_min_width``.

    Args:
        score: Cumulative score (non-negative)
        initial_paddle_width: Paddle width at score 0
        initial_ball_speed: Ball speed at score 0
        score_at_min_paddle_width: Score where the linear width reaches 0
        score_at_max_ball_speed: Score where the speed has doubled
        paddle_min_width: Positive floor for the paddle width

    Returns:
        Difficulty for this score

    Raises:
        ValueError: If score is negative
    """
    if score < 0:
        raise ValueError(f'Score must be non-negative, got {score}')

    width = initial_paddle_width * (1 - score / score_at_min_paddle_width)
    at_floor = width <= paddle_min_width
    if at_floor:
        width = paddle_min_width

    speed = initial_ball_speed * (1 + score / score_at_max_ball_speed)

    return Difficulty(paddle_width=width, ball_speed=speed, at_paddle_floor=at_floor)

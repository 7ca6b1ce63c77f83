"""Breakout physics: difficulty, motion and collision."""

from .collision import (
    CollisionResult,
    HitAxis,
    check_brick_collision,
    check_paddle_collision,
    classify_hit,
    rects_overlap,
    resolve_collisions,
)
from .difficulty import Difficulty, compute_difficulty
from .motion import move_ball, move_paddle, sanitize_dt

__all__ = [
    'CollisionResult',
    'HitAxis',
    'check_brick_collision',
    'check_paddle_collision',
    'classify_hit',
    'rects_overlap',
    'resolve_collisions',
    'Difficulty',
    'compute_difficulty',
    'move_ball',
    'move_paddle',
    'sanitize_dt',
]

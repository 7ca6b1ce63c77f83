"""
Pydantic data models handed across the core/presentation boundary.

- Primitives: Point2D, Rectangle
- Snapshot: RenderSnapshot, BallView, BrickView

Usage:
    >>> from breakout.models import RenderSnapshot, Rectangle
"""

from .primitives import Point2D, Rectangle
from .snapshot import BallView, BrickView, RenderSnapshot

__all__ = [
    'Point2D',
    'Rectangle',
    'BallView',
    'BrickView',
    'RenderSnapshot',
]

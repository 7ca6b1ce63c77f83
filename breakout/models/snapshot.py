"""
Render snapshot - the read-only per-frame view of a session.

The simulation core produces one of these every tick; skins draw from it
and never touch the live entities.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from breakout.models.primitives import Point2D, Rectangle


class BrickView(BaseModel):
    """An active brick as the presentation layer sees it.

    Attributes:
        rect: Brick bounds
        row: Grid row (0 = top)
        col: Grid column (0 = left)
        color_band: Palette index derived from the row
    """
    rect: Rectangle
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    color_band: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class BallView(BaseModel):
    """Ball as a circle: center and radius."""
    center: Point2D
    radius: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class RenderSnapshot(BaseModel):
    """Everything needed to draw one frame.

    Attributes:
        ball: Ball center and radius
        paddle: Paddle rectangle
        bricks: Active bricks in row-major order
        score: Current score
        width: Playfield width
        height: Playfield height
        running: Whether the session is still running
        frame: Number of simulated frames so far
    """
    ball: BallView
    paddle: Rectangle
    bricks: List[BrickView]
    score: int = Field(..., ge=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    running: bool
    frame: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def score_text(self) -> str:
        """Score formatted for display."""
        return str(self.score)

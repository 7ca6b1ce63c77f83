"""Geometric skin - flat shapes in the classic Breakout palette."""

from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR,
    BALL_COLOR,
    BRICK_COLORS,
    PADDLE_COLOR,
    SCORE_COLOR,
    SCORE_FONT_SIZE,
    SCORE_Y,
)

if TYPE_CHECKING:
    from breakout.models import BallView, BrickView, Rectangle


class GeometricSkin(BreakoutSkin):
    """Renders the game using simple geometric shapes.

    - Background: light gray
    - Ball: maroon circle
    - Paddle: lime rectangle
    - Bricks: one color per band of rows
    - Score: white text at the top center
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes in the classic palette"

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> pygame.font.Font:
        """Ensure font is initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, SCORE_FONT_SIZE)
        return self._font

    @staticmethod
    def brick_color(color_band: int) -> Tuple[int, int, int]:
        """Palette color for a band, clamped to the last color."""
        return BRICK_COLORS[min(color_band, len(BRICK_COLORS) - 1)]

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR)

    def render_paddle(self, paddle: 'Rectangle', screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle."""
        pygame.draw.rect(screen, PADDLE_COLOR, paddle.as_tuple())

    def render_ball(self, ball: 'BallView', screen: pygame.Surface) -> None:
        """Render ball as a filled circle."""
        pos = (int(ball.center.x), int(ball.center.y))
        pygame.draw.circle(screen, BALL_COLOR, pos, max(1, int(ball.radius)))

    def render_brick(self, brick: 'BrickView', screen: pygame.Surface) -> None:
        """Render brick as a filled rectangle in its band color."""
        pygame.draw.rect(screen, self.brick_color(brick.color_band), brick.rect.as_tuple())

    def render_hud(self, screen: pygame.Surface, score_text: str, width: float) -> None:
        """Render the score at the top center."""
        font = self._ensure_font()
        text = font.render(score_text, True, SCORE_COLOR)
        screen.blit(text, text.get_rect(midtop=(width / 2, SCORE_Y)))

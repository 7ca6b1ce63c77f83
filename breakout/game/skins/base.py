"""Base class for Breakout skins.

Skins handle ALL rendering - the session only manages state and hands
over a RenderSnapshot each frame.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from breakout.models import BallView, BrickView, Rectangle, RenderSnapshot


class BreakoutSkin(ABC):
    """Base class for game skins."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def render(self, snapshot: 'RenderSnapshot', screen: pygame.Surface) -> None:
        """Draw a whole frame.

        Args:
            snapshot: State to draw
            screen: Pygame surface to draw on
        """
        self.render_background(screen)
        self.render_hud(screen, snapshot.score_text, snapshot.width)
        self.render_ball(snapshot.ball, screen)
        self.render_paddle(snapshot.paddle, screen)
        for brick in snapshot.bricks:
            self.render_brick(brick, screen)

    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the frame."""
        pass

    @abstractmethod
    def render_paddle(self, paddle: 'Rectangle', screen: pygame.Surface) -> None:
        """Render the paddle rectangle."""
        pass

    @abstractmethod
    def render_ball(self, ball: 'BallView', screen: pygame.Surface) -> None:
        """Render the ball circle."""
        pass

    @abstractmethod
    def render_brick(self, brick: 'BrickView', screen: pygame.Surface) -> None:
        """Render an active brick.

        Args:
            brick: Brick view (rect plus color band)
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface, score_text: str, width: float) -> None:
        """Render the heads-up display (score)."""
        pass

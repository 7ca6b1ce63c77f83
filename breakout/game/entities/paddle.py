"""Paddle entity.

The paddle slides horizontally under player control. Its width shrinks as
the score grows; its vertical position never changes during a session.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class PaddleConfig:
    """Paddle configuration for a session."""

    width: float = 150.0
    height: float = 8.0
    speed: float = 720.0


class Paddle:
    """Paddle positioned by its top-left corner."""

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle.

        Args:
            config: Paddle configuration
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
        """
        self._config = config
        # Left edge starts at the horizontal middle, pulled in on narrow playfields
        self.x = min(screen_width / 2, max(0.0, screen_width - config.width))
        self._y = screen_height / 1.05
        self.width = config.width

    @property
    def y(self) -> float:
        """Get paddle top Y (fixed for the session)."""
        return self._y

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._config.height

    @property
    def speed(self) -> float:
        """Get paddle speed in pixels/second."""
        return self._config.speed

    @property
    def right(self) -> float:
        """Get paddle right edge X."""
        return self.x + self.width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self.x, self._y, self.width, self._config.height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (self.x, self._y, self.x + self.width, self._y + self._config.height)

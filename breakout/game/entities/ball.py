"""Ball entity with corner-unit direction.

The ball moves along one of the four diagonals. Reflections flip the sign of
a direction component; the magnitude of each component is always 1.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class BallConfig:
    """Ball configuration for a session."""

    size: float = 10.0            # Diameter of the bounding square
    speed: float = 150.0          # Initial speed in pixels/second


class Ball:
    """Ball positioned by the top-left corner of its bounding square.

    The Motion Integrator and Collision Resolver mutate ``x``, ``y``,
    ``speed``, ``dx`` and ``dy`` in place.
    """

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        dx: float = 1.0,
        dy: float = -1.0,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Left edge X position
            y: Top edge Y position
            dx: Horizontal direction, -1 or +1
            dy: Vertical direction, -1 (up) or +1 (down)
        """
        if abs(dx) != 1 or abs(dy) != 1:
            raise ValueError(f'Ball direction components must be +/-1, got ({dx}, {dy})')
        self._config = config
        self.x = float(x)
        self.y = float(y)
        self.speed = config.speed
        self.dx = float(dx)
        self.dy = float(dy)

    @classmethod
    def at_start(cls, config: BallConfig, screen_width: float, screen_height: float) -> 'Ball':
        """Create the session's ball: mid-screen, ~83% down, moving right-up."""
        return cls(config, screen_width / 2, screen_height / 1.2, dx=1.0, dy=-1.0)

    @property
    def size(self) -> float:
        """Get ball diameter."""
        return self._config.size

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.size / 2

    @property
    def center(self) -> Tuple[float, float]:
        """Get center of the bounding square."""
        return (self.x + self.radius, self.y + self.radius)

    @property
    def direction(self) -> Tuple[float, float]:
        """Get (dx, dy)."""
        return (self.dx, self.dy)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (
            self.x,
            self.y,
            self.x + self._config.size,
            self.y + self._config.size,
        )

    def __repr__(self) -> str:
        return (f"Ball(x={self.x:.2f}, y={self.y:.2f}, speed={self.speed:.1f}, "
                f"dir=({self.dx:+.0f}, {self.dy:+.0f}))")

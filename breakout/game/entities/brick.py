"""Brick and brick grid entities.

Bricks are laid out once at session start on a fixed rows x cols grid.
A brick is either active or destroyed; destroyed bricks never come back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple


class BrickState(Enum):
    """Brick lifecycle states."""

    ACTIVE = "active"        # Can be hit
    DESTROYED = "destroyed"  # Hit once, gone for the session


@dataclass(frozen=True)
class GridLayout:
    """Grid dimensions and spacing.

    Brick (row, col) sits at
    ``(col * (width + gap) + hpadding, row * (height + gap) + vpadding)``.
    """

    rows: int = 16
    cols: int = 12
    width: float = 60.0
    height: float = 20.0
    gap: float = 2.0
    hpadding: float = 28.0
    vpadding: float = 35.0

    def __post_init__(self):
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f'Grid size must be non-negative, got {self.rows}x{self.cols}')

    def position(self, row: int, col: int) -> Tuple[float, float]:
        """Get the top-left corner of the brick at (row, col)."""
        return (
            col * (self.width + self.gap) + self.hpadding,
            row * (self.height + self.gap) + self.vpadding,
        )


class Brick:
    """A single brick with a fixed position."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            grid_position: (row, col) position in grid
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._grid_position = grid_position
        self._state = BrickState.ACTIVE

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center(self) -> Tuple[float, float]:
        """Get center position."""
        return (self._x + self._width / 2, self._y + self._height / 2)

    @property
    def row(self) -> int:
        return self._grid_position[0]

    @property
    def col(self) -> int:
        return self._grid_position[1]

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def state(self) -> BrickState:
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if brick is active (can be hit)."""
        return self._state == BrickState.ACTIVE

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (
            self._x,
            self._y,
            self._x + self._width,
            self._y + self._height,
        )

    def deactivate(self) -> bool:
        """Destroy the brick.

        Returns:
            True if the brick was active and is now destroyed, False if it
            was already destroyed
        """
        if self._state != BrickState.ACTIVE:
            return False
        self._state = BrickState.DESTROYED
        return True

    def __repr__(self) -> str:
        return f"Brick(row={self.row}, col={self.col}, state={self._state.value})"


class BrickGrid:
    """Fixed-size grid of bricks indexed by (row, col).

    Iteration is row-major: rows top to bottom, columns left to right.
    """

    def __init__(self, layout: GridLayout):
        """Lay out every brick of the grid as active.

        Args:
            layout: Grid dimensions and spacing
        """
        self._layout = layout
        self._rows: List[List[Brick]] = []
        for row in range(layout.rows):
            bricks = []
            for col in range(layout.cols):
                x, y = layout.position(row, col)
                bricks.append(Brick(x, y, layout.width, layout.height, (row, col)))
            self._rows.append(bricks)

    @property
    def layout(self) -> GridLayout:
        return self._layout

    @property
    def rows(self) -> int:
        return self._layout.rows

    @property
    def cols(self) -> int:
        return self._layout.cols

    def __getitem__(self, index: Tuple[int, int]) -> Brick:
        row, col = index
        return self._rows[row][col]

    def __iter__(self) -> Iterator[Brick]:
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return self._layout.rows * self._layout.cols

    def active_bricks(self) -> List[Brick]:
        """Get active bricks in row-major order."""
        return [brick for brick in self if brick.is_active]

    @property
    def active_count(self) -> int:
        return sum(1 for brick in self if brick.is_active)

    def clear_all_but_first_row(self) -> int:
        """Destroy every active brick outside row 0.

        Returns:
            Number of bricks destroyed
        """
        cleared = 0
        for row in self._rows[1:]:
            for brick in row:
                if brick.deactivate():
                    cleared += 1
        return cleared

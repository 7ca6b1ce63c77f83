"""Configuration for the Breakout game.

Contains screen defaults, physics constants, difficulty thresholds, the
brick grid layout and color definitions. Any numeric setting can be
overridden from a ``.env`` file next to this module or from the process
environment.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display settings (the shell reads the real size from the display surface)
SCREEN_WIDTH: int = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT: int = _get_int('SCREEN_HEIGHT', 600)
FPS: int = _get_int('FPS', 60)
WINDOW_TITLE: str = "Breakout"
DEBUG_KEYS: bool = _get_bool('DEBUG_KEYS', False)

# Ball
BALL_SIZE: float = _get_float('BALL_SIZE', 10.0)
INITIAL_BALL_SPEED: float = _get_float('INITIAL_BALL_SPEED', 150.0)  # pixels/second

# Paddle
PADDLE_HEIGHT: float = _get_float('PADDLE_HEIGHT', 8.0)
INITIAL_PADDLE_WIDTH: float = _get_float('INITIAL_PADDLE_WIDTH', 150.0)
PADDLE_MIN_WIDTH: float = _get_float('PADDLE_MIN_WIDTH', 10.0)
PADDLE_SPEED: float = _get_float('PADDLE_SPEED', 720.0)  # pixels/second

# Brick grid
BRICK_ROW_COUNT: int = _get_int('BRICK_ROW_COUNT', 16)
BRICK_COL_COUNT: int = _get_int('BRICK_COL_COUNT', 12)
BRICK_WIDTH: float = 60.0
BRICK_HEIGHT: float = 20.0
BRICK_GAP: float = 2.0
BRICK_HPADDING: float = 28.0
BRICK_VPADDING: float = 35.0

# Scoring and difficulty
SCORE_PER_BRICK: int = 1000
SCORE_AT_MIN_PADDLE_WIDTH: float = _get_float('SCORE_AT_MIN_PADDLE_WIDTH', 256000.0)
SCORE_AT_MAX_BALL_SPEED: float = _get_float('SCORE_AT_MAX_BALL_SPEED', 76800.0)

# Brick-hit classification: |normalize(delta) . up| >= threshold is a vertical hit
VERTICAL_HIT_THRESHOLD: float = 0.25

# Frame time above this (seconds) is treated as a stall and clamped
MAX_FRAME_TIME: float = _get_float('MAX_FRAME_TIME', 0.1)

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (200, 200, 200)  # light gray
BALL_COLOR: Tuple[int, int, int] = (190, 33, 55)          # maroon
PADDLE_COLOR: Tuple[int, int, int] = (0, 158, 47)         # lime
SCORE_COLOR: Tuple[int, int, int] = (255, 255, 255)
SCORE_FONT_SIZE: int = 20
SCORE_Y: float = 20.0

# One color per band of rows, darkest at the top
BRICK_COLORS: Tuple[Tuple[int, int, int], ...] = (
    (26, 26, 64),
    (39, 0, 130),
    (122, 11, 192),
    (250, 88, 182),
)


@dataclass(frozen=True)
class BreakoutConfig:
    """Tunable values for one session.

    Defaults mirror the module constants; tests build smaller variants
    (e.g. a 1x1 grid) without touching the environment.
    """

    ball_size: float = BALL_SIZE
    initial_ball_speed: float = INITIAL_BALL_SPEED

    paddle_height: float = PADDLE_HEIGHT
    initial_paddle_width: float = INITIAL_PADDLE_WIDTH
    paddle_min_width: float = PADDLE_MIN_WIDTH
    paddle_speed: float = PADDLE_SPEED

    brick_rows: int = BRICK_ROW_COUNT
    brick_cols: int = BRICK_COL_COUNT
    brick_width: float = BRICK_WIDTH
    brick_height: float = BRICK_HEIGHT
    brick_gap: float = BRICK_GAP
    brick_hpadding: float = BRICK_HPADDING
    brick_vpadding: float = BRICK_VPADDING

    score_per_brick: int = SCORE_PER_BRICK
    score_at_min_paddle_width: float = SCORE_AT_MIN_PADDLE_WIDTH
    score_at_max_ball_speed: float = SCORE_AT_MAX_BALL_SPEED

    max_frame_time: float = MAX_FRAME_TIME
    palette_size: int = len(BRICK_COLORS)

    def __post_init__(self):
        if self.paddle_min_width <= 0:
            raise ValueError(f'paddle_min_width must be positive, got {self.paddle_min_width}')
        if self.palette_size <= 0:
            raise ValueError(f'palette_size must be positive, got {self.palette_size}')


def get_config() -> BreakoutConfig:
    """Get the session configuration built from module constants."""
    return BreakoutConfig()

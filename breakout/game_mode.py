"""Breakout session - frame-by-frame orchestration of the simulation.

One BreakoutSession owns the ball, paddle, brick grid, score and running
state. The host calls ``tick(dt, intents)`` once per frame and draws the
returned RenderSnapshot; nothing here blocks, sleeps or touches a display.
"""

from typing import List, Optional

from breakout.common.game_state import GameState, StopReason
from breakout.common.logging import get_logger
from breakout.config import BreakoutConfig, get_config
from breakout.game.entities.ball import Ball, BallConfig
from breakout.game.entities.brick import BrickGrid, GridLayout
from breakout.game.entities.paddle import Paddle, PaddleConfig
from breakout.game.physics.collision import CollisionResult, resolve_collisions
from breakout.game.physics.difficulty import Difficulty, compute_difficulty
from breakout.game.physics.motion import move_ball, move_paddle, sanitize_dt
from breakout.input.intents import NO_INPUT, InputIntents
from breakout.models import BallView, BrickView, Point2D, Rectangle, RenderSnapshot

log = get_logger('game_mode')


class BreakoutSession:
    """A single Breakout game from first frame to game over.

    State machine: READY -> RUNNING -> STOPPED. STOPPED is absorbing;
    there is no restart, a new session is created instead.
    """

    NAME = "Breakout"
    DESCRIPTION = "Break bricks; the paddle shrinks and the ball speeds up as you score."

    def __init__(
        self,
        width: float,
        height: float,
        config: Optional[BreakoutConfig] = None,
    ):
        """Initialize a session on a playfield of the given size.

        Args:
            width: Playfield width, from the host display surface
            height: Playfield height, from the host display surface
            config: Tunable values (defaults to get_config())

        Raises:
            ValueError: If the playfield has a non-positive dimension
        """
        if width <= 0 or height <= 0:
            raise ValueError(f'Playfield must have positive size, got {width}x{height}')

        self._config = config or get_config()
        self._screen_width = width
        self._screen_height = height

        self._state = GameState.READY
        self._stop_reason: Optional[StopReason] = None
        self._score = 0
        self._frame = 0
        self._warned_paddle_floor = False

        cfg = self._config
        self._paddle = Paddle(
            PaddleConfig(
                width=cfg.initial_paddle_width,
                height=cfg.paddle_height,
                speed=cfg.paddle_speed,
            ),
            width,
            height,
        )
        self._ball = Ball.at_start(
            BallConfig(size=cfg.ball_size, speed=cfg.initial_ball_speed),
            width,
            height,
        )
        self._bricks = BrickGrid(GridLayout(
            rows=cfg.brick_rows,
            cols=cfg.brick_cols,
            width=cfg.brick_width,
            height=cfg.brick_height,
            gap=cfg.brick_gap,
            hpadding=cfg.brick_hpadding,
            vpadding=cfg.brick_vpadding,
        ))

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> BreakoutConfig:
        return self._config

    @property
    def state(self) -> GameState:
        """Get current session state."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == GameState.RUNNING

    @property
    def stop_reason(self) -> Optional[StopReason]:
        """Why the session stopped, or None while not stopped."""
        return self._stop_reason

    @property
    def score(self) -> int:
        return self._score

    @property
    def frame(self) -> int:
        """Number of frames simulated while running."""
        return self._frame

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def paddle(self) -> Paddle:
        return self._paddle

    @property
    def bricks(self) -> BrickGrid:
        return self._bricks

    @property
    def width(self) -> float:
        return self._screen_width

    @property
    def height(self) -> float:
        return self._screen_height

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin play. Has no effect once the session is stopped."""
        if self._state == GameState.READY:
            self._state = GameState.RUNNING
            log.info("Session started (%dx%d, %d bricks)",
                     self._screen_width, self._screen_height, len(self._bricks))

    def stop(self, reason: StopReason = StopReason.QUIT) -> None:
        """End the session. Later calls keep the first reason."""
        if self._state == GameState.STOPPED:
            return
        self._state = GameState.STOPPED
        self._stop_reason = reason
        log.info("Session stopped (%s) at frame %d, score %d",
                 reason.value, self._frame, self._score)

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------

    def tick(self, dt: float, intents: InputIntents = NO_INPUT) -> RenderSnapshot:
        """Advance the simulation by one frame.

        Order: quit check, debug clear, paddle motion, difficulty,
        ball motion, collisions. Difficulty is applied before the ball
        moves so the frame already reflects the latest score.

        Args:
            dt: Wall-clock seconds since the previous frame (untrusted)
            intents: Player intents for this frame

        Returns:
            Snapshot of the state after this frame
        """
        if self._state != GameState.RUNNING:
            return self.snapshot()

        if intents.quit:
            self.stop(StopReason.QUIT)
            return self.snapshot()

        if intents.clear_bricks:
            self._clear_bricks()

        dt = sanitize_dt(dt, self._config.max_frame_time)
        self._frame += 1

        move_paddle(self._paddle, intents.horizontal, dt, self._screen_width)

        self._apply_difficulty(self._current_difficulty())

        if not move_ball(self._ball, dt, self._screen_width, self._screen_height):
            self.stop(StopReason.BALL_LOST)
            return self.snapshot()

        self._handle_collisions()
        return self.snapshot()

    def _current_difficulty(self) -> Difficulty:
        cfg = self._config
        return compute_difficulty(
            self._score,
            initial_paddle_width=cfg.initial_paddle_width,
            initial_ball_speed=cfg.initial_ball_speed,
            score_at_min_paddle_width=cfg.score_at_min_paddle_width,
            score_at_max_ball_speed=cfg.score_at_max_ball_speed,
            paddle_min_width=cfg.paddle_min_width,
        )

    def _apply_difficulty(self, difficulty: Difficulty) -> None:
        self._paddle.width = difficulty.paddle_width
        self._ball.speed = difficulty.ball_speed

        if difficulty.at_paddle_floor and not self._warned_paddle_floor:
            self._warned_paddle_floor = True
            log.warning("Paddle width held at floor %.1f (score %d)",
                        difficulty.paddle_width, self._score)

    def _handle_collisions(self) -> CollisionResult:
        result = resolve_collisions(
            self._ball,
            self._paddle,
            self._bricks,
            score_per_brick=self._config.score_per_brick,
        )
        if result.brick is not None:
            self._score += result.points
            log.debug("Brick %s destroyed, score %d",
                      result.brick.grid_position, self._score)
        return result

    def _clear_bricks(self) -> None:
        """Debug command: destroy all bricks outside row 0 and credit them."""
        cleared = self._bricks.clear_all_but_first_row()
        self._score += cleared * self._config.score_per_brick
        log.info("Debug clear removed %d bricks, score %d", cleared, self._score)

    # ------------------------------------------------------------------
    # Rendering hand-off
    # ------------------------------------------------------------------

    def color_band(self, row: int) -> int:
        """Palette index for a brick row (bands of palette_size rows)."""
        size = self._config.palette_size
        return min(row // size, size - 1)

    def snapshot(self) -> RenderSnapshot:
        """Build the read-only view of the current state."""
        ball_x, ball_y = self._ball.center
        paddle_x, paddle_y, paddle_w, paddle_h = self._paddle.rect

        bricks: List[BrickView] = []
        for brick in self._bricks.active_bricks():
            x, y, w, h = brick.rect
            bricks.append(BrickView(
                rect=Rectangle(x=x, y=y, width=w, height=h),
                row=brick.row,
                col=brick.col,
                color_band=self.color_band(brick.row),
            ))

        return RenderSnapshot(
            ball=BallView(center=Point2D(x=ball_x, y=ball_y), radius=self._ball.radius),
            paddle=Rectangle(x=paddle_x, y=paddle_y, width=paddle_w, height=paddle_h),
            bricks=bricks,
            score=self._score,
            width=self._screen_width,
            height=self._screen_height,
            running=self.is_running,
            frame=self._frame,
        )

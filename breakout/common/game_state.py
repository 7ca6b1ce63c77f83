"""Session state for a Breakout game.

The session starts READY, becomes RUNNING when the loop starts, and ends in
STOPPED when the player quits or the ball leaves the bottom of the playfield.
STOPPED is terminal: nothing transitions out of it.
"""
from enum import Enum


class GameState(Enum):
    """Lifecycle states of a single Breakout session.

    States:
        READY: Session created, loop not started yet
        RUNNING: Active gameplay in progress
        STOPPED: Session over (quit or ball lost), absorbing
    """
    READY = "ready"
    RUNNING = "running"
    STOPPED = "stopped"


class StopReason(Enum):
    """Why a session entered STOPPED."""
    QUIT = "quit"
    BALL_LOST = "ball_lost"

"""Shared session state and logging used by the Breakout core and shell."""

from breakout.common.game_state import GameState, StopReason
from breakout.common.logging import get_logger, configure_logging

__all__ = [
    'GameState',
    'StopReason',
    'get_logger',
    'configure_logging',
]

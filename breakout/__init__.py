"""Breakout - brick-breaking simulation core with a pygame shell.

The core (entities, physics, BreakoutSession) is display-free; the shell
in ``breakout.main`` owns the window, keyboard and frame pacing.
"""

from breakout.common.game_state import GameState, StopReason
from breakout.game_mode import BreakoutSession
from breakout.input.intents import InputIntents
from breakout.models import RenderSnapshot

__version__ = "1.0.0"

__all__ = [
    'BreakoutSession',
    'GameState',
    'InputIntents',
    'RenderSnapshot',
    'StopReason',
]

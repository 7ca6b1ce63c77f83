"""
Input abstraction layer for Breakout.

Input sources turn raw device input into frame-scoped InputIntents.
"""

from breakout.input.intents import InputIntents, NO_INPUT

__all__ = ['InputIntents', 'NO_INPUT']

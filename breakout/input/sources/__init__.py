"""Input sources for Breakout."""

from breakout.input.sources.base import InputSource

__all__ = ['InputSource']

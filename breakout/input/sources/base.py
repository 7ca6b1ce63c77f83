"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod

from breakout.input.intents import InputIntents


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends must turn their raw input into InputIntents.
    """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting raw input.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    @abstractmethod
    def poll_intents(self) -> InputIntents:
        """Get the intents for the current frame."""
        pass

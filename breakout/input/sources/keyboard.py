"""
Keyboard Input Source - Turns pygame keyboard state into intents.

A / D (or the arrow keys) move the paddle, Escape or closing the window
quits, and C fires the brick-clearing debug command when debug keys are
enabled.
"""
from typing import Optional, Sequence

import pygame

from breakout.common.logging import get_logger
from breakout.input.intents import InputIntents
from breakout.input.sources.base import InputSource

log = get_logger('keyboard')


class KeyboardInputSource(InputSource):
    """Polls pygame for held movement keys and pressed command keys."""

    RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
    LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
    QUIT_KEY = pygame.K_ESCAPE
    CLEAR_KEY = pygame.K_c

    def __init__(self, debug_keys: bool = False):
        """Initialize the keyboard source.

        Args:
            debug_keys: Whether the brick-clearing key is active
        """
        self._debug_keys = debug_keys
        self._quit = False
        self._clear = False
        self._held: Optional[Sequence[bool]] = None

    def update(self, dt: float) -> None:
        """Drain pygame events and sample the held keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == self.QUIT_KEY:
                    self._quit = True
                elif event.key == self.CLEAR_KEY and self._debug_keys:
                    log.info("Debug clear requested")
                    self._clear = True
        self._held = pygame.key.get_pressed()

    def poll_intents(self) -> InputIntents:
        """Get intents since last poll; one-shot commands are consumed."""
        right = left = False
        if self._held is not None:
            # Right wins when both directions are held
            right = any(self._held[key] for key in self.RIGHT_KEYS)
            left = not right and any(self._held[key] for key in self.LEFT_KEYS)

        intents = InputIntents(
            move_left=left,
            move_right=right,
            quit=self._quit,
            clear_bricks=self._clear,
        )
        self._clear = False
        return intents

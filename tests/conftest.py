"""Shared pytest fixtures for Breakout tests."""
import copy
import os

# Headless pygame for skin and input tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from breakout.common import logging as breakout_logging
from breakout.config import BreakoutConfig
from breakout.game.entities import Ball, BallConfig, Paddle, PaddleConfig
from breakout.game_mode import BreakoutSession

SCREEN_W = 800
SCREEN_H = 600


@pytest.fixture(autouse=True)
def restore_logging_config():
    """Keep logging configuration changes local to a test."""
    saved = copy.deepcopy(breakout_logging._config)
    yield
    breakout_logging._config.clear()
    breakout_logging._config.update(saved)


@pytest.fixture
def ball():
    """Ball of size 10 and speed 150 at (100, 100) moving right-up."""
    return Ball(BallConfig(size=10.0, speed=150.0), 100.0, 100.0, dx=1.0, dy=-1.0)


@pytest.fixture
def paddle():
    """Reference paddle on an 800x600 playfield (x=400, width 150)."""
    return Paddle(PaddleConfig(width=150.0, height=8.0, speed=720.0), SCREEN_W, SCREEN_H)


@pytest.fixture
def session():
    """Started session with the reference configuration."""
    s = BreakoutSession(SCREEN_W, SCREEN_H)
    s.start()
    return s


@pytest.fixture
def make_session():
    """Factory for started sessions with config overrides."""
    def _make(**overrides):
        s = BreakoutSession(SCREEN_W, SCREEN_H, BreakoutConfig(**overrides))
        s.start()
        return s
    return _make

"""Breakout visual skins."""

from .base import BreakoutSkin
from .geometric import GeometricSkin

SKINS = {
    GeometricSkin.NAME: GeometricSkin,
}

__all__ = ['BreakoutSkin', 'GeometricSkin', 'SKINS']

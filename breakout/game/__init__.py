"""Breakout game entities, physics and skins."""

"""Tests for intents and render snapshot models."""

import pytest
from pydantic import ValidationError

from breakout.input.intents import NO_INPUT, InputIntents
from breakout.models import BallView, BrickView, Point2D, Rectangle, RenderSnapshot


class TestInputIntents:

    def test_default_is_idle(self):
        assert NO_INPUT.horizontal == 0
        assert not NO_INPUT.quit
        assert not NO_INPUT.clear_bricks
        assert str(NO_INPUT) == "InputIntents(idle)"

    def test_horizontal(self):
        assert InputIntents(move_left=True).horizontal == -1
        assert InputIntents(move_right=True).horizontal == 1

    def test_both_directions_rejected(self):
        """Left and right are mutually exclusive within a frame."""
        with pytest.raises(ValidationError, match="mutually exclusive"):
            InputIntents(move_left=True, move_right=True)

    def test_frozen(self):
        intents = InputIntents()
        with pytest.raises(ValidationError):
            intents.quit = True

    def test_str_lists_active_flags(self):
        assert str(InputIntents(move_right=True, quit=True)) == "InputIntents(move_right, quit)"


class TestRectangle:

    def test_edges_and_center(self):
        rect = Rectangle(x=10.0, y=20.0, width=30.0, height=40.0)
        assert rect.right == 40.0
        assert rect.bottom == 60.0
        assert rect.center == Point2D(x=25.0, y=40.0)
        assert rect.as_tuple() == (10.0, 20.0, 30.0, 40.0)

    @pytest.mark.parametrize("width, height", [(0.0, 1.0), (1.0, -2.0)])
    def test_non_positive_dimensions_rejected(self, width, height):
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=width, height=height)


class TestRenderSnapshot:

    def _snapshot(self, **overrides):
        fields = dict(
            ball=BallView(center=Point2D(x=5.0, y=5.0), radius=5.0),
            paddle=Rectangle(x=0.0, y=0.0, width=10.0, height=2.0),
            bricks=[BrickView(rect=Rectangle(x=0.0, y=0.0, width=6.0, height=2.0),
                              row=0, col=0, color_band=0)],
            score=3000,
            width=800.0,
            height=600.0,
            running=True,
        )
        fields.update(overrides)
        return RenderSnapshot(**fields)

    def test_score_text(self):
        assert self._snapshot().score_text == "3000"

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            self._snapshot(score=-1)

    def test_frozen(self):
        snapshot = self._snapshot()
        with pytest.raises(ValidationError):
            snapshot.score = 0

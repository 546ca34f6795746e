"""Tests for Viewport auto-scroll targeting."""
from types import SimpleNamespace

import pytest

from tracewiz.types import Point
from tracewiz.viewport import Viewport


def _state(tip=None, trail=()):
    return SimpleNamespace(revealed_tip=tip, trail=tuple(trail))


class TestFollow:
    """Scroll decisions for the revealed tip and the trail tip."""

    def test_no_scroll_above_trigger(self):
        vp = Viewport(height=800, content_height=9600)
        assert vp.follow(_state(Point(200, 699))) is None
        assert vp.offset == 0.0

    def test_scrolls_when_tip_passes_trigger(self):
        vp = Viewport(height=800, content_height=9600)
        assert vp.follow(_state(Point(200, 750))) == pytest.approx(190.0)
        assert vp.offset == pytest.approx(190.0)

    def test_trail_tip_can_trigger(self):
        vp = Viewport(height=800, content_height=9600)
        target = vp.follow(_state(Point(200, 300), [Point(230, 760)]))
        assert target == pytest.approx(200.0)

    def test_lower_of_both_tips_wins(self):
        vp = Viewport(height=800, content_height=9600)
        target = vp.follow(_state(Point(200, 900), [Point(230, 760)]))
        assert target == pytest.approx(340.0)

    def test_clamped_to_content(self):
        vp = Viewport(height=800, content_height=9600)
        assert vp.follow(_state(Point(200, 9540))) == pytest.approx(8800.0)

    def test_small_jump_ignored(self):
        vp = Viewport(height=800, content_height=9600, offset=8790.0)
        assert vp.follow(_state(Point(200, 9540))) is None
        assert vp.offset == 8790.0

    def test_nothing_to_follow(self):
        vp = Viewport(height=800, content_height=9600)
        assert vp.follow(_state()) is None


# --- Helpers ---

def test_coordinate_conversion():
    vp = Viewport(height=800, content_height=9600, offset=250.0)
    assert vp.to_screen(300.0) == 50.0
    assert vp.to_world(50.0) == 300.0


def test_reset():
    vp = Viewport(height=800, content_height=9600, offset=400.0)
    vp.reset()
    assert vp.offset == 0.0


def test_short_content_never_scrolls():
    vp = Viewport(height=800, content_height=600)
    assert vp.max_offset == 0.0
    assert vp.follow(_state(Point(200, 750))) is None

"""Tests for Segment: anchor chaining, cubic binding and styling."""
from __future__ import annotations

import random

import pytest

from curve.geometry import Point
from curve.segment import Segment
from models import Color, DashStyle, StrokeStyle


def assert_cubics_bound(segment):
    """Every cubic matches its anchors and handles."""
    assert len(segment.cubics) == max(len(segment.anchors) - 1, 0)
    for i, cubic in enumerate(segment.cubics):
        start = segment.anchors[i]
        end = segment.anchors[i + 1]
        assert cubic.start == start.position
        assert cubic.control1 == start.outgoing.position
        assert cubic.control2 == end.incoming.position
        assert cubic.end == end.position


@pytest.fixture()
def segment():
    seg = Segment(rng=random.Random(42))
    for x, y in [(100, 100), (200, 150), (300, 100)]:
        seg.append_anchor(x, y)
    return seg


class TestAppendAnchor:
    def test_first_anchor_has_no_cubic(self):
        seg = Segment(rng=random.Random(1))
        seg.append_anchor(10, 10)
        assert len(seg.anchors) == 1
        assert seg.cubics == []
        assert seg.style is None
        assert seg.anchors[0].handles == []

    def test_second_anchor_copies_defaults(self):
        defaults = StrokeStyle(Color(255, 0, 0), 10, DashStyle.DASHED)
        seg = Segment(rng=random.Random(1))
        seg.append_anchor(10, 10, defaults)
        seg.append_anchor(50, 10, defaults)
        assert seg.style == defaults
        assert len(seg.cubics) == 1
        assert seg.cubics[0].color == Color(255, 0, 0)
        assert seg.cubics[0].width == 10.0
        assert seg.cubics[0].dash_array == (25, 20)

    def test_later_defaults_do_not_override(self):
        seg = Segment(rng=random.Random(1))
        seg.append_anchor(0, 0, StrokeStyle())
        seg.append_anchor(10, 0, StrokeStyle())
        seg.append_anchor(20, 0, StrokeStyle(thickness=20))
        assert seg.style.thickness == 5

    def test_handle_counts(self, segment):
        first, middle, last = segment.anchors
        assert [h.role.value for h in first.handles] == ["outgoing"]
        assert [h.role.value for h in middle.handles] == ["incoming", "outgoing"]
        assert [h.role.value for h in last.handles] == ["incoming"]

    def test_interior_handles_start_straight(self, segment):
        middle = segment.anchors[1]
        assert middle.outgoing.offset == -middle.incoming.offset

    def test_cubics_bound_after_build(self, segment):
        assert_cubics_bound(segment)
        assert segment.is_complete


class TestBinding:
    def test_anchor_drag_updates_cubics(self, segment):
        segment.anchors[1].drag(220, 180)
        assert_cubics_bound(segment)
        assert segment.cubics[0].end == Point(220, 180)
        assert segment.cubics[1].start == Point(220, 180)

    def test_handle_drag_updates_cubics(self, segment):
        middle = segment.anchors[1]
        middle.incoming.drag(150, 150)
        assert_cubics_bound(segment)
        assert segment.cubics[0].control2 == Point(150, 150)

    def test_corner_toggle_collapses_controls(self, segment):
        middle = segment.anchors[1]
        middle.incoming.set_offset(Point(30, 40))
        middle.outgoing.set_offset(Point(-30, -40))

        middle.toggle_smooth()
        assert segment.cubics[0].control2 == middle.position
        assert segment.cubics[1].control1 == middle.position

        middle.toggle_smooth()
        assert segment.cubics[0].control2 == Point(230, 190)
        assert segment.cubics[1].control1 == Point(170, 110)
        assert_cubics_bound(segment)

    def test_recompute_cubic_is_idempotent(self, segment):
        before = segment.cubics[1].control_points
        segment.recompute_cubic(1)
        assert segment.cubics[1].control_points == before


class TestStyling:
    def test_restyle_updates_all_cubics(self, segment):
        changed = segment.restyle(StrokeStyle(Color(0, 0, 255), 15, DashStyle.DOTTED))
        assert changed is True
        for cubic in segment.cubics:
            assert cubic.color == Color(0, 0, 255)
            assert cubic.width == 15.0
            assert cubic.dash_array == (2, 28)

    def test_restyle_same_style_is_noop(self, segment):
        assert segment.restyle(segment.style) is False

    def test_focus_flag(self, segment):
        segment.focus()
        assert segment.focused
        segment.unfocus()
        assert not segment.focused


class TestEditing:
    def test_translate_moves_anchors_only(self, segment):
        offsets = [h.offset for h in segment.handles()]
        segment.translate(40, 40)
        assert [a.position for a in segment.anchors] == [
            Point(140, 140), Point(240, 190), Point(340, 140)]
        assert [h.offset for h in segment.handles()] == offsets
        assert_cubics_bound(segment)

    def test_clear_tears_down(self, segment):
        anchor = segment.anchors[0]
        segment.clear()
        assert segment.anchors == []
        assert segment.cubics == []
        assert anchor.listeners == []
        anchor.drag(0, 0)  # no cubic left to update

    def test_hit_test(self, segment):
        assert segment.hit_test(Point(100, 100), tolerance=2)
        assert not segment.hit_test(Point(100, 400), tolerance=2)

    def test_anchor_at(self, segment):
        assert segment.anchor_at(Point(202, 151), 5) is segment.anchors[1]
        assert segment.anchor_at(Point(250, 300), 5) is None

    def test_handle_at_skips_corner_anchors(self, segment):
        middle = segment.anchors[1]
        middle.incoming.set_offset(Point(0, -80))
        spot = middle.incoming.raw_position
        assert segment.handle_at(spot, 3) is middle.incoming
        middle.toggle_smooth()
        assert segment.handle_at(spot, 3) is None

    def test_bounds(self):
        seg = Segment(rng=random.Random(3))
        assert seg.bounds() is None
        seg.append_anchor(0, 0)
        seg.append_anchor(100, 0)
        seg.anchors[0].outgoing.set_offset(Point(0, 0))
        seg.anchors[1].incoming.set_offset(Point(0, 0))
        assert seg.bounds() == pytest.approx((0.0, 0.0, 100.0, 0.0))

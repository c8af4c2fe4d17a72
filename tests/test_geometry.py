"""Tests for points, line segments and cubic evaluation."""
from __future__ import annotations

import pytest

from curve.geometry import Cubic, LineSegment, Point
from models import BLACK, Color, DashStyle, StrokeStyle, dash_pattern


class TestPoint:
    def test_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(5, 5) - Point(2, 1) == Point(3, 4)
        assert -Point(3, -4) == Point(-3, 4)
        assert Point(1, 2).scaled(3) == Point(3, 6)

    def test_length_and_distance(self):
        assert Point(3, 4).length() == pytest.approx(5.0)
        assert Point(1, 1).distance_to(Point(4, 5)) == pytest.approx(5.0)

    def test_dot_and_cross(self):
        assert Point(1, 0).dot(Point(0, 1)) == 0
        assert Point(1, 0).cross(Point(0, 1)) == 1
        assert Point(2, 3).cross(Point(-4, -6)) == 0


class TestLineSegment:
    def test_distance_inside_projection(self):
        line = LineSegment(Point(0, 0), Point(10, 0))
        assert line.distance_to(Point(5, 3)) == pytest.approx(3.0)

    def test_distance_clamped_to_endpoint(self):
        line = LineSegment(Point(0, 0), Point(10, 0))
        assert line.distance_to(Point(-4, 3)) == pytest.approx(5.0)

    def test_degenerate_segment(self):
        line = LineSegment(Point(2, 2), Point(2, 2))
        assert line.distance_to(Point(5, 6)) == pytest.approx(5.0)


class TestCubic:
    @pytest.fixture()
    def straight(self):
        return Cubic(Point(0, 0), Point(10, 0), Point(20, 0), Point(30, 0))

    def test_endpoints(self, straight):
        assert straight.point_at(0.0) == Point(0, 0)
        assert straight.point_at(1.0) == Point(30, 0)

    def test_midpoint(self, straight):
        mid = straight.point_at(0.5)
        assert mid.x == pytest.approx(15.0)
        assert mid.y == pytest.approx(0.0)

    def test_distance(self, straight):
        assert straight.distance_to(Point(15, 4)) == pytest.approx(4.0)
        assert straight.distance_to(Point(34, 3)) == pytest.approx(5.0)

    def test_bounds(self, straight):
        assert straight.bounds() == pytest.approx((0.0, 0.0, 30.0, 0.0))

    def test_sample_count(self, straight):
        assert len(list(straight.sample(10))) == 11

    def test_default_stroke(self, straight):
        assert straight.color == BLACK
        assert straight.width == 5.0
        assert straight.dash_array == ()


class TestStrokeModel:
    @pytest.mark.parametrize("dash_style, thin, wide", [
        (DashStyle.NORMAL, (), ()),
        (DashStyle.DOTTED, (2, 14), (2, 28)),
        (DashStyle.DASHED, (25, 20), (25, 30)),
        (DashStyle.COMBINED, (25, 20, 5, 20), (25, 30, 5, 30)),
    ])
    def test_dash_table(self, dash_style, thin, wide):
        assert dash_pattern(dash_style, 5) == thin
        assert dash_pattern(dash_style, 10) == thin
        assert dash_pattern(dash_style, 15) == wide
        assert dash_pattern(dash_style, 20) == wide

    def test_invalid_thickness_rejected(self):
        with pytest.raises(ValueError):
            StrokeStyle(thickness=7)

    def test_unknown_dash_name(self):
        with pytest.raises(ValueError):
            DashStyle.from_name("WAVY")

    def test_color_hex(self):
        assert Color(255, 0, 128, 64).to_hex() == "#FF008040"
        assert Color.from_hex("#FF008040") == Color(255, 0, 128, 64)
        assert Color.from_hex("#102030") == Color(16, 32, 48, 255)

    def test_legacy_color_literal(self):
        assert Color.from_hex("0xff0000ff") == Color(255, 0, 0, 255)

    @pytest.mark.parametrize("literal", ["red", "#12345", "0x1234567", "", "#GG0000"])
    def test_bad_color_literal(self, literal):
        with pytest.raises(ValueError):
            Color.from_hex(literal)

    def test_replace(self):
        style = StrokeStyle().replace(thickness=15, dash_style=DashStyle.DOTTED)
        assert style.thickness == 15
        assert style.color == BLACK
        assert style.dash_array == (2, 28)

"""
curve/geometry.py

2D points, line segments and cubic Bezier curves.

Only evaluation and hit-testing live here; tessellation and painting are
left to the renderer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from models import BLACK, Color


@dataclass(frozen=True)
class Point:
    """Immutable 2D point or vector."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def scaled(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        return self.x * other.y - self.y * other.x

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class LineSegment:
    """Straight segment, used for the anchor-to-handle guide line."""
    start: Point
    end: Point

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def distance_to(self, p: Point) -> float:
        """Shortest distance from *p* to the segment."""
        d = self.end - self.start
        length_sq = d.dot(d)
        if length_sq < 1e-12:
            return p.distance_to(self.start)
        t = max(0.0, min(1.0, (p - self.start).dot(d) / length_sq))
        return p.distance_to(self.start + d.scaled(t))


# Samples per cubic used for hit-testing and bounds
_SAMPLES = 48


@dataclass
class Cubic:
    """A cubic Bezier curve plus the stroke attributes the renderer needs.

    Geometry is rewritten in place by the owning segment whenever one of the
    four bound anchor/handle positions changes.
    """
    start: Point = field(default_factory=Point)
    control1: Point = field(default_factory=Point)
    control2: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    color: Color = BLACK
    width: float = 5.0
    dash_array: Tuple[float, ...] = ()

    @property
    def control_points(self) -> Tuple[Point, Point, Point, Point]:
        return (self.start, self.control1, self.control2, self.end)

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter *t* in [0, 1]."""
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        return Point(
            a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )

    def sample(self, count: int = _SAMPLES):
        """Yield ``count + 1`` evenly spaced points along the curve."""
        for i in range(count + 1):
            yield self.point_at(i / count)

    def distance_to(self, p: Point) -> float:
        """Approximate distance from *p* to the curve (polyline of samples)."""
        best = math.inf
        prev = None
        for pt in self.sample():
            if prev is not None:
                best = min(best, LineSegment(prev, pt).distance_to(p))
            prev = pt
        return best

    def bounds(self) -> Tuple[float, float, float, float]:
        """Approximate (min_x, min_y, max_x, max_y) of the drawn curve."""
        pts = list(self.sample())
        xs = [pt.x for pt in pts]
        ys = [pt.y for pt in pts]
        return (min(xs), min(ys), max(xs), max(ys))

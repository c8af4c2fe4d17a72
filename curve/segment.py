"""
curve/segment.py

A Segment is an ordered chain of anchors with one cubic Bezier between each
adjacent pair. All cubics share the segment's stroke style.

Cubic ``i`` is bound to four positions:

    start    = anchors[i].position
    control1 = anchors[i].outgoing.position
    control2 = anchors[i + 1].incoming.position
    end      = anchors[i + 1].position

Each of those anchors and handles carries a listener that calls
``recompute_cubic(i)``, so the cubic is rewritten from scratch whenever one
of its inputs changes.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from models import DEFAULT_STROKE, HandleRole, StrokeStyle
from curve.anchor import DEFAULT_OFFSET_RANGE, Anchor, Handle
from curve.geometry import Cubic, Point

log = logging.getLogger(__name__)


class Segment:
    """Anchors, cubics and the shared stroke style of one curve.

    Args:
        style: Stroke style. Left as ``None`` for a draft; it is copied from
            the editor defaults when the second anchor is appended.
        rng: Random source for initial handle offsets.
        offset_range: Bounds for random handle offset components.
    """

    def __init__(self, style: Optional[StrokeStyle] = None, rng: Optional[random.Random] = None,
                 offset_range: Tuple[int, int] = DEFAULT_OFFSET_RANGE):
        self.anchors: List[Anchor] = []
        self.cubics: List[Cubic] = []
        self.style = style
        self.focused = False
        self._rng = rng or random.Random()
        self._offset_range = offset_range

    def __len__(self) -> int:
        return len(self.anchors)

    def __repr__(self) -> str:
        return f"Segment(anchors={len(self.anchors)}, style={self.style})"

    @property
    def is_complete(self) -> bool:
        """True once the segment has enough anchors to be committed."""
        return len(self.anchors) >= 2

    def handles(self) -> Iterator[Handle]:
        for anchor in self.anchors:
            yield from anchor.handles

    # ---- Building ----

    def append_anchor(self, x: float, y: float, defaults: StrokeStyle = DEFAULT_STROKE) -> Anchor:
        """Append an anchor at (x, y) and connect it to the previous one.

        The first anchor produces no cubic. Every later anchor adds an
        outgoing handle to its predecessor, an incoming handle to itself and
        one cubic bound to those four positions.
        """
        anchor = Anchor(x, y)
        self.anchors.append(anchor)
        if len(self.anchors) == 1:
            return anchor

        if self.style is None:
            self.style = defaults

        previous = self.anchors[-2]
        previous.add_handle(HandleRole.OUTGOING, self._rng, self._offset_range)
        anchor.add_handle(HandleRole.INCOMING, self._rng, self._offset_range)

        index = len(self.cubics)
        self.cubics.append(Cubic())
        self._bind_cubic(index)
        self.recompute_cubic(index)
        return anchor

    def _bind_cubic(self, index: int) -> None:
        def listener(_position: Point) -> None:
            self.recompute_cubic(index)

        start = self.anchors[index]
        end = self.anchors[index + 1]
        start.bind(listener)
        start.outgoing.bind(listener)
        end.bind(listener)
        end.incoming.bind(listener)

    def recompute_cubic(self, index: int) -> Cubic:
        """Rewrite cubic *index* from its anchors, handles and the style."""
        cubic = self.cubics[index]
        start = self.anchors[index]
        end = self.anchors[index + 1]
        cubic.start = start.position
        cubic.control1 = start.outgoing.position
        cubic.control2 = end.incoming.position
        cubic.end = end.position
        style = self.style or DEFAULT_STROKE
        cubic.color = style.color
        cubic.width = float(style.thickness)
        cubic.dash_array = style.dash_array
        return cubic

    # ---- Styling and visibility ----

    def restyle(self, style: StrokeStyle) -> bool:
        """Apply *style* to every cubic. Returns False when nothing changed."""
        if style == self.style:
            return False
        self.style = style
        for index in range(len(self.cubics)):
            self.recompute_cubic(index)
        return True

    def focus(self) -> None:
        self.focused = True

    def unfocus(self) -> None:
        self.focused = False

    # ---- Editing ----

    def translate(self, dx: float, dy: float) -> None:
        """Move every anchor by (dx, dy); handle offsets are unchanged."""
        for anchor in self.anchors:
            anchor.move_by(dx, dy)

    def clear(self) -> None:
        """Tear the segment down: drop listeners, cubics and anchors."""
        for anchor in self.anchors:
            anchor.clear_listeners()
        self.cubics.clear()
        self.anchors.clear()
        self.focused = False

    # ---- Hit-testing ----

    def hit_test(self, point: Point, tolerance: float) -> bool:
        """True if *point* lies within *tolerance* of the drawn stroke."""
        for cubic in self.cubics:
            if cubic.distance_to(point) <= tolerance + cubic.width / 2.0:
                return True
        return False

    def anchor_at(self, point: Point, radius: float) -> Optional[Anchor]:
        for anchor in reversed(self.anchors):
            if anchor.position.distance_to(point) <= radius:
                return anchor
        return None

    def handle_at(self, point: Point, radius: float) -> Optional[Handle]:
        """Topmost visible handle within *radius*. Corner anchors hide theirs."""
        for anchor in reversed(self.anchors):
            if not anchor.smooth:
                continue
            for handle in anchor.handles:
                if handle.raw_position.distance_to(point) <= radius:
                    return handle
        return None

    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Bounding box of the drawn cubics, or None for an empty segment."""
        if not self.cubics:
            return None
        boxes = [cubic.bounds() for cubic in self.cubics]
        return (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )

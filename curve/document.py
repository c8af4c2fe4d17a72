"""
curve/document.py

The set of committed segments plus dirty tracking and the clipboard slot.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from curve.geometry import Point
from curve.segment import Segment

log = logging.getLogger(__name__)


class Document:
    """Committed segments in drawing order.

    The document never marks itself dirty; callers decide which operations
    count as user-visible mutations.
    """

    def __init__(self):
        self.segments: List[Segment] = []
        self.dirty = False
        self.clipboard: Optional[str] = None
        self.clipboard_offset = 0

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __contains__(self, segment: Segment) -> bool:
        return any(s is segment for s in self.segments)

    def add(self, segment: Segment) -> None:
        if not segment.is_complete:
            raise ValueError("A committed segment needs at least two anchors")
        self.segments.append(segment)

    def remove(self, segment: Segment) -> None:
        """Remove *segment* and tear it down."""
        self.segments = [s for s in self.segments if s is not segment]
        segment.clear()

    def clear(self) -> None:
        for segment in self.segments:
            segment.clear()
        self.segments = []

    def replace(self, segments: Iterable[Segment]) -> None:
        """Swap the whole contents for *segments* (used by load)."""
        self.clear()
        for segment in segments:
            self.add(segment)

    def mark_dirty(self) -> None:
        if not self.dirty:
            log.debug("Document marked dirty")
        self.dirty = True

    def mark_clean(self) -> None:
        self.dirty = False

    def segment_at(self, point: Point, tolerance: float) -> Optional[Segment]:
        """Topmost segment whose stroke passes within *tolerance* of *point*."""
        for segment in reversed(self.segments):
            if segment.hit_test(point, tolerance):
                return segment
        return None

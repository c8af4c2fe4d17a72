"""Tests for the Document container."""
from __future__ import annotations

import random

import pytest

from curve.document import Document
from curve.geometry import Point
from curve.segment import Segment


def make_segment(points, seed=0):
    seg = Segment(rng=random.Random(seed))
    for x, y in points:
        seg.append_anchor(x, y)
    return seg


class TestDocument:
    def test_initial_state(self):
        doc = Document()
        assert len(doc) == 0
        assert doc.dirty is False
        assert doc.clipboard is None
        assert doc.clipboard_offset == 0

    def test_add_requires_two_anchors(self):
        doc = Document()
        with pytest.raises(ValueError):
            doc.add(make_segment([(0, 0)]))
        doc.add(make_segment([(0, 0), (10, 10)]))
        assert len(doc) == 1

    def test_add_does_not_mark_dirty(self):
        doc = Document()
        doc.add(make_segment([(0, 0), (10, 10)]))
        assert doc.dirty is False

    def test_remove_tears_segment_down(self):
        doc = Document()
        seg = make_segment([(0, 0), (10, 10)])
        doc.add(seg)
        doc.remove(seg)
        assert seg not in doc
        assert seg.anchors == []

    def test_clear(self):
        doc = Document()
        segs = [make_segment([(0, i), (10, i)], i) for i in range(3)]
        for seg in segs:
            doc.add(seg)
        doc.clear()
        assert len(doc) == 0
        assert all(seg.cubics == [] for seg in segs)

    def test_replace(self):
        doc = Document()
        old = make_segment([(0, 0), (10, 10)])
        doc.add(old)
        new = [make_segment([(5, 5), (20, 20)], 1)]
        doc.replace(new)
        assert doc.segments == new
        assert old.anchors == []

    def test_dirty_flag(self):
        doc = Document()
        doc.mark_dirty()
        assert doc.dirty
        doc.mark_clean()
        assert not doc.dirty

    def test_segment_at_prefers_topmost(self):
        doc = Document()
        bottom = make_segment([(0, 0), (100, 0)], 1)
        top = make_segment([(0, 0), (0, 100)], 2)
        doc.add(bottom)
        doc.add(top)
        assert doc.segment_at(Point(0, 0), 2) is top
        assert doc.segment_at(Point(100, 0), 2) is bottom
        assert doc.segment_at(Point(500, 500), 2) is None

"""
curve package

Curve data model: geometry primitives, anchors and handles, segments, the
document and the .curve text format.
"""

from curve.geometry import Cubic, LineSegment, Point
from curve.anchor import Anchor, Handle
from curve.segment import Segment
from curve.document import Document
from curve.fileformat import (
    CurveFormatError,
    dump_document,
    dump_segment,
    load_document,
    load_segment,
    read_curve_file,
    write_curve_file,
)

__all__ = [
    "Point",
    "LineSegment",
    "Cubic",
    "Anchor",
    "Handle",
    "Segment",
    "Document",
    "CurveFormatError",
    "dump_document",
    "dump_segment",
    "load_document",
    "load_segment",
    "read_curve_file",
    "write_curve_file",
]

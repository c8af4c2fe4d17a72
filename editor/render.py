"""
editor/render.py

Flattens the editor state into a list of drawing primitives.

The canvas knows nothing about segments or anchors; it just draws what
build_render_list() returns, in order. Cubics come first, then handle guide
lines and dots, then anchor markers on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from models import Color, Tool
from curve.anchor import Anchor, Handle
from curve.geometry import Point
from curve.segment import Segment


class MarkerKind(Enum):
    ANCHOR = "anchor"
    HANDLE = "handle"


@dataclass(frozen=True)
class CurvePrimitive:
    """One stroked cubic."""
    start: Point
    control1: Point
    control2: Point
    end: Point
    color: Color
    width: float
    dash_array: Tuple[float, ...]
    segment_index: Optional[int]  # None for the draft


@dataclass(frozen=True)
class GuidePrimitive:
    """Thin line from an anchor to one of its handles."""
    start: Point
    end: Point
    color: Color


@dataclass(frozen=True)
class MarkerPrimitive:
    """Circle drawn for an anchor or a handle."""
    kind: MarkerKind
    center: Point
    radius: float
    fill: Color
    stroke: Color


Primitive = Union[CurvePrimitive, GuidePrimitive, MarkerPrimitive]


def _curves(segment: Segment, index: Optional[int]) -> List[CurvePrimitive]:
    return [
        CurvePrimitive(c.start, c.control1, c.control2, c.end,
                       c.color, c.width, c.dash_array, index)
        for c in segment.cubics
    ]


def _handle_primitives(handle: Handle, canvas) -> List[Primitive]:
    guide = handle.line
    return [
        GuidePrimitive(guide.start, guide.end, Color.from_hex(canvas.handle_line)),
        MarkerPrimitive(MarkerKind.HANDLE, guide.end, canvas.handle_radius,
                        Color.from_hex(canvas.handle_fill), Color.from_hex(canvas.handle_fill)),
    ]


def _anchor_marker(anchor: Anchor, focused: bool, canvas) -> MarkerPrimitive:
    fill = canvas.focused_fill if focused else canvas.anchor_fill
    stroke = canvas.smooth_stroke if anchor.smooth else canvas.corner_stroke
    return MarkerPrimitive(MarkerKind.ANCHOR, anchor.position, canvas.anchor_radius,
                           Color.from_hex(fill), Color.from_hex(stroke))


def _edit_overlay(segment: Segment, focused_anchor: Optional[Anchor], canvas) -> List[Primitive]:
    items: List[Primitive] = []
    for anchor in segment.anchors:
        if anchor.smooth:
            for handle in anchor.handles:
                items.extend(_handle_primitives(handle, canvas))
    for anchor in segment.anchors:
        items.append(_anchor_marker(anchor, anchor is focused_anchor, canvas))
    return items


def build_render_list(controller) -> List[Primitive]:
    """Everything the canvas should draw for the controller's current state."""
    canvas = controller.settings.canvas
    items: List[Primitive] = []

    for index, segment in enumerate(controller.document.segments):
        items.extend(_curves(segment, index))

    drafting = controller.tool is Tool.PEN and len(controller.draft) > 0
    if drafting:
        items.extend(_curves(controller.draft, None))

    for segment in controller.document.segments:
        if segment.focused:
            items.extend(_edit_overlay(segment, controller.focused_anchor, canvas))
    if drafting:
        items.extend(_edit_overlay(controller.draft, None, canvas))

    return items

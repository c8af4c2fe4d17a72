"""
canvas/items.py

Graphics items for the render list: stroked cubics, handle guide lines and
anchor/handle markers.

Items are display-only. Hit-testing and dragging are done by the editor
controller against the curve model, so none of these are selectable or
movable.
"""

from __future__ import annotations

from typing import Tuple

from PyQt6.QtCore import Qt, QPointF, QRectF, QLineF
from PyQt6.QtGui import QBrush, QPen, QPainterPath
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsPathItem,
)

from curve.geometry import Point
from editor.render import (
    CurvePrimitive,
    GuidePrimitive,
    MarkerKind,
    MarkerPrimitive,
    Primitive,
)
from utils import color_to_qcolor

# Stacking order of the layers
Z_CURVE = 0
Z_GUIDE = 10
Z_HANDLE = 20
Z_ANCHOR = 30


def _qpoint(p: Point) -> QPointF:
    return QPointF(p.x, p.y)


def make_stroke_pen(color, width: float, dash_array: Tuple[float, ...]) -> QPen:
    """Pen for a curve stroke.

    Qt dash patterns are measured in pen widths, which is the unit the dash
    table uses.
    """
    pen = QPen(color_to_qcolor(color))
    pen.setWidthF(width)
    pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    if dash_array:
        pen.setDashPattern([float(v) for v in dash_array])
    else:
        pen.setStyle(Qt.PenStyle.SolidLine)
    return pen


class CurveItem(QGraphicsPathItem):
    """One cubic Bezier stroke."""

    def __init__(self, primitive: CurvePrimitive, parent=None):
        super().__init__(parent)
        self.primitive = primitive
        path = QPainterPath(_qpoint(primitive.start))
        path.cubicTo(_qpoint(primitive.control1), _qpoint(primitive.control2), _qpoint(primitive.end))
        self.setPath(path)
        self.setPen(make_stroke_pen(primitive.color, primitive.width, primitive.dash_array))
        self.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        self.setZValue(Z_CURVE)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)


class GuideItem(QGraphicsLineItem):
    """Line from an anchor to its handle."""

    def __init__(self, primitive: GuidePrimitive, parent=None):
        super().__init__(QLineF(_qpoint(primitive.start), _qpoint(primitive.end)), parent)
        self.primitive = primitive
        pen = QPen(color_to_qcolor(primitive.color))
        pen.setWidthF(1.0)
        pen.setCosmetic(True)
        self.setPen(pen)
        self.setZValue(Z_GUIDE)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)


class MarkerItem(QGraphicsEllipseItem):
    """Circle marking an anchor or a handle."""

    def __init__(self, primitive: MarkerPrimitive, parent=None):
        r = primitive.radius
        c = primitive.center
        super().__init__(QRectF(c.x - r, c.y - r, 2 * r, 2 * r), parent)
        self.primitive = primitive
        pen = QPen(color_to_qcolor(primitive.stroke))
        pen.setWidthF(2.0 if primitive.kind is MarkerKind.ANCHOR else 1.0)
        self.setPen(pen)
        self.setBrush(QBrush(color_to_qcolor(primitive.fill)))
        self.setZValue(Z_ANCHOR if primitive.kind is MarkerKind.ANCHOR else Z_HANDLE)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)


def item_for(primitive: Primitive) -> QGraphicsItem:
    """Build the graphics item that draws *primitive*.

    Raises:
        TypeError: If the primitive type is unknown.
    """
    if isinstance(primitive, CurvePrimitive):
        return CurveItem(primitive)
    if isinstance(primitive, GuidePrimitive):
        return GuideItem(primitive)
    if isinstance(primitive, MarkerPrimitive):
        return MarkerItem(primitive)
    raise TypeError(f"Unknown primitive: {primitive!r}")

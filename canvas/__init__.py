"""
canvas package

PyQt6 graphics items, scene, and view for the curve canvas.
"""

from canvas.items import CurveItem, GuideItem, MarkerItem, item_for
from canvas.scene import CurveScene
from canvas.view import CurveView

__all__ = [
    "CurveItem",
    "GuideItem",
    "MarkerItem",
    "item_for",
    "CurveScene",
    "CurveView",
]

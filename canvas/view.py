"""
canvas/view.py

QGraphicsView for the curve canvas with mouse wheel zoom.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QGraphicsView

from canvas.scene import CurveScene


class CurveView(QGraphicsView):
    """
    Antialiased view onto a CurveScene.

    The wheel zooms around the cursor by the configured factor.
    """

    def __init__(self, scene: CurveScene, parent=None):
        super().__init__(scene, parent)
        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.zoom_factor = scene.controller.settings.canvas.wheel_zoom_factor

    def wheelEvent(self, event):
        """Zoom with mouse wheel."""
        delta = event.angleDelta().y()
        if delta == 0:
            return
        factor = self.zoom_factor if delta > 0 else 1 / self.zoom_factor
        self.scale(factor, factor)

    def zoom_in(self):
        """Zoom in by the configured factor."""
        self.scale(self.zoom_factor, self.zoom_factor)

    def zoom_out(self):
        """Zoom out by the configured factor."""
        self.scale(1 / self.zoom_factor, 1 / self.zoom_factor)

    def zoom_reset(self):
        """Reset zoom to 100% (1:1 scale)."""
        self.resetTransform()

"""
canvas/scene.py

QGraphicsScene that draws the editor's render list and turns mouse input
into editor events.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QBrush, QColor
from PyQt6.QtWidgets import QGraphicsScene

from canvas.items import item_for
from debug_trace import trace
from editor.controller import EditorController, UiState
from editor.events import (
    CanvasClicked,
    PointerDragged,
    PointerPressed,
    PointerReleased,
)
from editor.render import build_render_list
from utils import hex_to_qcolor

log = logging.getLogger(__name__)

# Pointer travel (scene units) before a press turns into a drag
DRAG_THRESHOLD = 3.0


class CurveScene(QGraphicsScene):
    """
    Scene bound to an EditorController.

    A left press, optional drags and the release are forwarded as pointer
    events. A press and release with no drag in between also produces a
    CanvasClicked. After each event the scene is rebuilt from the render
    list and the new UiState is handed to the state callback.
    """

    def __init__(self, controller: EditorController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._on_state_changed: Optional[Callable[[UiState], None]] = None
        self._press_pos: Optional[QPointF] = None
        self._dragging = False

        canvas = controller.settings.canvas
        self.setSceneRect(QRectF(0, 0, canvas.width, canvas.height))

    def set_state_changed_callback(self, callback: Optional[Callable[[UiState], None]]):
        """Set callback receiving the UiState after every dispatched event."""
        self._on_state_changed = callback

    def set_background(self, color: str) -> None:
        self.setBackgroundBrush(QBrush(hex_to_qcolor(color, QColor(Qt.GlobalColor.white))))

    # ---- Dispatch and redraw ----

    def dispatch(self, event) -> UiState:
        """Send *event* to the controller, redraw, and report the new state."""
        state = self.controller.dispatch(event)
        self.refresh()
        if self._on_state_changed:
            self._on_state_changed(state)
        return state

    def refresh(self) -> None:
        """Rebuild every item from the controller's render list."""
        self.clear()
        for primitive in build_render_list(self.controller):
            self.addItem(item_for(primitive))

    # ---- Mouse ----

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.scenePos()
        self._press_pos = pos
        self._dragging = False
        self.dispatch(PointerPressed(pos.x(), pos.y()))
        event.accept()

    def mouseMoveEvent(self, event):
        if self._press_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return
        pos = event.scenePos()
        if not self._dragging:
            travel = (pos - self._press_pos).manhattanLength()
            if travel < DRAG_THRESHOLD:
                return
            self._dragging = True
            trace(f"Drag started at ({self._press_pos.x():.1f}, {self._press_pos.y():.1f})", "CANVAS")
        self.dispatch(PointerDragged(pos.x(), pos.y()))
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton or self._press_pos is None:
            super().mouseReleaseEvent(event)
            return
        pos = event.scenePos()
        was_drag = self._dragging
        self._press_pos = None
        self._dragging = False
        self.dispatch(PointerReleased(pos.x(), pos.y()))
        if not was_drag:
            self.dispatch(CanvasClicked(pos.x(), pos.y()))
        event.accept()

"""
properties/panel.py

Side panel with the tool buttons, the toggle-smooth button and the stroke
style controls (colour, thickness, dash style).

The panel never changes editor state itself. Clicks are emitted as editor
events through ``event_requested``; after the controller has run, the main
window calls apply_state() to update enabled and checked buttons.
"""

from __future__ import annotations

from typing import Dict, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QColorDialog,
    QGroupBox,
    QGridLayout,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from models import THICKNESS_VALUES, Color, DashStyle, Tool
from editor.controller import UiState
from editor.events import (
    ColorChosen,
    DashStyleChosen,
    ThicknessChosen,
    ToggleSmoothRequested,
    ToolSelected,
)
from utils import color_to_qcolor, contrasting_text_color, qcolor_to_color

_TOOL_LABELS = {
    Tool.PEN: "Pen",
    Tool.SELECT: "Select",
    Tool.ERASE: "Erase",
}

_DASH_LABELS = {
    DashStyle.NORMAL: "Solid",
    DashStyle.DASHED: "Dashed",
    DashStyle.COMBINED: "Dash-dot",
    DashStyle.DOTTED: "Dotted",
}


class ToolPanel(QWidget):
    """Tool and style controls shown beside the canvas."""

    event_requested = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._color = Color()
        self.tool_buttons: Dict[Tool, QPushButton] = {}
        self.thickness_buttons: Dict[int, QPushButton] = {}
        self.dash_buttons: Dict[DashStyle, QPushButton] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)

        # === Tools ===
        tools_box = QGroupBox("Tools")
        tools_layout = QVBoxLayout(tools_box)
        for tool, label in _TOOL_LABELS.items():
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setAutoExclusive(False)
            btn.clicked.connect(lambda _checked=False, t=tool: self._emit(ToolSelected(t)))
            tools_layout.addWidget(btn)
            self.tool_buttons[tool] = btn

        self.toggle_smooth_btn = QPushButton("Smooth / Corner")
        self.toggle_smooth_btn.setToolTip("Toggle the selected anchor between smooth and corner")
        self.toggle_smooth_btn.clicked.connect(lambda: self._emit(ToggleSmoothRequested()))
        tools_layout.addWidget(self.toggle_smooth_btn)
        layout.addWidget(tools_box)

        # === Colour ===
        color_box = QGroupBox("Colour")
        color_layout = QVBoxLayout(color_box)
        self.color_btn = QPushButton()
        self.color_btn.clicked.connect(self.pick_color)
        color_layout.addWidget(self.color_btn)
        layout.addWidget(color_box)

        # === Thickness ===
        thickness_box = QGroupBox("Thickness")
        thickness_layout = QGridLayout(thickness_box)
        for i, value in enumerate(THICKNESS_VALUES):
            btn = QPushButton(f"{value} px")
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, v=value: self._emit(ThicknessChosen(v)))
            thickness_layout.addWidget(btn, i // 2, i % 2)
            self.thickness_buttons[value] = btn
        layout.addWidget(thickness_box)

        # === Dash style ===
        dash_box = QGroupBox("Line style")
        dash_layout = QGridLayout(dash_box)
        for i, (dash_style, label) in enumerate(_DASH_LABELS.items()):
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, d=dash_style: self._emit(DashStyleChosen(d)))
            dash_layout.addWidget(btn, i // 2, i % 2)
            self.dash_buttons[dash_style] = btn
        layout.addWidget(dash_box)

        layout.addStretch(1)
        self._set_preview(self._color)

    def _emit(self, event) -> None:
        self.event_requested.emit(event)

    def _set_preview(self, color: Color) -> None:
        """Paint the colour button with the current colour."""
        self.color_btn.setText(color.to_hex())
        self.color_btn.setStyleSheet(
            f"background-color: rgba({color.red}, {color.green}, {color.blue}, {color.alpha / 255.0:.2f});"
            f" color: {contrasting_text_color(color)}; border: 1px solid #444;"
        )

    def _pick_color(self, initial: QColor) -> Optional[QColor]:
        """Show color picker dialog."""
        options = QColorDialog.ColorDialogOption.ShowAlphaChannel
        c = QColorDialog.getColor(initial, self, "Pick Curve Colour", options)
        if not c.isValid():
            return None
        return c

    def pick_color(self):
        c = self._pick_color(color_to_qcolor(self._color))
        if c is None:
            return
        self._emit(ColorChosen(qcolor_to_color(c)))

    def apply_state(self, state: UiState) -> None:
        """Reflect *state* in the buttons without emitting any events."""
        for tool, btn in self.tool_buttons.items():
            btn.setChecked(tool is state.highlighted_tool)

        self.toggle_smooth_btn.setEnabled(state.toggle_smooth_enabled)

        enabled = state.style_controls_enabled
        self.color_btn.setEnabled(enabled)
        self._color = state.color
        self._set_preview(state.color)

        for value, btn in self.thickness_buttons.items():
            btn.setEnabled(enabled)
            btn.setChecked(value == state.highlighted_thickness)
        for dash_style, btn in self.dash_buttons.items():
            btn.setEnabled(enabled)
            btn.setChecked(dash_style is state.highlighted_dash_style)

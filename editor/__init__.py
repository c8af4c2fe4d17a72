"""
editor package

Editor state machine, its input events, and the render list it produces
for the canvas.
"""

from editor.events import (
    CanvasClicked,
    ColorChosen,
    Command,
    DashStyleChosen,
    Key,
    KeyPressed,
    MenuCommand,
    PointerDragged,
    PointerPressed,
    PointerReleased,
    ThicknessChosen,
    ToggleSmoothRequested,
    ToolSelected,
)
from editor.controller import Dialogs, EditorController, UiState
from editor.render import (
    CurvePrimitive,
    GuidePrimitive,
    MarkerKind,
    MarkerPrimitive,
    build_render_list,
)

__all__ = [
    "CanvasClicked",
    "ColorChosen",
    "Command",
    "DashStyleChosen",
    "Key",
    "KeyPressed",
    "MenuCommand",
    "PointerDragged",
    "PointerPressed",
    "PointerReleased",
    "ThicknessChosen",
    "ToggleSmoothRequested",
    "ToolSelected",
    "Dialogs",
    "EditorController",
    "UiState",
    "CurvePrimitive",
    "GuidePrimitive",
    "MarkerKind",
    "MarkerPrimitive",
    "build_render_list",
]

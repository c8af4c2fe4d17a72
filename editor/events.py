"""
editor/events.py

Input events fed to EditorController.dispatch().

Events are small immutable values; the canvas and the side panel build them
from Qt signals, and tests build them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from models import Color, DashStyle, Tool, validate_thickness


class Key(Enum):
    """Keys the editor reacts to."""
    ESCAPE = "escape"
    DELETE = "delete"


class Command(Enum):
    """Menu commands."""
    NEW = "new"
    LOAD = "load"
    SAVE = "save"
    QUIT = "quit"
    CUT = "cut"
    COPY = "copy"
    PASTE = "paste"
    ABOUT = "about"


@dataclass(frozen=True)
class ToolSelected:
    tool: Tool


@dataclass(frozen=True)
class CanvasClicked:
    """Press and release at the same spot with no drag in between."""
    x: float
    y: float


@dataclass(frozen=True)
class PointerPressed:
    x: float
    y: float


@dataclass(frozen=True)
class PointerDragged:
    x: float
    y: float


@dataclass(frozen=True)
class PointerReleased:
    x: float
    y: float


@dataclass(frozen=True)
class KeyPressed:
    key: Key


@dataclass(frozen=True)
class ColorChosen:
    color: Color


@dataclass(frozen=True)
class ThicknessChosen:
    """A thickness button was clicked.

    Raises:
        ValueError: On construction, if the thickness is not an allowed value.
    """
    thickness: int

    def __post_init__(self):
        validate_thickness(self.thickness)


@dataclass(frozen=True)
class DashStyleChosen:
    dash_style: DashStyle


@dataclass(frozen=True)
class ToggleSmoothRequested:
    pass


@dataclass(frozen=True)
class MenuCommand:
    command: Command

"""
models.py

Shared value types and constants for the Curve Editor application.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


# ----------------------------
# Editor tool constants
# ----------------------------

class Tool(Enum):
    """Active editor tool."""
    NONE = "none"
    PEN = "pen"
    SELECT = "select"
    ERASE = "erase"


class HandleRole(Enum):
    """Which neighbouring cubic a handle controls."""
    INCOMING = "incoming"
    OUTGOING = "outgoing"


# ----------------------------
# Stroke styling
# ----------------------------

class DashStyle(Enum):
    """Dash style of a segment. Values are the names written to .curve files."""
    NORMAL = "NORMAL"
    DASHED = "DASHED"
    COMBINED = "COMBINED"
    DOTTED = "DOTTED"

    @classmethod
    def from_name(cls, name: str) -> "DashStyle":
        """Look up a dash style by its file name.

        Raises:
            ValueError: If *name* is not one of the four dash style names.
        """
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown dash style: {name!r}") from None


# Allowed stroke thicknesses in pixels
THICKNESS_VALUES: Tuple[int, ...] = (5, 10, 15, 20)

# Thickness at which the wider dash table applies
WIDE_DASH_THRESHOLD = 15

# On/off dash sequences, in units of the stroke thickness: (thin, wide)
_DASH_TABLE: Dict[DashStyle, Tuple[Tuple[float, ...], Tuple[float, ...]]] = {
    DashStyle.NORMAL:   ((), ()),
    DashStyle.DOTTED:   ((2, 14), (2, 28)),
    DashStyle.DASHED:   ((25, 20), (25, 30)),
    DashStyle.COMBINED: ((25, 20, 5, 20), (25, 30, 5, 30)),
}


def validate_thickness(value: int) -> int:
    """Return *value* if it is an allowed thickness.

    Raises:
        ValueError: If the value is not one of ``THICKNESS_VALUES``.
    """
    if value not in THICKNESS_VALUES:
        raise ValueError(f"Thickness must be one of {THICKNESS_VALUES}, got {value!r}")
    return value


def dash_pattern(dash_style: DashStyle, thickness: int) -> Tuple[float, ...]:
    """Dash array for a dash style at a given thickness.

    An empty tuple means a solid stroke.
    """
    thin, wide = _DASH_TABLE[dash_style]
    return wide if thickness >= WIDE_DASH_THRESHOLD else thin


# ----------------------------
# Colour
# ----------------------------

_HEX_RE = re.compile(r"^(?:#|0x)([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """RGBA colour with 8-bit channels."""
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 255

    def __post_init__(self):
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"Colour channel out of range: {channel}")

    def to_hex(self) -> str:
        """Canonical ``#RRGGBBAA`` literal used in .curve files."""
        return "#{:02X}{:02X}{:02X}{:02X}".format(self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_hex(cls, literal: str) -> "Color":
        """Parse ``#RRGGBB``, ``#RRGGBBAA`` or the legacy ``0xRRGGBB[AA]`` form.

        Raises:
            ValueError: If the literal is not a recognised colour.
        """
        match = _HEX_RE.match((literal or "").strip())
        if not match:
            raise ValueError(f"Invalid colour literal: {literal!r}")
        rgb, alpha = match.groups()
        return cls(
            int(rgb[0:2], 16),
            int(rgb[2:4], 16),
            int(rgb[4:6], 16),
            int(alpha, 16) if alpha else 255,
        )

    def __str__(self) -> str:
        return self.to_hex()


BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class StrokeStyle:
    """Colour, thickness and dash style shared by all cubics of a segment."""
    color: Color = BLACK
    thickness: int = 5
    dash_style: DashStyle = DashStyle.NORMAL

    def __post_init__(self):
        validate_thickness(self.thickness)

    @property
    def dash_array(self) -> Tuple[float, ...]:
        return dash_pattern(self.dash_style, self.thickness)

    def replace(self, color: Optional[Color] = None, thickness: Optional[int] = None,
                dash_style: Optional[DashStyle] = None) -> "StrokeStyle":
        """Copy with the given attributes changed."""
        return StrokeStyle(
            color if color is not None else self.color,
            thickness if thickness is not None else self.thickness,
            dash_style if dash_style is not None else self.dash_style,
        )


DEFAULT_STROKE = StrokeStyle()


# ----------------------------
# Files
# ----------------------------

# File extension of curve documents
CURVE_FILE_SUFFIX = ".curve"
CURVE_FILE_FILTER = "Curve File (*.curve)"

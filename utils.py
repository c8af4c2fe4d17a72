"""
utils.py

Utility functions for the Curve Editor application.
"""

from __future__ import annotations

from PyQt6.QtGui import QColor

from models import Color


def color_to_qcolor(c: Color) -> QColor:
    """Convert a model Color to a QColor."""
    return QColor(c.red, c.green, c.blue, c.alpha)


def qcolor_to_color(c: QColor) -> Color:
    """Convert a QColor to a model Color, keeping alpha."""
    return Color(c.red(), c.green(), c.blue(), c.alpha())


def hex_to_qcolor(s: str, fallback: QColor) -> QColor:
    """
    Parse a hex string to a QColor.

    Args:
        s: Hex string like "#RRGGBB", "#RRGGBBAA" or "0xRRGGBBAA"
        fallback: Color to return if parsing fails

    Returns:
        Parsed QColor or fallback
    """
    try:
        return color_to_qcolor(Color.from_hex(s))
    except ValueError:
        return QColor(fallback)


def contrasting_text_color(c: Color) -> str:
    """Black or white, whichever reads better on a swatch of colour *c*."""
    luminance = 0.299 * c.red + 0.587 * c.green + 0.114 * c.blue
    return "#000000" if luminance > 140 else "#FFFFFF"

"""
settings.py

Persistent settings management for Curve Editor.

Handles cross-platform settings storage using TOML format with platformdirs
for proper user config directory detection.

Settings file location:
    - Windows: %APPDATA%/curve-editor/settings.toml
    - macOS: ~/Library/Application Support/curve-editor/settings.toml
    - Linux: ~/.config/curve-editor/settings.toml

The file is read when present and only ever written on explicit request
(``main.py --write-settings``). If it is missing or corrupted, the defaults
documented below are used.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

# TOML reading - use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from models import (
    THICKNESS_VALUES,
    Color,
    DashStyle,
    StrokeStyle,
)

log = logging.getLogger(__name__)

APP_NAME = "curve-editor"

# Global settings manager instance (singleton)
_settings_manager: Optional["SettingsManager"] = None


def get_settings() -> "SettingsManager":
    """Get the global settings manager instance.

    Returns:
        The singleton SettingsManager instance.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


# =============================================================================
# General Settings
# =============================================================================

@dataclass
class GeneralSettings:
    """General application settings.

    Defaults:
        theme: "Light"
        last_directory: ""
    """
    theme: str = "Light"         # Default: "Light" (key in styles.STYLES)
    last_directory: str = ""     # Default: "" (home directory)


# =============================================================================
# Canvas Settings
# =============================================================================

@dataclass
class CanvasSettings:
    """Canvas geometry and marker appearance.

    Defaults:
        width: 1100
        height: 800
        anchor_radius: 6.0
        handle_radius: 4.0
        hit_tolerance: 4.0
        wheel_zoom_factor: 1.15
        smooth_stroke: "#0000FF"
        corner_stroke: "#008000"
        anchor_fill: "#FFFFFF"
        focused_fill: "#90EE90"
        handle_fill: "#0000FF"
        handle_line: "#808080"
    """
    width: int = 1100                  # Default: 1100 pixels
    height: int = 800                  # Default: 800 pixels
    anchor_radius: float = 6.0         # Default: 6.0 pixels
    handle_radius: float = 4.0         # Default: 4.0 pixels
    hit_tolerance: float = 4.0         # Default: 4.0 pixels beyond the stroke
    wheel_zoom_factor: float = 1.15    # Default: 1.15 (15% per scroll step)
    smooth_stroke: str = "#0000FF"     # Default: blue
    corner_stroke: str = "#008000"     # Default: green
    anchor_fill: str = "#FFFFFF"       # Default: white
    focused_fill: str = "#90EE90"      # Default: light green
    handle_fill: str = "#0000FF"       # Default: blue
    handle_line: str = "#808080"       # Default: grey


# =============================================================================
# Pen Settings
# =============================================================================

@dataclass
class PenSettings:
    """Default stroke used by the pen tool at start-up.

    Defaults:
        color: "#000000FF"
        thickness: 5
        dash_style: "NORMAL"
    """
    color: str = "#000000FF"     # Default: opaque black
    thickness: int = 5           # Default: 5 pixels
    dash_style: str = "NORMAL"   # Default: solid

    def to_stroke_style(self) -> StrokeStyle:
        return StrokeStyle(Color.from_hex(self.color), self.thickness, DashStyle.from_name(self.dash_style))


# =============================================================================
# Handle Settings
# =============================================================================

@dataclass
class HandleSettings:
    """Initial offsets of freshly created handles.

    Defaults:
        offset_min: 30
        offset_max: 60
        seed: -1
    """
    offset_min: int = 30   # Default: 30 pixels
    offset_max: int = 60   # Default: 60 pixels (exclusive)
    seed: int = -1         # Default: -1 (unseeded)

    @property
    def offset_range(self):
        return (self.offset_min, self.offset_max)


# =============================================================================
# Clipboard Settings
# =============================================================================

@dataclass
class ClipboardSettings:
    """Cut/copy/paste behaviour.

    Defaults:
        paste_step: 40
    """
    paste_step: int = 40  # Default: 40 pixels per paste


# =============================================================================
# Main App Settings
# =============================================================================

@dataclass
class AppSettings:
    """Application settings with default values.

    Attributes:
        general: Theme and last used directory.
        canvas: Canvas size and marker appearance.
        pen: Default stroke style.
        handles: Handle offset randomisation.
        clipboard: Paste offset.
    """
    general: GeneralSettings = field(default_factory=GeneralSettings)
    canvas: CanvasSettings = field(default_factory=CanvasSettings)
    pen: PenSettings = field(default_factory=PenSettings)
    handles: HandleSettings = field(default_factory=HandleSettings)
    clipboard: ClipboardSettings = field(default_factory=ClipboardSettings)


# =============================================================================
# Settings Manager
# =============================================================================

class SettingsManager:
    """Manages loading, saving, and accessing application settings.

    Settings are stored in a TOML file at the platform-appropriate location.
    A missing file means defaults; it is not created until save() is called.

    Args:
        app_name: Application name used for the config directory.
    """

    def __init__(self, app_name: str = APP_NAME):
        self.settings_dir = Path(platformdirs.user_config_dir(app_name))
        self.settings_file = self.settings_dir / "settings.toml"
        self.settings = self.load()

    def load(self) -> AppSettings:
        """Load settings from the TOML file.

        Returns:
            AppSettings instance with values from file or defaults if file
            doesn't exist or is invalid.
        """
        if not self.settings_file.exists():
            return AppSettings()

        try:
            with open(self.settings_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", self.settings_file, exc)
            return AppSettings()

        return self._parse_toml(data)

    def _parse_toml(self, data: Dict[str, Any]) -> AppSettings:
        """Parse TOML data into AppSettings.

        Args:
            data: Parsed TOML dictionary.

        Returns:
            AppSettings instance populated from TOML data.
        """
        settings = AppSettings()

        general = data.get("general", {})
        g = settings.general
        for name in ("theme", "last_directory"):
            value = general.get(name, getattr(g, name))
            if isinstance(value, str):
                setattr(g, name, value)
            else:
                log.warning("Invalid value for general.%s: %r, using default", name, value)

        canvas = data.get("canvas", {})
        c = settings.canvas
        for name, integer, minimum in _CANVAS_NUMBERS:
            value = canvas.get(name, getattr(c, name))
            if _valid_number(value, integer, minimum):
                setattr(c, name, value if integer else float(value))
            else:
                log.warning("Invalid value for canvas.%s: %r, using default", name, value)
        for name in ("smooth_stroke", "corner_stroke", "anchor_fill",
                     "focused_fill", "handle_fill", "handle_line"):
            value = canvas.get(name, getattr(c, name))
            if _valid_color(value):
                setattr(c, name, value)
            else:
                log.warning("Invalid colour for canvas.%s: %r, using default", name, value)

        pen = data.get("pen", {})
        p = settings.pen
        color = pen.get("color", p.color)
        if _valid_color(color):
            p.color = color
        else:
            log.warning("Invalid pen colour %r, using default", color)
        thickness = pen.get("thickness", p.thickness)
        if _valid_number(thickness, True) and thickness in THICKNESS_VALUES:
            p.thickness = thickness
        else:
            log.warning("Invalid pen thickness %r, using default", thickness)
        dash_style = pen.get("dash_style", p.dash_style)
        if dash_style in DashStyle.__members__:
            p.dash_style = dash_style
        else:
            log.warning("Invalid pen dash style %r, using default", dash_style)

        handles = data.get("handles", {})
        h = settings.handles
        low = handles.get("offset_min", h.offset_min)
        high = handles.get("offset_max", h.offset_max)
        if _valid_number(low, True, 1) and _valid_number(high, True, 1) and low < high:
            h.offset_min, h.offset_max = low, high
        else:
            log.warning("Invalid handle offset range %r..%r, using default", low, high)
        seed = handles.get("seed", h.seed)
        if _valid_number(seed, True):
            h.seed = seed
        else:
            log.warning("Invalid handle seed %r, using default", seed)

        clipboard = data.get("clipboard", {})
        paste_step = clipboard.get("paste_step", settings.clipboard.paste_step)
        if _valid_number(paste_step, True, 0):
            settings.clipboard.paste_step = paste_step
        else:
            log.warning("Invalid clipboard paste step %r, using default", paste_step)

        return settings

    def save(self) -> None:
        """Save current settings to the TOML file.

        Creates the settings directory if it doesn't exist.
        """
        self.settings_dir.mkdir(parents=True, exist_ok=True)

        data = self._to_toml_dict()

        with open(self.settings_file, "wb") as f:
            tomli_w.dump(data, f)
        log.info("Wrote settings to %s", self.settings_file)

    def _to_toml_dict(self) -> Dict[str, Any]:
        """Convert settings to a TOML-compatible dictionary structure.

        Returns:
            Dictionary organized by TOML sections.
        """
        s = self.settings
        return {
            "general": {
                "theme": s.general.theme,
                "last_directory": s.general.last_directory,
            },
            "canvas": {
                "width": s.canvas.width,
                "height": s.canvas.height,
                "anchor_radius": s.canvas.anchor_radius,
                "handle_radius": s.canvas.handle_radius,
                "hit_tolerance": s.canvas.hit_tolerance,
                "wheel_zoom_factor": s.canvas.wheel_zoom_factor,
                "smooth_stroke": s.canvas.smooth_stroke,
                "corner_stroke": s.canvas.corner_stroke,
                "anchor_fill": s.canvas.anchor_fill,
                "focused_fill": s.canvas.focused_fill,
                "handle_fill": s.canvas.handle_fill,
                "handle_line": s.canvas.handle_line,
            },
            "pen": {
                "color": s.pen.color,
                "thickness": s.pen.thickness,
                "dash_style": s.pen.dash_style,
            },
            "handles": {
                "offset_min": s.handles.offset_min,
                "offset_max": s.handles.offset_max,
                "seed": s.handles.seed,
            },
            "clipboard": {
                "paste_step": s.clipboard.paste_step,
            },
        }

    def to_toml(self) -> str:
        """Convert current settings to a TOML-formatted string.

        Returns:
            TOML representation of the current settings.
        """
        return tomli_w.dumps(self._to_toml_dict())

    def get_start_directory(self) -> Path:
        """Directory the file dialogs open in.

        Returns:
            The last used directory, or the home directory if unset or gone.
        """
        last = self.settings.general.last_directory
        if last and Path(last).is_dir():
            return Path(last)
        return Path.home()

    def get_settings_path(self) -> Path:
        """Get the path to the settings file.

        Returns:
            Path object pointing to the settings file location.
        """
        return self.settings_file


def _valid_color(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        Color.from_hex(value)
    except ValueError:
        return False
    return True


# Numeric canvas settings: (name, must be an int, smallest allowed value)
_CANVAS_NUMBERS = (
    ("width", True, 1),
    ("height", True, 1),
    ("anchor_radius", False, 0),
    ("handle_radius", False, 0),
    ("hit_tolerance", False, 0),
    ("wheel_zoom_factor", False, 1),
)


def _valid_number(value: Any, integer: bool = False, minimum: Optional[float] = None) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, int if integer else (int, float)):
        return False
    if not math.isfinite(value):
        return False
    return minimum is None or value >= minimum

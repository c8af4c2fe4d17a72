"""
properties package

Side panel with tool buttons and stroke style controls.
"""

from properties.panel import ToolPanel

__all__ = ["ToolPanel"]

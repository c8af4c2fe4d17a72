"""
help_dialog.py

About and quick help dialogs for Curve Editor.
"""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox

APP_TITLE = "Curve Editor"


def show_about_dialog(parent=None):
    """Show the About Curve Editor dialog.

    Args:
        parent: Parent widget for the message box.
    """
    QMessageBox.about(
        parent,
        f"About {APP_TITLE}",
        f"<h2>{APP_TITLE}</h2>"
        "<p>Draw and edit piecewise cubic B&eacute;zier curves.</p>"
        "<p>Place anchors with the pen, reshape curves by dragging anchors "
        "and handles with the select tool, and save drawings as "
        "<code>.curve</code> files.</p>"
        "<hr>"
        + _SHORTCUTS_HTML,
    )


_SHORTCUTS_HTML = """\
<table cellpadding="3">
<tr><td><b>Esc</b></td><td>Finish the curve being drawn / clear the selection</td></tr>
<tr><td><b>Delete</b></td><td>Delete the selected curve</td></tr>
<tr><td><b>Ctrl+X / C / V</b></td><td>Cut, copy and paste the selected curve</td></tr>
<tr><td><b>Mouse wheel</b></td><td>Zoom the canvas</td></tr>
</table>
"""

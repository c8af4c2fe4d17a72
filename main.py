"""
main.py

Curve Editor - Main Application

PyQt6 application for drawing piecewise cubic Bezier curves:
- Pen tool places anchors, Select tool edits anchors and handles, Erase
  tool removes curves
- Per-curve colour, thickness and dash style
- Cut / copy / paste of whole curves
- Save and load of .curve files

Usage:
    python main.py [--debug] [--write-settings] [FILE.curve]

Dependencies:
    pip install PyQt6 platformdirs tomli-w
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QWidget,
)

from models import CURVE_FILE_FILTER, CURVE_FILE_SUFFIX
from canvas import CurveScene, CurveView
from editor import (
    Command,
    EditorController,
    Key,
    KeyPressed,
    MenuCommand,
    UiState,
)
from properties import ToolPanel
from help_dialog import APP_TITLE, show_about_dialog
from styles import CANVAS_BACKGROUNDS, DEFAULT_STYLE, STYLES
from settings import SettingsManager, get_settings
from debug_trace import install_excepthook, setup_logging, trace

log = logging.getLogger(__name__)


class QtDialogs:
    """Qt implementation of the controller's modal dialogs."""

    def __init__(self, window: QMainWindow, settings_manager: SettingsManager):
        self.window = window
        self.settings_manager = settings_manager

    def _remember_dir(self, path: str) -> None:
        # Session only; the settings file is never rewritten implicitly
        self.settings_manager.settings.general.last_directory = str(Path(path).parent)

    def confirm_save(self) -> bool:
        answer = QMessageBox.question(
            self.window,
            APP_TITLE,
            "Would you like to save your work?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        return answer == QMessageBox.StandardButton.Yes

    def ask_open_path(self) -> Optional[str]:
        path, _ = QFileDialog.getOpenFileName(
            self.window, "Load Curve",
            str(self.settings_manager.get_start_directory()), CURVE_FILE_FILTER)
        if not path:
            return None
        self._remember_dir(path)
        return path

    def ask_save_path(self) -> Optional[str]:
        path, _ = QFileDialog.getSaveFileName(
            self.window, "Save As",
            str(self.settings_manager.get_start_directory()), CURVE_FILE_FILTER)
        if not path:
            return None
        if not path.lower().endswith(CURVE_FILE_SUFFIX):
            path += CURVE_FILE_SUFFIX
        self._remember_dir(path)
        return path

    def show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self.window, title, message)

    def show_about(self) -> None:
        show_about_dialog(self.window)


class MainWindow(QMainWindow):
    """Main window: menus, side panel and canvas around one EditorController."""

    def __init__(self, settings_manager: SettingsManager):
        super().__init__()
        self.settings_manager = settings_manager
        self.dialogs = QtDialogs(self, settings_manager)
        self.controller = EditorController(self.dialogs, settings_manager.settings)

        self.scene = CurveScene(self.controller, self)
        self.view = CurveView(self.scene, self)
        self.panel = ToolPanel(self)
        self.panel.setFixedWidth(180)

        central = QWidget(self)
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.panel)
        layout.addWidget(self.view, 1)
        self.setCentralWidget(central)

        self.scene.set_state_changed_callback(self.apply_state)
        self.panel.event_requested.connect(self.dispatch)

        self._build_menus()
        self._build_shortcuts()

        self.setMinimumSize(640, 480)
        self.setMaximumSize(1600, 1200)
        self.apply_state(self.controller.ui_state())
        self.scene.refresh()

    # =========================================================================
    # Menus
    # =========================================================================

    def _build_menus(self):
        """Build the application menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")
        self.new_act = self._command_action("New", Command.NEW, QKeySequence.StandardKey.New)
        self.load_act = self._command_action("Load...", Command.LOAD, QKeySequence.StandardKey.Open)
        self.save_act = self._command_action("Save...", Command.SAVE, QKeySequence.StandardKey.Save)
        self.quit_act = self._command_action("Quit", Command.QUIT, QKeySequence.StandardKey.Quit)
        file_menu.addAction(self.new_act)
        file_menu.addAction(self.load_act)
        file_menu.addAction(self.save_act)
        file_menu.addSeparator()
        file_menu.addAction(self.quit_act)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")
        self.cut_act = self._command_action("Cut", Command.CUT, QKeySequence.StandardKey.Cut)
        self.copy_act = self._command_action("Copy", Command.COPY, QKeySequence.StandardKey.Copy)
        self.paste_act = self._command_action("Paste", Command.PASTE, QKeySequence.StandardKey.Paste)
        edit_menu.addAction(self.cut_act)
        edit_menu.addAction(self.copy_act)
        edit_menu.addAction(self.paste_act)

        # View menu
        view_menu = menubar.addMenu("&View")
        zoom_in_act = QAction("Zoom In", self)
        zoom_in_act.setShortcut(QKeySequence.StandardKey.ZoomIn)
        zoom_in_act.triggered.connect(self.view.zoom_in)
        view_menu.addAction(zoom_in_act)

        zoom_out_act = QAction("Zoom Out", self)
        zoom_out_act.setShortcut(QKeySequence.StandardKey.ZoomOut)
        zoom_out_act.triggered.connect(self.view.zoom_out)
        view_menu.addAction(zoom_out_act)

        zoom_reset_act = QAction("Zoom 100%", self)
        zoom_reset_act.setShortcut("Ctrl+0")
        zoom_reset_act.triggered.connect(self.view.zoom_reset)
        view_menu.addAction(zoom_reset_act)

        # Help menu
        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(self._command_action("About", Command.ABOUT))

    def _command_action(self, text: str, command: Command, shortcut=None) -> QAction:
        act = QAction(text, self)
        if shortcut is not None:
            act.setShortcut(shortcut)
        act.triggered.connect(lambda _checked=False, c=command: self.dispatch(MenuCommand(c)))
        return act

    def _build_shortcuts(self):
        """Window-wide Esc and Delete, wherever keyboard focus is."""
        for key, seq in ((Key.ESCAPE, Qt.Key.Key_Escape), (Key.DELETE, Qt.Key.Key_Delete)):
            act = QAction(self)
            act.setShortcut(QKeySequence(seq))
            act.setShortcutContext(Qt.ShortcutContext.WindowShortcut)
            act.triggered.connect(lambda _checked=False, k=key: self.dispatch(KeyPressed(k)))
            self.addAction(act)

    # =========================================================================
    # Editor plumbing
    # =========================================================================

    def dispatch(self, event) -> UiState:
        """Route an editor event through the scene so the canvas redraws."""
        return self.scene.dispatch(event)

    def apply_state(self, state: UiState) -> None:
        """Update widgets and window title; close when a quit was accepted."""
        self.panel.apply_state(state)
        self.cut_act.setEnabled(state.cut_enabled)
        self.copy_act.setEnabled(state.copy_enabled)
        self.paste_act.setEnabled(state.paste_enabled)

        name = self.controller.current_path.name if self.controller.current_path else "Untitled"
        self.setWindowTitle(f"{name}{' *' if state.dirty else ''} - {APP_TITLE}")

        if state.quit_requested:
            self.close()

    def open_path(self, path: str) -> bool:
        """Load *path* at start-up."""
        ok = self.controller.load_path(path)
        self.scene.refresh()
        self.apply_state(self.controller.ui_state())
        return ok

    def closeEvent(self, event):
        """Closing the window runs the Quit command."""
        if not self.controller.quit_requested:
            self.dispatch(MenuCommand(Command.QUIT))
        if self.controller.quit_requested:
            trace("Closing main window", "MAIN")
            event.accept()
        else:
            event.ignore()


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="curve-editor", description="Cubic Bezier curve editor")
    parser.add_argument("file", nargs="?", help="Curve file to open at start-up")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--write-settings", action="store_true",
                        help="Write the current settings to the settings file and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Application entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.debug)
    install_excepthook()

    trace("Loading settings", "MAIN")
    settings_manager = get_settings()

    if args.write_settings:
        settings_manager.save()
        print(settings_manager.get_settings_path())
        return 0

    trace("Application starting", "MAIN")
    app = QApplication(sys.argv[:1])

    # Apply configured theme (or default if unknown)
    theme = settings_manager.settings.general.theme
    if theme not in STYLES:
        log.warning("Unknown theme %r, using %s", theme, DEFAULT_STYLE)
        theme = DEFAULT_STYLE
    app.setStyleSheet(STYLES[theme])

    w = MainWindow(settings_manager)
    w.scene.set_background(CANVAS_BACKGROUNDS[theme])
    canvas = settings_manager.settings.canvas
    w.resize(canvas.width + 200, canvas.height + 40)
    if args.file:
        w.open_path(args.file)
    w.show()
    trace("Entering event loop", "MAIN")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

"""Qt-side tests: scene redraw, items, the tool panel and the main window.

Runs headless via the offscreen platform set in conftest.py.
"""
from __future__ import annotations

import sys

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

import settings as settings_module
from canvas import CurveItem, CurveScene, CurveView, GuideItem, MarkerItem, item_for
from canvas.items import make_stroke_pen
from editor.events import (
    CanvasClicked,
    Command,
    MenuCommand,
    ThicknessChosen,
    ToolSelected,
)
from models import BLACK, Tool
from properties import ToolPanel
from settings import SettingsManager


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def qapp():
    """Provide a single QApplication for the entire test session."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture()
def scene(qapp, controller):
    return CurveScene(controller)


@pytest.fixture()
def main_window(qapp, tmp_path, monkeypatch):
    """A MainWindow whose settings live in a temporary directory."""
    from main import MainWindow
    monkeypatch.setattr(settings_module.platformdirs, "user_config_dir", lambda app_name: str(tmp_path))
    mw = MainWindow(SettingsManager())
    qapp.processEvents()
    yield mw
    mw.controller.document.mark_clean()
    mw.close()


def _items_by_type(scene):
    counts = {}
    for item in scene.items():
        counts[type(item)] = counts.get(type(item), 0) + 1
    return counts


# ---------------------------------------------------------------------------
# Items
# ---------------------------------------------------------------------------

def test_stroke_pen_dash_pattern(qapp):
    pen = make_stroke_pen(BLACK, 15.0, (2, 28))
    assert pen.dashPattern() == [2.0, 28.0]
    assert pen.widthF() == 15.0


def test_stroke_pen_solid(qapp):
    pen = make_stroke_pen(BLACK, 5.0, ())
    assert pen.style() == Qt.PenStyle.SolidLine


def test_item_for_unknown_primitive(qapp):
    with pytest.raises(TypeError):
        item_for("not a primitive")


# ---------------------------------------------------------------------------
# Scene
# ---------------------------------------------------------------------------

def test_scene_rect_from_settings(scene):
    rect = scene.sceneRect()
    assert (rect.width(), rect.height()) == (1100, 800)


def test_dispatch_redraws(scene):
    states = []
    scene.set_state_changed_callback(states.append)

    scene.dispatch(ToolSelected(Tool.PEN))
    scene.dispatch(CanvasClicked(100, 100))
    scene.dispatch(CanvasClicked(200, 150))

    assert _items_by_type(scene) == {CurveItem: 1, GuideItem: 2, MarkerItem: 4}
    assert len(states) == 3
    assert states[-1].tool is Tool.PEN


def test_committed_curve_only_after_escape(scene, actions):
    actions.draw(scene.controller, [(100, 100), (200, 150)])
    scene.refresh()
    assert _items_by_type(scene) == {CurveItem: 1}


def test_view_zoom(scene):
    view = CurveView(scene)
    view.zoom_in()
    assert view.transform().m11() == pytest.approx(1.15)
    view.zoom_reset()
    assert view.transform().m11() == pytest.approx(1.0)


# ---------------------------------------------------------------------------
# Tool panel
# ---------------------------------------------------------------------------

def test_panel_emits_tool_events(qapp):
    panel = ToolPanel()
    seen = []
    panel.event_requested.connect(seen.append)

    panel.tool_buttons[Tool.SELECT].click()

    assert seen == [ToolSelected(Tool.SELECT)]


def test_panel_apply_state(qapp, controller):
    panel = ToolPanel()
    panel.apply_state(controller.ui_state())
    assert not any(btn.isChecked() for btn in panel.tool_buttons.values())
    assert not panel.thickness_buttons[5].isEnabled()
    assert not panel.toggle_smooth_btn.isEnabled()

    panel.apply_state(controller.dispatch(ToolSelected(Tool.PEN)))
    assert panel.tool_buttons[Tool.PEN].isChecked()
    assert panel.thickness_buttons[5].isEnabled()
    assert panel.thickness_buttons[5].isChecked()
    assert panel.color_btn.text() == "#000000FF"


def test_panel_thickness_click(qapp, controller):
    panel = ToolPanel()
    panel.apply_state(controller.dispatch(ToolSelected(Tool.PEN)))
    seen = []
    panel.event_requested.connect(seen.append)

    panel.thickness_buttons[20].click()

    assert seen == [ThicknessChosen(20)]


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

def test_main_window_initial_state(main_window):
    assert main_window.windowTitle() == "Untitled - Curve Editor"
    assert not main_window.paste_act.isEnabled()
    assert not main_window.cut_act.isEnabled()


def test_main_window_tracks_dirty(main_window):
    main_window.dispatch(ToolSelected(Tool.PEN))
    main_window.dispatch(CanvasClicked(10, 10))
    main_window.dispatch(CanvasClicked(100, 50))
    main_window.dispatch(ToolSelected(Tool.SELECT))

    assert main_window.windowTitle() == "Untitled * - Curve Editor"
    assert len(main_window.controller.document.segments) == 1


def test_main_window_open_path(main_window, tmp_path):
    path = tmp_path / "one.curve"
    path.write_text(
        "*|#000000FF|NORMAL|5|"
        ":0.0:0.0:true:%0.0%0.0%40.0%0.0%40.0%0.0%40.0%0.0%:|"
        ":100.0:0.0:true:%100.0%0.0%60.0%0.0%60.0%0.0%-40.0%0.0%:|*",
        encoding="utf-8",
    )
    assert main_window.open_path(str(path))
    assert main_window.windowTitle() == "one.curve - Curve Editor"
    assert _items_by_type(main_window.scene) == {CurveItem: 1}


def test_quit_command_on_clean_document(main_window):
    state = main_window.dispatch(MenuCommand(Command.QUIT))
    assert state.quit_requested

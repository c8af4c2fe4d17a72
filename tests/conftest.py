"""Shared fixtures for the curve editor tests."""
from __future__ import annotations

import os
import random
import sys
from types import SimpleNamespace

import pytest

# Ensure project root is on sys.path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from editor.controller import EditorController
from editor.events import (
    CanvasClicked,
    Key,
    KeyPressed,
    PointerDragged,
    PointerPressed,
    PointerReleased,
    ToolSelected,
)
from models import Tool
from settings import AppSettings


class FakeDialogs:
    """Scripted stand-in for the Qt dialogs.

    Queue answers in ``save_answers``, ``open_paths`` and ``save_paths``;
    calls beyond the queue answer "no" / cancel.
    """

    def __init__(self):
        self.save_answers = []
        self.open_paths = []
        self.save_paths = []
        self.errors = []
        self.confirm_calls = 0
        self.about_calls = 0

    def confirm_save(self):
        self.confirm_calls += 1
        return self.save_answers.pop(0) if self.save_answers else False

    def ask_open_path(self):
        return self.open_paths.pop(0) if self.open_paths else None

    def ask_save_path(self):
        return self.save_paths.pop(0) if self.save_paths else None

    def show_error(self, title, message):
        self.errors.append((title, message))

    def show_about(self):
        self.about_calls += 1


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def dialogs():
    return FakeDialogs()


@pytest.fixture()
def controller(dialogs, rng):
    return EditorController(dialogs, AppSettings(), rng=rng)


def click(ctrl, x, y):
    """Press and release in place, as the canvas reports a click."""
    ctrl.dispatch(PointerPressed(x, y))
    ctrl.dispatch(PointerReleased(x, y))
    return ctrl.dispatch(CanvasClicked(x, y))


def drag(ctrl, start, end):
    ctrl.dispatch(PointerPressed(*start))
    ctrl.dispatch(PointerDragged(*end))
    return ctrl.dispatch(PointerReleased(*end))


def draw(ctrl, points):
    """Draw one segment with the pen and commit it with Esc."""
    ctrl.dispatch(ToolSelected(Tool.PEN))
    for x, y in points:
        click(ctrl, x, y)
    return ctrl.dispatch(KeyPressed(Key.ESCAPE))


@pytest.fixture()
def actions():
    """The click / drag / draw helpers, for tests that drive the controller."""
    return SimpleNamespace(click=click, drag=drag, draw=draw)

"""
editor/controller.py

The editor state machine.

EditorController owns the document, the draft segment being drawn by the pen
tool, the focused segment and anchor, and the default stroke style. Every
input goes through dispatch(), which applies it and returns a UiState telling
the widgets which buttons are enabled and highlighted.

Modal interaction (save prompts, file choosers, error and about boxes) is
delegated to a Dialogs object so the controller itself never touches Qt.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Union

from models import (
    CURVE_FILE_SUFFIX,
    Color,
    DashStyle,
    StrokeStyle,
    Tool,
)
from settings import AppSettings
from debug_trace import trace, trace_call
from curve.anchor import Anchor, Handle
from curve.document import Document
from curve.fileformat import (
    CurveFormatError,
    dump_segment,
    load_segment,
    read_curve_file,
    write_curve_file,
)
from curve.geometry import Point
from curve.segment import Segment
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

log = logging.getLogger(__name__)


class Dialogs(Protocol):
    """Modal collaborators the controller calls out to."""

    def confirm_save(self) -> bool:
        """Ask "Would you like to save your work?". True means yes."""

    def ask_open_path(self) -> Optional[str]:
        """Return a path to load, or None if cancelled."""

    def ask_save_path(self) -> Optional[str]:
        """Return a path to save to, or None if cancelled."""

    def show_error(self, title: str, message: str) -> None:
        ...

    def show_about(self) -> None:
        ...


@dataclass(frozen=True)
class UiState:
    """Snapshot of what the widgets should show after an event."""
    tool: Tool
    style_controls_enabled: bool
    color: Color
    thickness: int
    dash_style: DashStyle
    toggle_smooth_enabled: bool
    cut_enabled: bool
    copy_enabled: bool
    paste_enabled: bool
    dirty: bool
    quit_requested: bool

    @property
    def highlighted_tool(self) -> Optional[Tool]:
        return None if self.tool is Tool.NONE else self.tool

    @property
    def highlighted_thickness(self) -> Optional[int]:
        return self.thickness if self.style_controls_enabled else None

    @property
    def highlighted_dash_style(self) -> Optional[DashStyle]:
        return self.dash_style if self.style_controls_enabled else None


DragTarget = Union[Anchor, Handle]


class EditorController:
    """Reducer over tool x focused segment x focused anchor.

    Args:
        dialogs: Modal dialog collaborator.
        settings: Application settings; defaults when omitted.
        rng: Random source for new handle offsets. When omitted, one is
            created from ``settings.handles.seed`` (unseeded if negative).
    """

    def __init__(self, dialogs: Dialogs, settings: Optional[AppSettings] = None,
                 rng: Optional[random.Random] = None):
        self.dialogs = dialogs
        self.settings = settings or AppSettings()
        if rng is None:
            seed = self.settings.handles.seed
            rng = random.Random(seed) if seed >= 0 else random.Random()
        self.rng = rng

        self.document = Document()
        self.tool = Tool.NONE
        self.defaults: StrokeStyle = self.settings.pen.to_stroke_style()
        self.focused_segment: Optional[Segment] = None
        self.focused_anchor: Optional[Anchor] = None
        self.draft = self._new_segment()
        self.quit_requested = False
        self.current_path: Optional[Path] = None

        self._drag_target: Optional[DragTarget] = None
        self._press_grabbed = False

        self._handlers = {
            ToolSelected: self._on_tool_selected,
            CanvasClicked: self._on_canvas_clicked,
            PointerPressed: self._on_pointer_pressed,
            PointerDragged: self._on_pointer_dragged,
            PointerReleased: self._on_pointer_released,
            KeyPressed: self._on_key_pressed,
            ColorChosen: self._on_color_chosen,
            ThicknessChosen: self._on_thickness_chosen,
            DashStyleChosen: self._on_dash_style_chosen,
            ToggleSmoothRequested: self._on_toggle_smooth,
            MenuCommand: self._on_menu_command,
        }
        self._commands = {
            Command.NEW: self.new_document,
            Command.LOAD: self.load,
            Command.SAVE: self.save,
            Command.QUIT: self.quit,
            Command.CUT: self.cut,
            Command.COPY: self.copy,
            Command.PASTE: self.paste,
            Command.ABOUT: self.dialogs.show_about,
        }

    # =========================================================================
    # Reducer
    # =========================================================================

    def dispatch(self, event) -> UiState:
        """Apply *event* and return the resulting UI state.

        Raises:
            TypeError: If the event type is unknown.
        """
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unknown editor event: {event!r}")
        handler(event)
        return self.ui_state()

    def ui_state(self) -> UiState:
        style_enabled = (
            self.tool is Tool.PEN
            or (self.tool is Tool.SELECT and self.focused_segment is not None)
        )
        has_focus = self.focused_segment is not None
        return UiState(
            tool=self.tool,
            style_controls_enabled=style_enabled,
            color=self.defaults.color,
            thickness=self.defaults.thickness,
            dash_style=self.defaults.dash_style,
            toggle_smooth_enabled=self.tool is Tool.SELECT and self.focused_anchor is not None,
            cut_enabled=has_focus,
            copy_enabled=has_focus,
            paste_enabled=self.document.clipboard is not None,
            dirty=self.document.dirty,
            quit_requested=self.quit_requested,
        )

    # =========================================================================
    # Tool transitions
    # =========================================================================

    def _new_segment(self, style: Optional[StrokeStyle] = None) -> Segment:
        return Segment(style=style, rng=self.rng, offset_range=self.settings.handles.offset_range)

    def _commit_draft(self) -> None:
        draft = self.draft
        if draft.is_complete:
            draft.unfocus()
            self.document.add(draft)
            self.document.mark_dirty()
            log.info("Committed segment with %d anchors", len(draft))
        elif len(draft):
            log.debug("Discarded draft with %d anchor", len(draft))
            draft.clear()
        self.draft = self._new_segment()

    def _leave_tool(self) -> None:
        """Commit whatever the current tool has in progress."""
        if self.tool is Tool.PEN:
            self._commit_draft()
        elif self.tool is Tool.SELECT:
            self.clear_focus()
        self._drag_target = None

    def _escape(self) -> None:
        if self.tool is Tool.PEN:
            self._commit_draft()
            self._set_tool(Tool.NONE)
        elif self.tool is Tool.SELECT:
            self.clear_focus()

    def _set_tool(self, tool: Tool) -> None:
        if tool is not self.tool:
            trace(f"{self.tool.name} -> {tool.name}", "TOOL")
        self.tool = tool

    def _on_tool_selected(self, event: ToolSelected) -> None:
        self._leave_tool()
        self._set_tool(event.tool)

    # =========================================================================
    # Focus
    # =========================================================================

    def set_focus(self, segment: Segment) -> None:
        """Focus *segment* and adopt its style as the editor defaults."""
        if self.focused_segment is not None and self.focused_segment is not segment:
            self.focused_segment.unfocus()
        self.focused_segment = segment
        self.focused_anchor = None
        segment.focus()
        if segment.style is not None:
            self.defaults = segment.style

    def clear_focus(self) -> None:
        if self.focused_segment is not None:
            self.focused_segment.unfocus()
        self.focused_segment = None
        self.focused_anchor = None

    # =========================================================================
    # Pointer
    # =========================================================================

    def _on_canvas_clicked(self, event: CanvasClicked) -> None:
        point = Point(event.x, event.y)
        grabbed = self._press_grabbed
        self._press_grabbed = False

        if self.tool is Tool.PEN:
            self.draft.append_anchor(event.x, event.y, self.defaults)
        elif self.tool is Tool.SELECT:
            if grabbed:
                return
            segment = self.document.segment_at(point, self.settings.canvas.hit_tolerance)
            if segment is not None:
                self.set_focus(segment)
        elif self.tool is Tool.ERASE:
            segment = self.document.segment_at(point, self.settings.canvas.hit_tolerance)
            if segment is not None:
                self.remove_segment(segment)

    def _hit_target(self, point: Point) -> Optional[DragTarget]:
        segment = self.focused_segment
        if segment is None:
            return None
        canvas = self.settings.canvas
        handle = segment.handle_at(point, canvas.handle_radius + canvas.hit_tolerance)
        if handle is not None:
            return handle
        return segment.anchor_at(point, canvas.anchor_radius + canvas.hit_tolerance)

    def _on_pointer_pressed(self, event: PointerPressed) -> None:
        self._drag_target = None
        self._press_grabbed = False
        if self.tool is not Tool.SELECT:
            return
        target = self._hit_target(Point(event.x, event.y))
        if target is None:
            return
        self._drag_target = target
        self._press_grabbed = True
        self.focused_anchor = target if isinstance(target, Anchor) else target.anchor

    def _on_pointer_dragged(self, event: PointerDragged) -> None:
        if self.tool is not Tool.SELECT or self._drag_target is None:
            return
        self._drag_target.drag(event.x, event.y)
        self.document.mark_dirty()

    def _on_pointer_released(self, event: PointerReleased) -> None:
        self._drag_target = None

    # =========================================================================
    # Keyboard
    # =========================================================================

    def _on_key_pressed(self, event: KeyPressed) -> None:
        if event.key is Key.ESCAPE:
            self._escape()
        elif event.key is Key.DELETE:
            if self.tool is Tool.SELECT and self.focused_segment is not None:
                self.remove_segment(self.focused_segment)

    # =========================================================================
    # Style
    # =========================================================================

    def _apply_style(self, style: StrokeStyle) -> None:
        if self.tool is Tool.PEN:
            if len(self.draft):
                self._commit_draft()
            self.defaults = style
        elif self.tool is Tool.SELECT and self.focused_segment is not None:
            self.defaults = style
            if self.focused_segment.restyle(style):
                self.document.mark_dirty()
        else:
            self.defaults = style

    def _on_color_chosen(self, event: ColorChosen) -> None:
        self._apply_style(self.defaults.replace(color=event.color))

    def _on_thickness_chosen(self, event: ThicknessChosen) -> None:
        self._apply_style(self.defaults.replace(thickness=event.thickness))

    def _on_dash_style_chosen(self, event: DashStyleChosen) -> None:
        self._apply_style(self.defaults.replace(dash_style=event.dash_style))

    def _on_toggle_smooth(self, event: ToggleSmoothRequested) -> None:
        if self.tool is not Tool.SELECT or self.focused_anchor is None:
            return
        self.focused_anchor.toggle_smooth()
        self.document.mark_dirty()

    # =========================================================================
    # Document operations
    # =========================================================================

    def remove_segment(self, segment: Segment) -> None:
        self.clear_focus()
        self.document.remove(segment)
        self.document.mark_dirty()
        log.info("Removed segment (%d left)", len(self.document))

    def _on_menu_command(self, event: MenuCommand) -> None:
        self._commands[event.command]()

    def _resolve_unsaved(self) -> bool:
        """Offer to save unsaved work. False means abandon the pending action."""
        if not self.document.dirty:
            return True
        if not self.dialogs.confirm_save():
            log.info("Discarding unsaved changes")
            return True
        return self.save()

    def new_document(self) -> None:
        self._escape()
        if not self._resolve_unsaved():
            return
        self.document.clear()
        self.document.mark_clean()
        self.current_path = None
        trace("New document", "IO")

    def load(self) -> None:
        self._escape()
        if not self._resolve_unsaved():
            return
        path = self.dialogs.ask_open_path()
        if not path:
            return
        self.load_path(path)

    @trace_call("IO")
    def load_path(self, path: Union[str, Path]) -> bool:
        """Replace the document with the contents of *path*.

        Errors are reported through the dialogs and leave the document as it
        was. Returns True on success.
        """
        try:
            segments = read_curve_file(path, self.rng, self.settings.handles.offset_range)
        except (OSError, UnicodeDecodeError, CurveFormatError) as exc:
            log.exception("Failed to load %s", path)
            self.dialogs.show_error("An error has occurred!", f"Could not load {path}:\n{exc}")
            return False
        self.clear_focus()
        self.document.replace(segments)
        self.document.mark_clean()
        self.current_path = Path(path)
        return True

    def save(self) -> bool:
        """Commit the active tool, ask for a path and write the document.

        Returns True only when the file was written.
        """
        self._escape()
        path = self.dialogs.ask_save_path()
        if not path:
            return False
        return self.save_path(path)

    @trace_call("IO")
    def save_path(self, path: Union[str, Path]) -> bool:
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(CURVE_FILE_SUFFIX)
        try:
            write_curve_file(path, self.document.segments)
        except OSError as exc:
            log.exception("Failed to save %s", path)
            self.dialogs.show_error("An error has occurred!", f"Could not save {path}:\n{exc}")
            return False
        self.document.mark_clean()
        self.current_path = path
        return True

    def quit(self) -> None:
        self._escape()
        if not self._resolve_unsaved():
            return
        self.quit_requested = True
        trace("Quit requested", "MAIN")

    # =========================================================================
    # Clipboard
    # =========================================================================

    def cut(self) -> None:
        segment = self.focused_segment
        if segment is None:
            return
        text = dump_segment(segment)
        self.remove_segment(segment)
        self.document.clipboard = text
        self.document.clipboard_offset = 0
        log.debug("Cut segment to clipboard")

    def copy(self) -> None:
        segment = self.focused_segment
        if segment is None:
            return
        self.document.clipboard = dump_segment(segment)
        self.document.clipboard_offset = self.settings.clipboard.paste_step
        log.debug("Copied segment to clipboard")

    def paste(self) -> None:
        text = self.document.clipboard
        if text is None:
            return
        segment = load_segment(text, self.rng, self.settings.handles.offset_range)
        offset = self.document.clipboard_offset
        segment.translate(offset, offset)
        self.document.add(segment)
        self.document.clipboard_offset += self.settings.clipboard.paste_step
        self.document.mark_dirty()
        log.debug("Pasted segment at offset %d", offset)

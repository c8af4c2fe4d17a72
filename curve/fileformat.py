"""
curve/fileformat.py

Reader and writer for the ``.curve`` text format.

The format is a flat grammar with four nested delimiters, outer to inner::

    document  *segment*segment*...*
    segment   |color|dash|thickness|anchor|anchor|...|
    anchor    :x:y:smooth:handle:handle:      (one or two handles)
    handle    %startX%startY%endX%endY%controlX%controlY%offsetX%offsetY%

Empty fields between adjacent delimiters are ignored. Colours are written as
``#RRGGBBAA``; ``#RRGGBB`` and the legacy ``0xRRGGBBAA`` form are accepted on
load. Of the eight handle numbers only the offset is used when loading, the
other six are derived positions kept for compatibility.

Loading builds fresh segments in two passes: the first appends every anchor
(which creates handles with throwaway offsets), the second applies the
smooth flags and the stored offsets.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from models import Color, DashStyle, StrokeStyle, validate_thickness
from curve.anchor import DEFAULT_OFFSET_RANGE, Anchor, Handle
from curve.geometry import Point
from curve.segment import Segment

log = logging.getLogger(__name__)

DOCUMENT_SEP = "*"
SEGMENT_SEP = "|"
ANCHOR_SEP = ":"
HANDLE_SEP = "%"

_HANDLE_FIELDS = 8
_TRUE = "true"
_FALSE = "false"


class CurveFormatError(ValueError):
    """Raised when .curve text cannot be parsed."""


# ----------------------------
# Writing
# ----------------------------

def _num(value: float) -> str:
    return repr(float(value))


def _wrap(sep: str, fields: Iterable[str]) -> str:
    return sep + "".join(f"{f}{sep}" for f in fields)


def dump_handle(handle: Handle) -> str:
    anchor = handle.anchor.position
    raw = handle.raw_position
    control = handle.position
    return _wrap(HANDLE_SEP, [
        _num(anchor.x), _num(anchor.y),
        _num(raw.x), _num(raw.y),
        _num(control.x), _num(control.y),
        _num(handle.offset.x), _num(handle.offset.y),
    ])


def dump_anchor(anchor: Anchor) -> str:
    fields = [_num(anchor.x), _num(anchor.y), _TRUE if anchor.smooth else _FALSE]
    fields.extend(dump_handle(h) for h in anchor.handles)
    return _wrap(ANCHOR_SEP, fields)


def dump_segment(segment: Segment) -> str:
    """Serialize one segment. The segment must have a style."""
    if segment.style is None:
        raise ValueError("Cannot serialize a segment without a style")
    style = segment.style
    fields = [style.color.to_hex(), style.dash_style.value, str(style.thickness)]
    fields.extend(dump_anchor(a) for a in segment.anchors)
    return _wrap(SEGMENT_SEP, fields)


def dump_document(segments: Iterable[Segment]) -> str:
    return _wrap(DOCUMENT_SEP, [dump_segment(s) for s in segments])


# ----------------------------
# Parsing
# ----------------------------

@dataclass
class _AnchorRecord:
    x: float
    y: float
    smooth: bool
    offsets: List[Point]


def _split(text: str, sep: str) -> List[str]:
    return [part for part in text.split(sep) if part.strip()]


def _float(token: str, where: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise CurveFormatError(f"{where}: expected a number, got {token!r}") from None
    if not math.isfinite(value):
        raise CurveFormatError(f"{where}: expected a finite number, got {token!r}")
    return value


def _parse_style(color_tok: str, dash_tok: str, thickness_tok: str) -> StrokeStyle:
    try:
        color = Color.from_hex(color_tok)
    except ValueError as exc:
        raise CurveFormatError(str(exc)) from None
    try:
        dash_style = DashStyle.from_name(dash_tok.strip())
    except ValueError as exc:
        raise CurveFormatError(str(exc)) from None
    try:
        thickness = validate_thickness(int(thickness_tok))
    except ValueError:
        raise CurveFormatError(f"Invalid thickness: {thickness_tok!r}") from None
    return StrokeStyle(color, thickness, dash_style)


def _parse_anchor(text: str, index: int, count: int) -> _AnchorRecord:
    where = f"anchor {index}"
    parts = _split(text, ANCHOR_SEP)
    if len(parts) < 3:
        raise CurveFormatError(f"{where}: expected x, y and smooth flag")

    x = _float(parts[0], where)
    y = _float(parts[1], where)
    flag = parts[2].strip().lower()
    if flag not in (_TRUE, _FALSE):
        raise CurveFormatError(f"{where}: smooth flag must be true or false, got {parts[2]!r}")

    expected = 1 if index in (0, count - 1) else 2
    handle_parts = parts[3:]
    if len(handle_parts) != expected:
        raise CurveFormatError(
            f"{where}: expected {expected} handle(s), found {len(handle_parts)}")

    offsets = []
    for h_index, h_text in enumerate(handle_parts):
        numbers = _split(h_text, HANDLE_SEP)
        h_where = f"{where} handle {h_index}"
        if len(numbers) != _HANDLE_FIELDS:
            raise CurveFormatError(
                f"{h_where}: expected {_HANDLE_FIELDS} numbers, found {len(numbers)}")
        values = [_float(n, h_where) for n in numbers]
        offsets.append(Point(values[6], values[7]))

    return _AnchorRecord(x, y, flag == _TRUE, offsets)


def load_segment(text: str, rng: Optional[random.Random] = None,
                 offset_range: Tuple[int, int] = DEFAULT_OFFSET_RANGE) -> Segment:
    """Parse one ``|...|`` segment into a new Segment.

    Raises:
        CurveFormatError: If the text is malformed.
    """
    fields = _split(text, SEGMENT_SEP)
    if len(fields) < 3:
        raise CurveFormatError("expected colour, dash style and thickness")

    style = _parse_style(*fields[:3])
    anchor_fields = fields[3:]
    if len(anchor_fields) < 2:
        raise CurveFormatError(f"a segment needs at least 2 anchors, found {len(anchor_fields)}")

    count = len(anchor_fields)
    records = [_parse_anchor(f, i, count) for i, f in enumerate(anchor_fields)]

    segment = Segment(style=style, rng=rng, offset_range=offset_range)
    for record in records:
        segment.append_anchor(record.x, record.y, style)
    for anchor, record in zip(segment.anchors, records):
        if not record.smooth:
            anchor.toggle_smooth()
        for handle, offset in zip(anchor.handles, record.offsets):
            handle.set_offset(offset)
    return segment


def load_document(text: str, rng: Optional[random.Random] = None,
                  offset_range: Tuple[int, int] = DEFAULT_OFFSET_RANGE) -> List[Segment]:
    """Parse a whole document. Nothing is returned unless every segment parses.

    Raises:
        CurveFormatError: If any segment is malformed.
    """
    segments = []
    for index, part in enumerate(_split(text.strip(), DOCUMENT_SEP)):
        try:
            segments.append(load_segment(part, rng, offset_range))
        except CurveFormatError as exc:
            for segment in segments:
                segment.clear()
            raise CurveFormatError(f"segment {index}: {exc}") from None
    return segments


# ----------------------------
# Files
# ----------------------------

PathLike = Union[str, Path]


def read_curve_file(path: PathLike, rng: Optional[random.Random] = None,
                    offset_range: Tuple[int, int] = DEFAULT_OFFSET_RANGE) -> List[Segment]:
    """Read and parse a .curve file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8.
        CurveFormatError: If the contents are malformed.
    """
    text = Path(path).read_text(encoding="utf-8")
    segments = load_document(text, rng, offset_range)
    log.info("Loaded %d segment(s) from %s", len(segments), path)
    return segments


def write_curve_file(path: PathLike, segments: Iterable[Segment]) -> None:
    """Serialize *segments* to *path*, replacing any existing file.

    Raises:
        OSError: If the file cannot be written.
    """
    segments = list(segments)
    text = dump_document(segments)
    Path(path).write_text(text, encoding="utf-8")
    log.info("Saved %d segment(s) to %s", len(segments), path)

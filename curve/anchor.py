"""
curve/anchor.py

Anchors (points the curve passes through) and their tangent handles.

Both expose an ordered list of listeners which are invoked synchronously,
in registration order, before the mutating call returns.
"""

from __future__ import annotations

import math
import random
from typing import Callable, List, Optional, Tuple

from models import HandleRole
from curve.geometry import LineSegment, Point

Listener = Callable[[Point], None]

# Default range for the magnitude of each component of a fresh handle offset
DEFAULT_OFFSET_RANGE: Tuple[int, int] = (30, 60)


class Handle:
    """A tangent control attached to an anchor.

    The handle stores an offset relative to its anchor. While the anchor is
    smooth the handle sits at ``anchor + offset``; on a corner anchor its
    effective position collapses onto the anchor, but the offset is kept.

    Args:
        anchor: Owning anchor.
        role: Whether the handle controls the incoming or outgoing cubic.
        offset: Initial offset. When omitted, the offset mirrors the anchor's
            existing handle, or is picked at random if there is none.
        rng: Random source for the initial offset.
        offset_range: ``(low, high)`` bounds for each random offset component.
    """

    def __init__(self, anchor: "Anchor", role: HandleRole, offset: Optional[Point] = None,
                 rng: Optional[random.Random] = None,
                 offset_range: Tuple[int, int] = DEFAULT_OFFSET_RANGE):
        self.anchor = anchor
        self.role = role
        self.listeners: List[Listener] = []
        if offset is None:
            offset = self._initial_offset(rng or random.Random(), offset_range)
        self.offset = offset

    def _initial_offset(self, rng: random.Random, offset_range: Tuple[int, int]) -> Point:
        if self.anchor.handles:
            # Opposite of the existing handle gives a straight tangent
            return -self.anchor.handles[0].offset
        low, high = offset_range

        def component() -> float:
            return float(rng.randrange(low, high) * rng.choice((-1, 1)))

        return Point(component(), component())

    # ---- Derived positions ----

    @property
    def raw_position(self) -> Point:
        """``anchor + offset``, regardless of the smooth flag."""
        return self.anchor.position + self.offset

    @property
    def position(self) -> Point:
        """Effective absolute position used by the bound cubic."""
        if self.anchor.smooth:
            return self.raw_position
        return self.anchor.position

    @property
    def line(self) -> LineSegment:
        """Guide line from the anchor to the handle."""
        return LineSegment(self.anchor.position, self.raw_position)

    @property
    def sibling(self) -> Optional["Handle"]:
        for other in self.anchor.handles:
            if other is not self:
                return other
        return None

    # ---- Notification ----

    def bind(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def notify(self) -> None:
        """Invoke each listener with the handle's effective position."""
        pos = self.position
        for listener in list(self.listeners):
            listener(pos)

    # ---- Mutation ----

    def set_offset(self, offset: Point) -> None:
        self.offset = offset
        self.notify()

    def drag(self, x: float, y: float) -> None:
        """Move the handle to (x, y).

        On a smooth anchor with two handles the sibling is swung round to
        point the opposite way, keeping its own length.
        """
        self.set_offset(Point(x, y) - self.anchor.position)

        sibling = self.sibling
        if not self.anchor.smooth or sibling is None:
            return

        distance = sibling.offset.length()
        angle = math.atan2(self.offset.y, self.offset.x) + math.pi
        sibling.set_offset(Point(distance * math.cos(angle), distance * math.sin(angle)))

    def __repr__(self) -> str:
        return f"Handle({self.role.value}, offset=({self.offset.x}, {self.offset.y}))"


class Anchor:
    """A positioned point with up to two handles and a smooth/corner flag."""

    def __init__(self, x: float, y: float):
        self.position = Point(x, y)
        self.smooth = True
        self.handles: List[Handle] = []
        self.listeners: List[Listener] = []

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def handle_for(self, role: HandleRole) -> Optional[Handle]:
        for handle in self.handles:
            if handle.role is role:
                return handle
        return None

    @property
    def incoming(self) -> Optional[Handle]:
        return self.handle_for(HandleRole.INCOMING)

    @property
    def outgoing(self) -> Optional[Handle]:
        return self.handle_for(HandleRole.OUTGOING)

    def add_handle(self, role: HandleRole, rng: Optional[random.Random] = None,
                   offset_range: Tuple[int, int] = DEFAULT_OFFSET_RANGE) -> Handle:
        """Attach a new handle for *role*.

        Raises:
            ValueError: If the anchor already has a handle for that role.
        """
        if self.handle_for(role) is not None:
            raise ValueError(f"Anchor already has an {role.value} handle")
        handle = Handle(self, role, rng=rng, offset_range=offset_range)
        self.handles.append(handle)
        return handle

    def bind(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def notify(self) -> None:
        pos = self.position
        for listener in list(self.listeners):
            listener(pos)
        # Handle positions are anchor-relative, so they moved too
        for handle in self.handles:
            handle.notify()

    def drag(self, x: float, y: float) -> None:
        """Move the anchor; handle offsets are left untouched."""
        self.position = Point(x, y)
        self.notify()

    def move_by(self, dx: float, dy: float) -> None:
        self.drag(self.position.x + dx, self.position.y + dy)

    def toggle_smooth(self) -> None:
        """Flip between smooth and corner. Stored offsets never change."""
        self.smooth = not self.smooth
        for handle in self.handles:
            handle.notify()

    def clear_listeners(self) -> None:
        self.listeners.clear()
        for handle in self.handles:
            handle.listeners.clear()

    def __repr__(self) -> str:
        kind = "smooth" if self.smooth else "corner"
        return f"Anchor(({self.position.x}, {self.position.y}), {kind}, handles={len(self.handles)})"

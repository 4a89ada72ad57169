"""Split session: divider offset and drag state driven by pointer events."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from dynamic_split.geometry import (
    Axis,
    Rect,
    midpoint_offset,
    point_in_rect,
    primary_extent,
    primary_origin,
)

logger = logging.getLogger(__name__)


class PointerKind(enum.Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL = "scroll"


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    NONE = "none"


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in grid coordinates."""

    kind: PointerKind
    row: int
    column: int
    button: MouseButton = MouseButton.LEFT


@dataclass
class SplitSession:
    """Persistent state of one split: axis, last container, offset, drag flag.

    ``offset`` stays None until first needed, then settles on the midpoint of
    the last container seen by ``compute``. Not thread-safe; the owner
    serialises geometry queries and pointer events.
    """

    axis: Axis = Axis.VERTICAL
    last_area: Rect = field(default_factory=Rect)
    offset: int | None = None
    dragging: bool = False

    def resolve_offset(self) -> int:
        """Return the offset, storing the midpoint default if it was unset."""
        if self.offset is None:
            self.offset = midpoint_offset(self.last_area, self.axis)
        return self.offset

    def reset(self) -> None:
        """Forget the offset and any drag so the next query re-centres the divider."""
        self.offset = None
        self.dragging = False

    def divider_position(self) -> int:
        """Grid coordinate of the divider row (VERTICAL) or column (HORIZONTAL)."""
        return primary_origin(self.last_area, self.axis) + self.resolve_offset()

    def handle_pointer_event(self, event: PointerEvent) -> None:
        """Advance the drag state machine by one pointer event.

        A left press exactly on the divider starts a drag, a left release
        ends it, and left drags in between move the divider, clamped to the
        last known container. Anything else is ignored.
        """
        offset = self.resolve_offset()
        if event.button is not MouseButton.LEFT:
            return

        if self.dragging and event.kind is PointerKind.UP:
            self.dragging = False
            logger.debug("Drag finished at offset %d", offset)
        elif not self.dragging and event.kind is PointerKind.DOWN:
            if not point_in_rect(self.last_area, event.row, event.column):
                return
            if self._pointer_coordinate(event) == self.divider_position():
                self.dragging = True
                logger.debug("Drag started on divider at offset %d", offset)
        elif self.dragging and event.kind is PointerKind.DRAG:
            self.offset = self._drag_offset(self._pointer_coordinate(event))
            if self.offset != offset:
                logger.debug("Divider moved %d -> %d", offset, self.offset)

    def _pointer_coordinate(self, event: PointerEvent) -> int:
        return event.row if self.axis is Axis.VERTICAL else event.column

    def _drag_offset(self, pointer: int) -> int:
        origin = primary_origin(self.last_area, self.axis)
        extent = primary_extent(self.last_area, self.axis)
        if pointer <= origin:
            return 0
        if pointer > origin + extent:
            return extent
        return pointer - origin

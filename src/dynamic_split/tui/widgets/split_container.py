"""Resizable split pane container with draggable divider."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.events import MouseDown, MouseMove, MouseScrollDown, MouseScrollUp, MouseUp
from textual.message import Message
from textual.widget import Widget

from dynamic_split.geometry import Axis, Rect, SplitSpec, primary_extent, primary_origin
from dynamic_split.session import MouseButton, PointerEvent, PointerKind, SplitSession

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.events import MouseEvent

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}


def pointer_event_from_mouse(event: MouseEvent, origin: tuple[int, int] = (0, 0)) -> PointerEvent:
    """Translate a Textual mouse event into a PointerEvent relative to origin (x, y)."""
    if isinstance(event, MouseDown):
        kind = PointerKind.DOWN
    elif isinstance(event, MouseUp):
        kind = PointerKind.UP
    elif isinstance(event, (MouseScrollDown, MouseScrollUp)):
        kind = PointerKind.SCROLL
    elif isinstance(event, MouseMove) and event.button:
        kind = PointerKind.DRAG
    else:
        kind = PointerKind.MOVED
    origin_x, origin_y = origin
    return PointerEvent(
        kind=kind,
        row=int(event.screen_y) - origin_y,
        column=int(event.screen_x) - origin_x,
        button=_BUTTONS.get(event.button, MouseButton.NONE),
    )


class _Divider(Widget):
    """Draggable divider bar between two panes."""

    DEFAULT_CSS = """
    _Divider {
        background: $primary;
        color: $text;
    }
    _Divider.-dragging {
        background: $accent;
    }
    """

    def __init__(self, axis: Axis) -> None:
        super().__init__()
        self.axis = axis

    def render(self) -> Text:
        if self.axis is Axis.VERTICAL:
            return Text("─" * self.size.width)
        return Text("\n".join("│" * self.size.height))


class SplitContainer(Widget):
    """A two-pane split container with a draggable divider.

    The first child goes in the top (or left) pane, the second in the bottom
    (or right) pane. Pane sizes come from ``compute`` applied to the
    container's own area with its origin at (0, 0); mouse coordinates are
    translated into the same frame before they reach the session. Nest
    containers to get more than two panes.

    Dragging past the far edge puts the divider at offset == extent, one cell
    outside the container. Released there it cannot be grabbed again;
    ``recenter`` brings it back.
    """

    DEFAULT_CSS = """
    SplitContainer {
        height: 1fr;
        width: 1fr;
        overflow: hidden;
    }
    """

    class OffsetChanged(Message):
        """Posted when the divider moves."""

        def __init__(self, container: SplitContainer, offset: int) -> None:
            super().__init__()
            self.container = container
            self.offset = offset

    def __init__(
        self,
        first: Widget,
        second: Widget,
        *,
        axis: Axis = Axis.VERTICAL,
        session: SplitSession | None = None,
        id: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(id=id)
        self._first = first
        self._second = second
        self.axis = axis
        self.session = session if session is not None else SplitSession()
        self._divider = _Divider(axis)
        self.styles.layout = "vertical" if axis is Axis.VERTICAL else "horizontal"

    def compose(self) -> ComposeResult:
        yield self._first
        yield self._divider
        yield self._second

    def on_mount(self) -> None:
        """Apply initial split."""
        self.refresh_split()

    def on_resize(self) -> None:
        """Re-apply split on container resize."""
        self.refresh_split()

    @property
    def offset(self) -> int:
        return self.session.resolve_offset()

    def refresh_split(self) -> tuple[Rect, Rect] | None:
        """Recompute pane geometry from the session and resize the children.

        Does nothing until the container has been laid out, so the default
        offset is taken from a real area.
        """
        if not self.size.width or not self.size.height:
            return None
        area = Rect(0, 0, self.size.width, self.size.height)
        first, second = SplitSpec(self.axis, area).areas(self.session)
        first_end = primary_origin(first, self.axis) + primary_extent(first, self.axis)
        gap = max(0, primary_origin(second, self.axis) - first_end)
        # The divider occupies the leading cell of the second area
        second_extent = max(0, primary_extent(second, self.axis) - 1)
        if self.axis is Axis.VERTICAL:
            self._size_child(self._first, first.width, first.height)
            self._first.styles.margin = (0, 0, gap, 0)
            self._size_child(self._divider, area.width, 1)
            self._size_child(self._second, second.width, second_extent)
        else:
            self._size_child(self._first, first.width, first.height)
            self._first.styles.margin = (0, gap, 0, 0)
            self._size_child(self._divider, 1, area.height)
            self._size_child(self._second, second_extent, second.height)
        return first, second

    @staticmethod
    def _size_child(child: Widget, width: int, height: int) -> None:
        child.styles.width = width
        child.styles.height = height

    def recenter(self) -> None:
        """Move the divider back to the midpoint."""
        self.session.reset()
        self.refresh_split()
        self.post_message(self.OffsetChanged(self, self.offset))

    def _feed(self, event: MouseEvent) -> None:
        self.session.handle_pointer_event(
            pointer_event_from_mouse(event, origin=(self.region.x, self.region.y))
        )

    def on_mouse_down(self, event: MouseDown) -> None:
        """Start dragging if click is on the divider."""
        self._feed(event)
        if self.session.dragging:
            self.capture_mouse()
            self._divider.add_class("-dragging")
            event.stop()

    def on_mouse_move(self, event: MouseMove) -> None:
        """Resize panes during drag."""
        if not self.session.dragging:
            return
        before = self.offset
        self._feed(event)
        if self.offset != before:
            self.refresh_split()
            self.post_message(self.OffsetChanged(self, self.offset))
        event.stop()

    def on_mouse_up(self, event: MouseUp) -> None:
        """Stop dragging."""
        if not self.session.dragging:
            return
        self._feed(event)
        if not self.session.dragging:
            self.release_mouse()
            self._divider.remove_class("-dragging")
            event.stop()

"""Shared fixtures: sessions in known states, pointer event builders."""

from __future__ import annotations

import pytest

from dynamic_split.geometry import Axis, Rect
from dynamic_split.session import MouseButton, PointerEvent, PointerKind, SplitSession

CONTAINER = Rect(x=0, y=0, width=10, height=20)


def press(row: int, column: int, button: MouseButton = MouseButton.LEFT) -> PointerEvent:
    return PointerEvent(PointerKind.DOWN, row=row, column=column, button=button)


def release(row: int, column: int, button: MouseButton = MouseButton.LEFT) -> PointerEvent:
    return PointerEvent(PointerKind.UP, row=row, column=column, button=button)


def drag(row: int, column: int) -> PointerEvent:
    return PointerEvent(PointerKind.DRAG, row=row, column=column)


@pytest.fixture
def vertical_session() -> SplitSession:
    """Idle vertical session at offset 10 over a 10x20 container."""
    return SplitSession(axis=Axis.VERTICAL, last_area=CONTAINER, offset=10)


@pytest.fixture
def dragging_session(vertical_session: SplitSession) -> SplitSession:
    """The vertical session with a drag in progress."""
    vertical_session.dragging = True
    return vertical_session

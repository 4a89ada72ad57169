"""Tests for geometry.py: compute(), SplitSpec and rectangle helpers."""

from __future__ import annotations

import pytest

from dynamic_split.geometry import Axis, Rect, SplitSpec, compute, point_in_rect
from dynamic_split.session import SplitSession

# === compute() ===


def test_vertical_split_leaves_divider_row_between_panes() -> None:
    """Midpoint split of a 10x20 container excludes the divider row from both panes."""
    session = SplitSession()
    first, second = compute(SplitSpec.vertical(Rect(0, 0, 10, 20)), session)
    assert session.offset == 10
    assert first == Rect(x=0, y=0, width=10, height=9)
    assert second == Rect(x=0, y=10, width=10, height=10)


def test_horizontal_split_uses_width() -> None:
    """Horizontal split divides along x and keeps the full height."""
    session = SplitSession(offset=4)
    first, second = compute(SplitSpec.horizontal(Rect(0, 0, 12, 5)), session)
    assert first == Rect(x=0, y=0, width=3, height=5)
    assert second == Rect(x=4, y=0, width=8, height=5)


def test_first_extent_counts_from_container_origin() -> None:
    """The first pane extent is origin + offset - 1, including the container origin."""
    session = SplitSession(offset=4)
    first, second = compute(SplitSpec.vertical(Rect(2, 3, 10, 20)), session)
    assert first == Rect(x=2, y=3, width=10, height=6)
    assert second == Rect(x=2, y=7, width=10, height=16)


def test_compute_is_idempotent() -> None:
    """Two queries with the same spec and untouched session give identical panes."""
    session = SplitSession()
    spec = SplitSpec.horizontal(Rect(5, 1, 31, 9))
    assert compute(spec, session) == compute(spec, session)
    assert spec.areas(session) == compute(spec, session)


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        (SplitSpec.vertical(Rect(0, 0, 10, 21)), 10),
        (SplitSpec.horizontal(Rect(0, 0, 7, 3)), 3),
    ],
)
def test_default_offset_is_floor_midpoint(spec: SplitSpec, expected: int) -> None:
    """A fresh session resolves its offset to half the split extent, rounded down."""
    session = SplitSession()
    compute(spec, session)
    assert session.offset == expected


def test_compute_records_axis_and_container() -> None:
    """compute() overwrites the session's axis and last known area."""
    session = SplitSession(offset=2)
    container = Rect(1, 1, 8, 8)
    compute(SplitSpec.horizontal(container), session)
    assert session.axis is Axis.HORIZONTAL
    assert session.last_area == container
    assert session.offset == 2


def test_existing_offset_is_not_recentered() -> None:
    """A set offset survives a container resize."""
    session = SplitSession(offset=3)
    compute(SplitSpec.vertical(Rect(0, 0, 10, 40)), session)
    assert session.offset == 3


@pytest.mark.parametrize("axis", list(Axis))
@pytest.mark.parametrize("offset", [1, 5, 9, 14])
def test_cross_axis_is_preserved(axis: Axis, offset: int) -> None:
    """Both panes keep the container's cross-axis origin and extent."""
    container = Rect(3, 4, 15, 15)
    first, second = compute(SplitSpec(axis, container), SplitSession(offset=offset))
    for pane in (first, second):
        if axis is Axis.VERTICAL:
            assert (pane.x, pane.width) == (container.x, container.width)
        else:
            assert (pane.y, pane.height) == (container.y, container.height)


# === degenerate geometry ===


def test_zero_offset_at_origin_saturates_first_pane() -> None:
    """Offset 0 at y=0 gives an empty first pane instead of a negative height."""
    first, second = compute(SplitSpec.vertical(Rect(0, 0, 10, 20)), SplitSession(offset=0))
    assert first.height == 0
    assert second == Rect(0, 0, 10, 20)


def test_offset_beyond_container_saturates_second_pane() -> None:
    """An offset past the far edge leaves the second pane empty."""
    first, second = compute(SplitSpec.horizontal(Rect(0, 0, 6, 2)), SplitSession(offset=9))
    assert first.width == 8
    assert second == Rect(x=9, y=0, width=0, height=2)


def test_empty_container() -> None:
    """A zero-sized container yields two empty panes without raising."""
    session = SplitSession()
    first, second = compute(SplitSpec.vertical(Rect()), session)
    assert session.offset == 0
    assert first == Rect()
    assert second == Rect()


# === Axis / Rect helpers ===


def test_axis_parse() -> None:
    """Axis names parse case-insensitively; unknown names raise ValueError."""
    assert Axis.parse("Vertical") is Axis.VERTICAL
    assert Axis.parse(" horizontal ") is Axis.HORIZONTAL
    assert Axis.VERTICAL.other is Axis.HORIZONTAL
    with pytest.raises(ValueError, match="diagonal"):
        Axis.parse("diagonal")


def test_point_in_rect_includes_far_edges() -> None:
    """The hit-test treats y + height and x + width as inside."""
    rect = Rect(2, 2, 4, 3)
    assert point_in_rect(rect, 2, 2)
    assert point_in_rect(rect, 5, 6)
    assert rect.contains(5, 6)
    assert not point_in_rect(rect, 6, 6)
    assert not point_in_rect(rect, 5, 7)
    assert not point_in_rect(rect, 1, 3)
    assert not point_in_rect(rect, 3, 1)


def test_rect_as_dict() -> None:
    """as_dict() emits the four fields for JSON output."""
    assert Rect(1, 2, 3, 4).as_dict() == {"x": 1, "y": 2, "width": 3, "height": 4}

"""Split geometry: divide a container rectangle into two panes around a divider."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dynamic_split.session import SplitSession


class Axis(enum.Enum):
    """Direction along which a container is divided.

    VERTICAL stacks the panes top/bottom (the divider is a row),
    HORIZONTAL puts them side by side (the divider is a column).
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def parse(cls, name: str) -> Axis:
        """Look up an axis by its name, case-insensitively."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            msg = f"Unknown axis {name!r}, expected 'vertical' or 'horizontal'"
            raise ValueError(msg) from None

    @property
    def other(self) -> Axis:
        return Axis.HORIZONTAL if self is Axis.VERTICAL else Axis.VERTICAL


@dataclass(frozen=True)
class Rect:
    """A region of character cells: top-left corner plus extent."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def contains(self, row: int, column: int) -> bool:
        """Hit-test a cell; the far edges (y + height, x + width) count as inside."""
        return point_in_rect(self, row, column)

    def as_dict(self) -> dict[str, int]:
        return dataclasses.asdict(self)


def point_in_rect(rect: Rect, row: int, column: int) -> bool:
    """Return True if (row, column) lies within rect, far edges inclusive."""
    if row < rect.y or row > rect.y + rect.height:
        return False
    return rect.x <= column <= rect.x + rect.width


# === Axis projections ===


def primary_origin(rect: Rect, axis: Axis) -> int:
    """Coordinate of rect's near edge along the split axis."""
    return rect.y if axis is Axis.VERTICAL else rect.x


def primary_extent(rect: Rect, axis: Axis) -> int:
    """Size of rect along the split axis."""
    return rect.height if axis is Axis.VERTICAL else rect.width


def _with_primary(rect: Rect, axis: Axis, origin: int, extent: int) -> Rect:
    extent = max(0, extent)
    if axis is Axis.VERTICAL:
        return dataclasses.replace(rect, y=origin, height=extent)
    return dataclasses.replace(rect, x=origin, width=extent)


def midpoint_offset(rect: Rect, axis: Axis) -> int:
    """Default divider offset: half the container along the split axis, rounded down."""
    return primary_extent(rect, axis) // 2


# === Splitter ===


@dataclass(frozen=True)
class SplitSpec:
    """Per-query split configuration: which axis, and the container to divide."""

    axis: Axis
    container: Rect

    @classmethod
    def vertical(cls, container: Rect) -> SplitSpec:
        return cls(Axis.VERTICAL, container)

    @classmethod
    def horizontal(cls, container: Rect) -> SplitSpec:
        return cls(Axis.HORIZONTAL, container)

    def areas(self, session: SplitSession) -> tuple[Rect, Rect]:
        """Shorthand for ``compute(self, session)``."""
        return compute(self, session)


def compute(spec: SplitSpec, session: SplitSession) -> tuple[Rect, Rect]:
    """Compute the (first, second) pane rectangles for spec.

    Records the axis and container on the session and resolves an unset
    offset to the container's midpoint. Along the split axis the first pane
    gets extent ``origin + offset - 1`` and the second pane starts at
    ``origin + offset`` with the remaining extent; the cross axis is copied
    from the container unchanged.

    Containers too small for the offset are not rejected. Any extent the
    arithmetic drives below zero is saturated at 0, so offset 0 at origin 0
    yields an empty first pane and an offset beyond the container yields an
    empty second pane.
    """
    session.axis = spec.axis
    session.last_area = spec.container
    offset = session.resolve_offset()

    container = spec.container
    origin = primary_origin(container, spec.axis)
    extent = primary_extent(container, spec.axis)

    first = _with_primary(container, spec.axis, origin, origin + offset - 1)
    second = _with_primary(container, spec.axis, origin + offset, extent - offset)
    return first, second

"""Enumerations and small value types shared by the UI components and layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from mogi.vector import Vec2

FLEX_BASIS_AUTO = -1.0


class Display(IntEnum):
    """How a component takes part in layout."""

    BLOCK = 0
    INLINE = 1
    FLEX = 2
    GRID = 3
    NONE = 4


class PositionType(IntEnum):
    """Whether a position is in window coordinates or relative to the parent."""

    ABSOLUTE = 0
    RELATIVE = 1


@dataclass(frozen=True)
class Position:
    """A component's position and how it is interpreted."""

    x: float = 0.0
    y: float = 0.0
    type: PositionType = PositionType.ABSOLUTE

    def to_vec(self) -> Vec2:
        """Return the coordinates as a new vector."""
        return Vec2(self.x, self.y)


class ComponentKind(IntEnum):
    """The concrete type of a component."""

    CONTAINER = 0
    TEXT = 1
    BUTTON = 2
    IMAGE = 3
    TABLE = 4

    def __str__(self) -> str:
        return self.name.capitalize()


class FlexDirection(IntEnum):
    ROW = 0
    ROW_REVERSE = 1
    COLUMN = 2
    COLUMN_REVERSE = 3


class FlexWrap(IntEnum):
    NO_WRAP = 0
    WRAP = 1
    WRAP_REVERSE = 2


class JustifyContent(IntEnum):
    FLEX_START = 0
    FLEX_END = 1
    CENTER = 2
    SPACE_BETWEEN = 3
    SPACE_AROUND = 4
    SPACE_EVENLY = 5


class AlignItems(IntEnum):
    """Alignment along the cross axis; also used for align-self and align-content."""

    STRETCH = 0
    FLEX_START = 1
    FLEX_END = 2
    CENTER = 3
    BASELINE = 4
    SELF_AUTO = -1


@dataclass
class FlexItemProps:
    """Properties of a component acting as an item inside a flex container."""

    grow: float = 0.0
    shrink: float = 1.0
    basis: float = FLEX_BASIS_AUTO
    align_self: AlignItems = AlignItems.SELF_AUTO
    order: int = 0


@dataclass
class FlexContainerProps:
    """Properties of a component acting as a flex container."""

    enabled: bool = False
    direction: FlexDirection = FlexDirection.ROW
    wrap: FlexWrap = FlexWrap.NO_WRAP
    justify: JustifyContent = JustifyContent.FLEX_START
    align_items: AlignItems = AlignItems.STRETCH
    align_content: AlignItems = AlignItems.STRETCH
    gap: float = field(default=0.0)
"""The base component shared by every UI element."""

from __future__ import annotations

from typing import TypeVar

from mogi.color import BLACK, RGBA, TRANSPARENT, Color
from mogi.ui.consts import (
    FLEX_BASIS_AUTO,
    AlignItems,
    ComponentKind,
    Display,
    FlexItemProps,
    Position,
    PositionType,
)
from mogi.vector import Vec2

_C = TypeVar("_C", bound="Component")


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Component:
    """A node in the UI tree with box-model properties and a parent link.

    The ``set_*`` methods return the component itself so calls can be chained.
    """

    def __init__(self, kind: ComponentKind) -> None:
        self.kind: ComponentKind = kind
        self.pos: Position = Position(0, 0, PositionType.RELATIVE)
        self.size: Vec2 = Vec2()
        self.id: str = ""
        self.full_id: str = ""
        self.children: list[Component] = []
        self.parent: Component | None = None
        self.display: Display = Display.INLINE
        self.margin: Vec2 = Vec2()
        self.padding: Vec2 = Vec2()
        self.border: Vec2 = Vec2()
        self.border_radius: float = 0.0
        self.gap: Vec2 = Vec2()
        self.border_color: RGBA = BLACK
        self.background_color: RGBA = TRANSPARENT
        self.flex_item: FlexItemProps = FlexItemProps()
        self.z_index: int = 0
        self.size_percent: Vec2 = Vec2()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, kind={self.kind!s})"

    @property
    def width_percent(self) -> float:
        return self.size_percent.x

    @property
    def height_percent(self) -> float:
        return self.size_percent.y

    def absolute_pos(self) -> Vec2:
        """Return the position in window coordinates."""
        if self.pos.type == PositionType.ABSOLUTE or self.parent is None:
            return self.pos.to_vec()
        return self.pos.to_vec().add(self.parent.absolute_pos())

    def absolute_z_index(self) -> int:
        """Return the stacking order, accumulated through relative ancestors."""
        if self.pos.type == PositionType.ABSOLUTE or self.parent is None:
            return self.z_index
        return self.z_index + self.parent.absolute_z_index() + 1

    def contains_point(self, point: Vec2) -> bool:
        """Return whether ``point`` lies within the component's box, edges included."""
        origin = self.absolute_pos()
        return (
            origin.x <= point.x <= origin.x + self.size.x
            and origin.y <= point.y <= origin.y + self.size.y
        )

    def set_id(self: _C, id: str) -> _C:  # noqa: A002
        self.id = id
        return self

    def set_display(self: _C, display: Display) -> _C:
        self.display = display
        return self

    def set_position(self: _C, pos: Position) -> _C:
        self.pos = pos
        return self

    def set_size(self: _C, size: Vec2) -> _C:
        self.size = size.clone()
        return self

    def set_margin(self: _C, margin: Vec2) -> _C:
        self.margin = margin.clone()
        return self

    def set_padding(self: _C, padding: Vec2) -> _C:
        self.padding = padding.clone()
        return self

    def set_border(self: _C, border: Vec2) -> _C:
        self.border = border.clone()
        return self

    def set_border_radius(self: _C, radius: float) -> _C:
        self.border_radius = max(radius, 0)
        return self

    def set_border_color(self: _C, color: Color) -> _C:
        self.border_color = color.to_rgba()
        return self

    def set_background_color(self: _C, color: Color) -> _C:
        self.background_color = color.to_rgba()
        return self

    def set_gap(self: _C, gap: Vec2) -> _C:
        self.gap = gap.clone()
        return self

    def set_z_index(self: _C, z_index: int) -> _C:
        self.z_index = z_index
        return self

    def set_width_percent(self: _C, percent: float) -> _C:
        self.size_percent.x = _clamp(percent, 0, 100)
        return self

    def set_height_percent(self: _C, percent: float) -> _C:
        self.size_percent.y = _clamp(percent, 0, 100)
        return self

    def set_flex_grow(self: _C, grow: float) -> _C:
        self.flex_item.grow = max(grow, 0)
        return self

    def set_flex_shrink(self: _C, shrink: float) -> _C:
        self.flex_item.shrink = max(shrink, 0)
        return self

    def set_flex_basis(self: _C, basis: float) -> _C:
        self.flex_item.basis = basis
        return self

    def set_flex_basis_auto(self: _C) -> _C:
        self.flex_item.basis = FLEX_BASIS_AUTO
        return self

    def set_align_self(self: _C, align: AlignItems) -> _C:
        self.flex_item.align_self = align
        return self

    def set_order(self: _C, order: int) -> _C:
        self.flex_item.order = order
        return self
"""A component that holds and lays out child components."""

from __future__ import annotations

from mogi.ui.component import Component
from mogi.ui.consts import (
    AlignItems,
    ComponentKind,
    FlexContainerProps,
    FlexDirection,
    FlexWrap,
    JustifyContent,
)


class Container(Component):
    """A box that owns an ordered list of children."""

    def __init__(self) -> None:
        super().__init__(ComponentKind.CONTAINER)
        self.flex_container: FlexContainerProps = FlexContainerProps()

    def add_child(self, child: Component) -> Container:
        """Append ``child`` and make this container its parent."""
        if child is None:
            raise ValueError("child component cannot be None")
        self.children.append(child)
        child.parent = self
        return self

    def add_children(self, *args: Component) -> Container:
        """Append each of the given children in order."""
        for child in args:
            self.add_child(child)
        return self

    def set_children(self, *args: Component) -> Container:
        """Replace all children with the given ones."""
        self.children = []
        return self.add_children(*args)

    def set_flex_enabled(self, enabled: bool) -> Container:
        self.flex_container.enabled = enabled
        return self

    def set_flex_direction(self, direction: FlexDirection) -> Container:
        self.flex_container.direction = direction
        return self

    def set_flex_wrap(self, wrap: FlexWrap) -> Container:
        self.flex_container.wrap = wrap
        return self

    def set_justify_content(self, justify: JustifyContent) -> Container:
        self.flex_container.justify = justify
        return self

    def set_align_items(self, align: AlignItems) -> Container:
        self.flex_container.align_items = align
        return self

    def set_align_content(self, align: AlignItems) -> Container:
        self.flex_container.align_content = align
        return self
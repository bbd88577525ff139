"""Two-pass flow layout and per-frame component state tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from mogi.ui.button import Button
from mogi.ui.component import Component
from mogi.ui.consts import Display, Position, PositionType
from mogi.ui.container import Container
from mogi.ui.image import Image
from mogi.ui.primitives import to_primitives
from mogi.ui.text import Text
from mogi.ui.wrap import wrapped_size
from mogi.vector import Vec2

logger = logging.getLogger(__name__)

Measure = Callable[[str, float], float]

_BUTTON_PADDING_X = 15.0
_BUTTON_PADDING_Y = 5.0


@dataclass(frozen=True)
class ComponentState:
    """State carried over from one frame to the next for a component."""

    is_mouse_over: bool = False
    is_pressed: bool = False
    display: Display = Display.BLOCK


class LayoutEngine:
    """Sizes and positions a component tree and remembers state between frames."""

    def __init__(self, measure: Measure) -> None:
        self.measure: Measure = measure
        self._alive: set[str] = set()
        self._count: dict[str, int] = {}
        self.state: dict[str, ComponentState] = {}

    def begin_layout(self) -> None:
        """Start a new frame: forget the IDs seen and the sibling counters."""
        self._alive = set()
        self._count = {}

    def end_layout(self) -> frozenset[str]:
        """Finish the frame and return the full IDs registered during it."""
        return frozenset(self._alive)

    def copy_state_to_components(self, component: Optional[Component]) -> None:
        """Restore stored state onto ``component`` and all its descendants."""
        if component is None:
            return
        state = self.state.setdefault(component.full_id, ComponentState())
        component.display = state.display
        if isinstance(component, Button):
            component.is_mouse_over = state.is_mouse_over
            component.is_pressed = state.is_pressed
        for child in component.children:
            self.copy_state_to_components(child)

    def copy_state_from_components(self, component: Optional[Component]) -> None:
        """Store the state of ``component`` and all its descendants."""
        if component is None:
            return
        is_mouse_over = is_pressed = False
        if isinstance(component, Button):
            is_mouse_over = component.is_mouse_over
            is_pressed = component.is_pressed
        self.state[component.full_id] = ComponentState(
            is_mouse_over=is_mouse_over,
            is_pressed=is_pressed,
            display=component.display,
        )
        for child in component.children:
            self.copy_state_from_components(child)

    def calculate_wrapped_text_size(self, text: str, font_size: float, max_line_width: float) -> Vec2:
        """Return the size of ``text`` wrapped to ``max_line_width``."""
        return wrapped_size(text, font_size, max_line_width, self.measure)

    def layout(self, root: Component, origin: Vec2, available_size: Vec2) -> None:
        """Compute sizes bottom-up, then positions top-down."""
        self._calculate_size(root, available_size)
        self._calculate_position(root, origin.clone())
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("layout complete\n%s", self.describe_tree(root))

    def convert_to_primitives(self, component: Optional[Component]) -> Optional[Component]:
        """Replace composite components in the tree with primitive ones."""
        return to_primitives(component)

    def assign_ids(self, component: Component) -> None:
        """Give ``component`` and its descendants stable path-based full IDs."""
        parent_id = component.parent.full_id if component.parent is not None else "root"
        component.full_id = self._next_full_id(parent_id, str(component.kind), component.id)
        for child in component.children:
            self.assign_ids(child)

    def describe_tree(self, component: Component) -> str:
        """Return a readable dump of the displayed part of the tree."""
        return "\n".join(self._describe_lines(component, ""))

    def _describe_lines(self, component: Component, indent: str):
        if component.display == Display.NONE:
            return
        size, pos = component.size, component.pos
        yield (
            f"{indent}[{component.id}({component.kind}): "
            f"Size:{size.x:.1f},{size.y:.1f} Pos:{pos.x:.1f},{pos.y:.1f} "
            f"({int(pos.type)}) Z:{component.absolute_z_index()}]"
        )
        for child in component.children:
            yield from self._describe_lines(child, indent + "\t")

    def _register_id(self, full_id: str) -> None:
        if full_id not in self._alive:
            self._alive.add(full_id)
            self.state.setdefault(full_id, ComponentState())

    def _next_full_id(self, parent: str, widget_type: str, user_id: str) -> str:
        key = f"{parent}/{widget_type}"
        index = self._count.get(key, 0)
        self._count[key] = index + 1
        full_id = f"{parent}/{widget_type}#{index}({user_id})"
        self._register_id(full_id)
        return full_id

    def _calculate_size(self, comp: Optional[Component], available: Vec2) -> Vec2:
        if comp is None or comp.display == Display.NONE:
            return Vec2()

        fixed = comp.size.clone()
        if comp.width_percent > 0:
            fixed.x = (available.x - comp.border.x * 2 - comp.padding.x * 2) * comp.width_percent / 100
        if comp.height_percent > 0:
            fixed.y = (available.y - comp.border.y * 2 - comp.padding.y * 2) * comp.height_percent / 100
        has_fixed_width = fixed.x > 0
        has_fixed_height = fixed.y > 0

        pb_x = comp.padding.x + comp.border.x
        pb_y = comp.padding.y + comp.border.y

        if isinstance(comp, Container):
            content = self._container_content_size(
                comp, available, fixed, has_fixed_width, has_fixed_height, pb_x, pb_y
            )
        elif isinstance(comp, Text):
            if comp.wrapped:
                content = self.calculate_wrapped_text_size(
                    comp.content, comp.font_size, available.x - 2 * pb_x
                )
            else:
                content = Vec2(self.measure(comp.content, comp.font_size), comp.font_size)
        elif isinstance(comp, Button):
            text_width = self.measure(comp.label, comp.font_size())
            content = Vec2(
                text_width + 2 * _BUTTON_PADDING_X,
                comp.font_size() + 2 * _BUTTON_PADDING_Y,
            )
        elif isinstance(comp, Image):
            content = comp.size.clone()
        else:
            logger.warning("unsupported component type for size calculation: %s", type(comp).__name__)
            content = Vec2()

        final = Vec2(content.x + 2 * pb_x, content.y + 2 * pb_y)
        if has_fixed_width:
            final.x = fixed.x
        if has_fixed_height:
            final.y = fixed.y
        final = Vec2(max(0.0, final.x), max(0.0, final.y))
        comp.size = final
        return final.clone()

    def _container_content_size(
        self,
        comp: Container,
        available: Vec2,
        fixed: Vec2,
        has_fixed_width: bool,
        has_fixed_height: bool,
        pb_x: float,
        pb_y: float,
    ) -> Vec2:
        inner = Vec2(available.x - 2 * pb_x, available.y - 2 * pb_y)
        if has_fixed_width:
            inner.x = fixed.x - 2 * pb_x
        if has_fixed_height:
            inner.y = fixed.y - 2 * pb_y
        inner = Vec2(max(0.0, inner.x), max(0.0, inner.y))

        child_sizes = [self._calculate_size(child, inner) for child in comp.children]

        if has_fixed_width and has_fixed_height:
            return Vec2(max(0.0, fixed.x - 2 * pb_x), max(0.0, fixed.y - 2 * pb_y))

        content_height = 0.0
        line_width = 0.0
        line_height = 0.0
        max_width = 0.0
        in_line = 0

        for child, child_size in zip(comp.children, child_sizes):
            layout_width = child_size.x + 2 * child.margin.x
            layout_height = child_size.y + 2 * child.margin.y
            if child.pos.type == PositionType.ABSOLUTE:
                continue

            gap_x = comp.gap.x if in_line > 0 else 0.0
            needs_wrap = (
                in_line > 0 and line_width + gap_x + layout_width > inner.x
            ) or child.display == Display.BLOCK

            if needs_wrap and in_line > 0:
                content_height += line_height
                if in_line > 1:
                    content_height += comp.gap.y
                max_width = max(max_width, line_width)
                line_width = layout_width
                line_height = layout_height
                in_line = 1
            else:
                if in_line > 0:
                    line_width += comp.gap.x
                line_width += layout_width
                line_height = max(line_height, layout_height)
                in_line += 1

            max_width = max(max_width, layout_width)

        if in_line > 0:
            content_height += line_height
            max_width = max(max_width, line_width)

        return Vec2(max_width, content_height)

    def _calculate_position(self, comp: Optional[Component], top_left: Vec2) -> None:
        if comp is None or comp.display == Display.NONE:
            return
        if comp.pos.type == PositionType.ABSOLUTE:
            top_left = Vec2(comp.pos.x, comp.pos.y)

        inner_width = comp.size.x - (comp.padding.x + comp.border.x)

        if isinstance(comp, Container):
            start_x = comp.padding.x + comp.border.x
            x_offset = start_x
            y_offset = comp.padding.y + comp.border.y
            line_height = 0.0
            in_line = 0

            for child in comp.children:
                if child.display == Display.NONE:
                    continue
                child_w = child.size.x + 2 * child.margin.x
                child_h = child.size.y + 2 * child.margin.y

                if child.pos.type == PositionType.ABSOLUTE:
                    self._calculate_position(child, top_left)
                    continue

                if inner_width > 0:
                    needs_wrap = (
                        x_offset > 0 and x_offset + child_w > inner_width
                    ) or child.display == Display.BLOCK
                else:
                    needs_wrap = x_offset > 0

                if needs_wrap:
                    in_line = 1
                    y_offset += line_height + comp.gap.y
                    x_offset = start_x
                    line_height = 0.0
                else:
                    in_line += 1
                if in_line > 1:
                    x_offset += comp.gap.x

                child.pos = Position(
                    x_offset + child.margin.x,
                    y_offset + child.margin.y,
                    PositionType.RELATIVE,
                )
                self._calculate_position(child, Vec2(top_left.x + x_offset, top_left.y + y_offset))

                x_offset += child_w
                line_height = max(line_height, child_h)
        elif isinstance(comp, (Text, Button, Image)):
            return
        else:
            raise TypeError(
                f"unsupported component type for position calculation: {type(comp).__name__}"
            )
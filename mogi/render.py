"""Turning a laid-out component tree into draw commands, and button click handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterable, Iterator, Optional

from mogi.color import RGBA, TRANSPARENT
from mogi.ui.button import Button
from mogi.ui.component import Component
from mogi.ui.consts import Display
from mogi.ui.container import Container
from mogi.ui.image import Image
from mogi.ui.text import Text
from mogi.ui.wrap import wrap_lines
from mogi.vector import Vec2

Measure = Callable[[str, float], float]


class RenderCommandKind(IntEnum):
    """What a render command draws."""

    NONE = 0
    DRAW_RECTANGLE = 1
    DRAW_TEXT = 2
    DRAW_TEXTURE = 3

    def __str__(self) -> str:
        return {
            RenderCommandKind.DRAW_RECTANGLE: "RenderCommandDrawRectangle",
            RenderCommandKind.DRAW_TEXT: "RenderCommandDrawText",
            RenderCommandKind.DRAW_TEXTURE: "RenderCommandDrawTexture",
        }.get(self, "RenderCommandNone")


@dataclass
class RenderCommand:
    """A single drawing instruction for a renderer."""

    kind: RenderCommandKind = RenderCommandKind.NONE
    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    color: RGBA = TRANSPARENT
    text: str = ""
    border_width: Vec2 = field(default_factory=Vec2)
    border_color: RGBA = TRANSPARENT
    border_radius: float = 0.0
    background_color: RGBA = TRANSPARENT
    z_index: int = 0
    hover_color: RGBA = TRANSPARENT
    pressed_color: RGBA = TRANSPARENT
    font_size: float = 0.0
    path: str = ""
    display: Display = Display.BLOCK


def _text_commands(comp: Text, pos: Vec2, size: Vec2, z_index: int, measure: Measure) -> Iterator[RenderCommand]:
    if not comp.wrapped:
        yield RenderCommand(
            kind=RenderCommandKind.DRAW_TEXT,
            text=comp.content,
            color=comp.color,
            pos=pos,
            display=comp.display,
            font_size=comp.font_size,
            z_index=z_index,
        )
        return

    pad_and_border_x = comp.padding.x + comp.border.x
    max_width = size.x - 2 * pad_and_border_x
    lines = wrap_lines(comp.content, comp.font_size, max_width, measure)
    for index, line in enumerate(lines):
        yield RenderCommand(
            kind=RenderCommandKind.DRAW_TEXT,
            text=line,
            color=comp.color,
            pos=pos.clone().add(Vec2(0.0, index * comp.font_size)),
            display=comp.display,
            font_size=comp.font_size,
            z_index=z_index,
        )


def _button_commands(comp: Button, pos: Vec2, size: Vec2, z_index: int, measure: Measure) -> Iterator[RenderCommand]:
    background = comp.background_color
    if comp.is_pressed:
        background = comp.pressed_color
    elif comp.is_mouse_over:
        background = comp.hover_color

    yield RenderCommand(
        kind=RenderCommandKind.DRAW_RECTANGLE,
        color=background,
        z_index=z_index,
        pos=pos.clone(),
        size=size.clone(),
        hover_color=comp.hover_color,
        pressed_color=comp.pressed_color,
        border_width=comp.border.clone(),
        border_color=comp.border_color,
        display=comp.display,
        border_radius=comp.border_radius,
        background_color=background,
    )

    font_size = comp.font_size()
    text_width = measure(comp.label, font_size)
    offset = size.clone().sub(Vec2(text_width, font_size)).scale(0.5)
    yield RenderCommand(
        kind=RenderCommandKind.DRAW_TEXT,
        text=comp.label,
        color=comp.text_color,
        pos=pos.clone().add(offset),
        display=comp.display,
        font_size=font_size,
        z_index=z_index + 1,
    )


def _commands_for(component: Component, measure: Measure) -> Iterator[RenderCommand]:
    if component.display == Display.NONE:
        return

    pos = component.absolute_pos()
    size = component.size.clone()
    z_index = component.absolute_z_index()

    if isinstance(component, Container):
        yield RenderCommand(
            kind=RenderCommandKind.DRAW_RECTANGLE,
            pos=pos,
            size=size,
            color=component.background_color,
            border_width=component.border.clone(),
            border_color=component.border_color,
            border_radius=component.border_radius,
            z_index=z_index,
            display=component.display,
            background_color=component.background_color,
        )
    elif isinstance(component, Text):
        yield from _text_commands(component, pos, size, z_index, measure)
    elif isinstance(component, Button):
        yield from _button_commands(component, pos, size, z_index, measure)
    elif isinstance(component, Image):
        yield RenderCommand(
            kind=RenderCommandKind.DRAW_TEXTURE,
            path=component.path,
            pos=pos,
            display=component.display,
            size=size,
            z_index=z_index,
        )

    for child in component.children:
        yield from _commands_for(child, measure)


def generate_render_commands(component: Optional[Component], measure: Measure) -> list[RenderCommand]:
    """Return draw commands for ``component`` and its descendants in tree order.

    ``measure(text, font_size)`` gives the drawn width of a string. Hidden
    components and their subtrees produce no commands.
    """
    if component is None:
        return []
    return list(_commands_for(component, measure))


def sort_commands(commands: Iterable[RenderCommand]) -> list[RenderCommand]:
    """Return the visible commands in drawing order: by z-index, ties kept in order."""
    visible = [command for command in commands if command.display != Display.NONE]
    return sorted(visible, key=lambda command: command.z_index)


def handle_clicks(
    component: Optional[Component],
    cursor: Vec2,
    mouse_down: bool,
    mouse_released: bool,
) -> list[Button]:
    """Update hover and press state of every visible button and fire click callbacks.

    A button is clicked when it was pressed and the mouse is released while
    the cursor is still over it. Returns the buttons clicked, in tree order.
    """
    clicked: list[Button] = []
    _handle(component, cursor, mouse_down, mouse_released, clicked)
    return clicked


def _handle(
    component: Optional[Component],
    cursor: Vec2,
    mouse_down: bool,
    mouse_released: bool,
    clicked: list[Button],
) -> None:
    if component is None or component.display == Display.NONE:
        return

    if isinstance(component, Button):
        over = component.contains_point(cursor)
        component.is_mouse_over = over
        if over and mouse_down:
            component.is_pressed = True
        if component.is_pressed and not over:
            component.is_pressed = False
        if component.is_pressed and mouse_released:
            component.is_pressed = False
            clicked.append(component)
            if component.callback is not None:
                component.callback(component)

    for child in component.children:
        _handle(child, cursor, mouse_down, mouse_released, clicked)
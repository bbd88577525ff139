"""A clickable button with a text label."""

from __future__ import annotations

from typing import Callable, Optional

from mogi.color import RGBA
from mogi.ui.component import Component
from mogi.ui.consts import ComponentKind, Display

_FONT_SIZE = 24.0


class Button(Component):
    """A labelled button that calls its callback when clicked."""

    def __init__(self, label: str) -> None:
        super().__init__(ComponentKind.BUTTON)
        self.label: str = label
        self.callback: Optional[Callable[[Button], None]] = None
        self.hover_color: RGBA = RGBA(0.3, 0.5, 0.9, 1)
        self.pressed_color: RGBA = RGBA(0.1, 0.3, 0.7, 1)
        self.text_color: RGBA = RGBA(1, 1, 1, 1)
        self.is_pressed: bool = False
        self.is_mouse_over: bool = False
        self.display = Display.BLOCK

    def set_label(self, label: str) -> Button:
        self.label = label
        return self

    def set_on_click(self, callback: Optional[Callable[[Button], None]]) -> Button:
        self.callback = callback
        return self

    def set_hover_color(self, color: RGBA) -> Button:
        self.hover_color = color
        return self

    def set_pressed_color(self, color: RGBA) -> Button:
        self.pressed_color = color
        return self

    def set_text_color(self, color: RGBA) -> Button:
        self.text_color = color
        return self

    def font_size(self) -> float:
        """Return the size of the label's font."""
        return _FONT_SIZE
"""A component that draws a string."""

from __future__ import annotations

from mogi.color import RGBA, WHITE
from mogi.ui.component import Component
from mogi.ui.consts import ComponentKind

DEFAULT_FONT_SIZE = 16.0


class Text(Component):
    """A run of text, optionally wrapped to the available width."""

    def __init__(self, content: str) -> None:
        super().__init__(ComponentKind.TEXT)
        self.content: str = content
        self.color: RGBA = WHITE
        self.font_size: float = DEFAULT_FONT_SIZE
        self.wrapped: bool = False

    def set_content(self, content: str) -> Text:
        self.content = content
        return self

    def set_color(self, color: RGBA) -> Text:
        self.color = color
        return self

    def set_font_size(self, size: float) -> Text:
        """Set the font size; a size that is not positive falls back to the default."""
        self.font_size = size if size > 0 else DEFAULT_FONT_SIZE
        return self

    def set_text_wrapped(self, wrapped: bool) -> Text:
        self.wrapped = wrapped
        return self
"""A table component made of a header and rows of text cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from mogi.color import RGBA
from mogi.ui.component import Component
from mogi.ui.consts import ComponentKind
from mogi.vector import Vec2


@dataclass
class Row:
    """One table row."""

    cells: list[str] = field(default_factory=list)


class Table(Component):
    """A grid of text cells under a header row."""

    def __init__(self) -> None:
        super().__init__(ComponentKind.TABLE)
        self.rows: list[Row] = []
        self.header: list[str] = []
        self.header_color: RGBA = RGBA(0, 0, 0, 255)
        self.row_color: RGBA = RGBA(255, 255, 255, 255)
        self.font_size: float = 16.0
        self.font_color: RGBA = RGBA(0, 0, 0, 255)

    def set_header(self, header: Iterable[str]) -> Table:
        self.header = list(header)
        return self

    def add_row(self, row: Row) -> Table:
        self.rows.append(row)
        return self

    def add_rows(self, rows: Iterable[Row]) -> Table:
        self.rows.extend(rows)
        return self

    def set_font_size(self, size: float) -> Table:
        self.font_size = size
        return self

    def set_font_color(self, color: RGBA) -> Table:
        self.font_color = color
        return self

    def set_header_color(self, color: RGBA) -> Table:
        self.header_color = color
        return self

    def set_row_color(self, color: RGBA) -> Table:
        self.row_color = color
        return self

    def set_border_width(self, width: float) -> Table:
        """Use ``width`` as the border on both axes."""
        self.border = Vec2(width, width)
        return self
"""Conversion of composite components into trees of primitive components."""

from __future__ import annotations

from typing import Optional

from mogi.color import GRAY, TRANSPARENT
from mogi.ui.button import Button
from mogi.ui.component import Component
from mogi.ui.consts import Display
from mogi.ui.container import Container
from mogi.ui.image import Image
from mogi.ui.table import Table
from mogi.ui.text import Text
from mogi.vector import Vec2

_CELL_WIDTH = 100.0
_LAST_CELL_WIDTH = 400.0
_COLUMN_GAP = 10.0
_ROW_GAP = 10.0
_TABLE_RADIUS = 10.0


def _cells_row(row_id: str, cells: list[str]) -> Container:
    row = Container().set_gap(Vec2(_COLUMN_GAP, 0)).set_id(row_id).set_display(Display.BLOCK)
    last = len(cells) - 1
    for index, cell in enumerate(cells):
        width = _LAST_CELL_WIDTH if index == last else _CELL_WIDTH
        row.add_child(
            Container()
            .set_size(Vec2(width, 0))
            .set_background_color(TRANSPARENT)
            .set_id(f"cell#{index}")
            .add_child(Text(cell).set_text_wrapped(True))
        )
    return row


def _table_to_container(table: Table) -> Container:
    result = (
        Container()
        .set_id(table.id)
        .set_display(table.display)
        .set_size(table.size)
        .set_position(table.pos)
        .set_background_color(GRAY)
        .set_border(table.border)
        .set_border_color(table.border_color)
        .set_border_radius(_TABLE_RADIUS)
        .set_z_index(table.absolute_z_index())
        .set_gap(Vec2(0, _ROW_GAP))
        .set_padding(Vec2(3, 4))
        .add_child(_cells_row("header", table.header))
    )
    result.add_children(*(_cells_row(f"row#{i}", row.cells) for i, row in enumerate(table.rows)))
    return result


def to_primitives(component: Optional[Component]) -> Optional[Component]:
    """Return ``component`` with every table in its tree replaced by containers and text.

    Containers keep their identity and get their converted children back.
    Raises ``TypeError`` for a component of an unsupported type.
    """
    if component is None:
        return None

    new_children = [
        converted
        for converted in (to_primitives(child) for child in component.children)
        if converted is not None
    ]

    if isinstance(component, Container):
        return component.set_children(*new_children)
    if isinstance(component, (Text, Button, Image)):
        return component
    if isinstance(component, Table):
        return _table_to_container(component)
    raise TypeError(f"unsupported component type: {type(component).__name__}")
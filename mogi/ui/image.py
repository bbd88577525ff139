"""A component that draws an image file."""

from __future__ import annotations

from mogi.ui.component import Component
from mogi.ui.consts import ComponentKind


class Image(Component):
    """An image loaded from ``path`` and drawn at the component's size."""

    def __init__(self, path: str) -> None:
        super().__init__(ComponentKind.IMAGE)
        self.path: str = path
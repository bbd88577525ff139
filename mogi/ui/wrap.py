"""Greedy word wrapping of text to a maximum line width."""

from __future__ import annotations

from typing import Callable

from mogi.vector import Vec2

Measure = Callable[[str, float], float]


def wrap_lines(text: str, font_size: float, max_width: float, measure: Measure) -> list[str]:
    """Split ``text`` into lines no wider than ``max_width`` where words allow.

    Words are filled greedily. A word that does not fit ends the current line
    and starts a new one, so a first word wider than ``max_width`` produces an
    empty leading line.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if measure(candidate, font_size) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def wrapped_size(text: str, font_size: float, max_width: float, measure: Measure) -> Vec2:
    """Return the width of the widest wrapped line and the total height of all lines."""
    lines = wrap_lines(text, font_size, max_width, measure)
    widest = max((measure(line, font_size) for line in lines), default=0.0)
    widest = max(widest, 0.0)
    return Vec2(widest, len(lines) * font_size)
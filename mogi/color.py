"""Colour values: RGBA, HSLA and hexadecimal notation."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Protocol

_INV6 = 1.0 / 6.0
_TWO_INV3 = 2.0 / 3.0
_SKIPPED = frozenset("# \t\n\r")
_HEX_DIGITS = frozenset(string.hexdigits)


class Color(Protocol):
    """Anything that can be expressed as an RGBA colour."""

    def to_rgba(self) -> RGBA:
        ...


@dataclass(frozen=True)
class RGBA:
    """A colour with red, green, blue and alpha channels in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def blend_over(self, dst: RGBA) -> RGBA:
        """Alpha-composite this colour over ``dst``."""
        inv_a = 1 - self.a
        out_a = self.a + dst.a * inv_a
        if out_a == 0:
            return RGBA()
        dst_mul = dst.a * inv_a
        return RGBA(
            (self.r * self.a + dst.r * dst_mul) / out_a,
            (self.g * self.a + dst.g * dst_mul) / out_a,
            (self.b * self.a + dst.b * dst_mul) / out_a,
            out_a,
        )

    def to_rgba(self) -> RGBA:
        return self

    def __str__(self) -> str:
        return "rgba(" + ",".join(f"{v:.2f}" for v in (self.r, self.g, self.b, self.a)) + ")"


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Return one channel of an HSL conversion for hue offset ``t``."""
    if t < 0:
        t += 1
    elif t > 1:
        t -= 1

    d = q - p
    if t < _INV6:
        return p + d * 6 * t
    if t < 0.5:
        return q
    if t < _TWO_INV3:
        return p + d * 6 * (_TWO_INV3 - t)
    return p


@dataclass(frozen=True)
class HSLA:
    """A colour given by hue in [0, 360) and saturation, lightness, alpha in [0, 1]."""

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741
    a: float = 0.0

    def to_rgba(self) -> RGBA:
        hh = self.h / 360
        s, lum = self.s, self.l
        if s == 0:
            return RGBA(lum, lum, lum, self.a)
        q = lum * (1 + s) if lum < 0.5 else lum + s - lum * s
        p = 2 * lum - q
        return RGBA(
            hue_to_rgb(p, q, hh + 1.0 / 3.0),
            hue_to_rgb(p, q, hh),
            hue_to_rgb(p, q, hh - 1.0 / 3.0),
            self.a,
        )

    def __str__(self) -> str:
        return "hsla(" + ",".join(f"{v:.2f}" for v in (self.h, self.s, self.l, self.a)) + ")"


class Hex:
    """A colour parsed from #RGB, #RGBA, #RRGGBB or #RRGGBBAA notation."""

    __slots__ = ("_hex", "_rgba")

    def __init__(self, text: str) -> None:
        digits: list[str] = []
        for ch in text:
            if len(digits) == 8:
                break
            if ch in _SKIPPED:
                continue
            if ch not in _HEX_DIGITS:
                raise ValueError(f"invalid hex character {ch!r} in {text!r}")
            digits.append(ch.upper())

        count = len(digits)
        if count == 3:
            expanded = "".join(c * 2 for c in digits) + "FF"
        elif count == 4:
            expanded = "".join(c * 2 for c in digits)
        elif count == 6:
            expanded = "".join(digits) + "FF"
        elif count == 8:
            expanded = "".join(digits)
        else:
            raise ValueError(f"invalid hex length {count} in {text!r}")

        self._hex = expanded
        self._rgba = RGBA(*(int(expanded[i:i + 2], 16) / 255.0 for i in range(0, 8, 2)))

    def to_rgba(self) -> RGBA:
        return self._rgba

    def __str__(self) -> str:
        return self._hex

    def __repr__(self) -> str:
        return f"Hex({self._hex!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hex):
            return NotImplemented
        return self._hex == other._hex

    def __hash__(self) -> int:
        return hash(self._hex)


RED = RGBA(1, 0, 0, 1)
GREEN = RGBA(0, 1, 0, 1)
BLUE = RGBA(0, 0, 1, 1)
WHITE = RGBA(1, 1, 1, 1)
BLACK = RGBA(0, 0, 0, 1)
GRAY = RGBA(0.5, 0.5, 0.5, 1)
YELLOW = RGBA(1, 1, 0, 1)
CYAN = RGBA(0, 1, 1, 1)
MAGENTA = RGBA(1, 0, 1, 1)
ORANGE = RGBA(1, 0.5, 0, 1)
PINK = RGBA(1, 0.75, 0.8, 1)
PURPLE = RGBA(0.5, 0, 0.5, 1)
BROWN = RGBA(0.6, 0.3, 0.2, 1)
TRANSPARENT = RGBA(0, 0, 0, 0)
SKIN = RGBA(0.9, 0.8, 0.7, 1)
"""Mutable 2-, 3- and 4-component vectors with chainable in-place operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec2:
    """Two-component vector; arithmetic methods mutate and return self."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def add(self, other: Vec2) -> Vec2:
        self.x += other.x
        self.y += other.y
        return self

    def sub(self, other: Vec2) -> Vec2:
        self.x -= other.x
        self.y -= other.y
        return self

    def scale(self, s: float) -> Vec2:
        self.x *= s
        self.y *= s
        return self

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        n = self.norm()
        if n != 0:
            self.x /= n
            self.y /= n
        return self

    def clone(self) -> Vec2:
        return Vec2(self.x, self.y)


@dataclass
class Vec3:
    """Three-component vector; arithmetic methods mutate and return self."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def add(self, other: Vec3) -> Vec3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def sub(self, other: Vec3) -> Vec3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def scale(self, s: float) -> Vec3:
        self.x *= s
        self.y *= s
        self.z *= s
        return self

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Replace this vector with its cross product with ``other``."""
        x = self.y * other.z - self.z * other.y
        y = self.z * other.x - self.x * other.z
        z = self.x * other.y - self.y * other.x
        self.x, self.y, self.z = x, y, z
        return self

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        n = self.norm()
        if n != 0:
            self.x /= n
            self.y /= n
            self.z /= n
        return self

    def clone(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


@dataclass
class Vec4:
    """Four-component vector; arithmetic methods mutate and return self."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def add(self, other: Vec4) -> Vec4:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def sub(self, other: Vec4) -> Vec4:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def scale(self, s: float) -> Vec4:
        self.x *= s
        self.y *= s
        self.z *= s
        self.w *= s
        return self

    def dot(self, other: Vec4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def norm(self) -> float:
        total = self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        return math.sqrt(total)

    def normalize(self) -> Vec4:
        n = self.norm()
        if n != 0:
            self.x /= n
            self.y /= n
            self.z /= n
            self.w /= n
        return self

    def clone(self) -> Vec4:
        return Vec4(self.x, self.y, self.z, self.w)
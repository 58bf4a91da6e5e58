"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector."""

    x: float
    y: float

    @classmethod
    def from_angle(cls, angle: float) -> Vec2:
        """Return the unit vector pointing at ``angle`` radians."""
        return cls(math.cos(angle), math.sin(angle))

    def dot(self, other: Vec2) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.dot(self)

    def normalize(self) -> Vec2:
        """Return a unit vector in the same direction, or the zero vector."""
        magnitude = math.sqrt(self.length_squared())
        if magnitude == 0.0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / magnitude, self.y / magnitude)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | float) -> Vec2:
        """Multiply component-wise by another vector, or scale by a number."""
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented
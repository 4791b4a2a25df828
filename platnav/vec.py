"""Two-dimensional vector math shared by the simulation and navigation code."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

# Pixels per world unit when drawing.
WORLD_SCALE = 32.0


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector in world units (y grows downwards)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vec2:
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            return NotImplemented
        return Vec2(self.x / scale, self.y / scale)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (self - other).length()


def sign(n: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``n``."""
    return (n > 0) - (n < 0)
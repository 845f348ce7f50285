"""Two-dimensional vectors used throughout the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Union[Number, Vec2]) -> Vec2:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(other * self.x, other * self.y)
        return NotImplemented

    def __rmul__(self, other: Union[Number, Vec2]) -> Vec2:
        return self.__mul__(other)

    def __truediv__(self, scalar: Number) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)


def dot(v1: Vec2, v2: Vec2) -> float:
    """Return the dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y


def length(vector: Vec2) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(vector.x * vector.x + vector.y * vector.y)
"""A small immutable three-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass

_NORMALIZE_EPSILON = 0.0001


@dataclass(frozen=True)
class Vec3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vec3:
        """Return the vector multiplied component-wise by ``factor``."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return a unit vector, or the vector unchanged if it is nearly zero."""
        length = self.length()
        if length > _NORMALIZE_EPSILON:
            return self.scale(1.0 / length)
        return self
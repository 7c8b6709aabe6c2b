"""Quaternions for rotating vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tiny3d.vec3 import Vec3


@dataclass(frozen=True)
class Quaternion:
    """A quaternion w + xi + yj + zk."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quaternion:
        """Return the rotation by ``angle`` radians about the unit vector ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate ``v`` as q * v * q^-1, assuming this quaternion has unit length."""
        result = self * Quaternion(0.0, v.x, v.y, v.z) * self.conjugate()
        return Vec3(result.x, result.y, result.z)
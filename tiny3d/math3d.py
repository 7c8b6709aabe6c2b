"""Vectors with spherical coordinates and 4x4 column-major matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable, Protocol


class _HasXYZ(Protocol):
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class SphericalVector:
    """A Cartesian vector that may also carry the spherical coordinates it came from."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: float = 0.0
    theta: float = 0.0
    phi: float = 0.0


def from_spherical(r: float, theta: float, phi: float) -> SphericalVector:
    """Build a vector from radius, polar angle ``theta`` and azimuth ``phi``."""
    return SphericalVector(
        x=r * math.sin(theta) * math.cos(phi),
        y=r * math.sin(theta) * math.sin(phi),
        z=r * math.cos(theta),
        r=r,
        theta=theta,
        phi=phi,
    )


def normalize_fast(v: SphericalVector) -> SphericalVector:
    """Return ``v`` with its Cartesian part scaled to unit length."""
    length = math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    inv = 1.0 / length
    return replace(v, x=v.x * inv, y=v.y * inv, z=v.z * inv)


def slerp(a: SphericalVector, b: SphericalVector, t: float) -> SphericalVector:
    """Spherically interpolate between the directions of ``a`` and ``b``."""
    a = normalize_fast(a)
    b = normalize_fast(b)
    dot = max(-1.0, min(1.0, a.x * b.x + a.y * b.y + a.z * b.z))
    theta = math.acos(dot) * t
    rel = SphericalVector(b.x - a.x * dot, b.y - a.y * dot, b.z - a.z * dot)
    if rel.x == 0.0 and rel.y == 0.0 and rel.z == 0.0:
        if dot > 0.0:
            return SphericalVector(a.x, a.y, a.z)
        raise ValueError("slerp between opposite directions is undefined")
    rel = normalize_fast(rel)
    c, s = math.cos(theta), math.sin(theta)
    return SphericalVector(
        a.x * c + rel.x * s,
        a.y * c + rel.y * s,
        a.z * c + rel.z * s,
    )


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix stored as 16 values in column-major order."""

    m: tuple[float, ...]

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.m)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "m", values)

    @staticmethod
    def _with(entries: dict[int, float]) -> Mat4:
        values = [0.0] * 16
        values[0] = values[5] = values[10] = values[15] = 1.0
        for index, value in entries.items():
            values[index] = value
        return Mat4(values)

    @staticmethod
    def identity() -> Mat4:
        return Mat4._with({})

    @staticmethod
    def translate(tx: float, ty: float, tz: float) -> Mat4:
        return Mat4._with({12: tx, 13: ty, 14: tz})

    @staticmethod
    def scale(sx: float, sy: float, sz: float) -> Mat4:
        return Mat4._with({0: sx, 5: sy, 10: sz})

    @staticmethod
    def rotate_x(angle: float) -> Mat4:
        s, c = math.sin(angle), math.cos(angle)
        return Mat4._with({5: c, 6: s, 9: -s, 10: c})

    @staticmethod
    def rotate_y(angle: float) -> Mat4:
        s, c = math.sin(angle), math.cos(angle)
        return Mat4._with({0: c, 2: -s, 8: s, 10: c})

    @staticmethod
    def rotate_z(angle: float) -> Mat4:
        s, c = math.sin(angle), math.cos(angle)
        return Mat4._with({0: c, 1: s, 4: -s, 5: c})

    def __matmul__(self, other: Mat4) -> Mat4:
        """Combine so that ``(a @ b).transform(v)`` applies ``a`` first, then ``b``."""
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self.m, other.m

        def entry(row: int, col: int) -> float:
            return sum(a[row * 4 + k] * b[k * 4 + col] for k in range(4))

        return Mat4([entry(row, col) for row in range(4) for col in range(4)])

    def transform(self, v: _HasXYZ) -> SphericalVector:
        """Apply the matrix to the point ``v`` (with an implicit w of 1)."""
        m = self.m
        return SphericalVector(
            m[0] * v.x + m[4] * v.y + m[8] * v.z + m[12],
            m[1] * v.x + m[5] * v.y + m[9] * v.z + m[13],
            m[2] * v.x + m[6] * v.y + m[10] * v.z + m[14],
        )

    def __iter__(self) -> Iterable[float]:
        return iter(self.m)
"""Curve helpers for animating positions."""

from __future__ import annotations

from tiny3d.vec3 import Vec3


def cubic_bezier(p0: Vec3, p1: Vec3, p2: Vec3, p3: Vec3, t: float) -> Vec3:
    """Evaluate the cubic Bezier curve with control points p0..p3 at ``t``."""
    u = 1.0 - t
    uu = u * u
    uuu = uu * u
    tt = t * t
    ttt = tt * t

    def component(a: float, b: float, c: float, d: float) -> float:
        return uuu * a + 3 * uu * t * b + 3 * u * tt * c + ttt * d

    return Vec3(
        component(p0.x, p1.x, p2.x, p3.x),
        component(p0.y, p1.y, p2.y, p3.y),
        component(p0.z, p1.z, p2.z, p3.z),
    )
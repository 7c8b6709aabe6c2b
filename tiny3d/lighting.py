"""Edge shading from a small set of point lights."""

from __future__ import annotations

from tiny3d.vec3 import Vec3

MAX_LIGHTS = 8


class LightSet:
    """A bounded collection of point lights used to shade edges."""

    def __init__(self) -> None:
        self._lights: list[Vec3] = []

    def __len__(self) -> int:
        return len(self._lights)

    @property
    def lights(self) -> tuple[Vec3, ...]:
        return tuple(self._lights)

    def add(self, position: Vec3) -> bool:
        """Add a light; return False and ignore it when the set is full."""
        if len(self._lights) >= MAX_LIGHTS:
            return False
        self._lights.append(position)
        return True

    def intensity(self, p1: Vec3, p2: Vec3) -> float:
        """Return the brightness in [0, 1] of the edge from ``p1`` to ``p2``."""
        edge_dir = (p2 - p1).normalized()
        midpoint = (p1 + p2).scale(0.5)
        total = sum(
            max(0.0, edge_dir.dot((light - midpoint).normalized()))
            for light in self._lights
        )
        return min(total, 1.0)
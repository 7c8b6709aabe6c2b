"""Orthographic wireframe rendering into a circular viewport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from tiny3d.canvas import Canvas

WIDTH = 500
HEIGHT = 500
PROJECTION_SCALE = 100.0


class _Point(Protocol):
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Edge:
    """A line between the vertices at indices ``a`` and ``b``."""

    a: int
    b: int


def project_vertex(p: _Point) -> tuple[int, int]:
    """Project a point onto the viewport, dropping its depth."""
    x = WIDTH // 2 + int(p.x * PROJECTION_SCALE)
    y = HEIGHT // 2 - int(p.y * PROJECTION_SCALE)
    return x, y


def clip_to_circular_viewport(x: int, y: int) -> bool:
    """Return True if the pixel lies inside the circle inscribed in the viewport."""
    dx = x - WIDTH // 2
    dy = y - HEIGHT // 2
    radius = WIDTH // 2
    return dx * dx + dy * dy <= radius * radius


def render_wireframe(
    canvas: Canvas, transformed: Sequence[_Point], edges: Iterable[Edge]
) -> None:
    """Draw every edge whose two ends both fall inside the circular viewport."""
    for edge in edges:
        x0, y0 = project_vertex(transformed[edge.a])
        x1, y1 = project_vertex(transformed[edge.b])
        if not (clip_to_circular_viewport(x0, y0) and clip_to_circular_viewport(x1, y1)):
            continue
        canvas.draw_line(float(x0), float(y0), float(x1), float(y1), 1.0)
"""A minimal Wavefront OBJ reader that turns faces into wireframe edges."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Union

from tiny3d.renderer import Edge
from tiny3d.vec3 import Vec3

MAX_VERTICES = 1024
MAX_EDGES = 2048
MAX_FACE_INDICES = 16

_LEADING_INT = re.compile(r"[+-]?\d+")


class ObjError(ValueError):
    """Raised when an OBJ file cannot be turned into a mesh."""


@dataclass
class Mesh:
    """Vertices and the edges between them."""

    vertices: list[Vec3] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)


def _parse_vertex(text: str) -> Vec3 | None:
    parts = text.split()[:3]
    if len(parts) < 3:
        return None
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError:
        return None
    return Vec3(x, y, z)


def _face_index(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else 0


def parse_obj(lines: Iterable[str]) -> Mesh:
    """Build a mesh from OBJ lines; each face becomes the closed loop of its edges."""
    mesh = Mesh()
    for line in lines:
        if line.startswith("v "):
            if len(mesh.vertices) >= MAX_VERTICES:
                raise ObjError("Too many vertices")
            vertex = _parse_vertex(line[2:])
            if vertex is not None:
                mesh.vertices.append(vertex)
        elif line.startswith("f"):
            indices = [_face_index(t) for t in line[2:].split()[:MAX_FACE_INDICES]]
            count = len(indices)
            for i, index in enumerate(indices):
                a = index - 1
                b = indices[(i + 1) % count] - 1
                if not (0 <= a < len(mesh.vertices) and 0 <= b < len(mesh.vertices)):
                    raise ObjError(f"Face index out of range: {a}/{b} (n={count})")
                if len(mesh.edges) >= MAX_EDGES:
                    raise ObjError("Too many edges")
                mesh.edges.append(Edge(a, b))
    return mesh


def load_obj(path: Union[str, os.PathLike]) -> Mesh:
    """Read the OBJ file at ``path``."""
    with open(path, encoding="utf-8") as f:
        return parse_obj(f)
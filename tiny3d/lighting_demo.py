"""Animate a lit cube and pyramid along a circle and write ASCII PGM frames."""

from __future__ import annotations

import argparse
import math
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from tiny3d.lighting import LightSet
from tiny3d.vec3 import Vec3

WIDTH = 512
HEIGHT = 512
NUM_FRAMES = 200
PROJECTION_SCALE = 40
PATH_RADIUS = 2.0
SHAPE_SCALE = 2.0
PYRAMID_OFFSET = Vec3(3.0, 0.0, 0.0)

CUBE_VERTICES = (
    Vec3(-0.5, -0.5, -0.5), Vec3(0.5, -0.5, -0.5), Vec3(0.5, 0.5, -0.5), Vec3(-0.5, 0.5, -0.5),
    Vec3(-0.5, -0.5, 0.5), Vec3(0.5, -0.5, 0.5), Vec3(0.5, 0.5, 0.5), Vec3(-0.5, 0.5, 0.5),
)
CUBE_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)
PYRAMID_VERTICES = (
    Vec3(-0.5, 0.0, -0.5), Vec3(0.5, 0.0, -0.5), Vec3(0.5, 0.0, 0.5), Vec3(-0.5, 0.0, 0.5),
    Vec3(0.0, 1.0, 0.0),
)
PYRAMID_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (0, 4), (1, 4), (2, 4), (3, 4),
)

Buffer = list[bytearray]


def rotate_x(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x, v.y * c - v.z * s, v.y * s + v.z * c)


def rotate_y(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c + v.z * s, v.y, -v.x * s + v.z * c)


def rotate_z(v: Vec3, angle: float) -> Vec3:
    c, s = math.cos(angle), math.sin(angle)
    return Vec3(v.x * c - v.y * s, v.x * s + v.y * c, v.z)


def project(v: Vec3) -> tuple[int, int]:
    """Orthographically project ``v`` to pixel coordinates."""
    return (
        int(v.x * PROJECTION_SCALE + WIDTH // 2),
        int(-v.y * PROJECTION_SCALE + HEIGHT // 2),
    )


def draw_line(buffer: Buffer, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
    """Draw a Bresenham line into ``buffer``, skipping pixels outside it."""
    height = len(buffer)
    width = len(buffer[0]) if buffer else 0
    dx, dy = abs(x1 - x0), abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while True:
        if 0 <= x0 < width and 0 <= y0 < height:
            buffer[y0][x0] = color
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def _place(vertices: Sequence[Vec3], angle: float, offset: Vec3) -> list[Vec3]:
    placed = []
    for vertex in vertices:
        v = vertex.scale(SHAPE_SCALE)
        v = rotate_z(rotate_y(rotate_x(v, angle), angle), angle)
        placed.append(v + offset)
    return placed


def render_frame(lights: LightSet, frame: int) -> Buffer:
    """Render one frame of the animation and return its rows of grey levels."""
    buffer = [bytearray(WIDTH) for _ in range(HEIGHT)]
    theta = frame / (NUM_FRAMES - 1) * 2.0 * math.pi
    motion = Vec3(PATH_RADIUS * math.cos(theta), PATH_RADIUS * math.sin(theta), 0.0)

    shapes = (
        (_place(CUBE_VERTICES, theta, motion), CUBE_EDGES),
        (_place(PYRAMID_VERTICES, theta, motion + PYRAMID_OFFSET), PYRAMID_EDGES),
    )
    for points, edges in shapes:
        for a, b in edges:
            color = int(lights.intensity(points[a], points[b]) * 255)
            draw_line(buffer, *project(points[a]), *project(points[b]), color)
    return buffer


def write_ascii_pgm(path: Union[str, os.PathLike], buffer: Buffer) -> None:
    """Write ``buffer`` to ``path`` as a plain-text (P2) PGM image."""
    height = len(buffer)
    width = len(buffer[0]) if buffer else 0
    with open(path, "w", encoding="ascii") as f:
        f.write(f"P2\n{width} {height}\n255\n")
        for row in buffer:
            f.write("".join(f"{value} " for value in row))
            f.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render the lit shapes animation.")
    parser.add_argument("--output-dir", default=".", help="directory for the frames")
    parser.add_argument(
        "--frames", type=int, default=NUM_FRAMES, help="render only the first N frames"
    )
    args = parser.parse_args(argv)
    if not 0 <= args.frames <= NUM_FRAMES:
        parser.error(f"--frames must be between 0 and {NUM_FRAMES}")

    lights = LightSet()
    lights.add(Vec3(8.0, 8.0, 5.0))
    lights.add(Vec3(-8.0, 8.0, 5.0))

    out_dir = Path(args.output_dir)
    for frame in range(args.frames):
        name = f"frame{frame:03d}.pgm"
        write_ascii_pgm(out_dir / name, render_frame(lights, frame))
        print(f"Wrote {name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
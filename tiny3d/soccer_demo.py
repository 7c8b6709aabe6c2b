"""Render a spinning OBJ mesh as a sequence of PGM frames."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from tiny3d.canvas import Canvas
from tiny3d.objfile import Mesh, ObjError, load_obj
from tiny3d.quaternion import Quaternion
from tiny3d.renderer import render_wireframe
from tiny3d.vec3 import Vec3

FRAMES = 60
CANVAS_SIZE = 512
PI = 3.14159265
_SPIN_AXIS = Vec3(0.0, 1.0, 0.0)


def render_frame(canvas: Canvas, mesh: Mesh, frame: int, frames: int = FRAMES) -> None:
    """Clear ``canvas`` and draw ``mesh`` turned about the y axis for ``frame``."""
    canvas.clear(0.0)
    angle = 2 * PI * frame / frames
    q = Quaternion.from_axis_angle(_SPIN_AXIS, angle)
    rotated = [q.rotate(v) for v in mesh.vertices]
    render_wireframe(canvas, rotated, mesh.edges)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a rotating wireframe mesh.")
    parser.add_argument("obj", nargs="?", default="soccer.obj", help="OBJ file to load")
    parser.add_argument("--output-dir", default=".", help="directory for the frames")
    args = parser.parse_args(argv)

    canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
    try:
        mesh = load_obj(args.obj)
    except OSError as exc:
        print(f"{args.obj}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ObjError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Loaded OBJ: {len(mesh.vertices)} vertices, {len(mesh.edges)} edges")

    out_dir = Path(args.output_dir)
    for frame in range(FRAMES):
        render_frame(canvas, mesh, frame)
        canvas.save_pgm(out_dir / f"frame_{frame:03d}.pgm")

    print(f"Rendered {FRAMES} frames successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
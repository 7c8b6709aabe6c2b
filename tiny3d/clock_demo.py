"""Draw clock-like spokes radiating from the centre of a canvas."""

from __future__ import annotations

import argparse
import math
from typing import Optional, Sequence

from tiny3d.canvas import Canvas

CANVAS_SIZE = 512
RADIUS = 200.0
STEP_DEGREES = 15


def draw_clock_face(canvas: Canvas) -> None:
    """Draw a spoke from the centre every 15 degrees."""
    cx = canvas.width / 2.0
    cy = canvas.height / 2.0
    for angle_deg in range(0, 360, STEP_DEGREES):
        rad = math.radians(angle_deg)
        x = cx + RADIUS * math.cos(rad)
        y = cy + RADIUS * math.sin(rad)
        canvas.draw_line(cx, cy, x, y, 2.0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Draw a clock face as a PGM image.")
    parser.add_argument("output", nargs="?", default="output.pgm", help="image to write")
    args = parser.parse_args(argv)

    canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
    canvas.clear(0.0)
    draw_clock_face(canvas)
    canvas.save_pgm(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
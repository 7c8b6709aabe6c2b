"""A greyscale floating-point canvas with line drawing and PGM output."""

from __future__ import annotations

import math
import os
from typing import Union


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def _round_half_away(value: float) -> int:
    """Round to nearest, with halves going away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Canvas:
    """A grid of pixel intensities, each nominally in [0, 1]."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[list[float]] = [[0.0] * width for _ in range(height)]

    def __getitem__(self, point: tuple[int, int]) -> float:
        x, y = point
        return self.pixels[y][x]

    def clear(self, intensity: float = 0.0) -> None:
        """Fill every pixel with ``intensity``."""
        for row in self.pixels:
            row[:] = [intensity] * self.width

    def set_pixel(self, x: float, y: float, intensity: float) -> None:
        """Brighten the nearest pixel to ``intensity``; darker values are ignored."""
        ix = _round_half_away(x)
        iy = _round_half_away(y)
        if not (0 <= ix < self.width and 0 <= iy < self.height):
            return
        if intensity > self.pixels[iy][ix]:
            self.pixels[iy][ix] = _clamp(intensity, 0.0, 1.0)

    def draw_line(
        self, x0: float, y0: float, x1: float, y1: float, thickness: float = 1.0
    ) -> None:
        """Draw a full-intensity one-pixel line; ``thickness`` is accepted but unused."""
        ix0, iy0 = _round_half_away(x0), _round_half_away(y0)
        ix1, iy1 = _round_half_away(x1), _round_half_away(y1)

        dx = abs(ix1 - ix0)
        sx = 1 if ix0 < ix1 else -1
        dy = -abs(iy1 - iy0)
        sy = 1 if iy0 < iy1 else -1
        err = dx + dy

        while True:
            self.set_pixel(float(ix0), float(iy0), 1.0)
            if ix0 == ix1 and iy0 == iy1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                ix0 += sx
            if e2 <= dx:
                err += dx
                iy0 += sy

    def to_pgm(self) -> bytes:
        """Return the canvas encoded as a binary (P5) PGM image."""
        header = f"P5\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytes(
            int(_clamp(value, 0.0, 1.0) * 255.0) for row in self.pixels for value in row
        )
        return header + body

    def save_pgm(self, path: Union[str, os.PathLike]) -> None:
        """Write the canvas to ``path`` as a binary PGM image."""
        with open(path, "wb") as f:
            f.write(self.to_pgm())
# tiny3d

A small toolkit with no dependencies for drawing 3D wireframes into greyscale
PGM images.

## Contents

- `tiny3d.vec3.Vec3`: a frozen 3-component vector. It supports `+`, `-`,
  `scale(factor)`, `dot(other)`, `length()` and `normalized()`.
  `normalized()` returns the vector unchanged if its length is 0.0001 or less.
- `tiny3d.math3d`:
  - `SphericalVector`: x, y, z, plus the r, theta, phi it was built from.
  - `from_spherical(r, theta, phi)`.
  - `normalize_fast(v)`: raises `ValueError` for a zero-length vector.
  - `slerp(a, b, t)`: raises `ValueError` for exactly opposite directions.
  - `Mat4`: a column-major 4×4 matrix. It has the builders `identity()`,
    `translate()`, `scale()`, `rotate_x()`, `rotate_y()` and `rotate_z()`.
    `transform(v)` applies the matrix to a point. `a @ b` combines two
    matrices so that `(a @ b).transform(v)` applies `a` first, then `b`.
- `tiny3d.quaternion.Quaternion`: `from_axis_angle(axis, angle)`, the
  Hamilton product `*`, `conjugate()` and `rotate(v)`.
- `tiny3d.animation.cubic_bezier(p0, p1, p2, p3, t)`: a point on a cubic
  Bézier curve.
- `tiny3d.lighting.LightSet`: holds up to 8 point lights. `add()` returns
  `False` when the set is full. `intensity(p1, p2)` shades an edge by how well
  its direction lines up with the direction from its midpoint to each light.
  The sum is capped at 1.0.
- `tiny3d.canvas.Canvas`: a grid of float intensities.
  - `clear()`.
  - `set_pixel()`: rounds to the nearest pixel and only ever brightens it.
  - `draw_line()`: a one-pixel Bresenham line at full intensity. The
    `thickness` argument is accepted but not used.
  - `to_pgm()` returns binary (P5) PGM bytes, and `save_pgm(path)` writes them
    to a file.
  - `canvas[x, y]` reads a pixel.
- `tiny3d.renderer`:
  - `project_vertex()`: orthographic projection at 100 pixels per unit,
    centred on a 500×500 viewport.
  - `clip_to_circular_viewport()`.
  - `render_wireframe(canvas, points, edges)`: draws only the edges whose two
    ends fall inside the viewport's inscribed circle.
  - `Edge(a, b)`: an edge between vertex indices `a` and `b`.
- `tiny3d.objfile`:
  - `parse_obj(lines)` and `load_obj(path)` read the `v` and `f` lines of a
    Wavefront OBJ file into a `Mesh` of vertices and edges. Each face becomes
    the closed loop of its edges.
  - They raise `ObjError` in three cases: more than 1024 vertices, more than
    2048 edges, or a face index that is out of range.

## Installation

```
pip install .
```

Python 3.10 or newer is required.

## Using the library

Draw a line and save the picture:

```python
from tiny3d.canvas import Canvas

canvas = Canvas(256, 256)
canvas.draw_line(10, 10, 200, 120)
canvas.save_pgm("line.pgm")
```

Compose transformations and apply them to a point. In this example the
rotation about x comes first, then y, then z, then the translation:

```python
import math
from tiny3d.math3d import Mat4, from_spherical

rotation = Mat4.rotate_x(0.1) @ Mat4.rotate_y(0.2) @ Mat4.rotate_z(0.3)
model = rotation @ Mat4.translate(0, 0, 5)
point = model.transform(from_spherical(1.0, math.pi / 2, 0.0))
```

Render a wireframe:

```python
from tiny3d.canvas import Canvas
from tiny3d.renderer import Edge, render_wireframe
from tiny3d.vec3 import Vec3

canvas = Canvas(512, 512)
points = [Vec3(-1, -1, 0), Vec3(1, -1, 0), Vec3(0, 1, 0)]
edges = [Edge(0, 1), Edge(1, 2), Edge(2, 0)]
render_wireframe(canvas, points, edges)
canvas.save_pgm("triangle.pgm")
```

Shade an edge with two lights:

```python
from tiny3d.lighting import LightSet
from tiny3d.vec3 import Vec3

lights = LightSet()
lights.add(Vec3(8, 8, 5))
lights.add(Vec3(-8, 8, 5))
brightness = lights.intensity(Vec3(0, 0, 0), Vec3(1, 1, 0))  # 0.0 .. 1.0
```

## Demo commands

- `tiny3d-clock [OUTPUT]`: draws a line from the centre of a 512×512 canvas
  every 15°, like the marks of a clock face. It saves the result to `OUTPUT`,
  which defaults to `output.pgm`.
- `tiny3d-soccer [OBJ] [--output-dir DIR]`: loads `OBJ` (default
  `soccer.obj`) and spins it about the vertical axis over 60 frames. It writes
  the frames as `frame_000.pgm` to `frame_059.pgm` (binary PGM). If the file
  cannot be read or parsed, it prints an error and exits with status 1.
- `tiny3d-lighting [--output-dir DIR] [--frames N]`: moves a cube and a
  pyramid around a circle while they turn, each shaded by two lights. It
  writes `frame000.pgm` onwards as text (P2) PGM files. There are 200 frames
  by default, and `--frames` limits the output to the first N of them.

The frames are written into the current directory unless `--output-dir` is
given.

## What it does not do

- Its only output is still images in PGM format. It does not write other image
  formats and does not assemble frames into a video.
- Rendering is wireframe only, with orthographic projection. There is no
  filling of faces, no hidden-line removal and no perspective camera.
- The OBJ reader reads only vertex positions and face indices. It ignores
  normals, texture coordinates and materials.

## Running the tests

```
pip install ".[test]"
pytest
```
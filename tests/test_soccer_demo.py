from tiny3d.canvas import Canvas
from tiny3d.objfile import Mesh
from tiny3d.renderer import HEIGHT, WIDTH, Edge
from tiny3d.soccer_demo import CANVAS_SIZE, FRAMES, main, render_frame
from tiny3d.vec3 import Vec3


def _lit(canvas):
    return [(x, y) for y, row in enumerate(canvas.pixels) for x, v in enumerate(row) if v > 0]


def _segment_mesh():
    return Mesh([Vec3(0, 0, 0), Vec3(1, 0, 0)], [Edge(0, 1)])


def test_first_frame_is_unrotated():
    canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
    render_frame(canvas, _segment_mesh(), 0)
    row = HEIGHT // 2
    assert canvas[WIDTH // 2, row] == 1.0
    assert canvas[WIDTH // 2 + 100, row] == 1.0
    assert canvas[WIDTH // 2 + 101, row] == 0.0
    assert len(_lit(canvas)) == 101


def test_quarter_turn_collapses_segment():
    canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
    render_frame(canvas, _segment_mesh(), 1, frames=4)
    assert _lit(canvas) == [(WIDTH // 2, HEIGHT // 2)]


def test_render_clears_previous_content():
    canvas = Canvas(CANVAS_SIZE, CANVAS_SIZE)
    canvas.set_pixel(5, 5, 1.0)
    render_frame(canvas, Mesh(), 0)
    assert _lit(canvas) == []


def test_main_writes_all_frames(tmp_path, capsys):
    obj = tmp_path / "mesh.obj"
    obj.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    out = tmp_path / "frames"
    out.mkdir()
    assert main([str(obj), "--output-dir", str(out)]) == 0
    files = sorted(out.glob("frame_*.pgm"))
    assert len(files) == FRAMES
    assert files[0].name == "frame_000.pgm"
    header = b"P5\n512 512\n255\n"
    data = files[0].read_bytes()
    assert data.startswith(header)
    assert len(data) == len(header) + CANVAS_SIZE * CANVAS_SIZE
    assert "Loaded OBJ: 3 vertices, 3 edges" in capsys.readouterr().out


def test_main_missing_obj_fails(tmp_path):
    assert main([str(tmp_path / "absent.obj"), "--output-dir", str(tmp_path)]) == 1
    assert list(tmp_path.glob("frame_*.pgm")) == []


def test_main_bad_obj_fails(tmp_path):
    obj = tmp_path / "bad.obj"
    obj.write_text("v 0 0 0\nf 1 2\n")
    assert main([str(obj), "--output-dir", str(tmp_path)]) == 1
import pytest

from tiny3d.canvas import Canvas


def _lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas[x, y] > 0.0
    }


def test_new_canvas_is_black():
    c = Canvas(5, 4)
    assert c.width == 5 and c.height == 4
    assert all(v == 0.0 for row in c.pixels for v in row)
    assert len(c.pixels) == 4 and all(len(row) == 5 for row in c.pixels)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 3)


def test_clear_fills_every_pixel():
    c = Canvas(3, 2)
    c.clear(0.25)
    assert all(v == 0.25 for row in c.pixels for v in row)


def test_set_pixel_clamps_to_one():
    c = Canvas(3, 3)
    c.set_pixel(1, 1, 5.0)
    assert c[1, 1] == 1.0


def test_set_pixel_keeps_brighter_value():
    c = Canvas(3, 3)
    c.set_pixel(1, 1, 0.8)
    c.set_pixel(1, 1, 0.3)
    assert c[1, 1] == 0.8


def test_set_pixel_out_of_bounds_is_ignored():
    c = Canvas(3, 3)
    c.set_pixel(-2, 0, 1.0)
    c.set_pixel(0, 3, 1.0)
    c.set_pixel(10, 10, 1.0)
    assert _lit(c) == set()


def test_set_pixel_rounds_half_away_from_zero():
    c = Canvas(4, 4)
    c.set_pixel(0.5, 2.5, 1.0)
    assert _lit(c) == {(1, 3)}


def test_set_pixel_small_negative_rounds_to_zero():
    c = Canvas(2, 2)
    c.set_pixel(-0.4, -0.4, 1.0)
    assert _lit(c) == {(0, 0)}


def test_horizontal_line():
    c = Canvas(10, 3)
    c.draw_line(1, 1, 6, 1, 1.0)
    assert _lit(c) == {(x, 1) for x in range(1, 7)}


def test_vertical_line_reversed():
    c = Canvas(3, 10)
    c.draw_line(2, 8, 2, 3)
    assert _lit(c) == {(2, y) for y in range(3, 9)}


def test_diagonal_line():
    c = Canvas(6, 6)
    c.draw_line(0, 0, 5, 5)
    assert _lit(c) == {(i, i) for i in range(6)}


def test_line_is_symmetric_in_endpoints_and_connected():
    a = Canvas(20, 20)
    a.draw_line(2, 3, 17, 11)
    lit = _lit(a)
    assert (2, 3) in lit and (17, 11) in lit
    # one pixel per column for a shallow line
    assert len(lit) == 17 - 2 + 1
    assert {x for x, _ in lit} == set(range(2, 18))


def test_line_clipped_outside_canvas():
    c = Canvas(4, 4)
    c.draw_line(-5, 1, 10, 1)
    assert _lit(c) == {(x, 1) for x in range(4)}


def test_pgm_header_and_size():
    c = Canvas(4, 3)
    data = c.to_pgm()
    header = b"P5\n4 3\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 4 * 3


def test_pgm_pixel_values():
    c = Canvas(2, 1)
    c.clear(0.0)
    c.set_pixel(1, 0, 1.0)
    assert c.to_pgm().endswith(bytes([0, 255]))


def test_pgm_clamps_out_of_range_values():
    c = Canvas(2, 1)
    c.clear(-3.0)
    c.pixels[0][1] = 7.0
    assert c.to_pgm().endswith(bytes([0, 255]))


def test_save_pgm_writes_same_bytes(tmp_path):
    c = Canvas(8, 8)
    c.draw_line(0, 7, 7, 0)
    path = tmp_path / "out.pgm"
    c.save_pgm(path)
    assert path.read_bytes() == c.to_pgm()


def test_save_pgm_missing_directory_raises(tmp_path):
    c = Canvas(1, 1)
    with pytest.raises(OSError):
        c.save_pgm(tmp_path / "missing" / "out.pgm")
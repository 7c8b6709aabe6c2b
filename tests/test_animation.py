import pytest

from tiny3d.animation import cubic_bezier
from tiny3d.vec3 import Vec3

P0 = Vec3(0.0, 0.0, 0.0)
P1 = Vec3(1.0, 3.0, -2.0)
P2 = Vec3(4.0, -1.0, 5.0)
P3 = Vec3(6.0, 2.0, 1.0)


def _xyz(v):
    return (v.x, v.y, v.z)


def test_start_is_first_point():
    assert cubic_bezier(P0, P1, P2, P3, 0.0) == P0


def test_end_is_last_point():
    result = cubic_bezier(P0, P1, P2, P3, 1.0)
    assert _xyz(result) == pytest.approx((6.0, 2.0, 1.0))


def test_reversed_control_points_mirror_parameter():
    for t in (0.1, 0.3, 0.5, 0.8):
        forward = cubic_bezier(P0, P1, P2, P3, t)
        backward = cubic_bezier(P3, P2, P1, P0, 1.0 - t)
        assert _xyz(forward) == pytest.approx(_xyz(backward))


def test_evenly_spaced_collinear_points_are_linear():
    a = Vec3(-2.0, 1.0, 4.0)
    d = Vec3(7.0, -5.0, 1.0)
    b = Vec3(1.0, -1.0, 3.0)
    c = Vec3(4.0, -3.0, 2.0)
    expected = {
        0.0: (-2.0, 1.0, 4.0),
        0.25: (0.25, -0.5, 3.25),
        0.5: (2.5, -2.0, 2.5),
        0.75: (4.75, -3.5, 1.75),
        1.0: (7.0, -5.0, 1.0),
    }
    for t, point in expected.items():
        result = cubic_bezier(a, b, c, d, t)
        assert _xyz(result) == pytest.approx(point)


def test_all_equal_points_give_constant_curve():
    p = Vec3(2.0, -3.0, 0.5)
    for t in (0.0, 0.4, 0.9):
        result = cubic_bezier(p, p, p, p, t)
        assert _xyz(result) == pytest.approx((2.0, -3.0, 0.5))
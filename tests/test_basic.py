import math

import pytest

from euclid_calc import (
    CalcError,
    CalcErrorKind,
    Circle,
    Line,
    Point,
    angle,
    angle_between,
    aprx_eq,
    distance,
    distance_line_line,
    distance_point_line,
    distance_sq,
    is_parallel,
    is_through,
    midpoint,
)


def test_predicates():
    a = Point(0.0, 0.0)
    c = Point(10.0, 24.0)
    d = Point(100.0, 240.000001)
    e = Point(10.0, 24.000001)
    l = Line.from_2p(a, c)
    l0 = Line.from_2p(a, d)
    k = Line.from_2p(e, d)
    circle = Circle.from_center_radius(a, 26.0)

    assert is_parallel(l, k)
    assert is_through(circle, c)
    assert not is_through(l0, c)


def test_is_parallel_both_directions():
    base = Line.from_2p(Point(0.0, 0.0), Point(2.0, 1.0))
    shifted = Line.from_2p(Point(0.0, 3.0), Point(4.0, 5.0))
    crossing = Line.from_2p(Point(0.0, 3.0), Point(4.0, 6.0))

    assert is_parallel(base, shifted)
    assert is_parallel(shifted, base)
    assert not is_parallel(base, crossing)
    assert not is_parallel(crossing, base)


def test_aprx_eq_uses_strict_tolerance():
    assert aprx_eq(1.0, 1.0 + 5e-11)
    assert not aprx_eq(1.0, 1.0 + 1e-9)
    assert aprx_eq(1.0, 1.05, eps=0.1)


def test_midpoint_is_equidistant_and_on_line():
    pairs = [
        (Point(0.0, 0.0), Point(4.0, 3.0)),
        (Point(-7.5, 2.25), Point(3.0, -11.0)),
        (Point(120.0, 80.0), Point(-33.0, 41.5)),
    ]
    for p, q in pairs:
        m = midpoint(p, q)
        assert distance(p, m) == pytest.approx(distance(m, q), abs=1e-10)
        assert is_through(Line.from_2p(p, q), m)


def test_distance_point_point_and_squared():
    p = Point(1.0, 1.0)
    q = Point(4.0, 5.0)
    assert distance(p, q) == pytest.approx(5.0)
    assert distance_sq(p, q) == pytest.approx(25.0)


def test_distance_point_line_in_either_order():
    l = Line(3.0, 4.0, -12.0)
    p = Point(0.0, 0.0)
    assert distance_point_line(p, l) == pytest.approx(12.0 / 5.0)
    assert distance(l, p) == pytest.approx(12.0 / 5.0)
    assert distance_sq(p, l) == pytest.approx(144.0 / 25.0)


def test_distance_line_line():
    l = Line(1.0, 1.0, 0.0)
    far = Line(-2.0, -2.0, 4.0)
    crossing = Line(1.0, -1.0, 7.0)

    assert distance_line_line(l, far) == pytest.approx(math.sqrt(2.0))
    assert distance(far, l) == pytest.approx(math.sqrt(2.0))
    assert distance(l, crossing) == 0.0


def test_distance_rejects_circles():
    with pytest.raises(TypeError):
        distance(Circle(Point(0.0, 0.0), 1.0), Point(1.0, 1.0))


@pytest.mark.parametrize(
    'a, b, expected',
    [
        ((1.0, 0.0), (0.0, 1.0), math.pi / 2),
        ((1.0, 0.0), (1.0, 1.0), math.pi / 4),
        ((1.0, 0.0), (-1.0, 0.0), math.pi),
        ((2.0, 0.0), (5.0, 0.0), 0.0),
        ((1.0, 0.0), (-1.0, -1.0), 3 * math.pi / 4),
    ],
)
def test_angle_at_origin(a, b, expected):
    assert angle(Point(*a), Point(0.0, 0.0), Point(*b)) == pytest.approx(expected, abs=1e-9)


def test_angle_undefined_for_degenerate_arm():
    o = Point(1.0, 1.0)
    with pytest.raises(CalcError) as excinfo:
        angle(Point(1.0, 1.0), o, Point(2.0, 3.0))
    assert excinfo.value.kind is CalcErrorKind.OVERLAPPING_POINT


def test_angle_between_lines_is_acute():
    horizontal = Line(0.0, 1.0, 0.0)
    steep = Line.from_2p(Point(0.0, 0.0), Point(-1.0, 1.0))

    assert angle_between(horizontal, steep) == pytest.approx(math.pi / 4)
    assert angle_between(horizontal, Line(1.0, 0.0, 5.0)) == pytest.approx(math.pi / 2)
    assert angle_between(horizontal, Line(0.0, -3.0, 2.0)) == pytest.approx(0.0, abs=1e-9)


def test_is_through_circle_and_line():
    circle = Circle(Point(1.0, 2.0), 5.0)
    assert is_through(circle, Point(4.0, 6.0))
    assert not is_through(circle, Point(4.0, 6.1))
    assert is_through(Line(1.0, 1.0, -3.0), Point(1.0, 2.0))


def test_is_through_rejects_points():
    with pytest.raises(TypeError):
        is_through(Point(0.0, 0.0), Point(0.0, 0.0))

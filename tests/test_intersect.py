import math

import pytest

from euclid_calc import (
    CalcError,
    CalcErrorKind,
    Circle,
    Line,
    Point,
    inter,
    inter_circle_circle,
    inter_common,
    inter_line_circle,
    inter_line_line,
    is_through,
    radical_axis,
)


def _sorted_pair(pair):
    return sorted(pair, key=lambda p: (round(p.x, 9), round(p.y, 9)))


def _assert_point(p, x, y, tol=1e-9):
    assert p.x == pytest.approx(x, abs=tol)
    assert p.y == pytest.approx(y, abs=tol)


@pytest.mark.parametrize(
    'l, k',
    [
        (Line(1.0, 2.0, -3.0), Line(-4.0, 1.0, 7.5)),
        (Line(0.0, 1.0, -2.0), Line(1.0, 0.0, 5.0)),
        (Line(3.5, -1.25, 10.0), Line(0.2, 0.9, -4.0)),
    ],
)
def test_line_line_intersection_satisfies_both_equations(l, k):
    p = inter_line_line(l, k)
    assert l.a * p.x + l.b * p.y + l.c == pytest.approx(0.0, abs=1e-10)
    assert k.a * p.x + k.b * p.y + k.c == pytest.approx(0.0, abs=1e-10)


@pytest.mark.parametrize(
    'k',
    [Line(2.0, 4.0, 1.0), Line(-1.0, -2.0, 3.0)],
    ids=['parallel', 'coincident'],
)
def test_parallel_lines_do_not_intersect(k):
    with pytest.raises(CalcError) as excinfo:
        inter_line_line(Line(1.0, 2.0, -3.0), k)
    assert excinfo.value.kind is CalcErrorKind.NO_INTERSECTION


def test_circle_circle_intersection_is_symmetric_about_center_line():
    c = Circle.from_center_radius(Point(0.0, 0.0), 3.0)
    d = Circle.from_center_radius(Point(5.0, 0.0), 4.0)

    low, high = _sorted_pair(inter(c, d))

    _assert_point(low, 1.8, -2.4)
    _assert_point(high, 1.8, 2.4)


def test_radical_axis_has_equal_power():
    c = Circle(Point(1.0, -2.0), 3.0)
    d = Circle(Point(-4.0, 5.0), 1.5)
    axis = radical_axis(c, d)
    # pick two points on the axis and compare their powers
    for t in (-3.0, 0.0, 7.0):
        p = Point(-axis.b * t - axis.a * axis.c / (axis.a ** 2 + axis.b ** 2),
                  axis.a * t - axis.b * axis.c / (axis.a ** 2 + axis.b ** 2))
        assert is_through(axis, p)
        power_c = (p.x - 1.0) ** 2 + (p.y + 2.0) ** 2 - 9.0
        power_d = (p.x + 4.0) ** 2 + (p.y - 5.0) ** 2 - 2.25
        assert power_c == pytest.approx(power_d, abs=1e-8)


def test_concentric_circles_do_not_intersect():
    c = Circle(Point(1.0, 1.0), 1.0)
    d = Circle(Point(1.0, 1.0), 2.0)
    with pytest.raises(CalcError) as excinfo:
        inter_circle_circle(c, d)
    assert excinfo.value.kind is CalcErrorKind.NO_INTERSECTION

    with pytest.raises(CalcError) as excinfo:
        radical_axis(c, d)
    assert excinfo.value.kind is CalcErrorKind.ZERO_COEFFICIENT


def test_distant_circles_do_not_intersect():
    with pytest.raises(CalcError) as excinfo:
        inter(Circle(Point(0.0, 0.0), 1.0), Circle(Point(5.0, 0.0), 1.0))
    assert excinfo.value.kind is CalcErrorKind.NO_INTERSECTION


@pytest.mark.parametrize(
    'line',
    [
        Line(0.0, 1.0, -1.0),
        Line(1.0, 0.0, -3.0),
        Line(1.0, -1.0, 0.0),
        Line(1e-3, 1.0, -0.5),
    ],
    ids=['horizontal', 'vertical', 'diagonal', 'almost-horizontal'],
)
def test_line_circle_points_lie_on_both(line):
    circle = Circle(Point(2.0, 1.0), 2.0)
    for p in inter_line_circle(line, circle):
        assert is_through(line, p, eps=1e-9)
        assert is_through(circle, p, eps=1e-9)


def test_line_circle_dispatch_order_does_not_matter():
    line = Line(1.0, -1.0, 0.0)
    circle = Circle(Point(0.0, 0.0), math.sqrt(2.0))

    first = _sorted_pair(inter(line, circle))
    second = _sorted_pair(inter(circle, line))

    _assert_point(first[0], -1.0, -1.0)
    _assert_point(first[1], 1.0, 1.0)
    assert first[0].approximately_equal(second[0])
    assert first[1].approximately_equal(second[1])


def test_tangent_line_returns_same_point_twice():
    p, q = inter_line_circle(Line(0.0, 1.0, -1.0), Circle(Point(0.0, 0.0), 1.0))
    _assert_point(p, 0.0, 1.0)
    assert p.approximately_equal(q)


def test_line_missing_circle():
    with pytest.raises(CalcError) as excinfo:
        inter_line_circle(Line(0.0, 1.0, -1.5), Circle(Point(0.0, 0.0), 1.0))
    assert excinfo.value.kind is CalcErrorKind.NO_INTERSECTION


def test_common_point_fast_path_line_circle():
    circle = Circle(Point(2.0, 1.0), 2.0)
    for line in (Line(1.0, -1.0, 0.0), Line(0.0, 1.0, -1.5), Line(1.0, 0.2, -3.0)):
        full = inter_line_circle(line, circle)
        other, common = inter_common(line, circle, full[0])
        assert common is full[0]
        assert other.approximately_equal(full[1], eps=1e-9)


def test_common_point_fast_path_circle_circle():
    c = Circle(Point(0.0, 0.0), 3.0)
    d = Circle(Point(5.0, 0.0), 4.0)
    other, common = inter_common(c, d, Point(1.8, 2.4))
    _assert_point(other, 1.8, -2.4)
    assert common == Point(1.8, 2.4)


def test_common_point_fast_path_trusts_caller():
    l = Line(1.0, 0.0, 0.0)
    k = Line(0.0, 1.0, 0.0)
    wrong = Point(3.0, 3.0)
    assert inter_common(l, k, wrong) is wrong


def test_inter_rejects_points():
    with pytest.raises(TypeError):
        inter(Point(0.0, 0.0), Line(1.0, 0.0, 0.0))


@pytest.mark.parametrize('t', [0.1 * i for i in range(1, 50)])
def test_externally_tangent_circles_touch_once(t):
    c = Circle(Point(0.0, 0.0), 1.0)
    d = Circle(Point(2.0 * math.cos(t), 2.0 * math.sin(t)), 1.0)

    p, q = inter(c, d)

    _assert_point(p, math.cos(t), math.sin(t), tol=1e-6)
    _assert_point(q, math.cos(t), math.sin(t), tol=1e-6)


@pytest.mark.parametrize('t', [0.35, 1.7, 2.9, 4.4, 5.8])
def test_internally_tangent_circles_touch_once(t):
    c = Circle(Point(0.0, 0.0), 2.0)
    d = Circle(Point(math.cos(t), math.sin(t)), 1.0)

    for p in inter(c, d):
        _assert_point(p, 2.0 * math.cos(t), 2.0 * math.sin(t), tol=1e-6)


@pytest.mark.parametrize('t', [0.3, 1.1, 2.2, 3.7, 5.0])
def test_tangent_line_at_generic_angle(t):
    line = Line(math.cos(t), math.sin(t), -1.0)
    for p in inter_line_circle(line, Circle(Point(0.0, 0.0), 1.0)):
        _assert_point(p, math.cos(t), math.sin(t), tol=1e-6)

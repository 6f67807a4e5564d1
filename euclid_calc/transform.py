"""Reflection, rotation, scaling and circular inversion.

Each transform has one function per operand type plus a dispatcher taking
any point, line or circle. Rotations are counter-clockwise for positive
angles.
"""

from __future__ import annotations

import logging
import math
from typing import Union

from .basic import Shape, is_parallel, is_through
from .construct import midpoint, perp, projection
from .errors import CalcError, CalcErrorKind
from .intersect import inter_line_circle, inter_line_line
from .logging_utils import apply_debug_logging
from .objects import ORIGIN, Circle, Line, Point

logger = logging.getLogger(__name__)

Mirror = Union[Point, Line]


def reflect_point_in_point(p: Point, center: Point) -> Point:
    return center.scale(2.0).subtract(p)


def reflect_point_in_line(p: Point, l: Line) -> Point:
    a, b, c = l.a, l.b, l.c
    m = b * b + a * a
    n = b * b - a * a
    return Point((p.x * n - 2.0 * a * (b * p.y + c)) / m, (-p.y * n - 2.0 * b * (a * p.x + c)) / m)


def reflect_line_in_point(l: Line, center: Point) -> Line:
    return Line(l.a, l.b, -l.c - 2.0 * (l.a * center.x + l.b * center.y))


def reflect_line_in_line(l: Line, mirror: Line) -> Line:
    if is_parallel(l, mirror):
        image = reflect_point_in_line(projection(ORIGIN, l), mirror)
        return Line.from_slope_and_point(l.a, l.b, image)
    a, b = mirror.a, mirror.b
    c, d = l.a, l.b
    a0 = a * a * c + 2.0 * a * b * d - b * b * c
    b0 = 2.0 * a * b * c + (b * b - a * a) * d
    return Line.from_slope_and_point(a0, b0, inter_line_line(l, mirror))


def reflect_circle_in_point(c: Circle, center: Point) -> Circle:
    return Circle(reflect_point_in_point(c.center, center), c.radius)


def reflect_circle_in_line(c: Circle, l: Line) -> Circle:
    return Circle(reflect_point_in_line(c.center, l), c.radius)


def reflect_in(shape: Shape, mirror: Mirror) -> Shape:
    """Reflect a point, line or circle in a point or a line."""

    if isinstance(mirror, Point):
        if isinstance(shape, Point):
            return reflect_point_in_point(shape, mirror)
        if isinstance(shape, Line):
            return reflect_line_in_point(shape, mirror)
        if isinstance(shape, Circle):
            return reflect_circle_in_point(shape, mirror)
    elif isinstance(mirror, Line):
        if isinstance(shape, Point):
            return reflect_point_in_line(shape, mirror)
        if isinstance(shape, Line):
            return reflect_line_in_line(shape, mirror)
        if isinstance(shape, Circle):
            return reflect_circle_in_line(shape, mirror)
    raise TypeError(f"cannot reflect {type(shape).__name__} in {type(mirror).__name__}")


def rotate_point(p: Point, center: Point, angle: float) -> Point:
    dx = p.x - center.x
    dy = p.y - center.y
    s = math.sin(angle)
    c = math.cos(angle)
    return Point(dx * c - dy * s + center.x, dy * c + dx * s + center.y)


def rotate_line(l: Line, center: Point, angle: float) -> Line:
    s = math.sin(angle)
    c = math.cos(angle)
    a0 = l.a * c - l.b * s
    b0 = l.b * c + l.a * s
    # the line takes the same value at the center before and after rotating
    value = l.a * center.x + l.b * center.y + l.c
    return Line(a0, b0, value - a0 * center.x - b0 * center.y)


def rotate_circle(c: Circle, center: Point, angle: float) -> Circle:
    return Circle(rotate_point(c.center, center, angle), c.radius)


def rotate(shape: Shape, center: Point, angle: float) -> Shape:
    if isinstance(shape, Point):
        return rotate_point(shape, center, angle)
    if isinstance(shape, Line):
        return rotate_line(shape, center, angle)
    if isinstance(shape, Circle):
        return rotate_circle(shape, center, angle)
    raise TypeError(f"cannot rotate {type(shape).__name__}")


def scale_point(p: Point, center: Point, ratio: float) -> Point:
    return center.add(p.subtract(center).scale(ratio))


def scale_line(l: Line, center: Point, ratio: float) -> Line:
    return Line(l.a, l.b, (l.a * center.x + l.b * center.y) * (ratio - 1.0) + l.c * ratio)


def scale_circle(c: Circle, center: Point, ratio: float) -> Circle:
    """Homothety of a circle.

    A negative ratio keeps the radius positive (``|ratio| * r``); a zero ratio
    collapses the circle and raises ``NONPOSITIVE_RADIUS``.
    """

    return Circle.from_center_radius(scale_point(c.center, center, ratio), abs(ratio) * c.radius)


def scale(shape: Shape, center: Point, ratio: float) -> Shape:
    if isinstance(shape, Point):
        return scale_point(shape, center, ratio)
    if isinstance(shape, Line):
        return scale_line(shape, center, ratio)
    if isinstance(shape, Circle):
        return scale_circle(shape, center, ratio)
    raise TypeError(f"cannot scale {type(shape).__name__}")


def invert_point(p: Point, center: Point, power: float) -> Point:
    if p.approximately_equal(center):
        raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "the center of inversion has no image")
    d = p.subtract(center)
    return center.add(d.scale(power / (d.x * d.x + d.y * d.y)))


def invert_line(l: Line, center: Point, power: float) -> Union[Line, Circle]:
    """Image of a line: itself when it passes through the center, else a circle through the center."""

    if is_through(l, center):
        return l
    foot = projection(center, l)
    return Circle.from_center_point(midpoint(invert_point(foot, center, power), center), center)


def invert_circle(c: Circle, center: Point, power: float) -> Union[Line, Circle]:
    """Image of a circle: a line when it passes through the center, else a circle."""

    if is_through(c, center):
        m = midpoint(invert_point(c.center, center, power), center)
        return perp(m, Line.from_2p(m, center))
    if c.center.approximately_equal(center):
        return Circle.from_center_radius(center, abs(power) / c.radius)
    near, far = inter_line_circle(Line.from_2p(center, c.center), c)
    near_image = invert_point(near, center, power)
    far_image = invert_point(far, center, power)
    return Circle.from_center_point(midpoint(near_image, far_image), near_image)


def invert_in(shape: Shape, center: Point, power: float) -> Shape:
    """Circular inversion with the given center and power (possibly negative)."""

    if isinstance(shape, Point):
        return invert_point(shape, center, power)
    if isinstance(shape, Line):
        return invert_line(shape, center, power)
    if isinstance(shape, Circle):
        return invert_circle(shape, center, power)
    raise TypeError(f"cannot invert {type(shape).__name__}")


__all__ = [
    "reflect_in",
    "reflect_point_in_point",
    "reflect_point_in_line",
    "reflect_line_in_point",
    "reflect_line_in_line",
    "reflect_circle_in_point",
    "reflect_circle_in_line",
    "rotate",
    "rotate_point",
    "rotate_line",
    "rotate_circle",
    "scale",
    "scale_point",
    "scale_line",
    "scale_circle",
    "invert_in",
    "invert_point",
    "invert_line",
    "invert_circle",
]


apply_debug_logging(globals(), logger=logger)

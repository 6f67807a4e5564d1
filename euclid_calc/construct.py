"""Derived objects built from points, lines and circles."""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from .basic import aprx_eq, is_through
from .constants import EPSILON
from .errors import CalcError, CalcErrorKind
from .intersect import inter_line_circle
from .logging_utils import apply_debug_logging
from .objects import Circle, Line, Point

logger = logging.getLogger(__name__)

LinePair = Tuple[Line, Line]


def midpoint(p: Point, q: Point) -> Point:
    return p.add(q).divide(2.0)


def center(points: Sequence[Point]) -> Point:
    """Arithmetic mean of a sequence of points."""

    if not points:
        raise ValueError("center requires at least one point")
    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    return Point.from_array(coords.mean(axis=0))


def parallel(p: Point, l: Line) -> Line:
    """Line through ``p`` parallel to ``l``."""

    return Line(l.a, l.b, -(l.a * p.x + l.b * p.y))


def perp(p: Point, l: Line) -> Line:
    """Line through ``p`` perpendicular to ``l``."""

    return Line(-l.b, l.a, l.b * p.x - l.a * p.y)


def projection(p: Point, l: Line) -> Point:
    """Foot of the perpendicular from ``p`` to ``l``."""

    a, b, c = l.a, l.b, l.c
    n = a * a + b * b
    return Point((b * b * p.x - a * c - a * b * p.y) / n, (a * a * p.y - b * c - a * b * p.x) / n)


def perp_bisect(p: Point, q: Point) -> Line:
    return perp(midpoint(p, q), Line.from_2p(p, q))


def _bisector(a: float, b: float, c: float) -> Line:
    if math.hypot(a, b) < EPSILON:
        raise CalcError(CalcErrorKind.INFINITY, "bisector of parallel lines is the line at infinity")
    return Line(a, b, c)


def angle_bisect(l: Line, k: Line) -> LinePair:
    """Both angle bisectors of two lines.

    The first one is the sum of the unit-normalized triples, the second their
    difference. For parallel lines one of them is the line at infinity and
    ``INFINITY`` is raised.
    """

    m = l.normal_length()
    n = k.normal_length()
    a0, b0, c0 = l.a / m, l.b / m, l.c / m
    a1, b1, c1 = k.a / n, k.b / n, k.c / n
    return _bisector(a0 + a1, b0 + b1, c0 + c1), _bisector(a0 - a1, b0 - b1, c0 - c1)


def angle_bisect_3p(a: Point, o: Point, b: Point) -> LinePair:
    """Bisectors of the angle ``AOB``, interior first, exterior second.

    A straight angle is bisected by the perpendicular at ``O``; a zero angle
    by the common arm.
    """

    arm_a = Line.from_2p(o, a)
    arm_b = Line.from_2p(o, b)
    u = a.subtract(o).divide(arm_a.normal_length())
    v = b.subtract(o).divide(arm_b.normal_length())
    if abs(u.x * v.y - u.y * v.x) < EPSILON:
        normal = perp(o, arm_a)
        if u.x * v.x + u.y * v.y < 0.0:
            return normal, arm_a
        return arm_a, normal
    return angle_bisect(arm_a, arm_b)


def polar_line(p: Point, c: Circle) -> Line:
    """Polar of ``p`` with respect to ``c``."""

    x0, y0 = p.x, p.y
    a, b = c.center.x, c.center.y
    r = c.radius
    return Line.from_coeff(x0 - a, y0 - b, a * (a - x0) + b * (b - y0) - r * r)


def tangent(p: Point, c: Circle) -> LinePair:
    """Tangents from ``p`` to ``c``.

    A point on the circle has a single tangent, returned twice. A point inside
    the circle has none and raises ``NO_INTERSECTION``.
    """

    if is_through(c, p):
        line = perp(p, Line.from_2p(p, c.center))
        return line, line
    first, second = inter_line_circle(polar_line(p, c), c)
    return Line.from_2p(p, first), Line.from_2p(p, second)


def homothety_center(c: Circle, d: Circle) -> Tuple[Point, Point]:
    """External and internal centers of similitude of two circles.

    The external center maps ``c`` to ``d`` with a positive ratio and lies
    outside the segment joining the centers; the internal one uses a negative
    ratio and lies between them, at ``(c.O*r_d + d.O*r_c) / (r_c + r_d)``. Equal
    radii put the external center at infinity, which is reported for the pair.
    """

    r1, r2 = c.radius, d.radius
    if aprx_eq(r1, r2):
        raise CalcError(CalcErrorKind.INFINITY, "equal radii put the external center at infinity")
    external = d.center.scale(r1).subtract(c.center.scale(r2)).divide(r1 - r2)
    internal = c.center.scale(r2).add(d.center.scale(r1)).divide(r1 + r2)
    return external, internal


def outer_common_tangent(c: Circle, d: Circle) -> LinePair:
    external, _ = homothety_center(c, d)
    return tangent(external, c)


def inner_common_tangent(c: Circle, d: Circle) -> LinePair:
    _, internal = homothety_center(c, d)
    return tangent(internal, c)


__all__ = [
    "LinePair",
    "midpoint",
    "center",
    "parallel",
    "perp",
    "projection",
    "perp_bisect",
    "angle_bisect",
    "angle_bisect_3p",
    "polar_line",
    "tangent",
    "homothety_center",
    "outer_common_tangent",
    "inner_common_tangent",
]


apply_debug_logging(globals(), logger=logger)

"""Intersection engine for lines and circles.

Every pairing has two entry points. ``inter_*`` solves the full system. The
``inter_common_*`` variants take one intersection point that is already known
by construction and recover the other one from the sum of the roots (Vieta),
which avoids the discriminant and its square root. The common point is *not*
checked: a wrong common point silently produces a wrong second point. The
given point is always the last element of the returned pair.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple, Union

from .basic import is_parallel
from .constants import EPSILON
from .errors import CalcError, CalcErrorKind
from .logging_utils import apply_debug_logging
from .objects import Circle, Line, Point

logger = logging.getLogger(__name__)

PointPair = Tuple[Point, Point]


def inter_line_line(l: Line, k: Line) -> Point:
    """Intersection of two lines by Cramer's rule."""

    # coincident lines are parallel too
    if is_parallel(l, k):
        raise CalcError(CalcErrorKind.NO_INTERSECTION, "lines are parallel")
    det = l.a * k.b - k.a * l.b
    return Point((l.b * k.c - k.b * l.c) / det, (l.c * k.a - k.c * l.a) / det)


def _solves_for_y(l: Line) -> bool:
    return abs(l.a) >= abs(l.b)


def _line_circle_quadratic(l: Line, c: Circle) -> Tuple[float, float, float]:
    """Quadratic in ``y`` (or ``x``) obtained by substituting ``l`` into ``c``."""

    a, b, k = l.a, l.b, l.c
    o, r = c.center, c.radius
    lead = a * a + b * b
    if _solves_for_y(l):
        shift = a * o.x + k
        return lead, 2.0 * (shift * b - a * a * o.y), a * a * (o.y * o.y - r * r) + shift * shift
    shift = b * o.y + k
    return lead, 2.0 * (shift * a - b * b * o.x), b * b * (o.x * o.x - r * r) + shift * shift


def _point_on_line(l: Line, root: float) -> Point:
    if _solves_for_y(l):
        return Point(-(l.b * root + l.c) / l.a, root)
    return Point(root, -(l.a * root + l.c) / l.b)


def inter_line_circle(l: Line, c: Circle) -> PointPair:
    """Both intersections of a line and a circle.

    A tangent line yields the same point twice.
    """

    qa, qb, qc = _line_circle_quadratic(l, c)
    disc = qb * qb - 4.0 * qa * qc
    if disc < 0.0:
        # rounding noise on a tangent, relative to the terms that cancel
        if disc > -EPSILON * max(qb * qb, abs(4.0 * qa * qc)):
            disc = 0.0
        else:
            logger.debug("line-circle discriminant %.3g is negative", disc)
            raise CalcError(CalcErrorKind.NO_INTERSECTION, "line misses the circle")
    root = math.sqrt(disc)
    first = (-qb + root) / qa / 2.0
    second = (-qb - root) / qa / 2.0
    return _point_on_line(l, first), _point_on_line(l, second)


def inter_common_line_line(l: Line, k: Line, common: Point) -> Point:
    return common


def inter_common_line_circle(l: Line, c: Circle, common: Point) -> PointPair:
    qa, qb, _ = _line_circle_quadratic(l, c)
    known = common.y if _solves_for_y(l) else common.x
    return _point_on_line(l, -qb / qa - known), common


def radical_axis(c: Circle, d: Circle) -> Line:
    """Line of points with equal power with respect to both circles."""

    o, p = c.center, d.center
    if o.approximately_equal(p):
        raise CalcError(CalcErrorKind.ZERO_COEFFICIENT, "concentric circles have no radical axis")
    f1 = o.x * o.x + o.y * o.y - c.radius * c.radius
    f2 = p.x * p.x + p.y * p.y - d.radius * d.radius
    return Line(2.0 * (p.x - o.x), 2.0 * (p.y - o.y), f1 - f2)


def _radical_axis_or_miss(c: Circle, d: Circle) -> Line:
    try:
        return radical_axis(c, d)
    except CalcError as exc:
        raise CalcError(CalcErrorKind.NO_INTERSECTION, "concentric circles do not meet") from exc


def inter_circle_circle(c: Circle, d: Circle) -> PointPair:
    return inter_line_circle(_radical_axis_or_miss(c, d), d)


def inter_common_circle_circle(c: Circle, d: Circle, common: Point) -> PointPair:
    return inter_common_line_circle(_radical_axis_or_miss(c, d), d, common)


Curve = Union[Line, Circle]


def inter(x: Curve, y: Curve) -> Union[Point, PointPair]:
    """Intersect any two lines or circles."""

    if isinstance(x, Line) and isinstance(y, Line):
        return inter_line_line(x, y)
    if isinstance(x, Line) and isinstance(y, Circle):
        return inter_line_circle(x, y)
    if isinstance(x, Circle) and isinstance(y, Line):
        return inter_line_circle(y, x)
    if isinstance(x, Circle) and isinstance(y, Circle):
        return inter_circle_circle(x, y)
    raise TypeError(f"cannot intersect {type(x).__name__} with {type(y).__name__}")


def inter_common(x: Curve, y: Curve, common: Point) -> Union[Point, PointPair]:
    """Like :func:`inter`, with one intersection point already known."""

    if isinstance(x, Line) and isinstance(y, Line):
        return inter_common_line_line(x, y, common)
    if isinstance(x, Line) and isinstance(y, Circle):
        return inter_common_line_circle(x, y, common)
    if isinstance(x, Circle) and isinstance(y, Line):
        return inter_common_line_circle(y, x, common)
    if isinstance(x, Circle) and isinstance(y, Circle):
        return inter_common_circle_circle(x, y, common)
    raise TypeError(f"cannot intersect {type(x).__name__} with {type(y).__name__}")


__all__ = [
    "PointPair",
    "inter",
    "inter_common",
    "inter_line_line",
    "inter_line_circle",
    "inter_circle_circle",
    "inter_common_line_line",
    "inter_common_line_circle",
    "inter_common_circle_circle",
    "radical_axis",
]


apply_debug_logging(globals(), logger=logger)

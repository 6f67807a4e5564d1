"""Approximate predicates and metric functions."""

from __future__ import annotations

import logging
import math
from typing import Union

from .constants import EPSILON
from .errors import CalcError, CalcErrorKind
from .logging_utils import apply_debug_logging
from .objects import Circle, Line, Point

logger = logging.getLogger(__name__)

Shape = Union[Point, Line, Circle]


def aprx_eq(a: float, b: float, eps: float = EPSILON) -> bool:
    """Return ``True`` when two floats differ by less than ``eps``."""

    return abs(a - b) < eps


def approximately_equal(x: Shape, y: Shape, eps: float = EPSILON) -> bool:
    """Tolerance-based equality of two points, lines or circles.

    Values of different types never compare equal.
    """

    if type(x) is not type(y):
        return False
    return x.approximately_equal(y, eps)


def is_parallel(l: Line, k: Line, eps: float = EPSILON) -> bool:
    return aprx_eq(l.a * k.b, l.b * k.a, eps)


def is_through(shape: Union[Line, Circle], point: Point, eps: float = EPSILON) -> bool:
    """Test whether ``point`` lies on a line or a circle."""

    if isinstance(shape, Line):
        return distance_point_line(point, shape) < eps
    if isinstance(shape, Circle):
        return aprx_eq(distance_point_point(shape.center, point), shape.radius, eps)
    raise TypeError(f"cannot test incidence on {type(shape).__name__}")


def distance_point_point_sq(p: Point, q: Point) -> float:
    dx = p.x - q.x
    dy = p.y - q.y
    return dx * dx + dy * dy


def distance_point_line_sq(p: Point, l: Line) -> float:
    z = l.a * p.x + l.b * p.y + l.c
    return z * z / (l.a * l.a + l.b * l.b)


def distance_line_line_sq(l: Line, k: Line) -> float:
    if not is_parallel(l, k):
        return 0.0
    # rescale k so that its normal equals the normal of l
    ratio = (l.a * k.a + l.b * k.b) / (k.a * k.a + k.b * k.b)
    z = l.c - ratio * k.c
    return z * z / (l.a * l.a + l.b * l.b)


def distance_point_point(p: Point, q: Point) -> float:
    return math.sqrt(distance_point_point_sq(p, q))


def distance_point_line(p: Point, l: Line) -> float:
    return math.sqrt(distance_point_line_sq(p, l))


def distance_line_line(l: Line, k: Line) -> float:
    return math.sqrt(distance_line_line_sq(l, k))


def distance_sq(x: Union[Point, Line], y: Union[Point, Line]) -> float:
    """Squared distance between any two points or lines."""

    if isinstance(x, Point) and isinstance(y, Point):
        return distance_point_point_sq(x, y)
    if isinstance(x, Point) and isinstance(y, Line):
        return distance_point_line_sq(x, y)
    if isinstance(x, Line) and isinstance(y, Point):
        return distance_point_line_sq(y, x)
    if isinstance(x, Line) and isinstance(y, Line):
        return distance_line_line_sq(x, y)
    raise TypeError(f"no distance between {type(x).__name__} and {type(y).__name__}")


def distance(x: Union[Point, Line], y: Union[Point, Line]) -> float:
    return math.sqrt(distance_sq(x, y))


def angle(a: Point, o: Point, b: Point) -> float:
    """Unsigned angle ``AOB`` in ``[0, pi]``."""

    if a.approximately_equal(o) or b.approximately_equal(o):
        raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "angle arm has zero length")
    u = a.subtract(o)
    v = b.subtract(o)
    cos_value = (u.x * v.x + u.y * v.y) / math.sqrt(distance_point_point_sq(a, o) * distance_point_point_sq(b, o))
    return math.acos(max(-1.0, min(1.0, cos_value)))


def angle_between(l: Line, k: Line) -> float:
    """Acute angle between two lines, in ``[0, pi/2]``."""

    cos_value = (l.a * k.a + l.b * k.b) / (l.normal_length() * k.normal_length())
    return math.acos(min(1.0, abs(cos_value)))


__all__ = [
    "Shape",
    "aprx_eq",
    "approximately_equal",
    "is_parallel",
    "is_through",
    "distance",
    "distance_sq",
    "distance_point_point",
    "distance_point_point_sq",
    "distance_point_line",
    "distance_point_line_sq",
    "distance_line_line",
    "distance_line_line_sq",
    "angle",
    "angle_between",
]


apply_debug_logging(globals(), logger=logger)

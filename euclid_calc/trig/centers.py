"""Classical triangle centers.

Side lengths follow the usual naming: ``a = |BC|``, ``b = |CA|``, ``c = |AB|``.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from ..basic import distance_point_point, distance_point_point_sq
from ..constants import EPSILON
from ..construct import angle_bisect_3p, midpoint, perp, perp_bisect
from ..errors import CalcError, CalcErrorKind
from ..intersect import inter_line_line
from ..logging_utils import apply_debug_logging
from ..objects import Line, Point, Triangle
from ..transform import reflect_point_in_line

logger = logging.getLogger(__name__)

Weights = Tuple[float, float, float]


def _side_lengths(triangle: Triangle) -> Tuple[float, float, float]:
    a, b, c = triangle
    return distance_point_point(b, c), distance_point_point(c, a), distance_point_point(a, b)


def _require_proper(triangle: Triangle) -> None:
    a, b, c = triangle
    if a.approximately_equal(b) or b.approximately_equal(c) or c.approximately_equal(a):
        raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "triangle vertices coincide")
    u = b.subtract(a)
    v = c.subtract(a)
    scale = math.sqrt(distance_point_point_sq(a, b) * distance_point_point_sq(a, c))
    if abs(u.x * v.y - u.y * v.x) < EPSILON * scale:
        raise CalcError(CalcErrorKind.COLLINEAR_POINTS, "triangle is degenerate")


def from_barycentric(triangle: Triangle, weights: Weights) -> Point:
    """Point with barycentric coordinates ``weights`` relative to ``triangle``."""

    w = np.asarray(weights, dtype=float)
    total = float(w.sum())
    if abs(total) < EPSILON:
        raise CalcError(CalcErrorKind.ZERO_COEFFICIENT, "barycentric weights sum to zero")
    vertices = np.array([(p.x, p.y) for p in triangle], dtype=float)
    return Point.from_array(w @ vertices / total)


def circum(triangle: Triangle) -> Point:
    a, b, c = triangle
    if b.approximately_equal(c):
        raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "triangle vertices coincide")
    try:
        return inter_line_line(perp_bisect(a, b), perp_bisect(a, c))
    except CalcError as exc:
        if exc.kind is not CalcErrorKind.NO_INTERSECTION:
            raise
        raise CalcError(CalcErrorKind.COLLINEAR_POINTS, "triangle is degenerate") from exc


def incenter(triangle: Triangle) -> Point:
    _require_proper(triangle)
    a, b, c = triangle
    return inter_line_line(angle_bisect_3p(a, c, b)[0], angle_bisect_3p(a, b, c)[0])


def excenter(triangle: Triangle, vertex: int = 0) -> Point:
    """Excenter opposite ``triangle[vertex]``, i.e. the one inside that vertex's angle."""

    if vertex not in (0, 1, 2):
        raise ValueError(f"vertex index must be 0, 1 or 2, got {vertex!r}")
    _require_proper(triangle)
    a, b, c = triangle[vertex:] + triangle[:vertex]
    return inter_line_line(angle_bisect_3p(b, a, c)[0], angle_bisect_3p(a, b, c)[1])


def ortho(triangle: Triangle) -> Point:
    a, b, c = triangle
    return inter_line_line(perp(a, Line.from_2p(b, c)), perp(b, Line.from_2p(a, c)))


def centroid(triangle: Triangle) -> Point:
    a, b, c = triangle
    return a.add(b).add(c).divide(3.0)


def nine_point(triangle: Triangle) -> Point:
    a, b, c = triangle
    return circum((midpoint(a, b), midpoint(c, b), midpoint(a, c)))


def symmedian(triangle: Triangle) -> Point:
    a, b, c = triangle
    return from_barycentric(
        triangle,
        (distance_point_point_sq(b, c), distance_point_point_sq(c, a), distance_point_point_sq(a, b)),
    )


def gergonne(triangle: Triangle) -> Point:
    """Common point of the cevians to the incircle touch points.

    Weights are ``1/(s-a) : 1/(s-b) : 1/(s-c)``; the weights ``s-a : s-b : s-c``
    give the Nagel point instead, see :func:`nagel`.
    """

    a, b, c = _side_lengths(triangle)
    s = (a + b + c) / 2.0
    if min(s - a, s - b, s - c) < EPSILON:
        raise CalcError(CalcErrorKind.COLLINEAR_POINTS, "triangle is degenerate")
    return from_barycentric(triangle, (1.0 / (s - a), 1.0 / (s - b), 1.0 / (s - c)))


def nagel(triangle: Triangle) -> Point:
    """Common point of the cevians to the excircle touch points."""

    a, b, c = _side_lengths(triangle)
    s = (a + b + c) / 2.0
    return from_barycentric(triangle, (s - a, s - b, s - c))


def isogonal_conjugate(triangle: Triangle, p: Point) -> Point:
    _require_proper(triangle)
    a, b, c = triangle
    image_b = reflect_point_in_line(p, angle_bisect_3p(a, b, c)[0])
    image_c = reflect_point_in_line(p, angle_bisect_3p(a, c, b)[0])
    return inter_line_line(Line.from_2p(b, image_b), Line.from_2p(c, image_c))


__all__ = [
    "Weights",
    "from_barycentric",
    "circum",
    "incenter",
    "excenter",
    "ortho",
    "centroid",
    "nine_point",
    "symmedian",
    "gergonne",
    "nagel",
    "isogonal_conjugate",
]


apply_debug_logging(globals(), logger=logger)

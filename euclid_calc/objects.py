"""Immutable value types of the calculus: points, lines and circles."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .constants import EPSILON
from .errors import CalcError, CalcErrorKind
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


def _close(a: float, b: float, eps: float) -> bool:
    return abs(a - b) < eps


@dataclass(frozen=True)
class Point:
    """A location in the plane, or a free vector."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_array(cls, value: Sequence[float]) -> "Point":
        arr = np.asarray(value, dtype=float)
        if arr.shape != (2,):
            raise ValueError("coordinate must be length-2")
        return cls(float(arr[0]), float(arr[1]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def divide(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def approximately_equal(self, other: "Point", eps: float = EPSILON) -> bool:
        return _close(self.x, other.x, eps) and _close(self.y, other.y, eps)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Line:
    """Line in standard form ``a*x + b*y + c = 0``.

    ``a`` and ``b`` are never both zero. Triples that are scalar multiples of
    each other describe the same line; compare with ``approximately_equal``.
    """

    a: float
    b: float
    c: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", float(self.a))
        object.__setattr__(self, "b", float(self.b))
        object.__setattr__(self, "c", float(self.c))
        if self.a == 0.0 and self.b == 0.0:
            raise CalcError(CalcErrorKind.ZERO_COEFFICIENT, "coefficients of x and y are both zero")

    @classmethod
    def from_coeff(cls, a: float, b: float, c: float) -> "Line":
        return cls(a, b, c)

    @classmethod
    def from_slope_and_point(cls, a: float, b: float, point: Point) -> "Line":
        """Line with normal ``(a, b)`` passing through ``point``."""

        return cls(float(a), float(b), -a * point.x - b * point.y)

    @classmethod
    def from_2p(cls, p: Point, q: Point) -> "Line":
        if p.approximately_equal(q):
            raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "a line needs two distinct points")
        return cls(p.y - q.y, q.x - p.x, p.x * q.y - p.y * q.x)

    def normal_length(self) -> float:
        return math.hypot(self.a, self.b)

    def approximately_equal(self, other: "Line", eps: float = EPSILON) -> bool:
        if not _close(self.a * other.b, self.b * other.a, eps):
            return False
        # Scale both triples to unit normals facing the same way.
        sign = 1.0 if self.a * other.a + self.b * other.b > 0.0 else -1.0
        return _close(self.c / self.normal_length(), sign * other.c / other.normal_length(), eps)


@dataclass(frozen=True)
class Circle:
    """Circle given by its center and a strictly positive radius."""

    center: Point
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", float(self.radius))
        if not self.radius > 0.0:
            raise CalcError(CalcErrorKind.NONPOSITIVE_RADIUS, f"radius must be positive, got {self.radius!r}")

    @classmethod
    def from_center_radius(cls, center: Point, radius: float) -> "Circle":
        return cls(center, radius)

    @classmethod
    def from_center_point(cls, center: Point, point: Point) -> "Circle":
        if center.approximately_equal(point):
            raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "circle point coincides with its center")
        return cls(center, math.hypot(point.x - center.x, point.y - center.y))

    @classmethod
    def from_3p(cls, p: Point, q: Point, r: Point) -> "Circle":
        """Circumscribed circle of three distinct, non-collinear points."""

        from .construct import perp_bisect
        from .intersect import inter_line_line

        if p.approximately_equal(r):
            raise CalcError(CalcErrorKind.OVERLAPPING_POINT, "circle needs three distinct points")
        try:
            center = inter_line_line(perp_bisect(p, q), perp_bisect(q, r))
        except CalcError as exc:
            if exc.kind is not CalcErrorKind.NO_INTERSECTION:
                raise
            raise CalcError(CalcErrorKind.COLLINEAR_POINTS, "points are collinear") from exc
        return cls(center, math.hypot(p.x - center.x, p.y - center.y))

    def approximately_equal(self, other: "Circle", eps: float = EPSILON) -> bool:
        return self.center.approximately_equal(other.center, eps) and _close(self.radius, other.radius, eps)


Triangle = Tuple[Point, Point, Point]


__all__ = ["Point", "Line", "Circle", "Triangle", "ORIGIN"]


apply_debug_logging(globals(), logger=logger)

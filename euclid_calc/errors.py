from __future__ import annotations

from enum import Enum


class CalcErrorKind(Enum):
    """Every way a geometric calculation can be undefined."""

    OVERLAPPING_POINT = "overlapping point"
    NONPOSITIVE_RADIUS = "nonpositive radius"
    COLLINEAR_POINTS = "collinear points"
    NO_INTERSECTION = "no intersection"
    ZERO_COEFFICIENT = "zero coefficient"
    INFINITY = "infinity"


class CalcError(ValueError):
    """Raised when an operation has no defined result for its input."""

    def __init__(self, kind: CalcErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind


__all__ = ["CalcError", "CalcErrorKind"]

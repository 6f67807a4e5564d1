"""Points placed on a circle or along a segment."""

from __future__ import annotations

import logging
import math

from .logging_utils import apply_debug_logging
from .objects import Circle, Point

logger = logging.getLogger(__name__)


def on_circle(c: Circle, angle: float) -> Point:
    """Point ``A`` of ``c`` such that the angle from the x-axis to ``OA`` is ``angle``."""

    return Point(c.center.x + c.radius * math.cos(angle), c.center.y + c.radius * math.sin(angle))


def on_segment(a: Point, b: Point, ratio: float) -> Point:
    """Point ``P`` with ``AP = ratio * AB`` as vectors."""

    return a.scale(1.0 - ratio).add(b.scale(ratio))


__all__ = ["on_circle", "on_segment"]


apply_debug_logging(globals(), logger=logger)

"""Tolerances and angle units shared by the calculus."""

from __future__ import annotations

import math

EPSILON = 1e-10
DEG = math.pi / 180.0
ROUND = 2.0 * math.pi

__all__ = ["EPSILON", "DEG", "ROUND"]

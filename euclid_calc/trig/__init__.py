"""Triangle geometry built on the core calculus."""

from .centers import (
    Weights,
    centroid,
    circum,
    excenter,
    from_barycentric,
    gergonne,
    incenter,
    isogonal_conjugate,
    nagel,
    nine_point,
    ortho,
    symmedian,
)

__all__ = [
    "Weights",
    "centroid",
    "circum",
    "excenter",
    "from_barycentric",
    "gergonne",
    "incenter",
    "isogonal_conjugate",
    "nagel",
    "nine_point",
    "ortho",
    "symmedian",
]

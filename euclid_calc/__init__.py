from .constants import DEG, EPSILON, ROUND
from .errors import CalcError, CalcErrorKind
from .objects import ORIGIN, Circle, Line, Point, Triangle
from .basic import (
    angle,
    angle_between,
    approximately_equal,
    aprx_eq,
    distance,
    distance_line_line,
    distance_point_line,
    distance_point_point,
    distance_sq,
    is_parallel,
    is_through,
)
from .intersect import (
    inter,
    inter_circle_circle,
    inter_common,
    inter_common_circle_circle,
    inter_common_line_circle,
    inter_common_line_line,
    inter_line_circle,
    inter_line_line,
    radical_axis,
)
from .construct import (
    angle_bisect,
    angle_bisect_3p,
    center,
    homothety_center,
    inner_common_tangent,
    midpoint,
    outer_common_tangent,
    parallel,
    perp,
    perp_bisect,
    polar_line,
    projection,
    tangent,
)
from .point_on import on_circle, on_segment
from .transform import invert_in, reflect_in, rotate, scale
from .trig import (
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
    'DEG',
    'EPSILON',
    'ROUND',
    'ORIGIN',
    'CalcError',
    'CalcErrorKind',
    'Point',
    'Line',
    'Circle',
    'Triangle',
    'angle',
    'angle_between',
    'approximately_equal',
    'aprx_eq',
    'distance',
    'distance_sq',
    'distance_point_point',
    'distance_point_line',
    'distance_line_line',
    'is_parallel',
    'is_through',
    'inter',
    'inter_common',
    'inter_line_line',
    'inter_line_circle',
    'inter_circle_circle',
    'inter_common_line_line',
    'inter_common_line_circle',
    'inter_common_circle_circle',
    'radical_axis',
    'midpoint',
    'center',
    'parallel',
    'perp',
    'projection',
    'perp_bisect',
    'angle_bisect',
    'angle_bisect_3p',
    'polar_line',
    'tangent',
    'homothety_center',
    'outer_common_tangent',
    'inner_common_tangent',
    'on_circle',
    'on_segment',
    'reflect_in',
    'rotate',
    'scale',
    'invert_in',
    'centroid',
    'circum',
    'excenter',
    'from_barycentric',
    'gergonne',
    'incenter',
    'isogonal_conjugate',
    'nagel',
    'nine_point',
    'ortho',
    'symmedian',
]

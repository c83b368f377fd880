"""
geokernel - double precision 3D geometry kernel
"""
import logging

from geokernel.geometry.constants import (
    EQUALITY_EPSILON,
    FLOAT_PRECISION_EPSILON,
    MIN_SEPARATION,
)
from geokernel.geometry.errors import GeometryError, InvalidArgumentError, InvalidConstructionError
from geokernel.geometry.tolerance import (
    DOUBLE_PRECISION,
    FLOAT_PRECISION,
    Tolerance,
    almost_zero,
    epsilon_equals,
)
from geokernel.geometry.point import Point
from geokernel.geometry.vector import Vector
from geokernel.geometry.rotation import CartesianAxis, Quaternion
from geokernel.geometry.line import Line, X_AXIS, Y_AXIS, Z_AXIS, line_passing_by
from geokernel.geometry.plane import Plane, Side, plane_from_ordered_points
from geokernel.geometry.line_segment import LineSegment, ZeroLengthLineSegment, make_zero_length_line_segment
from geokernel.geometry.operations import in_same_plane, line_to_line_intersection
from geokernel.planar.point_2d import Point2D
from geokernel.planar.line_2d import Line2D
from geokernel.planar.line_segment_2d import LineSegment2D
from geokernel.planar.polar_point import PolarPoint
from geokernel.planar.ordering import PlanePointsOrdering, sort_points
from geokernel.utils.angles import ureg

# Output is configured by the application, see logging_config.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EQUALITY_EPSILON",
    "FLOAT_PRECISION_EPSILON",
    "MIN_SEPARATION",
    "GeometryError",
    "InvalidArgumentError",
    "InvalidConstructionError",
    "DOUBLE_PRECISION",
    "FLOAT_PRECISION",
    "Tolerance",
    "almost_zero",
    "epsilon_equals",
    "Point",
    "Vector",
    "CartesianAxis",
    "Quaternion",
    "Line",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "line_passing_by",
    "Plane",
    "Side",
    "plane_from_ordered_points",
    "LineSegment",
    "ZeroLengthLineSegment",
    "make_zero_length_line_segment",
    "in_same_plane",
    "line_to_line_intersection",
    "Point2D",
    "Line2D",
    "LineSegment2D",
    "PolarPoint",
    "PlanePointsOrdering",
    "sort_points",
    "ureg",
]

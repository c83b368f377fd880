# geokernel/geometry/operations.py
"""Free functions combining points, vectors, lines, planes and segments."""
import logging
from typing import Iterable, Optional

from geokernel.geometry.constants import MIN_SEPARATION
from geokernel.geometry.errors import InvalidArgumentError
from geokernel.geometry.line import line_passing_by
from geokernel.geometry.line_segment import LineSegment, make_zero_length_line_segment
from geokernel.geometry.plane import plane_from_ordered_points
from geokernel.geometry.point import Point
from geokernel.geometry.tolerance import almost_zero, epsilon_equals
from geokernel.geometry.vector import Vector

# Configure logging
logger = logging.getLogger(__name__)


def _all_equal_for(points, coordinate: str) -> bool:
    first = getattr(points[0], coordinate)
    return all(epsilon_equals(getattr(p, coordinate), first) for p in points)


def _parallel_either_way(first: Vector, second: Vector) -> bool:
    return first.epsilon_equals(second) or first.epsilon_equals(second.negate())


def in_same_plane(points: Iterable[Point]) -> bool:
    """
    Check if all the points lie on one plane.

    Points sharing one coordinate value are coplanar straight away. Otherwise
    a plane through the first point, the first point well apart from it, and
    each other point in turn must always have the same normal, in either
    direction. Points closer than MIN_SEPARATION to either base point, or to
    the line through them, do not fix a plane reliably and are skipped.

    Raises:
        InvalidArgumentError: If fewer than three points are given
    """
    points = list(points)
    if len(points) < 3:
        raise InvalidArgumentError(f"Coplanarity needs at least three points, got {len(points)}")

    if any(_all_equal_for(points, coordinate) for coordinate in ("x", "y", "z")):
        logger.debug("Points share a coordinate value, plane is perpendicular to an axis")
        return True

    first = points[0]
    second = next((p for p in points[1:] if first.distant_enough(p)), None)
    if second is None:
        return True
    base_line = line_passing_by(first, second)

    reference_normal = None
    for point in points[1:]:
        if point is second:
            continue
        too_close = not (first.distant_enough(point) and second.distant_enough(point))
        if too_close or base_line.distance_to(point) < MIN_SEPARATION:
            logger.debug("Skipping %s, it does not fix a plane with %s and %s", point, first, second)
            continue
        normal = plane_from_ordered_points(first, second, point).normal
        if reference_normal is None:
            reference_normal = normal
        elif not _parallel_either_way(reference_normal, normal):
            return False
    return True


def line_to_line_intersection(segment_a: LineSegment, segment_b: LineSegment) -> Optional[LineSegment]:
    """
    Shortest segment between the lines enclosing two segments.

    The result joins the lines, not the segments: its ends may fall outside
    either input. When the lines cross, the result is a zero length segment
    at the crossing point.

    Returns:
        The connecting segment, or None for parallel lines

    Raises:
        InvalidArgumentError: If either segment is shorter than MIN_SEPARATION
    """
    p1, p2 = segment_a.start, segment_a.end
    p3, p4 = segment_b.start, segment_b.end
    p1_to_p2 = p1.vector_to(p2)
    p3_to_p4 = p3.vector_to(p4)
    if min(p1_to_p2.length, p3_to_p4.length) < MIN_SEPARATION:
        raise InvalidArgumentError("The segments are too short for the intersection calculation")

    p13 = p3.vector_to(p1)
    d1343 = p13.dot(p3_to_p4)
    d4321 = p3_to_p4.dot(p1_to_p2)
    d1321 = p13.dot(p1_to_p2)
    d4343 = p3_to_p4.dot(p3_to_p4)
    d2121 = p1_to_p2.dot(p1_to_p2)

    denominator = d2121 * d4343 - d4321 * d4321
    if almost_zero(denominator):
        logger.debug("Lines of %s and %s are parallel", segment_a, segment_b)
        return None

    mua = (d1343 * d4321 - d1321 * d4343) / denominator
    mub = (d1343 + d4321 * mua) / d4343

    point_a = p1.translate(p1_to_p2.scale(mua))
    point_b = p3.translate(p3_to_p4.scale(mub))
    if point_a.epsilon_equals(point_b):
        return make_zero_length_line_segment(point_a)
    return LineSegment(start=point_a, end=point_b)


def different_enough(first: Point, second: Point) -> bool:
    """Whether two points are at least MIN_SEPARATION apart."""
    return first.distance(second) >= MIN_SEPARATION


def facing_each_other(first: Vector, second: Vector) -> bool:
    return first.dot(second) < 0


def facing_the_same_way(first: Vector, second: Vector) -> bool:
    return first.dot(second) > 0

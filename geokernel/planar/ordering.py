# geokernel/planar/ordering.py
"""
Sorting of point sets in the plane.

The y axis grows upwards, as usual in geometry; screen coordinate systems
with y growing downwards see clockwise and counterclockwise swapped.
"""
import math
from enum import Enum, auto
from functools import cmp_to_key
from typing import Iterable, List

from geokernel.geometry.tolerance import almost_zero, epsilon_equals
from geokernel.planar.point_2d import Point2D


class PlanePointsOrdering(Enum):
    CLOCKWISE = auto()
    COUNTERCLOCKWISE = auto()
    X_AND_Y_AXES = auto()


def _positive_polar_angle(point: Point2D) -> float:
    """Polar angle in (0, 2π]."""
    angle = math.atan2(point.y, point.x)
    return angle if angle > 0 else angle + 2 * math.pi


def _on_positive_x_axis(angle: float) -> bool:
    return almost_zero(angle) or epsilon_equals(angle, 2 * math.pi)


def _compare(a: float, b: float) -> int:
    return (a > b) - (a < b)


def compare_counterclockwise(first: Point2D, second: Point2D) -> int:
    """
    Compare two points by polar angle.

    Angles within tolerance compare as equal, and so do angles at either end
    of the turn, 0 and 2π.
    """
    first_angle = _positive_polar_angle(first)
    second_angle = _positive_polar_angle(second)
    if _on_positive_x_axis(first_angle) and _on_positive_x_axis(second_angle):
        return 0
    if epsilon_equals(first_angle, second_angle):
        return 0
    return _compare(first_angle, second_angle)


def compare_x_and_y(first: Point2D, second: Point2D) -> int:
    """Compare by x, and by y when the x values are equal within tolerance."""
    if epsilon_equals(first.x, second.x):
        return _compare(first.y, second.y)
    return _compare(first.x, second.x)


def sort_points(points: Iterable[Point2D], ordering: PlanePointsOrdering) -> List[Point2D]:
    """Return the points sorted in a new list."""
    points = list(points)
    if ordering is PlanePointsOrdering.COUNTERCLOCKWISE:
        return sorted(points, key=cmp_to_key(compare_counterclockwise))
    if ordering is PlanePointsOrdering.CLOCKWISE:
        return list(reversed(sorted(points, key=cmp_to_key(compare_counterclockwise))))
    if ordering is PlanePointsOrdering.X_AND_Y_AXES:
        return sorted(points, key=cmp_to_key(compare_x_and_y))
    raise ValueError(f"Unknown ordering: {ordering}")

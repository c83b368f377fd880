# geokernel/geometry/line.py
import logging
import math
from typing import Iterable, Optional

from pydantic import Field, model_validator

from geokernel.geometry.errors import InvalidConstructionError
from geokernel.geometry.point import Point
from geokernel.geometry.rotation import rotate_point_around_line_through_origin
from geokernel.geometry.tolerance import almost_zero, epsilon_equals
from geokernel.geometry.vector import Vector
from geokernel.utils.angles import Angle, normalize_angle
from geokernel.utils.base_model import ImmutableModel

# Configure logging
logger = logging.getLogger(__name__)

COORDINATE_SYSTEM_ORIGIN = Point(x=0.0, y=0.0, z=0.0)


class Line(ImmutableModel):
    """
    An infinite line in 3D space: an origin point and a unit direction.

    A line has no forward sense; a direction and its negation describe the
    same set of points. Only the clockwise rotation uses the stored direction
    as its reference.
    """
    origin: Point = Field(description="A point on the line")
    direction: Vector = Field(description="Unit vector along the line")

    @model_validator(mode="after")
    def validate_direction_is_unit(self):
        """Validate that the direction is normalized."""
        if not almost_zero(self.direction.length - 1.0):
            raise ValueError(f"Line direction must be a unit vector, got length {self.direction.length}")
        return self

    def contains(self, point: Point, epsilon: Optional[float] = None) -> bool:
        """A point is on the line when it is epsilon-equal to its own projection."""
        return point.epsilon_equals(self.closest_point(point), epsilon)

    def contains_all(self, points: Iterable[Point]) -> bool:
        return all(self.contains(point) for point in points)

    def closest_point(self, point: Point) -> Point:
        """Orthogonal projection of the point on the line."""
        if point.epsilon_equals(self.origin):
            return point
        along = self.origin.vector_to(point).dot(self.direction)
        return self.origin.translate(self.direction.scale(along))

    def distance_to(self, point: Point) -> float:
        return point.distance(self.closest_point(point))

    def move_point_across(self, point: Point) -> Point:
        """
        Reflect a point through the line, the same as rotating it by π.

        A point on the line is returned unchanged.
        """
        if self.contains(point):
            return point
        closest = self.closest_point(point)
        return closest.translate(point.vector_to(closest))

    def rotate_point_pi_radians(self, point: Point) -> Point:
        return self.move_point_across(point)

    def rotate_point_around(self, point: Point, angle: Angle, approximate_direction: Vector) -> Point:
        """
        Rotate a point around the line, with the sense given by a hint.

        The point is rotated both ways. The result kept is the one closer to
        where the point would be after travelling the length of the arc in a
        straight line along ``approximate_direction``. A plane normal usually
        makes a good hint when the point and the line share that plane.

        Args:
            point: The point to rotate
            angle: Rotation angle, radians or a pint angle quantity
            approximate_direction: Rough tangent of the rotation at the point

        Raises:
            InvalidArgumentError: If the angle is -2π or less, or the hint has no length
        """
        adjusted = normalize_angle(angle)
        special = self._rotate_special_cases(point, adjusted)
        if special is not None:
            return special
        rotated = self._rotate_around_through_origin(point, adjusted)
        rotated_back = self._rotate_around_through_origin(point, -adjusted)
        travelled = self.distance_to(point) * adjusted
        target = point.translate(approximate_direction.with_length(travelled))
        if target.distance(rotated) < target.distance(rotated_back):
            return rotated
        return rotated_back

    def rotate_point_around_clockwise(self, point: Point, angle: Angle) -> Point:
        """
        Rotate a point clockwise around the line, looking along its direction.

        A negative angle rotates counterclockwise.

        Raises:
            InvalidArgumentError: If the angle is -2π or less
        """
        adjusted = normalize_angle(angle)
        special = self._rotate_special_cases(point, adjusted)
        if special is not None:
            return special
        rotated = self._rotate_around_through_origin(point, adjusted)
        if self._is_clockwise(point, rotated, adjusted):
            return rotated
        logger.debug("Rotation of %s around %s came out counterclockwise, using the opposite angle", point, self)
        return self._rotate_around_through_origin(point, -adjusted)

    def _is_clockwise(self, point: Point, rotated: Point, angle: float) -> bool:
        closest = self.closest_point(point)
        to_point = closest.vector_to(point)
        to_rotated = closest.vector_to(rotated)
        if angle > math.pi:
            cross_product = to_rotated.cross(to_point)
        else:
            cross_product = to_point.cross(to_rotated)
        if almost_zero(cross_product.length):
            # too close to the line for the sense to be measurable
            return True
        return cross_product.normalize().distance(self.direction) < 1.0

    def _rotate_special_cases(self, point: Point, adjusted_angle: float) -> Optional[Point]:
        if self.contains(point):
            return point
        if epsilon_equals(adjusted_angle, 0.0):
            return point
        if epsilon_equals(adjusted_angle, math.pi):
            return self.move_point_across(point)
        return None

    def _rotate_around_through_origin(self, point: Point, angle: float) -> Point:
        """Rotate in a frame where the line passes through the origin, then move back."""
        if self.contains(COORDINATE_SYSTEM_ORIGIN):
            return rotate_point_around_line_through_origin(point, self.direction, angle)
        closest_to_origin = self.closest_point(COORDINATE_SYSTEM_ORIGIN)
        relative = closest_to_origin.vector_to(point).as_point()
        rotated = rotate_point_around_line_through_origin(relative, self.direction, angle)
        return rotated.translate(closest_to_origin.vector_from_origin())

    def __str__(self) -> str:
        return f"Line(origin={self.origin}, direction={self.direction})"


def line_passing_by(origin: Point, target: Point) -> Line:
    """
    Line through two points, directed from ``origin`` towards ``target``.

    Raises:
        InvalidConstructionError: If the points are at the same position
    """
    origin_to_target = origin.vector_to(target)
    if almost_zero(origin_to_target.length):
        raise InvalidConstructionError(f"Points {origin} and {target} are too close to define a line")
    return Line(origin=origin, direction=origin_to_target.normalize())


X_AXIS = line_passing_by(COORDINATE_SYSTEM_ORIGIN, Point(x=1.0, y=0.0, z=0.0))
Y_AXIS = line_passing_by(COORDINATE_SYSTEM_ORIGIN, Point(x=0.0, y=1.0, z=0.0))
Z_AXIS = line_passing_by(COORDINATE_SYSTEM_ORIGIN, Point(x=0.0, y=0.0, z=1.0))

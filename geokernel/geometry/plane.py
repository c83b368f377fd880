# geokernel/geometry/plane.py
import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence, Tuple, Union

from pydantic import Field, PrivateAttr, model_validator

from geokernel.geometry.errors import InvalidArgumentError, InvalidConstructionError
from geokernel.geometry.point import Point
from geokernel.geometry.tolerance import almost_zero, scaled_epsilon
from geokernel.geometry.constants import EQUALITY_EPSILON
from geokernel.geometry.vector import Vector
from geokernel.utils.base_model import ImmutableModel

if TYPE_CHECKING:
    from geokernel.geometry.line_segment import LineSegment

# Configure logging
logger = logging.getLogger(__name__)


class Side(Enum):
    """Side of a plane a point lies on, relative to the plane normal."""
    NONE = auto()
    POSITIVE = auto()
    NEGATIVE = auto()

    def opposite(self) -> "Side":
        if self is Side.POSITIVE:
            return Side.NEGATIVE
        if self is Side.NEGATIVE:
            return Side.POSITIVE
        return self


class Plane(ImmutableModel):
    """
    A plane given by three ordered points.

    The normal follows the right-hand rule over the points in the order given,
    so reversing the order flips it. The plane equation ``ax + by + cz + d = 0``
    is kept with a unit normal ``(a, b, c)``.
    """
    creation_points: Tuple[Point, Point, Point] = Field(description="The three points the plane was built from")

    _normal: Vector = PrivateAttr()
    _d: float = PrivateAttr(default=0.0)

    @model_validator(mode="after")
    def validate_points_separated(self):
        """Validate that the points are pairwise far enough apart."""
        a, b, c = self.creation_points
        if not (b.distant_enough(a) and b.distant_enough(c) and a.distant_enough(c)):
            raise ValueError("At least two of the points are too close together to define a plane")
        return self

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        a, b, c = self.creation_points
        cross_product = a.vector_to(b).cross(a.vector_to(c))
        if almost_zero(cross_product.length):
            raise ValueError(f"Points {a}, {b} and {c} are collinear")
        normal = cross_product.scale(1.0 / cross_product.length)
        self._normal = normal
        self._d = -(normal.x * a.x + normal.y * a.y + normal.z * a.z)

    @property
    def normal(self) -> Vector:
        return self._normal

    @property
    def d(self) -> float:
        return self._d

    @property
    def equation(self) -> Tuple[float, float, float, float]:
        """Coefficients ``(a, b, c, d)`` of ``ax + by + cz + d = 0``."""
        return (self._normal.x, self._normal.y, self._normal.z, self._d)

    def signed_distance(self, point: Point) -> float:
        """Distance to the plane, positive on the side the normal points to."""
        return self._normal.dot(point) + self._d

    def contains(self, point: Point, epsilon: Optional[float] = None) -> bool:
        """
        Check if a point lies on the plane.

        The equation error is averaged over the three terms and compared with
        the tolerance scaled by the largest coordinate magnitude of the point.
        """
        if epsilon is None:
            epsilon = EQUALITY_EPSILON
        averaged_error = self.signed_distance(point) / 3.0
        biggest_magnitude = max(abs(point.x), abs(point.y), abs(point.z))
        return abs(averaged_error) < scaled_epsilon(epsilon, biggest_magnitude)

    def contains_all(self, points: Iterable[Point]) -> bool:
        return all(self.contains(point) for point in points)

    def contains_segment(self, segment: "LineSegment") -> bool:
        return self.contains_all(segment.ends)

    def which_side(self, point: Point) -> Side:
        """
        Side of the plane the point is on.

        Uses the sign of the signed distance ``normal·p + d``, so POSITIVE is
        the side the normal points to and the result always agrees with
        signed_distance() and closest_point().
        """
        if self.contains(point):
            return Side.NONE
        if self.signed_distance(point) < 0:
            return Side.NEGATIVE
        return Side.POSITIVE

    def closest_point(self, point: Point) -> Point:
        """Orthogonal projection of the point on the plane."""
        return point.translate(self._normal.scale(-self.signed_distance(point)))

    def distance_from(self, point: Point) -> float:
        if self.contains(point):
            return 0.0
        return abs(self.signed_distance(point))

    def shift(self, vector: Vector) -> "Plane":
        """Parallel plane moved by a vector, facing the same way."""
        return plane_from_ordered_points([p.translate(vector) for p in self.creation_points])

    def facing_the_other_way(self) -> "Plane":
        """Same plane built from the points in reverse order, so with the opposite normal."""
        return plane_from_ordered_points(list(reversed(self.creation_points)))

    def is_same_plane_any_direction(self, other: "Plane") -> bool:
        """Whether both planes hold the same points, whichever way they face."""
        parallel = (self._normal.epsilon_equals(other.normal)
                    or self._normal.epsilon_equals(other.normal.negate()))
        return parallel and self.contains(other.creation_points[0])

    def approximately_facing_the_same_way(self, other: "Plane") -> bool:
        """Loose test: the normals make an angle below 90 degrees."""
        return self._normal.dot(other.normal) > 0

    def facing_away_from_each_other(self, other: "Plane") -> bool:
        return not self.approximately_facing_the_same_way(other)

    def __str__(self) -> str:
        a, b, c, d = self.equation
        return f"Plane({a}x + {b}y + {c}z + {d} = 0)"


def plane_from_ordered_points(first: Union[Point, Sequence[Point]],
                              second: Optional[Point] = None,
                              third: Optional[Point] = None) -> Plane:
    """
    Build a plane from three points, or from a sequence of exactly three points.

    Raises:
        InvalidArgumentError: If a sequence does not hold exactly three points
        InvalidConstructionError: If two of the points are too close together,
            or the three are collinear
    """
    if isinstance(first, Point):
        points = [first, second, third]
        if second is None or third is None:
            raise InvalidArgumentError("A plane is defined by three points")
    else:
        points = list(first)
        if len(points) != 3 or second is not None or third is not None:
            raise InvalidArgumentError(f"A plane is defined by three points, got {len(points)}")

    a, b, c = points
    if not (b.distant_enough(a) and b.distant_enough(c) and a.distant_enough(c)):
        raise InvalidConstructionError(f"At least two of the points {a}, {b}, {c} are too close together")
    if almost_zero(a.vector_to(b).cross(a.vector_to(c)).length):
        raise InvalidConstructionError(f"Points {a}, {b} and {c} are collinear")
    return Plane(creation_points=(a, b, c))

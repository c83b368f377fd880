# geokernel/geometry/point.py
import math
from typing import TYPE_CHECKING, Optional, Sequence

from geokernel.geometry.constants import MIN_SEPARATION
from geokernel.geometry.coordinates import Coordinates
from geokernel.geometry.errors import InvalidArgumentError

if TYPE_CHECKING:
    from geokernel.geometry.vector import Vector


class Point(Coordinates):
    """
    Represents a position in 3D Cartesian space.

    Points are compared by identity: two points at the same position are
    different points unless they are the same object. Every operation returns
    a new Point.
    """

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[float]) -> "Point":
        """
        Build a point from a sequence of three numbers.

        Raises:
            InvalidArgumentError: If the sequence does not hold three values
        """
        if len(coordinates) != 3:
            raise InvalidArgumentError(f"A point needs three coordinates, got {len(coordinates)}")
        x, y, z = coordinates
        return cls(x=x, y=y, z=z)

    def add(self, other: Coordinates) -> "Point":
        """Component-wise sum with another triple."""
        return Point(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def sub(self, other: Coordinates) -> "Point":
        """Component-wise difference with another triple."""
        return Point(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def negate(self) -> "Point":
        return Point(x=-self.x, y=-self.y, z=-self.z)

    def scale(self, factor: float) -> "Point":
        """Scale the point coordinates by a factor."""
        return Point(x=self.x * factor, y=self.y * factor, z=self.z * factor)

    def translate(self, vector: "Vector") -> "Point":
        """Move the point by a vector."""
        return self.add(vector)

    def midpoint(self, other: "Point") -> "Point":
        """Calculate the midpoint between this point and another point."""
        return Point(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2, z=(self.z + other.z) / 2)

    def vector_to(self, other: Coordinates) -> "Vector":
        """Vector going from this point to the other."""
        from geokernel.geometry.vector import Vector
        return Vector(x=other.x - self.x, y=other.y - self.y, z=other.z - self.z)

    def vector_to_origin(self) -> "Vector":
        from geokernel.geometry.vector import Vector
        return Vector(x=-self.x, y=-self.y, z=-self.z)

    def vector_from_origin(self) -> "Vector":
        from geokernel.geometry.vector import Vector
        return Vector(x=self.x, y=self.y, z=self.z)

    def as_vector(self) -> "Vector":
        """Same coordinates, read as a vector anchored at the origin."""
        return self.vector_from_origin()

    def distance_with_origin(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distant_enough(self, other: "Point", min_separation: Optional[float] = None) -> bool:
        """
        Check whether two points are far enough apart to be used together in a
        construction.

        Args:
            other: The other point
            min_separation: Required distance. If None, uses MIN_SEPARATION.
        """
        if min_separation is None:
            min_separation = MIN_SEPARATION
        return self.distance(other) > min_separation

    def __add__(self, other: Coordinates) -> "Point":
        return self.add(other)

    def __sub__(self, other: Coordinates) -> "Point":
        return self.sub(other)

    def __neg__(self) -> "Point":
        return self.negate()


def point(x: float, y: float, z: float) -> Point:
    """Shorthand for building a Point from positional coordinates."""
    return Point(x=x, y=y, z=z)

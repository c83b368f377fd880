# geokernel/geometry/vector.py
import math
from typing import TYPE_CHECKING, Any

from pydantic import PrivateAttr

from geokernel.geometry.coordinates import Coordinates
from geokernel.geometry.errors import InvalidArgumentError
from geokernel.geometry.tolerance import almost_zero, epsilon_equals

if TYPE_CHECKING:
    from geokernel.geometry.point import Point


class Vector(Coordinates):
    """
    A direction and magnitude anchored at the origin.

    The length is computed once at construction and never again. A Vector is
    not a Point: use as_point() where a position is needed, and
    Point.as_vector() for the reverse.
    """
    _length: float = PrivateAttr(default=0.0)

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        self._length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @property
    def length(self) -> float:
        return self._length

    def normalize(self) -> "Vector":
        """
        Return the unit vector with the same direction.

        A vector already of unit length within tolerance is returned as is, so
        repeated normalization does not pile up rounding error.

        Raises:
            InvalidArgumentError: If the vector has no length
        """
        if epsilon_equals(self._length, 1.0):
            return self
        if almost_zero(self._length):
            raise InvalidArgumentError(f"Cannot normalize a zero length vector {self}")
        return Vector(x=self.x / self._length, y=self.y / self._length, z=self.z / self._length)

    def with_length(self, length: float) -> "Vector":
        """Vector in the same direction with the given length."""
        if almost_zero(self._length):
            raise InvalidArgumentError(f"A zero length vector has no direction: {self}")
        factor = length / self._length
        return Vector(x=self.x * factor, y=self.y * factor, z=self.z * factor)

    def dot(self, other: Coordinates) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Coordinates) -> "Vector":
        """Right-handed cross product."""
        return Vector(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def angle(self, other: "Vector") -> float:
        """
        Angle between two vectors, in radians within [0, π].

        The cosine is clamped to [-1, 1] before acos, since rounding can push
        it slightly outside for (anti)parallel vectors.

        Raises:
            InvalidArgumentError: If either vector has no length
        """
        if almost_zero(self._length) or almost_zero(other.length):
            raise InvalidArgumentError("The angle with a zero length vector is undefined")
        cosine = self.dot(other) / (self._length * other.length)
        return math.acos(max(-1.0, min(1.0, cosine)))

    def scale(self, factor: float) -> "Vector":
        return Vector(x=self.x * factor, y=self.y * factor, z=self.z * factor)

    def negate(self) -> "Vector":
        return Vector(x=-self.x, y=-self.y, z=-self.z)

    def add(self, other: Coordinates) -> "Vector":
        return Vector(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def sub(self, other: Coordinates) -> "Vector":
        return Vector(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def as_point(self) -> "Point":
        """The position this vector points to from the origin."""
        from geokernel.geometry.point import Point
        return Point(x=self.x, y=self.y, z=self.z)

    def __add__(self, other: Coordinates) -> "Vector":
        return self.add(other)

    def __sub__(self, other: Coordinates) -> "Vector":
        return self.sub(other)

    def __neg__(self) -> "Vector":
        return self.negate()

    def __mul__(self, factor: float) -> "Vector":
        return self.scale(factor)

    __rmul__ = __mul__


def vector(x: float, y: float, z: float) -> Vector:
    """Shorthand for building a Vector from positional coordinates."""
    return Vector(x=x, y=y, z=z)

# geokernel/geometry/coordinates.py
import math
from typing import Optional, Tuple

from pydantic import Field

from geokernel.geometry.constants import FLOAT_PRECISION_EPSILON
from geokernel.geometry.tolerance import epsilon_equals
from geokernel.utils.identity import IdentityModel


class Coordinates(IdentityModel):
    """
    A triple of doubles in 3D Cartesian space.

    Shared base of Point and Vector. Equality is identity; use
    epsilon_equals() to compare positions. NaN coordinates are accepted and
    make every tolerant comparison false.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")
    z: float = Field(description="Z coordinate")

    @property
    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def epsilon_equals(self, other: "Coordinates", epsilon: Optional[float] = None) -> bool:
        """
        Compare coordinates component by component within tolerance.

        Args:
            other: The triple to compare with
            epsilon: Tolerance passed to the scaled comparison.
                     If None, uses EQUALITY_EPSILON.

        Returns:
            True if all three components are epsilon-equal
        """
        if self is other and not any(math.isnan(c) for c in self.coordinates):
            return True
        return (epsilon_equals(self.x, other.x, epsilon)
                and epsilon_equals(self.y, other.y, epsilon)
                and epsilon_equals(self.z, other.z, epsilon))

    def epsilon_equals_float_precision(self, other: "Coordinates") -> bool:
        return self.epsilon_equals(other, FLOAT_PRECISION_EPSILON)

    def distance_squared(self, other: "Coordinates") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other: "Coordinates") -> float:
        """Euclidean distance between the two positions."""
        return math.sqrt(self.distance_squared(other))

    def format_as_tuple(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return self.format_as_tuple()

# geokernel/planar/point_2d.py
from pydantic import Field, field_validator
import math
from typing import Optional
from geokernel.geometry.constants import MIN_SEPARATION
from geokernel.geometry.tolerance import epsilon_equals
from geokernel.utils.identity import IdentityModel


class Point2D(IdentityModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Like its 3D counterpart, a Point2D is only ``==`` to itself; positions are
    compared with epsilon_equals(), using the same scaled tolerance.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    def distance_to(self, other: "Point2D") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def epsilon_equals(self, other: "Point2D", epsilon: Optional[float] = None) -> bool:
        """
        Check if both coordinates match another point's within tolerance.

        Args:
            other: The point to compare with
            epsilon: Tolerance for the scaled comparison.
                     If None, uses EQUALITY_EPSILON.
        """
        return epsilon_equals(self.x, other.x, epsilon) and epsilon_equals(self.y, other.y, epsilon)

    def different_enough(self, other: "Point2D") -> bool:
        """Whether the points are at least MIN_SEPARATION apart."""
        return self.distance_to(other) >= MIN_SEPARATION

    def __add__(self, other: "Point2D") -> "Point2D":
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        return Point2D(x=self.x - other.x, y=self.y - other.y)

    def scale(self, factor: float) -> "Point2D":
        """Scale the point coordinates by a factor."""
        return Point2D(x=self.x * factor, y=self.y * factor)

    def midpoint(self, other: "Point2D") -> "Point2D":
        """Calculate the midpoint between this point and another point."""
        return Point2D(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def polar_angle(self) -> float:
        """
        Calculate the polar angle of the point (from origin).
        Returns angle in radians, in range [0, 2π).
        """
        angle = math.atan2(self.y, self.x)
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()

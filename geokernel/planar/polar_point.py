# geokernel/planar/polar_point.py
import math
from typing import Optional

from pydantic import Field

from geokernel.geometry.constants import EQUALITY_EPSILON
from geokernel.planar.point_2d import Point2D
from geokernel.utils.identity import IdentityModel


class PolarPoint(IdentityModel):
    """A point in the plane given by its radius and angle from the origin."""
    r: float = Field(description="Distance to the origin")
    theta: float = Field(description="Angle from the positive x axis, in radians")

    @classmethod
    def from_cartesian(cls, point: Point2D) -> "PolarPoint":
        return cls(r=math.hypot(point.x, point.y), theta=math.atan2(point.y, point.x))

    def as_cartesian(self) -> Point2D:
        return Point2D(x=self.r * math.cos(self.theta), y=self.r * math.sin(self.theta))

    def distance(self, other: "PolarPoint") -> float:
        """
        Distance between two polar points by the law of cosines.

        Written as (r1 - r2)^2 + 4 r1 r2 sin^2(dθ / 2), which is the same
        quantity without the cancellation of r1^2 + r2^2 - 2 r1 r2 cos(dθ)
        for nearby points.
        """
        radial = self.r - other.r
        half_sine = math.sin((self.theta - other.theta) / 2)
        return math.sqrt(radial * radial + 4 * self.r * other.r * half_sine * half_sine)

    def epsilon_equals(self, other: "PolarPoint", epsilon: Optional[float] = None) -> bool:
        if epsilon is None:
            epsilon = EQUALITY_EPSILON
        return self is other or self.distance(other) <= epsilon

    def __str__(self) -> str:
        return f"(r = {_format_decimal(self.r)}, theta = {_format_decimal(self.theta)})"


def _format_decimal(value: float) -> str:
    """Up to six decimals, without trailing zeros."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text

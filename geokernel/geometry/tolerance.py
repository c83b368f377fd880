# geokernel/geometry/tolerance.py
"""
Tolerant comparison of doubles.

Every geometric predicate of the kernel (point equality, line and plane
containment, collinearity) ends up in epsilon_equals, so all of them scale
their tolerance with the magnitude of the operands in the same way.
"""
import math
import sys
from typing import TYPE_CHECKING, Optional

from pydantic import Field, field_validator

from geokernel.geometry.constants import (
    EQUALITY_EPSILON,
    FLOAT_PRECISION_EPSILON,
    MAGNITUDE_SCALING_THRESHOLD,
    MIN_SEPARATION,
)
from geokernel.utils.base_model import ImmutableModel

if TYPE_CHECKING:
    from geokernel.geometry.coordinates import Coordinates

# Smallest positive subnormal double
_MIN_DOUBLE = sys.float_info.min * sys.float_info.epsilon


def scaled_epsilon(epsilon: float, magnitude: float) -> float:
    """
    Scale a tolerance by the order of magnitude of the operands.

    Up to MAGNITUDE_SCALING_THRESHOLD the tolerance is used as is. Above it,
    the tolerance is multiplied by 10 ** floor(log10(magnitude)), so that
    1001 gets a tolerance a thousand times wider than 1.
    """
    if magnitude <= MAGNITUDE_SCALING_THRESHOLD:
        return epsilon
    order_of_magnitude = math.floor(math.log10(magnitude))
    return epsilon * 10 ** order_of_magnitude


def epsilon_equals(a: float, b: float, epsilon: Optional[float] = None) -> bool:
    """
    Check whether two doubles are the same value within a scaled tolerance.

    Args:
        a: First value
        b: Second value
        epsilon: Tolerance for operands up to 10 in magnitude.
                 If None, uses EQUALITY_EPSILON.

    Returns:
        False when either value is NaN, otherwise whether |a - b| is below the
        tolerance scaled by the larger magnitude of the two
    """
    if epsilon is None:
        epsilon = EQUALITY_EPSILON
    if math.isnan(a) or math.isnan(b):
        return False
    magnitude = max(abs(a), abs(b))
    if math.isinf(magnitude):
        return a == b
    return abs(a - b) < scaled_epsilon(epsilon, magnitude)


def almost_zero(value: float, epsilon: Optional[float] = None) -> bool:
    """Check whether a value is zero within tolerance."""
    return epsilon_equals(value, 0.0, epsilon)


def epsilon_equals_float_precision(a: float, b: float) -> bool:
    return epsilon_equals(a, b, FLOAT_PRECISION_EPSILON)


def almost_zero_float_precision(value: float) -> bool:
    return almost_zero(value, FLOAT_PRECISION_EPSILON)


def is_zero(value: float) -> bool:
    """
    Strict zero test.

    Accepts only values within two subnormal steps of zero. Use it for
    arguments that any tolerance would distort, where almost_zero would
    treat a small but meaningful value as nothing.
    """
    return abs(value) <= 2 * _MIN_DOUBLE


def area_is_almost_zero(error_area: float) -> bool:
    """
    Near-zero test for an area error.

    The error of an area built from lengths is about twice the linear error
    times the length. The length is unknown here, so the area error is only
    halved, which narrows the allowance rather than widening it.
    """
    return almost_zero(error_area / 2)


class Tolerance(ImmutableModel):
    """
    A named set of tolerances.

    The kernel functions take an explicit ``epsilon`` argument; a profile
    bundles the values a caller wants to pass around consistently.
    """
    equality_epsilon: float = Field(default=EQUALITY_EPSILON, description="Tolerance for value equality")
    min_separation: float = Field(default=MIN_SEPARATION, description="Minimum distance for construction points")

    @field_validator("equality_epsilon", "min_separation")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"Tolerance must be a positive finite number, got {value}")
        return value

    def epsilon_equals(self, a: float, b: float) -> bool:
        return epsilon_equals(a, b, self.equality_epsilon)

    def almost_zero(self, value: float) -> bool:
        return almost_zero(value, self.equality_epsilon)

    def points_equal(self, first: "Coordinates", second: "Coordinates") -> bool:
        """Component-wise comparison of two coordinate triples with this profile."""
        return first.epsilon_equals(second, self.equality_epsilon)

    def separated_enough(self, first: "Coordinates", second: "Coordinates") -> bool:
        """Whether two points may serve as independent construction points."""
        return first.distance(second) >= self.min_separation


DOUBLE_PRECISION = Tolerance()
FLOAT_PRECISION = Tolerance(equality_epsilon=FLOAT_PRECISION_EPSILON)

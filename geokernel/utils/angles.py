# geokernel/utils/angles.py
"""Angle handling shared by the rotation code."""
import math
from typing import Union

import pint

from geokernel.geometry.errors import InvalidArgumentError

ureg = pint.UnitRegistry()

FULL_TURN = 2 * math.pi

Angle = Union[float, pint.Quantity]


def as_radians(angle: Angle) -> float:
    """
    Return the angle as a plain float in radians.

    Floats are taken to be radians already. Quantities with angular units
    (``90 * ureg.degree``) are converted with pint.
    """
    if isinstance(angle, pint.Quantity):
        return float(angle.to(ureg.radian).magnitude)
    return float(angle)


def normalize_angle(angle: Angle) -> float:
    """
    Bring an angle into [0, 2π).

    Negative angles are moved up by one full turn. An angle of -2π or below is
    treated as a caller error.

    Raises:
        InvalidArgumentError: If the angle is less than or equal to -2π
    """
    radians = as_radians(angle)
    if radians <= -FULL_TURN:
        raise InvalidArgumentError(f"Angle must be greater than -2π, got {radians}")
    if radians < 0:
        radians += FULL_TURN
    return radians % FULL_TURN

# geokernel/geometry/rotation.py
"""
Rotations around the Cartesian axes and around lines through the origin.

Every rotation here is right-handed: counterclockwise when looking at the
origin from the positive end of the axis, which is clockwise when looking
along the axis in the direction its coordinates grow.

An arbitrary axis is handled by aligning it with the Z axis (one rotation
around X to bring it into the XZ plane, one around Y to bring it onto Z),
rotating around Z, and undoing the alignment.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

from geokernel.geometry.errors import InvalidArgumentError
from geokernel.geometry.point import Point
from geokernel.geometry.tolerance import almost_zero, epsilon_equals, is_zero
from geokernel.geometry.vector import Vector
from geokernel.utils.angles import FULL_TURN, Angle, as_radians

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quaternion:
    """
    An immutable quaternion ``w + xi + yj + zk``.

    Only unit quaternions are built by this module; for those the inverse is
    the conjugate.
    """
    x: float
    y: float
    z: float
    w: float

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Vector, angle: float) -> "Quaternion":
        """Unit quaternion rotating by ``angle`` radians around ``axis``."""
        unit = axis.normalize()
        half = angle / 2.0
        sine = math.sin(half)
        return cls(unit.x * sine, unit.y * sine, unit.z * sine, math.cos(half))

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Hamilton product: the result applies ``other`` first, then ``self``."""
        return Quaternion(
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
        )

    @property
    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quaternion":
        norm_squared = self.norm_squared
        conjugate = self.conjugate()
        return Quaternion(conjugate.x / norm_squared, conjugate.y / norm_squared,
                          conjugate.z / norm_squared, conjugate.w / norm_squared)

    def rotate(self, vector: Vector) -> Vector:
        """Apply the rotation to a vector: q v q^-1."""
        if is_zero(vector.x) and is_zero(vector.y) and is_zero(vector.z):
            return Vector(x=0.0, y=0.0, z=0.0)
        pure = Quaternion(vector.x, vector.y, vector.z, 0.0)
        rotated = self * pure * self.inverse()
        return Vector(x=rotated.x, y=rotated.y, z=rotated.z)


class CartesianAxis(Enum):
    X = (1.0, 0.0, 0.0)
    Y = (0.0, 1.0, 0.0)
    Z = (0.0, 0.0, 1.0)

    @property
    def normal(self) -> Vector:
        """Unit vector along the axis."""
        return _AXIS_NORMALS[self]

    def contains(self, vector: Vector) -> bool:
        """Whether the vector already lies on the axis."""
        off_axis = [c for c, a in zip(vector.coordinates, self.value) if a == 0.0]
        return all(almost_zero(c) for c in off_axis)


_AXIS_NORMALS = {axis: Vector(x=axis.value[0], y=axis.value[1], z=axis.value[2]) for axis in CartesianAxis}


def _is_full_turn(angle: float) -> bool:
    remainder = angle % FULL_TURN
    return almost_zero(remainder) or epsilon_equals(remainder, FULL_TURN)


def rotate_vector_around_axis(vector: Vector, axis: CartesianAxis, angle: Angle) -> Vector:
    """
    Rotate a vector around one of the Cartesian axes.

    Args:
        vector: The vector to rotate
        axis: The rotation axis
        angle: Rotation angle, radians or a pint angle quantity

    Returns:
        The rotated vector. The same instance when the angle is a whole number
        of turns or the vector lies on the axis.
    """
    radians = as_radians(angle)
    if _is_full_turn(radians):
        return vector
    if axis.contains(vector):
        return vector
    return Quaternion.from_axis_angle(axis.normal, radians).rotate(vector)


def rotate_point_around_axis(point: Point, axis: CartesianAxis, angle: Angle) -> Point:
    """Rotate a point around one of the Cartesian axes. See rotate_vector_around_axis."""
    return rotate_vector_around_axis(point.vector_from_origin(), axis, angle).as_point()


def _signum(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def x_axis_rotation_angle(vector: Vector) -> float:
    """
    Angle of the rotation around X that brings the vector into the XZ plane.

    The result is the same for a vector and its negation, and lies in
    [-π, π]. The vector must not lie on the X axis.
    """
    y = vector.y
    z = vector.z
    if vector.x < 0:
        y = -y
        z = -z
    projection_on_yz = Vector(x=0.0, y=y, z=z).normalize()
    return _signum(y) * projection_on_yz.angle(CartesianAxis.Z.normal)


def y_axis_rotation_angle(vector_on_xz_plane: Vector) -> float:
    """
    Angle of the rotation around Y that brings a vector of the XZ plane onto
    the Z axis.

    Raises:
        InvalidArgumentError: If the vector is not in the XZ plane
    """
    if not almost_zero(vector_on_xz_plane.y):
        raise InvalidArgumentError(f"Vector {vector_on_xz_plane} is not on the XZ plane")
    x = vector_on_xz_plane.x
    z = vector_on_xz_plane.z
    if is_zero(x):
        return 0.0
    if is_zero(z):
        return math.pi / 2.0
    return -math.atan2(x, z)


def axis_rotation_quaternion(vector: Vector, axis: CartesianAxis) -> Quaternion:
    """
    Quaternion of one alignment step.

    Around X the vector is brought into the XZ plane; around Y a vector of
    the XZ plane is brought onto the Z axis. There is no step around Z.
    """
    if axis is CartesianAxis.X:
        angle = x_axis_rotation_angle(vector)
    elif axis is CartesianAxis.Y:
        angle = y_axis_rotation_angle(vector)
    else:
        raise InvalidArgumentError(f"No alignment rotation around the {axis.name} axis")
    return Quaternion.from_axis_angle(axis.normal, angle)


def alignment_quaternion(direction: Vector) -> Quaternion:
    """
    Quaternion that puts a unit direction on the Z axis (either end of it).

    The X step is skipped for a direction already on the X axis. Otherwise
    the two steps are composed as ``second * first``.
    """
    if CartesianAxis.X.contains(direction):
        return axis_rotation_quaternion(direction, CartesianAxis.Y)
    first = axis_rotation_quaternion(direction, CartesianAxis.X)
    in_xz_plane = first.rotate(direction)
    second = axis_rotation_quaternion(in_xz_plane, CartesianAxis.Y)
    return second * first


def rotate_point_around_line_through_origin(point: Point, direction: Vector, angle: Angle) -> Point:
    """
    Rotate a point around the line through the origin with the given direction.

    The rotation is right-handed around ``direction``: clockwise when looking
    along it from the origin.

    Args:
        point: The point to rotate
        direction: Direction of the rotation axis, any non-zero length
        angle: Rotation angle, radians or a pint angle quantity
    """
    radians = as_radians(angle)
    unit = direction.normalize()
    alignment = alignment_quaternion(unit)
    if alignment.rotate(unit).z < 0:
        # the alignment landed on -Z, where the sense around Z is reversed
        radians = -radians
    aligned = alignment.rotate(point.vector_from_origin())
    rotated = rotate_vector_around_axis(aligned, CartesianAxis.Z, radians)
    return alignment.inverse().rotate(rotated).as_point()


def rotate_point_around_direction(point: Point, direction: Vector, angle: Angle) -> Point:
    """
    Rotate a point around the line through the origin with a single quaternion.

    Gives the same result as rotate_point_around_line_through_origin without
    the alignment steps.
    """
    radians = as_radians(angle)
    return Quaternion.from_axis_angle(direction, radians).rotate(point.vector_from_origin()).as_point()

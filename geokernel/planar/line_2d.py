# geokernel/planar/line_2d.py
import logging
import math
from typing import TYPE_CHECKING, Optional

from pydantic import Field

from geokernel.geometry.constants import MIN_PLANAR_DELTA
from geokernel.geometry.errors import InvalidArgumentError, InvalidConstructionError
from geokernel.geometry.tolerance import epsilon_equals
from geokernel.planar.point_2d import Point2D
from geokernel.utils.base_model import ImmutableModel

if TYPE_CHECKING:
    from geokernel.planar.line_segment_2d import LineSegment2D

# Configure logging
logger = logging.getLogger(__name__)


class Line2D(ImmutableModel):
    """
    An infinite line in the plane, ``y = slope * x + offset``.

    Vertical lines cannot be written that way and keep their ``x`` instead.
    """
    slope: float = Field(default=0.0, description="m in y = mx + b")
    offset: float = Field(default=0.0, description="b in y = mx + b")
    is_vertical: bool = Field(default=False, description="Whether the line is x = vertical_x")
    vertical_x: float = Field(default=0.0, description="x of a vertical line")

    @classmethod
    def from_equation(cls, slope: float, offset: float) -> "Line2D":
        return cls(slope=slope, offset=offset)

    @classmethod
    def from_points(cls, x0: float, y0: float, x1: float, y1: float) -> "Line2D":
        """
        Line through two points.

        Raises:
            InvalidConstructionError: If the points are vertically aligned
        """
        if abs(x0 - x1) < MIN_PLANAR_DELTA:
            raise InvalidConstructionError("A vertical line cannot be created from two points")
        slope = (y1 - y0) / (x1 - x0)
        return cls(slope=slope, offset=y1 - slope * x1)

    @classmethod
    def vertical(cls, x: float) -> "Line2D":
        return cls(is_vertical=True, vertical_x=x)

    @classmethod
    def horizontal(cls, y: float) -> "Line2D":
        return cls(slope=0.0, offset=y)

    def y_at(self, x: float) -> float:
        """
        Raises:
            InvalidArgumentError: For a vertical line
        """
        if self.is_vertical:
            raise InvalidArgumentError("A vertical line has no single y for a given x")
        return self.slope * x + self.offset

    def point_at(self, x: float) -> Point2D:
        return Point2D(x=x, y=self.y_at(x))

    def intersect(self, other: "Line2D") -> Optional[Point2D]:
        """
        Find the point where two lines cross.

        Returns:
            The crossing point, or None for parallel lines
        """
        if self.is_vertical and other.is_vertical:
            return None
        if self.is_vertical:
            return other.point_at(self.vertical_x)
        if other.is_vertical:
            return self.point_at(other.vertical_x)
        if self.slope == other.slope:
            logger.debug("Lines %s and %s are parallel", self, other)
            return None
        x = (other.offset - self.offset) / (self.slope - other.slope)
        return Point2D(x=x, y=self.slope * x + self.offset)

    def intersect_segment(self, segment: "LineSegment2D") -> Optional[Point2D]:
        """Point where the line crosses the inside of a segment, if any."""
        segment_line = segment.line
        if self.is_vertical and segment_line.is_vertical:
            return None
        if self.is_vertical:
            return segment_line.point_at(self.vertical_x) if segment.contains_x(self.vertical_x) else None
        if segment_line.is_vertical:
            x = segment_line.vertical_x
            return self.point_at(x) if segment.contains_y(self.y_at(x)) else None
        crossing = self.intersect(segment_line)
        if crossing is None:
            return None
        return crossing if segment.contains_x(crossing.x) else None

    def contains(self, point: Point2D) -> bool:
        if self.is_vertical:
            return epsilon_equals(point.x, self.vertical_x)
        return epsilon_equals(point.y, self.y_at(point.x))

    def closest_point(self, point: Point2D) -> Point2D:
        """Orthogonal projection of the point on the line."""
        if self.is_vertical:
            return Point2D(x=self.vertical_x, y=point.y)
        # the line as ax + by + c = 0
        a, b, c = -self.slope, 1.0, -self.offset
        norm = a * a + b * b
        x = (b * (b * point.x - a * point.y) - a * c) / norm
        y = (a * (-b * point.x + a * point.y) - b * c) / norm
        return Point2D(x=x, y=y)

    def distance_to(self, point: Point2D) -> float:
        if self.is_vertical:
            return abs(point.x - self.vertical_x)
        a, b, c = -self.slope, 1.0, -self.offset
        return abs(a * point.x + b * point.y + c) / math.sqrt(a * a + b * b)

    def __str__(self) -> str:
        if self.is_vertical:
            return f"x = {self.vertical_x}"
        return f"y = {self.slope}x + {self.offset}"

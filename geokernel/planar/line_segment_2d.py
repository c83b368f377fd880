# geokernel/planar/line_segment_2d.py
from typing import Tuple

from pydantic import Field, model_validator

from geokernel.geometry.constants import MIN_PLANAR_DELTA
from geokernel.geometry.errors import InvalidArgumentError, InvalidConstructionError
from geokernel.planar.line_2d import Line2D
from geokernel.planar.point_2d import Point2D
from geokernel.utils.base_model import ImmutableModel


def _validate_point_distance(first: Point2D, second: Point2D) -> None:
    if first.distance_to(second) < MIN_PLANAR_DELTA:
        raise InvalidConstructionError(f"Points {first} and {second} are too close together")


class LineSegment2D(ImmutableModel):
    """
    A segment in the plane with ordered ends.

    The first point has the smaller x, or the smaller y for a vertical
    segment. Build instances with the factory class methods, which take care
    of the ordering.
    """
    first: Point2D = Field(description="End with the smaller x (smaller y if vertical)")
    second: Point2D = Field(description="The other end")
    line: Line2D = Field(description="Enclosing line")

    @model_validator(mode="after")
    def validate_order(self):
        """Validate the ends are apart and ordered along the segment."""
        if self.first.distance_to(self.second) < MIN_PLANAR_DELTA:
            raise ValueError("Segment ends are too close together")
        if self.line.is_vertical:
            if self.first.y > self.second.y:
                raise ValueError("Ends of a vertical segment must be ordered by y")
        elif self.first.x > self.second.x:
            raise ValueError("Segment ends must be ordered by x")
        return self

    @classmethod
    def from_coordinates(cls, x0: float, y0: float, x1: float, y1: float) -> "LineSegment2D":
        """
        Raises:
            InvalidConstructionError: If the ends are too close together
        """
        _validate_point_distance(Point2D(x=x0, y=y0), Point2D(x=x1, y=y1))
        if abs(x0 - x1) < MIN_PLANAR_DELTA:
            return cls.vertical(Point2D(x=x0, y=min(y0, y1)), abs(y1 - y0))
        if x0 > x1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        return cls(
            first=Point2D(x=x0, y=y0),
            second=Point2D(x=x1, y=y1),
            line=Line2D.from_points(x0, y0, x1, y1),
        )

    @classmethod
    def from_points(cls, first: Point2D, second: Point2D) -> "LineSegment2D":
        return cls.from_coordinates(first.x, first.y, second.x, second.y)

    @classmethod
    def from_line(cls, line: Line2D, x: float, x_distance: float) -> "LineSegment2D":
        """
        Piece of a non vertical line starting at ``x`` and spanning ``x_distance``
        along the x axis, in either direction.

        Raises:
            InvalidArgumentError: For a vertical line or a span too short
        """
        if abs(x_distance) < MIN_PLANAR_DELTA or line.is_vertical:
            raise InvalidArgumentError("A vertical segment cannot be created from a line and an x span")
        x0 = min(x, x + x_distance)
        x1 = max(x, x + x_distance)
        return cls(first=line.point_at(x0), second=line.point_at(x1), line=line)

    @classmethod
    def vertical(cls, point: Point2D, length: float) -> "LineSegment2D":
        """
        Segment going up from ``point``.

        Raises:
            InvalidArgumentError: If the length is negative
            InvalidConstructionError: If the length is too small
        """
        if length < 0:
            raise InvalidArgumentError(f"Segment length must be positive, got {length}")
        _validate_point_distance(Point2D(x=0.0, y=0.0), Point2D(x=0.0, y=length))
        return cls(
            first=Point2D(x=point.x, y=point.y),
            second=Point2D(x=point.x, y=point.y + length),
            line=Line2D.vertical(point.x),
        )

    @classmethod
    def horizontal(cls, point: Point2D, length: float) -> "LineSegment2D":
        """
        Segment going right from ``point``.

        Raises:
            InvalidArgumentError: If the length is negative
            InvalidConstructionError: If the length is too small
        """
        if length < 0:
            raise InvalidArgumentError(f"Segment length must be positive, got {length}")
        _validate_point_distance(Point2D(x=0.0, y=0.0), Point2D(x=length, y=0.0))
        return cls(
            first=Point2D(x=point.x, y=point.y),
            second=Point2D(x=point.x + length, y=point.y),
            line=Line2D.horizontal(point.y),
        )

    @property
    def ordered_points(self) -> Tuple[Point2D, Point2D]:
        return (self.first, self.second)

    @property
    def is_vertical(self) -> bool:
        return self.line.is_vertical

    @property
    def length(self) -> float:
        return self.first.distance_to(self.second)

    def contains_x(self, x: float) -> bool:
        """Whether x is strictly between the x of both ends."""
        return self.first.x < x < self.second.x

    def contains_y(self, y: float) -> bool:
        """Whether y is strictly between the y of both ends."""
        return self.first.y < y < self.second.y

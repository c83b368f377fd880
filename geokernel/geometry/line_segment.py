# geokernel/geometry/line_segment.py
import logging
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import Field, PrivateAttr, model_validator

from geokernel.geometry.line import Line, line_passing_by
from geokernel.geometry.point import Point
from geokernel.geometry.tolerance import almost_zero, epsilon_equals
from geokernel.utils.base_model import ImmutableModel

# Configure logging
logger = logging.getLogger(__name__)


class LineSegment(ImmutableModel):
    """
    The part of a line between two end points.

    The ends are unordered: two segments are equal when they hold the same
    end point objects, in either order. Segments between distinct points
    sharing positions are not equal.
    """
    start: Point = Field(description="One end of the segment")
    end: Point = Field(description="The other end of the segment")

    zero_length: ClassVar[bool] = False

    _line: Optional[Line] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def validate_ends(self):
        """Validate that the ends are apart, unless the segment is a zero length one."""
        if self.zero_length:
            if self.start is not self.end:
                raise ValueError("A zero length segment has the same point at both ends")
        elif self.start is self.end or self.start.epsilon_equals(self.end):
            raise ValueError(
                f"Segment ends {self.start} and {self.end} are at the same position, "
                "use make_zero_length_line_segment"
            )
        return self

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        if not self.zero_length:
            self._line = line_passing_by(self.start, self.end)

    @property
    def line(self) -> Optional[Line]:
        """The enclosing line, None for a zero length segment."""
        return self._line

    @property
    def ends(self) -> Tuple[Point, Point]:
        return (self.start, self.end)

    @property
    def length(self) -> float:
        return self.start.distance(self.end)

    @property
    def point_set(self) -> frozenset:
        return frozenset((self.start, self.end))

    def ends_as_list(self) -> List[Point]:
        return [self.start, self.end]

    def is_an_end(self, point: Point) -> bool:
        """Whether the point object is one of the ends (identity)."""
        return point is self.start or point is self.end

    def is_at_end_position(self, point: Point) -> bool:
        """Whether the point is an end, or at the position of one."""
        if self.is_an_end(point):
            return True
        return point.epsilon_equals(self.start) or point.epsilon_equals(self.end)

    def matches(self, other: "LineSegment") -> bool:
        """Both ends of the other segment are at end positions of this one."""
        return self.is_at_end_position(other.start) and self.is_at_end_position(other.end)

    def enclosing_line_contains(self, point: Point) -> bool:
        return self._line.contains(point)

    def contains(self, point: Point) -> bool:
        """
        Check if a point lies on the segment.

        Once the point is known to be on the enclosing line, it is inside the
        segment when its distances to both ends add up to the length.
        """
        if self.is_at_end_position(point):
            return True
        if not self.enclosing_line_contains(point):
            return False
        return epsilon_equals(point.distance(self.start) + point.distance(self.end), self.length)

    def contains_and_not_at_end_position(self, point: Point) -> bool:
        return self.contains(point) and not self.is_at_end_position(point)

    def closest_point_in_enclosing_line(self, point: Point) -> Point:
        return self._line.closest_point(point)

    def perpendicular_to(self, point: Point) -> Optional[Point]:
        """Foot of the perpendicular from the point, if it falls inside the segment."""
        foot = self.closest_point_in_enclosing_line(point)
        if not self.contains(foot):
            return None
        return foot

    def closest_point_in_segment(self, point: Point) -> Point:
        foot = self.perpendicular_to(point)
        if foot is not None:
            return foot
        return self._closest_end(point)

    def _closest_end(self, point: Point) -> Point:
        if self.start.distance(point) < self.end.distance(point):
            return self.start
        return self.end

    def perpendicular_distance_from(self, point: Point) -> Optional[float]:
        foot = self.perpendicular_to(point)
        if foot is None:
            return None
        return point.distance(foot)

    def distance_from(self, point: Point) -> float:
        """Distance to the nearest point of the segment."""
        perpendicular_distance = self.perpendicular_distance_from(point)
        if perpendicular_distance is not None:
            return perpendicular_distance
        return point.distance(self._closest_end(point))

    def is_collinear_with(self, other: "LineSegment") -> bool:
        """Whether the other segment lies on the enclosing line of this one."""
        return self._line.contains_all(other.ends)

    def overlaps(self, other: "LineSegment") -> bool:
        """Whether the segments share the same line and more than a single end position."""
        if self == other:
            return True
        if not other.is_collinear_with(self):
            return False
        if self.matches(other):
            return True
        return (self.contains_and_not_at_end_position(other.start)
                or self.contains_and_not_at_end_position(other.end)
                or other.contains_and_not_at_end_position(self.start)
                or other.contains_and_not_at_end_position(self.end))

    def contains_segment(self, other: "LineSegment") -> bool:
        if self == other or self.matches(other):
            return True
        if not other.is_collinear_with(self):
            return False
        return self.contains(other.start) and self.contains(other.end)

    def intersection_point(self, other: "LineSegment") -> Optional[Point]:
        """
        Point where the two segments cross, if any.

        The enclosing lines are intersected first; their crossing point must
        then be inside both segments.
        """
        from geokernel.geometry.operations import line_to_line_intersection

        intersection = line_to_line_intersection(self, other)
        if intersection is None:
            return None
        if not almost_zero(intersection.length):
            logger.debug("Lines of %s and %s do not meet, closest gap is %s", self, other, intersection.length)
            return None
        crossing = intersection.start
        if other.contains(crossing) and self.contains(crossing):
            return crossing
        return None

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.point_set == other.point_set

    def __hash__(self):
        return hash(self.point_set)

    def __str__(self) -> str:
        return f"[{self.start} - {self.end}]"


class ZeroLengthLineSegment(LineSegment):
    """
    A segment whose two ends are the same point.

    It has no enclosing line; the line based queries fall back to the single
    end position.
    """
    zero_length: ClassVar[bool] = True

    @property
    def length(self) -> float:
        return 0.0

    def enclosing_line_contains(self, point: Point) -> bool:
        return self.is_at_end_position(point)

    def contains(self, point: Point) -> bool:
        return self.is_at_end_position(point)

    def closest_point_in_enclosing_line(self, point: Point) -> Point:
        return self.start

    def perpendicular_to(self, point: Point) -> Optional[Point]:
        if self.is_at_end_position(point):
            return self.start
        return None

    def is_collinear_with(self, other: "LineSegment") -> bool:
        return other.enclosing_line_contains(self.start)


def make_zero_length_line_segment(point: Point) -> ZeroLengthLineSegment:
    return ZeroLengthLineSegment(start=point, end=point)

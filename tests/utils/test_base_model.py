import pytest
from geokernel.geometry.line import Line, line_passing_by
from geokernel.geometry.point import Point
from geokernel.geometry.tolerance import Tolerance
from geokernel.geometry.vector import Vector


class TestImmutableModel:
    """Test suite for the ImmutableModel base class, through the kernel types."""

    def test_immutability(self):
        """Models are frozen after creation."""
        point = Point(x=1.0, y=2.0, z=3.0)

        with pytest.raises(Exception):
            point.x = 5.0

        tolerance = Tolerance()
        with pytest.raises(Exception):
            tolerance.equality_epsilon = 1.0

    def test_with_changes_basic(self):
        original = Tolerance()

        modified = original.with_changes(equality_epsilon=1e-9)

        assert original.equality_epsilon == 1e-13
        assert modified.equality_epsilon == 1e-9
        assert modified.min_separation == original.min_separation
        assert original is not modified

    def test_with_changes_multiple_fields(self):
        modified = Tolerance().with_changes(equality_epsilon=1e-6, min_separation=1e-2)

        assert modified.equality_epsilon == 1e-6
        assert modified.min_separation == 1e-2

    def test_with_changes_invalid_field(self):
        with pytest.raises(ValueError) as exc_info:
            Tolerance().with_changes(nonexistent=1.0)

        assert "Invalid field: nonexistent" in str(exc_info.value)

    def test_with_changes_validates(self):
        with pytest.raises(ValueError):
            Tolerance().with_changes(equality_epsilon=-1.0)

    def test_with_changes_keeps_nested_instances(self):
        """Nested points are carried over as the same objects."""
        origin = Point(x=0.0, y=0.0, z=0.0)
        line = line_passing_by(origin, Point(x=1.0, y=0.0, z=0.0))

        moved = line.with_changes(direction=Vector(x=0.0, y=1.0, z=0.0))

        assert moved.origin is origin
        assert moved.direction.y == 1.0
        assert line.direction.x == 1.0

    def test_with_changes_runs_model_validators(self):
        line = line_passing_by(Point(x=0.0, y=0.0, z=0.0), Point(x=1.0, y=0.0, z=0.0))

        with pytest.raises(ValueError):
            line.with_changes(direction=Vector(x=2.0, y=0.0, z=0.0))

    def test_with_changes_recomputes_derived_state(self):
        original = Vector(x=3.0, y=4.0, z=0.0)

        modified = original.with_changes(z=12.0)

        assert original.length == 5.0
        assert modified.length == 13.0

    def test_chained_with_changes(self):
        result = Point(x=1.0, y=1.0, z=1.0) \
            .with_changes(x=2.0) \
            .with_changes(y=3.0) \
            .with_changes(x=4.0)

        assert result.coordinates == (4.0, 3.0, 1.0)

    def test_line_model_is_a_line(self):
        line = Line(origin=Point(x=0.0, y=0.0, z=0.0), direction=Vector(x=0.0, y=0.0, z=1.0))
        assert line.direction.z == 1.0

import pytest
import random
from geokernel.geometry.errors import InvalidArgumentError, InvalidConstructionError
from geokernel.geometry.line_segment import LineSegment
from geokernel.geometry.plane import Plane, Side, plane_from_ordered_points
from geokernel.geometry.point import point
from geokernel.geometry.vector import vector


@pytest.fixture
def xz_plane():
    return plane_from_ordered_points(point(0, 0, 0), point(1, 0, 0), point(0, 0, 1))


@pytest.fixture
def plane_at_z_one():
    return plane_from_ordered_points(point(0, 0, 1), point(1, 0, 1), point(0, 1, 1))


class TestPlaneConstruction:
    def test_equation_ratios(self):
        plane = plane_from_ordered_points(point(0, 0, -1.6), point(0, 4, 0), point(-4, 0, 0))
        a, b, c, d = plane.equation

        assert a / d == pytest.approx(0.25)
        assert b / d == pytest.approx(-0.25)
        assert c / d == pytest.approx(0.625)

    def test_normal_is_unit_and_right_handed(self, plane_at_z_one):
        assert plane_at_z_one.normal.coordinates == pytest.approx((0.0, 0.0, 1.0))
        assert plane_at_z_one.d == pytest.approx(-1.0)

    def test_from_sequence(self):
        plane = plane_from_ordered_points([point(0, 0, 1), point(1, 0, 1), point(0, 1, 1)])
        assert plane.normal.coordinates == pytest.approx((0.0, 0.0, 1.0))

    def test_keeps_creation_points(self):
        a, b, c = point(0, 0, 1), point(1, 0, 1), point(0, 1, 1)
        plane = plane_from_ordered_points(a, b, c)
        assert plane.creation_points[0] is a
        assert plane.creation_points[2] is c

    def test_wrong_number_of_points(self):
        with pytest.raises(InvalidArgumentError):
            plane_from_ordered_points([point(0, 0, 0), point(1, 0, 0)])
        with pytest.raises(InvalidArgumentError):
            plane_from_ordered_points([point(0, 0, 0), point(1, 0, 0), point(0, 1, 0), point(1, 1, 0)])
        with pytest.raises(InvalidArgumentError):
            plane_from_ordered_points(point(0, 0, 0), point(1, 0, 0))

    def test_points_too_close(self):
        with pytest.raises(InvalidConstructionError):
            plane_from_ordered_points(point(0, 0, 0), point(1e-5, 0, 0), point(0, 1, 0))

    def test_model_rejects_points_too_close(self):
        with pytest.raises(ValueError):
            Plane(creation_points=(point(0, 0, 0), point(0, 0, 0), point(0, 1, 0)))

    def test_collinear_points(self):
        with pytest.raises(InvalidConstructionError):
            plane_from_ordered_points(point(0, 0, 0), point(1, 0, 0), point(2, 0, 0))
        with pytest.raises(InvalidConstructionError):
            plane_from_ordered_points([point(1, 1, 1), point(2, 3, 4), point(-1, -3, -5)])

    def test_model_rejects_collinear_points(self):
        with pytest.raises(ValueError):
            Plane(creation_points=(point(0, 0, 0), point(1, 0, 0), point(2, 0, 0)))


class TestPlaneQueries:
    def test_distance_from(self):
        plane = plane_from_ordered_points(point(0, 0, -1.6), point(0, 4, 0), point(-4, 0, 0))
        assert plane.distance_from(point(4, -4, 3)) == pytest.approx(6.8, abs=0.02)
        assert plane.distance_from(point(0, 4, 0)) == 0.0

    def test_contains(self, xz_plane):
        assert xz_plane.contains(point(10, 0, -5))
        assert not xz_plane.contains(point(10, 1e-6, 10))
        assert xz_plane.contains(point(10, 1e-6, 10), epsilon=1e-5)

    def test_contains_points_of_the_xz_plane(self, xz_plane):
        rng = random.Random(17)
        for _ in range(200):
            p = point(rng.uniform(-1000, 1000), 0.0, rng.uniform(-1000, 1000))
            assert xz_plane.contains(p)
            assert xz_plane.which_side(p) is Side.NONE

    def test_contains_all_and_segment(self, plane_at_z_one):
        assert plane_at_z_one.contains_all([point(5, 5, 1), point(-3, 2, 1)])
        assert not plane_at_z_one.contains_all([point(5, 5, 1), point(-3, 2, 2)])
        assert plane_at_z_one.contains_segment(LineSegment(start=point(0, 0, 1), end=point(3, 3, 1)))
        assert not plane_at_z_one.contains_segment(LineSegment(start=point(0, 0, 1), end=point(3, 3, 0)))

    def test_which_side(self, plane_at_z_one):
        assert plane_at_z_one.which_side(point(0, 0, 5)) is Side.POSITIVE
        assert plane_at_z_one.which_side(point(0, 0, -3)) is Side.NEGATIVE
        assert plane_at_z_one.which_side(point(7, 7, 1)) is Side.NONE

    def test_points_on_opposite_sides(self):
        plane = plane_from_ordered_points(point(0, 0, 1), point(1, 0, 0), point(0, 0, -1))
        above = plane.which_side(point(0, 2, 0))
        below = plane.which_side(point(0, -2, 0))

        assert above is Side.POSITIVE
        assert below is Side.NEGATIVE
        assert above.opposite() is below

    def test_which_side_follows_signed_distance(self, plane_at_z_one):
        rng = random.Random(19)
        for _ in range(200):
            p = point(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50))
            side = plane_at_z_one.which_side(p)
            if side is Side.POSITIVE:
                assert plane_at_z_one.signed_distance(p) > 0
            elif side is Side.NEGATIVE:
                assert plane_at_z_one.signed_distance(p) < 0

    def test_which_side_flips_with_the_plane(self, plane_at_z_one):
        reversed_plane = plane_at_z_one.facing_the_other_way()
        p = point(2, 3, 5)
        assert reversed_plane.which_side(p) is plane_at_z_one.which_side(p).opposite()

    def test_side_opposite(self):
        assert Side.POSITIVE.opposite() is Side.NEGATIVE
        assert Side.NEGATIVE.opposite() is Side.POSITIVE
        assert Side.NONE.opposite() is Side.NONE

    def test_signed_distance(self, plane_at_z_one):
        assert plane_at_z_one.signed_distance(point(4, 4, 3)) == pytest.approx(2.0)
        assert plane_at_z_one.signed_distance(point(4, 4, -1)) == pytest.approx(-2.0)

    def test_closest_point(self, plane_at_z_one):
        projected = plane_at_z_one.closest_point(point(3, 4, 5))
        assert projected.coordinates == pytest.approx((3.0, 4.0, 1.0))
        assert plane_at_z_one.contains(projected)


class TestDerivedPlanes:
    def test_facing_the_other_way(self, plane_at_z_one):
        reversed_plane = plane_at_z_one.facing_the_other_way()

        assert reversed_plane.normal.coordinates == pytest.approx((0.0, 0.0, -1.0))
        assert reversed_plane.is_same_plane_any_direction(plane_at_z_one)
        assert not reversed_plane.approximately_facing_the_same_way(plane_at_z_one)
        assert reversed_plane.facing_away_from_each_other(plane_at_z_one)

    def test_shift(self, plane_at_z_one):
        shifted = plane_at_z_one.shift(vector(0, 0, 2))

        assert shifted.contains(point(8, -8, 3))
        assert shifted.normal.epsilon_equals(plane_at_z_one.normal)
        assert shifted.approximately_facing_the_same_way(plane_at_z_one)
        assert not shifted.is_same_plane_any_direction(plane_at_z_one)

    def test_shift_within_the_plane(self, plane_at_z_one):
        assert plane_at_z_one.shift(vector(3, -2, 0)).is_same_plane_any_direction(plane_at_z_one)

    def test_same_plane_from_other_points(self, plane_at_z_one):
        other = plane_from_ordered_points(point(5, 5, 1), point(-3, 2, 1), point(0, -7, 1))
        assert other.is_same_plane_any_direction(plane_at_z_one)

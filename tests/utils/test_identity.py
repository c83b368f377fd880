from geokernel.geometry.point import Point
from geokernel.geometry.vector import Vector
from geokernel.planar.point_2d import Point2D
from geokernel.planar.polar_point import PolarPoint


class TestIdentityModel:
    def test_equal_only_to_itself(self):
        p1 = Point(x=1.0, y=2.0, z=3.0)
        p2 = Point(x=1.0, y=2.0, z=3.0)

        assert p1 == p1
        assert p1 != p2
        assert p1.epsilon_equals(p2)

    def test_hash_is_identity(self):
        p = Point(x=1.0, y=2.0, z=3.0)
        assert hash(p) == id(p)

    def test_set_keeps_coordinate_equal_points(self):
        points = {Point(x=0.0, y=0.0, z=0.0) for _ in range(1000)}
        assert len(points) == 1000

    def test_same_instance_in_set_once(self):
        p = Point(x=0.0, y=0.0, z=0.0)
        assert len({p, p}) == 1

    def test_vector_is_not_point(self):
        v = Vector(x=1.0, y=0.0, z=0.0)
        p = v.as_point()

        assert not isinstance(v, Point)
        assert v != p
        assert p.epsilon_equals(v)

    def test_planar_types_use_identity(self):
        assert Point2D(x=1.0, y=1.0) != Point2D(x=1.0, y=1.0)
        assert PolarPoint(r=1.0, theta=0.0) != PolarPoint(r=1.0, theta=0.0)

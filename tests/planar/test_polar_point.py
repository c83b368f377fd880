import pytest
import math
import random
from geokernel.planar.point_2d import Point2D
from geokernel.planar.polar_point import PolarPoint

RADII = [1.0, 2.0]
ANGLES = [0.0, math.pi / 4, math.pi / 2, 3 * math.pi / 4, math.pi,
          5 * math.pi / 4, 3 * math.pi / 2, 7 * math.pi / 2, 2 * math.pi]


class TestPolarPoint:
    def test_cartesian_and_back(self):
        for theta in ANGLES:
            for r in RADII:
                p = PolarPoint(r=r, theta=theta)
                back = PolarPoint.from_cartesian(p.as_cartesian())
                assert p.epsilon_equals(back, 1e-13)

    def test_polar_and_back_to_cartesian(self):
        rng = random.Random(31)
        for _ in range(5000):
            cartesian = Point2D(x=rng.uniform(-10, 10), y=rng.uniform(-10, 10))
            back = PolarPoint.from_cartesian(cartesian).as_cartesian()
            assert cartesian.epsilon_equals(back, 1e-13)

    def test_distance_matches_cartesian_distance(self):
        polar_points = [PolarPoint(r=r, theta=theta) for theta in ANGLES for r in RADII]
        rng = random.Random(29)
        for _ in range(1000):
            first = rng.choice(polar_points)
            second = rng.choice(polar_points)
            cartesian_distance = first.as_cartesian().distance_to(second.as_cartesian())
            assert first.distance(second) == pytest.approx(cartesian_distance, abs=1e-12)

    def test_distance_of_nearby_points(self):
        first = PolarPoint(r=1000.0, theta=1.0)
        second = PolarPoint(r=1000.0, theta=1.0 + 1e-9)
        assert first.distance(second) == pytest.approx(1e-6, rel=1e-6)

    def test_from_cartesian(self):
        p = PolarPoint.from_cartesian(Point2D(x=0.0, y=2.0))
        assert p.r == 2.0
        assert p.theta == pytest.approx(math.pi / 2)

    def test_epsilon_equals(self):
        p = PolarPoint(r=1.0, theta=0.0)
        assert p.epsilon_equals(p)
        assert p.epsilon_equals(PolarPoint(r=1.0, theta=2 * math.pi))
        assert not p.epsilon_equals(PolarPoint(r=1.0, theta=1e-3))

    def test_string_representation(self):
        assert str(PolarPoint(r=1.0, theta=math.pi / 2)) == "(r = 1, theta = 1.570796)"
        assert str(PolarPoint(r=2.5, theta=0.0)) == "(r = 2.5, theta = 0)"

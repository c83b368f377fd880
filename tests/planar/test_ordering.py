import pytest
from geokernel.planar.ordering import PlanePointsOrdering, compare_counterclockwise, compare_x_and_y, sort_points
from geokernel.planar.point_2d import Point2D


@pytest.fixture
def compass():
    return {
        "east": Point2D(x=1.0, y=0.0),
        "north": Point2D(x=0.0, y=1.0),
        "west": Point2D(x=-1.0, y=0.0),
        "south": Point2D(x=0.0, y=-1.0),
    }


class TestSortPoints:
    def test_counterclockwise(self, compass):
        unordered = [compass["south"], compass["east"], compass["north"], compass["west"]]
        ordered = sort_points(unordered, PlanePointsOrdering.COUNTERCLOCKWISE)

        assert ordered == [compass["north"], compass["west"], compass["south"], compass["east"]]

    def test_clockwise_is_reversed_counterclockwise(self, compass):
        unordered = [compass["south"], compass["east"], compass["north"], compass["west"]]
        ordered = sort_points(unordered, PlanePointsOrdering.CLOCKWISE)

        assert ordered == [compass["east"], compass["south"], compass["west"], compass["north"]]

    def test_x_and_y(self):
        first = Point2D(x=-1.0, y=0.0)
        second = Point2D(x=-0.5, y=1.0)
        third = Point2D(x=1.0, y=-1.0)
        fourth = Point2D(x=1.0, y=0.0)

        ordered = sort_points([third, second, fourth, first], PlanePointsOrdering.X_AND_Y_AXES)

        assert ordered == [first, second, third, fourth]

    def test_input_left_untouched(self, compass):
        unordered = [compass["south"], compass["east"]]
        sort_points(unordered, PlanePointsOrdering.COUNTERCLOCKWISE)
        assert unordered == [compass["south"], compass["east"]]


class TestComparators:
    def test_positive_x_axis_angles_compare_equal(self):
        assert compare_counterclockwise(Point2D(x=1.0, y=0.0), Point2D(x=5.0, y=0.0)) == 0
        assert compare_counterclockwise(Point2D(x=1.0, y=0.0), Point2D(x=1.0, y=-1e-15)) == 0

    def test_counterclockwise(self):
        assert compare_counterclockwise(Point2D(x=0.0, y=1.0), Point2D(x=-1.0, y=0.0)) < 0
        assert compare_counterclockwise(Point2D(x=-1.0, y=0.0), Point2D(x=0.0, y=1.0)) > 0
        assert compare_counterclockwise(Point2D(x=2.0, y=2.0), Point2D(x=1.0, y=1.0)) == 0

    def test_x_and_y(self):
        assert compare_x_and_y(Point2D(x=1.0, y=0.0), Point2D(x=2.0, y=-5.0)) < 0
        assert compare_x_and_y(Point2D(x=1.0, y=3.0), Point2D(x=1.0, y=2.0)) > 0
        assert compare_x_and_y(Point2D(x=1.0, y=3.0), Point2D(x=1.0, y=3.0)) == 0

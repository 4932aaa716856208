import math

import pytest

from kmeans_parallel.Geometry.point import Point, as_points, distance, mean, nearest_index


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert distance(Point(1.5, -2), Point(1.5, -2)) == 0.0
    assert Point(0, 0).distance(Point(0, 2)) == 2.0
    assert math.isclose(distance(Point(1, 1), Point(2, 2)), math.sqrt(2))


def test_point_is_immutable_and_exact():
    p = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0
    assert Point(1.0, 2.0) == p
    assert Point(0.1 + 0.2, 0) != Point(0.3, 0)


def test_nearest_index():
    centers = as_points([(0, 0), (10, 10), (20, 0)])
    assert nearest_index(Point(1, 1), centers) == 0
    assert nearest_index(Point(9, 8), centers) == 1
    assert Point(19, 1).nearest_index(centers) == 2


def test_nearest_index_tie_goes_to_first_center():
    centers = as_points([(1, 0), (-1, 0), (0, 1), (0, -1)])
    assert nearest_index(Point(0, 0), centers) == 0
    # Equidistant from centers 1 and 2 only
    assert nearest_index(Point(-1, 1), as_points([(5, 5), (-1, 0), (0, 1)])) == 1


def test_nearest_index_empty_centers():
    with pytest.raises(ValueError):
        nearest_index(Point(0, 0), [])


def test_mean():
    assert mean(as_points([(0, 0), (2, 4)])) == Point(1.0, 2.0)
    assert mean([Point(3, -3)]) == Point(3.0, -3.0)
    assert Point.mean(as_points([(1, 1), (2, 2), (3, 3), (6, 2)])) == Point(3.0, 2.0)


def test_mean_of_empty_is_origin():
    assert mean([]) == Point(0.0, 0.0)


def test_mean_does_not_depend_on_order():
    points = [Point(0.1 * i, 1e16 if i % 7 == 0 else 1.0 / (i + 1)) for i in range(50)]
    assert mean(points) == mean(list(reversed(points)))
    assert mean(points) == mean(points[1::2] + points[::2])

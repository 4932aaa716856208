import math
from typing import List, NamedTuple, Sequence


class Point(NamedTuple):
    """Immutable 2-D point. Equality is exact coordinate equality."""

    x: float
    y: float

    def distance(self, other: "Point") -> float:
        return distance(self, other)

    def nearest_index(self, centers: Sequence["Point"]) -> int:
        return nearest_index(self, centers)

    @staticmethod
    def mean(points: Sequence["Point"]) -> "Point":
        return mean(points)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


def nearest_index(point: Point, centers: Sequence[Point]) -> int:
    """
    Index of the center closest to ``point``.

    Ties go to the first center reaching the minimum distance: the scan only
    moves on a strictly smaller distance, so later equal candidates are ignored.
    """
    if len(centers) == 0:
        raise ValueError("Cannot find the nearest center of an empty center set")
    index = -1
    min_dist = math.inf
    for i, center in enumerate(centers):
        dist = distance(point, center)
        if dist < min_dist:
            min_dist = dist
            index = i
    return index


def mean(points: Sequence[Point]) -> Point:
    """
    Arithmetic mean of ``points``. An empty sequence yields the origin so that
    an emptied cluster keeps its slot in the center set.

    Coordinates are summed with ``math.fsum``, which is exactly rounded, so the
    result does not depend on the order members were collected in.
    """
    if len(points) == 0:
        return Point(0.0, 0.0)
    n = len(points)
    return Point(math.fsum(p[0] for p in points) / n, math.fsum(p[1] for p in points) / n)


def as_points(pairs) -> List[Point]:
    return [Point(float(x), float(y)) for x, y in pairs]

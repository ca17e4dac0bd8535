import math

import pytest

from proximity.data_types import Point2D
from proximity.protocols import HasDistanceTo, Ordered


def test_compare_by_y_when_x_equal():
    assert Point2D(1, 2).compare_to(Point2D(1, 3)) == -1
    assert Point2D(1, 3).compare_to(Point2D(1, 2)) == 1


def test_compare_by_x_first():
    assert Point2D(2, 1).compare_to(Point2D(1, 5)) == 1
    assert Point2D(1, 5).compare_to(Point2D(2, 1)) == -1


def test_compare_equal_points():
    assert Point2D(1.5, -2.5).compare_to(Point2D(1.5, -2.5)) == 0


def test_compare_is_transitive():
    a = Point2D(0, 10)
    b = Point2D(1, -10)
    c = Point2D(1, 0)

    assert a.compare_to(b) < 0
    assert b.compare_to(c) < 0
    assert a.compare_to(c) < 0


def test_nan_comparison_falls_through_to_zero():
    nan_point = Point2D(math.nan, 0)
    origin = Point2D(0, 0)

    # Сравнение считает точки одинаковыми, а равенство - нет
    assert nan_point.compare_to(origin) == 0
    assert origin.compare_to(nan_point) == 0
    assert nan_point != origin


def test_nan_in_y_falls_through_to_zero():
    assert Point2D(1, math.nan).compare_to(Point2D(1, 5)) == 0


def test_nan_in_x_does_not_hide_y_difference():
    assert Point2D(math.nan, 1).compare_to(Point2D(0, 2)) == -1


def test_compare_with_other_type_raises():
    with pytest.raises(TypeError):
        Point2D(1, 2).compare_to((1, 2))  # type: ignore[arg-type]


def test_comparison_operators_follow_compare_to():
    low = Point2D(1, 2)
    high = Point2D(1, 3)

    assert low < high
    assert low <= high
    assert high > low
    assert high >= low
    assert low <= Point2D(1, 2)
    assert low >= Point2D(1, 2)


def test_comparison_operators_with_other_type_raise():
    with pytest.raises(TypeError):
        Point2D(1, 2) < (1, 3)  # noqa: B015


def test_sorting_is_lexicographic():
    points = [Point2D(2, 1), Point2D(1, 5), Point2D(1, -1), Point2D(0, 100)]

    assert sorted(points) == [Point2D(0, 100), Point2D(1, -1), Point2D(1, 5), Point2D(2, 1)]


def test_point_satisfies_capability_protocols():
    point = Point2D(0, 0)

    assert isinstance(point, Ordered)
    assert isinstance(point, HasDistanceTo)


def test_protocols_do_not_require_inheritance():
    class Mark:
        def __init__(self, position: float):
            self.position = position

        def compare_to(self, other: "Mark") -> int:
            return (self.position > other.position) - (self.position < other.position)

        def distance(self, other: "Mark") -> float:
            return abs(self.position - other.position)

    assert isinstance(Mark(1.0), Ordered)
    assert isinstance(Mark(1.0), HasDistanceTo)
    assert not isinstance("text", HasDistanceTo)

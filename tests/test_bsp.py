import pytest

from fixbsp.bsp import bsp
from fixbsp.point import Point

A = Point(0, 0)
B = Point(4, 0)
C = Point(2, 3)


def test_interior_point():
    assert bsp(A, B, C, Point(2, 1)) is True


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(2, 1), True),
        (Point(5, 1), False),
        (Point(0, 0), False),
        (Point(2, 0), False),
        (Point(1, 1.5), False),
        (Point(1, -1), False),
    ],
)
def test_demo_cases(point, expected):
    assert bsp(A, B, C, point) is expected


@pytest.mark.parametrize("vertex", [A, B, C])
def test_vertices_are_outside(vertex):
    assert bsp(A, B, C, vertex) is False


@pytest.mark.parametrize("point", [Point(2, 1), Point(5, 1), Point(1, -1), Point(2, 0)])
def test_result_independent_of_orientation_and_order(point):
    expected = bsp(A, B, C, point)
    assert bsp(C, B, A, point) is expected
    assert bsp(B, C, A, point) is expected
    assert bsp(A, C, B, point) is expected


def test_degenerate_triangle_contains_nothing():
    assert bsp(Point(0, 0), Point(1, 1), Point(2, 2), Point(1, 1)) is False
    assert bsp(Point(0, 0), Point(1, 1), Point(2, 2), Point(1, 0)) is False
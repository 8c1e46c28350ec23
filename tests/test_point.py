import pytest

from fixbsp.fixed import Fixed
from fixbsp.point import Point


def test_coordinates_convert_to_fixed():
    p = Point(1.5, -2)
    assert p.x == Fixed(1.5)
    assert p.y == Fixed(-2)


def test_default_is_origin():
    assert Point() == Point(0, 0)
    assert Point().x == Fixed()


def test_accepts_fixed_coordinates():
    assert Point(Fixed(3), Fixed(0.25)) == Point(3, 0.25)


def test_fixed_argument_is_copied():
    value = Fixed(2)
    p = Point(value, value)
    value.increment()
    assert p.x == Fixed(2)
    assert p.y == Fixed(2)


def test_returned_coordinate_is_independent():
    p = Point(4, 5)
    x = p.x
    x.increment()
    assert p.x == Fixed(4)


def test_point_is_immutable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = Fixed(3)
    with pytest.raises(AttributeError):
        p._y = Fixed(3)
    assert p == Point(1, 2)


def test_equality_and_hash():
    assert Point(1, 2) == Point(1.0, 2.0)
    assert Point(1, 2) != Point(2, 1)
    assert len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}) == 2


def test_comparison_with_other_type():
    assert (Point(1, 2) == (1, 2)) is False


def test_rejects_bad_coordinate():
    with pytest.raises(TypeError):
        Point("1", 2)


def test_repr_shows_coordinates():
    assert repr(Point(2, 3)) == f"Point({Fixed(2)}, {Fixed(3)})"
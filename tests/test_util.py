import pytest

from pengin.util import Rect, is_colliding_aabb, is_point_in_rect, random_number


def test_default_rect_is_falsy():
    assert not Rect()
    assert bool(Rect(0, 0, 1, 1))


def test_rect_ordering_is_fieldwise():
    assert Rect(1, 0, 0, 0) > Rect(0, 9, 9, 9)
    assert Rect(1, 2, 3, 4) < Rect(1, 2, 3, 5)
    assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)


def test_converted_applies_kind():
    rect = Rect(1.7, 2.2, 3.9, 4.0).converted(int)
    assert rect == Rect(1, 2, 3, 4)
    assert all(isinstance(v, int) for v in (rect.x, rect.y, rect.width, rect.height))


def test_converted_round_trip():
    rect = Rect(1, 2, 3, 4)
    assert rect.converted(float).converted(int) == rect


def test_point_in_rect_integer_edges_excluded():
    rect = Rect(0, 0, 10, 10)
    assert is_point_in_rect(rect, 5, 5)
    assert not is_point_in_rect(rect, 0, 5)
    assert not is_point_in_rect(rect, 10, 5)
    assert not is_point_in_rect(rect, 5, 10)


def test_point_in_rect_float_tolerance():
    rect = Rect(0.0, 0.0, 10.0, 10.0)
    assert is_point_in_rect(rect, 0.0, 5.0)
    assert is_point_in_rect(rect, 10.0, 5.0)
    assert not is_point_in_rect(rect, -0.01, 5.0)
    assert not is_point_in_rect(rect, 5.0, 10.01)


def test_aabb_integer_touching_is_not_colliding():
    assert not is_colliding_aabb(Rect(0, 0, 10, 10), Rect(10, 0, 5, 5))
    assert is_colliding_aabb(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))


def test_aabb_float_touching_is_colliding():
    assert is_colliding_aabb(Rect(0.0, 0.0, 10.0, 10.0), Rect(10.0, 0.0, 5.0, 5.0))
    assert not is_colliding_aabb(Rect(0.0, 0.0, 10.0, 10.0), Rect(10.5, 0.0, 5.0, 5.0))


def test_aabb_is_symmetric():
    a = Rect(0, 0, 4, 4)
    b = Rect(3, 3, 4, 4)
    assert is_colliding_aabb(a, b) == is_colliding_aabb(b, a)


@pytest.mark.parametrize("_", range(50))
def test_random_int_in_inclusive_range(_):
    value = random_number(3, 7)
    assert isinstance(value, int)
    assert 3 <= value <= 7


@pytest.mark.parametrize("_", range(50))
def test_random_float_in_range(_):
    value = random_number(0.5, 1.5)
    assert isinstance(value, float)
    assert 0.5 <= value <= 1.5
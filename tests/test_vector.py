import math

import pytest

from halozero.structs import Point2f
from halozero.vector import Vector2f, point_difference, translate


def test_default_is_zero():
    v = Vector2f()
    assert (v.x, v.y) == (0.0, 0.0)


def test_from_points_and_translate_round_trip():
    a = Point2f(1.5, -2.0)
    b = Point2f(-4.0, 7.25)
    v = Vector2f.from_points(a, b)
    assert translate(a, v) == b


def test_from_point_matches_coordinates():
    p = Point2f(2.5, -1.5)
    v = Vector2f.from_point(p)
    assert v.to_point() == p


def test_point_difference_matches_from_points():
    a = Point2f(1.0, 2.0)
    b = Point2f(6.0, -3.0)
    assert point_difference(b, a) == Vector2f.from_points(a, b)


def test_equals_respects_epsilon():
    v = Vector2f(1.0, 1.0)
    assert v.equals(Vector2f(1.0005, 1.0))
    assert not v.equals(Vector2f(1.002, 1.0))
    assert v.equals(Vector2f(1.002, 1.0), epsilon=0.01)


def test_eq_operator_is_approximate():
    assert Vector2f(2.0, 3.0) == Vector2f(2.0, 3.0 + 1e-5)
    assert not Vector2f(2.0, 3.0) == Vector2f(2.1, 3.0)


def test_dot_of_orthogonal_is_zero():
    v = Vector2f(3.0, -7.0)
    assert v.dot(v.orthogonal()) == 0.0


def test_cross_is_antisymmetric():
    a = Vector2f(1.5, 2.0)
    b = Vector2f(-3.0, 4.5)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0


def test_length_norm_and_squared_length():
    v = Vector2f(3.0, 4.0)
    assert v.length() == 5.0
    assert v.norm() == v.length()
    assert v.squared_length() == pytest.approx(v.length() ** 2)


def test_normalized_has_unit_length():
    v = Vector2f(-12.0, 9.0).normalized()
    assert v.length() == pytest.approx(1.0)


def test_normalized_short_vector_is_zero():
    assert Vector2f(0.0001, 0.0).normalized() == Vector2f(0.0, 0.0)


def test_angle_with_orthogonal_is_quarter_turn():
    v = Vector2f(2.0, 1.0)
    assert v.angle_with(v.orthogonal()) == pytest.approx(math.pi / 2)
    assert v.orthogonal().angle_with(v) == pytest.approx(-math.pi / 2)


def test_reflect_twice_returns_original():
    normal = Vector2f(1.0, 1.0).normalized()
    v = Vector2f(3.0, -2.0)
    assert v.reflect(normal).reflect(normal) == v
    assert v.reflect(normal).length() == pytest.approx(v.length())


def test_arithmetic_operators():
    a = Vector2f(1.0, 2.0)
    b = Vector2f(4.0, -1.0)
    assert (a + b) - b == a
    assert -a + a == Vector2f()
    assert +a == a
    assert 2 * a == a * 2
    assert (a * 3) / 3 == a


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2f(1.0, 1.0) / 0


def test_str_uses_two_decimals():
    assert str(Vector2f(1.0, 2.0)) == "Vector2f(1.00, 2.00)"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2f(1.0, 2.0))
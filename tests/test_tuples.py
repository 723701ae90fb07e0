import math

import pytest

from core.color import Color, BLACK
from core.vector import Tuple, point, vector


def test_point_and_vector_flags():
    p = point(4.3, -4.2, 3.1)
    v = vector(4.3, -4.2, 3.1)
    assert p.is_point() and not p.is_vector()
    assert v.is_vector() and not v.is_point()
    assert p == Tuple(4.3, -4.2, 3.1, 1.0)


def test_arithmetic():
    assert point(3, -2, 5) + vector(-2, 3, 1) == point(1, 1, 6)
    assert point(3, 2, 1) - point(5, 6, 7) == vector(-2, -4, -6)
    assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)
    assert -Tuple(1, -2, 3, -4) == Tuple(-1, 2, -3, 4)
    assert Tuple(1, -2, 3, -4) * 0.5 == Tuple(0.5, -1, 1.5, -2)
    assert Tuple(1, -2, 3, -4) / 2 == Tuple(0.5, -1, 1.5, -2)


def test_equality_is_approximate():
    assert vector(1, 2, 3) == vector(1 + 1e-6, 2, 3)
    assert vector(1, 2, 3) != vector(1.001, 2, 3)


def test_magnitude_and_normalize():
    assert vector(1, 2, 3).magnitude() == pytest.approx(math.sqrt(14))
    assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
    n = vector(1, 2, 3).normalize()
    assert n.magnitude() == pytest.approx(1.0)


def test_zero_vector_normalizes_to_zero():
    assert vector(0, 0, 0).normalize() == vector(0, 0, 0)


def test_point_operations_are_rejected():
    with pytest.raises(ValueError):
        point(1, 2, 3).normalize()
    with pytest.raises(ValueError):
        point(1, 2, 3).cross(vector(1, 0, 0))


def test_dot_and_cross():
    a = vector(1, 2, 3)
    b = vector(2, 3, 4)
    assert a.dot(b) == 20
    assert a.cross(b) == vector(-1, 2, -1)
    assert b.cross(a) == vector(1, -2, 1)


def test_reflect():
    assert vector(1, -1, 0).reflect(vector(0, 1, 0)) == vector(1, 1, 0)
    n = vector(math.sqrt(2) / 2, math.sqrt(2) / 2, 0)
    assert vector(0, -1, 0).reflect(n) == vector(1, 0, 0)


def test_color_operations():
    assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)
    assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)
    assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
    assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)


def test_color_from_hex():
    assert Color.from_hex("#ff0000") == Color(1, 0, 0)
    assert Color.from_hex("000000") == BLACK
    with pytest.raises(ValueError):
        Color.from_hex("#fff")

import math

import pytest

from ninja_attack.vector import Point


def test_arithmetic():
    a, b = Point(1, 2), Point(3, -5)
    assert a + b == Point(4, -3)
    assert a - b == Point(-2, 7)
    assert a * 3 == Point(3, 6)
    assert 3 * a == Point(3, 6)
    assert b / 2 == Point(1.5, -2.5)


def test_length():
    assert Point(3, 4).length() == 5
    assert Point().length() == 0


@pytest.mark.parametrize("vec", [Point(0.001, 0), Point(3, 4), Point(-7, 2), Point(1e6, -1e6)])
def test_normalized_has_unit_length(vec):
    unit = vec.normalized()
    assert math.isclose(unit.length(), 1.0, rel_tol=1e-9)
    # same direction
    assert math.isclose(unit.x * vec.length(), vec.x, rel_tol=1e-9, abs_tol=1e-12)


def test_normalizing_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Point(0, 0).normalized()

import math

import numpy as np

from orbital_mechanics.core.model import PRECISION, Vector2


def test_componentwise_arithmetic() -> None:
    a = Vector2(6.0, -4.0)
    b = Vector2(2.0, 8.0)

    assert a + b == Vector2(8.0, 4.0)
    assert a - b == Vector2(4.0, -12.0)
    assert a * b == Vector2(12.0, -32.0)
    assert a / b == Vector2(3.0, -0.5)


def test_fill_broadcasts_scalar() -> None:
    scaled = Vector2(3.0, -1.5) * Vector2.fill(2.0)
    assert scaled == Vector2(6.0, -3.0)
    assert Vector2.fill(7.0) == Vector2(7.0, 7.0)


def test_components_are_extended_precision() -> None:
    vec = Vector2(1, 2)
    assert isinstance(vec.i, PRECISION)
    assert isinstance(vec.j, PRECISION)
    assert vec.as_array().dtype == PRECISION


def test_length_and_normalize() -> None:
    vec = Vector2(3.0, 4.0)
    assert float(vec.length()) == 5.0
    unit = vec.normalize()
    assert math.isclose(float(unit.i), 0.6)
    assert math.isclose(float(unit.j), 0.8)
    assert math.isclose(float(unit.length()), 1.0)


def test_normalize_zero_vector_is_not_finite() -> None:
    with np.errstate(divide="ignore", invalid="ignore"):
        unit = Vector2.zero().normalize()
    assert not np.all(np.isfinite(unit.as_array()))


def test_from_iterable_requires_two_components() -> None:
    assert Vector2.from_iterable([1.0, 2.0]) == Vector2(1.0, 2.0)
    try:
        Vector2.from_iterable([1.0, 2.0, 3.0])
    except ValueError:
        pass
    else:
        raise AssertionError("Expected ValueError")

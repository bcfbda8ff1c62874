import operator

import pytest

from tapioca.vector2 import Vector2
from tapioca.vector3 import Vector3
from tapioca.vector4 import Vector4


@pytest.mark.parametrize(
    "args, expected",
    [
        ((), (0.0, 0.0, 0.0, 0.0)),
        ((7,), (7.0, 7.0, 7.0, 7.0)),
        ((1, 2), (1.0, 2.0, 0.0, 0.0)),
        ((1, 2, 3, 4), (1.0, 2.0, 3.0, 4.0)),
    ],
)
def test_construction(args, expected):
    assert tuple(Vector4(*args)) == expected


@pytest.mark.parametrize(
    "built, expected",
    [
        (lambda: Vector4.from_vector3(Vector3(1, 2, 3), 4), (1.0, 2.0, 3.0, 4.0)),
        (lambda: Vector4.from_vector3(Vector3(1, 2, 3)), (1.0, 2.0, 3.0, 0.0)),
        (lambda: Vector4.from_vector2(Vector2(1, 2), 3, 4), (1.0, 2.0, 3.0, 4.0)),
        (lambda: Vector4.from_vector2(Vector2(5, 6)), (5.0, 6.0, 0.0, 0.0)),
    ],
)
def test_built_from_smaller_vectors(built, expected):
    assert tuple(built()) == expected


def test_magnitude_ignores_w():
    assert Vector4(1, 2, 2, 100).magnitude() == pytest.approx(3.0)
    assert Vector4(0, 0, 0, 5).magnitude_squared() == 0.0


@pytest.mark.parametrize(
    "coords, before, after",
    [
        ((0, 3, 4, 10), 5.0, (0.0, 0.6, 0.8, 2.0)),
        ((0, 0, 0, 3), 0.0, (0.0, 0.0, 0.0, 3.0)),
    ],
)
def test_normalize_divides_all_coordinates(coords, before, after):
    v = Vector4(*coords)
    assert v.normalize() == pytest.approx(before)
    assert tuple(v) == pytest.approx(after)


def test_normalized_of_zero_magnitude_is_zero():
    assert Vector4(0, 0, 0, 9).normalized() == Vector4()


def test_normalized_pinned():
    assert tuple(Vector4(0, 3, 4, 10).normalized()) == pytest.approx((0.0, 0.6, 0.8, 2.0))


@pytest.mark.parametrize(
    "op, left, right, expected",
    [
        (operator.add, Vector4(1, 2, 3, 4), Vector4(4, 3, 2, 1), Vector4(5)),
        (operator.sub, Vector4(5), Vector4(4, 3, 2, 1), Vector4(1, 2, 3, 4)),
        (operator.mul, 2, Vector4(1, 2, 3, 4), Vector4(2, 4, 6, 8)),
        (operator.truediv, Vector4(2, 4, 6, 8), 2, Vector4(1, 2, 3, 4)),
    ],
)
def test_arithmetic(op, left, right, expected):
    assert op(left, right) == expected


def test_negation():
    assert -Vector4(1, -2, 3, -4) == Vector4(-1, 2, -3, 4)


@pytest.mark.parametrize(
    "t, expected", [(0, (1, 2, 3, 4)), (0.5, (3, 4, 5, 6)), (-3, (1, 2, 3, 4)), (9, (5, 6, 7, 8))]
)
def test_lerp(t, expected):
    assert Vector4(1, 2, 3, 4).lerp(Vector4(5, 6, 7, 8), t) == Vector4(*expected)


def test_distance_includes_w():
    assert Vector4().distance(Vector4(0, 0, 0, 3)) == 3.0


def test_not_equal_to_other_dimension():
    assert (Vector4(1, 2, 3, 0) == Vector3(1, 2, 3)) is False
    assert (Vector4(1, 2, 3, 4) != Vector4(1, 2, 3, 5)) is True


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector4(1, 2, 3, 4) / 0
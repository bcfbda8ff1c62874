import math

import pytest

from tapioca.quaternion import Quaternion
from tapioca.vector3 import Vector3


def _components(q):
    return (q.scalar, q.vector.x, q.vector.y, q.vector.z)


def _assert_vec_close(a, b):
    for p, q in zip(a, b):
        assert p == pytest.approx(q, abs=1e-9)


def test_identity_from_euler():
    q = Quaternion.from_euler(Vector3(0, 0, 0))
    assert _components(q) == (1.0, 0.0, 0.0, 0.0)
    assert q.angle == 0.0


def test_constructor_angle_from_scalar():
    q = Quaternion(math.cos(0.25), 0, 0, math.sin(0.25))
    assert q.angle == pytest.approx(0.5)


def test_constructor_rounds_out_of_range_scalar():
    q = Quaternion(1.2, 0, 0, 0)
    assert q.scalar == 1.2
    assert q.angle == 0.0


def test_constructor_far_out_of_range_gives_nan_angle():
    assert str(Quaternion(2.0, 0, 0, 0).angle) == "nan"


@pytest.mark.parametrize(
    "axis,euler",
    [
        (Vector3(1, 0, 0), Vector3(30, 0, 0)),
        (Vector3(0, 1, 0), Vector3(0, 30, 0)),
        (Vector3(0, 0, 1), Vector3(0, 0, 30)),
    ],
)
def test_axis_angle_matches_single_axis_euler(axis, euler):
    a = Quaternion.from_axis_angle(30, axis)
    b = Quaternion.from_euler(euler)
    _assert_vec_close(_components(a), _components(b))


def test_axis_angle_normalises_axis_and_keeps_angle():
    q = Quaternion.from_axis_angle(60, Vector3(0, 0, 5))
    assert q.angle == pytest.approx(math.radians(60))
    assert q.magnitude() == pytest.approx(1.0)


def test_axis_angle_zero_axis_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion.from_axis_angle(45, Vector3(0, 0, 0))


def test_conjugate_negates_vector():
    q = Quaternion(0.5, 0.1, -0.2, 0.3)
    c = q.conjugate()
    assert _components(c) == (0.5, -0.1, 0.2, -0.3)


def test_unit_times_inverse_is_identity():
    q = Quaternion.from_euler(Vector3(20, 35, -50))
    p = q * q.inverse()
    _assert_vec_close(_components(p), (1, 0, 0, 0))


def test_normalized_has_unit_magnitude():
    q = Quaternion(2, 3, 4, 5)
    assert q.normalized().magnitude() == pytest.approx(1.0)
    assert q.magnitude() > 1


def test_normalize_in_place():
    q = Quaternion(2, 3, 4, 5)
    assert q.normalize() is None
    assert q.magnitude() == pytest.approx(1.0)


def test_scalar_multiply_and_divide_round_trip():
    q = Quaternion(0.5, 0.1, -0.2, 0.3)
    back = (q * 4) / 4
    _assert_vec_close(_components(back), _components(q))
    assert _components(2 * q) == _components(q * 2)


def test_product_composes_same_axis_rotations():
    axis = Vector3(1, 1, 0)
    a = Quaternion.from_axis_angle(25, axis)
    b = Quaternion.from_axis_angle(40, axis)
    c = Quaternion.from_axis_angle(65, axis)
    _assert_vec_close(_components(a * b), _components(c))


@pytest.mark.parametrize("degrees", [15, 90, 170])
def test_rotate_point_about_z_matches_vector_rotation(degrees):
    q = Quaternion.from_axis_angle(degrees, Vector3(0, 0, 1))
    p = Vector3(1, 2, 3)
    _assert_vec_close(q.rotate_point(p), p.rotate_z(degrees))


def test_rotate_point_preserves_length():
    q = Quaternion.from_euler(Vector3(10, 20, 30))
    p = Vector3(3, -1, 2)
    assert q.rotate_point(p).magnitude() == pytest.approx(p.magnitude())


def test_rotate_point_with_identity_returns_copy():
    q = Quaternion(1, 0, 0, 0)
    p = Vector3(4, 5, 6)
    r = q.rotate_point(p)
    assert r == p
    assert r is not p


@pytest.mark.parametrize(
    "euler",
    [Vector3(40, 0, 0), Vector3(0, 0, -70), Vector3(0, 0, 0)],
)
def test_to_euler_round_trip_single_axis(euler):
    q = Quaternion.from_euler(euler)
    _assert_vec_close(q.to_euler(), euler)


def test_to_euler_normalises_in_place():
    q = Quaternion(2, 0, 0, 0)
    _assert_vec_close(q.to_euler(), (0, 0, 0))
    assert q.magnitude() == pytest.approx(1.0)
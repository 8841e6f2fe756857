import math

import pytest

from geomkernel.core.errors import ArityMismatchError, DegenerateVectorError, MissingInputError
from geomkernel.core.matrix import Mat4
from geomkernel.core.quaternion import Quat
from geomkernel.core.vector import Vec3


def same_rotation(a: Quat, b: Quat, tol: float = 1e-9) -> bool:
    # q and -q describe the same rotation
    return a.is_close(b, abs_tol=tol) or a.is_close(-b, abs_tol=tol)


def test_identity():
    assert Quat() == Quat.identity()
    assert Quat.identity().to_tuple() == (0.0, 0.0, 0.0, 1.0)
    assert Quat.identity().to_mat4().is_identity()

def test_from_array():
    assert Quat.from_array([1, 2, 3, 4]) == Quat(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(MissingInputError):
        Quat.from_array(None)
    with pytest.raises(ArityMismatchError):
        Quat.from_array([1.0, 2.0, 3.0])

def test_arithmetic():
    a = Quat(1.0, 2.0, 3.0, 4.0)
    b = Quat(0.5, 0.5, 0.5, 0.5)
    assert a + b == Quat(1.5, 2.5, 3.5, 4.5)
    assert a - b == Quat(0.5, 1.5, 2.5, 3.5)
    assert -a == Quat(-1.0, -2.0, -3.0, -4.0)
    assert a * 2 == Quat(2.0, 4.0, 6.0, 8.0)
    assert 2 * a == Quat(2.0, 4.0, 6.0, 8.0)
    assert a / 2 == Quat(0.5, 1.0, 1.5, 2.0)
    with pytest.raises(ZeroDivisionError):
        a / 0

def test_hamilton_product_basis():
    i = Quat(1.0, 0.0, 0.0, 0.0)
    j = Quat(0.0, 1.0, 0.0, 0.0)
    k = Quat(0.0, 0.0, 1.0, 0.0)
    assert i * j == k
    assert j * k == i
    assert k * i == j
    assert i * i == Quat(0.0, 0.0, 0.0, -1.0)

def test_composition_order():
    a = Quat.from_axis_angle(Vec3.unit_x(), 0.3)
    b = Quat.from_axis_angle(Vec3.unit_y(), 1.1)
    v = Vec3(0.4, -2.0, 1.5)
    # (a * b) applies b first, then a
    assert (a * b).rotate(v).is_close(a.rotate(b.rotate(v)), abs_tol=1e-12)

def test_from_axis_angle_rotates():
    q = Quat.from_axis_angle(Vec3(0.0, 0.0, 5.0), math.pi / 2)
    assert q.is_normalized()
    assert q.rotate(Vec3.unit_x()).is_close(Vec3.unit_y(), abs_tol=1e-12)

def test_from_axis_angle_zero_axis_raises():
    with pytest.raises(DegenerateVectorError):
        Quat.from_axis_angle(Vec3.zero(), 1.0)

def test_from_yaw_pitch_roll_single_axes():
    assert same_rotation(Quat.from_yaw_pitch_roll(0.7, 0.0, 0.0),
                         Quat.from_axis_angle(Vec3.unit_y(), 0.7))
    assert same_rotation(Quat.from_yaw_pitch_roll(0.0, 0.7, 0.0),
                         Quat.from_axis_angle(Vec3.unit_x(), 0.7))
    assert same_rotation(Quat.from_yaw_pitch_roll(0.0, 0.0, 0.7),
                         Quat.from_axis_angle(Vec3.unit_z(), 0.7))

def test_from_yaw_pitch_roll_order():
    yaw, pitch, roll = 0.3, -0.4, 1.2
    q = Quat.from_yaw_pitch_roll(yaw, pitch, roll)
    expected = (Quat.from_axis_angle(Vec3.unit_y(), yaw)
                * Quat.from_axis_angle(Vec3.unit_x(), pitch)
                * Quat.from_axis_angle(Vec3.unit_z(), roll))
    assert same_rotation(q, expected)

def test_normalize():
    q = Quat(1.0, 2.0, 3.0, 4.0)
    assert not q.is_normalized()
    n = q.normalized()
    assert abs(n.length() - 1.0) < 1e-12
    assert n.is_normalized()

def test_normalize_zero_raises():
    with pytest.raises(DegenerateVectorError):
        Quat(0.0, 0.0, 0.0, 0.0).normalized()

def test_conjugate_and_inverse():
    q = Quat(1.0, 2.0, 3.0, 4.0)
    assert q.conjugate() == Quat(-1.0, -2.0, -3.0, 4.0)
    assert (q * q.inverse()).is_close(Quat.identity(), abs_tol=1e-12)
    assert (q.inverse() * q).is_close(Quat.identity(), abs_tol=1e-12)

def test_inverse_zero_raises():
    with pytest.raises(DegenerateVectorError):
        Quat(0.0, 0.0, 0.0, 0.0).inverse()

def test_dot_and_length():
    q = Quat(1.0, 2.0, 2.0, 4.0)
    assert q.length_squared() == 25.0
    assert q.length() == 5.0
    assert q.dot(Quat.identity()) == 4.0

def test_slerp_endpoints_and_midpoint():
    a = Quat.identity()
    b = Quat.from_axis_angle(Vec3.unit_z(), math.pi / 2)
    assert a.slerp(b, 0.0).is_close(a, abs_tol=1e-12)
    assert a.slerp(b, 1.0).is_close(b, abs_tol=1e-12)
    mid = a.slerp(b, 0.5)
    assert mid.is_close(Quat.from_axis_angle(Vec3.unit_z(), math.pi / 4), abs_tol=1e-12)

def test_slerp_takes_short_path():
    a = Quat.from_axis_angle(Vec3.unit_z(), 0.2)
    b = -Quat.from_axis_angle(Vec3.unit_z(), 0.4)
    mid = a.slerp(b, 0.5)
    assert same_rotation(mid, Quat.from_axis_angle(Vec3.unit_z(), 0.3))

def test_slerp_nearly_parallel_falls_back_to_lerp():
    a = Quat.from_axis_angle(Vec3.unit_x(), 0.5)
    assert a.slerp(a, 0.5).is_close(a, abs_tol=1e-12)

def test_lerp_is_normalized():
    a = Quat.identity()
    b = Quat.from_axis_angle(Vec3.unit_y(), 1.0)
    r = a.lerp(b, 0.3)
    assert r.is_normalized()
    assert a.lerp(b, 0.0).is_close(a, abs_tol=1e-12)

def test_to_mat4_matches_vector_rotation():
    q = Quat.from_yaw_pitch_roll(0.3, -0.4, 1.2)
    v = Vec3(1.0, -2.0, 0.5)
    assert v.transform(q.to_mat4()).is_close(q.rotate(v), abs_tol=1e-9)

@pytest.mark.parametrize("axis, angle", [
    (Vec3(1.0, 2.0, 3.0), 0.7),     # trace > 0
    (Vec3.unit_x(), 3.0),           # m11 dominant
    (Vec3.unit_y(), 3.0),           # m22 dominant
    (Vec3.unit_z(), 3.0),           # m33 dominant
])
def test_rotation_matrix_roundtrip(axis, angle):
    q = Quat.from_axis_angle(axis, angle)
    recovered = Quat.from_rotation_matrix(q.to_mat4())
    assert same_rotation(recovered, q)

def test_from_rotation_matrix_identity():
    assert same_rotation(Quat.from_rotation_matrix(Mat4.identity()), Quat.identity())

def test_to_axis_angle():
    axis, angle = Quat.from_axis_angle(Vec3(0.0, 0.0, 2.0), 1.0).to_axis_angle()
    assert abs(angle - 1.0) < 1e-12
    assert Vec3(*axis).is_close(Vec3.unit_z(), abs_tol=1e-12)

    axis, angle = Quat.identity().to_axis_angle()
    assert angle == 0.0
    assert axis == (1.0, 0.0, 0.0)

def test_equality_and_hash():
    assert Quat(1.0, 2.0, 3.0, 4.0) == Quat(1, 2, 3, 4)
    assert Quat(1.0, 2.0, 3.0, 4.0) != Quat(1.0, 2.0, 3.0, 5.0)
    assert len({Quat(), Quat.identity(), Quat(0.0, 0.0, 0.0, -1.0)}) == 2

def test_nan_is_never_equal():
    q = Quat(float("nan"), 0.0, 0.0, 1.0)
    assert q != q

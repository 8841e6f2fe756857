import dataclasses

import pytest

from geomkernel.core.quaternion import Quat
from geomkernel.core.transform import Transform
from geomkernel.core.vector import Vec3


def make_transform():
    return Transform(
        position=Vec3(1.0, 2.0, 3.0),
        rotation=Quat.from_axis_angle(Vec3(0.0, 1.0, 1.0), 0.8),
        scale=Vec3(2.0, 0.5, 3.0),
    )


def test_defaults():
    t = Transform()
    assert t == Transform.identity()
    assert t.position == Vec3.zero()
    assert t.rotation == Quat.identity()
    assert t.scale == Vec3.one()
    assert t.to_mat4().is_identity()

def test_frozen():
    t = Transform()
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.position = Vec3.one()

def test_transform_point_matches_matrix():
    t = make_transform()
    p = Vec3(0.3, -1.0, 2.0)
    assert t.transform_point(p).is_close(p.transform(t.to_mat4()), abs_tol=1e-9)

def test_transform_direction_matches_matrix():
    t = make_transform()
    d = Vec3(0.0, 1.0, -4.0)
    assert t.transform_direction(d).is_close(d.transform_normal(t.to_mat4()), abs_tol=1e-9)

def test_direction_ignores_position():
    t = Transform(position=Vec3(5.0, 5.0, 5.0))
    assert t.transform_direction(Vec3.unit_x()) == Vec3.unit_x()
    assert t.transform_point(Vec3.unit_x()) == Vec3(6.0, 5.0, 5.0)

def test_scale_applies_before_rotation():
    t = Transform(rotation=Quat.from_axis_angle(Vec3.unit_z(), 1.5707963267948966),
                  scale=Vec3(2.0, 1.0, 1.0))
    # x is stretched, then turned onto y
    assert t.transform_point(Vec3.unit_x()).is_close(Vec3(0.0, 2.0, 0.0), abs_tol=1e-12)

def test_lerp_endpoints():
    a = Transform()
    b = make_transform()
    start = a.lerp(b, 0.0)
    end = a.lerp(b, 1.0)
    assert start.position == a.position
    assert start.scale == a.scale
    assert start.rotation.is_close(a.rotation, abs_tol=1e-12)
    assert end.position == b.position
    assert end.scale == b.scale
    assert end.rotation.is_close(b.rotation, abs_tol=1e-12)

def test_lerp_midpoint():
    a = Transform(position=Vec3.zero(), scale=Vec3.one())
    b = Transform(position=Vec3(2.0, 4.0, 6.0), scale=Vec3(3.0, 3.0, 3.0))
    mid = a.lerp(b, 0.5)
    assert mid.position == Vec3(1.0, 2.0, 3.0)
    assert mid.scale == Vec3(2.0, 2.0, 2.0)
    assert mid.rotation.is_close(Quat.identity())

# geomkernel/core/transform.py
"""
Position / rotation / scale record.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .matrix import Mat4
from .quaternion import Quat
from .vector import Vec3


@dataclass(frozen=True)
class Transform:
    """Combined position, rotation, scale. Applied as scale, then rotation, then translation."""
    position: Vec3 = field(default_factory=Vec3.zero)
    rotation: Quat = field(default_factory=Quat.identity)
    scale: Vec3 = field(default_factory=Vec3.one)

    @staticmethod
    def identity() -> Transform:
        return Transform()

    def to_mat4(self) -> Mat4:
        s = Mat4.scale(self.scale.x, self.scale.y, self.scale.z)
        r = self.rotation.to_mat4()
        t = Mat4.translation_vec(self.position)
        return s @ r @ t

    def transform_point(self, point: Vec3) -> Vec3:
        scaled = point * self.scale
        return scaled.transform(self.rotation) + self.position

    def transform_direction(self, direction: Vec3) -> Vec3:
        return (direction * self.scale).transform(self.rotation)

    def lerp(self, other: Transform, t: float) -> Transform:
        return Transform(
            position=self.position.lerp(other.position, t),
            rotation=self.rotation.slerp(other.rotation, t),
            scale=self.scale.lerp(other.scale, t)
        )

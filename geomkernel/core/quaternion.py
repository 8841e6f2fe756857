# geomkernel/core/quaternion.py
"""
Quaternion value type.

Quaternions are rotations only when unit length; nothing here enforces that,
so normalize before handing one to a vector transform.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Iterator, Sequence, Tuple

from . import vector_ops
from .config import DEFAULT_TOLERANCES
from .errors import ArityMismatchError, DegenerateVectorError, MissingInputError
from .matrix import Mat4

if TYPE_CHECKING:
    from .vector import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Quat:
    """Quaternion for rotations."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    # keep numpy scalars from broadcasting over us in binary operators
    __array_ufunc__ = None

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_array(cls, values: Sequence[float]) -> Quat:
        if values is None:
            raise MissingInputError(cls.__name__)
        if len(values) != 4:
            raise ArityMismatchError(cls.__name__, 4, len(values))
        return cls(float(values[0]), float(values[1]), float(values[2]), float(values[3]))

    @staticmethod
    def identity() -> Quat:
        return Quat(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        """Rotation of `angle` radians about `axis` (normalized here)."""
        ax, ay, az = vector_ops.normalize(axis.to_tuple())
        half = angle / 2.0
        s = math.sin(half)
        return Quat(ax * s, ay * s, az * s, math.cos(half))

    @staticmethod
    def from_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Quat:
        """Yaw about Y, pitch about X, roll about Z (radians)."""
        sr = math.sin(roll * 0.5); cr = math.cos(roll * 0.5)
        sp = math.sin(pitch * 0.5); cp = math.cos(pitch * 0.5)
        sy = math.sin(yaw * 0.5); cy = math.cos(yaw * 0.5)

        return Quat(
            cy*sp*cr + sy*cp*sr,
            sy*cp*cr - cy*sp*sr,
            cy*cp*sr - sy*sp*cr,
            cy*cp*cr + sy*sp*sr
        )

    @staticmethod
    def from_rotation_matrix(m: Mat4) -> Quat:
        """Extract the rotation from the upper 3x3 of a row-vector matrix."""
        m11, m12, m13 = m.m11, m.m12, m.m13
        m21, m22, m23 = m.m21, m.m22, m.m23
        m31, m32, m33 = m.m31, m.m32, m.m33

        trace = m11 + m22 + m33
        if trace > 0.0:
            s = math.sqrt(trace + 1.0)
            inv = 0.5 / s
            return Quat((m23 - m32) * inv, (m31 - m13) * inv, (m12 - m21) * inv, s * 0.5)
        if m11 >= m22 and m11 >= m33:
            s = math.sqrt(1.0 + m11 - m22 - m33)
            inv = 0.5 / s
            return Quat(0.5 * s, (m12 + m21) * inv, (m13 + m31) * inv, (m23 - m32) * inv)
        if m22 > m33:
            s = math.sqrt(1.0 + m22 - m11 - m33)
            inv = 0.5 / s
            return Quat((m21 + m12) * inv, 0.5 * s, (m32 + m23) * inv, (m31 - m13) * inv)
        s = math.sqrt(1.0 + m33 - m11 - m22)
        inv = 0.5 / s
        return Quat((m31 + m13) * inv, (m32 + m23) * inv, 0.5 * s, (m12 - m21) * inv)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(*vector_ops.add(self.to_tuple(), other.to_tuple()))

    def __sub__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(*vector_ops.sub(self.to_tuple(), other.to_tuple()))

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        """Hamilton product with a Quat (self applied after other), or scale by a real."""
        if isinstance(other, Quat):
            return Quat(
                self.w*other.x + self.x*other.w + self.y*other.z - self.z*other.y,
                self.w*other.y - self.x*other.z + self.y*other.w + self.z*other.x,
                self.w*other.z + self.x*other.y - self.y*other.x + self.z*other.w,
                self.w*other.w - self.x*other.x - self.y*other.y - self.z*other.z
            )
        if isinstance(other, Real):
            return Quat(*vector_ops.scale(self.to_tuple(), other))
        return NotImplemented

    def __rmul__(self, scalar: float) -> Quat:
        if isinstance(scalar, Real):
            return Quat(*vector_ops.scale(self.to_tuple(), scalar))
        return NotImplemented

    def __truediv__(self, scalar: float) -> Quat:
        if isinstance(scalar, Real):
            return Quat(*vector_ops.div_scalar(self.to_tuple(), scalar))
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return vector_ops.equal(self.to_tuple(), other.to_tuple())

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def length(self) -> float:
        return vector_ops.length(self.to_tuple())

    def length_squared(self) -> float:
        return vector_ops.length_squared(self.to_tuple())

    def dot(self, other: Quat) -> float:
        return vector_ops.dot(self.to_tuple(), other.to_tuple())

    def normalized(self) -> Quat:
        return Quat(*vector_ops.normalize(self.to_tuple()))

    def is_normalized(self, eps: float = DEFAULT_TOLERANCES.unit) -> bool:
        return vector_ops.is_unit(self.to_tuple(), eps)

    def inverse(self) -> Quat:
        ln_sq = self.length_squared()
        if ln_sq == 0.0:
            raise DegenerateVectorError("cannot invert a zero-length quaternion")
        return self.conjugate() / ln_sq

    def is_close(self, other: Quat, **tolerances) -> bool:
        return vector_ops.is_close(self.to_tuple(), other.to_tuple(), **tolerances)

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def lerp(self, other: Quat, t: float) -> Quat:
        """Normalized linear blend along the shorter arc."""
        if self.dot(other) < 0.0:
            other = -other
        return Quat(*vector_ops.lerp(self.to_tuple(), other.to_tuple(), t)).normalized()

    def slerp(self, other: Quat, t: float,
              linear_threshold: float = DEFAULT_TOLERANCES.slerp_linear_threshold) -> Quat:
        dot = self.dot(other)

        if dot < 0.0:
            other = -other
            dot = -dot

        if dot > linear_threshold:
            logger.debug("slerp: nearly parallel (dot=%r), using normalized lerp", dot)
            return Quat(*vector_ops.lerp(self.to_tuple(), other.to_tuple(), t)).normalized()

        theta = math.acos(dot)
        sin_theta = math.sin(theta)

        s0 = math.sin((1-t)*theta) / sin_theta
        s1 = math.sin(t*theta) / sin_theta

        return Quat(
            s0*self.x + s1*other.x,
            s0*self.y + s1*other.y,
            s0*self.z + s1*other.z,
            s0*self.w + s1*other.w
        )

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def rotate(self, v):
        """Rotate a vector; same as v.transform(self)."""
        return v.transform(self)

    def to_mat4(self) -> Mat4:
        return Mat4.from_quaternion(self)

    def to_axis_angle(self) -> Tuple[Tuple[float, float, float], float]:
        """Unit axis and angle in radians. Identity yields the X axis and 0."""
        q = self.normalized()
        w = max(-1.0, min(1.0, q.w))
        angle = 2.0 * math.acos(w)
        s = math.sqrt(1.0 - w * w)
        if s == 0.0:
            return (1.0, 0.0, 0.0), angle
        return (q.x / s, q.y / s, q.z / s), angle

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

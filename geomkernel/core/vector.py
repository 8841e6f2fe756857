# geomkernel/core/vector.py
"""
Vector value types: Vec2, Vec3, Vec4.

The three types are separate frozen dataclasses; none inherits from another.
They share the `_VectorMixin` operator trait, which routes every formula
through `vector_ops` so no algorithm is written once per arity. Equality and
hashing both run over `to_tuple()`; equality is plain float `==` per component,
so a vector holding NaN is not equal to itself.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence, Tuple, TypeVar, Union

from . import vector_ops
from .config import DEFAULT_TOLERANCES
from .errors import ArityMismatchError, DegenerateVectorError, MissingInputError
from .matrix import Mat4
from .quaternion import Quat

V = TypeVar("V", bound="_VectorMixin")


# =============================================================================
# Shared Operator Trait
# =============================================================================

class _VectorMixin:
    """Operators and geometry common to every arity."""

    __slots__ = ()

    # keep numpy scalars from broadcasting over us in binary operators
    __array_ufunc__ = None

    _ARITY = 0

    def to_tuple(self) -> Tuple[float, ...]:
        raise NotImplementedError

    def _peer(self, other) -> Tuple[float, ...]:
        """Components of `other`, which must be the same vector type as self."""
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return other.to_tuple()

    @classmethod
    def from_array(cls, values: Sequence[float]):
        """Build from a sequence holding exactly one value per component."""
        if values is None:
            raise MissingInputError(cls.__name__)
        if len(values) != cls._ARITY:
            raise ArityMismatchError(cls.__name__, cls._ARITY, len(values))
        return cls(*(float(v) for v in values))

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return self._ARITY

    def __getitem__(self, index: int) -> float:
        return self.to_tuple()[index]

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vector_ops.equal(self.to_tuple(), other.to_tuple())

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*vector_ops.add(self.to_tuple(), other.to_tuple()))

    def __sub__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*vector_ops.sub(self.to_tuple(), other.to_tuple()))

    def __neg__(self: V) -> V:
        return type(self)(*vector_ops.neg(self.to_tuple()))

    def __mul__(self: V, other: Union[V, float]) -> V:
        if type(other) is type(self):
            return type(self)(*vector_ops.mul(self.to_tuple(), other.to_tuple()))
        if isinstance(other, Real):
            return type(self)(*vector_ops.scale(self.to_tuple(), other))
        return NotImplemented

    def __rmul__(self: V, scalar: float) -> V:
        if isinstance(scalar, Real):
            return type(self)(*vector_ops.scale(self.to_tuple(), scalar))
        return NotImplemented

    def __truediv__(self: V, other: Union[V, float]) -> V:
        if type(other) is type(self):
            return type(self)(*vector_ops.div(self.to_tuple(), other.to_tuple()))
        if isinstance(other, Real):
            return type(self)(*vector_ops.div_scalar(self.to_tuple(), other))
        return NotImplemented

    def __matmul__(self: V, matrix: Mat4) -> V:
        if not isinstance(matrix, Mat4):
            return NotImplemented
        return self.transform(matrix)

    # -------------------------------------------------------------------------
    # Metrics
    # -------------------------------------------------------------------------

    def length(self) -> float:
        return vector_ops.length(self.to_tuple())

    def length_squared(self) -> float:
        return vector_ops.length_squared(self.to_tuple())

    def normalized(self: V) -> V:
        """Unit vector in the same direction; DegenerateVectorError if zero."""
        return type(self)(*vector_ops.normalize(self.to_tuple()))

    def is_normalized(self, eps: float = DEFAULT_TOLERANCES.unit) -> bool:
        return vector_ops.is_unit(self.to_tuple(), eps)

    def dot(self: V, other: V) -> float:
        return vector_ops.dot(self.to_tuple(), self._peer(other))

    def distance(self: V, other: V) -> float:
        return vector_ops.distance(self.to_tuple(), self._peer(other))

    def distance_squared(self: V, other: V) -> float:
        return vector_ops.distance_squared(self.to_tuple(), self._peer(other))

    def is_close(self: V, other: V,
                 rel_tol: float = DEFAULT_TOLERANCES.close_rel,
                 abs_tol: float = DEFAULT_TOLERANCES.close_abs) -> bool:
        return vector_ops.is_close(self.to_tuple(), self._peer(other), rel_tol, abs_tol)

    # -------------------------------------------------------------------------
    # Range / Selection
    # -------------------------------------------------------------------------

    def clamp(self: V, lo: V, hi: V) -> V:
        """Per component: clamp to hi, then to lo."""
        return type(self)(*vector_ops.clamp(self.to_tuple(), self._peer(lo), self._peer(hi)))

    def minimum(self: V, other: V) -> V:
        return type(self)(*vector_ops.minimum(self.to_tuple(), self._peer(other)))

    def maximum(self: V, other: V) -> V:
        return type(self)(*vector_ops.maximum(self.to_tuple(), self._peer(other)))

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def lerp(self: V, end: V, amount: float) -> V:
        """Unclamped; amounts outside [0, 1] extrapolate."""
        return type(self)(*vector_ops.lerp(self.to_tuple(), self._peer(end), amount))

    def smoothstep(self: V, end: V, amount: float) -> V:
        return type(self)(*vector_ops.smoothstep(self.to_tuple(), self._peer(end), amount))

    def hermite(self: V, tangent1: V, value2: V, tangent2: V, amount: float) -> V:
        """Hermite spline from self (with tangent1) to value2 (with tangent2)."""
        return type(self)(*vector_ops.hermite(
            self.to_tuple(), self._peer(tangent1),
            self._peer(value2), self._peer(tangent2), amount
        ))

    def catmull_rom(self: V, value2: V, value3: V, value4: V, amount: float) -> V:
        """Catmull-Rom through value2 (amount=0) and value3 (amount=1); self is the lead-in point."""
        return type(self)(*vector_ops.catmull_rom(
            self.to_tuple(), self._peer(value2),
            self._peer(value3), self._peer(value4), amount
        ))

    def barycentric(self: V, value2: V, value3: V, amount1: float, amount2: float) -> V:
        """Point of triangle (self, value2, value3) with weights amount1 on value2, amount2 on value3."""
        return type(self)(*vector_ops.barycentric(
            self.to_tuple(), self._peer(value2), self._peer(value3), amount1, amount2
        ))

    # -------------------------------------------------------------------------
    # Optics
    # -------------------------------------------------------------------------

    def reflect(self: V, normal: V) -> V:
        return type(self)(*vector_ops.reflect(self.to_tuple(), self._peer(normal)))

    def refract(self: V, normal: V, index: float) -> V:
        """Refracted direction, or the zero vector on total internal reflection."""
        return type(self)(*vector_ops.refract(self.to_tuple(), self._peer(normal), index))


# =============================================================================
# Vector Types
# =============================================================================

@dataclass(frozen=True, eq=False)
class Vec2(_VectorMixin):
    """2D vector."""
    x: float = 0.0
    y: float = 0.0

    _ARITY = 2

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_vec3(self, z: float) -> Vec3:
        return Vec3(self.x, self.y, z)

    def transform(self, by: Union[Quat, Mat4]) -> Vec2:
        """Rotate (x, y, 0) by a quaternion, or map the point (x, y, 0, 1) through a matrix."""
        if isinstance(by, Quat):
            x, y, _ = vector_ops.rotate((self.x, self.y, 0.0), by.to_tuple())
        elif isinstance(by, Mat4):
            x, y, _, _ = vector_ops.mul_row((self.x, self.y, 0.0, 1.0), by.m)
        else:
            raise TypeError(f"Cannot transform Vec2 by {type(by).__name__}")
        return Vec2(x, y)

    def transform_normal(self, matrix: Mat4) -> Vec2:
        """Map the direction (x, y, 0, 0); translation does not apply."""
        x, y, _, _ = vector_ops.mul_row((self.x, self.y, 0.0, 0.0), matrix.m)
        return Vec2(x, y)

    @staticmethod
    def zero() -> Vec2:
        return Vec2(0.0, 0.0)

    @staticmethod
    def one() -> Vec2:
        return Vec2(1.0, 1.0)

    @staticmethod
    def unit_x() -> Vec2:
        return Vec2(1.0, 0.0)

    @staticmethod
    def unit_y() -> Vec2:
        return Vec2(0.0, 1.0)


@dataclass(frozen=True, eq=False)
class Vec3(_VectorMixin):
    """3D vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _ARITY = 3

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def cross(self, other: Vec3) -> Vec3:
        ox, oy, oz = self._peer(other)
        return Vec3(
            self.y * oz - self.z * oy,
            self.z * ox - self.x * oz,
            self.x * oy - self.y * ox
        )

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_vec4(self, w: float) -> Vec4:
        return Vec4(self.x, self.y, self.z, w)

    @staticmethod
    def from_vec2(v: Vec2, z: float) -> Vec3:
        return Vec3(v.x, v.y, z)

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def transform(self, by: Union[Quat, Mat4]) -> Vec3:
        """Rotate by a quaternion, or map as a point (w = 1) through a matrix."""
        if isinstance(by, Quat):
            return Vec3(*vector_ops.rotate(self.to_tuple(), by.to_tuple()))
        if isinstance(by, Mat4):
            x, y, z, _ = vector_ops.mul_row((self.x, self.y, self.z, 1.0), by.m)
            return Vec3(x, y, z)
        raise TypeError(f"Cannot transform Vec3 by {type(by).__name__}")

    def transform_normal(self, matrix: Mat4) -> Vec3:
        """Map as a direction (w = 0); translation does not apply."""
        x, y, z, _ = vector_ops.mul_row((self.x, self.y, self.z, 0.0), matrix.m)
        return Vec3(x, y, z)

    def transform_coordinate(self, matrix: Mat4) -> Vec3:
        """Map as a point (w = 1), then divide by the resulting w."""
        return self.to_vec4(1.0).transform(matrix).perspective_divide()

    # -------------------------------------------------------------------------
    # Constants
    # -------------------------------------------------------------------------

    @staticmethod
    def zero() -> Vec3:
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> Vec3:
        return Vec3(1.0, 1.0, 1.0)

    @staticmethod
    def unit_x() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def unit_z() -> Vec3:
        return Vec3(0.0, 0.0, 1.0)

    @staticmethod
    def up() -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def down() -> Vec3:
        return Vec3(0.0, -1.0, 0.0)

    @staticmethod
    def left() -> Vec3:
        return Vec3(-1.0, 0.0, 0.0)

    @staticmethod
    def right() -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def forward() -> Vec3:
        return Vec3(0.0, 0.0, 1.0)

    @staticmethod
    def back() -> Vec3:
        return Vec3(0.0, 0.0, -1.0)


@dataclass(frozen=True, eq=False)
class Vec4(_VectorMixin):
    """4D vector for homogeneous coordinates."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _ARITY = 4

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_vec3(self) -> Vec3:
        """Drop w."""
        return Vec3(self.x, self.y, self.z)

    def perspective_divide(self) -> Vec3:
        if self.w == 0.0:
            raise DegenerateVectorError("cannot divide by w == 0")
        return Vec3(self.x / self.w, self.y / self.w, self.z / self.w)

    @staticmethod
    def from_vec3(v: Vec3, w: float) -> Vec4:
        return Vec4(v.x, v.y, v.z, w)

    @staticmethod
    def point(x: float, y: float, z: float) -> Vec4:
        """Create a point (w=1)."""
        return Vec4(x, y, z, 1.0)

    @staticmethod
    def direction(x: float, y: float, z: float) -> Vec4:
        """Create a direction vector (w=0)."""
        return Vec4(x, y, z, 0.0)

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def transform(self, by: Union[Quat, Mat4]) -> Vec4:
        """Rotate x, y, z by a quaternion (w unchanged), or multiply by a matrix."""
        if isinstance(by, Quat):
            x, y, z = vector_ops.rotate((self.x, self.y, self.z), by.to_tuple())
            return Vec4(x, y, z, self.w)
        if isinstance(by, Mat4):
            return Vec4(*vector_ops.mul_row(self.to_tuple(), by.m))
        raise TypeError(f"Cannot transform Vec4 by {type(by).__name__}")

    # -------------------------------------------------------------------------
    # Constants
    # -------------------------------------------------------------------------

    @staticmethod
    def zero() -> Vec4:
        return Vec4(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def one() -> Vec4:
        return Vec4(1.0, 1.0, 1.0, 1.0)

    @staticmethod
    def unit_x() -> Vec4:
        return Vec4(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def unit_y() -> Vec4:
        return Vec4(0.0, 1.0, 0.0, 0.0)

    @staticmethod
    def unit_z() -> Vec4:
        return Vec4(0.0, 0.0, 1.0, 0.0)

    @staticmethod
    def unit_w() -> Vec4:
        return Vec4(0.0, 0.0, 0.0, 1.0)

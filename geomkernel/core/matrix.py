# geomkernel/core/matrix.py
"""
4x4 matrix for 3D transforms.

Row-major storage with the row-vector convention: a vector transforms as
v' = v * M, translation lives in m41..m43, and `a @ b` applies `a` first.
Because of that, the flat coefficient tuple is already laid out the way
OpenGL expects a column-vector matrix, so it uploads without transposing.
"""

from __future__ import annotations
import logging
import math
from numbers import Real
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from . import vector_ops
from .config import DEFAULT_TOLERANCES
from .errors import ArityMismatchError, InvalidArgumentError, MissingInputError, SingularMatrixError

if TYPE_CHECKING:
    from .quaternion import Quat
    from .vector import Vec3

logger = logging.getLogger(__name__)

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0
)


class Mat4:
    """4x4 matrix; coefficients are m11..m44 (one-based) or m[row, col] (zero-based)."""

    __slots__ = ('m',)

    # keep numpy scalars from broadcasting over us in binary operators
    __array_ufunc__ = None

    def __init__(self, values: Optional[Sequence[float]] = None):
        """Initialize with 16 row-major values or identity."""
        if values is None:
            self.m = _IDENTITY
        else:
            if len(values) != 16:
                raise ArityMismatchError(type(self).__name__, 16, len(values))
            self.m = tuple(float(v) for v in values)

    @classmethod
    def from_array(cls, values) -> Mat4:
        """Build from 16 flat values or 4 rows of 4."""
        if values is None:
            raise MissingInputError(cls.__name__)
        if len(values) == 4 and all(_is_sequence(row) for row in values):
            rows = list(values)
            for row in rows:
                if len(row) != 4:
                    raise ArityMismatchError(cls.__name__ + " row", 4, len(row))
            return cls([v for row in rows for v in row])
        return cls(values)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def __getitem__(self, idx: Tuple[int, int]) -> float:
        row, col = idx
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"Mat4 index {idx} out of range")
        return self.m[row * 4 + col]

    def row(self, index: int) -> Tuple[float, float, float, float]:
        return self.m[index * 4:index * 4 + 4]

    def column(self, index: int) -> Tuple[float, float, float, float]:
        return self.m[index::4]

    def to_tuple(self) -> Tuple[float, ...]:
        return self.m

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return vector_ops.equal(self.m, other.m)

    def __hash__(self) -> int:
        return hash(self.m)

    def __repr__(self) -> str:
        rows = ", ".join(
            "(" + ", ".join(repr(v) for v in self.row(r)) + ")" for r in range(4)
        )
        return f"Mat4({rows})"

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        a = self.m
        b = other.m
        result = []
        for row in range(4):
            for col in range(4):
                result.append(
                    a[row*4]*b[col] + a[row*4 + 1]*b[4 + col] +
                    a[row*4 + 2]*b[8 + col] + a[row*4 + 3]*b[12 + col]
                )
        return Mat4(result)

    def __add__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(vector_ops.add(self.m, other.m))

    def __sub__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        return Mat4(vector_ops.sub(self.m, other.m))

    def __neg__(self) -> Mat4:
        return Mat4(vector_ops.neg(self.m))

    def __mul__(self, scalar: float) -> Mat4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Mat4(vector_ops.scale(self.m, scalar))

    def __rmul__(self, scalar: float) -> Mat4:
        return self.__mul__(scalar)

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def transpose(self) -> Mat4:
        return Mat4(tuple(
            self[col, row]
            for row in range(4)
            for col in range(4)
        ))

    def _cofactors(self):
        (a, b, c, d,
         e, f, g, h,
         i, j, k, l,
         m, n, o, p) = self.m

        kp_lo = k*p - l*o
        jp_ln = j*p - l*n
        jo_kn = j*o - k*n
        ip_lm = i*p - l*m
        io_km = i*o - k*m
        in_jm = i*n - j*m

        a11 = +(f*kp_lo - g*jp_ln + h*jo_kn)
        a12 = -(e*kp_lo - g*ip_lm + h*io_km)
        a13 = +(e*jp_ln - f*ip_lm + h*in_jm)
        a14 = -(e*jo_kn - f*io_km + g*in_jm)

        det = a*a11 + b*a12 + c*a13 + d*a14
        return det, (a11, a12, a13, a14), (kp_lo, jp_ln, jo_kn, ip_lm, io_km, in_jm)

    def determinant(self) -> float:
        return self._cofactors()[0]

    def inverse(self, eps: float = DEFAULT_TOLERANCES.singular) -> Mat4:
        """Inverse matrix; raises SingularMatrixError when |det| <= eps."""
        det, (a11, a12, a13, a14), minors = self._cofactors()
        if abs(det) <= eps:
            logger.debug("inverse: singular matrix, det=%r eps=%r", det, eps)
            raise SingularMatrixError(det)
        kp_lo, jp_ln, jo_kn, ip_lm, io_km, in_jm = minors

        (a, b, c, d,
         e, f, g, h,
         i, j, k, l,
         m, n, o, p) = self.m
        inv_det = 1.0 / det

        gp_ho = g*p - h*o
        fp_hn = f*p - h*n
        fo_gn = f*o - g*n
        ep_hm = e*p - h*m
        eo_gm = e*o - g*m
        en_fm = e*n - f*m

        gl_hk = g*l - h*k
        fl_hj = f*l - h*j
        fk_gj = f*k - g*j
        el_hi = e*l - h*i
        ek_gi = e*k - g*i
        ej_fi = e*j - f*i

        return Mat4((
            a11 * inv_det,
            -(b*kp_lo - c*jp_ln + d*jo_kn) * inv_det,
            +(b*gp_ho - c*fp_hn + d*fo_gn) * inv_det,
            -(b*gl_hk - c*fl_hj + d*fk_gj) * inv_det,

            a12 * inv_det,
            +(a*kp_lo - c*ip_lm + d*io_km) * inv_det,
            -(a*gp_ho - c*ep_hm + d*eo_gm) * inv_det,
            +(a*gl_hk - c*el_hi + d*ek_gi) * inv_det,

            a13 * inv_det,
            -(a*jp_ln - b*ip_lm + d*in_jm) * inv_det,
            +(a*fp_hn - b*ep_hm + d*en_fm) * inv_det,
            -(a*fl_hj - b*el_hi + d*ej_fi) * inv_det,

            a14 * inv_det,
            +(a*jo_kn - b*io_km + c*in_jm) * inv_det,
            -(a*fo_gn - b*eo_gm + c*en_fm) * inv_det,
            +(a*fk_gj - b*ek_gi + c*ej_fi) * inv_det,
        ))

    def is_identity(self) -> bool:
        return self.m == _IDENTITY

    def is_close(self, other: Mat4, **tolerances) -> bool:
        return vector_ops.is_close(self.m, other.m, **tolerances)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @staticmethod
    def identity() -> Mat4:
        return Mat4()

    @staticmethod
    def zero() -> Mat4:
        return Mat4((0.0,) * 16)

    @staticmethod
    def translation(tx: float, ty: float, tz: float) -> Mat4:
        return Mat4((
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            tx,  ty,  tz,  1.0
        ))

    @staticmethod
    def translation_vec(v: Vec3) -> Mat4:
        return Mat4.translation(v.x, v.y, v.z)

    @staticmethod
    def scale(sx: float, sy: float = None, sz: float = None) -> Mat4:
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        return Mat4((
            sx,  0.0, 0.0, 0.0,
            0.0, sy,  0.0, 0.0,
            0.0, 0.0, sz,  0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def rotation_x(angle: float) -> Mat4:
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4((
            1.0, 0.0, 0.0, 0.0,
            0.0, c,   s,   0.0,
            0.0, -s,  c,   0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def rotation_y(angle: float) -> Mat4:
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4((
            c,   0.0, -s,  0.0,
            0.0, 1.0, 0.0, 0.0,
            s,   0.0, c,   0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def rotation_z(angle: float) -> Mat4:
        c = math.cos(angle)
        s = math.sin(angle)
        return Mat4((
            c,   s,   0.0, 0.0,
            -s,  c,   0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0
        ))

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Mat4:
        x, y, z = vector_ops.normalize(axis.to_tuple())
        c = math.cos(angle)
        s = math.sin(angle)
        t = 1.0 - c

        return Mat4((
            t*x*x + c,    t*x*y + s*z,  t*x*z - s*y,  0.0,
            t*x*y - s*z,  t*y*y + c,    t*y*z + s*x,  0.0,
            t*x*z + s*y,  t*y*z - s*x,  t*z*z + c,    0.0,
            0.0,          0.0,          0.0,          1.0
        ))

    @staticmethod
    def from_quaternion(q: Quat) -> Mat4:
        x, y, z, w = q.x, q.y, q.z, q.w

        xx = x*x; yy = y*y; zz = z*z
        xy = x*y; xz = x*z; yz = y*z
        wx = w*x; wy = w*y; wz = w*z

        return Mat4((
            1-2*(yy+zz),  2*(xy+wz),    2*(xz-wy),    0.0,
            2*(xy-wz),    1-2*(xx+zz),  2*(yz+wx),    0.0,
            2*(xz+wy),    2*(yz-wx),    1-2*(xx+yy),  0.0,
            0.0,          0.0,          0.0,          1.0
        ))

    @staticmethod
    def look_at(eye: Vec3, target: Vec3, up: Vec3 = None) -> Mat4:
        """Right-handed view matrix; the camera looks down its local -Z."""
        e = eye.to_tuple()
        up_t = (0.0, 1.0, 0.0) if up is None else up.to_tuple()

        zaxis = vector_ops.normalize(vector_ops.sub(e, target.to_tuple()))
        xaxis = vector_ops.normalize(_cross(up_t, zaxis))
        yaxis = _cross(zaxis, xaxis)

        return Mat4((
            xaxis[0], yaxis[0], zaxis[0], 0.0,
            xaxis[1], yaxis[1], zaxis[1], 0.0,
            xaxis[2], yaxis[2], zaxis[2], 0.0,
            -vector_ops.dot(xaxis, e), -vector_ops.dot(yaxis, e), -vector_ops.dot(zaxis, e), 1.0
        ))

    @staticmethod
    def orthographic(left: float, right: float, bottom: float, top: float,
                     near: float, far: float) -> Mat4:
        """OpenGL-style clip space (z in [-1, 1])."""
        dx = right - left
        dy = top - bottom
        dz = far - near
        if dx == 0 or dy == 0 or dz == 0:
            raise InvalidArgumentError("orthographic volume has zero extent")

        return Mat4((
            2.0/dx,            0.0,               0.0,             0.0,
            0.0,               2.0/dy,            0.0,             0.0,
            0.0,               0.0,               -2.0/dz,         0.0,
            -(right+left)/dx,  -(top+bottom)/dy,  -(far+near)/dz,  1.0
        ))

    @staticmethod
    def perspective_fov(fov_y: float, aspect: float, near: float, far: float) -> Mat4:
        """OpenGL-style clip space (z in [-1, 1]); fov_y in radians."""
        if not 0.0 < fov_y < math.pi:
            raise InvalidArgumentError(f"fov_y must be in (0, pi), got {fov_y}")
        if aspect == 0:
            raise InvalidArgumentError("aspect must be non-zero")
        if near <= 0.0 or far <= near:
            raise InvalidArgumentError(f"need 0 < near < far, got near={near} far={far}")

        f = 1.0 / math.tan(fov_y / 2.0)
        dz = near - far

        return Mat4((
            f/aspect, 0.0, 0.0,                0.0,
            0.0,      f,   0.0,                0.0,
            0.0,      0.0, (far+near)/dz,      -1.0,
            0.0,      0.0, 2.0*far*near/dz,    0.0
        ))


def _coefficient(index: int) -> property:
    return property(lambda self: self.m[index])


for _row in range(4):
    for _col in range(4):
        setattr(Mat4, f"m{_row + 1}{_col + 1}", _coefficient(_row * 4 + _col))
del _row, _col


def _cross(a: Sequence[float], b: Sequence[float]) -> Tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0]
    )


def _is_sequence(value) -> bool:
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")

# geomkernel/core/vector_ops.py
"""
Component-tuple algorithms shared by Vec2, Vec3 and Vec4.

Each function takes and returns plain tuples of floats, so the three vector
types keep a single implementation of every formula. Arity is never checked
here; callers pass tuples of matching length.
"""

from __future__ import annotations
import logging
import math
from typing import Sequence, Tuple

from . import scalar
from .config import DEFAULT_TOLERANCES
from .errors import DegenerateVectorError

logger = logging.getLogger(__name__)

Components = Tuple[float, ...]


# =============================================================================
# Arithmetic
# =============================================================================

def add(a: Components, b: Components) -> Components:
    return tuple(ai + bi for ai, bi in zip(a, b))

def sub(a: Components, b: Components) -> Components:
    return tuple(ai - bi for ai, bi in zip(a, b))

def neg(v: Components) -> Components:
    return tuple(-vi for vi in v)

def scale(v: Components, s: float) -> Components:
    return tuple(vi * s for vi in v)

def div_scalar(v: Components, s: float) -> Components:
    # numpy scalars return inf instead of raising, so check up front
    if s == 0:
        raise ZeroDivisionError("vector division by zero")
    return tuple(vi / s for vi in v)

def mul(a: Components, b: Components) -> Components:
    return tuple(ai * bi for ai, bi in zip(a, b))

def div(a: Components, b: Components) -> Components:
    if any(bi == 0 for bi in b):
        raise ZeroDivisionError("component-wise vector division by zero")
    return tuple(ai / bi for ai, bi in zip(a, b))


# =============================================================================
# Metrics
# =============================================================================

def dot(a: Components, b: Components) -> float:
    return sum(ai * bi for ai, bi in zip(a, b))

def length_squared(v: Components) -> float:
    return sum(vi * vi for vi in v)

def length(v: Components) -> float:
    return math.sqrt(length_squared(v))

def distance_squared(a: Components, b: Components) -> float:
    return length_squared(sub(a, b))

def distance(a: Components, b: Components) -> float:
    return math.sqrt(distance_squared(a, b))

def normalize(v: Components) -> Components:
    ln = length(v)
    if ln == 0.0:
        raise DegenerateVectorError("cannot normalize a zero-length vector")
    return tuple(vi / ln for vi in v)

def is_unit(v: Components, eps: float = DEFAULT_TOLERANCES.unit) -> bool:
    return abs(length_squared(v) - 1.0) <= eps

def equal(a: Components, b: Components) -> bool:
    """Component-wise float ==, so a NaN component never compares equal."""
    return len(a) == len(b) and all(ai == bi for ai, bi in zip(a, b))

def is_close(a: Components, b: Components,
             rel_tol: float = DEFAULT_TOLERANCES.close_rel,
             abs_tol: float = DEFAULT_TOLERANCES.close_abs) -> bool:
    return all(math.isclose(ai, bi, rel_tol=rel_tol, abs_tol=abs_tol) for ai, bi in zip(a, b))


# =============================================================================
# Range / Selection
# =============================================================================

def clamp(v: Components, lo: Components, hi: Components) -> Components:
    return tuple(scalar.clamp(vi, li, hi_i) for vi, li, hi_i in zip(v, lo, hi))

def minimum(a: Components, b: Components) -> Components:
    return tuple(ai if ai < bi else bi for ai, bi in zip(a, b))

def maximum(a: Components, b: Components) -> Components:
    return tuple(ai if ai > bi else bi for ai, bi in zip(a, b))


# =============================================================================
# Interpolation
# =============================================================================

def lerp(start: Components, end: Components, amount: float) -> Components:
    return tuple(scalar.lerp(s, e, amount) for s, e in zip(start, end))

def smoothstep(start: Components, end: Components, amount: float) -> Components:
    return lerp(start, end, scalar.smoothstep_amount(amount))

def hermite(value1: Components, tangent1: Components,
            value2: Components, tangent2: Components, amount: float) -> Components:
    h1, h2, h3, h4 = scalar.hermite_basis(amount)
    return tuple(
        v1 * h1 + v2 * h2 + t1 * h3 + t2 * h4
        for v1, t1, v2, t2 in zip(value1, tangent1, value2, tangent2)
    )

def catmull_rom(p1: Components, p2: Components, p3: Components, p4: Components,
                amount: float) -> Components:
    return tuple(
        scalar.catmull_rom(a, b, c, d, amount)
        for a, b, c, d in zip(p1, p2, p3, p4)
    )

def barycentric(v1: Components, v2: Components, v3: Components,
                amount1: float, amount2: float) -> Components:
    return tuple(
        scalar.barycentric(a, b, c, amount1, amount2)
        for a, b, c in zip(v1, v2, v3)
    )


# =============================================================================
# Reflection / Refraction
# =============================================================================

def reflect(v: Components, normal: Components) -> Components:
    d2 = 2.0 * dot(v, normal)
    return tuple(vi - d2 * ni for vi, ni in zip(v, normal))

def refract(v: Components, normal: Components, index: float) -> Components:
    """Incident direction v through a surface whose normal points along v (dot(v, n) > 0)."""
    cos1 = dot(v, normal)
    radicand = 1.0 - (index * index) * (1.0 - cos1 * cos1)
    if radicand < 0.0:
        logger.debug("total internal reflection (radicand=%r), returning zero vector", radicand)
        return tuple(0.0 for _ in v)
    cos2 = math.sqrt(radicand)
    k = cos2 - index * cos1
    return tuple(index * vi + k * ni for vi, ni in zip(v, normal))


# =============================================================================
# Transforms
# =============================================================================

def rotate(v: Sequence[float], q: Sequence[float]) -> Tuple[float, float, float]:
    """Rotate (x, y, z) by quaternion (qx, qy, qz, qw)."""
    qx, qy, qz, qw = q
    x2 = qx + qx
    y2 = qy + qy
    z2 = qz + qz
    wx = qw * x2
    wy = qw * y2
    wz = qw * z2
    xx = qx * x2
    xy = qx * y2
    xz = qx * z2
    yy = qy * y2
    yz = qy * z2
    zz = qz * z2

    x, y, z = v
    return (
        x * (1.0 - yy - zz) + y * (xy - wz) + z * (xz + wy),
        x * (xy + wz) + y * (1.0 - xx - zz) + z * (yz - wx),
        x * (xz - wy) + y * (yz + wx) + z * (1.0 - xx - yy),
    )

def mul_row(v: Sequence[float], m: Sequence[float]) -> Tuple[float, float, float, float]:
    """Row vector (x, y, z, w) times a row-major 4x4 matrix."""
    x, y, z, w = v
    return (
        x * m[0] + y * m[4] + z * m[8] + w * m[12],
        x * m[1] + y * m[5] + z * m[9] + w * m[13],
        x * m[2] + y * m[6] + z * m[10] + w * m[14],
        x * m[3] + y * m[7] + z * m[11] + w * m[15],
    )

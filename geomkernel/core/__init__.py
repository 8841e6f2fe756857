# geomkernel/core/__init__.py
"""
Core math types: vectors, quaternion, 4x4 matrix.
"""

from .config import (
    CLOSE_ABS_TOL,
    CLOSE_REL_TOL,
    DEFAULT_TOLERANCES,
    SINGULAR_EPSILON,
    SLERP_LINEAR_THRESHOLD,
    UNIT_EPSILON,
    Tolerances,
)
from .errors import (
    ArityMismatchError,
    DegenerateVectorError,
    GeometryError,
    InvalidArgumentError,
    MissingInputError,
    SingularMatrixError,
)
from .matrix import Mat4
from .quaternion import Quat
from .vector import Vec2, Vec3, Vec4
from .transform import Transform
from .scalar import (
    barycentric,
    catmull_rom,
    clamp,
    deg_to_rad,
    hermite,
    inverse_lerp,
    lerp,
    rad_to_deg,
    remap,
    smoothstep,
)

__all__ = [
    # Math
    "Vec2", "Vec3", "Vec4",
    "Mat4",
    "Quat",
    "Transform",
    "lerp", "clamp", "remap", "smoothstep", "inverse_lerp",
    "hermite", "catmull_rom", "barycentric",
    "deg_to_rad", "rad_to_deg",

    # Errors
    "GeometryError",
    "InvalidArgumentError",
    "MissingInputError",
    "ArityMismatchError",
    "DegenerateVectorError",
    "SingularMatrixError",

    # Tolerances
    "Tolerances",
    "DEFAULT_TOLERANCES",
    "UNIT_EPSILON",
    "SINGULAR_EPSILON",
    "SLERP_LINEAR_THRESHOLD",
    "CLOSE_REL_TOL",
    "CLOSE_ABS_TOL",
]

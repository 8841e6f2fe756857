# geomkernel/__init__.py
"""
geomkernel - vector, quaternion and matrix math for rendering and simulation.

Core components:
- Vec2, Vec3, Vec4: immutable vector values
- Quat: rotations
- Mat4: 4x4 transforms (row-vector convention)
- Transform: position / rotation / scale
- interop: numpy conversion and GPU upload packing (imported on demand)
"""

from .core import (
    # Math
    Vec2, Vec3, Vec4,
    Mat4,
    Quat,
    Transform,
    lerp, clamp, remap, smoothstep,

    # Errors
    GeometryError,
    InvalidArgumentError,
    MissingInputError,
    ArityMismatchError,
    DegenerateVectorError,
    SingularMatrixError,

    # Tolerances
    Tolerances,
    DEFAULT_TOLERANCES,
)

__version__ = "0.1.0"

__all__ = [
    "Vec2", "Vec3", "Vec4",
    "Mat4",
    "Quat",
    "Transform",
    "lerp", "clamp", "remap", "smoothstep",
    "GeometryError",
    "InvalidArgumentError",
    "MissingInputError",
    "ArityMismatchError",
    "DegenerateVectorError",
    "SingularMatrixError",
    "Tolerances",
    "DEFAULT_TOLERANCES",
]

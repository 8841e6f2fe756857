# geomkernel/interop.py
"""
numpy interop for handing kernel values to a renderer.

Conversions go through numpy arrays; packed payloads are raw float32 bytes
ready for a uniform or instance buffer upload. Matrices pack in their
row-major order, which under the row-vector convention is exactly the
column-major layout glUniformMatrix4fv expects with transpose=False.
"""

from __future__ import annotations
from typing import Iterable, Union

import numpy as np

from .core.errors import ArityMismatchError, InvalidArgumentError, MissingInputError
from .core.matrix import Mat4
from .core.quaternion import Quat
from .core.vector import Vec2, Vec3, Vec4

Value = Union[Vec2, Vec3, Vec4, Quat, Mat4]

_VECTOR_BY_ARITY = {2: Vec2, 3: Vec3, 4: Vec4}


def to_array(value: Value, dtype=np.float32) -> np.ndarray:
    """Vectors and quaternions become 1-D arrays; matrices become 4x4."""
    if isinstance(value, Mat4):
        return np.array(value.m, dtype=dtype).reshape(4, 4)
    return np.array(value.to_tuple(), dtype=dtype)


def vector_from_array(arr) -> Union[Vec2, Vec3, Vec4]:
    """Pick Vec2/Vec3/Vec4 by the length of a flat array."""
    if arr is None:
        raise MissingInputError("vector")
    flat = np.asarray(arr, dtype=np.float64).ravel()
    cls = _VECTOR_BY_ARITY.get(flat.size)
    if cls is None:
        raise InvalidArgumentError(f"vector requires 2, 3 or 4 values, got {flat.size}")
    return cls.from_array(flat.tolist())


def quat_from_array(arr) -> Quat:
    if arr is None:
        raise MissingInputError("Quat")
    return Quat.from_array(np.asarray(arr, dtype=np.float64).ravel().tolist())


def matrix_from_array(arr) -> Mat4:
    """Accepts a (4, 4) array or 16 flat values, row-major."""
    if arr is None:
        raise MissingInputError("Mat4")
    flat = np.asarray(arr, dtype=np.float64).ravel()
    if flat.size != 16:
        raise ArityMismatchError("Mat4", 16, flat.size)
    return Mat4(flat.tolist())


def pack_float32(value: Value) -> bytes:
    """Raw float32 bytes for a single uniform upload."""
    return to_array(value, np.float32).tobytes()


def pack_many(values: Iterable[Value]) -> bytes:
    """Concatenate float32 payloads for an instance buffer, in order."""
    rows = [to_array(v, np.float32).ravel() for v in values]
    if not rows:
        return b""
    return np.concatenate(rows).astype(np.float32).tobytes()


def unpack_matrix(payload: bytes) -> Mat4:
    """Inverse of pack_float32 for a Mat4 payload."""
    data = np.frombuffer(payload, dtype=np.float32)
    if data.size != 16:
        raise ArityMismatchError("Mat4", 16, data.size)
    return Mat4(data.astype(np.float64).tolist())

# geomkernel/core/scalar.py
"""
Scalar helpers shared by the vector, quaternion and matrix types.

The spline blends here are the single source of the per-component formulas;
vector types apply them component by component.
"""

from __future__ import annotations
import builtins
import math
from typing import Tuple

from .config import DEFAULT_TOLERANCES

PI = math.pi
TAU = 2.0 * math.pi


# =============================================================================
# Primitive Operations
# =============================================================================

def sqrt(value: float) -> float:
    return math.sqrt(value)

def abs(value: float) -> float:
    return builtins.abs(value)

def pow(base: float, exponent: float) -> float:
    return math.pow(base, exponent)

def deg_to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180.0)

def rad_to_deg(radians: float) -> float:
    return radians * (180.0 / math.pi)

def is_close(a: float, b: float,
             rel_tol: float = DEFAULT_TOLERANCES.close_rel,
             abs_tol: float = DEFAULT_TOLERANCES.close_abs) -> bool:
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# Range Functions
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp to max first, then to min (an inverted range yields min_val)."""
    value = max_val if value > max_val else value
    value = min_val if value < min_val else value
    return value

def lerp(a: float, b: float, t: float) -> float:
    """a + (b - a) t, arranged so t=0 gives a and t=1 gives b exactly."""
    return a * (1.0 - t) + b * t

def inverse_lerp(a: float, b: float, value: float) -> float:
    if a == b:
        raise ZeroDivisionError("inverse_lerp over an empty range")
    return (value - a) / (b - a)

def remap(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    t = inverse_lerp(in_min, in_max, value)
    return lerp(out_min, out_max, t)

def smoothstep_amount(t: float) -> float:
    """Clamp t to [0, 1] and ease it with t^2 (3 - 2t)."""
    t = clamp(t, 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)

def smoothstep(edge0: float, edge1: float, x: float) -> float:
    return smoothstep_amount(inverse_lerp(edge0, edge1, x))


# =============================================================================
# Spline Blends
# =============================================================================

def hermite_basis(amount: float) -> Tuple[float, float, float, float]:
    """Weights for (value1, value2, tangent1, tangent2)."""
    squared = amount * amount
    cubed = amount * squared
    return (
        2.0 * cubed - 3.0 * squared + 1.0,
        -2.0 * cubed + 3.0 * squared,
        cubed - 2.0 * squared + amount,
        cubed - squared,
    )

def hermite(value1: float, tangent1: float, value2: float, tangent2: float,
            amount: float) -> float:
    h1, h2, h3, h4 = hermite_basis(amount)
    return value1 * h1 + value2 * h2 + tangent1 * h3 + tangent2 * h4

def catmull_rom(p1: float, p2: float, p3: float, p4: float, amount: float) -> float:
    """Catmull-Rom through p2 (amount=0) and p3 (amount=1)."""
    squared = amount * amount
    cubed = amount * squared
    return 0.5 * (
        2.0 * p2
        + (-p1 + p3) * amount
        + (2.0 * p1 - 5.0 * p2 + 4.0 * p3 - p4) * squared
        + (-p1 + 3.0 * p2 - 3.0 * p3 + p4) * cubed
    )

def barycentric(v1: float, v2: float, v3: float, amount1: float, amount2: float) -> float:
    return v1 + amount1 * (v2 - v1) + amount2 * (v3 - v1)

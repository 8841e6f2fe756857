# geomkernel/core/config.py
"""
Tolerance settings.

Plain constants seed `DEFAULT_TOLERANCES`, whose fields are the defaults for
the eps and tolerance keyword arguments throughout the kernel. Build another
`Tolerances` to carry a different set around and pass its fields explicitly.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Final

# |length^2 - 1| at or below this counts as unit length
UNIT_EPSILON: Final[float] = 1e-6

# |det| at or below this counts as singular
SINGULAR_EPSILON: Final[float] = 1e-12

# Quaternion dot above which slerp falls back to normalized lerp
SLERP_LINEAR_THRESHOLD: Final[float] = 0.9995

# Approximate comparisons (same meaning as math.isclose)
CLOSE_REL_TOL: Final[float] = 1e-9
CLOSE_ABS_TOL: Final[float] = 1e-12


@dataclass(frozen=True)
class Tolerances:
    unit: float = UNIT_EPSILON
    singular: float = SINGULAR_EPSILON
    slerp_linear_threshold: float = SLERP_LINEAR_THRESHOLD
    close_rel: float = CLOSE_REL_TOL
    close_abs: float = CLOSE_ABS_TOL

    def __post_init__(self):
        for name in ("unit", "singular", "close_rel", "close_abs"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if not 0.0 < self.slerp_linear_threshold <= 1.0:
            raise ValueError(
                f"slerp_linear_threshold must be in (0, 1], got {self.slerp_linear_threshold}"
            )


DEFAULT_TOLERANCES: Final[Tolerances] = Tolerances()

# geomkernel/core/errors.py
"""
Exception types raised by the geometry kernel.

Every failure surfaces at the call site; nothing here is caught internally.
"""


class GeometryError(Exception):
    """Base class for all kernel errors."""


class InvalidArgumentError(GeometryError, ValueError):
    """Input could not be turned into a value of the requested type."""


class MissingInputError(InvalidArgumentError):
    """A sequence was required but None was given."""

    def __init__(self, type_name: str):
        super().__init__(f"{type_name} requires a sequence of components, got None")
        self.type_name = type_name


class ArityMismatchError(InvalidArgumentError):
    """A sequence had the wrong number of components."""

    def __init__(self, type_name: str, expected: int, actual: int):
        super().__init__(
            f"{type_name} requires exactly {expected} values, got {actual}"
        )
        self.type_name = type_name
        self.expected = expected
        self.actual = actual


class DegenerateVectorError(GeometryError, ArithmeticError):
    """Zero-length vector or quaternion where a direction was required."""


class SingularMatrixError(GeometryError, ArithmeticError):
    """Matrix has no inverse."""

    def __init__(self, determinant: float):
        super().__init__(f"matrix is singular (determinant={determinant!r})")
        self.determinant = determinant

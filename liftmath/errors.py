"""Exception types raised throughout the package."""

from __future__ import annotations


class MathError(Exception):
    """Base class of every error raised by the package."""

    description = "A math error occurred."

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = f"{self.description} | {detail}" if detail else self.description
        super().__init__(message)


class DivByZeroError(MathError, ZeroDivisionError):
    """Raised when a value would be divided by zero."""

    description = "Attempted division by zero."


class DimensionsDoNotAgreeError(MathError, ValueError):
    """Raised when two sequences must have the same length but do not."""

    description = "Dimensions do not agree."


class MatrixDimensionsDoNotAgreeError(MathError, ValueError):
    """Raised when matrix dimensions are incompatible for an operation."""

    description = "Matrix dimensions do not agree."


class InverseOfNonSquareMatrixError(MathError, ValueError):
    """Raised when the inverse of a non square matrix is requested."""

    description = "Only square matrices have inverses."


class SingularMatrixError(MathError, ArithmeticError):
    """Raised when a matrix has a zero determinant."""

    description = (
        "The det of the matrix is zero. Some operations like inverse will "
        "produce erroneous results."
    )


class MatrixSingularToWorkingPrecisionError(MathError, ArithmeticError):
    """Raised when a reciprocal condition number falls below working precision."""

    description = "Calculations resulted in a matrix that is <= working precision."


class MissingVariableError(MathError, LookupError):
    """Raised when a requested independent variable is not present."""

    description = "The requested independent variable is not present."


class InvalidValueError(MathError, ValueError):
    """Raised when an argument has a value that cannot be used."""

    description = "An invalid value was supplied."


class NonStructValueError(MathError, TypeError):
    """Raised when a structured (dataclass) value was expected."""

    description = "A struct value was expected but was not recieved."


class InvalidOperationError(MathError, TypeError):
    """Raised when the supplied types cannot perform an operation."""

    description = "The supplied types cannot perform the requested operation."
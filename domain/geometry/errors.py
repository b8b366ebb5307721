# domain/geometry/errors.py
from enum import Enum


class ArithmeticErrorKind(Enum):
    """The failure outcomes of tuple arithmetic."""
    DIVISION_BY_ZERO = "division_by_zero"
    NORMALIZING_ZERO_VECTOR = "normalizing_zero_vector"


class TupleArithmeticError(ArithmeticError):
    """Base class for failed tuple operations. The failure is identified by ``kind``."""
    kind: ArithmeticErrorKind


class DivisionByZero(TupleArithmeticError, ZeroDivisionError):
    """Raised when a tuple is divided by a scalar that is exactly zero."""
    kind = ArithmeticErrorKind.DIVISION_BY_ZERO


class NormalizingZeroVector(TupleArithmeticError, ValueError):
    """Raised when normalizing a tuple whose magnitude is below EPSILON."""
    kind = ArithmeticErrorKind.NORMALIZING_ZERO_VECTOR

"""
Core infrastructure for PyMatrix.

Shared abstractions used by the matrix, ops and linalg subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Comparison tolerance tiers for predicates
    timing: Sectioned execution timer
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidShapeError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)
from pymatrix.core.timing import Timer

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    # Timing
    "Timer",
]

"""
Morpheus: a small dense matrix library for Python.

Provides a mutable rectangular matrix of float64 values with addition,
subtraction, matrix product, scalar scaling, transpose and generic
element-wise operations driven by user-supplied functions.

Submodules:
    core: Exceptions, validation and tolerance tiers
    matrix: The Matrix type
"""

__version__ = "0.1.0"

from morpheus.matrix import Matrix
from morpheus.core.exceptions import (
    MorpheusError,
    ValidationError,
    InvalidStructureError,
    DimensionError,
    SizeMismatchError,
    DimensionMismatchError,
    NumericalError,
    DivisionByZeroError,
    ElementNotFoundError,
)

__all__ = [
    "__version__",
    "Matrix",
    "MorpheusError",
    "ValidationError",
    "InvalidStructureError",
    "DimensionError",
    "SizeMismatchError",
    "DimensionMismatchError",
    "NumericalError",
    "DivisionByZeroError",
    "ElementNotFoundError",
]

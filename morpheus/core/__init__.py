"""
Core infrastructure for Morpheus.

This module provides the shared abstractions used by the matrix subpackage.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators and precondition checks
    tolerances: Tolerance tiers for approximate comparison
"""

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
from morpheus.core.tolerances import ToleranceTier, EXACT, FP64, select_tolerance

__all__ = [
    # Exceptions
    "MorpheusError",
    "ValidationError",
    "InvalidStructureError",
    "DimensionError",
    "SizeMismatchError",
    "DimensionMismatchError",
    "NumericalError",
    "DivisionByZeroError",
    "ElementNotFoundError",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "select_tolerance",
]

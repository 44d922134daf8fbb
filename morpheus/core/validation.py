"""
Input validation utilities for Morpheus.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond the float64 promotion of numeric input
    - Booleans and numeric strings are not numbers
    - Clear, actionable error messages with actual shapes and indices
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

import numbers
import warnings
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from morpheus.core.exceptions import (
    DimensionMismatchError,
    DivisionByZeroError,
    ElementNotFoundError,
    InvalidStructureError,
    SizeMismatchError,
    ValidationError,
)


def _is_number(value: Any) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _is_row(value: Any) -> bool:
    """True for list-like rows; strings and bytes do not count."""
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _format_shape(shape: tuple[int, int]) -> str:
    return f"{shape[0]}x{shape[1]}"


def is_valid_structure(data: Any) -> bool:
    """
    Check whether data can back a matrix.

    Valid data is a non-empty sequence of rows, every row a sequence of the
    same length as the first one, every element a real number. A 2D numeric
    ndarray with at least one row also qualifies.

    Never raises: anything else, including a bare scalar, returns False.

    Args:
        data: Candidate matrix data

    Returns:
        True if data is a non-empty rectangular sequence of numeric rows
    """
    if isinstance(data, np.ndarray):
        return (
            data.ndim == 2
            and data.shape[0] > 0
            and np.issubdtype(data.dtype, np.number)
            and not np.issubdtype(data.dtype, np.complexfloating)
        )

    if not _is_row(data) or len(data) == 0:
        return False

    if not _is_row(data[0]):
        return False
    expected_columns = len(data[0])

    for row in data:
        if not _is_row(row) or len(row) != expected_columns:
            return False
        if not all(_is_number(element) for element in row):
            return False

    return True


def check_structure(data: Any, name: str = "data") -> NDArray[np.float64]:
    """
    Validate matrix data and convert it to a fresh float64 array.

    The returned array never shares memory with the input.

    Args:
        data: Candidate matrix data
        name: Parameter name for error messages

    Returns:
        2D float64 numpy array owned by the caller

    Raises:
        InvalidStructureError: If data is not a non-empty rectangular
            sequence of sequences of numeric values
    """
    if not is_valid_structure(data):
        raise InvalidStructureError(
            f"{name} must be a sequence of sequences of numeric values"
        )

    try:
        return np.array(data, dtype=np.float64)
    except OverflowError as e:
        raise InvalidStructureError(
            f"{name}: value out of float64 range: {e}"
        ) from e


def check_same_shape(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an element-wise operation have identical shapes.

    Args:
        left_shape: Shape of the receiving matrix
        right_shape: Shape of the other matrix
        operation: Operation name for error messages

    Raises:
        SizeMismatchError: If row or column counts differ
    """
    if left_shape != right_shape:
        raise SizeMismatchError(
            f"{operation}: the size of the matrices must match "
            f"(left is {_format_shape(left_shape)}, right is {_format_shape(right_shape)})",
            left_shape=left_shape,
            right_shape=right_shape,
        )


def check_inner_dimensions(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the operands of a matrix product are conformable.

    Args:
        left_shape: Shape of the left-hand matrix
        right_shape: Shape of the right-hand matrix
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If left column count != right row count
    """
    if left_shape[1] != right_shape[0]:
        raise DimensionMismatchError(
            f"{operation}: row count of right-hand matrix must equal column count "
            f"of left-hand matrix (left is {_format_shape(left_shape)}, "
            f"right is {_format_shape(right_shape)})",
            left_shape=left_shape,
            right_shape=right_shape,
        )


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a scalar operand is a real number.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number or is outside float64 range
    """
    if not _is_number(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(f"{name}: value out of float64 range: {e}") from e


def check_nonzero_divisor(divisor: float, name: str = "divisor") -> None:
    """
    Verify a divisor is not zero.

    Args:
        divisor: Value to divide by
        name: Parameter name for error messages

    Raises:
        DivisionByZeroError: If divisor == 0
    """
    if divisor == 0:
        raise DivisionByZeroError(f"{name} must not be zero", divisor=divisor)


def check_callable(fn: Any, name: str) -> None:
    """
    Verify a combining function can be called.

    Raises:
        ValidationError: If fn is not callable
    """
    if not callable(fn):
        raise ValidationError(
            f"{name}: expected a callable, got {type(fn).__name__}"
        )


def check_element_result(value: Any, operation: str) -> float:
    """
    Verify a combining function produced a storable element.

    Args:
        value: Value returned by the combining function
        operation: Operation name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number or is outside float64 range
    """
    if not _is_number(value):
        raise ValidationError(
            f"{operation}: combining function returned {type(value).__name__}, "
            f"expected a real number"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise ValidationError(f"{operation}: value out of float64 range: {e}") from e


def check_element_position(row: Any, column: Any, shape: tuple[int, int]) -> None:
    """
    Verify (row, column) addresses an existing element.

    Negative indices do not wrap around.

    Args:
        row: Row index
        column: Column index
        shape: (rows, columns) of the matrix

    Raises:
        ElementNotFoundError: If either index is not an integer inside the shape
    """
    for index, size in ((row, shape[0]), (column, shape[1])):
        in_bounds = (
            isinstance(index, numbers.Integral)
            and not isinstance(index, (bool, np.bool_))
            and 0 <= index < size
        )
        if not in_bounds:
            raise ElementNotFoundError(
                f"Element not found at ({row!r}, {column!r}) "
                f"in {_format_shape(shape)} matrix",
                row=row,
                column=column,
                shape=shape,
            )


def warn_if_not_finite(
    result: NDArray[np.floating[Any]],
    inputs: tuple[NDArray[np.floating[Any]], ...],
    operation: str,
) -> None:
    """
    Warn when an operation introduced NaN or Inf values.

    Non-finite values already present in any input are not reported again.
    The warning is attributed to the frame three levels up, i.e. the caller
    of the public Matrix method whose private helper calls this function.

    Args:
        result: Output of the operation
        inputs: Arrays the operation read from
        operation: Operation name for the warning message
    """
    if np.all(np.isfinite(result)):
        return
    if not all(np.all(np.isfinite(array)) for array in inputs):
        return

    n_nan = int(np.sum(np.isnan(result)))
    n_inf = int(np.sum(np.isinf(result)))
    warnings.warn(
        f"{operation}: result contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
        RuntimeWarning,
        stacklevel=4,
    )

"""
Matrix: dense, rectangular, mutable matrix of float64 values.

Every arithmetic operation comes in two forms:

    compute_*  returns a new Matrix, the receiver is untouched
    apply form mutates the receiver and returns it for chaining

The plain names add(), subtract(), multiply(), scalar_multiply() and
scalar_divide() are the apply form. The generic element-wise operations
are the other way round: synchronous_matrix_operation() and
scalar_matrix_operation() only compute, while their apply_* variants mutate.
transpose() always mutates.

All checks run before any data is written, so an operation that raises
leaves the receiver exactly as it was.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from morpheus.core.tolerances import FP64, ToleranceTier
from morpheus.core.validation import (
    check_callable,
    check_element_position,
    check_inner_dimensions,
    check_nonzero_divisor,
    check_same_shape,
    check_scalar,
    check_structure,
    is_valid_structure,
    warn_if_not_finite,
)
from morpheus.matrix._kernels import (
    BinaryFunction,
    UnaryFunction,
    elementwise_binary,
    elementwise_unary,
    matrix_product,
    transposed,
)


def _empty_data() -> NDArray[np.float64]:
    return np.empty((0, 0), dtype=np.float64)


def _is_empty_input(data: Any) -> bool:
    """None and zero-length sequences build the empty matrix."""
    if data is None:
        return True
    if isinstance(data, np.ndarray):
        return data.ndim > 0 and data.shape[0] == 0
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes)) and len(data) == 0


class Matrix:
    """
    Dense rectangular matrix.

    The matrix owns its data: input is copied on the way in and the
    ``data`` property hands out copies. Elements are stored as float64,
    so integer input is promoted on construction.

    Construction:
        Matrix()                     empty 0 x 0 matrix
        Matrix([[1, 2], [3, 4]])     validated data
        Matrix.from_array(ndarray)   validated data, empty input rejected

    Examples
    --------
    >>> m = Matrix([[1, 2, 3], [4, 5, 6]])
    >>> m.scalar_multiply(2).data.tolist()
    [[2.0, 4.0, 6.0], [8.0, 10.0, 12.0]]
    >>> m.transpose().shape
    (3, 2)
    """

    # Mutable, so not hashable
    __hash__ = None

    def __init__(self, data: ArrayLike | None = None):
        self._data = _empty_data()
        if not _is_empty_input(data):
            self.set_data(data)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        Unlike the constructor, empty input is not accepted.

        Raises
        ------
        InvalidStructureError
            If array is not a non-empty rectangular numeric 2D structure.
        """
        matrix = cls()
        matrix.set_data(array)
        return matrix

    @staticmethod
    def is_valid(data: Any) -> bool:
        """Whether data is a non-empty rectangular sequence of numeric rows."""
        return is_valid_structure(data)

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    def set_data(self, data: ArrayLike) -> Matrix:
        """
        Replace the matrix data wholesale.

        Parameters
        ----------
        data : array-like
            Non-empty sequence of equally long rows of real numbers, or a
            2D numeric ndarray.

        Returns
        -------
        Matrix
            The receiver.

        Raises
        ------
        InvalidStructureError
            If data fails validation. The receiver is left unchanged.
        """
        self._data = check_structure(data, "data")
        return self

    @property
    def data(self) -> NDArray[np.float64]:
        """Copy of the matrix data, shape (row_count, column_count)."""
        return self._data.copy()

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the matrix data as a numpy array."""
        return self._data.copy()

    def get_element(self, row: int, column: int) -> float:
        """
        Element at (row, column).

        Raises
        ------
        ElementNotFoundError
            If the position is outside the matrix. Negative indices are
            out of bounds.
        """
        check_element_position(row, column, self.shape)
        return self._data[row, column].item()

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return int(self._data.shape[0])

    @property
    def column_count(self) -> int:
        """Number of columns (0 for the empty matrix)."""
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)."""
        return (self.row_count, self.column_count)

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return self._from_result(self._data.copy())

    def allclose(self, other: Matrix, tolerance: ToleranceTier = FP64) -> bool:
        """
        Whether other has the same shape and approximately equal values.

        Parameters
        ----------
        other : Matrix
            Matrix to compare against.
        tolerance : ToleranceTier
            rtol/atol pair handed to numpy.allclose. Defaults to FP64.
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # ------------------------------------------------------------------
    # Generic element-wise operations
    # ------------------------------------------------------------------

    def synchronous_matrix_operation(self, other: Matrix, fn: BinaryFunction) -> Matrix:
        """
        Combine two same-size matrices element by element.

        Computes R[y][x] = fn(self[y][x], other[y][x]), visiting rows outer
        and columns inner. Neither operand is modified.

        Parameters
        ----------
        other : Matrix
            Right-hand operand, same shape as the receiver.
        fn : callable
            fn(left_element, right_element) -> real number.

        Returns
        -------
        Matrix
            New matrix holding R.

        Raises
        ------
        SizeMismatchError
            If the shapes differ in either axis.
        ValidationError
            If fn is not callable or returns a non-numeric value.
        """
        return self._from_result(
            self._combine(other, fn, "synchronous_matrix_operation")
        )

    def apply_synchronous_matrix_operation(self, other: Matrix, fn: BinaryFunction) -> Matrix:
        """In-place form of synchronous_matrix_operation(). Returns the receiver."""
        return self._replace(
            self._combine(other, fn, "apply_synchronous_matrix_operation")
        )

    def scalar_matrix_operation(self, fn: UnaryFunction) -> Matrix:
        """
        Map fn over every element, row-major, into a new Matrix.

        Raises
        ------
        ValidationError
            If fn is not callable or returns a non-numeric value.
        """
        return self._from_result(self._map(fn, "scalar_matrix_operation"))

    def apply_scalar_matrix_operation(self, fn: UnaryFunction) -> Matrix:
        """In-place form of scalar_matrix_operation(). Returns the receiver."""
        return self._replace(self._map(fn, "apply_scalar_matrix_operation"))

    # ------------------------------------------------------------------
    # Arithmetic: apply form by default, compute_* returns a new matrix
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        """Add other in place. Raises SizeMismatchError on shape mismatch."""
        return self._replace(self._sum(other, "add"))

    def compute_add(self, other: Matrix) -> Matrix:
        """Compute-only form of add(). Returns a new Matrix."""
        return self._from_result(self._sum(other, "compute_add"))

    def subtract(self, other: Matrix) -> Matrix:
        """Subtract other in place. Raises SizeMismatchError on shape mismatch."""
        return self._replace(self._difference(other, "subtract"))

    def compute_subtract(self, other: Matrix) -> Matrix:
        """Compute-only form of subtract(). Returns a new Matrix."""
        return self._from_result(self._difference(other, "compute_subtract"))

    def multiply(self, other: Matrix) -> Matrix:
        """
        Replace the receiver with the matrix product self x other.

        The result has shape (self.row_count, other.column_count).

        Raises
        ------
        DimensionMismatchError
            If self.column_count != other.row_count.
        """
        return self._replace(self._product(other, "multiply"))

    def compute_multiply(self, other: Matrix) -> Matrix:
        """Compute-only form of multiply(). Returns a new Matrix."""
        return self._from_result(self._product(other, "compute_multiply"))

    def scalar_multiply(self, multiplier: float) -> Matrix:
        """Multiply every element by multiplier in place."""
        return self._replace(self._scaled(multiplier, "scalar_multiply"))

    def compute_scalar_multiply(self, multiplier: float) -> Matrix:
        """Compute-only form of scalar_multiply(). Returns a new Matrix."""
        return self._from_result(self._scaled(multiplier, "compute_scalar_multiply"))

    def scalar_divide(self, divisor: float) -> Matrix:
        """
        Divide every element by divisor in place.

        Raises
        ------
        DivisionByZeroError
            If divisor == 0, before any element is touched.
        """
        return self._replace(self._divided(divisor, "scalar_divide"))

    def compute_scalar_divide(self, divisor: float) -> Matrix:
        """Compute-only form of scalar_divide(). Returns a new Matrix."""
        return self._from_result(self._divided(divisor, "compute_scalar_divide"))

    def transpose(self) -> Matrix:
        """
        Transpose in place: R[x][y] = self[y][x].

        Row and column counts swap. Returns the receiver.

        A matrix holding no elements becomes the empty 0 x 0 matrix, since a
        matrix without rows reports zero columns. Transposing twice therefore
        restores every matrix except n x 0 ones, which end up 0 x 0.
        """
        return self._replace(transposed(self._data))

    # ------------------------------------------------------------------
    # Operators (compute-only). Every public entry point, operators included,
    # must sit exactly two frames above warn_if_not_finite.
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._from_result(self._sum(other, "compute_add"))

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._from_result(self._difference(other, "compute_subtract"))

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._from_result(self._product(other, "compute_multiply"))

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, numbers.Real) or isinstance(other, bool):
            return NotImplemented
        return self._from_result(self._scaled(other, "compute_scalar_multiply"))

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Matrix:
        if not isinstance(other, numbers.Real) or isinstance(other, bool):
            return NotImplemented
        return self._from_result(self._divided(other, "compute_scalar_divide"))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Matrix(rows={self.row_count}, columns={self.column_count})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @classmethod
    def _from_result(cls, result: NDArray[np.float64]) -> Matrix:
        # Kernel output is rectangular float64 already; skip revalidation
        matrix = cls()
        matrix._data = result
        return matrix

    def _replace(self, result: NDArray[np.float64]) -> Matrix:
        self._data = result
        return self

    def _combine(self, other: Matrix, fn: BinaryFunction, operation: str) -> NDArray[np.float64]:
        check_callable(fn, operation)
        check_same_shape(self.shape, other.shape, operation)
        return elementwise_binary(self._data, other._data, fn, operation)

    def _map(self, fn: UnaryFunction, operation: str) -> NDArray[np.float64]:
        check_callable(fn, operation)
        return elementwise_unary(self._data, fn, operation)

    def _sum(self, other: Matrix, operation: str) -> NDArray[np.float64]:
        result = self._combine(other, lambda left, right: left + right, operation)
        warn_if_not_finite(result, (self._data, other._data), operation)
        return result

    def _difference(self, other: Matrix, operation: str) -> NDArray[np.float64]:
        result = self._combine(other, lambda left, right: left - right, operation)
        warn_if_not_finite(result, (self._data, other._data), operation)
        return result

    def _product(self, other: Matrix, operation: str) -> NDArray[np.float64]:
        check_inner_dimensions(self.shape, other.shape, operation)
        result = matrix_product(self._data, other._data)
        warn_if_not_finite(result, (self._data, other._data), operation)
        return result

    def _scaled(self, multiplier: float, operation: str) -> NDArray[np.float64]:
        factor = check_scalar(multiplier, "multiplier")
        result = self._map(lambda element: element * factor, operation)
        warn_if_not_finite(result, (self._data,), operation)
        return result

    def _divided(self, divisor: float, operation: str) -> NDArray[np.float64]:
        value = check_scalar(divisor, "divisor")
        check_nonzero_divisor(value, "divisor")
        result = self._map(lambda element: element / value, operation)
        warn_if_not_finite(result, (self._data,), operation)
        return result

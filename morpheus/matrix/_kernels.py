"""
Element-level kernels behind Matrix operations.

Every kernel reads its inputs, never writes to them, and returns a freshly
allocated float64 array. Loops run rows outer, columns inner, so user
callbacks observe a row-major visiting order.

The product kernel accumulates in plain Python floats in increasing inner
index order. numpy.matmul hands off to BLAS, which is free to reorder the
summation, so it is not used here.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from morpheus.core.validation import check_element_result

BinaryFunction = Callable[[float, float], Any]
UnaryFunction = Callable[[float], Any]


def elementwise_binary(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
    fn: BinaryFunction,
    operation: str,
) -> NDArray[np.float64]:
    """R[y, x] = fn(left[y, x], right[y, x]). Shapes must already match."""
    rows, columns = left.shape
    result = np.empty((rows, columns), dtype=np.float64)
    for y in range(rows):
        for x in range(columns):
            value = fn(left[y, x].item(), right[y, x].item())
            result[y, x] = check_element_result(value, operation)
    return result


def elementwise_unary(
    data: NDArray[np.float64],
    fn: UnaryFunction,
    operation: str,
) -> NDArray[np.float64]:
    """R[y, x] = fn(data[y, x])."""
    rows, columns = data.shape
    result = np.empty((rows, columns), dtype=np.float64)
    for y in range(rows):
        for x in range(columns):
            result[y, x] = check_element_result(fn(data[y, x].item()), operation)
    return result


def matrix_product(
    left: NDArray[np.float64],
    right: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Textbook matrix product.

    R[i, k] = sum over j of left[i, j] * right[j, k], summed from j = 0
    upwards starting at 0.0. Inner dimensions must already match.
    """
    n_rows, n_inner = left.shape
    n_columns = right.shape[1]
    result = np.empty((n_rows, n_columns), dtype=np.float64)
    for i in range(n_rows):
        for k in range(n_columns):
            total = 0.0
            for j in range(n_inner):
                total += left[i, j].item() * right[j, k].item()
            result[i, k] = total
    return result


def transposed(data: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    R[x, y] = data[y, x], as a new C-contiguous array.

    An array holding no elements transposes to the (0, 0) array.
    """
    if data.size == 0:
        return np.empty((0, 0), dtype=np.float64)
    return data.T.copy()

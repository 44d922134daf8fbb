"""
Tests for the element-level kernels in matrix/_kernels.py.

Kernels assume their shape preconditions were checked by the caller and
must never write to their inputs.
"""

import numpy as np
import pytest

from morpheus.core.exceptions import ValidationError
from morpheus.matrix._kernels import (
    elementwise_binary,
    elementwise_unary,
    matrix_product,
    transposed,
)


class TestElementwiseKernels:

    def test_binary_fresh_output(self):
        left = np.array([[1.0, 2.0]])
        right = np.array([[3.0, 4.0]])
        result = elementwise_binary(left, right, lambda a, b: a * b, "op")
        np.testing.assert_array_equal(result, [[3.0, 8.0]])
        assert not np.shares_memory(result, left)
        np.testing.assert_array_equal(left, [[1.0, 2.0]])

    def test_unary_dtype(self):
        result = elementwise_unary(np.array([[1.0, 4.0]]), lambda a: int(a) // 2, "op")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[0.0, 2.0]])

    def test_bad_result_names_operation(self):
        with pytest.raises(ValidationError, match="my_op"):
            elementwise_unary(np.ones((1, 1)), lambda a: None, "my_op")


class TestMatrixProductKernel:

    def test_zero_inner_dimension_gives_zeros(self):
        result = matrix_product(np.empty((2, 0)), np.empty((0, 3)))
        np.testing.assert_array_equal(result, np.zeros((2, 3)))

    def test_matches_matmul_on_small_integers(self, rng):
        left = rng.integers(-5, 5, size=(4, 3)).astype(np.float64)
        right = rng.integers(-5, 5, size=(3, 2)).astype(np.float64)
        np.testing.assert_array_equal(matrix_product(left, right), left @ right)


class TestTransposedKernel:

    def test_column_vector(self):
        source = np.array([[1.0], [2.0]])
        result = transposed(source)
        np.testing.assert_array_equal(result, [[1.0, 2.0]])
        assert not np.shares_memory(result, source)

    def test_no_elements(self):
        assert transposed(np.empty((3, 0))).shape == (0, 0)

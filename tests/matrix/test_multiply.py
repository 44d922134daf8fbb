"""
Tests for the matrix product.
"""

import numpy as np
import pytest

from morpheus import DimensionMismatchError, Matrix


class TestMultiply:

    def test_multiply_simple(self):
        matrix_a = Matrix([
            [2, 3, 5],
        ])
        matrix_b = Matrix([
            [4],
            [8],
            [10],
        ])
        result = matrix_a.multiply(matrix_b)

        assert result is matrix_a
        np.testing.assert_array_equal(matrix_a.data, [[82]])

    def test_multiply_with_multiple_result(self):
        matrix_a = Matrix([
            [2, 4],
            [6, 8],
        ])
        matrix_b = Matrix([
            [1, 3, 5],
            [7, 9, 11],
        ])
        matrix_a.multiply(matrix_b)

        expected = [
            [30, 42, 54],
            [62, 90, 118],
        ]
        np.testing.assert_array_equal(matrix_a.data, expected)
        assert matrix_a.shape == (2, 3)

    def test_right_operand_untouched(self):
        matrix_b = Matrix([[1, 3, 5], [7, 9, 11]])
        Matrix([[2, 4], [6, 8]]).multiply(matrix_b)
        np.testing.assert_array_equal(matrix_b.data, [[1, 3, 5], [7, 9, 11]])

    def test_compute_multiply(self):
        matrix_a = Matrix([[2, 3, 5]])
        result = matrix_a.compute_multiply(Matrix([[4], [8], [10]]))
        np.testing.assert_array_equal(result.data, [[82]])
        np.testing.assert_array_equal(matrix_a.data, [[2, 3, 5]])

    def test_multiply_fails(self):
        matrix_a = Matrix([
            [1, 2, 3],
        ])
        matrix_b = Matrix([
            [1],
        ])

        with pytest.raises(
            DimensionMismatchError,
            match="row count of right-hand matrix must equal column count of left-hand matrix",
        ) as exc_info:
            matrix_a.multiply(matrix_b)

        assert exc_info.value.left_shape == (1, 3)
        assert exc_info.value.right_shape == (1, 1)
        np.testing.assert_array_equal(matrix_a.data, [[1, 2, 3]])

    def test_matches_numpy_on_integers(self, rng):
        a = rng.integers(-10, 10, size=(3, 4))
        b = rng.integers(-10, 10, size=(4, 5))
        result = Matrix(a).compute_multiply(Matrix(b))
        np.testing.assert_array_equal(result.data, a @ b)

    def test_identity(self, rng, random_shape):
        data = rng.standard_normal(random_shape)
        identity = Matrix(np.eye(random_shape[1]))
        np.testing.assert_array_equal(Matrix(data).multiply(identity).data, data)

    def test_accumulates_in_increasing_inner_order(self):
        """1e16 + 1 rounds back to 1e16 before -1e16 is added."""
        left = Matrix([[1e16, 1.0, -1e16]])
        right = Matrix([[1.0], [1.0], [1.0]])
        assert left.compute_multiply(right).get_element(0, 0) == 0.0

    def test_zero_inner_dimension(self):
        """n x 0 times 0 x 0 gives n x 0."""
        result = Matrix([[], []]).compute_multiply(Matrix())
        assert result.shape == (2, 0)

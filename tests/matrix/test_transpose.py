"""
Tests for transpose(), which always mutates and returns the receiver.
"""

import numpy as np

from morpheus import Matrix


class TestTranspose:

    def test_transpose_simple(self):
        matrix = Matrix([
            [1, 2],
            [3, 4],
            [5, 6],
        ])

        matrix.transpose()

        expected = [
            [1, 3, 5],
            [2, 4, 6],
        ]
        np.testing.assert_array_equal(matrix.data, expected)
        assert matrix.shape == (2, 3)

    def test_transpose_square(self):
        matrix = Matrix([
            [1, 2, 3],
            [4, 5, 6],
            [7, 8, 9],
        ])

        matrix.transpose()

        expected = [
            [1, 4, 7],
            [2, 5, 8],
            [3, 6, 9],
        ]
        np.testing.assert_array_equal(matrix.data, expected)

    def test_returns_receiver_for_chaining(self):
        matrix = Matrix([[1, 2, 3]])
        assert matrix.transpose() is matrix
        matrix.transpose().scalar_multiply(2)
        np.testing.assert_array_equal(matrix.data, [[2, 4, 6]])

    def test_row_vector_becomes_column(self):
        matrix = Matrix([[1, 2, 3]]).transpose()
        assert matrix.shape == (3, 1)
        np.testing.assert_array_equal(matrix.data, [[1], [2], [3]])

    def test_involution(self, rng, random_shape):
        data = rng.standard_normal(random_shape)
        matrix = Matrix(data)
        matrix.transpose().transpose()
        assert matrix.shape == random_shape
        np.testing.assert_array_equal(matrix.data, data)

    def test_empty_stays_empty(self):
        matrix = Matrix().transpose()
        assert matrix.shape == (0, 0)
        assert matrix.transpose().shape == (0, 0)

    def test_rows_without_columns_become_empty(self):
        matrix = Matrix([[], []]).transpose()
        assert matrix.shape == (0, 0)
        assert matrix.row_count == 0
        assert matrix.column_count == 0

    def test_single_empty_row_round_trip(self):
        matrix = Matrix([[]])
        assert matrix.shape == (1, 0)
        assert matrix.transpose().shape == (0, 0)
        assert matrix.transpose().shape == (0, 0)

    def test_snapshot_not_aliased(self):
        matrix = Matrix([[1], [2]])
        matrix.transpose()
        snapshot = matrix.data
        matrix.transpose()
        np.testing.assert_array_equal(snapshot, [[1, 2]])

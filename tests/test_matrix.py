import unittest

import numpy as np
import pytest

from gpmusic.core import Matrix
from gpmusic.errors import MatrixIndexError, ShapeError


class TestMatrix(unittest.TestCase):
    def setUp(self):
        self.A = Matrix.from_2d_array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_zeros(self):
        Z = Matrix.zeros(3, 2)
        self.assertEqual(Z.shape, (3, 2))
        self.assertEqual(Z.to_list(), [[0.0, 0.0]] * 3)

    def test_from_2d_array_shape(self):
        self.assertEqual(self.A.rows, 2)
        self.assertEqual(self.A.columns, 3)
        self.assertEqual(self.A.get(1, 2), 6.0)

    def test_ragged_rows(self):
        with self.assertRaises(ShapeError):
            Matrix.from_2d_array([[1.0, 2.0], [3.0]])

    def test_empty(self):
        E = Matrix.from_2d_array([])
        self.assertEqual(E.shape, (0, 0))

    def test_columns_required(self):
        with self.assertRaises(ShapeError):
            Matrix(2)
        with self.assertRaises(ShapeError):
            Matrix(-1, 2)

    def test_get_set(self):
        B = self.A.clone()
        B.set(0, 1, -7.5)
        self.assertEqual(B.get(0, 1), -7.5)
        # clone does not alias
        self.assertEqual(self.A.get(0, 1), 2.0)

    def test_out_of_bounds(self):
        for i, j in [(2, 0), (0, 3), (-1, 0), (0, -1)]:
            with self.assertRaises(MatrixIndexError):
                self.A.get(i, j)
            with self.assertRaises(MatrixIndexError):
                self.A.set(i, j, 0.0)
        with self.assertRaises(IndexError):
            self.A.get_row(5)
        with self.assertRaises(IndexError):
            self.A.get_column(3)

    def test_non_integer_indices(self):
        for i, j in [(0.5, 0), (0, 1.0), ("0", 0), (None, 1)]:
            with self.assertRaises(MatrixIndexError):
                self.A.get(i, j)
            with self.assertRaises(MatrixIndexError):
                self.A.set(i, j, 0.0)
        with self.assertRaises(MatrixIndexError):
            self.A.get_row(0.0)
        with self.assertRaises(MatrixIndexError):
            self.A.get_column(1.5)
        self.assertEqual(self.A.get(np.int64(1), 0), 4.0)

    def test_row_and_column_are_copies(self):
        r = self.A.get_row(0)
        r[0] = 100.0
        self.assertEqual(self.A.get(0, 0), 1.0)
        np.testing.assert_array_equal(self.A.get_column(2), [3.0, 6.0])

    def test_transpose(self):
        T = self.A.transpose()
        self.assertEqual(T.shape, (3, 2))
        for i in range(2):
            for j in range(3):
                self.assertEqual(T.get(j, i), self.A.get(i, j))
        self.assertEqual(self.A.T.transpose(), self.A)


def test_numpy_conversion():
    A = Matrix([[1, 2], [3, 4]])
    a = np.asarray(A)
    assert a.dtype == np.float64
    np.testing.assert_array_equal(a, [[1.0, 2.0], [3.0, 4.0]])
    a[0, 0] = 0.0
    assert A.get(0, 0) == 1.0
    assert A.to_numpy().shape == (2, 2)


def test_equality():
    assert Matrix([[1.0, 2.0]]) == Matrix([[1.0, 2.0]])
    assert Matrix([[1.0, 2.0]]) != Matrix([[1.0], [2.0]])
    assert Matrix([[1.0, 2.0]]) != Matrix([[1.0, 2.5]])


def test_copy_constructor():
    A = Matrix([[1.0, 2.0]])
    B = Matrix(A)
    B.set(0, 0, 9.0)
    assert A.get(0, 0) == 1.0


def test_not_a_nested_sequence():
    with pytest.raises(ShapeError):
        Matrix([1.0, 2.0])

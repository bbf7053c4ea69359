# gpmusic/core/matrix.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Dense two-dimensional matrix value type.

`Matrix` is the container exchanged at the public seams of the
package (kernel matrices, Cholesky factors). It owns a float64 numpy
array in row-major order; every accessor returns copies so that two
holders never alias the same storage.
"""
from numbers import Integral

import gpmusic.num as gnp
from gpmusic.errors import MatrixIndexError, ShapeError


class Matrix:
    """Dense matrix of doubles with bounds-checked access.

    Parameters
    ----------
    data : int or nested sequence
        Either the number of rows (then `columns` is required and the
        matrix is filled with zeros) or a nested sequence of rows,
        which is copied.
    columns : int, optional
        Number of columns when `data` is a row count.

    Examples
    --------
    >>> from gpmusic.core import Matrix
    >>> A = Matrix.from_2d_array([[4.0, 2.0], [2.0, 3.0]])
    >>> A.get(0, 1)
    2.0
    >>> A.transpose().shape
    (2, 2)
    """

    __slots__ = ("_data",)

    def __init__(self, data, columns=None):
        if isinstance(data, Matrix):
            self._data = data._data.copy()
        elif isinstance(data, Integral):
            if columns is None:
                raise ShapeError(
                    "columns is required when creating a matrix from dimensions"
                )
            if data < 0 or columns < 0:
                raise ShapeError(f"invalid matrix dimensions ({data}, {columns})")
            self._data = gnp.zeros((data, columns))
        else:
            self._data = _rows_to_array(data)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def zeros(cls, rows, columns):
        return cls(int(rows), int(columns))

    @classmethod
    def from_2d_array(cls, data):
        """Build a matrix sized to the outer and inner lengths of `data`.

        Raises
        ------
        ShapeError
            If the rows do not all have the same length.
        """
        return cls(data)

    @classmethod
    def _wrap(cls, a):
        # takes ownership of a 2D float64 array, no copy
        m = cls.__new__(cls)
        m._data = a
        return m

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self):
        return self._data.shape[0]

    @property
    def columns(self):
        return self._data.shape[1]

    @property
    def shape(self):
        return (self.rows, self.columns)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _check_row(self, row):
        if not (isinstance(row, Integral) and 0 <= row < self.rows):
            raise MatrixIndexError(f"Row index out of bounds: {row}")

    def _check_column(self, column):
        if not (isinstance(column, Integral) and 0 <= column < self.columns):
            raise MatrixIndexError(f"Column index out of bounds: {column}")

    def _check_index(self, row, column):
        if not (
            isinstance(row, Integral)
            and isinstance(column, Integral)
            and 0 <= row < self.rows
            and 0 <= column < self.columns
        ):
            raise MatrixIndexError(f"Index out of bounds: ({row}, {column})")

    def get(self, row, column):
        self._check_index(row, column)
        return float(self._data[row, column])

    def set(self, row, column, value):
        self._check_index(row, column)
        self._data[row, column] = value

    def get_row(self, row):
        self._check_row(row)
        return self._data[row, :].copy()

    def get_column(self, column):
        self._check_column(column)
        return self._data[:, column].copy()

    # ------------------------------------------------------------------
    # Copies and conversions
    # ------------------------------------------------------------------
    def transpose(self):
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self):
        return self.transpose()

    def clone(self):
        return Matrix._wrap(self._data.copy())

    def to_list(self):
        return self._data.tolist()

    def to_numpy(self):
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(gnp.all(self._data == other._data))

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.to_list()!r})"

    def __str__(self):
        return f"<Matrix {self.rows}x{self.columns}>\n{self._data}"


def _rows_to_array(data):
    try:
        rows = [list(row) for row in data]
    except TypeError:
        raise ShapeError("expected a nested sequence of rows") from None
    if not rows:
        return gnp.zeros((0, 0))
    ncols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != ncols:
            raise ShapeError(
                f"Inconsistent row lengths: row 0 has {ncols} entries, row {i} has {len(row)}"
            )
    return gnp.array(rows, dtype=gnp.float64).reshape(len(rows), ncols)

# gpmusic/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Linear-algebra utilities shared across gpmusic.core modules.

Cholesky factorization of symmetric positive-definite matrices and the
triangular solves built on it. The regressor never forms an explicit
inverse: every product with K^{-1} goes through a forward substitution
followed by a back substitution.
"""
from math import sqrt

import gpmusic.num as gnp
from gpmusic.config import get_logger
from gpmusic.errors import NotPositiveDefiniteError, ShapeError
from .matrix import Matrix

_logger = get_logger()


def cholesky(A):
    """Cholesky factor of a symmetric positive-definite matrix.

    Parameters
    ----------
    A : Matrix or array_like, shape (n, n)
        Matrix believed to be SPD. Only its lower triangle is read.

    Returns
    -------
    L : Matrix or ndarray, shape (n, n)
        Lower-triangular factor with L Lᵀ = A. A `Matrix` is returned
        when `A` is a `Matrix`, an ndarray otherwise.

    Raises
    ------
    ShapeError
        If `A` is not square.
    NotPositiveDefiniteError
        If a pivot is not strictly positive (or is NaN).

    Notes
    -----
    Column-by-column elimination without pivoting. At step j,

    .. math::
        L_{jj} = \\sqrt{A_{jj} - \\sum_{k<j} L_{jk}^2}, \\qquad
        L_{ij} = (A_{ij} - \\sum_{k<j} L_{ik} L_{jk}) / L_{jj}, \\; i > j.

    Covariance matrices with a positive nugget on the diagonal are SPD
    in exact arithmetic; the caller provides that nugget.
    """
    if isinstance(A, Matrix):
        return Matrix._wrap(_cholesky(A.to_numpy()))
    return _cholesky(gnp.asarray(A))


def _cholesky(A):
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ShapeError(
            f"Matrix must be square for Cholesky decomposition, got shape {A.shape}"
        )
    n = A.shape[0]
    L = gnp.zeros((n, n))
    for j in range(n):
        Lj = L[j, :j]
        pivot = A[j, j] - gnp.dot(Lj, Lj)
        if not pivot > 0.0:
            _logger.debug("Cholesky pivot %d is %r", j, pivot)
            raise NotPositiveDefiniteError(
                f"Matrix is not positive definite at position ({j}, {j})", index=j
            )
        d = sqrt(pivot)
        L[j, j] = d
        if j + 1 < n:
            L[j + 1 :, j] = (A[j + 1 :, j] - gnp.matmul(L[j + 1 :, :j], Lj)) / d
    return L


def _as_factor(L):
    if isinstance(L, Matrix):
        return L.to_numpy()
    return gnp.asarray(L)


def _check_rhs(L, b):
    if b.shape[0] != L.shape[0]:
        raise ShapeError(
            f"Right-hand side has {b.shape[0]} rows, expected {L.shape[0]}"
        )


def forward_substitution(L, b):
    """Solve L x = b for lower-triangular L.

    Parameters
    ----------
    L : Matrix or array_like, shape (n, n)
    b : array_like, shape (n,) or (n, m)

    Returns
    -------
    x : ndarray, same shape as b
    """
    L = _as_factor(L)
    b = gnp.asarray(b)
    _check_rhs(L, b)
    return gnp.solve_triangular(L, b, lower=True, check_finite=False)


def back_substitution(L, b):
    """Solve Lᵀ x = b for lower-triangular L."""
    L = _as_factor(L)
    b = gnp.asarray(b)
    _check_rhs(L, b)
    return gnp.solve_triangular(L, b, lower=True, trans="T", check_finite=False)


def cholesky_solve(A, b):
    """Solve A x = b for SPD A.

    Returns
    -------
    x : ndarray
        Solution.
    L : ndarray
        Cholesky factor of A, for reuse by the caller.
    """
    L = cholesky(gnp.asarray(A))
    y = forward_substitution(L, b)
    x = back_substitution(L, y)
    return x, L


def log_det_from_chol(L):
    """Return log det(A) = 2 Σ log diag(L) from a Cholesky factor L of A."""
    L = _as_factor(L)
    return 2.0 * gnp.to_scalar(gnp.sum(gnp.log(gnp.diag(L))))


def add_to_diagonal(A, value):
    """Return a copy of the square array A with `value` added to its diagonal."""
    A = gnp.array(A)
    n = A.shape[0]
    A[range(n), range(n)] += value
    return A

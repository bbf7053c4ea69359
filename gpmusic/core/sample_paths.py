# gpmusic/core/sample_paths.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Sampling routines for Gaussian vectors and Gaussian Process paths.

This module provides:
- Standard normal draws from an explicit random source.
- Draws from N(mean, cov) through a square root of cov.
- Unconditional sampling of zero-mean GP paths on a grid `xt`.

Every entry point takes an `rng` argument: None (package generator,
see `gpmusic.config.set_seed`), an int seed, or a
`numpy.random.Generator`.
"""
from numbers import Integral

import gpmusic.num as gnp
from gpmusic.errors import ShapeError
from .linalg import add_to_diagonal, cholesky
from .utils import check_nonnegative, check_positive_int


def standard_normal(shape, rng=None):
    """Independent N(0, 1) draws.

    Parameters
    ----------
    shape : int or tuple of int
    rng : None, int or numpy.random.Generator

    Returns
    -------
    ndarray of the given shape
    """
    if isinstance(shape, Integral):
        shape = (shape,)
    return gnp.randn(*shape, rng=rng)


def sample_multivariate_normal(
    mean, cov, n_samples=1, rng=None, jitter=0.0, method: str = "chol"
):
    """Draws ``n_samples`` vectors from N(mean, cov).

    Parameters
    ----------
    mean : array_like, shape (d,) or scalar
        Mean vector. A scalar is broadcast to all coordinates.
    cov : Matrix or array_like, shape (d, d)
        Symmetric positive-definite (or semi-definite, see `method`)
        covariance matrix.
    n_samples : int, optional (default: 1)
    rng : None, int or numpy.random.Generator
        Random source for the standard normal draws.
    jitter : float, optional (default: 0.0)
        Added to the diagonal of `cov` before factorization.
    method : {'chol', 'eigh'}, optional (default: 'chol')
        Square root of the covariance used to correlate the draws.

    Returns
    -------
    ndarray, shape (n_samples, d)
        One sample per row.

    Raises
    ------
    ShapeError
        If `cov` is not square or `mean` has the wrong length.
    NotPositiveDefiniteError
        With method 'chol', if `cov + jitter I` cannot be factored.

    Notes
    -----
    - 'chol': cov = L Lᵀ, sample = mean + L z with z ~ N(0, I), so that
      Cov(L z) = L Lᵀ = cov.
    - 'eigh': cov = U diag(s) Uᵀ, negative eigenvalues (round-off on a
      PSD matrix) clipped to 0, sample = mean + U sqrt(diag(s)) z.
    """
    n_samples = check_positive_int(n_samples, "n_samples")
    jitter = check_nonnegative(jitter, "jitter")
    cov = gnp.array(cov)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise ShapeError(f"cov must be a square 2D matrix, got shape {cov.shape}")
    d = cov.shape[0]
    mean = gnp.array(mean)
    if mean.ndim == 0:
        mean = gnp.full((d,), mean)
    mean = mean.reshape(-1)
    if mean.shape[0] != d:
        raise ShapeError(f"mean has length {mean.shape[0]}, expected {d}")

    if jitter > 0.0:
        cov = add_to_diagonal(cov, jitter)

    if method == "chol":
        C = cholesky(cov)
    elif method == "eigh":
        s, U = gnp.eigh(cov)
        C = U * gnp.sqrt(gnp.maximum(s, 0.0))
    else:
        raise ValueError("method must be 'chol' or 'eigh'")

    z = standard_normal((d, n_samples), rng=rng)
    return mean + gnp.matmul(C, z).T


def sample_paths(kernel, xt, nb_paths, rng=None, jitter=0.0, method: str = "chol"):
    """Generates ``nb_paths`` sample paths on ``xt`` from the zero-mean GP
    model GP(0, k), where k is ``kernel``.

    Parameters
    ----------
    kernel : gpmusic.kernel.Kernel
    xt : array_like, shape (nt, d) or (nt,)
        Input points where the sample paths are generated.
    nb_paths : int
        Number of sample paths to generate.
    rng : None, int or numpy.random.Generator
    jitter : float, optional (default: 0.0)
        Nugget added to K(xt, xt). Smooth kernels on dense grids are
        numerically singular and need a small positive value.
    method : {'chol', 'eigh'}, optional (default: 'chol')

    Returns
    -------
    ndarray, shape (nb_paths, nt)
    """
    K = kernel.covariance(xt)
    return sample_multivariate_normal(
        0.0, K, n_samples=nb_paths, rng=rng, jitter=jitter, method=method
    )

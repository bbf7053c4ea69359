# gpmusic/core/likelihood.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Log marginal likelihood of zero-mean GP models.

`log_marginal_likelihood_from_chol` is used by a fitted regressor,
which already holds the Cholesky factor and K^{-1} zi.
`negative_log_likelihood` evaluates caller-supplied kernel parameters
on data from scratch, so that candidate kernels can be compared
without building regressors.
"""
from math import log, pi

import gpmusic.num as gnp
from gpmusic.errors import NotPositiveDefiniteError
from .linalg import add_to_diagonal, cholesky_solve, log_det_from_chol
from .utils import check_nonnegative, ensure_shapes_and_type


def log_marginal_likelihood_from_chol(C, zi, Kinv_zi):
    """Log marginal likelihood from a factored covariance.

    .. math::
        \\log p(z) = -\\frac{1}{2} z^T K^{-1} z - \\sum_i \\log C_{ii}
                     - \\frac{n}{2} \\log 2\\pi

    Parameters
    ----------
    C : ndarray, shape (n, n)
        Lower Cholesky factor of K.
    zi : ndarray, shape (n,)
        Observed values.
    Kinv_zi : ndarray, shape (n,)
        K^{-1} zi.

    Returns
    -------
    float
    """
    n = zi.shape[0]
    norm2 = gnp.to_scalar(gnp.dot(zi, Kinv_zi))
    return -0.5 * norm2 - 0.5 * log_det_from_chol(C) - 0.5 * n * log(2.0 * pi)


def negative_log_likelihood(kernel, alpha, xi, zi):
    """Negative log marginal likelihood of a zero-mean GP with covariance
    kernel(xi, xi) + alpha I.

    Parameters
    ----------
    kernel : gpmusic.kernel.Kernel
        Covariance function with the parameters to evaluate.
    alpha : float
        Nugget added to the diagonal.
    xi : array_like, shape (n, d) or (n,)
        Observation points.
    zi : array_like, shape (n,)
        Observed values.

    Returns
    -------
    nll : float
        Negative log-likelihood, or +inf if the covariance matrix is
        not numerically positive definite.
    """
    alpha = check_nonnegative(alpha, "alpha")
    xi, zi, _ = ensure_shapes_and_type(xi=xi, zi=zi)
    K = add_to_diagonal(kernel.covariance(xi), alpha)
    try:
        Kinv_zi, C = cholesky_solve(K, zi)
    except NotPositiveDefiniteError:
        return gnp.inf
    return -log_marginal_likelihood_from_chol(C, zi, Kinv_zi)

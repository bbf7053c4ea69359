# gpmusic/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior mean and posterior (co)variance computations.

These routines are used by `gpmusic.core.GaussianProcessRegressor`
once the training covariance K = C Cᵀ has been factored and
K^{-1} zi is available.

Functions
---------
posterior_mean(Kit, Kinv_zi)
    Posterior mean Kitᵀ K^{-1} zi at the prediction points.

posterior_variance(kernel, xt, C, Kit, return_type=0)
    Posterior variances (return_type=0) or full covariance
    (return_type=1) at the prediction points.
"""
import gpmusic.num as gnp
from .linalg import forward_substitution


def posterior_mean(Kit, Kinv_zi):
    """Posterior mean at the prediction points.

    Parameters
    ----------
    Kit : array_like, shape (n, m)
        Cross-covariance K(xi, xt).
    Kinv_zi : array_like, shape (n,)
        K^{-1} zi.

    Returns
    -------
    zt_posterior_mean : ndarray, shape (m,)
    """
    return gnp.einsum("i..., i...", Kit, Kinv_zi)


def posterior_variance(kernel, xt, C, Kit, return_type=0):
    """Compute posterior variance based on return type.

    Parameters
    ----------
    kernel : gpmusic.kernel.Kernel
    xt : ndarray, shape (m, d)
        Prediction points.
    C : ndarray, shape (n, n)
        Lower Cholesky factor of K(xi, xi) + alpha I.
    Kit : ndarray, shape (n, m)
        Cross-covariance K(xi, xt).
    return_type : int
        -1: None, 0: marginal variances (default), 1: full covariance.

    Returns
    -------
    posterior variance (m,) or covariance matrix (m, m).

    Notes
    -----
    With V = C^{-1} Kit (forward substitution, one column per
    prediction point), Kitᵀ K^{-1} Kit = Vᵀ V. The variances are
    diag(K(xt, xt)) minus the column-wise sums of squares of V. They
    are returned unclamped; negative values are round-off and are
    handled by the caller.
    """
    if return_type == -1:
        return None
    V = forward_substitution(C, Kit)
    if return_type == 0:
        zt_prior_variance = kernel.diagonal(xt)
        return zt_prior_variance - gnp.sum(V * V, axis=0)
    elif return_type == 1:
        zt_prior_covariance = kernel.covariance(xt)
        zt_posterior_covariance = zt_prior_covariance - gnp.matmul(V.T, V)
        # Vᵀ V is symmetric in exact arithmetic only
        return 0.5 * (zt_posterior_covariance + zt_posterior_covariance.T)
    else:
        raise ValueError("return_type must be in {-1, 0, 1}")

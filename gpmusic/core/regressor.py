# gpmusic/core/regressor.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process regressor.
"""
import warnings
from typing import NamedTuple, Optional

import gpmusic.num as gnp
from gpmusic.config import get_config, get_logger
from gpmusic.errors import NotFittedError, NotPositiveDefiniteError
from gpmusic.kernel.base import Kernel

from . import kriging
from . import likelihood
from .sample_paths import sample_multivariate_normal
from . import utils
from .linalg import add_to_diagonal, back_substitution, cholesky, forward_substitution

_logger = get_logger()


class PredictionResult(NamedTuple):
    """Posterior mean and, when requested, posterior standard deviation."""

    mean: gnp.ndarray
    std: Optional[gnp.ndarray] = None


class GaussianProcessRegressor:
    """Zero-mean Gaussian Process (GP) regressor with a fixed kernel.

    The regressor goes from an unfitted to a fitted state with `fit`;
    fitting again replaces the training data. Every other operation
    reads the fitted state and raises `NotFittedError` before the first
    successful `fit`.

    Attributes
    ----------
    kernel : gpmusic.kernel.Kernel
        Covariance function of the GP prior.
    alpha : float
        Value added to the diagonal of the training covariance
        matrix. It models observation noise and keeps the matrix
        numerically positive definite.
    xi : ndarray, shape (n, d) or None
        Training inputs.
    zi : ndarray, shape (n,) or None
        Training targets.
    C : ndarray, shape (n, n) or None
        Lower Cholesky factor of K(xi, xi) + alpha I.
    Kinv_zi : ndarray, shape (n,) or None
        (K(xi, xi) + alpha I)^{-1} zi.

    Methods
    -------
    fit
        Factor the training covariance and solve for K^{-1} zi.
    predict
        Posterior mean and optionally standard deviation.
    posterior_covariance
        Full posterior covariance matrix.
    sample_y
        Correlated draws from the posterior.
    log_marginal_likelihood
        Log evidence of the training data.

    Examples
    --------
    >>> import gpmusic as gm
    >>> gp = gm.GaussianProcessRegressor(gm.kernel.RBF(1.0, 1.0), alpha=1e-6)
    >>> gp = gp.fit([[0], [1], [2], [3], [4]], [60, 62, 64, 65, 67])
    >>> mean, std = gp.predict([[2.5]], return_std=True)
    >>> melodies = gp.sample_y([0.5, 1.5, 2.5, 3.5], n_samples=3, rng=42)
    """

    def __init__(self, kernel, alpha=None):
        """
        Parameters
        ----------
        kernel : gpmusic.kernel.Kernel
            Covariance function.
        alpha : float, optional
            Nugget on the diagonal of the training covariance. Defaults
            to `gpmusic.config.get_config().alpha`.
        """
        if not isinstance(kernel, Kernel):
            raise TypeError(
                f"kernel must be a gpmusic.kernel.Kernel, got {type(kernel).__name__}"
            )
        if alpha is None:
            alpha = get_config().alpha
        self._kernel = kernel
        self._alpha = utils.check_nonnegative(alpha, "alpha")
        self.xi = None
        self.zi = None
        self.C = None
        self.Kinv_zi = None

    @property
    def kernel(self):
        return self._kernel

    @property
    def alpha(self):
        return self._alpha

    @property
    def is_fitted(self):
        return self.C is not None

    def __repr__(self):
        output = str("<gpmusic.core.GaussianProcessRegressor object> " + hex(id(self)))
        return output

    def __str__(self):
        n = "not fitted" if not self.is_fitted else f"{self.xi.shape[0]} points"
        return (
            f"GP Regressor:\n"
            f"  Kernel: {self.kernel!r}\n"
            f"  Alpha: {self.alpha}\n"
            f"  Training data: {n}"
        )

    def _check_fitted(self, what):
        if not self.is_fitted:
            raise NotFittedError(f"Model must be fitted before {what}")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fit(self, X, y):
        """Condition the GP on training data.

        Parameters
        ----------
        X : array_like, shape (n, d) or (n,)
            Training inputs. A 1D sequence is read as n one-dimensional
            points.
        y : array_like, shape (n,) or (n, 1)
            Training targets.

        Returns
        -------
        self

        Raises
        ------
        ShapeError
            If X or y is empty or their lengths differ.
        NotPositiveDefiniteError
            If K(X, X) + alpha I cannot be factored. The previous
            fitted state, if any, is left unchanged.

        Notes
        -----
        K^{-1} y is obtained by solving C u = y (forward substitution)
        then Cᵀ K^{-1} y = u (back substitution); K^{-1} is never formed.
        """
        xi, zi, _ = utils.ensure_shapes_and_type(xi=X, zi=y)
        K = add_to_diagonal(self.kernel.covariance(xi), self.alpha)
        try:
            C = cholesky(K)
        except NotPositiveDefiniteError as exc:
            _logger.warning(
                "Cholesky factorization failed on %d training points with alpha=%g",
                xi.shape[0],
                self.alpha,
            )
            raise NotPositiveDefiniteError(
                f"Failed to compute Cholesky decomposition: {exc}. "
                "Consider using a larger alpha.",
                index=exc.index,
            ) from exc
        Kinv_zi = back_substitution(C, forward_substitution(C, zi))

        # commit the new state only once everything has succeeded
        self.xi, self.zi, self.C, self.Kinv_zi = xi, zi, C, Kinv_zi
        _logger.debug(
            "Fitted GP on %d points in dimension %d (alpha=%g)",
            xi.shape[0],
            xi.shape[1],
            self.alpha,
        )
        return self

    def predict(self, X, return_std=False, zero_neg_variances=True):
        """Posterior mean (and standard deviation) at new points.

        Parameters
        ----------
        X : array_like, shape (m, d) or (m,)
            Prediction points.
        return_std : bool, optional
            Whether to compute the posterior standard deviation, by
            default False.
        zero_neg_variances : bool, optional
            Whether to replace negative posterior variances with zeros
            before taking square roots, by default True. Negative
            variances can only come from round-off; with False they
            propagate as NaN in `std`.

        Returns
        -------
        PredictionResult
            ``mean`` of shape (m,) and ``std`` of shape (m,) or None.
        """
        self._check_fitted("prediction")
        _, _, xt = utils.ensure_shapes_and_type(xi=self.xi, xt=X)
        Kit = self.kernel.covariance(self.xi, xt)
        zt_posterior_mean = kriging.posterior_mean(Kit, self.Kinv_zi)
        if not return_std:
            return PredictionResult(zt_posterior_mean)

        zt_posterior_variance = kriging.posterior_variance(
            self.kernel, xt, self.C, Kit, return_type=0
        )
        zt_posterior_variance = self._check_variances(
            zt_posterior_variance, zero_neg_variances
        )
        return PredictionResult(zt_posterior_mean, gnp.sqrt(zt_posterior_variance))

    def posterior_covariance(self, X):
        """Full posterior covariance matrix at new points.

        Parameters
        ----------
        X : array_like, shape (m, d) or (m,)

        Returns
        -------
        ndarray, shape (m, m)
            K(X, X) - K(xi, X)ᵀ K^{-1} K(xi, X).
        """
        self._check_fitted("computing the posterior covariance")
        _, _, xt = utils.ensure_shapes_and_type(xi=self.xi, xt=X)
        Kit = self.kernel.covariance(self.xi, xt)
        return kriging.posterior_variance(self.kernel, xt, self.C, Kit, return_type=1)

    def sample_y(self, X, n_samples=1, rng=None, method="chol"):
        """Draw correlated samples from the posterior at new points.

        Parameters
        ----------
        X : array_like, shape (m, d) or (m,)
        n_samples : int, optional
            Number of independent samples, by default 1.
        rng : None, int or numpy.random.Generator
            Random source. Pass a seed or a generator for reproducible
            draws.
        method : {'chol', 'eigh'}, optional
            Square root of the posterior covariance, by default 'chol'.
            `alpha` is added to its diagonal in both cases.

        Returns
        -------
        ndarray, shape (n_samples, m)
            One sample per row.
        """
        self._check_fitted("sampling")
        n_samples = utils.check_positive_int(n_samples, "n_samples")
        _, _, xt = utils.ensure_shapes_and_type(xi=self.xi, xt=X)
        Kit = self.kernel.covariance(self.xi, xt)
        zt_posterior_mean = kriging.posterior_mean(Kit, self.Kinv_zi)
        zt_posterior_covariance = kriging.posterior_variance(
            self.kernel, xt, self.C, Kit, return_type=1
        )
        return sample_multivariate_normal(
            zt_posterior_mean,
            zt_posterior_covariance,
            n_samples=n_samples,
            rng=rng,
            jitter=self.alpha,
            method=method,
        )

    def log_marginal_likelihood(self):
        """Log marginal likelihood of the training targets.

        Returns
        -------
        float
            -½ ziᵀ K^{-1} zi - Σ log diag(C) - (n/2) log 2π
        """
        self._check_fitted("computing log marginal likelihood")
        return likelihood.log_marginal_likelihood_from_chol(self.C, self.zi, self.Kinv_zi)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _check_variances(self, zt_posterior_variance, zero_neg_variances):
        negative = zt_posterior_variance < 0.0
        if gnp.any(negative):
            worst = gnp.to_scalar(gnp.min(zt_posterior_variance))
            _logger.debug(
                "%d negative posterior variance(s), min %g",
                int(gnp.sum(negative)),
                worst,
            )
            # round-off on a variance of size ~prior variance is O(sqrt(eps))
            tol = gnp.sqrt(gnp.eps) * max(self.kernel.variance, gnp.eps)
            if worst < -tol:
                warnings.warn(
                    "Negative variances detected. Consider using jitter.",
                    RuntimeWarning,
                )
        if zero_neg_variances:
            zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
        return zt_posterior_variance

# gpmusic/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpmusic package.

This subpackage contains the numerical routines for Gaussian Process
regression: the dense `Matrix` type, Cholesky factorization and
triangular solves, posterior mean/variance computations, likelihood
evaluation and Gaussian sampling.

Public API
----------
GaussianProcessRegressor : class
    Fit / predict / sample / evaluate a GP with a fixed kernel.
PredictionResult : namedtuple
    (mean, std) returned by `GaussianProcessRegressor.predict`.
Matrix : class
    Dense matrix value type.
cholesky, forward_substitution, back_substitution, cholesky_solve
    Linear algebra on SPD matrices.
sample_multivariate_normal, sample_paths, standard_normal
    Gaussian sampling with an explicit random source.
negative_log_likelihood
    Evaluate caller-supplied kernel parameters on data.
"""

from .matrix import Matrix
from .linalg import cholesky, forward_substitution, back_substitution, cholesky_solve
from .sample_paths import sample_multivariate_normal, sample_paths, standard_normal
from .likelihood import negative_log_likelihood
from .regressor import GaussianProcessRegressor, PredictionResult

__all__ = [
    "Matrix",
    "cholesky",
    "forward_substitution",
    "back_substitution",
    "cholesky_solve",
    "sample_multivariate_normal",
    "sample_paths",
    "standard_normal",
    "negative_log_likelihood",
    "GaussianProcessRegressor",
    "PredictionResult",
]

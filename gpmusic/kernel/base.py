# gpmusic/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Abstract stationary covariance function.

A concrete kernel only provides `_evaluate`, which maps an array of
squared Euclidean distances to covariance values. `compute`, `call`
and `diagonal` are built on top of it.
"""
from abc import ABC, abstractmethod
from math import isfinite

import gpmusic.num as gnp
from gpmusic.core.matrix import Matrix
from gpmusic.core.utils import ensure_2d
from gpmusic.errors import KernelParameterError, ShapeError


class Kernel(ABC):
    """Base class of the closed kernel family {RBF, RationalQuadratic, Periodic}.

    Parameters are fixed at construction and exposed read-only. Kernels
    are pure: evaluating them has no side effect.
    """

    def __init__(self, length_scale=1.0, variance=1.0):
        self._length_scale = _check_param("length_scale", length_scale, strict=True)
        self._variance = _check_param("variance", variance, strict=False)

    @property
    def length_scale(self):
        return self._length_scale

    @property
    def variance(self):
        return self._variance

    @abstractmethod
    def _evaluate(self, sqdist):
        """Covariance as a function of squared distances (array in, array out)."""

    @abstractmethod
    def parameters(self):
        """Return the kernel parameters as a dict of floats."""

    # ------------------------------------------------------------------
    def compute(self, x1, x2):
        """Covariance k(x1, x2) between two feature vectors."""
        x1 = gnp.asarray(x1).reshape(-1)
        x2 = gnp.asarray(x2).reshape(-1)
        if x1.shape != x2.shape:
            raise ShapeError(
                f"Feature vectors have different lengths: {x1.shape[0]} and {x2.shape[0]}"
            )
        d = x1 - x2
        return gnp.to_scalar(self._evaluate(gnp.dot(d, d)))

    def call(self, X1, X2=None):
        """Covariance matrix between two point sets.

        Parameters
        ----------
        X1 : Matrix or array_like, shape (n1, d) or (n1,)
        X2 : Matrix or array_like, shape (n2, d) or (n2,), optional
            If omitted, the (n1, n1) covariance of X1 with itself is
            returned; each off-diagonal pair is evaluated once and
            mirrored, so the result is exactly symmetric.

        Returns
        -------
        Matrix, shape (n1, n2)
        """
        return Matrix._wrap(self.covariance(X1, X2))

    __call__ = call

    def covariance(self, X1, X2=None):
        """Same as `call`, returning an ndarray."""
        X1 = ensure_2d(X1, "X1")
        if X2 is None:
            return self._evaluate(gnp.squared_distance(X1))
        X2 = ensure_2d(X2, "X2")
        if X1.shape[1] != X2.shape[1]:
            raise ShapeError(
                f"X1 and X2 must have the same number of columns, got {X1.shape[1]} and {X2.shape[1]}"
            )
        return self._evaluate(gnp.squared_distance(X1, X2))

    def diagonal(self, X):
        """Values k(x_i, x_i) for the rows of X, shape (n,)."""
        X = ensure_2d(X, "X")
        return self._evaluate(gnp.zeros((X.shape[0],)))

    def with_parameters(self, **changes):
        """Return a new kernel of the same kind with some parameters replaced."""
        params = self.parameters()
        unknown = set(changes) - set(params)
        if unknown:
            raise KernelParameterError(
                f"Unknown parameter(s) for {type(self).__name__}: {sorted(unknown)}"
            )
        params.update(changes)
        return type(self)(**params)

    # ------------------------------------------------------------------
    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.parameters() == other.parameters()

    def __hash__(self):
        return hash((type(self).__name__, tuple(sorted(self.parameters().items()))))

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters().items())
        return f"{type(self).__name__}({args})"


def _check_param(name, value, strict):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise KernelParameterError(f"{name} must be a number, got {value!r}") from None
    ok = value > 0.0 if strict else value >= 0.0
    if not (ok and isfinite(value)):
        bound = "positive" if strict else "nonnegative"
        raise KernelParameterError(f"{name} must be finite and {bound}, got {value}")
    return value

# gpmusic/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpmusic.core` modules.

This file hosts:
- Promotion of point sets to 2D arrays
- Shape/type validation & conversion helpers for (xi, zi, xt)
- Scalar parameter validation
"""
from numbers import Integral

import gpmusic.num as gnp
from gpmusic.errors import ParameterError, ShapeError
from .matrix import Matrix


def ensure_2d(x, name="x"):
    """Return the point set `x` as a float (n, d) array.

    A 1D sequence of n numbers is read as n one-dimensional points,
    i.e. promoted to a single column. A `Matrix` is read row by row.
    """
    if isinstance(x, Matrix):
        return x.to_numpy()
    try:
        x = gnp.asarray(x)
    except ValueError as exc:
        raise ShapeError(f"{name} is not a rectangular array: {exc}") from exc
    if x.ndim == 0:
        raise ShapeError(f"{name} should be a sequence of points, got a scalar")
    if x.ndim == 1:
        return x.reshape(-1, 1)
    if x.ndim != 2:
        raise ShapeError(f"{name} should be a 1D or 2D array, got {x.ndim} dimensions")
    return x


def ensure_shapes_and_type(*, xi=None, zi=None, xt=None):
    """Validate and adjust shapes/types of input arrays.

    Parameters
    ----------
    xi : array_like, optional
        Observation points (n, d) or (n,).
    zi : array_like, optional
        Observed values (n,) or (n, 1).
    xt : array_like, optional
        Prediction points (m, d) or (m,).

    Returns
    -------
    tuple
        (xi, zi, xt) with proper shapes and types.

    Notes
    -----
    - Point sets are promoted with `ensure_2d`.
    - If `zi` is provided as a 2D column (n,1), it is reshaped to (n,).
    - Checks enforced (raising `ShapeError`):
        * xi and zi are not empty
        * xi.shape[0] == zi.shape[0] (when both given)
        * xi.shape[1] == xt.shape[1] (when both given)
    """
    if xi is not None:
        xi = ensure_2d(xi, "xi")
        if xi.shape[0] == 0:
            raise ShapeError("xi should contain at least one point")

    if zi is not None:
        zi = gnp.asarray(zi)
        if zi.ndim == 2:
            if zi.shape[1] != 1:
                raise ShapeError("zi should only have one column if it's a 2D array")
            zi = zi.reshape(-1)  # (n,1) -> (n,)
        elif zi.ndim != 1:
            raise ShapeError("zi should be 1D or a 2D column array")
        if zi.shape[0] == 0:
            raise ShapeError("zi should contain at least one value")

    if xt is not None:
        xt = ensure_2d(xt, "xt")

    if xi is not None and zi is not None and xi.shape[0] != zi.shape[0]:
        raise ShapeError(
            f"xi and zi must have the same number of rows, got {xi.shape[0]} and {zi.shape[0]}"
        )
    if xi is not None and xt is not None and xi.shape[1] != xt.shape[1]:
        raise ShapeError(
            f"xi and xt must have the same number of columns, got {xi.shape[1]} and {xt.shape[1]}"
        )

    return xi, zi, xt


def check_nonnegative(value, name):
    """Return `value` as a float, raising `ParameterError` unless finite and >= 0."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ParameterError(f"{name} must be a number, got {value!r}") from None
    if not (gnp.isfinite(value) and value >= 0.0):
        raise ParameterError(f"{name} must be finite and nonnegative, got {value}")
    return value


def check_positive_int(value, name):
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise ParameterError(f"{name} must be a positive integer, got {value!r}")
    return int(value)

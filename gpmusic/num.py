# gpmusic/num.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical layer for gpmusic.

Everything numerical in the package goes through this module, imported
as ``gnp``. It re-exports the numpy/scipy functions that are used and
owns the package random generator.
"""

from typing import Any, Optional, Union

import numpy
from numpy.typing import NDArray

from gpmusic.config import get_config, get_logger

Scalar = Union[int, float]
ArrayLike = Any
RngLike = Union[None, int, numpy.random.Generator]

_config = get_config()
_logger = get_logger()

# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

_logger.debug("Using numpy %s", numpy.__version__)
_np_dtype = numpy.float64

ndarray = NDArray[numpy.floating]
from numpy import (
    any,
    isfinite,
    diag,
    arange,
    sqrt,
    exp,
    log,
    sin,
    sum,
    min,
    maximum,
    einsum,
    matmul,
    dot,
    all,
)
from numpy import pi, inf
from numpy import finfo, float64
from scipy.linalg import solve_triangular, eigh
from scipy.spatial.distance import cdist, pdist, squareform
from scipy.stats import norm as normal

# ..................................................

eps = finfo(_np_dtype).eps

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.number):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if x.dtype != _np_dtype and numpy.issubdtype(x.dtype, numpy.number):
            return x.astype(_np_dtype)
        return x
    elif isinstance(x, (int, float)):
        return numpy.array([x], dtype=_np_dtype)
    else:
        out = numpy.asarray(x)
        if numpy.issubdtype(out.dtype, numpy.number):
            return out.astype(_np_dtype, copy=False)
        return out

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )

def to_scalar(x):
    return numpy.asarray(x).item()

# ..................................................

def squared_distance(x: ArrayLike, y: Optional[ArrayLike] = None) -> ArrayLike:
    """Squared Euclidean distances between the rows of x and y.

    With ``y`` None, each pair is evaluated once (``pdist``) and
    mirrored, so the result is exactly symmetric with a zero diagonal.
    """
    if y is None:
        return squareform(pdist(x, "sqeuclidean"))
    return cdist(x, y, "sqeuclidean")

# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)

def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _np_rng = numpy.random.default_rng(seed=seed)

def get_rng(rng: RngLike = None) -> numpy.random.Generator:
    """Resolve a random source.

    Parameters
    ----------
    rng : None, int or numpy.random.Generator
        None selects the package generator (see ``set_seed``), an int
        seeds a fresh generator, a Generator is used as is.
    """
    if rng is None:
        return _np_rng
    if isinstance(rng, numpy.random.Generator):
        return rng
    if isinstance(rng, (int, numpy.integer)) and not isinstance(rng, bool):
        return numpy.random.default_rng(seed=int(rng))
    raise TypeError(
        f"rng must be None, an int seed or a numpy.random.Generator, got {type(rng).__name__}"
    )

def randn(*shape: int, rng: RngLike = None) -> ArrayLike:
    return get_rng(rng).standard_normal(size=shape).astype(_np_dtype, copy=False)

def norminv(p: ArrayLike) -> ArrayLike:
    return normal.ppf(p)

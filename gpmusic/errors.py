# gpmusic/errors.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Exceptions raised by gpmusic.

Shape errors, numerical errors and precondition errors are distinct
classes so that callers can tell bad input from bad conditioning.
Each class also derives from the builtin (or numpy) exception a caller
would expect, so ``except ValueError`` keeps working.
"""
from numpy.linalg import LinAlgError


class GPMusicError(Exception):
    """Base class for all gpmusic errors."""


class ShapeError(GPMusicError, ValueError):
    """Mismatched lengths, empty inputs or non-square matrices."""


class MatrixIndexError(GPMusicError, IndexError):
    """Element, row or column access outside of a matrix."""


class NotPositiveDefiniteError(GPMusicError, LinAlgError):
    """Cholesky factorization met a non-positive pivot.

    Attributes
    ----------
    index : int or None
        Position of the failing pivot on the diagonal.
    """

    def __init__(self, message, index=None):
        super().__init__(message)
        self.index = index


class NotFittedError(GPMusicError, RuntimeError):
    """A regressor was queried before ``fit`` succeeded."""


class ParameterError(GPMusicError, ValueError):
    """Invalid scalar parameter (noise level, number of samples...)."""


class KernelParameterError(ParameterError):
    """Invalid kernel hyperparameter (length scale, variance...)."""

# gpmusic/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for Gaussian Process (GP) modeling.

Modules
-------
base
    Abstract `Kernel` class (compute, call, diagonal, parameters).
rbf
    Squared-exponential kernel.
rational_quadratic
    Rational quadratic kernel.
periodic
    Exp-sine-squared kernel.

Public API
-----------
- Kernel, RBF, RationalQuadratic, Periodic
"""

from .base import Kernel
from .rbf import RBF
from .rational_quadratic import RationalQuadratic
from .periodic import Periodic

__all__ = [
    "Kernel",
    "RBF",
    "RationalQuadratic",
    "Periodic",
]

# gpmusic/kernel/rational_quadratic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from .base import Kernel, _check_param


class RationalQuadratic(Kernel):
    """Rational quadratic kernel, a scale mixture of RBF kernels.

    .. math::
        k(x, y) = \\sigma^2 \\left(1 + \\frac{\\|x - y\\|^2}{2 \\alpha \\rho^2}\\right)^{-\\alpha}

    Small `alpha` mixes many length scales; as `alpha` grows the kernel
    tends to the RBF kernel with the same length scale.

    Parameters
    ----------
    length_scale : float, > 0
    alpha : float, > 0
        Scale-mixture parameter.
    variance : float, >= 0
    """

    def __init__(self, length_scale=1.0, alpha=1.0, variance=1.0):
        super().__init__(length_scale=length_scale, variance=variance)
        self._alpha = _check_param("alpha", alpha, strict=True)

    @property
    def alpha(self):
        return self._alpha

    def _evaluate(self, sqdist):
        base = 1.0 + sqdist / (2.0 * self.alpha * self.length_scale**2)
        return self.variance * base ** (-self.alpha)

    def parameters(self):
        return {
            "length_scale": self.length_scale,
            "alpha": self.alpha,
            "variance": self.variance,
        }

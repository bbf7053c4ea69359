# gpmusic/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpmusic.num as gnp
from .base import Kernel


class RBF(Kernel):
    """Squared-exponential (radial basis function) kernel.

    .. math::
        k(x, y) = \\sigma^2 \\exp\\left(-\\frac{\\|x - y\\|^2}{2 \\rho^2}\\right)

    Parameters
    ----------
    length_scale : float, > 0
        :math:`\\rho`.
    variance : float, >= 0
        :math:`\\sigma^2`, also k(x, x).
    """

    def __init__(self, length_scale=1.0, variance=1.0):
        super().__init__(length_scale=length_scale, variance=variance)

    def _evaluate(self, sqdist):
        return self.variance * gnp.exp(-0.5 * sqdist / self.length_scale**2)

    def parameters(self):
        return {"length_scale": self.length_scale, "variance": self.variance}

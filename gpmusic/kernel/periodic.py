# gpmusic/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpmusic.num as gnp
from .base import Kernel, _check_param


class Periodic(Kernel):
    """Exp-sine-squared kernel, for repeating patterns (bars, ostinati).

    .. math::
        k(x, y) = \\sigma^2 \\exp\\left(-\\frac{2 \\sin^2(\\pi \\|x - y\\| / p)}{\\rho^2}\\right)

    Parameters
    ----------
    length_scale : float, > 0
    periodicity : float, > 0
        Period :math:`p`, in input units.
    variance : float, >= 0
    """

    def __init__(self, length_scale=1.0, periodicity=1.0, variance=1.0):
        super().__init__(length_scale=length_scale, variance=variance)
        self._periodicity = _check_param("periodicity", periodicity, strict=True)

    @property
    def periodicity(self):
        return self._periodicity

    def _evaluate(self, sqdist):
        s = gnp.sin(gnp.pi * gnp.sqrt(sqdist) / self.periodicity)
        return self.variance * gnp.exp(-2.0 * (s / self.length_scale) ** 2)

    def parameters(self):
        return {
            "length_scale": self.length_scale,
            "periodicity": self.periodicity,
            "variance": self.variance,
        }

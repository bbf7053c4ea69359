# gpmusic/walks.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Kernel-driven random walks.

A walk is one draw of a zero-mean GP with an RBF covariance on the
integer grid 0, 1, ..., length-1. The length scale sets how many steps
it takes for the walk to forget where it was, which makes it a smooth
contour generator for melodies, velocities or filter sweeps.
"""
import gpmusic.num as gnp
from gpmusic.config import get_logger
from gpmusic.core.linalg import add_to_diagonal
from gpmusic.core.sample_paths import sample_multivariate_normal
from gpmusic.core.utils import check_nonnegative, check_positive_int
from gpmusic.kernel import RBF

_logger = get_logger()

# weight of the random walk around existing data
_WALK_AROUND_SCALE = 0.1


class KernelGenerator:
    """Random walk generator driven by an RBF kernel.

    Parameters
    ----------
    data : sequence of float, optional
        Reference sequence used with `walk_around`.
    length_scale : float, optional
        RBF length scale, in steps (default 1.0).
    amplitude : float, optional
        RBF variance (default 1.0).
    noise_level : float, optional
        White noise added to the covariance diagonal (default 0.1).
    walk_around : bool, optional
        If True and `data` is not empty, the first values of a walk are
        small excursions around `data` instead of free values.

    Examples
    --------
    >>> from gpmusic import KernelGenerator
    >>> walk = KernelGenerator(length_scale=4.0).generate(length=32, rng=1)
    >>> walk.shape
    (32,)
    """

    def __init__(
        self,
        data=(),
        length_scale=1.0,
        amplitude=1.0,
        noise_level=0.1,
        walk_around=False,
    ):
        self.data = data
        # validated through the kernel
        self._kernel = RBF(length_scale, amplitude)
        self.noise_level = noise_level
        self.walk_around = bool(walk_around)

    # ------------------------------------------------------------------
    @property
    def data(self):
        return self._data.copy()

    @data.setter
    def data(self, values):
        self._data = gnp.array(values, dtype=gnp.float64).reshape(-1)

    @property
    def length_scale(self):
        return self._kernel.length_scale

    @length_scale.setter
    def length_scale(self, value):
        self._kernel = self._kernel.with_parameters(length_scale=value)

    @property
    def amplitude(self):
        return self._kernel.variance

    @amplitude.setter
    def amplitude(self, value):
        self._kernel = self._kernel.with_parameters(variance=value)

    @property
    def noise_level(self):
        return self._noise_level

    @noise_level.setter
    def noise_level(self, value):
        self._noise_level = check_nonnegative(value, "noise_level")

    def __repr__(self):
        return (
            f"KernelGenerator(length_scale={self.length_scale!r}, "
            f"amplitude={self.amplitude!r}, noise_level={self.noise_level!r}, "
            f"walk_around={self.walk_around!r}, data=<{self._data.shape[0]} values>)"
        )

    # ------------------------------------------------------------------
    def rbf_kernel(self, x1, x2):
        """RBF covariance between two points with the stored parameters."""
        return self._kernel.compute(x1, x2)

    def generate(
        self,
        length=100,
        length_scale=None,
        amplitude=None,
        noise_level=None,
        rng=None,
    ):
        """Draw one walk.

        Parameters
        ----------
        length : int, optional
            Number of steps (default 100).
        length_scale, amplitude, noise_level : float, optional
            Override the stored parameters for this draw only.
        rng : None, int or numpy.random.Generator
            Random source.

        Returns
        -------
        ndarray, shape (length,)
        """
        length = check_positive_int(length, "length")
        kernel = self._kernel
        overrides = {}
        if length_scale is not None:
            overrides["length_scale"] = length_scale
        if amplitude is not None:
            overrides["variance"] = amplitude
        if overrides:
            kernel = kernel.with_parameters(**overrides)
        if noise_level is None:
            noise_level = self.noise_level
        else:
            noise_level = check_nonnegative(noise_level, "noise_level")

        xt = gnp.arange(length, dtype=gnp.float64).reshape(-1, 1)
        K = add_to_diagonal(kernel.covariance(xt), noise_level)
        sample = sample_multivariate_normal(0.0, K, n_samples=1, rng=rng)[0]

        if self.walk_around and self._data.shape[0] > 0:
            m = min(length, self._data.shape[0])
            sample[:m] = self._data[:m] + _WALK_AROUND_SCALE * sample[:m]
        _logger.debug(
            "Generated walk of length %d (%r, noise_level=%g)", length, kernel, noise_level
        )
        return sample

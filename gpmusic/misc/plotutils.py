## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
import numpy as np
import matplotlib.pyplot as plt

import gpmusic.num as gnp

# mean line and coverage bands, lightest band for the widest interval
_MEAN_COLOR = "#F2404C"
_BAND_COLORS = ("#BFBFBF", "#D8D8D8", "#F2F2F2")


class Figure:
    """Figures manager class.

    Thin matplotlib front end for the plain arrays produced by
    `GaussianProcessRegressor.predict` / `sample_y` and by
    `KernelGenerator.generate`. Drawing goes to the current axes,
    selected with `subplot`.
    """

    def __init__(self, nrows=1, ncols=1, boxoff=True, **kargs):
        self.boxoff = boxoff
        self.fig, axes = plt.subplots(nrows, ncols, squeeze=False, **kargs)
        self.axes = list(axes.flat)
        self.subplot(1)

    def subplot(self, i):
        """Make the i-th axes (1-based, row-major) current."""
        self.ax = self.axes[i - 1]
        if self.boxoff:
            self.ax.spines[["right", "top"]].set_visible(False)
            self.ax.tick_params(direction="in")

    def show(self, grid=False, legend=False, **legend_kwargs):
        for ax in self.axes:
            if grid:
                ax.grid(True, linestyle=(0, (1, 5)), linewidth=0.5)
            if legend and ax.get_legend_handles_labels()[0]:
                ax.legend(**legend_kwargs)
        plt.show()

    def close(self):
        plt.close(self.fig)

    # ------------------------------------------------------------------
    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(
            np.ravel(x), np.ravel(z), "rs", markerfacecolor="none", markersize=6, label=label
        )

    def plotsamples(self, x, samples, color="C0", linewidth=0.5, label="samples"):
        """Plot sample paths given one per row, as returned by `sample_y`."""
        x = np.ravel(x)
        for i, s in enumerate(np.atleast_2d(samples)):
            self.ax.plot(x, s, color=color, linewidth=linewidth, label=label if i == 0 else None)

    def plotgp(
        self,
        x,
        mean,
        std,
        colorscheme="default",
        mean_label="posterior mean",
        ci=(0.95, 0.99, 0.999),
        ci_labels=("CI 95%", "CI 99%", "CI 99.9%"),
    ):
        """Posterior mean with coverage intervals mean ± q std.

        q is the normal quantile of (1 + level) / 2, e.g. 1.96 for 95%.
        With colorscheme 'simple', only the first level is drawn.
        """
        if colorscheme == "simple":
            levels = list(zip(ci[:1], ci_labels[:1]))
        elif colorscheme == "default":
            levels = list(zip(ci, ci_labels))
        else:
            raise ValueError("colorscheme must be 'default' or 'simple'")

        x = np.ravel(x)
        mean = np.ravel(mean)
        std = np.ravel(std)

        # widest band first so that narrower ones are drawn on top
        for i, (level, label) in reversed(list(enumerate(levels))):
            q = float(gnp.norminv((1.0 + level) / 2.0))
            self.ax.fill_between(
                x,
                mean - q * std,
                mean + q * std,
                color=_BAND_COLORS[min(i, len(_BAND_COLORS) - 1)],
                linewidth=0.5,
                alpha=0.8,
                label=label,
            )
        self.ax.plot(x, mean, _MEAN_COLOR, linewidth=2.0, label=mean_label)

    # ------------------------------------------------------------------
    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, **kwargs):
        kwargs.setdefault("linestyle", (0, (1, 5)))
        kwargs.setdefault("linewidth", 0.5)
        self.ax.grid(visible, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is not None:
            self.ax.set_xlim(new_limits)
        return self.ax.get_xlim()

    def ylim(self, new_limits=None):
        if new_limits is not None:
            self.ax.set_ylim(new_limits)
        return self.ax.get_ylim()
